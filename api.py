"""
num2english: FastAPI Server
============================

RESTful API for spelling out numbers in English.

Endpoints:
    POST /convert           Convert {"value": "60.212"} to words
    GET  /convert/{value}   Same, with the value in the path
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from num2english import __version__
from num2english.config import Settings, load_settings
from num2english.converter import convert
from num2english.exceptions import NumberToEnglishError
from num2english.models import ConversionResult
from num2english.scales import MAGNITUDES


# ─── Application Lifespan (load settings) ───────────────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read environment settings (and `.env`) once on startup."""
    global _settings  # noqa: PLW0603
    _settings = load_settings()
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="num2english API",
    description=(
        "Spell out integers and decimals of any size in English words, "
        "e.g. 60.212 → \"sixty and two hundred twelve thousandths\"."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: str = Field(
        ...,
        min_length=1,
        description="The number to spell out, as a plain decimal string.",
        json_schema_extra={"example": "60.212"},
    )


class ConvertResponse(ConversionResult):
    """API-facing result (inherits all fields from ConversionResult)."""

    model_config = {"json_schema_extra": {"example": {
        "value": "60.212",
        "words": "sixty and two hundred twelve thousandths",
        "integer": 60,
        "fraction": 212,
        "decimal_places": 3,
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    max_magnitude: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not initialised")
    return _settings


def _convert(value: str) -> ConvertResponse:
    """Run the conversion, mapping failures to HTTP errors."""
    settings = _get_settings()
    if len(value) > settings.max_input_length:
        raise HTTPException(
            status_code=413,
            detail=f"Value too long (max {settings.max_input_length} characters)",
        )

    try:
        result = convert(value)
    except NumberToEnglishError as e:
        raise HTTPException(
            status_code=422,
            detail={"code": e.code, "message": e.message, "details": e.details},
        ) from e

    return ConvertResponse.model_validate(result, from_attributes=True)


_ERROR_RESPONSES: dict = {
    413: {"description": "Value longer than NUM2ENGLISH_MAX_INPUT_LENGTH"},
    422: {"description": "Not a plain decimal number, or too large to name"},
    503: {"description": "Settings not yet initialised"},
}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell out a number",
    tags=["Conversion"],
    responses=_ERROR_RESPONSES,
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Convert a decimal string to English words.

    Returns:
    - **value**: the canonical decimal string that was named
    - **words**: the English name
    - **integer** / **fraction** / **decimal_places**: the split parts
    """
    return _convert(request.value)


@app.get(
    "/convert/{value}",
    summary="Spell out a number given in the path",
    tags=["Conversion"],
    responses=_ERROR_RESPONSES,
)
def convert_number_path(value: str) -> ConvertResponse:
    """Same as `POST /convert`, for quick lookups from a browser or curl."""
    return _convert(value)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and the largest scale word we can name."""
    _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_magnitude=MAGNITUDES[-1],
    )
