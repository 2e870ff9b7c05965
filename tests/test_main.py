"""
Command-line entry point and settings tests.
"""

from __future__ import annotations

import main
from num2english.config import DEFAULT_LOG_LEVEL, DEFAULT_MAX_INPUT_LENGTH, load_settings


class TestMain:
    def test_converts_arguments(self, capsys) -> None:
        assert main.main(["60.212", "-0.0"]) == 0
        out = capsys.readouterr().out
        assert "sixty and two hundred twelve thousandths" in out
        assert "zero" in out

    def test_reports_failures(self, capsys) -> None:
        assert main.main(["1e5", "7"]) == 1
        out = capsys.readouterr().out
        assert "UNSUPPORTED_NOTATION" in out
        assert "seven" in out
        assert "1 value(s) could not be converted" in out

    def test_demo_values_all_convert(self, capsys) -> None:
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "uncentillion" in out
        assert f"All {len(main.DEMO_VALUES)} value(s) converted" in out


class TestSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.log_level == DEFAULT_LOG_LEVEL
        assert settings.max_input_length == DEFAULT_MAX_INPUT_LENGTH

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("NUM2ENGLISH_LOG_LEVEL", "debug")
        monkeypatch.setenv("NUM2ENGLISH_MAX_INPUT_LENGTH", "50")
        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.max_input_length == 50

    def test_bad_values_fall_back(self, monkeypatch) -> None:
        monkeypatch.setenv("NUM2ENGLISH_LOG_LEVEL", "chatty")
        monkeypatch.setenv("NUM2ENGLISH_MAX_INPUT_LENGTH", "lots")
        settings = load_settings()
        assert settings.log_level == DEFAULT_LOG_LEVEL
        assert settings.max_input_length == DEFAULT_MAX_INPUT_LENGTH
