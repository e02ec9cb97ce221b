# tests/core/test_settings.py
"""Tests for harness settings and loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError


class TestHarnessSettings:
    """Settings validation."""

    def test_defaults(self) -> None:
        from modinput.core.config import HarnessSettings

        settings = HarnessSettings()
        assert settings.log_level == "WARN"
        assert settings.flush_each_event is True

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("debug", "DEBUG"),
            (" info ", "INFO"),
            ("warning", "WARN"),
            ("critical", "FATAL"),
            ("ERROR", "ERROR"),
        ],
    )
    def test_log_level_is_normalized(self, raw: str, expected: str) -> None:
        from modinput.core.config import HarnessSettings

        assert HarnessSettings(log_level=raw).log_level == expected

    def test_unknown_log_level_rejected(self) -> None:
        from modinput.core.config import HarnessSettings

        with pytest.raises(ValidationError):
            HarnessSettings(log_level="LOUD")

    def test_settings_are_frozen(self) -> None:
        from modinput.core.config import HarnessSettings

        settings = HarnessSettings()
        with pytest.raises(ValidationError):
            settings.log_level = "DEBUG"  # type: ignore[misc]


class TestLoadSettings:
    """Loading from file and environment via Dynaconf."""

    def test_defaults_without_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from modinput.core.config import load_settings

        monkeypatch.delenv("MODINPUT_LOG_LEVEL", raising=False)
        settings = load_settings()
        assert settings.log_level == "WARN"

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        from modinput.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text("log_level: debug\nflush_each_event: false\n")

        settings = load_settings(config_file)
        assert settings.log_level == "DEBUG"
        assert settings.flush_each_event is False

    def test_environment_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from modinput.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text("log_level: DEBUG\n")
        monkeypatch.setenv("MODINPUT_LOG_LEVEL", "ERROR")

        settings = load_settings(config_file)
        assert settings.log_level == "ERROR"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        from modinput.core.config import load_settings

        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        from modinput.core.config import load_settings

        config_file = tmp_path / "settings.yaml"
        config_file.write_text("log_level: LOUD\n")

        with pytest.raises(ValidationError):
            load_settings(config_file)
