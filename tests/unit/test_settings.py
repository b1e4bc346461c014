"""
Unit tests for application settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from signup.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults match the documented rule bounds and security settings."""
        for name in ("REPOSITORY_BACKEND", "BCRYPT_COST", "DEFAULT_LOCALE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.repository_backend == "postgres"
        assert settings.username_min_length == 4
        assert settings.username_max_length == 32
        assert settings.password_min_length == 6
        assert settings.default_locale == "en"
        assert settings.bcrypt_cost == 10

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults case-insensitively."""
        monkeypatch.setenv("REPOSITORY_BACKEND", "memory")
        monkeypatch.setenv("password_min_length", "8")

        settings = Settings(_env_file=None)

        assert settings.repository_backend == "memory"
        assert settings.password_min_length == 8

    def test_locales_dir(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """LOCALES_DIR is unset by default and parsed as a path when given."""
        monkeypatch.delenv("LOCALES_DIR", raising=False)
        assert Settings(_env_file=None).locales_dir is None

        monkeypatch.setenv("LOCALES_DIR", str(tmp_path))
        assert Settings(_env_file=None).locales_dir == tmp_path

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, repository_backend="mysql")

    def test_bcrypt_cost_lower_bound(self) -> None:
        """bcrypt accepts no cost below 4."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bcrypt_cost=3)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
