"""Tests for textsplit settings."""

import pytest
from pydantic import ValidationError

from textsplit.config import SplitterConfig


class TestSplitterConfig:
    """Test suite for SplitterConfig."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test built-in defaults."""
        for name in ("TEXTSPLIT_DEFAULT_CHUNK_SIZE", "TEXTSPLIT_DEFAULT_CHUNK_OVERLAP", "TEXTSPLIT_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = SplitterConfig(_env_file=None)

        assert settings.DEFAULT_CHUNK_SIZE == 1000
        assert settings.DEFAULT_CHUNK_OVERLAP == 0
        assert settings.LOG_LEVEL == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test TEXTSPLIT_ prefixed variables are read."""
        monkeypatch.setenv("TEXTSPLIT_DEFAULT_CHUNK_SIZE", "250")
        monkeypatch.setenv("TEXTSPLIT_DEFAULT_CHUNK_OVERLAP", "30")
        monkeypatch.setenv("TEXTSPLIT_LOG_LEVEL", "debug")

        settings = SplitterConfig(_env_file=None)

        assert settings.DEFAULT_CHUNK_SIZE == 250
        assert settings.DEFAULT_CHUNK_OVERLAP == 30
        assert settings.LOG_LEVEL == "DEBUG"

    def test_overlap_must_be_below_size(self) -> None:
        """Test the overlap default cannot reach the size default."""
        with pytest.raises(ValidationError, match="must be less than"):
            SplitterConfig(_env_file=None, DEFAULT_CHUNK_SIZE=10, DEFAULT_CHUNK_OVERLAP=10)

    @pytest.mark.parametrize("value", [0, -3])
    def test_chunk_size_must_be_positive(self, value: int) -> None:
        """Test non-positive sizes are rejected."""
        with pytest.raises(ValidationError):
            SplitterConfig(_env_file=None, DEFAULT_CHUNK_SIZE=value)

    def test_unknown_log_level_rejected(self) -> None:
        """Test log levels are validated."""
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            SplitterConfig(_env_file=None, LOG_LEVEL="chatty")
