"""Unit tests for codec configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blobgzip import BLOB_SIZE_MAX_DEFAULT, CodecConfig


class TestCodecConfig:
    """Test CodecConfig validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = CodecConfig()

        assert config.max_blob_size == BLOB_SIZE_MAX_DEFAULT
        assert config.compress_level == 6
        assert config.read_size == 65536
        assert config.on_oversize == "truncate"
        assert not config.strict

    def test_strict(self) -> None:
        """Test strict mirrors on_oversize='raise'."""
        assert CodecConfig(on_oversize="raise").strict

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_blob_size": 0},
            {"max_blob_size": -1},
            {"compress_level": -1},
            {"compress_level": 10},
            {"read_size": 0},
            {"on_oversize": "ignore"},
            {"unknown": 1},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        """Test out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            CodecConfig(**kwargs)

    def test_frozen(self) -> None:
        """Test configs are immutable once built."""
        config = CodecConfig()

        with pytest.raises(ValidationError):
            config.max_blob_size = 1  # type: ignore[misc]

    def test_validation_error_is_value_error(self) -> None:
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError):
            CodecConfig(max_blob_size=0)
