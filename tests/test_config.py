"""
Tests for settings validation and directory source selection.
"""

import pytest

from cafe_directory.api.dependencies import build_source
from cafe_directory.config import Settings
from cafe_directory.repositories import JsonFileCafeRepository, StaticCafeRepository


def test_defaults_are_valid():
    config = Settings(cafes_file=None, api_port=8000, log_level="info")
    assert config.uses_embedded_directory


@pytest.mark.parametrize("port", [0, 65536, -1])
def test_invalid_port(port):
    with pytest.raises(ValueError, match="API_PORT"):
        Settings(api_port=port, log_level="info")


def test_invalid_log_level():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(api_port=8000, log_level="verbose")


def test_build_source_embedded():
    source = build_source(Settings(cafes_file=None, api_port=8000, log_level="info"))
    assert isinstance(source, StaticCafeRepository)


def test_build_source_file(tmp_path):
    path = tmp_path / "cafes.json"
    source = build_source(Settings(cafes_file=str(path), api_port=8000, log_level="info"))
    assert isinstance(source, JsonFileCafeRepository)
    assert source.path == path
