"""Pytest configuration shared by the lodash_typed tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from lodash_typed import _config, _logging

if TYPE_CHECKING:
    from collections.abc import Generator

_ENV_VARS = (
    'LODASH_TYPED_MAX_WORKERS',
    'LODASH_TYPED_MIN_PARALLEL_SIZE',
    'LODASH_TYPED_LOG_LEVEL',
)


@pytest.fixture(autouse=True)
def clean_runtime(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test with no active config, no env overrides and a bare library logger."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _config.reset()
    yield
    _config.reset()
    library_logger = logging.getLogger(_logging.LOGGER_NAME)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    _logging._handler = None


@pytest.fixture
def parallel_config() -> _config.Config:
    """Config that fans out even tiny inputs across four workers."""
    return _config.init(max_workers=4, min_parallel_size=0)
