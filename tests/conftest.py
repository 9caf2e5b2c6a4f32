"""Test fixtures for chartkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from structlog.stdlib import BoundLogger, get_logger

from chartkit.configmap import ConfigMap
from chartkit.constants import ROOT_LOGGER


@pytest.fixture
def configmap() -> ConfigMap:
    """ConfigMap with a name as produced by a hashing naming scheme."""
    return ConfigMap("test-my-config-map-configmap-d0fa5644")


@pytest.fixture
def data_path() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture
def logger() -> BoundLogger:
    return get_logger(ROOT_LOGGER)
