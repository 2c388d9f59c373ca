"""Pytest configuration: fast-by-default TDD setup.

Slow tests (large rasters, big kernels) are skipped unless --slow is passed.
Run the full suite:   pytest --slow
Run fast tests only:  pytest          (default)
"""
import numpy as np
import pytest

from raster import PixelBuffer


def pytest_addoption(parser):
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="Run slow tests on large rasters",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--slow"):
        return  # run everything
    skip_slow = pytest.mark.skip(reason="slow test skipped; pass --slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_rgb(rng):
    """16x12 RGB buffer with seeded random samples."""
    return PixelBuffer.from_array(rng.integers(0, 256, (12, 16, 3), dtype=np.uint8))


@pytest.fixture
def random_rgba(rng):
    return PixelBuffer.from_array(rng.integers(0, 256, (12, 16, 4), dtype=np.uint8))


@pytest.fixture
def random_gray(rng):
    return PixelBuffer.from_array(rng.integers(0, 256, (12, 16), dtype=np.uint8))
