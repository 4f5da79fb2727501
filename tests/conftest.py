"""
Pytest configuration and fixtures for chemnet testing.

This file sets up common fixtures and paths for pytest.
"""

import pytest
from pathlib import Path

from chemnet.core.stream_factory import StreamFactory
from chemnet.simulation.network import ProcessNetwork


REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def factory():
    """Fresh stream factory; names start at s1 in every test."""
    return StreamFactory()


@pytest.fixture
def network():
    return ProcessNetwork("test network")


@pytest.fixture(scope="session")
def configs_dir():
    """Directory of the sample network configurations shipped with the repo."""
    return REPO_ROOT / "configs"
