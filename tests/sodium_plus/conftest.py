"""
Shared pytest fixtures for sodium_plus tests.

Every test runs against the PyNaCl backend, built once per session.
"""

from __future__ import annotations

import pytest

from sodium_plus import SodiumPlus
from sodium_plus.backend.pynacl import PyNaclBackend


@pytest.fixture(scope="session")
def backend() -> PyNaclBackend:
    """The PyNaCl backend, initialized once."""
    return PyNaclBackend.init()


@pytest.fixture
def sodium(backend: PyNaclBackend) -> SodiumPlus:
    """Async facade over the session backend."""
    return SodiumPlus(backend)
