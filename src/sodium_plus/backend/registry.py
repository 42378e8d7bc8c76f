"""
Backend registry.

Maps backend names to factories. The backend is chosen once, by name,
when the facade is created. There is no fallback: a backend that fails
to load is an error, never a reason to silently use another one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import load_config
from ..exceptions import BackendUnavailable
from .base import Backend

logger = logging.getLogger(__name__)

BackendFactory = Callable[[], Backend]
"""Zero-argument callable returning an initialized backend."""


def _load_pynacl() -> Backend:
    try:
        from .pynacl import PyNaclBackend
    except ImportError as exc:
        raise BackendUnavailable("pynacl", f"PyNaCl is not installed ({exc})") from exc
    return PyNaclBackend.init()


_REGISTRY: dict[str, BackendFactory] = {"pynacl": _load_pynacl}


def register_backend(name: str, factory: BackendFactory) -> None:
    """
    Make a backend available under `name`.

    Registering an existing name replaces its factory.
    """
    key = name.strip().lower()
    if not key:
        raise ValueError("backend name must not be empty")
    _REGISTRY[key] = factory
    logger.debug("Registered backend %r", key)


def available_backends() -> list[str]:
    """Names of all registered backends, sorted."""
    return sorted(_REGISTRY)


def create_backend(name: str | None = None) -> Backend:
    """
    Instantiate a backend by name.

    Args:
        name: Registry name. Defaults to the configured backend.

    Raises:
        BackendUnavailable: If the name is unknown or the backend fails to load.
    """
    key = (name or load_config().backend).strip().lower()
    factory = _REGISTRY.get(key)
    if factory is None:
        raise BackendUnavailable(
            key, f"unknown backend; available: {', '.join(available_backends())}"
        )
    backend = factory()
    logger.info("Selected backend %r", key)
    return backend
