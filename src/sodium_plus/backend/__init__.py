"""Primitive providers and the contract they implement."""

from . import constants
from .base import Backend
from .constants import PWHASH_INTERACTIVE, PWHASH_MODERATE, PWHASH_SENSITIVE, PwhashLimits
from .registry import available_backends, create_backend, register_backend

__all__ = [
    "Backend",
    "constants",
    "PwhashLimits",
    "PWHASH_INTERACTIVE",
    "PWHASH_MODERATE",
    "PWHASH_SENSITIVE",
    "available_backends",
    "create_backend",
    "register_backend",
]
