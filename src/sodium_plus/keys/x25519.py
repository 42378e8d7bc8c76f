"""X25519 key-exchange keys."""

from __future__ import annotations

from .base import CryptographyKey


class X25519SecretKey(CryptographyKey):
    """X25519 scalar used for box, sealed box, kx and scalar multiplication."""

    __slots__ = ()

    LENGTH = 32
    KEY_TYPE = "x25519"
    PUBLIC = False


class X25519PublicKey(CryptographyKey):
    """X25519 curve point (u-coordinate) published to peers."""

    __slots__ = ()

    LENGTH = 32
    KEY_TYPE = "x25519"
    PUBLIC = True
