"""Ed25519 signing keys."""

from __future__ import annotations

from .base import CryptographyKey


class Ed25519SecretKey(CryptographyKey):
    """
    Ed25519 secret key in libsodium's 64-byte layout.

    The layout is `seed (32) || public key (32)`.
    """

    __slots__ = ()

    LENGTH = 64
    KEY_TYPE = "ed25519"
    PUBLIC = False


class Ed25519PublicKey(CryptographyKey):
    """Ed25519 public key used to verify signatures."""

    __slots__ = ()

    LENGTH = 32
    KEY_TYPE = "ed25519"
    PUBLIC = True
