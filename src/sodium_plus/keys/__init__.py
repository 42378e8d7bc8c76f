"""Typed key material for every primitive family."""

from .base import CryptographyKey
from .ed25519 import Ed25519PublicKey, Ed25519SecretKey
from .pairs import Ed25519KeyPair, SessionKeys, X25519KeyPair
from .symmetric import SymmetricKey
from .x25519 import X25519PublicKey, X25519SecretKey

__all__ = [
    "CryptographyKey",
    "SymmetricKey",
    "Ed25519SecretKey",
    "Ed25519PublicKey",
    "X25519SecretKey",
    "X25519PublicKey",
    # Bundles
    "X25519KeyPair",
    "Ed25519KeyPair",
    "SessionKeys",
]
