"""
Key pairs and session key bundles.

The halves of a pair are independent objects. Nothing links a public key
back to the secret key it came from.
"""

from __future__ import annotations

from typing import NamedTuple

from .ed25519 import Ed25519PublicKey, Ed25519SecretKey
from .symmetric import SymmetricKey
from .x25519 import X25519PublicKey, X25519SecretKey


class X25519KeyPair(NamedTuple):
    """Key pair for box, sealed box and key exchange."""

    secret_key: X25519SecretKey
    public_key: X25519PublicKey


class Ed25519KeyPair(NamedTuple):
    """Key pair for signing."""

    secret_key: Ed25519SecretKey
    public_key: Ed25519PublicKey


class SessionKeys(NamedTuple):
    """
    Directional keys produced by key exchange.

    The client's `tx` equals the server's `rx` and vice versa.
    """

    rx: SymmetricKey
    """Key for decrypting data received from the peer."""

    tx: SymmetricKey
    """Key for encrypting data sent to the peer."""
