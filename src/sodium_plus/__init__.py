"""
Backend-agnostic facade over libsodium primitives.

The public surface is `SodiumPlus` (async) plus the typed keys it accepts
and returns. Backends implement `Backend` and are picked by name.
"""

from .backend import (
    PWHASH_INTERACTIVE,
    PWHASH_MODERATE,
    PWHASH_SENSITIVE,
    Backend,
    PwhashLimits,
    available_backends,
    create_backend,
    register_backend,
)
from .exceptions import (
    AuthenticationFailed,
    BackendUnavailable,
    DecryptionFailed,
    FramingError,
    InvalidArgument,
    InvalidCiphertextSize,
    InvalidHeaderLength,
    InvalidKeyLength,
    InvalidPadding,
    InvalidState,
    SignatureInvalid,
    SodiumError,
)
from .facade import SodiumPlus
from .keys import (
    CryptographyKey,
    Ed25519KeyPair,
    Ed25519PublicKey,
    Ed25519SecretKey,
    SessionKeys,
    SymmetricKey,
    X25519KeyPair,
    X25519PublicKey,
    X25519SecretKey,
)
from .secretstream import SecretStreamSession, SecretStreamTag
from .state import GenericHashState, HashStatus, SecretStreamState, StreamStatus
from .util import clone_bytes, to_bytes

__all__ = [
    # Facade
    "SodiumPlus",
    "Backend",
    "available_backends",
    "create_backend",
    "register_backend",
    # Keys
    "CryptographyKey",
    "SymmetricKey",
    "Ed25519SecretKey",
    "Ed25519PublicKey",
    "X25519SecretKey",
    "X25519PublicKey",
    "Ed25519KeyPair",
    "X25519KeyPair",
    "SessionKeys",
    # State
    "GenericHashState",
    "HashStatus",
    "SecretStreamState",
    "StreamStatus",
    "SecretStreamSession",
    "SecretStreamTag",
    # Password hashing presets
    "PwhashLimits",
    "PWHASH_INTERACTIVE",
    "PWHASH_MODERATE",
    "PWHASH_SENSITIVE",
    # Errors
    "SodiumError",
    "InvalidArgument",
    "InvalidKeyLength",
    "InvalidState",
    "AuthenticationFailed",
    "DecryptionFailed",
    "SignatureInvalid",
    "FramingError",
    "InvalidHeaderLength",
    "InvalidCiphertextSize",
    "InvalidPadding",
    "BackendUnavailable",
    # Utilities
    "to_bytes",
    "clone_bytes",
]
