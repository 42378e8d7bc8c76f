"""
Sizes and limits of the libsodium primitives.

Values match libsodium's `*_BYTES` constants. They are part of the wire
format and never change between backends.
"""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

# Authenticated encryption

AEAD_XCHACHA20POLY1305_KEYBYTES: Final = 32
AEAD_XCHACHA20POLY1305_NPUBBYTES: Final = 24
AEAD_XCHACHA20POLY1305_ABYTES: Final = 16

SECRETBOX_KEYBYTES: Final = 32
SECRETBOX_NONCEBYTES: Final = 24
SECRETBOX_MACBYTES: Final = 16

BOX_PUBLICKEYBYTES: Final = 32
BOX_SECRETKEYBYTES: Final = 32
BOX_SEEDBYTES: Final = 32
BOX_NONCEBYTES: Final = 24
BOX_MACBYTES: Final = 16
BOX_SEALBYTES: Final = 48
"""Ephemeral public key (32) plus MAC (16)."""

# Authentication

AUTH_KEYBYTES: Final = 32
AUTH_BYTES: Final = 32

ONETIMEAUTH_KEYBYTES: Final = 32
ONETIMEAUTH_BYTES: Final = 16

SIGN_BYTES: Final = 64
SIGN_SEEDBYTES: Final = 32
SIGN_PUBLICKEYBYTES: Final = 32
SIGN_SECRETKEYBYTES: Final = 64

# Hashing and derivation

GENERICHASH_BYTES: Final = 32
GENERICHASH_BYTES_MIN: Final = 16
GENERICHASH_BYTES_MAX: Final = 64
GENERICHASH_KEYBYTES: Final = 32
GENERICHASH_KEYBYTES_MIN: Final = 16
GENERICHASH_KEYBYTES_MAX: Final = 64

SHORTHASH_KEYBYTES: Final = 16
SHORTHASH_BYTES: Final = 8

KDF_KEYBYTES: Final = 32
KDF_CONTEXTBYTES: Final = 8
KDF_BYTES_MIN: Final = 16
KDF_BYTES_MAX: Final = 64
KDF_SUBKEY_ID_MAX: Final = 2**64 - 1

# Key exchange

KX_PUBLICKEYBYTES: Final = 32
KX_SECRETKEYBYTES: Final = 32
KX_SEEDBYTES: Final = 32
KX_SESSIONKEYBYTES: Final = 32

SCALARMULT_BYTES: Final = 32
SCALARMULT_SCALARBYTES: Final = 32

# Stream cipher (ChaCha20, IETF variant)

STREAM_KEYBYTES: Final = 32
STREAM_NONCEBYTES: Final = 12

# Streaming AEAD

SECRETSTREAM_KEYBYTES: Final = 32
SECRETSTREAM_HEADERBYTES: Final = 24
SECRETSTREAM_ABYTES: Final = 17
"""One tag byte plus a 16-byte MAC."""

# Password hashing

PWHASH_ALG_ARGON2I13: Final = 1
PWHASH_ALG_ARGON2ID13: Final = 2
PWHASH_ALG_DEFAULT: Final = PWHASH_ALG_ARGON2ID13
PWHASH_SALTBYTES: Final = 16
PWHASH_BYTES_MIN: Final = 16
PWHASH_OPSLIMIT_MIN: Final = 1
PWHASH_OPSLIMIT_MAX: Final = 2**32 - 1
PWHASH_MEMLIMIT_MIN: Final = 8192

# Random

RANDOMBYTES_UNIFORM_MAX: Final = 2**32 - 1


class PwhashLimits(BaseModel):
    """
    Cost parameters for Argon2id.

    Presets mirror libsodium's INTERACTIVE / MODERATE / SENSITIVE levels.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    opslimit: int = Field(ge=PWHASH_OPSLIMIT_MIN, le=PWHASH_OPSLIMIT_MAX)
    """Number of passes over memory."""

    memlimit: int = Field(ge=PWHASH_MEMLIMIT_MIN)
    """Memory usage in bytes."""


PWHASH_INTERACTIVE: Final = PwhashLimits(opslimit=2, memlimit=64 * 1024 * 1024)
PWHASH_MODERATE: Final = PwhashLimits(opslimit=3, memlimit=256 * 1024 * 1024)
PWHASH_SENSITIVE: Final = PwhashLimits(opslimit=4, memlimit=1024 * 1024 * 1024)
