"""
Streaming AEAD (secretstream, XChaCha20-Poly1305).

A stream is a header followed by a sequence of chunks. Each chunk carries
a tag. The sender sets it and the receiver gets it back after authentication.
Chunks are bound to their position: dropping, duplicating or reordering a
chunk makes the next pull fail.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

from typing_extensions import Self

from .keys import SymmetricKey
from .state import SecretStreamState
from .util import BytesLike, to_bytes

if TYPE_CHECKING:
    from .backend.base import Backend

logger = logging.getLogger(__name__)


class SecretStreamTag(IntEnum):
    """Chunk tags, with libsodium's wire values."""

    MESSAGE = 0
    """Ordinary chunk."""

    PUSH = 1
    """End of a logical message inside the stream."""

    REKEY = 2
    """Both sides rotate the key after this chunk."""

    FINAL = 3
    """Last chunk of the stream."""


class SecretStreamSession:
    """
    One direction of a stream bound to a backend and a key.

    Wraps a `SecretStreamState` so callers do not thread the state through
    every call. The role is fixed by the constructor used.

    Usage:
        sender, header = SecretStreamSession.start_push(backend, key)
        chunk = sender.push(b"data", tag=SecretStreamTag.FINAL)

        receiver = SecretStreamSession.start_pull(backend, key, header)
        message, tag = receiver.pull(chunk)
    """

    __slots__ = ("_backend", "_state")

    def __init__(self, backend: Backend, state: SecretStreamState) -> None:
        self._backend = backend
        self._state = state

    @classmethod
    def start_push(cls, backend: Backend, key: SymmetricKey) -> tuple[Self, bytes]:
        """Open a sending session. Returns the session and the header to transmit."""
        state = SecretStreamState()
        header = backend.crypto_secretstream_xchacha20poly1305_init_push(state, key)
        return cls(backend, state), header

    @classmethod
    def start_pull(cls, backend: Backend, key: SymmetricKey, header: BytesLike) -> Self:
        """Open a receiving session from the sender's header."""
        state = SecretStreamState()
        backend.crypto_secretstream_xchacha20poly1305_init_pull(state, to_bytes(header), key)
        return cls(backend, state)

    @property
    def state(self) -> SecretStreamState:
        return self._state

    @property
    def message_count(self) -> int:
        return self._state.message_count

    @property
    def finished(self) -> bool:
        """Whether a FINAL chunk has gone through this session."""
        return self._state.final_seen

    def push(
        self,
        message: BytesLike,
        assoc_data: BytesLike = b"",
        tag: SecretStreamTag = SecretStreamTag.MESSAGE,
    ) -> bytes:
        return self._backend.crypto_secretstream_xchacha20poly1305_push(
            self._state, to_bytes(message), to_bytes(assoc_data), tag
        )

    def pull(
        self, ciphertext: BytesLike, assoc_data: BytesLike = b""
    ) -> tuple[bytes, SecretStreamTag]:
        return self._backend.crypto_secretstream_xchacha20poly1305_pull(
            self._state, to_bytes(ciphertext), to_bytes(assoc_data)
        )

    def rekey(self) -> None:
        logger.debug("Explicit rekey after %d chunks", self._state.message_count)
        self._backend.crypto_secretstream_xchacha20poly1305_rekey(self._state)
