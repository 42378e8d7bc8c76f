"""
Owned handles for the stateful primitives.

Generic hashing and secretstream keep cipher state between calls. The
backend owns the raw state object; the handle wraps it with an explicit
status tag so misuse is reported instead of producing garbage.

Handles are not thread-safe. A second caller entering a handle while
another call is in progress is rejected with `InvalidState`.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import InvalidState


class HashStatus(Enum):
    """Lifecycle of an incremental hash."""

    INITIALIZED = "initialized"
    UPDATING = "updating"
    FINALIZED = "finalized"


class StreamStatus(Enum):
    """
    Role of a secretstream state.

    A state is bound to exactly one direction by its init call.
    """

    UNINITIALIZED = "uninitialized"
    PUSH_READY = "push_ready"
    PULL_READY = "pull_ready"


@contextmanager
def _exclusive(lock: threading.Lock, state: str, operation: str) -> Iterator[None]:
    # Non-blocking: contention means the caller shared a handle it should not have.
    if not lock.acquire(blocking=False):
        raise InvalidState(state, operation, detail="handle is already in use")
    try:
        yield
    finally:
        lock.release()


@dataclass(slots=True)
class GenericHashState:
    """
    Incremental BLAKE2b state.

    `FINALIZED` is terminal: update and final both raise afterwards.
    """

    output_length: int
    """Digest length fixed at init."""

    raw: Any = field(repr=False)
    """Backend-specific hash state."""

    status: HashStatus = HashStatus.INITIALIZED

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def exclusive(self, operation: str) -> AbstractContextManager[None]:
        """Enter the handle for one operation, rejecting concurrent use."""
        return _exclusive(self._lock, self.status.name, operation)

    def require_open(self, operation: str) -> None:
        if self.status is HashStatus.FINALIZED:
            raise InvalidState(self.status.name, operation)


@dataclass(slots=True)
class SecretStreamState:
    """
    Streaming AEAD state for one direction of one stream.

    Lifecycle:
        UNINITIALIZED --init_push--> PUSH_READY
        UNINITIALIZED --init_pull--> PULL_READY

    Both ready states loop on push/pull and rekey. A chunk tagged FINAL
    sets `final_seen` but does not close the state; callers decide when a
    stream is finished.
    """

    raw: Any = field(default=None, repr=False)
    """Backend-specific cipher state, set by init."""

    status: StreamStatus = StreamStatus.UNINITIALIZED

    message_count: int = 0
    """Chunks pushed or pulled so far. Rekeying does not reset it."""

    final_seen: bool = False
    """Whether a chunk tagged FINAL has been pushed or pulled."""

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def exclusive(self, operation: str) -> AbstractContextManager[None]:
        """Enter the handle for one operation, rejecting concurrent use."""
        return _exclusive(self._lock, self.status.name, operation)

    def require(self, expected: StreamStatus, operation: str) -> None:
        if self.status is not expected:
            raise InvalidState(self.status.name, operation)
