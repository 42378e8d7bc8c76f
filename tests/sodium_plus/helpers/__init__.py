"""Test helpers for sodium_plus unit tests."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import TypeVar

_T = TypeVar("_T")


def run_async(coro: Coroutine[object, object, _T]) -> _T:
    """Run an async coroutine synchronously."""
    return asyncio.run(coro)


def flip_bit(data: bytes, index: int = -1, bit: int = 0) -> bytes:
    """Return a copy of `data` with one bit inverted."""
    buf = bytearray(data)
    buf[index] ^= 1 << bit
    return bytes(buf)


__all__ = [
    "flip_bit",
    "run_async",
]
