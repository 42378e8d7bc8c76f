"""
Input normalisation.

Every public operation accepts text or byte buffers. Before any primitive
call, those inputs are normalised into immutable `bytes` owned by the callee.
"""

from __future__ import annotations

from typing import TypeAlias

BytesLike: TypeAlias = str | bytes | bytearray | memoryview
"""Anything `to_bytes` accepts."""


def to_bytes(value: BytesLike) -> bytes:
    """
    Coerce text or a byte buffer into canonical immutable bytes.

    Accepts:
      - `str` (encoded as UTF-8)
      - `bytes` (returned as-is, already immutable)
      - `bytearray` / `memoryview` (copied into a new `bytes`)

    Raises:
      TypeError: If the value is neither text nor a byte buffer.
    """
    # bool and int are excluded: bytes(3) would silently allocate three zeros.
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected str or a bytes-like object, got {type(value).__name__}")


def clone_bytes(value: BytesLike) -> bytearray:
    """Return an owned, mutable copy of `value`."""
    return bytearray(to_bytes(value))
