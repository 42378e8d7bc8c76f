"""
Base class for typed key material.

Every key variant wraps one buffer of raw bytes and declares:

- `LENGTH`: the exact number of bytes the material must contain.
- `KEY_TYPE`: the primitive family the key belongs to.
- `PUBLIC`: whether the material is safe to publish.

Keys are read-only once constructed. The only mutation is `wipe()`, which
zeroes the buffer in place and makes the key unusable.
"""

from __future__ import annotations

import hmac
from types import TracebackType
from typing import ClassVar

from typing_extensions import Self

from ..exceptions import InvalidArgument, InvalidKeyLength
from ..util import BytesLike, to_bytes


class CryptographyKey:
    """
    A typed wrapper around raw key material.

    Subclasses set `LENGTH`, `KEY_TYPE` and `PUBLIC`. The base class
    defines none of them and therefore cannot be instantiated.

    Usage:
        with X25519SecretKey(material) as sk:
            ...
        # sk is wiped here
    """

    __slots__ = ("_material", "_wiped")

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    KEY_TYPE: ClassVar[str]
    """Primitive family: "symmetric", "ed25519" or "x25519"."""

    PUBLIC: ClassVar[bool] = False
    """Whether the key is the public half of a key pair."""

    def __init__(self, material: BytesLike) -> None:
        """
        Copy and validate key material.

        Args:
            material: Raw key bytes (or text, encoded as UTF-8).

        Raises:
            TypeError: If the class does not define `LENGTH` or the input is not bytes-like.
            InvalidKeyLength: If the material length differs from `expected_length()`.
        """
        cls = type(self)
        if not hasattr(cls, "LENGTH") or not hasattr(cls, "KEY_TYPE"):
            raise TypeError(f"{cls.__name__} must define LENGTH and KEY_TYPE")

        data = to_bytes(material)
        expected = self.expected_length()
        if len(data) != expected:
            raise InvalidKeyLength(cls.__name__, expected=expected, actual=len(data))

        self._material = bytearray(data)
        self._wiped = False

    def expected_length(self) -> int:
        """The length this instance must have."""
        return self.LENGTH

    def get_bytes(self) -> bytes:
        """
        Return a copy of the key material.

        Mutating the returned object never affects the key.

        Raises:
            InvalidArgument: If the key has been wiped.
        """
        if self._wiped:
            raise InvalidArgument(f"{type(self).__name__} has been wiped")
        return bytes(self._material)

    def __len__(self) -> int:
        return len(self._material)

    @property
    def is_wiped(self) -> bool:
        """Whether `wipe()` has been called."""
        return self._wiped

    def wipe(self) -> None:
        """
        Zero the key material in place.

        Copies previously handed out by `get_bytes()` are not affected;
        callers own those and must discard them.
        """
        for i in range(len(self._material)):
            self._material[i] = 0
        self._wiped = True

    # Capability queries. Values are fixed per variant and never depend on content.

    def is_public_key(self) -> bool:
        return self.PUBLIC

    def is_ed25519_key(self) -> bool:
        return self.KEY_TYPE == "ed25519"

    def is_x25519_key(self) -> bool:
        return self.KEY_TYPE == "x25519"

    def is_signing_key(self) -> bool:
        """True for both halves of an Ed25519 key pair."""
        return self.is_ed25519_key()

    def is_key_exchange_key(self) -> bool:
        """True for both halves of an X25519 key pair."""
        return self.is_x25519_key()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.wipe()

    def __eq__(self, other: object) -> bool:
        """Constant-time comparison; keys of different types are never equal."""
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, CryptographyKey)
        return hmac.compare_digest(bytes(self._material), bytes(other._material))

    # Mutable through wipe(), so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        tname = type(self).__name__
        if self._wiped:
            return f"{tname}(<wiped>)"
        if self.PUBLIC:
            return f"{tname}({self._material.hex()})"
        return f"{tname}(<redacted>)"
