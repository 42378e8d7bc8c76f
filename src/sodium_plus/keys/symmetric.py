"""Symmetric key material shared by the secret-key primitives."""

from __future__ import annotations

from typing import ClassVar

from ..exceptions import InvalidArgument
from ..util import BytesLike
from .base import CryptographyKey


class SymmetricKey(CryptographyKey):
    """
    Secret key for AEAD, secretbox, MAC, stream, KDF and secretstream.

    Defaults to 32 bytes. Keys produced by key derivation, generic hashing
    or short hashing may pick another fixed length in `[MIN_LENGTH, MAX_LENGTH]`
    at construction time; the length is then fixed for the key's lifetime.
    """

    __slots__ = ("_length",)

    LENGTH = 32
    KEY_TYPE = "symmetric"
    PUBLIC = False

    MIN_LENGTH: ClassVar[int] = 16
    """Shortest supported key (libsodium's generic hash / KDF minimum)."""

    MAX_LENGTH: ClassVar[int] = 64
    """Longest supported key (libsodium's generic hash / KDF maximum)."""

    def __init__(self, material: BytesLike, length: int | None = None) -> None:
        """
        Args:
            material: Raw key bytes.
            length: Required length, if different from the 32-byte default.

        Raises:
            InvalidArgument: If `length` lies outside `[MIN_LENGTH, MAX_LENGTH]`.
            InvalidKeyLength: If the material length differs from the required length.
        """
        if length is not None and not self.MIN_LENGTH <= length <= self.MAX_LENGTH:
            raise InvalidArgument(
                f"SymmetricKey length must be in [{self.MIN_LENGTH}, {self.MAX_LENGTH}], "
                f"got {length}"
            )
        self._length = self.LENGTH if length is None else length
        super().__init__(material)

    def expected_length(self) -> int:
        return self._length
