"""
The backend contract.

A backend binds the facade to one primitive library. It owns input
validation (lengths, key variants) and error translation, so callers see
the same behaviour whichever library does the arithmetic.

All methods are synchronous and CPU-bound. Inputs are already-coerced
`bytes` and typed keys; the facade takes care of text and buffers.
"""

from __future__ import annotations

import hmac
import struct
from abc import ABC, abstractmethod
from typing import ClassVar

from typing_extensions import Self

from ..exceptions import InvalidArgument, InvalidKeyLength
from ..keys import (
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
from ..secretstream import SecretStreamTag
from ..state import GenericHashState, SecretStreamState
from . import constants


def require_key(
    key: object,
    key_type: type[CryptographyKey],
    name: str,
    length: int | None = None,
) -> bytes:
    """
    Check that `key` is the expected variant and return its material.

    Raises:
        TypeError: If `key` is a different variant (or not a key at all).
        InvalidKeyLength: If `length` is given and the key has another length.
        InvalidArgument: If the key has been wiped.
    """
    if not isinstance(key, key_type):
        raise TypeError(
            f"Argument {name!r} must be an instance of {key_type.__name__}, "
            f"got {type(key).__name__}"
        )
    material = key.get_bytes()
    if length is not None and len(material) != length:
        raise InvalidKeyLength(key_type.__name__, expected=length, actual=len(material))
    return material


def require_length(value: bytes, expected: int, name: str) -> bytes:
    """Reject `value` unless it is exactly `expected` bytes long."""
    if len(value) != expected:
        raise InvalidArgument(f"{name} must be {expected} bytes long, got {len(value)}")
    return value


class Backend(ABC):
    """
    Abstract provider of every libsodium primitive the facade exposes.

    Subclasses implement the primitive calls. Key generation, uniform
    random integers and the portable buffer utilities are built here on
    top of `randombytes_buf` and `crypto_scalarmult_base`.

    A backend instance holds no per-call state and can be shared freely.
    """

    backend_name: ClassVar[str]
    """Registry name of the backend."""

    # Sizes, exposed for callers that allocate nonces and salts.
    AEAD_NONCE_BYTES: ClassVar[int] = constants.AEAD_XCHACHA20POLY1305_NPUBBYTES
    AEAD_ABYTES: ClassVar[int] = constants.AEAD_XCHACHA20POLY1305_ABYTES
    SECRETBOX_NONCE_BYTES: ClassVar[int] = constants.SECRETBOX_NONCEBYTES
    SECRETBOX_MAC_BYTES: ClassVar[int] = constants.SECRETBOX_MACBYTES
    BOX_NONCE_BYTES: ClassVar[int] = constants.BOX_NONCEBYTES
    BOX_MAC_BYTES: ClassVar[int] = constants.BOX_MACBYTES
    BOX_SEAL_BYTES: ClassVar[int] = constants.BOX_SEALBYTES
    STREAM_NONCE_BYTES: ClassVar[int] = constants.STREAM_NONCEBYTES
    PWHASH_SALT_BYTES: ClassVar[int] = constants.PWHASH_SALTBYTES
    SECRETSTREAM_HEADER_BYTES: ClassVar[int] = constants.SECRETSTREAM_HEADERBYTES
    SECRETSTREAM_ABYTES: ClassVar[int] = constants.SECRETSTREAM_ABYTES

    @classmethod
    @abstractmethod
    def init(cls) -> Self:
        """
        Load the primitive library and return a ready backend.

        Raises:
            BackendUnavailable: If the library cannot be loaded.
        """

    def get_backend_name(self) -> str:
        return self.backend_name

    # Authenticated encryption

    @abstractmethod
    def crypto_aead_xchacha20poly1305_ietf_encrypt(
        self, plaintext: bytes, assoc_data: bytes, nonce: bytes, key: SymmetricKey
    ) -> bytes: ...

    @abstractmethod
    def crypto_aead_xchacha20poly1305_ietf_decrypt(
        self, ciphertext: bytes, assoc_data: bytes, nonce: bytes, key: SymmetricKey
    ) -> bytes: ...

    @abstractmethod
    def crypto_secretbox(self, plaintext: bytes, nonce: bytes, key: SymmetricKey) -> bytes: ...

    @abstractmethod
    def crypto_secretbox_open(
        self, ciphertext: bytes, nonce: bytes, key: SymmetricKey
    ) -> bytes: ...

    @abstractmethod
    def crypto_box(
        self,
        plaintext: bytes,
        nonce: bytes,
        secret_key: X25519SecretKey,
        public_key: X25519PublicKey,
    ) -> bytes: ...

    @abstractmethod
    def crypto_box_open(
        self,
        ciphertext: bytes,
        nonce: bytes,
        secret_key: X25519SecretKey,
        public_key: X25519PublicKey,
    ) -> bytes: ...

    @abstractmethod
    def crypto_box_seal(self, plaintext: bytes, public_key: X25519PublicKey) -> bytes: ...

    @abstractmethod
    def crypto_box_seal_open(
        self, ciphertext: bytes, public_key: X25519PublicKey, secret_key: X25519SecretKey
    ) -> bytes: ...

    # Message authentication

    @abstractmethod
    def crypto_auth(self, message: bytes, key: SymmetricKey) -> bytes: ...

    @abstractmethod
    def crypto_auth_verify(self, mac: bytes, message: bytes, key: SymmetricKey) -> bool: ...

    @abstractmethod
    def crypto_onetimeauth(self, message: bytes, key: SymmetricKey) -> bytes: ...

    @abstractmethod
    def crypto_onetimeauth_verify(
        self, message: bytes, key: SymmetricKey, tag: bytes
    ) -> bool: ...

    # Hashing and derivation

    @abstractmethod
    def crypto_generichash(
        self,
        message: bytes,
        key: SymmetricKey | None = None,
        output_length: int = constants.GENERICHASH_BYTES,
    ) -> bytes: ...

    @abstractmethod
    def crypto_generichash_init(
        self,
        key: SymmetricKey | None = None,
        output_length: int = constants.GENERICHASH_BYTES,
    ) -> GenericHashState: ...

    @abstractmethod
    def crypto_generichash_update(
        self, state: GenericHashState, chunk: bytes
    ) -> GenericHashState: ...

    @abstractmethod
    def crypto_generichash_final(
        self, state: GenericHashState, output_length: int | None = None
    ) -> bytes: ...

    @abstractmethod
    def crypto_shorthash(self, message: bytes, key: SymmetricKey) -> bytes: ...

    @abstractmethod
    def crypto_kdf_derive_from_key(
        self, length: int, subkey_id: int, context: bytes, key: SymmetricKey
    ) -> SymmetricKey: ...

    # Key exchange

    @abstractmethod
    def crypto_kx_client_session_keys(
        self,
        client_public_key: X25519PublicKey,
        client_secret_key: X25519SecretKey,
        server_public_key: X25519PublicKey,
    ) -> SessionKeys: ...

    @abstractmethod
    def crypto_kx_server_session_keys(
        self,
        server_public_key: X25519PublicKey,
        server_secret_key: X25519SecretKey,
        client_public_key: X25519PublicKey,
    ) -> SessionKeys: ...

    @abstractmethod
    def crypto_kx_keypair(self) -> X25519KeyPair: ...

    @abstractmethod
    def crypto_kx_seed_keypair(self, seed: bytes) -> X25519KeyPair: ...

    @abstractmethod
    def crypto_scalarmult(
        self, secret_key: X25519SecretKey, public_key: X25519PublicKey
    ) -> SymmetricKey: ...

    @abstractmethod
    def crypto_scalarmult_base(self, secret_key: X25519SecretKey) -> X25519PublicKey: ...

    # Password hashing

    @abstractmethod
    def crypto_pwhash(
        self,
        length: int,
        password: bytes,
        salt: bytes,
        opslimit: int,
        memlimit: int,
        algorithm: int = constants.PWHASH_ALG_DEFAULT,
    ) -> bytes: ...

    @abstractmethod
    def crypto_pwhash_str(
        self,
        password: bytes,
        opslimit: int,
        memlimit: int,
        algorithm: int = constants.PWHASH_ALG_DEFAULT,
    ) -> str: ...

    @abstractmethod
    def crypto_pwhash_str_verify(self, password: bytes, hash_str: str) -> bool: ...

    @abstractmethod
    def crypto_pwhash_str_needs_rehash(
        self, hash_str: str, opslimit: int, memlimit: int
    ) -> bool: ...

    # Signatures

    @abstractmethod
    def crypto_sign(self, message: bytes, secret_key: Ed25519SecretKey) -> bytes: ...

    @abstractmethod
    def crypto_sign_open(self, signed: bytes, public_key: Ed25519PublicKey) -> bytes: ...

    @abstractmethod
    def crypto_sign_detached(self, message: bytes, secret_key: Ed25519SecretKey) -> bytes: ...

    @abstractmethod
    def crypto_sign_verify_detached(
        self, message: bytes, public_key: Ed25519PublicKey, signature: bytes
    ) -> bool: ...

    @abstractmethod
    def crypto_sign_ed25519_sk_to_curve25519(
        self, secret_key: Ed25519SecretKey
    ) -> X25519SecretKey: ...

    @abstractmethod
    def crypto_sign_ed25519_pk_to_curve25519(
        self, public_key: Ed25519PublicKey
    ) -> X25519PublicKey: ...

    @abstractmethod
    def crypto_sign_publickey_from_secretkey(
        self, secret_key: Ed25519SecretKey
    ) -> Ed25519PublicKey: ...

    # Key pairs

    @abstractmethod
    def crypto_box_keypair(self) -> X25519KeyPair: ...

    @abstractmethod
    def crypto_box_seed_keypair(self, seed: bytes) -> X25519KeyPair: ...

    @abstractmethod
    def crypto_sign_keypair(self) -> Ed25519KeyPair: ...

    @abstractmethod
    def crypto_sign_seed_keypair(self, seed: bytes) -> Ed25519KeyPair: ...

    def crypto_box_publickey_from_secretkey(self, secret_key: X25519SecretKey) -> X25519PublicKey:
        """Recompute the public half of a box key pair."""
        return self.crypto_scalarmult_base(secret_key)

    # Stream cipher

    @abstractmethod
    def crypto_stream(self, length: int, nonce: bytes, key: SymmetricKey) -> bytes: ...

    @abstractmethod
    def crypto_stream_xor(self, plaintext: bytes, nonce: bytes, key: SymmetricKey) -> bytes: ...

    # Streaming AEAD

    @abstractmethod
    def crypto_secretstream_xchacha20poly1305_init_push(
        self, state: SecretStreamState, key: SymmetricKey
    ) -> bytes: ...

    @abstractmethod
    def crypto_secretstream_xchacha20poly1305_init_pull(
        self, state: SecretStreamState, header: bytes, key: SymmetricKey
    ) -> SecretStreamState: ...

    @abstractmethod
    def crypto_secretstream_xchacha20poly1305_push(
        self,
        state: SecretStreamState,
        message: bytes,
        assoc_data: bytes = b"",
        tag: SecretStreamTag = SecretStreamTag.MESSAGE,
    ) -> bytes: ...

    @abstractmethod
    def crypto_secretstream_xchacha20poly1305_pull(
        self, state: SecretStreamState, ciphertext: bytes, assoc_data: bytes = b""
    ) -> tuple[bytes, SecretStreamTag]: ...

    @abstractmethod
    def crypto_secretstream_xchacha20poly1305_rekey(self, state: SecretStreamState) -> None: ...

    # Randomness

    @abstractmethod
    def randombytes_buf(self, num: int) -> bytes: ...

    def randombytes_uniform(self, upper_bound: int) -> int:
        """
        Uniform integer in `[0, upper_bound)`.

        Draws 32-bit values and rejects those below `2**32 % upper_bound`,
        so every residue is equally likely.
        """
        if not 1 <= upper_bound <= constants.RANDOMBYTES_UNIFORM_MAX:
            raise InvalidArgument(
                f"upper_bound must be in [1, {constants.RANDOMBYTES_UNIFORM_MAX}], "
                f"got {upper_bound}"
            )
        if upper_bound < 2:
            return 0
        floor = (2**32 - upper_bound) % upper_bound
        while True:
            (r,) = struct.unpack("<I", self.randombytes_buf(4))
            if r >= floor:
                return r % upper_bound

    # Key generation

    def _symmetric_keygen(self, length: int = SymmetricKey.LENGTH) -> SymmetricKey:
        return SymmetricKey(self.randombytes_buf(length), length=length)

    def crypto_aead_xchacha20poly1305_ietf_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.AEAD_XCHACHA20POLY1305_KEYBYTES)

    def crypto_auth_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.AUTH_KEYBYTES)

    def crypto_generichash_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.GENERICHASH_KEYBYTES)

    def crypto_kdf_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.KDF_KEYBYTES)

    def crypto_onetimeauth_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.ONETIMEAUTH_KEYBYTES)

    def crypto_secretbox_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.SECRETBOX_KEYBYTES)

    def crypto_secretstream_xchacha20poly1305_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.SECRETSTREAM_KEYBYTES)

    def crypto_shorthash_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.SHORTHASH_KEYBYTES)

    def crypto_stream_keygen(self) -> SymmetricKey:
        return self._symmetric_keygen(constants.STREAM_KEYBYTES)

    # Buffer utilities

    @abstractmethod
    def sodium_memcmp(self, a: bytes, b: bytes) -> bool: ...

    @abstractmethod
    def sodium_increment(self, value: bytes) -> bytes: ...

    @abstractmethod
    def sodium_add(self, a: bytes, b: bytes) -> bytes: ...

    @abstractmethod
    def sodium_pad(self, unpadded: bytes, block_size: int) -> bytes: ...

    @abstractmethod
    def sodium_unpad(self, padded: bytes, block_size: int) -> bytes: ...

    def sodium_compare(self, a: bytes, b: bytes) -> int:
        """
        Compare two little-endian numbers in constant time.

        Returns -1, 0 or 1 as `a` is less than, equal to or greater than `b`.
        """
        if len(a) != len(b):
            raise InvalidArgument(f"Lengths differ: {len(a)} and {len(b)}")
        gt = 0
        eq = 1
        # Walk from the most significant byte, keeping the first difference.
        for i in reversed(range(len(a))):
            gt |= ((b[i] - a[i]) >> 8) & eq
            eq &= ((b[i] ^ a[i]) - 1) >> 8
        return (gt + gt + eq) - 1

    def sodium_is_zero(self, buf: bytes) -> bool:
        return hmac.compare_digest(buf, bytes(len(buf)))

    def sodium_memzero(self, buf: bytearray | CryptographyKey) -> None:
        """
        Zero a mutable buffer or a key in place.

        Raises:
            TypeError: For immutable buffers such as `bytes`.
        """
        if isinstance(buf, CryptographyKey):
            buf.wipe()
            return
        if not isinstance(buf, bytearray):
            raise TypeError(f"Cannot zero immutable {type(buf).__name__} in place")
        for i in range(len(buf)):
            buf[i] = 0
