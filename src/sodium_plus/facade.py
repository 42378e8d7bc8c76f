"""
The async facade.

`SodiumPlus` is the entry point callers use. It coerces text and buffers
into `bytes`, then hands each call to the active backend on a worker
thread so CPU-heavy primitives (password hashing above all) do not block
the event loop.

Usage:
    sodium = await SodiumPlus.auto()
    key = await sodium.crypto_secretbox_keygen()
    nonce = await sodium.randombytes_buf(24)
    ciphertext = await sodium.crypto_secretbox("hello", nonce, key)
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TypeVar

from typing_extensions import ParamSpec, Self

from .backend import constants
from .backend.base import Backend
from .backend.registry import create_backend
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
from .secretstream import SecretStreamTag
from .state import GenericHashState, SecretStreamState
from .util import BytesLike, to_bytes

P = ParamSpec("P")
R = TypeVar("R")


class SodiumPlus:
    """Backend-agnostic, awaitable interface to the libsodium primitives."""

    __slots__ = ("_backend",)

    def __init__(self, backend: Backend) -> None:
        if not isinstance(backend, Backend):
            raise TypeError(f"Expected a Backend, got {type(backend).__name__}")
        self._backend = backend

    @classmethod
    async def auto(cls, name: str | None = None) -> Self:
        """
        Create a facade over the configured (or named) backend.

        Raises:
            BackendUnavailable: If the backend cannot be loaded.
        """
        backend = await asyncio.to_thread(create_backend, name)
        return cls(backend)

    @property
    def backend(self) -> Backend:
        return self._backend

    def get_backend_name(self) -> str:
        return self._backend.get_backend_name()

    async def _run(self, fn: Callable[P, R], *args: P.args, **kwargs: P.kwargs) -> R:
        return await asyncio.to_thread(fn, *args, **kwargs)

    # Authenticated encryption

    async def crypto_aead_xchacha20poly1305_ietf_encrypt(
        self,
        plaintext: BytesLike,
        nonce: BytesLike,
        key: SymmetricKey,
        assoc_data: BytesLike = b"",
    ) -> bytes:
        return await self._run(
            self._backend.crypto_aead_xchacha20poly1305_ietf_encrypt,
            to_bytes(plaintext),
            to_bytes(assoc_data),
            to_bytes(nonce),
            key,
        )

    async def crypto_aead_xchacha20poly1305_ietf_decrypt(
        self,
        ciphertext: BytesLike,
        nonce: BytesLike,
        key: SymmetricKey,
        assoc_data: BytesLike = b"",
    ) -> bytes:
        return await self._run(
            self._backend.crypto_aead_xchacha20poly1305_ietf_decrypt,
            to_bytes(ciphertext),
            to_bytes(assoc_data),
            to_bytes(nonce),
            key,
        )

    async def crypto_aead_xchacha20poly1305_ietf_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_aead_xchacha20poly1305_ietf_keygen)

    async def crypto_secretbox(
        self, plaintext: BytesLike, nonce: BytesLike, key: SymmetricKey
    ) -> bytes:
        return await self._run(
            self._backend.crypto_secretbox, to_bytes(plaintext), to_bytes(nonce), key
        )

    async def crypto_secretbox_open(
        self, ciphertext: BytesLike, nonce: BytesLike, key: SymmetricKey
    ) -> bytes:
        return await self._run(
            self._backend.crypto_secretbox_open, to_bytes(ciphertext), to_bytes(nonce), key
        )

    async def crypto_secretbox_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_secretbox_keygen)

    async def crypto_box(
        self,
        plaintext: BytesLike,
        nonce: BytesLike,
        secret_key: X25519SecretKey,
        public_key: X25519PublicKey,
    ) -> bytes:
        return await self._run(
            self._backend.crypto_box, to_bytes(plaintext), to_bytes(nonce), secret_key, public_key
        )

    async def crypto_box_open(
        self,
        ciphertext: BytesLike,
        nonce: BytesLike,
        secret_key: X25519SecretKey,
        public_key: X25519PublicKey,
    ) -> bytes:
        return await self._run(
            self._backend.crypto_box_open,
            to_bytes(ciphertext),
            to_bytes(nonce),
            secret_key,
            public_key,
        )

    async def crypto_box_seal(self, plaintext: BytesLike, public_key: X25519PublicKey) -> bytes:
        return await self._run(self._backend.crypto_box_seal, to_bytes(plaintext), public_key)

    async def crypto_box_seal_open(
        self,
        ciphertext: BytesLike,
        public_key: X25519PublicKey,
        secret_key: X25519SecretKey,
    ) -> bytes:
        return await self._run(
            self._backend.crypto_box_seal_open, to_bytes(ciphertext), public_key, secret_key
        )

    async def crypto_box_keypair(self) -> X25519KeyPair:
        return await self._run(self._backend.crypto_box_keypair)

    async def crypto_box_seed_keypair(self, seed: BytesLike) -> X25519KeyPair:
        return await self._run(self._backend.crypto_box_seed_keypair, to_bytes(seed))

    async def crypto_box_publickey_from_secretkey(
        self, secret_key: X25519SecretKey
    ) -> X25519PublicKey:
        return await self._run(self._backend.crypto_box_publickey_from_secretkey, secret_key)

    # Message authentication

    async def crypto_auth(self, message: BytesLike, key: SymmetricKey) -> bytes:
        return await self._run(self._backend.crypto_auth, to_bytes(message), key)

    async def crypto_auth_verify(
        self, mac: BytesLike, message: BytesLike, key: SymmetricKey
    ) -> bool:
        return await self._run(
            self._backend.crypto_auth_verify, to_bytes(mac), to_bytes(message), key
        )

    async def crypto_auth_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_auth_keygen)

    async def crypto_onetimeauth(self, message: BytesLike, key: SymmetricKey) -> bytes:
        return await self._run(self._backend.crypto_onetimeauth, to_bytes(message), key)

    async def crypto_onetimeauth_verify(
        self, message: BytesLike, key: SymmetricKey, tag: BytesLike
    ) -> bool:
        return await self._run(
            self._backend.crypto_onetimeauth_verify, to_bytes(message), key, to_bytes(tag)
        )

    async def crypto_onetimeauth_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_onetimeauth_keygen)

    # Hashing and derivation

    async def crypto_generichash(
        self,
        message: BytesLike,
        key: SymmetricKey | None = None,
        output_length: int = constants.GENERICHASH_BYTES,
    ) -> bytes:
        return await self._run(
            self._backend.crypto_generichash, to_bytes(message), key, output_length
        )

    async def crypto_generichash_init(
        self,
        key: SymmetricKey | None = None,
        output_length: int = constants.GENERICHASH_BYTES,
    ) -> GenericHashState:
        return await self._run(self._backend.crypto_generichash_init, key, output_length)

    async def crypto_generichash_update(
        self, state: GenericHashState, message: BytesLike
    ) -> GenericHashState:
        return await self._run(self._backend.crypto_generichash_update, state, to_bytes(message))

    async def crypto_generichash_final(
        self, state: GenericHashState, output_length: int | None = None
    ) -> bytes:
        return await self._run(self._backend.crypto_generichash_final, state, output_length)

    async def crypto_generichash_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_generichash_keygen)

    async def crypto_shorthash(self, message: BytesLike, key: SymmetricKey) -> bytes:
        return await self._run(self._backend.crypto_shorthash, to_bytes(message), key)

    async def crypto_shorthash_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_shorthash_keygen)

    async def crypto_kdf_derive_from_key(
        self, length: int, subkey_id: int, context: BytesLike, key: SymmetricKey
    ) -> SymmetricKey:
        return await self._run(
            self._backend.crypto_kdf_derive_from_key, length, subkey_id, to_bytes(context), key
        )

    async def crypto_kdf_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_kdf_keygen)

    # Key exchange

    async def crypto_kx_client_session_keys(
        self,
        client_public_key: X25519PublicKey,
        client_secret_key: X25519SecretKey,
        server_public_key: X25519PublicKey,
    ) -> SessionKeys:
        return await self._run(
            self._backend.crypto_kx_client_session_keys,
            client_public_key,
            client_secret_key,
            server_public_key,
        )

    async def crypto_kx_server_session_keys(
        self,
        server_public_key: X25519PublicKey,
        server_secret_key: X25519SecretKey,
        client_public_key: X25519PublicKey,
    ) -> SessionKeys:
        return await self._run(
            self._backend.crypto_kx_server_session_keys,
            server_public_key,
            server_secret_key,
            client_public_key,
        )

    async def crypto_kx_keypair(self) -> X25519KeyPair:
        return await self._run(self._backend.crypto_kx_keypair)

    async def crypto_kx_seed_keypair(self, seed: BytesLike) -> X25519KeyPair:
        return await self._run(self._backend.crypto_kx_seed_keypair, to_bytes(seed))

    async def crypto_scalarmult(
        self, secret_key: X25519SecretKey, public_key: X25519PublicKey
    ) -> SymmetricKey:
        return await self._run(self._backend.crypto_scalarmult, secret_key, public_key)

    async def crypto_scalarmult_base(self, secret_key: X25519SecretKey) -> X25519PublicKey:
        return await self._run(self._backend.crypto_scalarmult_base, secret_key)

    # Password hashing

    async def crypto_pwhash(
        self,
        length: int,
        password: BytesLike,
        salt: BytesLike,
        opslimit: int,
        memlimit: int,
        algorithm: int = constants.PWHASH_ALG_DEFAULT,
    ) -> bytes:
        return await self._run(
            self._backend.crypto_pwhash,
            length,
            to_bytes(password),
            to_bytes(salt),
            opslimit,
            memlimit,
            algorithm,
        )

    async def crypto_pwhash_str(
        self,
        password: BytesLike,
        opslimit: int,
        memlimit: int,
        algorithm: int = constants.PWHASH_ALG_DEFAULT,
    ) -> str:
        return await self._run(
            self._backend.crypto_pwhash_str, to_bytes(password), opslimit, memlimit, algorithm
        )

    async def crypto_pwhash_str_verify(self, password: BytesLike, hash_str: str) -> bool:
        return await self._run(
            self._backend.crypto_pwhash_str_verify, to_bytes(password), hash_str
        )

    async def crypto_pwhash_str_needs_rehash(
        self, hash_str: str, opslimit: int, memlimit: int
    ) -> bool:
        return await self._run(
            self._backend.crypto_pwhash_str_needs_rehash, hash_str, opslimit, memlimit
        )

    # Signatures

    async def crypto_sign(self, message: BytesLike, secret_key: Ed25519SecretKey) -> bytes:
        return await self._run(self._backend.crypto_sign, to_bytes(message), secret_key)

    async def crypto_sign_open(self, signed: BytesLike, public_key: Ed25519PublicKey) -> bytes:
        return await self._run(self._backend.crypto_sign_open, to_bytes(signed), public_key)

    async def crypto_sign_detached(
        self, message: BytesLike, secret_key: Ed25519SecretKey
    ) -> bytes:
        return await self._run(self._backend.crypto_sign_detached, to_bytes(message), secret_key)

    async def crypto_sign_verify_detached(
        self, message: BytesLike, public_key: Ed25519PublicKey, signature: BytesLike
    ) -> bool:
        return await self._run(
            self._backend.crypto_sign_verify_detached,
            to_bytes(message),
            public_key,
            to_bytes(signature),
        )

    async def crypto_sign_keypair(self) -> Ed25519KeyPair:
        return await self._run(self._backend.crypto_sign_keypair)

    async def crypto_sign_seed_keypair(self, seed: BytesLike) -> Ed25519KeyPair:
        return await self._run(self._backend.crypto_sign_seed_keypair, to_bytes(seed))

    async def crypto_sign_publickey_from_secretkey(
        self, secret_key: Ed25519SecretKey
    ) -> Ed25519PublicKey:
        return await self._run(self._backend.crypto_sign_publickey_from_secretkey, secret_key)

    async def crypto_sign_ed25519_sk_to_curve25519(
        self, secret_key: Ed25519SecretKey
    ) -> X25519SecretKey:
        return await self._run(self._backend.crypto_sign_ed25519_sk_to_curve25519, secret_key)

    async def crypto_sign_ed25519_pk_to_curve25519(
        self, public_key: Ed25519PublicKey
    ) -> X25519PublicKey:
        return await self._run(self._backend.crypto_sign_ed25519_pk_to_curve25519, public_key)

    # Stream cipher

    async def crypto_stream(self, length: int, nonce: BytesLike, key: SymmetricKey) -> bytes:
        return await self._run(self._backend.crypto_stream, length, to_bytes(nonce), key)

    async def crypto_stream_xor(
        self, plaintext: BytesLike, nonce: BytesLike, key: SymmetricKey
    ) -> bytes:
        return await self._run(
            self._backend.crypto_stream_xor, to_bytes(plaintext), to_bytes(nonce), key
        )

    async def crypto_stream_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_stream_keygen)

    # Streaming AEAD

    async def crypto_secretstream_xchacha20poly1305_init_push(
        self, key: SymmetricKey
    ) -> tuple[SecretStreamState, bytes]:
        """Start a sending stream. Returns the fresh state and the header to transmit."""
        state = SecretStreamState()
        header = await self._run(
            self._backend.crypto_secretstream_xchacha20poly1305_init_push, state, key
        )
        return state, header

    async def crypto_secretstream_xchacha20poly1305_init_pull(
        self, header: BytesLike, key: SymmetricKey
    ) -> SecretStreamState:
        """Start a receiving stream from the sender's header."""
        return await self._run(
            self._backend.crypto_secretstream_xchacha20poly1305_init_pull,
            SecretStreamState(),
            to_bytes(header),
            key,
        )

    async def crypto_secretstream_xchacha20poly1305_push(
        self,
        state: SecretStreamState,
        message: BytesLike,
        assoc_data: BytesLike = b"",
        tag: SecretStreamTag = SecretStreamTag.MESSAGE,
    ) -> bytes:
        return await self._run(
            self._backend.crypto_secretstream_xchacha20poly1305_push,
            state,
            to_bytes(message),
            to_bytes(assoc_data),
            tag,
        )

    async def crypto_secretstream_xchacha20poly1305_pull(
        self,
        state: SecretStreamState,
        ciphertext: BytesLike,
        assoc_data: BytesLike = b"",
    ) -> tuple[bytes, SecretStreamTag]:
        return await self._run(
            self._backend.crypto_secretstream_xchacha20poly1305_pull,
            state,
            to_bytes(ciphertext),
            to_bytes(assoc_data),
        )

    async def crypto_secretstream_xchacha20poly1305_rekey(self, state: SecretStreamState) -> None:
        await self._run(self._backend.crypto_secretstream_xchacha20poly1305_rekey, state)

    async def crypto_secretstream_xchacha20poly1305_keygen(self) -> SymmetricKey:
        return await self._run(self._backend.crypto_secretstream_xchacha20poly1305_keygen)

    # Randomness

    async def randombytes_buf(self, num: int) -> bytes:
        return await self._run(self._backend.randombytes_buf, num)

    async def randombytes_uniform(self, upper_bound: int) -> int:
        return await self._run(self._backend.randombytes_uniform, upper_bound)

    # Buffer utilities

    async def sodium_add(self, a: BytesLike, b: BytesLike) -> bytes:
        return await self._run(self._backend.sodium_add, to_bytes(a), to_bytes(b))

    async def sodium_compare(self, a: BytesLike, b: BytesLike) -> int:
        return await self._run(self._backend.sodium_compare, to_bytes(a), to_bytes(b))

    async def sodium_increment(self, value: BytesLike) -> bytes:
        return await self._run(self._backend.sodium_increment, to_bytes(value))

    async def sodium_is_zero(self, buf: BytesLike) -> bool:
        return await self._run(self._backend.sodium_is_zero, to_bytes(buf))

    async def sodium_memcmp(self, a: BytesLike, b: BytesLike) -> bool:
        return await self._run(self._backend.sodium_memcmp, to_bytes(a), to_bytes(b))

    async def sodium_memzero(self, buf: bytearray | CryptographyKey) -> None:
        """Zero `buf` in place. It is not copied, so the caller's object is cleared."""
        await self._run(self._backend.sodium_memzero, buf)

    async def sodium_pad(self, unpadded: BytesLike, block_size: int) -> bytes:
        return await self._run(self._backend.sodium_pad, to_bytes(unpadded), block_size)

    async def sodium_unpad(self, padded: BytesLike, block_size: int) -> bytes:
        return await self._run(self._backend.sodium_unpad, to_bytes(padded), block_size)
