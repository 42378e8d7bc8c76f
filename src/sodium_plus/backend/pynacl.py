"""
Backend over PyNaCl's libsodium bindings.

Most primitives map one-to-one onto `nacl.bindings`. PyNaCl does not bind
`crypto_auth`, `crypto_onetimeauth`, `crypto_kdf` or `crypto_stream`; those
are built from the same constructions libsodium uses:

- `crypto_auth`: HMAC-SHA-512 truncated to 32 bytes.
- `crypto_onetimeauth`: Poly1305 from `cryptography`.
- `crypto_kdf_derive_from_key`: keyed BLAKE2b with the subkey id as salt
  and the context as personalisation.
- `crypto_stream`: ChaCha20 (IETF, 12-byte nonce) from `cryptography`.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import struct

import argon2
import nacl.bindings as sodium
import nacl.exceptions as nacl_exc
from argon2.exceptions import InvalidHashError
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from cryptography.hazmat.primitives.poly1305 import Poly1305
from typing_extensions import Self

from ..exceptions import (
    BackendUnavailable,
    DecryptionFailed,
    InvalidArgument,
    InvalidCiphertextSize,
    InvalidHeaderLength,
    InvalidPadding,
    InvalidState,
    SignatureInvalid,
)
from ..keys import (
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
from ..state import GenericHashState, HashStatus, SecretStreamState, StreamStatus
from . import constants
from .base import Backend, require_key, require_length

logger = logging.getLogger(__name__)


def _x25519_pair(public_key: bytes, secret_key: bytes) -> X25519KeyPair:
    return X25519KeyPair(X25519SecretKey(secret_key), X25519PublicKey(public_key))


def _ed25519_pair(public_key: bytes, secret_key: bytes) -> Ed25519KeyPair:
    return Ed25519KeyPair(Ed25519SecretKey(secret_key), Ed25519PublicKey(public_key))


def _check_output_length(length: int, low: int, high: int, name: str) -> None:
    if not low <= length <= high:
        raise InvalidArgument(f"{name} must be in [{low}, {high}], got {length}")


class PyNaclBackend(Backend):
    """Primitive provider backed by PyNaCl (bundled libsodium)."""

    backend_name = "pynacl"

    @classmethod
    def init(cls) -> Self:
        try:
            sodium.sodium_init()
        except nacl_exc.RuntimeError as exc:
            raise BackendUnavailable(cls.backend_name, str(exc)) from exc
        logger.info("Initialized %s backend", cls.backend_name)
        return cls()

    # Authenticated encryption

    def crypto_aead_xchacha20poly1305_ietf_encrypt(
        self, plaintext: bytes, assoc_data: bytes, nonce: bytes, key: SymmetricKey
    ) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.AEAD_XCHACHA20POLY1305_KEYBYTES)
        require_length(nonce, constants.AEAD_XCHACHA20POLY1305_NPUBBYTES, "nonce")
        return sodium.crypto_aead_xchacha20poly1305_ietf_encrypt(
            plaintext, assoc_data or None, nonce, k
        )

    def crypto_aead_xchacha20poly1305_ietf_decrypt(
        self, ciphertext: bytes, assoc_data: bytes, nonce: bytes, key: SymmetricKey
    ) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.AEAD_XCHACHA20POLY1305_KEYBYTES)
        require_length(nonce, constants.AEAD_XCHACHA20POLY1305_NPUBBYTES, "nonce")
        if len(ciphertext) < constants.AEAD_XCHACHA20POLY1305_ABYTES:
            raise DecryptionFailed("Ciphertext is shorter than the authentication tag")
        try:
            return sodium.crypto_aead_xchacha20poly1305_ietf_decrypt(
                ciphertext, assoc_data or None, nonce, k
            )
        except nacl_exc.CryptoError as exc:
            raise DecryptionFailed("Decryption failed") from exc

    def crypto_secretbox(self, plaintext: bytes, nonce: bytes, key: SymmetricKey) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.SECRETBOX_KEYBYTES)
        require_length(nonce, constants.SECRETBOX_NONCEBYTES, "nonce")
        return sodium.crypto_secretbox_easy(plaintext, nonce, k)

    def crypto_secretbox_open(self, ciphertext: bytes, nonce: bytes, key: SymmetricKey) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.SECRETBOX_KEYBYTES)
        require_length(nonce, constants.SECRETBOX_NONCEBYTES, "nonce")
        if len(ciphertext) < constants.SECRETBOX_MACBYTES:
            raise DecryptionFailed("Ciphertext is shorter than the authentication tag")
        try:
            return sodium.crypto_secretbox_open_easy(ciphertext, nonce, k)
        except nacl_exc.CryptoError as exc:
            raise DecryptionFailed("Decryption failed") from exc

    def crypto_box(
        self,
        plaintext: bytes,
        nonce: bytes,
        secret_key: X25519SecretKey,
        public_key: X25519PublicKey,
    ) -> bytes:
        sk = require_key(secret_key, X25519SecretKey, "secret_key")
        pk = require_key(public_key, X25519PublicKey, "public_key")
        require_length(nonce, constants.BOX_NONCEBYTES, "nonce")
        try:
            return sodium.crypto_box_easy(plaintext, nonce, pk, sk)
        except nacl_exc.RuntimeError as exc:
            # Low-order public key: the shared secret would be all zeros.
            raise InvalidArgument("Public key is not usable for key agreement") from exc

    def crypto_box_open(
        self,
        ciphertext: bytes,
        nonce: bytes,
        secret_key: X25519SecretKey,
        public_key: X25519PublicKey,
    ) -> bytes:
        sk = require_key(secret_key, X25519SecretKey, "secret_key")
        pk = require_key(public_key, X25519PublicKey, "public_key")
        require_length(nonce, constants.BOX_NONCEBYTES, "nonce")
        if len(ciphertext) < constants.BOX_MACBYTES:
            raise DecryptionFailed("Ciphertext is shorter than the authentication tag")
        try:
            return sodium.crypto_box_open_easy(ciphertext, nonce, pk, sk)
        except nacl_exc.CryptoError as exc:
            raise DecryptionFailed("Decryption failed") from exc

    def crypto_box_seal(self, plaintext: bytes, public_key: X25519PublicKey) -> bytes:
        pk = require_key(public_key, X25519PublicKey, "public_key")
        try:
            return sodium.crypto_box_seal(plaintext, pk)
        except nacl_exc.RuntimeError as exc:
            raise InvalidArgument("Public key is not usable for key agreement") from exc

    def crypto_box_seal_open(
        self, ciphertext: bytes, public_key: X25519PublicKey, secret_key: X25519SecretKey
    ) -> bytes:
        pk = require_key(public_key, X25519PublicKey, "public_key")
        sk = require_key(secret_key, X25519SecretKey, "secret_key")
        if len(ciphertext) < constants.BOX_SEALBYTES:
            raise DecryptionFailed("Ciphertext is shorter than the sealed box overhead")
        try:
            return sodium.crypto_box_seal_open(ciphertext, pk, sk)
        except nacl_exc.CryptoError as exc:
            raise DecryptionFailed("Decryption failed") from exc

    # Message authentication

    def crypto_auth(self, message: bytes, key: SymmetricKey) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.AUTH_KEYBYTES)
        return hmac.new(k, message, hashlib.sha512).digest()[: constants.AUTH_BYTES]

    def crypto_auth_verify(self, mac: bytes, message: bytes, key: SymmetricKey) -> bool:
        require_length(mac, constants.AUTH_BYTES, "mac")
        return hmac.compare_digest(self.crypto_auth(message, key), mac)

    def crypto_onetimeauth(self, message: bytes, key: SymmetricKey) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.ONETIMEAUTH_KEYBYTES)
        return Poly1305.generate_tag(k, message)

    def crypto_onetimeauth_verify(self, message: bytes, key: SymmetricKey, tag: bytes) -> bool:
        k = require_key(key, SymmetricKey, "key", constants.ONETIMEAUTH_KEYBYTES)
        require_length(tag, constants.ONETIMEAUTH_BYTES, "tag")
        try:
            Poly1305.verify_tag(k, message, tag)
        except InvalidSignature:
            return False
        return True

    # Hashing and derivation

    def _generichash_key(self, key: SymmetricKey | None) -> bytes:
        if key is None:
            return b""
        # Any SymmetricKey length (16..64) is a valid BLAKE2b key.
        return require_key(key, SymmetricKey, "key")

    def crypto_generichash(
        self,
        message: bytes,
        key: SymmetricKey | None = None,
        output_length: int = constants.GENERICHASH_BYTES,
    ) -> bytes:
        k = self._generichash_key(key)
        _check_output_length(
            output_length,
            constants.GENERICHASH_BYTES_MIN,
            constants.GENERICHASH_BYTES_MAX,
            "output_length",
        )
        return sodium.crypto_generichash_blake2b_salt_personal(
            message, digest_size=output_length, key=k
        )

    def crypto_generichash_init(
        self,
        key: SymmetricKey | None = None,
        output_length: int = constants.GENERICHASH_BYTES,
    ) -> GenericHashState:
        k = self._generichash_key(key)
        _check_output_length(
            output_length,
            constants.GENERICHASH_BYTES_MIN,
            constants.GENERICHASH_BYTES_MAX,
            "output_length",
        )
        raw = sodium.crypto_generichash_blake2b_init(key=k, digest_size=output_length)
        return GenericHashState(output_length=output_length, raw=raw)

    def crypto_generichash_update(self, state: GenericHashState, chunk: bytes) -> GenericHashState:
        with state.exclusive("update"):
            state.require_open("update")
            sodium.crypto_generichash_blake2b_update(state.raw, chunk)
            state.status = HashStatus.UPDATING
        return state

    def crypto_generichash_final(
        self, state: GenericHashState, output_length: int | None = None
    ) -> bytes:
        with state.exclusive("final"):
            state.require_open("final")
            if output_length is not None and output_length != state.output_length:
                raise InvalidArgument(
                    f"output_length {output_length} differs from the "
                    f"{state.output_length} bytes chosen at init"
                )
            digest = sodium.crypto_generichash_blake2b_final(state.raw)
            state.status = HashStatus.FINALIZED
            state.raw = None
        return digest

    def crypto_shorthash(self, message: bytes, key: SymmetricKey) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.SHORTHASH_KEYBYTES)
        return sodium.crypto_shorthash_siphash24(message, k)

    def crypto_kdf_derive_from_key(
        self, length: int, subkey_id: int, context: bytes, key: SymmetricKey
    ) -> SymmetricKey:
        k = require_key(key, SymmetricKey, "key", constants.KDF_KEYBYTES)
        _check_output_length(length, constants.KDF_BYTES_MIN, constants.KDF_BYTES_MAX, "length")
        if not 0 <= subkey_id <= constants.KDF_SUBKEY_ID_MAX:
            raise InvalidArgument(f"subkey_id must be in [0, 2**64 - 1], got {subkey_id}")
        require_length(context, constants.KDF_CONTEXTBYTES, "context")

        # Salt and personal are zero-padded to 16 bytes by the binding.
        subkey = sodium.crypto_generichash_blake2b_salt_personal(
            b"",
            digest_size=length,
            key=k,
            salt=struct.pack("<Q", subkey_id),
            person=context,
        )
        return SymmetricKey(subkey, length=length)

    # Key exchange

    def crypto_kx_client_session_keys(
        self,
        client_public_key: X25519PublicKey,
        client_secret_key: X25519SecretKey,
        server_public_key: X25519PublicKey,
    ) -> SessionKeys:
        cpk = require_key(client_public_key, X25519PublicKey, "client_public_key")
        csk = require_key(client_secret_key, X25519SecretKey, "client_secret_key")
        spk = require_key(server_public_key, X25519PublicKey, "server_public_key")
        try:
            rx, tx = sodium.crypto_kx_client_session_keys(cpk, csk, spk)
        except nacl_exc.CryptoError as exc:
            raise InvalidArgument("Server public key is not usable for key exchange") from exc
        return SessionKeys(SymmetricKey(rx), SymmetricKey(tx))

    def crypto_kx_server_session_keys(
        self,
        server_public_key: X25519PublicKey,
        server_secret_key: X25519SecretKey,
        client_public_key: X25519PublicKey,
    ) -> SessionKeys:
        spk = require_key(server_public_key, X25519PublicKey, "server_public_key")
        ssk = require_key(server_secret_key, X25519SecretKey, "server_secret_key")
        cpk = require_key(client_public_key, X25519PublicKey, "client_public_key")
        try:
            rx, tx = sodium.crypto_kx_server_session_keys(spk, ssk, cpk)
        except nacl_exc.CryptoError as exc:
            raise InvalidArgument("Client public key is not usable for key exchange") from exc
        return SessionKeys(SymmetricKey(rx), SymmetricKey(tx))

    def crypto_kx_keypair(self) -> X25519KeyPair:
        return _x25519_pair(*sodium.crypto_kx_keypair())

    def crypto_kx_seed_keypair(self, seed: bytes) -> X25519KeyPair:
        require_length(seed, constants.KX_SEEDBYTES, "seed")
        return _x25519_pair(*sodium.crypto_kx_seed_keypair(seed))

    def crypto_scalarmult(
        self, secret_key: X25519SecretKey, public_key: X25519PublicKey
    ) -> SymmetricKey:
        sk = require_key(secret_key, X25519SecretKey, "secret_key")
        pk = require_key(public_key, X25519PublicKey, "public_key")
        try:
            shared = sodium.crypto_scalarmult(sk, pk)
        except nacl_exc.RuntimeError as exc:
            raise InvalidArgument("Public key is a low-order point") from exc
        return SymmetricKey(shared)

    def crypto_scalarmult_base(self, secret_key: X25519SecretKey) -> X25519PublicKey:
        sk = require_key(secret_key, X25519SecretKey, "secret_key")
        return X25519PublicKey(sodium.crypto_scalarmult_base(sk))

    # Password hashing
    #
    # Limits and algorithm ids go to libsodium unchanged; it alone decides
    # what is acceptable.

    def crypto_pwhash(
        self,
        length: int,
        password: bytes,
        salt: bytes,
        opslimit: int,
        memlimit: int,
        algorithm: int = constants.PWHASH_ALG_DEFAULT,
    ) -> bytes:
        require_length(salt, constants.PWHASH_SALTBYTES, "salt")
        if length < constants.PWHASH_BYTES_MIN:
            raise InvalidArgument(f"length must be at least {constants.PWHASH_BYTES_MIN}")
        try:
            return sodium.crypto_pwhash_alg(length, password, salt, opslimit, memlimit, algorithm)
        except nacl_exc.CryptoError as exc:
            raise InvalidArgument(f"Password hashing rejected its parameters: {exc}") from exc

    def crypto_pwhash_str(
        self,
        password: bytes,
        opslimit: int,
        memlimit: int,
        algorithm: int = constants.PWHASH_ALG_DEFAULT,
    ) -> str:
        try:
            encoded = sodium.crypto_pwhash_str_alg(password, opslimit, memlimit, algorithm)
        except nacl_exc.CryptoError as exc:
            raise InvalidArgument(f"Password hashing rejected its parameters: {exc}") from exc
        return encoded.decode("ascii")

    def crypto_pwhash_str_verify(self, password: bytes, hash_str: str) -> bool:
        try:
            return sodium.crypto_pwhash_str_verify(hash_str.encode("ascii"), password)
        except nacl_exc.InvalidkeyError:
            return False
        except nacl_exc.ValueError as exc:
            raise InvalidArgument(f"Malformed password hash: {exc}") from exc

    def crypto_pwhash_str_needs_rehash(self, hash_str: str, opslimit: int, memlimit: int) -> bool:
        try:
            params = argon2.extract_parameters(hash_str)
        except InvalidHashError as exc:
            raise InvalidArgument("Malformed password hash") from exc
        # memory_cost is stored in KiB.
        return params.time_cost < opslimit or params.memory_cost * 1024 < memlimit

    # Signatures

    def crypto_sign(self, message: bytes, secret_key: Ed25519SecretKey) -> bytes:
        sk = require_key(secret_key, Ed25519SecretKey, "secret_key")
        return sodium.crypto_sign(message, sk)

    def crypto_sign_open(self, signed: bytes, public_key: Ed25519PublicKey) -> bytes:
        pk = require_key(public_key, Ed25519PublicKey, "public_key")
        if len(signed) < constants.SIGN_BYTES:
            raise SignatureInvalid("Signed message is shorter than a signature")
        try:
            return sodium.crypto_sign_open(signed, pk)
        except nacl_exc.BadSignatureError as exc:
            raise SignatureInvalid("Signature verification failed") from exc

    def crypto_sign_detached(self, message: bytes, secret_key: Ed25519SecretKey) -> bytes:
        return self.crypto_sign(message, secret_key)[: constants.SIGN_BYTES]

    def crypto_sign_verify_detached(
        self, message: bytes, public_key: Ed25519PublicKey, signature: bytes
    ) -> bool:
        pk = require_key(public_key, Ed25519PublicKey, "public_key")
        require_length(signature, constants.SIGN_BYTES, "signature")
        try:
            sodium.crypto_sign_open(signature + message, pk)
        except nacl_exc.BadSignatureError:
            return False
        return True

    def crypto_sign_ed25519_sk_to_curve25519(self, secret_key: Ed25519SecretKey) -> X25519SecretKey:
        sk = require_key(secret_key, Ed25519SecretKey, "secret_key")
        return X25519SecretKey(sodium.crypto_sign_ed25519_sk_to_curve25519(sk))

    def crypto_sign_ed25519_pk_to_curve25519(self, public_key: Ed25519PublicKey) -> X25519PublicKey:
        pk = require_key(public_key, Ed25519PublicKey, "public_key")
        try:
            return X25519PublicKey(sodium.crypto_sign_ed25519_pk_to_curve25519(pk))
        except nacl_exc.RuntimeError as exc:
            raise InvalidArgument("Public key is not a valid Ed25519 point") from exc

    def crypto_sign_publickey_from_secretkey(
        self, secret_key: Ed25519SecretKey
    ) -> Ed25519PublicKey:
        sk = require_key(secret_key, Ed25519SecretKey, "secret_key")
        return Ed25519PublicKey(sodium.crypto_sign_ed25519_sk_to_pk(sk))

    # Key pairs

    def crypto_box_keypair(self) -> X25519KeyPair:
        return _x25519_pair(*sodium.crypto_box_keypair())

    def crypto_box_seed_keypair(self, seed: bytes) -> X25519KeyPair:
        require_length(seed, constants.BOX_SEEDBYTES, "seed")
        return _x25519_pair(*sodium.crypto_box_seed_keypair(seed))

    def crypto_sign_keypair(self) -> Ed25519KeyPair:
        return _ed25519_pair(*sodium.crypto_sign_keypair())

    def crypto_sign_seed_keypair(self, seed: bytes) -> Ed25519KeyPair:
        require_length(seed, constants.SIGN_SEEDBYTES, "seed")
        return _ed25519_pair(*sodium.crypto_sign_seed_keypair(seed))

    # Stream cipher

    def _chacha20(self, data: bytes, nonce: bytes, key: SymmetricKey) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.STREAM_KEYBYTES)
        require_length(nonce, constants.STREAM_NONCEBYTES, "nonce")
        # cryptography takes a 16-byte nonce: 32-bit block counter, then the IETF nonce.
        cipher = Cipher(algorithms.ChaCha20(k, bytes(4) + nonce), mode=None)
        encryptor = cipher.encryptor()
        return encryptor.update(data) + encryptor.finalize()

    def crypto_stream(self, length: int, nonce: bytes, key: SymmetricKey) -> bytes:
        if length < 0:
            raise InvalidArgument(f"length must not be negative, got {length}")
        return self._chacha20(bytes(length), nonce, key)

    def crypto_stream_xor(self, plaintext: bytes, nonce: bytes, key: SymmetricKey) -> bytes:
        return self._chacha20(plaintext, nonce, key)

    # Streaming AEAD

    def crypto_secretstream_xchacha20poly1305_init_push(
        self, state: SecretStreamState, key: SymmetricKey
    ) -> bytes:
        k = require_key(key, SymmetricKey, "key", constants.SECRETSTREAM_KEYBYTES)
        with state.exclusive("init_push"):
            state.require(StreamStatus.UNINITIALIZED, "init_push")
            raw = sodium.crypto_secretstream_xchacha20poly1305_state()
            header = sodium.crypto_secretstream_xchacha20poly1305_init_push(raw, k)
            state.raw = raw
            state.status = StreamStatus.PUSH_READY
        logger.debug("Initialized secretstream for pushing")
        return header

    def crypto_secretstream_xchacha20poly1305_init_pull(
        self, state: SecretStreamState, header: bytes, key: SymmetricKey
    ) -> SecretStreamState:
        k = require_key(key, SymmetricKey, "key", constants.SECRETSTREAM_KEYBYTES)
        if len(header) != constants.SECRETSTREAM_HEADERBYTES:
            raise InvalidHeaderLength(
                expected=constants.SECRETSTREAM_HEADERBYTES, actual=len(header)
            )
        with state.exclusive("init_pull"):
            state.require(StreamStatus.UNINITIALIZED, "init_pull")
            raw = sodium.crypto_secretstream_xchacha20poly1305_state()
            sodium.crypto_secretstream_xchacha20poly1305_init_pull(raw, header, k)
            state.raw = raw
            state.status = StreamStatus.PULL_READY
        logger.debug("Initialized secretstream for pulling")
        return state

    def crypto_secretstream_xchacha20poly1305_push(
        self,
        state: SecretStreamState,
        message: bytes,
        assoc_data: bytes = b"",
        tag: SecretStreamTag = SecretStreamTag.MESSAGE,
    ) -> bytes:
        try:
            tag = SecretStreamTag(tag)
        except ValueError as exc:
            raise InvalidArgument(f"Unknown secretstream tag {tag!r}") from exc
        with state.exclusive("push"):
            state.require(StreamStatus.PUSH_READY, "push")
            ciphertext = sodium.crypto_secretstream_xchacha20poly1305_push(
                state.raw, message, assoc_data or None, int(tag)
            )
            state.message_count += 1
            if tag is SecretStreamTag.FINAL:
                state.final_seen = True
        return ciphertext

    def crypto_secretstream_xchacha20poly1305_pull(
        self, state: SecretStreamState, ciphertext: bytes, assoc_data: bytes = b""
    ) -> tuple[bytes, SecretStreamTag]:
        if len(ciphertext) < constants.SECRETSTREAM_ABYTES:
            raise InvalidCiphertextSize(
                minimum=constants.SECRETSTREAM_ABYTES, actual=len(ciphertext)
            )
        with state.exclusive("pull"):
            state.require(StreamStatus.PULL_READY, "pull")
            try:
                message, raw_tag = sodium.crypto_secretstream_xchacha20poly1305_pull(
                    state.raw, ciphertext, assoc_data or None
                )
            except nacl_exc.RuntimeError as exc:
                raise DecryptionFailed("Stream chunk failed authentication") from exc
            tag = SecretStreamTag(raw_tag)
            state.message_count += 1
            if tag is SecretStreamTag.FINAL:
                state.final_seen = True
        return message, tag

    def crypto_secretstream_xchacha20poly1305_rekey(self, state: SecretStreamState) -> None:
        with state.exclusive("rekey"):
            if state.status is StreamStatus.UNINITIALIZED:
                raise InvalidState(state.status.name, "rekey")
            sodium.crypto_secretstream_xchacha20poly1305_rekey(state.raw)
        logger.debug("Rekeyed secretstream after %d chunks", state.message_count)

    # Randomness

    def randombytes_buf(self, num: int) -> bytes:
        if num < 0:
            raise InvalidArgument(f"num must not be negative, got {num}")
        return sodium.randombytes(num)

    # Buffer utilities

    def sodium_memcmp(self, a: bytes, b: bytes) -> bool:
        return sodium.sodium_memcmp(a, b)

    def sodium_increment(self, value: bytes) -> bytes:
        return sodium.sodium_increment(value)

    def sodium_add(self, a: bytes, b: bytes) -> bytes:
        if len(a) != len(b):
            raise InvalidArgument(f"Lengths differ: {len(a)} and {len(b)}")
        return sodium.sodium_add(a, b)

    def sodium_pad(self, unpadded: bytes, block_size: int) -> bytes:
        if block_size < 1:
            raise InvalidArgument(f"block_size must be positive, got {block_size}")
        return sodium.sodium_pad(unpadded, block_size)

    def sodium_unpad(self, padded: bytes, block_size: int) -> bytes:
        if block_size < 1:
            raise InvalidArgument(f"block_size must be positive, got {block_size}")
        try:
            return sodium.sodium_unpad(padded, block_size)
        except nacl_exc.CryptoError as exc:
            raise InvalidPadding("Invalid padding") from exc
