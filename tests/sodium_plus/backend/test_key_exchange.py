"""
Tests for key exchange, scalar multiplication and key pair generation.

Known-answer vectors from RFC 7748 Section 6.1.
"""

from __future__ import annotations

import pytest

from sodium_plus.backend.pynacl import PyNaclBackend
from sodium_plus.exceptions import InvalidArgument
from sodium_plus.keys import (
    Ed25519PublicKey,
    SymmetricKey,
    X25519KeyPair,
    X25519PublicKey,
    X25519SecretKey,
)

ALICE_SECRET = bytes.fromhex("77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a")
ALICE_PUBLIC = bytes.fromhex("8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a")
BOB_SECRET = bytes.fromhex("5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb")
BOB_PUBLIC = bytes.fromhex("de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f")
SHARED_SECRET = bytes.fromhex("4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742")


class TestScalarmult:
    """X25519 scalar multiplication."""

    def test_rfc7748_base_points(self, backend: PyNaclBackend) -> None:
        """Both RFC 7748 secret keys map to their published public keys."""
        alice = backend.crypto_scalarmult_base(X25519SecretKey(ALICE_SECRET))
        bob = backend.crypto_scalarmult_base(X25519SecretKey(BOB_SECRET))

        assert isinstance(alice, X25519PublicKey)
        assert alice.get_bytes() == ALICE_PUBLIC
        assert bob.get_bytes() == BOB_PUBLIC

    def test_rfc7748_shared_secret(self, backend: PyNaclBackend) -> None:
        """Both sides of the RFC 7748 exchange compute the published shared secret."""
        alice_view = backend.crypto_scalarmult(
            X25519SecretKey(ALICE_SECRET), X25519PublicKey(BOB_PUBLIC)
        )
        bob_view = backend.crypto_scalarmult(
            X25519SecretKey(BOB_SECRET), X25519PublicKey(ALICE_PUBLIC)
        )

        assert isinstance(alice_view, SymmetricKey)
        assert alice_view.get_bytes() == SHARED_SECRET
        assert alice_view == bob_view

    def test_low_order_point_rejected(self, backend: PyNaclBackend) -> None:
        """The all-zero point would give an all-zero secret and is refused."""
        with pytest.raises(InvalidArgument, match="low-order"):
            backend.crypto_scalarmult(X25519SecretKey(ALICE_SECRET), X25519PublicKey(bytes(32)))

    def test_box_publickey_from_secretkey(self, backend: PyNaclBackend) -> None:
        """Recomputing the public key gives the generated one."""
        sk, pk = backend.crypto_box_keypair()
        assert backend.crypto_box_publickey_from_secretkey(sk) == pk


class TestKx:
    """Client/server session key derivation."""

    def test_session_keys_pair_up(self, backend: PyNaclBackend) -> None:
        """The client's tx is the server's rx, and the other way round."""
        client_sk, client_pk = backend.crypto_kx_keypair()
        server_sk, server_pk = backend.crypto_kx_keypair()

        client = backend.crypto_kx_client_session_keys(client_pk, client_sk, server_pk)
        server = backend.crypto_kx_server_session_keys(server_pk, server_sk, client_pk)

        assert client.tx == server.rx
        assert client.rx == server.tx
        assert client.rx != client.tx

    def test_session_keys_are_symmetric_keys(self, backend: PyNaclBackend) -> None:
        """Session keys are 32-byte symmetric keys usable for encryption."""
        client_sk, client_pk = backend.crypto_kx_keypair()
        _, server_pk = backend.crypto_kx_keypair()
        rx, tx = backend.crypto_kx_client_session_keys(client_pk, client_sk, server_pk)

        for key in (rx, tx):
            assert isinstance(key, SymmetricKey)
            assert len(key) == 32

    def test_session_keys_drive_aead(self, backend: PyNaclBackend) -> None:
        """What the client sends with tx, the server reads with rx."""
        client_sk, client_pk = backend.crypto_kx_keypair()
        server_sk, server_pk = backend.crypto_kx_keypair()
        client = backend.crypto_kx_client_session_keys(client_pk, client_sk, server_pk)
        server = backend.crypto_kx_server_session_keys(server_pk, server_sk, client_pk)

        nonce = bytes(24)
        ciphertext = backend.crypto_aead_xchacha20poly1305_ietf_encrypt(
            b"ping", b"", nonce, client.tx
        )
        assert backend.crypto_aead_xchacha20poly1305_ietf_decrypt(
            ciphertext, b"", nonce, server.rx
        ) == b"ping"

    def test_argument_order_enforced_by_type(self, backend: PyNaclBackend) -> None:
        """Swapping the client's public and secret keys is caught."""
        client_sk, client_pk = backend.crypto_kx_keypair()
        _, server_pk = backend.crypto_kx_keypair()
        with pytest.raises(TypeError, match="client_public_key"):
            backend.crypto_kx_client_session_keys(
                client_sk, client_pk, server_pk  # type: ignore[arg-type]
            )

    def test_seed_keypair_deterministic(self, backend: PyNaclBackend) -> None:
        """Seeded kx key pairs are reproducible and self-consistent."""
        first = backend.crypto_kx_seed_keypair(b"\x05" * 32)
        second = backend.crypto_kx_seed_keypair(b"\x05" * 32)

        assert first.secret_key == second.secret_key
        assert first.public_key == second.public_key
        assert backend.crypto_scalarmult_base(first.secret_key) == first.public_key


class TestKeypairs:
    """Key pair generation."""

    def test_box_keypair_is_consistent(self, backend: PyNaclBackend) -> None:
        """The public half is the base-point multiple of the secret half."""
        pair = backend.crypto_box_keypair()
        assert isinstance(pair, X25519KeyPair)
        assert backend.crypto_scalarmult_base(pair.secret_key) == pair.public_key

    def test_box_keypairs_are_fresh(self, backend: PyNaclBackend) -> None:
        """Two calls never return the same secret key."""
        assert backend.crypto_box_keypair().secret_key != backend.crypto_box_keypair().secret_key

    def test_box_seed_keypair(self, backend: PyNaclBackend) -> None:
        """Seeded box key pairs are reproducible and self-consistent."""
        first = backend.crypto_box_seed_keypair(b"\x09" * 32)
        second = backend.crypto_box_seed_keypair(b"\x09" * 32)
        assert first.secret_key == second.secret_key
        assert backend.crypto_scalarmult_base(first.secret_key) == first.public_key

    def test_box_seed_length(self, backend: PyNaclBackend) -> None:
        """Seeds must be 32 bytes."""
        with pytest.raises(InvalidArgument):
            backend.crypto_box_seed_keypair(b"\x09" * 16)


class TestEd25519ToCurve25519:
    """Converting signing keys into key-exchange keys."""

    def test_converted_halves_match(self, backend: PyNaclBackend) -> None:
        """The converted secret key maps onto the converted public key."""
        sign_sk, sign_pk = backend.crypto_sign_keypair()

        x_sk = backend.crypto_sign_ed25519_sk_to_curve25519(sign_sk)
        x_pk = backend.crypto_sign_ed25519_pk_to_curve25519(sign_pk)

        assert isinstance(x_sk, X25519SecretKey)
        assert isinstance(x_pk, X25519PublicKey)
        assert backend.crypto_scalarmult_base(x_sk) == x_pk

    def test_converted_keys_can_box(self, backend: PyNaclBackend) -> None:
        """Converted keys work with box."""
        alice_sk, alice_pk = backend.crypto_sign_keypair()
        bob_sk, bob_pk = backend.crypto_sign_keypair()
        nonce = bytes(24)

        ciphertext = backend.crypto_box(
            b"converted",
            nonce,
            backend.crypto_sign_ed25519_sk_to_curve25519(alice_sk),
            backend.crypto_sign_ed25519_pk_to_curve25519(bob_pk),
        )
        plaintext = backend.crypto_box_open(
            ciphertext,
            nonce,
            backend.crypto_sign_ed25519_sk_to_curve25519(bob_sk),
            backend.crypto_sign_ed25519_pk_to_curve25519(alice_pk),
        )
        assert plaintext == b"converted"

    def test_conversion_produces_new_keys(self, backend: PyNaclBackend) -> None:
        """The source key is left untouched."""
        _, sign_pk = backend.crypto_sign_keypair()
        before = sign_pk.get_bytes()
        backend.crypto_sign_ed25519_pk_to_curve25519(sign_pk)
        assert sign_pk.get_bytes() == before
        assert isinstance(sign_pk, Ed25519PublicKey)
