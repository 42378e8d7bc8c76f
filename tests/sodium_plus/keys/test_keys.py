"""Tests for the typed key hierarchy."""

from __future__ import annotations

import pytest

from sodium_plus.exceptions import InvalidArgument, InvalidKeyLength
from sodium_plus.keys import (
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

ALL_VARIANTS: list[tuple[type[CryptographyKey], int]] = [
    (SymmetricKey, 32),
    (Ed25519SecretKey, 64),
    (Ed25519PublicKey, 32),
    (X25519SecretKey, 32),
    (X25519PublicKey, 32),
]


class TestConstruction:
    """Construction-time length validation."""

    @pytest.mark.parametrize(("key_type", "length"), ALL_VARIANTS)
    def test_accepts_exact_length(self, key_type: type[CryptographyKey], length: int) -> None:
        """Material of the declared length is accepted and stored unchanged."""
        material = bytes(range(length))
        key = key_type(material)
        assert key.get_bytes() == material
        assert len(key) == length

    @pytest.mark.parametrize(("key_type", "length"), ALL_VARIANTS)
    @pytest.mark.parametrize("delta", [-1, 1])
    def test_rejects_wrong_length(
        self, key_type: type[CryptographyKey], length: int, delta: int
    ) -> None:
        """One byte too short or too long is rejected with the lengths attached."""
        with pytest.raises(InvalidKeyLength) as exc_info:
            key_type(bytes(length + delta))

        assert exc_info.value.type_name == key_type.__name__
        assert exc_info.value.expected == length
        assert exc_info.value.actual == length + delta

    def test_invalid_key_length_is_invalid_argument(self) -> None:
        """Callers catching InvalidArgument also see key length errors."""
        with pytest.raises(InvalidArgument):
            X25519PublicKey(b"short")

    def test_base_class_cannot_be_instantiated(self) -> None:
        """The abstract base declares no length."""
        with pytest.raises(TypeError, match="must define LENGTH"):
            CryptographyKey(bytes(32))

    def test_input_is_copied(self) -> None:
        """Mutating the caller's buffer after construction does not affect the key."""
        source = bytearray(32)
        key = SymmetricKey(source)
        source[0] = 0xFF
        assert key.get_bytes() == bytes(32)

    def test_get_bytes_returns_a_copy(self) -> None:
        """The stored material is never handed out by reference."""
        key = SymmetricKey(bytes(32))
        assert key.get_bytes() is not key.get_bytes()

    def test_rejects_non_buffer_material(self) -> None:
        """Only text and byte buffers are accepted as material."""
        with pytest.raises(TypeError):
            SymmetricKey(32)  # type: ignore[arg-type]


class TestSymmetricKeyLength:
    """Variable-length symmetric keys."""

    @pytest.mark.parametrize("length", [16, 24, 32, 48, 64])
    def test_custom_length(self, length: int) -> None:
        """Any length in [16, 64] can be requested."""
        key = SymmetricKey(bytes(length), length=length)
        assert len(key) == length

    @pytest.mark.parametrize("length", [0, 15, 65, 128])
    def test_custom_length_out_of_range(self, length: int) -> None:
        """Lengths outside [16, 64] are rejected before looking at the material."""
        with pytest.raises(InvalidArgument, match="SymmetricKey length must be in"):
            SymmetricKey(bytes(length), length=length)

    def test_custom_length_must_match_material(self) -> None:
        """The requested length is enforced against the material."""
        with pytest.raises(InvalidKeyLength):
            SymmetricKey(bytes(32), length=16)


class TestCapabilities:
    """Capability predicates are fixed per variant."""

    @pytest.mark.parametrize(
        ("key", "public", "ed25519", "x25519"),
        [
            (SymmetricKey(bytes(32)), False, False, False),
            (Ed25519SecretKey(bytes(64)), False, True, False),
            (Ed25519PublicKey(bytes(32)), True, True, False),
            (X25519SecretKey(bytes(32)), False, False, True),
            (X25519PublicKey(bytes(32)), True, False, True),
        ],
    )
    def test_predicates(
        self, key: CryptographyKey, public: bool, ed25519: bool, x25519: bool
    ) -> None:
        """Each variant answers the capability queries the same way every time."""
        assert key.is_public_key() is public
        assert key.is_ed25519_key() is ed25519
        assert key.is_signing_key() is ed25519
        assert key.is_x25519_key() is x25519
        assert key.is_key_exchange_key() is x25519

    def test_predicates_ignore_content(self) -> None:
        """Content never changes the answers."""
        assert X25519PublicKey(b"\xff" * 32).is_public_key()
        assert X25519PublicKey(bytes(32)).is_public_key()


class TestWipe:
    """Explicit zeroization."""

    def test_wipe_blocks_further_use(self) -> None:
        """A wiped key refuses to hand out material."""
        key = SymmetricKey(b"\x01" * 32)
        key.wipe()
        assert key.is_wiped
        with pytest.raises(InvalidArgument, match="has been wiped"):
            key.get_bytes()

    def test_wipe_zeroes_storage(self) -> None:
        """The internal buffer is overwritten with zeros."""
        key = SymmetricKey(b"\x01" * 32)
        key.wipe()
        assert key._material == bytearray(32)

    def test_context_manager_wipes_on_exit(self) -> None:
        """Leaving a `with` block wipes the key."""
        with X25519SecretKey(b"\x07" * 32) as key:
            assert key.get_bytes() == b"\x07" * 32
        assert key.is_wiped

    def test_context_manager_wipes_on_error(self) -> None:
        """The key is wiped even when the block raises."""
        key = SymmetricKey(b"\x07" * 32)
        with pytest.raises(RuntimeError):
            with key:
                raise RuntimeError("boom")
        assert key.is_wiped

    def test_wipe_is_idempotent(self) -> None:
        """Wiping twice is harmless."""
        key = SymmetricKey(bytes(32))
        key.wipe()
        key.wipe()
        assert key.is_wiped


class TestEqualityAndRepr:
    """Comparison and display."""

    def test_equal_material_same_type(self) -> None:
        """Keys of the same variant with the same material are equal."""
        assert X25519PublicKey(b"\x01" * 32) == X25519PublicKey(b"\x01" * 32)

    def test_different_material(self) -> None:
        """Different material compares unequal."""
        assert SymmetricKey(b"\x01" * 32) != SymmetricKey(b"\x02" * 32)

    def test_different_types_never_equal(self) -> None:
        """Identical bytes in different variants are different keys."""
        assert X25519SecretKey(bytes(32)) != X25519PublicKey(bytes(32))
        assert SymmetricKey(bytes(32)) != X25519SecretKey(bytes(32))

    def test_keys_are_unhashable(self) -> None:
        """Keys are mutable through wipe, so they cannot be dict keys."""
        with pytest.raises(TypeError):
            hash(SymmetricKey(bytes(32)))

    def test_secret_repr_is_redacted(self) -> None:
        """Secret material never appears in repr."""
        key = Ed25519SecretKey(b"\xab" * 64)
        assert "ab" not in repr(key)
        assert repr(key) == "Ed25519SecretKey(<redacted>)"

    def test_public_repr_shows_hex(self) -> None:
        """Public keys are safe to display."""
        key = Ed25519PublicKey(b"\xab" * 32)
        assert repr(key) == f"Ed25519PublicKey({'ab' * 32})"

    def test_wiped_repr(self) -> None:
        """Wiped keys say so."""
        key = X25519PublicKey(bytes(32))
        key.wipe()
        assert repr(key) == "X25519PublicKey(<wiped>)"


class TestBundles:
    """Key pairs and session keys."""

    def test_x25519_pair_fields(self) -> None:
        """Pairs unpack as (secret, public)."""
        sk, pk = X25519KeyPair(X25519SecretKey(bytes(32)), X25519PublicKey(b"\x01" * 32))
        assert isinstance(sk, X25519SecretKey)
        assert isinstance(pk, X25519PublicKey)

    def test_ed25519_pair_fields(self) -> None:
        """Named access matches positional order."""
        pair = Ed25519KeyPair(Ed25519SecretKey(bytes(64)), Ed25519PublicKey(bytes(32)))
        assert pair.secret_key is pair[0]
        assert pair.public_key is pair[1]

    def test_session_keys_order(self) -> None:
        """Session keys unpack as (rx, tx)."""
        rx, tx = SessionKeys(SymmetricKey(b"\x01" * 32), SymmetricKey(b"\x02" * 32))
        assert rx.get_bytes() == b"\x01" * 32
        assert tx.get_bytes() == b"\x02" * 32
