"""Tests for configuration and password hashing presets."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sodium_plus import config
from sodium_plus.backend.constants import (
    PWHASH_INTERACTIVE,
    PWHASH_MODERATE,
    PWHASH_SENSITIVE,
    PwhashLimits,
)
from sodium_plus.config import DEFAULT_BACKEND, SodiumPlusConfig, load_config


class TestSodiumPlusConfig:
    """Tests for the process-wide settings model."""

    def test_default_backend(self) -> None:
        """Without overrides the PyNaCl backend is selected."""
        assert SodiumPlusConfig().backend == DEFAULT_BACKEND == "pynacl"

    def test_backend_name_normalised(self) -> None:
        """Names are case-insensitive and trimmed."""
        assert SodiumPlusConfig(backend="  PyNaCl ").backend == "pynacl"

    def test_empty_backend_rejected(self) -> None:
        """A blank name is a configuration error."""
        with pytest.raises(ValidationError):
            SodiumPlusConfig(backend="   ")

    def test_frozen(self) -> None:
        """Settings cannot change after construction."""
        cfg = SodiumPlusConfig()
        with pytest.raises(ValidationError):
            cfg.backend = "other"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            SodiumPlusConfig(backend="pynacl", timeout=3)  # type: ignore[call-arg]

    def test_load_config_uses_environment_snapshot(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """load_config reflects the value captured from SODIUM_PLUS_BACKEND."""
        monkeypatch.setattr(config, "SODIUM_PLUS_BACKEND", "custom")
        assert load_config().backend == "custom"

    def test_load_config_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty environment value means the default backend."""
        monkeypatch.setattr(config, "SODIUM_PLUS_BACKEND", "")
        assert load_config().backend == DEFAULT_BACKEND


class TestPwhashLimits:
    """Tests for the Argon2id cost presets."""

    def test_presets_match_libsodium(self) -> None:
        """Preset values are libsodium's argon2id constants."""
        assert (PWHASH_INTERACTIVE.opslimit, PWHASH_INTERACTIVE.memlimit) == (2, 67108864)
        assert (PWHASH_MODERATE.opslimit, PWHASH_MODERATE.memlimit) == (3, 268435456)
        assert (PWHASH_SENSITIVE.opslimit, PWHASH_SENSITIVE.memlimit) == (4, 1073741824)

    def test_presets_increase_in_cost(self) -> None:
        """Each level is at least as expensive as the one before."""
        levels = [PWHASH_INTERACTIVE, PWHASH_MODERATE, PWHASH_SENSITIVE]
        for weaker, stronger in zip(levels, levels[1:], strict=False):
            assert weaker.opslimit < stronger.opslimit
            assert weaker.memlimit < stronger.memlimit

    @pytest.mark.parametrize(
        ("opslimit", "memlimit"),
        [(0, 8192), (1, 8191), (2**32, 8192)],
    )
    def test_out_of_range_limits_rejected(self, opslimit: int, memlimit: int) -> None:
        """Limits below libsodium's minimum are rejected at construction."""
        with pytest.raises(ValidationError):
            PwhashLimits(opslimit=opslimit, memlimit=memlimit)

    def test_immutable(self) -> None:
        """Presets are shared and cannot be modified."""
        with pytest.raises(ValidationError):
            PWHASH_INTERACTIVE.opslimit = 1  # type: ignore[misc]
