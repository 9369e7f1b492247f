"""Tests for solver configuration."""

import dataclasses

import pytest

from floydkit.config import STRATEGIES, SolverConfig, default_config


class TestSolverConfig:
    """Tests for SolverConfig validation."""

    def test_defaults(self):
        """Test default values."""
        config = SolverConfig()
        assert config.strategy == "sequential"
        assert config.num_workers is None
        assert config.device == "cpu"

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_supported_strategies(self, strategy):
        """Test that every supported strategy is accepted."""
        assert SolverConfig(strategy=strategy).strategy == strategy

    def test_unsupported_strategy(self):
        """Test that an unknown strategy is rejected."""
        with pytest.raises(ValueError, match="Unsupported strategy"):
            SolverConfig(strategy="gpu")

    def test_invalid_workers(self):
        """Test that num_workers must be positive."""
        with pytest.raises(ValueError, match="num_workers must be >= 1"):
            SolverConfig(num_workers=0)

    def test_invalid_device(self):
        """Test that the device name is validated."""
        with pytest.raises(ValueError, match="device must be"):
            SolverConfig(device="tpu")

    def test_frozen(self):
        """Test that configs are immutable."""
        config = SolverConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.strategy = "threaded"

    def test_resolved_workers(self):
        """Test worker count resolution."""
        assert SolverConfig(num_workers=3).resolved_workers() == 3
        assert SolverConfig().resolved_workers() >= 1


class TestDefaultConfig:
    """Tests for environment-driven configuration."""

    def test_unset_environment(self, monkeypatch):
        """Test defaults when no variable is set."""
        for name in ("FLOYDKIT_STRATEGY", "FLOYDKIT_WORKERS", "FLOYDKIT_DEVICE"):
            monkeypatch.delenv(name, raising=False)
        assert default_config() == SolverConfig()

    def test_environment_values(self, monkeypatch):
        """Test that environment variables are honoured."""
        monkeypatch.setenv("FLOYDKIT_STRATEGY", " Threaded ")
        monkeypatch.setenv("FLOYDKIT_WORKERS", "4")
        monkeypatch.setenv("FLOYDKIT_DEVICE", "cpu")
        assert default_config() == SolverConfig(strategy="threaded", num_workers=4)

    def test_bad_workers(self, monkeypatch):
        """Test that a non-integer worker count is reported."""
        monkeypatch.setenv("FLOYDKIT_WORKERS", "many")
        with pytest.raises(ValueError, match="FLOYDKIT_WORKERS must be an integer"):
            default_config()

    def test_bad_strategy(self, monkeypatch):
        """Test that an unsupported strategy from the environment is reported."""
        monkeypatch.setenv("FLOYDKIT_STRATEGY", "bogus")
        with pytest.raises(ValueError, match="Unsupported strategy"):
            default_config()
