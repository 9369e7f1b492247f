"""Tests for the device abstraction."""

import pytest
import torch

from floydkit.core.device import Device, default_device, device


class TestDevice:
    """Tests for Device class."""

    def test_device_creation(self):
        """Test Device can be created with all parameters."""
        dev = Device(name="test", torch_device=torch.device("cpu"))
        assert dev.name == "test"
        assert dev.torch_device == torch.device("cpu")
        assert dev.dtype == torch.int64
        assert dev.index_dtype == torch.int64

    def test_device_rejects_narrow_dtype(self):
        """Test that distance dtypes narrower than int64 are rejected."""
        with pytest.raises(ValueError, match="torch.int64"):
            Device(name="cpu", torch_device=torch.device("cpu"), dtype=torch.int32)

    def test_device_repr(self):
        """Test Device __repr__."""
        repr_str = repr(Device(name="cpu", torch_device=torch.device("cpu")))
        assert "cpu" in repr_str
        assert "int64" in repr_str

    def test_device_equality(self):
        """Test that equal settings compare equal."""
        assert device("cpu") == device("cpu")
        assert hash(device("cpu")) == hash(device("cpu"))

    def test_as_torch_device(self):
        """Test as_torch_device returns correct device."""
        assert device("cpu").as_torch_device() == torch.device("cpu")


class TestDeviceFactory:
    """Tests for device factory function."""

    def test_device_cpu(self):
        """Test device('cpu') returns correct Device."""
        dev = device("cpu")
        assert dev.name == "cpu"
        assert dev.torch_device == torch.device("cpu")

    def test_device_cuda_available(self):
        """Test device('cuda') when CUDA is available."""
        if not torch.cuda.is_available():
            pytest.skip("CUDA not available")
        dev = device("cuda")
        assert dev.torch_device.type == "cuda"

    def test_device_cuda_unavailable(self):
        """Test device('cuda') raises when CUDA is unavailable."""
        if torch.cuda.is_available():
            pytest.skip("CUDA is available, cannot test failure case")
        with pytest.raises(RuntimeError, match="CUDA device requested"):
            device("cuda")

    def test_device_unsupported_name(self):
        """Test device() raises for unsupported device name."""
        with pytest.raises(ValueError, match="Unsupported device name"):
            device("sv_cpu")

    def test_default_device(self):
        """Test default_device returns cpu."""
        assert default_device().name == "cpu"
