"""Device abstraction for tensor-backed relaxation."""

from __future__ import annotations

import torch


class Device:
    """
    A logical compute device: an underlying PyTorch device plus the dtypes used
    for distance and next-hop matrices.

    Instances are treated as immutable once constructed.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        dtype: torch.dtype = torch.int64,
        index_dtype: torch.dtype = torch.int64,
    ) -> None:
        """
        Initialize a Device.

        Args:
            name: Logical device name ("cpu" or "cuda").
            torch_device: Underlying PyTorch device.
            dtype: Integer dtype for distance matrices. Must be able to hold
                the internal unreachable sentinel, so only int64 is accepted.
            index_dtype: Integer dtype for next-hop matrices.
        """
        if dtype != torch.int64:
            raise ValueError(f"Distance dtype must be torch.int64, got {dtype}.")
        self.name = name
        self.torch_device = torch_device
        self.dtype = dtype
        self.index_dtype = index_dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"dtype={self.dtype})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return (
            self.name == other.name
            and self.torch_device == other.torch_device
            and self.dtype == other.dtype
            and self.index_dtype == other.index_dtype
        )

    def __hash__(self) -> int:
        return hash((self.name, str(self.torch_device), self.dtype, self.index_dtype))

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str) -> Device:
    """
    Create a Device from its name.

    Supported names:
        - "cpu": PyTorch CPU tensors
        - "cuda": PyTorch CUDA tensors (only if CUDA is available)

    Args:
        name: Device name string.

    Returns:
        A Device instance.

    Raises:
        RuntimeError: If "cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    if name == "cpu":
        return Device(name="cpu", torch_device=torch.device("cpu"))
    elif name == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device(name="cuda", torch_device=torch.device("cuda"))
    else:
        supported = ["cpu", "cuda"]
        raise ValueError(
            f"Unsupported device name: {name!r}. Supported devices: {supported}"
        )


def default_device() -> Device:
    """Return the CPU device."""
    return device("cpu")
