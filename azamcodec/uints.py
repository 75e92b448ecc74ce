"""Fixed-width unsigned integer kinds used by the typed encode and decode helpers."""

from __future__ import annotations

from enum import Enum


class UInt(Enum):
    """An unsigned integer width; the member value is its size in bytes."""

    U8 = 1
    U16 = 2
    U32 = 4
    U64 = 8
    U128 = 16

    @property
    def size(self) -> int:
        """Size of the integer in bytes."""
        return self.value

    @property
    def max_value(self) -> int:
        """Largest value this kind can hold."""
        return (1 << (8 * self.value)) - 1

    def to_bytes(self, value: int) -> bytes:
        """Return ``value`` as big-endian bytes of exactly this kind's size."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        if not 0 <= value <= self.max_value:
            raise ValueError(f"{value} does not fit in {self.name}")
        return value.to_bytes(self.size, "big")

    def from_bytes(self, data: bytes) -> int:
        """Read a big-endian value; shorter input is treated as zero-padded on the left."""
        data = bytes(data)
        if len(data) > self.size:
            raise ValueError(
                f"{len(data)} bytes do not fit in {self.name} ({self.size} bytes)"
            )
        return int.from_bytes(data, "big")