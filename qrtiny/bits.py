"""Bit accumulation for QR code segment data."""

from __future__ import annotations


class BitBuffer:
    """A growable buffer that accumulates bits, most significant bit first."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"BitBuffer(bits={self._length}, data={bytes(self._data).hex()})"

    def append(self, value: int, bit_count: int) -> int:
        """Append the low ``bit_count`` bits of ``value``; return the bits written."""
        if bit_count < 0:
            raise ValueError(f"bit count must not be negative, got {bit_count}")
        for shift in range(bit_count - 1, -1, -1):
            position = self._length
            if position >> 3 == len(self._data):
                self._data.append(0)
            if (value >> shift) & 1:
                self._data[position >> 3] |= 0x80 >> (position & 7)
            self._length += 1
        return bit_count

    def to_bytes(self) -> bytes:
        """Return the accumulated bits, zero-padded to a whole byte."""
        return bytes(self._data)