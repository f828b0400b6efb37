"""Version 1 QR code symbol generation: padding, error correction and module layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .bits import BitBuffer
from .format import ErrorCorrection, ecc_level, mask_pattern
from .segments import MODE_TERMINATOR

VERSION = 1
DIMENSION = 21
QUIET_NONE = 0
QUIET_STANDARD = 4

# Data, error-correction and remainder bits available in a version 1 symbol.
TOTAL_CAPACITY = 208
BUFFER_SIZE = (TOTAL_CAPACITY + 7) >> 3

PAD_CODEWORDS = 0xEC11

_FINDER_SIZE = 7
_TIMING_OFFSET = 6
_GF_POLYNOMIAL = 0x011D

ECC_CODEWORDS = {
    ErrorCorrection.MEDIUM: 10,
    ErrorCorrection.LOW: 7,
    ErrorCorrection.HIGH: 17,
    ErrorCorrection.QUARTILE: 13,
}

_ECC_DIVISORS = {
    ErrorCorrection.MEDIUM: bytes([0xD8, 0xC2, 0x9F, 0x6F, 0xC7, 0x5E, 0x5F, 0x71, 0x9D, 0xC1]),
    ErrorCorrection.LOW: bytes([0x7F, 0x7A, 0x9A, 0xA4, 0x0B, 0x44, 0x75]),
    ErrorCorrection.HIGH: bytes([
        0x77, 0x42, 0x53, 0x78, 0x77, 0x16, 0xC5, 0x53, 0xF9,
        0x29, 0x8F, 0x86, 0x55, 0x35, 0x7D, 0x63, 0x4F,
    ]),
    ErrorCorrection.QUARTILE: bytes([
        0x89, 0x49, 0xE3, 0x11, 0xB1, 0x11, 0x34,
        0x0D, 0x2E, 0x2B, 0x53, 0x84, 0x78,
    ]),
}


class CapacityError(ValueError):
    """Raised when the payload does not fit the symbol."""


def _gf_multiply(factor: int, coefficient: int) -> int:
    """Product in GF(2^8) modulo 0x11D."""
    value = 0
    for k in range(7, -1, -1):
        value = ((value << 1) ^ ((value >> 7) * _GF_POLYNOMIAL)) & 0xFF
        if (factor >> k) & 1:
            value ^= coefficient
    return value


def reed_solomon_remainder(data: bytes, generator: bytes) -> bytes:
    """Return the Reed-Solomon error-correction codewords of ``data``."""
    if not generator:
        raise ValueError("generator polynomial must not be empty")
    result = [0] * len(generator)
    for byte in data:
        factor = byte ^ result[0]
        result = result[1:] + [0]
        result = [r ^ _gf_multiply(factor, g) for r, g in zip(result, generator)]
    return bytes(result)


def _is_light_mask(mask: int, j: int, i: int) -> bool:
    ij = i * j
    if mask == 0:
        return ((i + j) & 1) == 0
    if mask == 1:
        return (i & 1) == 0
    if mask == 2:
        return j % 3 == 0
    if mask == 3:
        return (i + j) % 3 == 0
    if mask == 4:
        return (((i >> 1) + (j // 3)) & 1) == 0
    if mask == 5:
        return ((ij & 1) + (ij % 3)) == 0
    if mask == 6:
        return (((ij & 1) + (ij % 3)) & 1) == 0
    return (((ij % 3) + ((i + j) & 1)) & 1) == 0


def _skip_timing(coordinate: int) -> int:
    return coordinate - (1 if coordinate >= _TIMING_OFFSET else 0)


def _data_index(x: int, y: int) -> int:
    """Bit index into the codewords for a data module coordinate."""
    xx = _skip_timing(x)
    yy = _skip_timing(y)
    upward = (xx >> 1) & 1
    half = xx & 1
    h = 9 - (xx >> 1)
    v = 4 - (yy >> 2)
    if h < 4:
        module = h * 3 + v if upward else h * 3 + 2 - v
    elif h < 6:
        module = 12 + ((h - 4) * 5 + v if upward else (h - 4) * 5 + 4 - v)
    else:
        module = 22 + h - 6
    bit = (((0x0 if upward else 0x3) ^ (yy & 3)) << 1) + half
    return (module << 3) | bit


def _function_module(x: int, y: int, info: int) -> bool | None:
    """Return the colour of a function module (True is dark), or None for data."""
    if not (0 <= x < DIMENSION and 0 <= y < DIMENSION):
        return False

    near = _FINDER_SIZE // 2
    far = DIMENSION - 1 - near
    for cx, cy in ((near, near), (far, near), (near, far)):
        dx = abs(x - cx)
        dy = abs(y - cy)
        if dx == 0 and dy == 0:
            return True
        if dx <= 1 + near and dy <= 1 + near:
            return bool(max(dx, dy) & 1)

    if x == _TIMING_OFFSET or y == _TIMING_OFFSET:
        return not (x ^ y) & 1

    xx = _skip_timing(x)
    yy = _skip_timing(y)
    edge = DIMENSION - _FINDER_SIZE - 1
    if x == _FINDER_SIZE + 1 and y == edge:
        return True

    format_index = -1
    if xx <= _FINDER_SIZE and yy <= _FINDER_SIZE:
        format_index = 7 - xx + yy
    if x == _FINDER_SIZE + 1 and y >= edge:
        format_index = y + 14 - (DIMENSION - 1)
    if y == _FINDER_SIZE + 1 and x >= edge:
        format_index = DIMENSION - 1 - x
    if format_index >= 0:
        return bool((info >> format_index) & 1)
    return None


@dataclass(frozen=True)
class QrCode:
    """A generated version 1 symbol: its codewords and format information."""

    codewords: bytes
    format_info: int

    @property
    def ecc(self) -> ErrorCorrection:
        return ecc_level(self.format_info)

    @property
    def mask(self) -> int:
        return mask_pattern(self.format_info)

    def module(self, x: int, y: int) -> bool:
        """Return True if the module at (x, y) is dark; outside the symbol is light."""
        colour = _function_module(x, y, self.format_info)
        if colour is not None:
            return colour
        index = _data_index(x, y)
        dark = bool(self.codewords[index >> 3] & (1 << (index & 7)))
        if _is_light_mask(self.mask, x, y):
            dark = not dark
        return dark

    def rows(self) -> Iterator[tuple[bool, ...]]:
        """Yield each row of modules, top to bottom."""
        for y in range(DIMENSION):
            yield tuple(self.module(x, y) for x in range(DIMENSION))


def _copy_bits(source: BitBuffer) -> BitBuffer:
    copy = BitBuffer()
    length = len(source)
    data = source.to_bytes()
    for byte in data[: length >> 3]:
        copy.append(byte, 8)
    tail = length & 7
    if tail:
        copy.append(data[length >> 3] >> (8 - tail), tail)
    return copy


def generate(buffer: BitBuffer, info: int) -> QrCode:
    """Pad the payload, add error correction and return the finished symbol.

    The given buffer is left unchanged.
    """
    level = ecc_level(info)
    ecc_count = ECC_CODEWORDS[level]
    data_capacity = (TOTAL_CAPACITY // 8 - ecc_count) * 8
    payload = len(buffer)
    if payload > data_capacity:
        raise CapacityError(
            f"payload of {payload} bits exceeds the {data_capacity} bits available "
            f"at error-correction level {level.name}"
        )

    bits = _copy_bits(buffer)
    bits.append(MODE_TERMINATOR, min(4, data_capacity - len(bits)))
    bits.append(0, min((8 - (len(bits) & 7)) & 7, data_capacity - len(bits)))
    while (remaining := data_capacity - len(bits)) > 0:
        remaining = min(remaining, 16)
        bits.append(PAD_CODEWORDS >> (16 - remaining), remaining)

    data = bits.to_bytes()
    ecc = reed_solomon_remainder(data, _ECC_DIVISORS[level])
    return QrCode(data + ecc, info)