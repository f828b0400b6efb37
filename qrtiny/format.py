"""Format information: error-correction level and mask pattern."""

from __future__ import annotations

from enum import IntEnum

FORMAT_INFO_MASK = 0x5412
ECC_BITS = 2
MASK_BITS = 3
BCH_BITS = 10


class ErrorCorrection(IntEnum):
    """Error-correction levels, valued by their two-bit format code."""

    MEDIUM = 0b00
    LOW = 0b01
    HIGH = 0b10
    QUARTILE = 0b11


_FORMAT_TABLE = {
    ErrorCorrection.MEDIUM: (0x5412, 0x5125, 0x5E7C, 0x5B4B, 0x45F9, 0x40CE, 0x4F97, 0x4AA0),
    ErrorCorrection.LOW: (0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976),
    ErrorCorrection.HIGH: (0x1689, 0x13BE, 0x1CE7, 0x19D0, 0x0762, 0x0255, 0x0D0C, 0x083B),
    ErrorCorrection.QUARTILE: (0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183, 0x2EDA, 0x2BED),
}


def format_info(ecc: ErrorCorrection | int, mask: int) -> int:
    """Return the 15-bit format information word for a level and mask pattern."""
    level = ErrorCorrection(ecc)
    if not 0 <= mask < 1 << MASK_BITS:
        raise ValueError(f"mask pattern must be in 0..7, got {mask}")
    return _FORMAT_TABLE[level][mask]


def ecc_level(info: int) -> ErrorCorrection:
    """Return the error-correction level encoded in a format word."""
    return ErrorCorrection(((info ^ FORMAT_INFO_MASK) >> (BCH_BITS + MASK_BITS)) & ((1 << ECC_BITS) - 1))


def mask_pattern(info: int) -> int:
    """Return the mask pattern number encoded in a format word."""
    return ((info ^ FORMAT_INFO_MASK) >> BCH_BITS) & ((1 << MASK_BITS) - 1)