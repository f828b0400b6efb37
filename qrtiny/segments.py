"""Encoding of text segments into a bit buffer for a version 1 symbol."""

from __future__ import annotations

from .bits import BitBuffer

ALPHANUMERIC_SYMBOLS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

MODE_INDICATOR_BITS = 4
MODE_NUMERIC = 0x1
MODE_ALPHANUMERIC = 0x2
MODE_8BIT = 0x4
MODE_TERMINATOR = 0x0

NUMERIC_COUNT_BITS = 10
ALPHANUMERIC_COUNT_BITS = 9
EIGHT_BIT_COUNT_BITS = 8

_DIGITS = frozenset("0123456789")
_ALPHANUMERIC_INDEX = {symbol: index for index, symbol in enumerate(ALPHANUMERIC_SYMBOLS)}


def _write_header(buffer: BitBuffer, mode: int, count: int, count_bits: int) -> int:
    if count >= 1 << count_bits:
        raise ValueError(f"segment of {count} characters does not fit a {count_bits}-bit count")
    return buffer.append(mode, MODE_INDICATOR_BITS) + buffer.append(count, count_bits)


def _alphanumeric_value(char: str) -> int:
    key = char.upper() if "a" <= char <= "z" else char
    try:
        return _ALPHANUMERIC_INDEX[key]
    except KeyError:
        raise ValueError(f"character {char!r} cannot be encoded in alphanumeric mode") from None


def write_numeric(buffer: BitBuffer, text: str) -> int:
    """Append a numeric segment; return the number of bits written."""
    if not set(text) <= _DIGITS:
        raise ValueError(f"numeric mode accepts only the digits 0-9, got {text!r}")
    written = _write_header(buffer, MODE_NUMERIC, len(text), NUMERIC_COUNT_BITS)
    # Groups of 3/2/1 digits are encoded as 10/7/4-bit binary.
    for start in range(0, len(text), 3):
        group = text[start:start + 3]
        written += buffer.append(int(group), 3 * len(group) + 1)
    return written


def write_alphanumeric(buffer: BitBuffer, text: str) -> int:
    """Append an alphanumeric segment; return the number of bits written.

    Lower-case ASCII letters are encoded as their upper-case forms.
    """
    values = [_alphanumeric_value(char) for char in text]
    written = _write_header(buffer, MODE_ALPHANUMERIC, len(values), ALPHANUMERIC_COUNT_BITS)
    # Pairs are combined (a * 45 + b) into 11 bits; an odd remainder takes 6 bits.
    for start in range(0, len(values), 2):
        pair = values[start:start + 2]
        if len(pair) == 2:
            written += buffer.append(pair[0] * 45 + pair[1], 11)
        else:
            written += buffer.append(pair[0], 6)
    return written


def write_8bit(buffer: BitBuffer, text: str | bytes) -> int:
    """Append an 8-bit byte segment; return the number of bits written.

    Text is encoded as UTF-8; the count is the number of bytes.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    written = _write_header(buffer, MODE_8BIT, len(data), EIGHT_BIT_COUNT_BITS)
    for byte in data:
        written += buffer.append(byte, 8)
    return written