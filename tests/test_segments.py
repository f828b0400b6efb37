import pytest

from qrtiny.bits import BitBuffer
from qrtiny.segments import (
    ALPHANUMERIC_SYMBOLS,
    write_8bit,
    write_alphanumeric,
    write_numeric,
)


def _encode(writer, text):
    buffer = BitBuffer()
    written = writer(buffer, text)
    return written, buffer


def test_hello_world_alphanumeric_prefix():
    written, buffer = _encode(write_alphanumeric, "HELLO WORLD")
    assert written == len(buffer)
    assert buffer.to_bytes()[:3] == bytes([32, 91, 11])


def test_alphanumeric_example_bits():
    written, buffer = _encode(write_alphanumeric, "AC-42")
    assert written == 4 + 9 + 11 + 11 + 6
    assert buffer.to_bytes() == bytes([0x20, 0x29, 0xCE, 0xE7, 0x21, 0x00])


def test_alphanumeric_lowercase_matches_uppercase():
    _, lower = _encode(write_alphanumeric, "hello")
    _, upper = _encode(write_alphanumeric, "HELLO")
    assert lower.to_bytes() == upper.to_bytes()
    assert len(lower) == len(upper)


def test_alphanumeric_accepts_every_symbol():
    written, buffer = _encode(write_alphanumeric, ALPHANUMERIC_SYMBOLS)
    count = len(ALPHANUMERIC_SYMBOLS)
    assert written == 4 + 9 + 11 * (count // 2) + 6 * (count % 2)
    assert len(buffer) == written


@pytest.mark.parametrize("text", ["a!", "#", "é"])
def test_alphanumeric_rejects_unknown_characters(text):
    with pytest.raises(ValueError):
        write_alphanumeric(BitBuffer(), text)


@pytest.mark.parametrize("text", ["", "1", "12", "123", "1234", "01234567"])
def test_numeric_bit_lengths(text):
    count = len(text)
    written, buffer = _encode(write_numeric, text)
    assert written == 4 + 10 + 10 * (count // 3) + (count % 3) * 4 - (count % 3) // 2
    assert len(buffer) == written


def test_numeric_mode_indicator_and_count():
    _, buffer = _encode(write_numeric, "01234567")
    data = buffer.to_bytes()
    assert data[0] >> 4 == 0x1
    assert ((data[0] & 0x0F) << 6) | (data[1] >> 2) == 8


def test_numeric_rejects_non_digits():
    with pytest.raises(ValueError):
        write_numeric(BitBuffer(), "12a")


def test_8bit_single_character():
    written, buffer = _encode(write_8bit, "A")
    assert written == 4 + 8 + 8
    assert buffer.to_bytes() == bytes([0x40, 0x14, 0x10])


def test_8bit_bytes_and_str_agree():
    _, from_str = _encode(write_8bit, "Zeal")
    _, from_bytes = _encode(write_8bit, b"Zeal")
    assert from_str.to_bytes() == from_bytes.to_bytes()


def test_8bit_counts_encoded_bytes():
    written, _ = _encode(write_8bit, "é")
    assert written == 4 + 8 + 16


def test_segments_concatenate():
    buffer = BitBuffer()
    first = write_numeric(buffer, "42")
    second = write_alphanumeric(buffer, "AB")
    assert len(buffer) == first + second


def test_count_field_overflow_rejected():
    with pytest.raises(ValueError):
        write_8bit(BitBuffer(), b"x" * 256)