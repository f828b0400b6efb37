# qrtiny

qrtiny is a small generator for version 1 QR Codes (21×21 modules) with no
dependencies. It supports the numeric, alphanumeric and 8-bit segment modes,
all four error-correction levels and all eight mask patterns.

## Installation

```
pip install .
```

## Command line

```
qrtiny "HELLO WORLD"
```

The command first prints `Calculating...`. It then prints the symbol with one
text line per module row. Dark modules are drawn as full blocks (`█`) and light
modules as spaces. If you pass several arguments, they are joined with single
spaces. If you pass none, the text `ZEAL8BIT.COM` is encoded.

The text is encoded in alphanumeric mode. Lower-case letters are folded to
upper case. The symbol uses low error correction and mask pattern 0. If the
text has a character that alphanumeric mode cannot hold, or the text is too
long, the command prints an error to standard error and exits with status 1.

## Library use

```python
from qrtiny.bits import BitBuffer
from qrtiny.segments import write_alphanumeric
from qrtiny.format import ErrorCorrection, format_info
from qrtiny.symbol import generate, CapacityError

buffer = BitBuffer()
write_alphanumeric(buffer, "HELLO WORLD")

info = format_info(ErrorCorrection.LOW, 0)
try:
    code = generate(buffer, info)
except CapacityError:
    print("text does not fit in a version 1 symbol")
else:
    for row in code.rows():
        print("".join("#" if dark else " " for dark in row))
```

### `qrtiny.bits`

- `BitBuffer` collects bits with the most significant bit first.
- `append(value, bit_count)` adds the low `bit_count` bits of `value` and
  returns `bit_count`.
- `len(buffer)` gives the number of bits in the buffer.
- `to_bytes()` returns the bits, padded with zeros to a whole byte.

### `qrtiny.segments`

`write_numeric`, `write_alphanumeric` and `write_8bit` each append one segment
to a `BitBuffer` and return the number of bits they wrote. You can append
several segments to the same buffer before you call `generate`.

- `write_numeric` accepts only the digits `0`–`9`.
- `write_alphanumeric` accepts `0`–`9`, `A`–`Z`, space and `$%*+-./:`.
  Lower-case ASCII letters are encoded as upper case.
- `write_8bit` accepts `str`, which it encodes as UTF-8, or `bytes`. Its
  character count is the number of bytes.

Each of these functions raises `ValueError` if a character cannot be encoded,
or if the count does not fit the segment's character-count field.

### `qrtiny.format`

- `ErrorCorrection` is an `IntEnum` with the members `MEDIUM`, `LOW`, `HIGH`
  and `QUARTILE`. Each member's value is its two-bit format code.
- `format_info(ecc, mask)` returns the 15-bit format word for a level and a
  mask pattern. The mask pattern must be between 0 and 7; any other value
  raises `ValueError`.
- `ecc_level(info)` reads the error-correction level back out of a format
  word, and `mask_pattern(info)` reads the mask pattern.

### `qrtiny.symbol`

- `generate(buffer, info)` adds the terminator, byte alignment, pad codewords
  and Reed-Solomon error-correction codewords, and returns a `QrCode`. It does
  not change the buffer you pass in. It raises `CapacityError`, a subclass of
  `ValueError`, if the payload is too long for the chosen level.
- `QrCode` is a frozen dataclass with the fields `codewords` and
  `format_info`, and the properties `ecc` and `mask`.
- `QrCode.module(x, y)` returns `True` for a dark module. Coordinates outside
  the symbol count as light.
- `QrCode.rows()` yields the symbol one row at a time, from top to bottom, as
  tuples of booleans.
- `reed_solomon_remainder(data, generator)` returns the error-correction bytes
  for `data`, using the given generator polynomial.

### `qrtiny.cli`

- `render(code)` returns the text that the command prints for a symbol.
- `main(argv=None)` runs the command and returns its exit status.

## Capacity of a version 1 symbol

The table gives the longest single segment that fits. For 8-bit mode, the
count is in bytes.

| Error correction | Numeric | Alphanumeric | 8-bit |
|------------------|---------|--------------|-------|
| Low (~7%)        | 41      | 25           | 17    |
| Medium (~15%)    | 34      | 20           | 14    |
| Quartile (~25%)  | 27      | 16           | 11    |
| High (~30%)      | 17      | 10           | 7     |

## Limitations

- Only version 1 symbols are made. Longer payloads are rejected rather than
  moved up to a larger version.
- You choose the segment mode and the mask pattern yourself. The package does
  not pick an optimal mode and does not score the masks.
- No image files are written. The output is the module grid or the text
  rendering described above.