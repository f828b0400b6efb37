"""Command line: print a version 1 QR code for a piece of alphanumeric text."""

from __future__ import annotations

import sys

from .bits import BitBuffer
from .format import ErrorCorrection, format_info
from .segments import write_alphanumeric
from .symbol import QrCode, generate

DEFAULT_TEXT = "ZEAL8BIT.COM"
DEFAULT_FORMAT = format_info(ErrorCorrection.LOW, 0)

_DARK_MODULE = "\u2588"
_LIGHT_MODULE = " "


def render(code: QrCode) -> str:
    """Draw the symbol as text, one line per row, dark modules as full blocks."""
    return "".join(
        "".join(_DARK_MODULE if dark else _LIGHT_MODULE for dark in row) + "\n"
        for row in code.rows()
    )


def main(argv: list[str] | None = None) -> int:
    """Encode the arguments (or the default text) and print the symbol."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = " ".join(args) if args else DEFAULT_TEXT

    print("Calculating...\n")

    buffer = BitBuffer()
    try:
        write_alphanumeric(buffer, text)
        code = generate(buffer, DEFAULT_FORMAT)
    except ValueError as exc:
        print(f"qrtiny: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render(code))
    return 0


if __name__ == "__main__":
    sys.exit(main())