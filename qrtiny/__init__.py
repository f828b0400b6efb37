"""Generate version 1 (21x21) QR Codes."""

__version__ = "0.1.0"