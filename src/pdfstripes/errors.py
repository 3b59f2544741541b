class StripesError(Exception):
    """Base class for errors raised by pdfstripes."""


class OutOfRange(StripesError, IndexError):
    """Symbol index outside of the symbol table."""


class InvalidSymbolByte(StripesError, ValueError):
    """Byte value that does not stand for any symbol (or is not allowed
in a barcode payload)."""


class InvalidArgument(StripesError, ValueError):
    """Malformed geometric input or drawing parameter."""
