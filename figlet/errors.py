"""
FIGfont Format Errors
=====================
Exceptions raised while parsing and compiling FIGfont content.

All of them derive from FormatError, which is itself a ValueError, so
callers can either catch the specific failure or treat any invalid font
the same way.
"""


class FormatError(ValueError):
    """Base class for invalid FIGfont content."""


class InvalidSignature(FormatError):
    """Header line does not start with the FIGfont signature."""


class TruncatedFile(FormatError):
    """Content ends before the lines the header declares."""


class MalformedHeaderField(FormatError):
    """
    Header field that is present but not a valid value.

    Only raised by strict parsing; lenient parsing falls back to the
    field's default instead.

    Attributes:
        field: Header field name
        value: Raw text found in the header
    """

    def __init__(self, field: str, value: str):
        super().__init__(f"Malformed header field {field}: {value!r}")
        self.field = field
        self.value = value
