"""
FLF Font File Parser
====================
Splits FIGfont (.flf) content into its header, comment block and raw
glyph lines.

FIGfont is a plain-text banner font format:
- One header line with the signature and font parameters
- A block of free-form comment lines
- Glyph blocks, one per character, each `height` lines long

Header Line:
    flf2a$ 6 5 16 15 11 0 24463 229
    |    | | | |  |  |  | |     |
    |    | | | |  |  |  | |     Codetag count
    |    | | | |  |  |  | Full layout
    |    | | | |  |  |  Print direction
    |    | | | |  |  Comment lines
    |    | | | |  Old layout
    |    | | | Max length
    |    | | Baseline
    |    | Height
    |    Hard blank
    Signature

Only the signature is mandatory. Every other field may be missing or
garbled and falls back to its default (0, or left-to-right for the print
direction) unless strict parsing is requested.

Glyph Lines:
     _ @
    | |@
    |_|@@

Each row ends with the block terminator, doubled on the last row of a
glyph. The hard blank stands for a space that must survive rendering.
"""

import logging
import re

from .errors import InvalidSignature, MalformedHeaderField, TruncatedFile

logger = logging.getLogger(__name__)

SIGNATURE = "flf2a"
DEFAULT_TERMINATOR = "@"

# "\r\n" is a single break; a bare "\r" stays part of the line
_LINE_BREAK = re.compile(r"\r?\n")

# ASCII decimal with an optional sign
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Positional header fields after the signature
_NUMERIC_FIELDS = (
    "height",
    "baseline",
    "max_length",
    "old_layout",
    "comment_lines",
    "print_direction",
    "full_layout",
    "code_tag_count",
)


class PrintDirection:
    """Print direction declared by the font header."""
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1

    _names = {
        0: "LEFT_TO_RIGHT",
        1: "RIGHT_TO_LEFT",
    }

    @classmethod
    def name(cls, direction: int) -> str:
        """Get human-readable direction name."""
        return cls._names.get(direction, f"UNKNOWN({direction})")

    @classmethod
    def is_valid(cls, direction: int) -> bool:
        return direction in cls._names


class Header:
    """
    Parsed FIGfont header line.

    Attributes:
        hard_blank: Placeholder character rendered as a space
        height: Declared lines per glyph
        baseline: Lines from the top of a glyph to the baseline
        max_length: Widest glyph row, terminators included
        old_layout: Legacy layout code
        comment_lines: Number of comment lines after the header
        print_direction: PrintDirection value
        full_layout: Full layout code
        code_tag_count: Number of code-tagged glyphs
    """

    def __init__(
        self,
        hard_blank: str,
        height: int = 0,
        baseline: int = 0,
        max_length: int = 0,
        old_layout: int = 0,
        comment_lines: int = 0,
        print_direction: int = PrintDirection.LEFT_TO_RIGHT,
        full_layout: int = 0,
        code_tag_count: int = 0,
    ):
        self.hard_blank = hard_blank
        self.height = height
        self.baseline = baseline
        self.max_length = max_length
        self.old_layout = old_layout
        self.comment_lines = comment_lines
        self.print_direction = print_direction
        self.full_layout = full_layout
        self.code_tag_count = code_tag_count

    @classmethod
    def parse(cls, line: str, strict: bool = False) -> "Header":
        """
        Parse a header line.

        Args:
            line: First line of the font content
            strict: Raise on present-but-invalid fields instead of
                falling back to the default

        Returns:
            Header instance

        Raises:
            InvalidSignature: If the line does not start with "flf2a"
            MalformedHeaderField: If strict and a field is not an integer
        """
        parts = line.split(" ")
        signature = parts[0]
        if not signature.startswith(SIGNATURE):
            raise InvalidSignature(
                f"Invalid FIGfont signature: {signature[:len(SIGNATURE)]!r}")

        values = {}
        for i, field in enumerate(_NUMERIC_FIELDS, start=1):
            raw = parts[i] if i < len(parts) else None
            values[field] = _parse_field(field, raw, strict)

        if values["comment_lines"] < 0:
            if strict:
                raise MalformedHeaderField("comment_lines", parts[5])
            logger.debug("Negative comment line count, using 0")
            values["comment_lines"] = 0

        direction = values["print_direction"]
        if not PrintDirection.is_valid(direction):
            if strict:
                raise MalformedHeaderField("print_direction", parts[6])
            logger.debug("Unknown print direction %d, using left-to-right", direction)
            values["print_direction"] = PrintDirection.LEFT_TO_RIGHT

        return cls(hard_blank=signature[-1], **values)

    def __repr__(self):
        return (
            f"Header(hard_blank={self.hard_blank!r}, height={self.height}, "
            f"baseline={self.baseline}, max_length={self.max_length}, "
            f"comment_lines={self.comment_lines}, "
            f"print_direction={PrintDirection.name(self.print_direction)})"
        )


def _parse_field(field: str, raw, strict: bool) -> int:
    """Convert one header field, defaulting to 0."""
    if raw is None:
        return 0
    if _INTEGER.fullmatch(raw):
        return int(raw)
    if strict:
        raise MalformedHeaderField(field, raw)
    logger.debug("Malformed header field %s=%r, using 0", field, raw)
    return 0


def split_lines(content: str) -> list:
    """
    Split font content into logical lines.

    Accepts Unix and Windows line breaks, mixed within one file. Empty
    lines are kept since glyphs use them for vertical spacing.
    """
    return _LINE_BREAK.split(content)


class FigletFile:
    """
    Raw FIGfont file: header, comments and uncompiled glyph lines.

    Attributes:
        header: Parsed Header
        comments: Comment lines, verbatim
        lines: Raw glyph lines in file order
    """

    def __init__(self, header: Header, comments, lines, header_line: str = ""):
        self.header = header
        self.header_line = header_line
        self.comments = tuple(comments)
        self.lines = tuple(lines)

    @classmethod
    def from_content(cls, content: str, strict: bool = False) -> "FigletFile":
        """
        Parse FIGfont content that has already been read.

        Args:
            content: Full text of a .flf file
            strict: Reject malformed header fields (see Header.parse)

        Returns:
            FigletFile instance

        Raises:
            InvalidSignature: If the content is not a FIGfont
            TruncatedFile: If the declared comment block runs past the end
        """
        lines = split_lines(content)
        header = Header.parse(lines[0], strict=strict)

        body_start = 1 + header.comment_lines
        if len(lines) < body_start:
            raise TruncatedFile(
                f"Header declares {header.comment_lines} comment lines, "
                f"content has {len(lines) - 1} lines after the header")

        logger.debug("Parsed %r with %d glyph lines", header, len(lines) - body_start)
        return cls(header, lines[1:body_start], lines[body_start:], header_line=lines[0])

    @property
    def header_lines(self) -> tuple:
        """Header line followed by the comment lines, as stored in the file."""
        return (self.header_line,) + self.comments

    @property
    def terminator(self) -> str:
        """Block terminator character, taken from the first glyph line."""
        for line in self.lines:
            if line:
                return line[-1]
        return DEFAULT_TERMINATOR


def parse_flf(content: str, strict: bool = False) -> FigletFile:
    """Parse FIGfont content into a FigletFile."""
    return FigletFile.from_content(content, strict=strict)
