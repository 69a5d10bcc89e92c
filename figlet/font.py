"""
Glyph Compiler
==============
Builds a Font from the raw glyph lines of a FigletFile.

Glyph blocks are consumed in file order and assigned to consecutive
codepoints starting at space (32), so a standard font covers the
printable ASCII range 32..126.

Per block:
- Every row but the last loses one trailing terminator ("@")
- The last row loses two ("@@")
- Hard blanks become literal spaces

Usage:
    from figlet.font import parse_font

    font = parse_font(content)
    glyph = font.glyph_for("A")
    print("\\n".join(glyph.rows))
"""

import logging

from .flf import FigletFile

logger = logging.getLogger(__name__)

FIRST_CODEPOINT = 32  # Space


class Glyph:
    """
    One compiled character.

    Attributes:
        rows: Rendered rows, top to bottom
        height: Number of rows
    """

    __slots__ = ("_rows",)

    EMPTY: "Glyph"

    def __init__(self, rows):
        self._rows = tuple(rows)

    @property
    def rows(self) -> tuple:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        """Length of the widest row."""
        return max((len(r) for r in self.rows), default=0)

    def __eq__(self, other):
        if not isinstance(other, Glyph):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self):
        return hash(self.rows)

    def __repr__(self):
        return f"Glyph({list(self.rows)!r})"


Glyph.EMPTY = Glyph(())


class Font:
    """
    Compiled FIGfont: glyphs keyed by codepoint.

    Read-only after compile_font() returns and safe to share between
    renderers.

    Attributes:
        height: Effective glyph height used for rendering
        header: Header of the source file
        comments: Comment lines of the source file
    """

    def __init__(self, figlet_file: FigletFile, height: int, glyphs: dict):
        self._file = figlet_file
        self.height = height
        self._glyphs = glyphs

    @property
    def header(self):
        return self._file.header

    @property
    def comments(self) -> tuple:
        return self._file.comments

    def get(self, cp: int):
        """
        Look up a glyph by codepoint.

        Returns:
            Glyph, or None if the font has no block for cp
        """
        return self._glyphs.get(cp)

    def glyph_for(self, ch: str):
        """Look up the glyph for a single character."""
        return self._glyphs.get(ord(ch))

    def codepoints(self) -> list:
        """Mapped codepoints in ascending order."""
        return sorted(self._glyphs)

    def __contains__(self, cp) -> bool:
        return cp in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self):
        return f"Font(height={self.height}, glyphs={len(self._glyphs)})"


def compile_font(figlet_file: FigletFile) -> Font:
    """
    Compile raw glyph lines into a Font.

    Block height starts at the header height. Once the first glyph is
    compiled its row count becomes the block height for every following
    glyph and the font's effective height.

    Args:
        figlet_file: Parsed FigletFile

    Returns:
        Font instance
    """
    header = figlet_file.header
    hard_blank = header.hard_blank
    height = header.height

    glyphs = {}
    cp = FIRST_CODEPOINT
    rows = []
    for line in figlet_file.lines:
        if len(rows) < height - 1:
            row = line[:-1]
        else:
            row = line[:-2]
        rows.append(row.replace(hard_blank, " "))

        if len(rows) == height:
            glyph = Glyph(rows)
            glyphs[cp] = glyph
            height = glyph.height
            cp += 1
            rows = []

    if rows:
        logger.debug("Dropped %d trailing lines outside a complete glyph", len(rows))
    logger.debug("Compiled %d glyphs, height %d", len(glyphs), height)
    return Font(figlet_file, height, glyphs)


def parse_font(content: str, strict: bool = False) -> Font:
    """
    Parse and compile FIGfont content.

    Args:
        content: Full text of a .flf file
        strict: Reject malformed header fields

    Returns:
        Font instance

    Raises:
        FormatError: If the content is not a usable FIGfont
    """
    return compile_font(FigletFile.from_content(content, strict=strict))
