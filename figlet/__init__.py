"""
figlet - FIGfont Banner Rendering
=================================
Parses FIGfont (.flf) content and renders text as banner lines.

Architecture
------------
The library is organized into layers:

    BannerRenderer      Horizontal glyph composition, font fallback
       │
       └── Font         Compiled glyphs keyed by codepoint
              │
              └── FigletFile    Header, comments, raw glyph lines

Font content is always passed in by the caller. The library never looks
up a bundled font or touches the file system.

Quick Start
-----------
    from figlet import parse_font, render_text

    with open("standard.flf", encoding="ascii") as f:
        font = parse_font(f.read())

    for line in render_text(font, "Hello!"):
        print(line)

Error Handling
--------------
    from figlet import FormatError

    try:
        font = parse_font(content)
    except FormatError:
        font = fallback_font

Module Structure
----------------
    figlet/
    ├── errors.py        FormatError hierarchy
    ├── flf.py           FIGfont file parser
    ├── font.py          Glyph compiler
    └── renderer.py      Banner renderer
"""

from .errors import FormatError, InvalidSignature, MalformedHeaderField, TruncatedFile
from .flf import FigletFile, Header, PrintDirection, parse_flf
from .font import Font, Glyph, compile_font, parse_font
from .renderer import BannerRenderer, render_text

__all__ = [
    # API
    "parse_font",
    "render_text",
    # Stages
    "parse_flf",
    "compile_font",
    # Types
    "BannerRenderer",
    "FigletFile",
    "Font",
    "Glyph",
    "Header",
    "PrintDirection",
    # Errors
    "FormatError",
    "InvalidSignature",
    "MalformedHeaderField",
    "TruncatedFile",
]

__version__ = "1.0.0"
