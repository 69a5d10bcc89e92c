"""
BannerRenderer - Banner Text Rendering with Font Fallback
=========================================================
Composes glyphs side by side into banner lines.

Features:
- Row-by-row horizontal composition, no smushing
- Font stacking (base font + fallback fonts for missing glyphs)
- Width/height measurement

Glyphs are never padded: a character without a glyph contributes
nothing, and a glyph shorter than the font height contributes nothing to
the rows below it.

Usage:
    from figlet import parse_font
    from figlet.renderer import BannerRenderer

    banner = BannerRenderer(parse_font(content))

    # Optional: fill gaps from another font
    banner.add_font(parse_font(symbols_content))

    print(banner.render("Hello"))
"""

from .font import Font


def render_text(font: Font, text: str) -> list:
    """
    Render text with a single font.

    Args:
        font: Compiled Font
        text: Text to render

    Returns:
        List of font.height output lines, top row first
    """
    glyphs = [font.glyph_for(ch) for ch in text]
    return _compose(glyphs, font.height)


def _compose(glyphs, height: int) -> list:
    lines = []
    for row in range(height):
        parts = [g.rows[row] for g in glyphs if g is not None and row < g.height]
        lines.append("".join(parts))
    return lines


class BannerRenderer:
    """
    Banner renderer with font fallback.

    Resolves glyphs by searching fonts in the order they were added
    (first match wins). Output height always follows the primary font.

    Args:
        font: Primary Font
    """

    def __init__(self, font: Font):
        self._fonts = [font]

    @property
    def font(self) -> Font:
        """Primary font."""
        return self._fonts[0]

    def add_font(self, font: Font):
        """
        Add a fallback font to the font stack.

        Fonts are searched in the order they are added. Useful for
        filling characters the primary font lacks from another font of
        the same height.

        Args:
            font: Compiled Font
        """
        self._fonts.append(font)

    def get_glyph(self, ch: str):
        """
        Find the glyph for a character across the font stack.

        Returns:
            Glyph, or None if no font maps the character
        """
        cp = ord(ch)
        for f in self._fonts:
            g = f.get(cp)
            if g is not None:
                return g
        return None

    # =========================================================================
    # Measurement
    # =========================================================================

    def measure_width(self, text: str) -> int:
        """
        Measure the width of rendered text in columns.

        Returns:
            Length of the longest output line
        """
        return max((len(line) for line in self.render_lines(text)), default=0)

    def measure_height(self) -> int:
        """Number of output lines per render."""
        return self.font.height

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_lines(self, text: str) -> list:
        """
        Render text to a list of output lines.

        Args:
            text: Text to render

        Returns:
            List of measure_height() lines, top row first
        """
        glyphs = [self.get_glyph(ch) for ch in text]
        return _compose(glyphs, self.font.height)

    def render(self, text: str) -> str:
        """Render text to a single newline-joined string."""
        return "\n".join(self.render_lines(text))
