import pytest

from figlet import parse_font

# Two-line font with a single glyph (space)
SPACE_ONLY = "flf2a$ 2 1 5 0 0\n $@\n $$@@\n"


def make_ascii_font(height=3, comments=("generated test font",), newline="\n"):
    """
    Build FIGfont content covering printable ASCII (32..126).

    Each glyph row is "<ch>$<ch>", so it compiles to "<ch> <ch>". The
    "$" and "@" characters are drawn as "S" and "a" to keep the hard
    blank and terminator out of glyph bodies.
    """
    lines = [f"flf2a$ {height} {height - 1} 6 0 {len(comments)} 0 0 0"]
    lines.extend(comments)
    for cp in range(32, 127):
        ch = {"$": "S", "@": "a"}.get(chr(cp), chr(cp))
        for row in range(height):
            end = "@" if row < height - 1 else "@@"
            lines.append(f"{ch}${ch}{end}")
    return newline.join(lines) + newline


@pytest.fixture
def space_font():
    return parse_font(SPACE_ONLY)


@pytest.fixture(scope="session")
def ascii_content():
    return make_ascii_font()


@pytest.fixture(scope="session")
def ascii_font(ascii_content):
    return parse_font(ascii_content)
