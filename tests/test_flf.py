import pytest

from figlet import (
    FigletFile,
    Header,
    InvalidSignature,
    MalformedHeaderField,
    PrintDirection,
    TruncatedFile,
    parse_flf,
)
from figlet.flf import split_lines


# =============================================================================
# Header
# =============================================================================

def test_header_all_fields():
    h = Header.parse("flf2a$ 6 5 16 15 11 0 24463 229")
    assert h.hard_blank == "$"
    assert h.height == 6
    assert h.baseline == 5
    assert h.max_length == 16
    assert h.old_layout == 15
    assert h.comment_lines == 11
    assert h.print_direction == PrintDirection.LEFT_TO_RIGHT
    assert h.full_layout == 24463
    assert h.code_tag_count == 229


def test_hard_blank_is_last_signature_char():
    assert Header.parse("flf2a# 1 1 1 0 0").hard_blank == "#"
    assert Header.parse("flf2aXYZ 1 1 1 0 0").hard_blank == "Z"


def test_missing_fields_default():
    h = Header.parse("flf2a$ 4")
    assert h.height == 4
    assert h.baseline == 0
    assert h.comment_lines == 0
    assert h.print_direction == PrintDirection.LEFT_TO_RIGHT
    assert h.code_tag_count == 0


def test_malformed_fields_default():
    h = Header.parse("flf2a$ x 2  y 0")
    assert h.height == 0
    assert h.baseline == 2
    assert h.max_length == 0
    assert h.old_layout == 0


@pytest.mark.parametrize("raw", ["1_0", "\t3", "3\t", "\u0663", "\uff11", "0x10", "3.0", "+-3", "+"])
def test_non_decimal_fields_default(raw):
    h = Header.parse(f"flf2a$ {raw} 4")
    assert h.height == 0
    assert h.baseline == 4
    with pytest.raises(MalformedHeaderField) as exc:
        Header.parse(f"flf2a$ {raw} 4", strict=True)
    assert exc.value.field == "height"


def test_signed_fields():
    h = Header.parse("flf2a$ +2 -1 007")
    assert h.height == 2
    assert h.baseline == -1
    assert h.max_length == 7


def test_garbled_fields_resolve_to_zero():
    h = Header.parse("flf2a$ 1_0 \t3 +2 0 0")
    assert h.height == 0
    assert h.baseline == 0
    assert h.max_length == 2


def test_print_direction():
    assert Header.parse("flf2a$ 1 1 1 0 0 1").print_direction == PrintDirection.RIGHT_TO_LEFT
    assert Header.parse("flf2a$ 1 1 1 0 0 7").print_direction == PrintDirection.LEFT_TO_RIGHT
    assert PrintDirection.name(PrintDirection.RIGHT_TO_LEFT) == "RIGHT_TO_LEFT"
    assert PrintDirection.name(9) == "UNKNOWN(9)"


def test_strict_rejects_malformed_field():
    with pytest.raises(MalformedHeaderField) as exc:
        Header.parse("flf2a$ 6 five 16", strict=True)
    assert exc.value.field == "baseline"
    assert exc.value.value == "five"


def test_strict_rejects_unknown_print_direction():
    with pytest.raises(MalformedHeaderField) as exc:
        Header.parse("flf2a$ 1 1 1 0 0 3", strict=True)
    assert exc.value.field == "print_direction"


def test_strict_accepts_missing_fields():
    h = Header.parse("flf2a$ 3 2", strict=True)
    assert h.height == 3
    assert h.full_layout == 0


def test_negative_comment_lines():
    assert Header.parse("flf2a$ 1 1 1 0 -2").comment_lines == 0
    with pytest.raises(MalformedHeaderField):
        Header.parse("flf2a$ 1 1 1 0 -2", strict=True)


@pytest.mark.parametrize("content", [
    "",
    "flf2",
    "flf2 1 1 1 0 0\nx@@\n",
    "tlf2a$ 1 1 1 0 0\n",
    "FLF2A$ 1 1 1 0 0\n",
    " flf2a$ 1 1 1 0 0\n",
    "\nflf2a$ 1 1 1 0 0\n",
])
def test_invalid_signature(content):
    with pytest.raises(InvalidSignature):
        parse_flf(content)


def test_invalid_signature_is_value_error():
    with pytest.raises(ValueError):
        parse_flf("hello world")


# =============================================================================
# Line splitting
# =============================================================================

def test_split_mixed_line_endings():
    assert split_lines("a\r\nb\nc\r\n\r\nd") == ["a", "b", "c", "", "d"]


def test_split_keeps_lone_carriage_return():
    assert split_lines("a\rb\n") == ["a\rb", ""]


def test_split_keeps_empty_lines():
    assert split_lines("\n\n") == ["", "", ""]


# =============================================================================
# FigletFile
# =============================================================================

def test_comments_and_glyph_lines():
    f = parse_flf("flf2a$ 1 1 2 0 2\nfirst comment\nsecond\nx@@\ny@@")
    assert isinstance(f, FigletFile)
    assert f.comments == ("first comment", "second")
    assert f.lines == ("x@@", "y@@")
    assert f.header_lines == ("flf2a$ 1 1 2 0 2", "first comment", "second")


def test_comment_lines_kept_verbatim():
    f = parse_flf("flf2a$ 1 1 2 0 1\nflf2a$ not a header  \nx@@")
    assert f.comments == ("flf2a$ not a header  ",)


def test_windows_line_endings():
    f = parse_flf("flf2a$ 1 1 2 0 1\r\ncomment\r\nx@@\r\n")
    assert f.header.comment_lines == 1
    assert f.comments == ("comment",)
    assert f.lines == ("x@@", "")


def test_truncated_comment_block():
    with pytest.raises(TruncatedFile):
        parse_flf("flf2a$ 1 1 1 0 5\ncomment\n")


def test_comment_block_filling_content():
    f = parse_flf("flf2a$ 1 1 1 0 2\nc1\nc2")
    assert f.comments == ("c1", "c2")
    assert f.lines == ()


def test_terminator():
    assert parse_flf("flf2a$ 1 1 1 0 0\n\nx##\n").terminator == "#"
    assert parse_flf("flf2a$ 1 1 1 0 0").terminator == "@"


def test_strict_parse_flf():
    with pytest.raises(MalformedHeaderField):
        parse_flf("flf2a$ 1 1 1 0 zero\n", strict=True)
    assert parse_flf("flf2a$ 1 1 1 0 zero\n").header.comment_lines == 0
