"""
Font Benchmarks
===============
Measures parsing, compiling and rendering of FIGfont content.
"""

from figlet import BannerRenderer, compile_font, parse_flf, render_text
from utils import (
    avg_timed, print_font_summary, print_header, print_metric, print_sample,
    print_separator, timed,
)

ITERATIONS = 200


def run(content: str) -> None:
    """Run all font benchmarks against the given content."""
    font = bench_loading(content)
    bench_render(font)
    bench_fallback(font)


def bench_loading(content: str):
    """Benchmark the parse and compile stages separately."""
    print_header("FONT: LOADING")

    raw, elapsed = timed(parse_flf, content)
    print_metric("parse_flf()", elapsed)
    print_metric("glyph lines", len(raw.lines), "lines")

    font, elapsed = timed(compile_font, raw)
    print_metric("compile_font()", elapsed)
    print_font_summary(font)

    print_metric("parse + compile (avg)", avg_timed(lambda: compile_font(parse_flf(content)), ITERATIONS))
    print_separator()
    return font


def bench_render(font) -> None:
    """Benchmark render_text() on inputs of increasing length."""
    print_header("FONT: RENDER")

    print_sample(font, "Hi!")
    print()

    for text in ("Hi", "Hello World", "The quick brown fox jumps over the lazy dog"):
        elapsed = avg_timed(render_text, ITERATIONS, font, text)
        print_metric(f"render_text({len(text)} chars)", elapsed)

    # Unmapped characters are skipped
    elapsed = avg_timed(render_text, ITERATIONS, font, "é" * 40)
    print_metric("render_text(40 unmapped)", elapsed)
    print_separator()


def bench_fallback(font) -> None:
    """Benchmark BannerRenderer with a fallback font in the stack."""
    print_header("FONT: FALLBACK STACK")

    banner = BannerRenderer(font)
    elapsed = avg_timed(banner.render, ITERATIONS, "fallback")
    print_metric("render() [1 font]", elapsed)

    banner.add_font(font)
    elapsed = avg_timed(banner.render, ITERATIONS, "fallbacké")
    print_metric("render() [2 fonts, 1 miss]", elapsed)

    print_metric("measure_width('fallback')", banner.measure_width("fallback"), "cols")
    print_separator()
