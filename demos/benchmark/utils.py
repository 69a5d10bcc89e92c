"""
Benchmark Utilities
===================
Timing and report helpers for the figlet benchmarks.
"""

import gc
import time

from figlet import render_text

BENCHMARK_VERSION = "1.0.0"
REPORT_WIDTH = 60


def timed(func, *args, **kwargs):
    """Run func once; return (result, elapsed_ms)."""
    gc.collect()
    start = time.perf_counter_ns()
    result = func(*args, **kwargs)
    return result, (time.perf_counter_ns() - start) / 1e6


def avg_timed(func, iterations, *args, **kwargs) -> float:
    """Average wall time of func over `iterations` calls, in ms."""
    gc.collect()
    start = time.perf_counter_ns()
    for _ in range(iterations):
        func(*args, **kwargs)
    return (time.perf_counter_ns() - start) / iterations / 1e6


def print_header(title: str) -> None:
    print()
    print("=" * REPORT_WIDTH)
    print(f"  {title}")
    print("=" * REPORT_WIDTH)


def print_metric(name: str, value, unit: str = "ms") -> None:
    """Print one aligned result row; floats get two decimals."""
    shown = f"{value:.2f}" if isinstance(value, float) else str(value)
    print(f"  {name:<40} {shown:>10} {unit}")


def print_separator() -> None:
    print("-" * REPORT_WIDTH)


def print_font_summary(font) -> None:
    """Print glyph count, height range and codepoint span of a compiled font."""
    cps = font.codepoints()
    print_metric("glyphs", len(font), "glyphs")
    print_metric("effective height", font.height, "rows")
    print_metric("declared height", font.header.height, "rows")
    if cps:
        print_metric("codepoints", f"{cps[0]}..{cps[-1]}", "")


def print_sample(font, text: str) -> None:
    """Render text with the font and print it indented, clipped to the report width."""
    for line in render_text(font, text):
        print(f"  {line[:REPORT_WIDTH - 2]}")


def synthetic_font(height: int = 6) -> str:
    """FIGfont content covering printable ASCII, for runs without a .flf file."""
    lines = [f"flf2a$ {height} {height - 1} 8 0 1", "synthetic benchmark font"]
    for cp in range(32, 127):
        ch = "S" if chr(cp) == "$" else chr(cp)
        for row in range(height):
            end = "@" if row < height - 1 else "@@"
            lines.append(f"{ch}$${ch}{end}")
    return "\n".join(lines) + "\n"
