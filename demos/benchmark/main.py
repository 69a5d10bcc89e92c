"""
Benchmark Runner
================
Runs the figlet benchmarks.

Usage:
    python main.py                 # synthetic printable-ASCII font
    python main.py standard.flf    # a real font file
"""

import sys

import bench_font
from utils import BENCHMARK_VERSION, print_header, synthetic_font


def main(argv) -> None:
    if len(argv) > 1:
        with open(argv[1], encoding="ascii") as f:
            content = f.read()
        source = argv[1]
    else:
        content = synthetic_font()
        source = "synthetic"

    print_header(f"FIGLET BENCHMARKS v{BENCHMARK_VERSION} ({source})")
    bench_font.run(content)


if __name__ == "__main__":
    main(sys.argv)
