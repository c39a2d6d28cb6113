"""Benchmark the modeline pass on large documents.

Scanning is capped at the leading lines, so a modeline at the end of a
huge file costs the same as no modeline at all.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

import pytest

from modeline import apply_modelines, tokenize


@pytest.mark.benchmark(group="apply")
def test_benchmark_apply_no_modeline_in_range(benchmark, large_document):
    """Large document whose modeline lies past the scan limit."""
    benchmark(apply_modelines, large_document)


@pytest.mark.benchmark(group="apply")
def test_benchmark_apply_first_line(benchmark, headed_document):
    """Large document with a five-option modeline on line 1."""
    benchmark(apply_modelines, headed_document)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize(benchmark):
    """Tokenizing a long, delimiter-heavy modeline."""
    line = "/* vim: set " + ":".join(f"ts={i},,sw={i}" for i in range(200)) + ": */"
    benchmark(tokenize, line)
