"""Benchmark progressive reveal: the cost of re-parsing every prefix.

Revealing N characters one at a time re-parses N prefixes, so total cost
grows quadratically with message length. These benchmarks record that
characteristic and the saving from segment memoization when a reply has
code fences.

Run with:
    pytest benchmarks/benchmark_reveal.py -v --benchmark-only
"""

import pytest

from chatmark import parse, reveal


def _naive_reveal(source: str) -> None:
    for end in range(1, len(source) + 1):
        parse(source[:end])


@pytest.mark.benchmark(group="reveal")
@pytest.mark.parametrize("copies", [1, 2, 4])
def test_benchmark_reveal_scaling(benchmark, chat_message, copies):
    """Reveal 1x, 2x and 4x the reply: expect roughly 1x, 4x, 16x the time."""
    source = "\n".join([chat_message] * copies)
    benchmark(lambda: list(reveal(source)))


@pytest.mark.benchmark(group="reveal-memo")
def test_benchmark_reveal_memoized(benchmark, chat_message):
    """reveal() with segment memoization."""
    benchmark(lambda: list(reveal(chat_message)))


@pytest.mark.benchmark(group="reveal-memo")
def test_benchmark_reveal_naive(benchmark, chat_message):
    """Baseline: a fresh parse() per prefix."""
    benchmark(_naive_reveal, chat_message)
