"""Benchmark full parses under both presets, with and without the parse cache.

Run with:
    pytest benchmarks/benchmark_parse.py -v --benchmark-only
"""

import pytest

from chatmark import ANALYSIS_PRESET, CHAT_PRESET, DictParseCache, Markdown, parse, render


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse_chat(benchmark, chat_message):
    """Parse one chat reply with the chat preset."""
    benchmark(parse, chat_message, CHAT_PRESET)


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse_analysis(benchmark, chat_message):
    """Parse the same text with the analysis preset."""
    benchmark(parse, chat_message, ANALYSIS_PRESET)


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse_and_render(benchmark, chat_message):
    """Parse plus HTML render."""
    benchmark(lambda: render(parse(chat_message)))


@pytest.mark.benchmark(group="history")
def test_benchmark_history_uncached(benchmark, long_conversation):
    """Re-render a conversation history without a cache."""
    md = Markdown()
    benchmark(md.parse_many, long_conversation)


@pytest.mark.benchmark(group="history")
def test_benchmark_history_cached(benchmark, long_conversation):
    """Re-render a conversation history with a warm cache."""
    md = Markdown()
    cache = DictParseCache()
    md.parse_many(long_conversation, cache=cache)
    benchmark(md.parse_many, long_conversation, cache=cache)
