"""Thread safety tests for chatmark.

parse() keeps all mutable state local to the call and scopes its config in
a ContextVar. These tests run real threads with different presets to catch
config bleeding or shared-state races.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from chatmark import ANALYSIS_PRESET, CHAT_PRESET, HtmlRenderer, Markdown, Table, parse

SOURCE = "# Title\n\n| a | b |\n|---|---|\n| 1 | 2 |\n\n- [x](u)\n1. y"


class TestConcurrentParsing:
    """Concurrent parses with different presets do not interfere."""

    def test_presets_do_not_bleed_across_threads(self) -> None:
        expected_chat = parse(SOURCE, CHAT_PRESET)
        expected_analysis = parse(SOURCE, ANALYSIS_PRESET)
        assert expected_chat != expected_analysis

        errors: list[str] = []
        barrier = threading.Barrier(8)

        def worker(index: int) -> None:
            config = CHAT_PRESET if index % 2 else ANALYSIS_PRESET
            expected = expected_chat if index % 2 else expected_analysis
            barrier.wait()
            for _ in range(50):
                if parse(SOURCE, config) != expected:
                    errors.append(f"thread {index} produced a mismatched document")
                    return

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []

    def test_thread_pool_parse_many(self) -> None:
        sources = [f"| h{i} |\n|---|\n| {i} |" for i in range(40)]
        md = Markdown()

        with ThreadPoolExecutor(max_workers=4) as executor:
            docs = list(executor.map(md.parse, sources))

        assert all(isinstance(doc.children[0], Table) for doc in docs)
        assert docs == md.parse_many(sources)

    def test_shared_renderer(self) -> None:
        renderer = HtmlRenderer()
        doc = parse(SOURCE)
        expected = renderer.render_document(doc)

        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(lambda _: renderer.render_document(doc), range(20)))

        assert results == [expected] * 20
