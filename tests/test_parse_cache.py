"""Tests for content-addressed parse cache."""

from chatmark import (
    ANALYSIS_PRESET,
    CHAT_PRESET,
    DictParseCache,
    Document,
    FeatureConfig,
    Markdown,
    hash_config,
    hash_content,
    parse,
)


class TestDictParseCache:
    """Tests for DictParseCache."""

    def test_get_returns_none_when_empty(self) -> None:
        cache = DictParseCache()
        assert cache.get("abc123", "config1") is None

    def test_put_then_get_returns_doc(self) -> None:
        cache = DictParseCache()
        doc = Document(())
        cache.put("abc123", "config1", doc)
        assert cache.get("abc123", "config1") is doc
        assert len(cache) == 1

    def test_different_keys_return_none(self) -> None:
        cache = DictParseCache()
        cache.put("abc123", "config1", Document(()))
        assert cache.get("xyz789", "config1") is None
        assert cache.get("abc123", "config2") is None


class TestHashHelpers:
    """Tests for hash_content and hash_config."""

    def test_hash_content_deterministic(self) -> None:
        assert hash_content("# Hello") == hash_content("# Hello")

    def test_hash_content_different_for_different_input(self) -> None:
        assert hash_content("# Hello") != hash_content("# World")

    def test_hash_config_different_per_preset(self) -> None:
        assert hash_config(CHAT_PRESET) != hash_config(ANALYSIS_PRESET)

    def test_hash_config_equal_for_equal_configs(self) -> None:
        assert hash_config(FeatureConfig(supports_links=True)) == hash_config(
            FeatureConfig(supports_links=True)
        )


class TestParseWithCache:
    """parse() and Markdown consult the cache."""

    def test_second_parse_is_cache_hit(self) -> None:
        cache = DictParseCache()
        doc1 = parse("# Hello", cache=cache)
        doc2 = parse("# Hello", cache=cache)
        assert doc1 is doc2
        assert len(cache) == 1

    def test_presets_do_not_share_entries(self) -> None:
        cache = DictParseCache()
        chat = parse("| a |\n|---|", CHAT_PRESET, cache=cache)
        analysis = parse("| a |\n|---|", ANALYSIS_PRESET, cache=cache)
        assert chat != analysis
        assert len(cache) == 2

    def test_parse_many_dedupes_within_batch(self) -> None:
        cache = DictParseCache()
        docs = Markdown().parse_many(["same", "same", "other"], cache=cache)
        assert docs[0] is docs[1]
        assert len(cache) == 2

    def test_cached_result_equals_fresh_parse(self) -> None:
        cache = DictParseCache()
        source = "- a\n- **b**"
        parse(source, cache=cache)
        assert parse(source, cache=cache) == parse(source)
