"""Tests for abcq.core.config."""

import pytest

from abcq.core.alphabet import DEFAULT_ALPHABET
from abcq.core.config import CodecConfig, chars_from_text, resolve_config


class TestResolveConfig:
    def test_defaults(self):
        config = resolve_config()
        assert config == CodecConfig()
        assert config.chars == DEFAULT_ALPHABET
        assert config.counter == -1
        assert config.cache is False
        assert config.cache_size is None

    def test_partial_mapping_keeps_other_defaults(self):
        config = resolve_config({"counter": 5})
        assert config.counter == 5
        assert config.chars == DEFAULT_ALPHABET

    def test_chars_replace_default_whole(self):
        """A supplied alphabet is used as-is, never merged with the default."""
        assert resolve_config({"chars": "xy"}).chars == "xy"

    def test_overrides_win(self):
        config = resolve_config({"counter": 5}, counter=7)
        assert config.counter == 7

    def test_config_passthrough(self):
        config = CodecConfig(chars="ab")
        assert resolve_config(config) is config

    def test_config_with_overrides(self):
        config = resolve_config(CodecConfig(chars="ab"), counter=3)
        assert config.chars == "ab"
        assert config.counter == 3

    def test_unknown_option(self):
        with pytest.raises(TypeError, match="Unknown codec options: bar, foo"):
            resolve_config({"foo": 1, "bar": 2})

    def test_sequence_chars_frozen(self):
        config = resolve_config({"chars": ["🦄", "💖"]})
        assert config.chars == ("🦄", "💖")


class TestCodecConfig:
    def test_frozen(self):
        config = CodecConfig()
        with pytest.raises(AttributeError):
            config.counter = 3

    def test_counter_type(self):
        with pytest.raises(TypeError, match="counter must be an int"):
            CodecConfig(counter="1")
        with pytest.raises(TypeError, match="counter must be an int"):
            CodecConfig(counter=True)

    def test_counter_lower_bound(self):
        assert CodecConfig(counter=-1).counter == -1
        with pytest.raises(ValueError, match="counter must be >= -1"):
            CodecConfig(counter=-2)

    def test_cache_size(self):
        assert CodecConfig(cache=True, cache_size=10).cache_size == 10
        with pytest.raises(ValueError, match="cache_size must be positive"):
            CodecConfig(cache=True, cache_size=0)

    def test_cache_size_without_cache(self):
        """A bound on a disabled cache is a configuration mistake."""
        with pytest.raises(ValueError, match="cache_size needs cache=True"):
            CodecConfig(cache_size=10)
        with pytest.raises(ValueError, match="cache_size needs cache=True"):
            resolve_config({"cache_size": 10, "cache": False})


class TestCharsFromText:
    def test_no_separator(self):
        assert chars_from_text("abc") == "abc"

    def test_separator(self):
        assert chars_from_text("🦄,💖", ",") == ["🦄", "💖"]

    def test_separator_drops_empty(self):
        assert chars_from_text("ab,,cd,", ",") == ["ab", "cd"]
