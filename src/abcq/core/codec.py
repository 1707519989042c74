"""Bijective base-N codec: integers to short strings and back.

Every non-negative integer maps to exactly one string over the alphabet
and every string over the alphabet maps back to exactly one integer. With
the alphabet "ab":

    0 -> a     2 -> aa    6 -> aaa
    1 -> b     3 -> ab    7 -> aab
               4 -> ba    ...
               5 -> bb

The least significant digit is zero-based, every more significant digit
is one-based. That is what removes the leading-zero ambiguity of plain
positional base-N ("a" and "aa" are different numbers here).

Usage:
    codec = BijectiveCodec()
    codec.generate()        # "a"
    codec.generate()        # "b"
    codec.encode(19854)     # "gqQ"
    codec.decode("gqQ")     # 19854
"""

import logging
import threading
from typing import Any, Mapping

from abcq.core.alphabet import Alphabet
from abcq.core.config import CodecConfig, resolve_config

log = logging.getLogger(__name__)


class BijectiveCodec:
    """Encodes integers as bijective base-N strings and hands out sequential ids."""

    def __init__(self, options: "CodecConfig | Mapping[str, Any] | None" = None,
                 **overrides: Any):
        """
        Args:
            options: CodecConfig or a mapping with any of `chars`,
                     `counter`, `cache`, `cache_size`.
            **overrides: The same options as keywords; these win over
                         `options`.

        Example:
            BijectiveCodec(chars=["🦄", "💖"], counter=42)
        """
        self.config = resolve_config(options, **overrides)
        self.alphabet = Alphabet.from_chars(self.config.chars)
        self._counter = self.config.counter
        self._lock = threading.Lock()

        # int -> encoded string, only when caching is enabled
        self._cache = {} if self.config.cache else None
        self._cache_lock = threading.Lock()

    def __repr__(self):
        return (f"{type(self).__name__}(chars={self.chars!r}, "
                f"counter={self._counter})")

    @property
    def chars(self):
        """The configured alphabet, as it was given (str or tuple of symbols)."""
        return self.config.chars

    @property
    def counter(self) -> int:
        """Last value handed to `generate`, -1 before the first call."""
        return self._counter

    @property
    def base(self) -> int:
        return len(self.alphabet)

    def generate(self) -> str:
        """Advance the counter and return its encoding.

        A fresh codec yields encode(0), encode(1), ... in order. Safe to
        call from several threads on one instance.
        """
        with self._lock:
            self._counter += 1
            return self.encode(self._counter)

    def encode(self, i: int) -> str | None:
        """Encode a non-negative integer. Returns None for negative input."""
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"encode() expects an int, got {type(i).__name__}")
        if i < 0:
            log.debug("encode: rejected negative input %d", i)
            return None

        if self._cache is not None:
            hit = self._cache.get(i)
            if hit is not None:
                return hit

        symbols = self.alphabet.symbols
        base = len(symbols)
        digits = []
        rest = i
        while True:
            rest, digit = divmod(rest, base)
            digits.append(symbols[digit])
            if rest == 0:
                break
            # Slots above the first are one-based
            rest -= 1
        encoded = "".join(reversed(digits))

        if self._cache is not None:
            self._remember(i, encoded)
        return encoded

    def decode(self, text: str) -> int | None:
        """Decode a string back to its integer.

        Returns None if the text holds anything that is not an alphabet
        symbol. The empty string decodes to -1, the counter value before
        the first id.
        """
        if not isinstance(text, str):
            raise TypeError(f"decode() expects a str, got {type(text).__name__}")
        parts = self.alphabet.split(text)
        if parts is None:
            log.debug("decode: %r does not split into alphabet symbols", text)
            return None

        base = len(self.alphabet)
        index = self.alphabet.index
        total = 0
        for symbol in parts:
            total = total * base + index[symbol] + 1
        return total - 1

    def _remember(self, i: int, encoded: str):
        with self._cache_lock:
            size = self.config.cache_size
            if size is not None and i not in self._cache:
                while len(self._cache) >= size:
                    # Oldest first; dicts keep insertion order
                    del self._cache[next(iter(self._cache))]
            self._cache[i] = encoded

    def cache_info(self) -> dict:
        """Cache statistics: {"enabled", "size", "max_size"}."""
        return {
            "enabled": self._cache is not None,
            "size": len(self._cache) if self._cache is not None else 0,
            "max_size": self.config.cache_size,
        }

    def is_cached(self, i: int) -> bool:
        """Whether encode(i) would be served from the cache."""
        return self._cache is not None and i in self._cache
