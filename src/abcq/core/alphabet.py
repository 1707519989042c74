"""Symbol alphabets for the bijective numeral codec.

An alphabet is an ordered run of distinct symbols. A symbol's position is
its digit value, so "abc" gives a=0, b=1, c=2. Symbols are usually single
characters, but longer strings work too (emoji with modifiers, for
example), in which case the alphabet should be given as a list.

Longer symbols must join unambiguously: any run of symbols has to split
back into those same symbols and no others. ["a", "aa"] is refused since
"aa" reads as either one symbol or two. ["👍", "👍🏽"] is fine because
the skin-tone modifier on its own is not a symbol.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

# Lowercase first, then uppercase. No digits or punctuation.
DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

MIN_SYMBOLS = 2


def _dangling(prefixes: Iterable[str], words: Iterable[str]) -> set[str]:
    """Non-empty tails left over where a prefix starts a longer word."""
    words = list(words)
    return {w[len(p):] for p in prefixes for w in words
            if len(w) > len(p) and w.startswith(p)}


def ambiguous_symbol(symbols: Iterable[str]) -> str | None:
    """Sardinas-Patterson test for unique decodability.

    Returns a symbol that shows up as a leftover tail (so some run of
    symbols splits two ways), or None if every run splits one way only.
    """
    codewords = set(symbols)
    tails = _dangling(codewords, codewords)
    seen = set()
    while tails:
        hit = tails & codewords
        if hit:
            return min(hit)
        seen |= tails
        tails = (_dangling(codewords, tails) | _dangling(tails, codewords)) - seen
    return None


@dataclass(frozen=True)
class Alphabet:
    symbols: tuple[str, ...]
    index: dict[str, int] = field(init=False, repr=False, compare=False)
    longest: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.symbols) < MIN_SYMBOLS:
            raise ValueError(
                f"Alphabet needs at least {MIN_SYMBOLS} symbols, got {len(self.symbols)}")
        for s in self.symbols:
            if not isinstance(s, str):
                raise ValueError(f"Alphabet symbols must be strings, got {s!r}")
            if not s:
                raise ValueError("Alphabet symbols must not be empty")
        index = {s: i for i, s in enumerate(self.symbols)}
        if len(index) != len(self.symbols):
            dupes = sorted({s for s in self.symbols if self.symbols.count(s) > 1})
            raise ValueError(f"Duplicate symbols in alphabet: {dupes!r}")
        longest = max(len(s) for s in self.symbols)
        if longest > 1:
            clash = ambiguous_symbol(self.symbols)
            if clash is not None:
                raise ValueError(
                    f"Alphabet symbols do not join unambiguously (around {clash!r})")
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "longest", longest)

    @classmethod
    def from_chars(cls, chars: str | Sequence[str]) -> "Alphabet":
        """Build an alphabet from a string (one symbol per character) or a list of symbols."""
        return cls(tuple(chars))

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self.index

    def __getitem__(self, value: int) -> str:
        return self.symbols[value]

    def value_of(self, symbol: str) -> int | None:
        """Zero-based digit value of a symbol, or None if it is not in the alphabet."""
        return self.index.get(symbol)

    def split(self, text: str) -> list[str] | None:
        """Split an encoded string into alphabet symbols.

        Single-character alphabets split per character. Alphabets with
        longer symbols are parsed right to left, recording for each
        position a symbol that leads to a complete split of the rest.
        Construction guarantees there is at most one complete split.

        Returns None if the text cannot be split into alphabet symbols.
        """
        if self.longest == 1:
            parts = list(text)
            if all(c in self.index for c in parts):
                return parts
            return None

        n = len(text)
        # width[pos]: length of the symbol starting at pos, 0 if no split from pos
        width = [0] * (n + 1)
        for pos in range(n - 1, -1, -1):
            for w in range(min(self.longest, n - pos), 0, -1):
                if (pos + w == n or width[pos + w]) and text[pos:pos + w] in self.index:
                    width[pos] = w
                    break

        if n and not width[0]:
            return None
        parts = []
        pos = 0
        while pos < n:
            parts.append(text[pos:pos + width[pos]])
            pos += width[pos]
        return parts
