"""Codec configuration.

Options are resolved once, when a codec is built. Anything not supplied
falls back to its default; a supplied option replaces the default whole
(a custom alphabet is never merged with the default one).
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Sequence

from abcq.core.alphabet import DEFAULT_ALPHABET

# Counter value before the first generated id
START_COUNTER = -1


@dataclass(frozen=True)
class CodecConfig:
    chars: str | tuple[str, ...] = DEFAULT_ALPHABET
    counter: int = START_COUNTER
    cache: bool = False
    cache_size: int | None = None

    def __post_init__(self):
        if not isinstance(self.chars, str):
            object.__setattr__(self, "chars", tuple(self.chars))
        if isinstance(self.counter, bool) or not isinstance(self.counter, int):
            raise TypeError(f"counter must be an int, got {self.counter!r}")
        if self.counter < START_COUNTER:
            raise ValueError(f"counter must be >= {START_COUNTER}, got {self.counter}")
        if self.cache_size is not None and self.cache_size < 1:
            raise ValueError(f"cache_size must be positive or None, got {self.cache_size}")
        if self.cache_size is not None and not self.cache:
            raise ValueError("cache_size needs cache=True")


OPTION_NAMES = frozenset(f.name for f in fields(CodecConfig))


def resolve_config(options: "CodecConfig | Mapping[str, Any] | None" = None,
                   **overrides: Any) -> CodecConfig:
    """Resolve partial options into a complete CodecConfig.

    Args:
        options: An existing CodecConfig, a mapping of option names to
                 values, or None for all defaults.
        **overrides: Option values that take precedence over `options`.

    Returns:
        A validated CodecConfig.

    Raises:
        TypeError: An option name is not recognized, or a value has the
                   wrong type.
        ValueError: A value is out of range.
    """
    if isinstance(options, CodecConfig):
        base = options
        supplied = {}
    else:
        base = CodecConfig()
        supplied = dict(options or {})
    supplied.update(overrides)

    unknown = set(supplied) - OPTION_NAMES
    if unknown:
        raise TypeError(f"Unknown codec options: {', '.join(sorted(unknown))}")
    if not supplied:
        return base
    return replace(base, **supplied)


def chars_from_text(text: str, separator: str | None = None) -> str | Sequence[str]:
    """Turn command-line alphabet text into `chars`.

    Without a separator every character is one symbol. With one, the
    text is split on it, which allows multi-character symbols.
    """
    if separator is None:
        return text
    return [s for s in text.split(separator) if s]
