"""Registry of split patterns, and the regex pretokenizer that applies them."""

from __future__ import annotations

from typing import Iterator

import regex

from gpt3enc.errors import PatternError


class SplitPattern:
    """Registry of available split patterns for the Pretokenizer."""

    # Should have added re.IGNORECASE so BPE merges can happen for capitalized versions of contractions,
    # but the published vocabulary was built without it.
    _PATTERNS = {
        "gpt-2": r"""'s|'t|'re|'ve|'m|'ll|'d| ?\p{L}+| ?\p{N}+| ?[^\s\p{L}\p{N}]+|\s+(?!\S)|\s+""",
    }

    @classmethod
    def default_pattern_name(cls) -> str:
        """Get the default split pattern name."""
        return "gpt-2"

    @classmethod
    def all_pattern_names(cls) -> list[str]:
        """Get all valid split pattern names."""
        return list(cls._PATTERNS.keys())

    @classmethod
    def get_pattern(cls, pattern_name: str) -> str:
        """Get the split pattern of the given name."""
        if pattern_name not in cls._PATTERNS:
            raise ValueError(f"Unrecognized pattern: '{pattern_name}'")
        return cls._PATTERNS[pattern_name]


class Chunks:
    """Lazy sequence of the chunks of one text.

    Each iteration rescans the text from the start, so the sequence can be consumed any number of times.
    """

    def __init__(self, pattern: regex.Pattern, text: str) -> None:
        """Initialize the sequence."""
        self.pattern = pattern
        self.text = text

    def __iter__(self) -> Iterator[str]:
        """Scan the text and yield each chunk."""
        text = self.text
        for match in self.pattern.finditer(text, concurrent=False):
            start, end = match.span()
            yield text[start:end]


class Pretokenizer:
    """Split text into chunks that the BPE merge loop handles independently."""

    def __init__(self, split_pattern: str = SplitPattern.get_pattern("gpt-2")) -> None:
        """Initialize the pretokenizer."""
        self.split_pattern = split_pattern
        try:
            self.pattern = regex.compile(split_pattern)
        except regex.error as e:
            raise PatternError(f"Unable to compile split pattern: {e}", pattern=split_pattern) from e

    def split(self, text: str) -> Chunks:
        """The chunks of `text`, in order."""
        return Chunks(self.pattern, text)

    def spans(self, text: str) -> Iterator[tuple[int, int]]:
        """The (start, end) offsets of each chunk of `text`, in order."""
        for match in self.pattern.finditer(text, concurrent=False):
            yield match.span()
