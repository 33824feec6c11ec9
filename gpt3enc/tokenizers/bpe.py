"""Utilities for implementing the Byte-Pair Encoding (BPE) merge loop."""

import threading
import unicodedata
from typing import Mapping, Optional, Sequence

from gpt3enc.tokenizers.byte_map import BYTE_MAP
from gpt3enc.tokenizers.vocabulary import SymbolPair


BPECache = dict[str, str]


def get_pairs(word: Sequence[str]) -> set[SymbolPair]:
    """Return the set of adjacent symbol pairs in a word."""
    return set(zip(word, word[1:]))


def _min_rank_pair(word: Sequence[str], bpe_ranks: Mapping[SymbolPair, int]) -> Optional[SymbolPair]:
    """Find the mergeable pair with the lowest rank.

    Ties go to the pair seen first when scanning left to right.
    """
    best_pair = None
    best_rank = -1
    for pair in zip(word, word[1:]):
        rank = bpe_ranks.get(pair, None)
        if rank is not None and (best_pair is None or rank < best_rank):
            best_pair, best_rank = pair, rank
    return best_pair


def _merge_pair(word: Sequence[str], first: str, second: str) -> list[str]:
    """Replace every non-overlapping occurrence of (first, second), scanning left to right."""
    new_word: list[str] = []
    i = 0
    n = len(word)
    while i < n:
        # Jump to the next occurrence of `first`
        try:
            j = word.index(first, i)
        except ValueError:
            new_word.extend(word[i:])
            break
        new_word.extend(word[i:j])
        i = j

        if i < n - 1 and word[i + 1] == second:
            new_word.append(first + second)
            i += 2
        else:
            new_word.append(word[i])
            i += 1
    return new_word


def merge_symbols(symbols: Sequence[str], bpe_ranks: Mapping[SymbolPair, int]) -> list[str]:
    """Greedily merge adjacent symbols in rank order until no ranked pair remains."""
    word = list(symbols)
    while len(word) > 1:
        bigram = _min_rank_pair(word, bpe_ranks)
        if bigram is None:
            break  # no merge candidates left
        word = _merge_pair(word, bigram[0], bigram[1])
    return word


def bpe(token: str, bpe_ranks: Mapping[SymbolPair, int]) -> str:
    """Merge a byte-remapped chunk, returning the merged pieces joined by single spaces.

    A space can never occur inside a piece since byte 0x20 is remapped to another symbol.
    """
    if len(token) < 2:
        return token
    return " ".join(merge_symbols(token, bpe_ranks))


class BPEMerger:
    """Memoized BPE merging over a fixed merge table.

    The cache grows for the lifetime of the merger and is never evicted. Merging is a pure function of its
    input, so concurrent callers may compute the same key twice but always store the same value.
    """

    def __init__(self, bpe_ranks: Mapping[SymbolPair, int]) -> None:
        """Initialize the merger."""
        self.bpe_ranks = bpe_ranks
        self.cache: BPECache = {}
        self._lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        """The number of memoized chunks."""
        with self._lock:
            return len(self.cache)

    def merge(self, token: str, use_cache: bool = True) -> str:
        """Merge a byte-remapped chunk into space-joined pieces."""
        if not use_cache:
            return bpe(token, self.bpe_ranks)

        with self._lock:
            word = self.cache.get(token, None)
        if word is not None:
            return word

        word = bpe(token, self.bpe_ranks)
        with self._lock:
            self.cache[token] = word
        return word


def _replace_control_characters(s: str) -> str:
    """Escape control characters in a string.

    Ref: https://github.com/karpathy/minbpe/blob/1acefe89412b20245db5a22d2a02001e547dc602/minbpe/base.py#L44
    """
    chars: list[str] = []

    for ch in s:
        if unicodedata.category(ch)[0] == "C":
            chars.append(f"\\u{ord(ch):04x}")  # escape
        else:
            chars.append(ch)  # this character is ok

    return "".join(chars)


def render_bytes(b: bytes) -> str:
    """Convert a sequence of bytes to a string, escaping control characters."""
    s = b.decode("utf-8", errors="replace")
    s = _replace_control_characters(s)
    return s


def render_piece(piece: str) -> str:
    """Convert a vocabulary piece to readable text, escaping control characters."""
    return render_bytes(BYTE_MAP.decode_symbols(piece))
