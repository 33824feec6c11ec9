"""Benchmarks for the BPE merge loop with and without the chunk cache."""

import gc
import os
import random

import psutil

from gpt3enc.tokenizers import TokenEncoder
from gpt3enc.tokenizers.bpe import merge_symbols
from gpt3enc.tokenizers.byte_map import BYTE_MAP
from gpt3enc.utils.profile import Profile


def _get_process_memory() -> float:
    process = psutil.Process(os.getpid())
    rss_memory = process.memory_info().rss
    rss_memory_mb = rss_memory / (1024 * 1024)
    return rss_memory_mb


def _random_words(num_words: int, vocab: list[str], seed: int = 0) -> str:
    rng = random.Random(seed)
    return " ".join(rng.choice(vocab) for _ in range(num_words))


def main() -> None:
    """Run the benchmark."""
    print("-- Running benchmark for the BPE chunk cache ------------------------------------")
    encoder = TokenEncoder.load("gpt3")

    # A small set of words repeated many times, like natural text
    vocab = [
        "the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog", "tokenization",
        "encoder", "byte", "pair", "merging", "unbelievable", "antidisestablishmentarianism",
    ]  # fmt: skip
    text = _random_words(200_000, vocab)
    num_bytes = len(text.encode("utf-8"))

    with Profile("uncached") as prof:
        uncached = encoder.encode(text, use_cache=False)
    print(prof.report(num_bytes))

    gc.collect()
    memory_before = _get_process_memory()
    with Profile("cold cache") as prof:
        cold = encoder.encode(text, use_cache=True)
    print(prof.report(num_bytes))
    gc.collect()
    memory_after = _get_process_memory()

    with Profile("warm cache") as prof:
        warm = encoder.encode(text, use_cache=True)
    print(prof.report(num_bytes))

    assert uncached == cold == warm
    print(f"cache_size={encoder.cache_size:,}, memory_increase={memory_after - memory_before:.1f} MB")

    # Worst case for the full pair rescan: one long chunk with no whitespace
    long_chunk = BYTE_MAP.encode_bytes(("x" * 2_000).encode("utf-8"))
    with Profile("long chunk") as prof:
        merge_symbols(long_chunk, encoder.vocabulary.bpe_ranks)
    print(prof.report(len(long_chunk)))


if __name__ == "__main__":
    main()
