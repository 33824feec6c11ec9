"""A tiny vocabulary that reproduces a few published GPT-2/GPT-3 encodings.

The base pieces (one per byte) use the published ids 0...255. The final pieces of "This is some text." and
"Lorem" use their published ids. Intermediate pieces get made-up ids.
"""

import json
import unittest

from gpt3enc.data.registry import EncodingRegistry
from gpt3enc.data.resources import MappingResourceReader
from gpt3enc.tokenizers.byte_map import bytes_to_unicode


FIXTURE_MERGES = [
    ("T", "h"),
    ("i", "s"),
    ("Th", "is"),
    ("Ġ", "is"),
    ("Ġ", "s"),
    ("o", "m"),
    ("Ġs", "om"),
    ("Ġsom", "e"),
    ("Ġ", "t"),
    ("e", "x"),
    ("Ġt", "ex"),
    ("Ġtex", "t"),
    ("o", "r"),
    ("e", "m"),
    ("or", "em"),
]

_PUBLISHED_IDS = {
    "This": 1212,
    "Ġis": 318,
    "Ġsome": 617,
    "Ġtext": 2420,
    "orem": 29625,
}


def fixture_encoder() -> dict[str, int]:
    """Piece -> id table covering every byte and every fixture merge."""
    encoder = {symbol: token for token, symbol in enumerate(bytes_to_unicode().values())}
    next_token = 256
    for first, second in FIXTURE_MERGES:
        piece = first + second
        if piece in _PUBLISHED_IDS:
            encoder[piece] = _PUBLISHED_IDS[piece]
        else:
            encoder[piece] = next_token
            next_token += 1
    return encoder


def fixture_merges_text() -> str:
    """The merge list in the published file format."""
    lines = ["#version: 0.2"] + [f"{first} {second}" for first, second in FIXTURE_MERGES]
    return "\n".join(lines) + "\n"


def fixture_resources() -> dict[str, bytes]:
    """Resource name -> bytes, as they would be read from disk."""
    return {
        "encoder.json": json.dumps(fixture_encoder()).encode("utf-8"),
        "vocab.bpe": fixture_merges_text().encode("utf-8"),
    }


def fixture_reader() -> MappingResourceReader:
    """A resource reader serving the fixture vocabulary."""
    return MappingResourceReader(fixture_resources())


def has_published_resources() -> bool:
    """Whether the published resources were downloaded into the asset directory."""
    registry = EncodingRegistry()
    return registry.encoder_file("gpt3").exists() and registry.merges_file("gpt3").exists()


skip_without_published_resources = unittest.skipUnless(
    has_published_resources(),
    "Published resources not found. Run scripts/download_encodings.py",
)
