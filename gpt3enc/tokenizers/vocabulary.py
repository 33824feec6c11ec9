"""Parsing of the published vocabulary (piece -> id) and merge list (pair -> rank) resources."""

from __future__ import annotations

from dataclasses import dataclass
import json
from types import MappingProxyType
from typing import Mapping

from gpt3enc.data.resources import ResourceReader
from gpt3enc.errors import MalformedResourceError


SymbolPair = tuple[str, str]
Encoder = Mapping[str, int]
Decoder = Mapping[int, str]
BPERanks = Mapping[SymbolPair, int]


def parse_encoder(data: bytes, name: str = "encoder.json") -> dict[str, int]:
    """Parse a JSON object mapping each piece to its integer id."""
    try:
        obj = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedResourceError(f"Invalid JSON: {e}", name=name) from e

    if not isinstance(obj, dict):
        raise MalformedResourceError("Expected a JSON object of piece -> id", name=name)

    seen: dict[int, str] = {}
    for piece, token in obj.items():
        # bool is a subclass of int, but never a valid id
        if not isinstance(token, int) or isinstance(token, bool) or token < 0:
            raise MalformedResourceError(f"Invalid id for piece {piece!r}: {token!r}", name=name)
        if token in seen:
            raise MalformedResourceError(
                f"Duplicate id {token} for pieces {seen[token]!r} and {piece!r}",
                name=name,
            )
        seen[token] = piece

    return obj


def parse_merges(data: bytes, name: str = "vocab.bpe") -> dict[SymbolPair, int]:
    """Parse an ordered merge list into a pair -> rank lookup.

    The first line is a version header. Every following non-blank line holds exactly two
    whitespace-separated pieces. Earlier lines have lower rank and are merged first.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedResourceError(f"Invalid UTF-8: {e}", name=name) from e

    bpe_ranks: dict[SymbolPair, int] = {}
    rank = 0
    for line_no, line in enumerate(text.split("\n"), start=1):
        if line_no == 1 or not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise MalformedResourceError(
                f"Expected 2 pieces, got {len(parts)}: {line!r}",
                name=name,
                line=line_no,
            )
        bpe_ranks[(parts[0], parts[1])] = rank  # a repeated pair keeps its last rank
        rank += 1

    return bpe_ranks


@dataclass(frozen=True)
class Vocabulary:
    """The immutable tables of one encoding scheme."""

    encoder: Encoder
    decoder: Decoder
    bpe_ranks: BPERanks

    @classmethod
    def from_tables(cls, encoder: Mapping[str, int], bpe_ranks: Mapping[SymbolPair, int]) -> Vocabulary:
        """Build a vocabulary from already-parsed tables."""
        decoder = {token: piece for piece, token in encoder.items()}
        if len(decoder) != len(encoder):
            raise MalformedResourceError("Vocabulary ids are not unique")
        return cls(
            encoder=MappingProxyType(dict(encoder)),
            decoder=MappingProxyType(decoder),
            bpe_ranks=MappingProxyType(dict(bpe_ranks)),
        )

    @classmethod
    def load(
        cls,
        reader: ResourceReader,
        encoder_name: str = "encoder.json",
        merges_name: str = "vocab.bpe",
    ) -> Vocabulary:
        """Read and parse both resources of a scheme."""
        encoder = parse_encoder(reader.read(encoder_name), name=encoder_name)
        bpe_ranks = parse_merges(reader.read(merges_name), name=merges_name)
        return cls.from_tables(encoder=encoder, bpe_ranks=bpe_ranks)

    @property
    def vocab_size(self) -> int:
        """The number of pieces in the vocabulary."""
        return len(self.encoder)
