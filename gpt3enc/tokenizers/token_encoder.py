"""Implementation of the GPT-2/GPT-3 byte-level BPE token encoder."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from gpt3enc.data.registry import EncodingRegistry
from gpt3enc.data.resources import DirectoryResourceReader, ResourceReader
from gpt3enc.errors import InvalidTokenError, InvalidUTF8Error, UnknownPieceError
from gpt3enc.tokenizers.bpe import BPEMerger
from gpt3enc.tokenizers.byte_map import BYTE_MAP
from gpt3enc.tokenizers.pytoken import NumpyTokenSequence, TokenDtype
from gpt3enc.tokenizers.schemes import EncodingScheme
from gpt3enc.tokenizers.split_pattern import Pretokenizer, SplitPattern
from gpt3enc.tokenizers.vocabulary import Vocabulary


class TokenEncoder:
    """Convert text to GPT-2/GPT-3 token ids and back.

    An encoder is an ordinary value: construct one per scheme and pass it to whoever needs it. Encoding and
    decoding are safe to call from multiple threads.
    """

    def __init__(
        self,
        vocabulary: Vocabulary,
        split_pattern: str = SplitPattern.get_pattern("gpt-2"),
    ) -> None:
        """Initialize the encoder."""
        self.vocabulary = vocabulary
        self.split_pattern = split_pattern
        self.pretokenizer = Pretokenizer(split_pattern)
        self.merger = BPEMerger(vocabulary.bpe_ranks)

    @classmethod
    def load(
        cls,
        scheme_name: str = EncodingScheme.default_scheme_name(),
        reader: Optional[ResourceReader] = None,
    ) -> TokenEncoder:
        """Instantiate an encoder from the resources of a named scheme.

        Without a reader, resources are read from the scheme's directory in the encoding registry.
        """
        scheme = EncodingScheme.get_scheme(scheme_name)
        if reader is None:
            reader = DirectoryResourceReader(EncodingRegistry().encoding_dir(scheme.name))
        vocabulary = Vocabulary.load(
            reader,
            encoder_name=scheme.encoder_resource,
            merges_name=scheme.merges_resource,
        )
        return cls(
            vocabulary=vocabulary,
            split_pattern=SplitPattern.get_pattern(scheme.split_pattern_name),
        )

    @property
    def vocab_size(self) -> int:
        """The size of the encoder vocabulary."""
        return self.vocabulary.vocab_size

    @property
    def cache_size(self) -> int:
        """The number of chunks memoized so far."""
        return self.merger.cache_size

    ######################################
    # Encoding
    ######################################

    def pieces(self, text: str, use_cache: bool = True) -> list[str]:
        """Split a string into merged vocabulary pieces."""
        pieces: list[str] = []
        for chunk in self.pretokenizer.split(text):
            # One printable symbol per UTF-8 byte of the chunk
            token = BYTE_MAP.encode_bytes(chunk.encode("utf-8"))
            word = self.merger.merge(token, use_cache=use_cache)
            pieces.extend(word.split(" "))
        return pieces

    def encode(self, text: str, use_cache: bool = True) -> list[int]:
        """Encode a string into tokens."""
        encoder = self.vocabulary.encoder
        tokens: list[int] = []
        for piece in self.pieces(text, use_cache=use_cache):
            token = encoder.get(piece, None)
            if token is None:
                raise UnknownPieceError(piece)
            tokens.append(token)
        return tokens

    def encode_array(self, text: str) -> NumpyTokenSequence:
        """Encode a string into a numpy array of tokens."""
        return np.array(self.encode(text), dtype=TokenDtype)

    def count(self, text: str) -> int:
        """The number of tokens a string encodes into."""
        return len(self.encode(text))

    ######################################
    # Decoding
    ######################################

    def decode_pieces(self, tokens: Iterable[int]) -> list[str]:
        """Look up the vocabulary piece of each token."""
        decoder = self.vocabulary.decoder
        pieces: list[str] = []
        for token in tokens:
            token = int(token)
            piece = decoder.get(token, None)
            if piece is None:
                raise InvalidTokenError(token)
            pieces.append(piece)
        return pieces

    def decode_bytes(self, tokens: Iterable[int]) -> bytes:
        """Decode a list of tokens into bytes."""
        return BYTE_MAP.decode_symbols("".join(self.decode_pieces(tokens)))

    def decode(self, tokens: Iterable[int], errors: str = "strict") -> str:
        """Decode a list of tokens into a string.

        With the default `errors="strict"`, bytes that are not valid UTF-8 raise InvalidUTF8Error. Any other
        codec error handler (e.g. "replace") is passed through to bytes.decode().
        """
        text_bytes = self.decode_bytes(tokens)
        try:
            return text_bytes.decode("utf-8", errors=errors)
        except UnicodeDecodeError as e:
            raise InvalidUTF8Error(text_bytes, reason=e) from e
