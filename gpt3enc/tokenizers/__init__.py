"""Byte-level BPE encoding compatible with the published GPT-2/GPT-3 vocabulary."""

from gpt3enc.tokenizers.byte_map import BYTE_MAP, UnicodeByteMap
from gpt3enc.tokenizers.schemes import EncodingScheme, Scheme
from gpt3enc.tokenizers.split_pattern import Pretokenizer, SplitPattern
from gpt3enc.tokenizers.token_encoder import TokenEncoder
from gpt3enc.tokenizers.vocabulary import Vocabulary


__all__ = [
    "BYTE_MAP",
    "EncodingScheme",
    "Pretokenizer",
    "Scheme",
    "SplitPattern",
    "TokenEncoder",
    "UnicodeByteMap",
    "Vocabulary",
]
