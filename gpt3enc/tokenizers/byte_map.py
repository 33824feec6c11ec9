"""Reversible mapping between raw bytes and printable unicode symbols.

The merge table and vocabulary of the GPT-2/GPT-3 encoding are stored as unicode strings rather than raw
bytes. Every byte is represented by a single printable character so that the text-oriented BPE code never
sees whitespace or control characters.

Ref: https://github.com/openai/gpt-2/blob/master/src/encoder.py
"""

from types import MappingProxyType
from typing import Mapping

from gpt3enc.errors import InvalidSymbolError


# Bytes that render fine as-is and keep their own code point
_SAFE_RANGES = (
    range(ord("!"), ord("~") + 1),  # 33...126
    range(ord("¡"), ord("¬") + 1),  # 161...172
    range(ord("®"), ord("ÿ") + 1),  # 174...255
)


def bytes_to_unicode() -> dict[int, str]:
    """Build the byte -> symbol table.

    The safe ranges come first, then the remaining 68 bytes in ascending order are assigned to 256, 257, ...
    The published vocabulary depends on this exact order.
    """
    safe = [b for r in _SAFE_RANGES for b in r]
    table = {b: chr(b) for b in safe}

    n = 0
    for b in range(256):
        if b not in table:
            table[b] = chr(256 + n)
            n += 1

    return table


class UnicodeByteMap:
    """Bijection between the 256 byte values and printable unicode symbols."""

    def __init__(self) -> None:
        """Initialize the lookup tables."""
        table = bytes_to_unicode()
        self._encoder: tuple[str, ...] = tuple(table[b] for b in range(256))
        self._decoder: Mapping[str, int] = MappingProxyType({s: b for b, s in table.items()})
        assert len(self._decoder) == 256  # bijection

    def encode_byte(self, byte: int) -> str:
        """Map a single byte value to its symbol."""
        if not 0 <= byte < 256:
            raise ValueError(f"Byte value out of range: {byte}")
        return self._encoder[byte]

    def decode_symbol(self, symbol: str) -> int:
        """Map a single symbol back to its byte value."""
        byte = self._decoder.get(symbol, None)
        if byte is None:
            raise InvalidSymbolError(symbol)
        return byte

    def encode_bytes(self, data: bytes) -> str:
        """Map a byte string to a string with one symbol per byte."""
        encoder = self._encoder
        return "".join([encoder[b] for b in data])

    def decode_symbols(self, text: str) -> bytes:
        """Map a string of symbols back to the original bytes."""
        decoder = self._decoder
        try:
            return bytes([decoder[ch] for ch in text])
        except KeyError as e:
            raise InvalidSymbolError(e.args[0]) from None


# Built once and shared read-only by all encoders
BYTE_MAP = UnicodeByteMap()
