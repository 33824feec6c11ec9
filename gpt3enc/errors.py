"""Exception hierarchy for loading encoders, encoding and decoding."""

from typing import Optional


class EncoderError(Exception):
    """Base exception for all gpt3enc errors."""


######################################
# Construction
######################################


class ResourceError(EncoderError):
    """Raised when the resources backing an encoding scheme can't be loaded."""


class MissingResourceError(ResourceError):
    """Raised when a named resource is absent or unreadable."""

    def __init__(self, name: str, *, reason: Optional[str] = None) -> None:
        message = f"Missing resource: '{name}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.name = name
        self.reason = reason


class MalformedResourceError(ResourceError):
    """Raised when a resource is readable but its contents are invalid."""

    def __init__(
        self,
        message: str,
        *,
        name: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        extra = ""
        if name:
            extra += f" (resource: {name})"
        if line is not None:
            extra += f" (line: {line})"
        super().__init__(message + extra)
        self.name = name
        self.line = line


class UnknownSchemeError(ResourceError):
    """Raised when an encoding scheme name is not registered."""

    def __init__(self, name: str, *, available: Optional[list[str]] = None) -> None:
        message = f"Unrecognized encoding scheme: '{name}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)
        self.name = name
        self.available = available


class PatternError(EncoderError):
    """Raised when a split pattern fails to compile."""

    def __init__(self, message: str, *, pattern: Optional[str] = None) -> None:
        if pattern:
            message += f" (pattern: {pattern!r})"
        super().__init__(message)
        self.pattern = pattern


######################################
# Encoding
######################################


class EncodingError(EncoderError):
    """Raised when text can't be mapped onto the loaded vocabulary."""


class UnknownPieceError(EncodingError):
    """Raised when a merged piece has no id in the vocabulary.

    This means the merge table and the vocabulary disagree with each other.
    """

    def __init__(self, piece: str) -> None:
        super().__init__(f"Merged piece not in vocabulary: {piece!r}")
        self.piece = piece


######################################
# Decoding
######################################


class DecodingError(EncoderError, ValueError):
    """Raised when a token sequence is incompatible with the encoding scheme."""


class InvalidTokenError(DecodingError):
    """Raised when a token id has no piece in the vocabulary."""

    def __init__(self, token: int) -> None:
        super().__init__(f"Invalid token: {token}")
        self.token = token


class InvalidSymbolError(DecodingError):
    """Raised when a character is outside of the byte symbol table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid byte symbol: {symbol!r} (U+{ord(symbol):04X})")
        self.symbol = symbol


class InvalidUTF8Error(DecodingError):
    """Raised when decoded bytes are not valid UTF-8.

    This happens legitimately when a token sequence cuts a multi-byte code point.
    """

    def __init__(self, data: bytes, *, reason: Optional[UnicodeDecodeError] = None) -> None:
        message = "Decoded bytes are not valid UTF-8"
        if reason is not None:
            message += f" ({reason.reason} at position {reason.start})"
        super().__init__(message)
        self.data = data
        self.reason = reason
