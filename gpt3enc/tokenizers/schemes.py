"""Registry of named encoding schemes."""

from dataclasses import dataclass

from gpt3enc.errors import UnknownSchemeError


@dataclass(frozen=True)
class Scheme:
    """A fixed vocabulary + merge table pair, and the split pattern it was built with."""

    name: str
    split_pattern_name: str
    encoder_resource: str = "encoder.json"
    merges_resource: str = "vocab.bpe"


class EncodingScheme:
    """Registry of available encoding schemes."""

    _SCHEMES = {
        "gpt3": Scheme(name="gpt3", split_pattern_name="gpt-2"),
    }

    # GPT-2 and GPT-3 share the same published encoding
    _ALIASES = {
        "gpt2": "gpt3",
    }

    @classmethod
    def default_scheme_name(cls) -> str:
        """Get the default scheme name."""
        return "gpt3"

    @classmethod
    def all_scheme_names(cls) -> list[str]:
        """Get all valid scheme names, including aliases."""
        return list(cls._SCHEMES.keys()) + list(cls._ALIASES.keys())

    @classmethod
    def get_scheme(cls, scheme_name: str) -> Scheme:
        """Get the scheme of the given name."""
        canonical_name = cls._ALIASES.get(scheme_name, scheme_name)
        if canonical_name not in cls._SCHEMES:
            raise UnknownSchemeError(scheme_name, available=cls.all_scheme_names())
        return cls._SCHEMES[canonical_name]
