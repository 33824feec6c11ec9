"""Readers for the named resources backing an encoding scheme.

The tokenizer only needs to "read the bytes of a named resource". Where those bytes come from (a directory
of downloaded assets, package data, memory) is up to the reader.
"""

from os import PathLike
from pathlib import Path
from typing import Mapping, Protocol

from gpt3enc.errors import MissingResourceError


class ResourceReader(Protocol):
    """Anything that can return the raw bytes of a named resource."""

    def read(self, name: str) -> bytes:
        """Return the bytes of the resource, or raise MissingResourceError."""
        ...


class DirectoryResourceReader:
    """Read resources as files relative to a base directory."""

    def __init__(self, base_dir: PathLike) -> None:
        """Initialize the reader."""
        self.base_dir = Path(base_dir)

    def read(self, name: str) -> bytes:
        """Read the file `name` inside the base directory."""
        path = Path(self.base_dir, name)
        try:
            with open(path, mode="rb") as f:
                return f.read()
        except OSError as e:
            raise MissingResourceError(str(path), reason=e.strerror) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.base_dir)!r})"


class MappingResourceReader:
    """Serve resources from an in-memory mapping of name -> bytes."""

    def __init__(self, resources: Mapping[str, bytes]) -> None:
        """Initialize the reader."""
        self.resources = dict(resources)

    def read(self, name: str) -> bytes:
        """Return the stored bytes for `name`."""
        data = self.resources.get(name, None)
        if data is None:
            raise MissingResourceError(name)
        return data
