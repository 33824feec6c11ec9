"""Plain-text output formatting for the command line scripts."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable


Writer = Callable[[str], None]


@dataclass(frozen=True)
class Format:
    """Indentation and verbosity for printed output."""

    indent: str = ""
    show_verbose: bool = False

    def indent_by(self, count: int) -> Format:
        """A format indented `count` more spaces."""
        return replace(self, indent=self.indent + " " * count)

    def verbose(self) -> Format:
        """A format that also prints verbose-only lines."""
        return replace(self, show_verbose=True)


DEFAULT_FORMAT = Format()


def format_title(text: str, char: str = "=", fmt: Format = DEFAULT_FORMAT) -> list[str]:
    """A title line underlined with `char` on the next line."""
    return [f"{fmt.indent}{text}", f"{fmt.indent}{char * len(text)}"]


def format_label(
    label: str,
    value: Any,
    fmt: Format = DEFAULT_FORMAT,
    verbose: bool = False,
) -> list[str]:
    """A `label: value` line. Verbose-only lines are dropped unless the format shows them."""
    if verbose and not fmt.show_verbose:
        return []
    return [f"{fmt.indent}{label}: {value}"]


def print_lines(lines: list[str], write: Writer = print) -> None:
    """Print each line."""
    for line in lines:
        write(line)
