"""Command line interface for counting, listing and decoding tokens locally.

This is performed locally, based on the published GPT-2/3 token encoder.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from gpt3enc.data.resources import DirectoryResourceReader, ResourceReader
from gpt3enc.errors import EncoderError
from gpt3enc.tokenizers import EncodingScheme, TokenEncoder
from gpt3enc.tokenizers.bpe import render_piece
from gpt3enc.utils.printing import DEFAULT_FORMAT, Writer, format_label, format_title, print_lines


def _load_encoder(args: argparse.Namespace) -> TokenEncoder:
    reader: Optional[ResourceReader] = None
    if args.encodings_dir:
        reader = DirectoryResourceReader(args.encodings_dir)
    return TokenEncoder.load(args.scheme, reader=reader)


def _count(encoder: TokenEncoder, args: argparse.Namespace, write: Writer) -> None:
    count = encoder.count(args.prompt)

    lines = format_title("Token Count")
    lines.append("")
    lines += format_label("Count", count)
    print_lines(lines, write=write)


def _list(encoder: TokenEncoder, args: argparse.Namespace, write: Writer) -> None:
    fmt = DEFAULT_FORMAT.verbose() if args.verbose else DEFAULT_FORMAT
    tokens = encoder.encode(args.prompt)

    lines = format_title("Token Encoding", fmt=fmt)
    lines.append("")
    lines += format_label("Text", args.prompt, fmt=fmt, verbose=True)
    lines += format_label("Tokens", tokens, fmt=fmt)
    lines += format_label("Count", len(tokens), fmt=fmt, verbose=True)
    if fmt.show_verbose:
        lines.append("")
        lines += format_title("Pieces", char="-", fmt=fmt)
        piece_fmt = fmt.indent_by(2)
        for token, piece in zip(tokens, encoder.decode_pieces(tokens)):
            lines.append(f"{piece_fmt.indent}{token:>6,}: [{render_piece(piece)}]")
    print_lines(lines, write=write)


def _decode(encoder: TokenEncoder, args: argparse.Namespace, write: Writer) -> None:
    text = encoder.decode(args.tokens, errors=args.errors)

    fmt = DEFAULT_FORMAT
    lines = format_title("Token Decoding", fmt=fmt)
    lines.append("")
    lines += format_label("Text", text, fmt=fmt)
    print_lines(lines, write=write)


_COMMANDS = {
    "count": _count,
    "list": _list,
    "decode": _decode,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="gpt3enc",
        description="Commands relating to tokens. Encoding is performed locally.",
    )
    parser.add_argument(
        "-s",
        "--scheme",
        type=str,
        default=EncodingScheme.default_scheme_name(),
        choices=EncodingScheme.all_scheme_names(),
        help="The encoding scheme to use",
    )
    parser.add_argument(
        "-d",
        "--encodings_dir",
        type=str,
        default="",
        help="Directory holding encoder.json and vocab.bpe (defaults to the registry asset directory)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    count_parser = subparsers.add_parser(
        "count",
        help="Estimates the number of tokens a prompt will be encoded into.",
    )
    count_parser.add_argument("prompt", type=str, help="The prompt to estimate tokens for.")

    list_parser = subparsers.add_parser(
        "list",
        help="Generates an estimated list of the tokens a prompt will be encoded into.",
    )
    list_parser.add_argument("prompt", type=str, help="The prompt to estimate tokens for.")
    list_parser.add_argument("-v", "--verbose", action="store_true", help="Output more details.")

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decodes a list of tokens back into text.",
    )
    decode_parser.add_argument("tokens", type=int, nargs="*", help="The tokens to decode.")
    decode_parser.add_argument(
        "--errors",
        type=str,
        default="strict",
        choices=["strict", "replace", "ignore"],
        help="How to handle token sequences that split a UTF-8 character",
    )

    return parser


def main(argv: Optional[list[str]] = None, write: Writer = print) -> int:
    """Entrypoint. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        encoder = _load_encoder(args)
        _COMMANDS[args.command](encoder, args, write)
    except (EncoderError, UnicodeEncodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
