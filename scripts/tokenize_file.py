"""Tokenize a UTF-8 text file and save the tokens to a line-separated token file."""

import argparse
from pathlib import Path

from gpt3enc.data.loaders import load_text_file, write_token_file, load_token_file
from gpt3enc.tokenizers import TokenEncoder


def _load_encoder(name: str) -> TokenEncoder:
    encoder = TokenEncoder.load(name)
    print(f"Loaded encoder '{name}' with vocab_size={encoder.vocab_size:,}")
    return encoder


def _tokenize_and_save(encoder: TokenEncoder, src: Path, dst: Path) -> None:
    text = load_text_file(src)
    tokens = encoder.encode(text)
    n_text = len(text)
    n_tokens = len(tokens)
    compression = 1 - n_tokens / n_text if n_text > 0 else 0.0
    print(
        f"Encoded {n_text:,} characters to {n_tokens:,} tokens. "
        f"compression={100 * compression:.1f}%, cache_size={encoder.cache_size:,}. "
        f"Saving to: {dst}"
    )
    write_token_file(dst, tokens)


def _validate(encoder: TokenEncoder, src: Path, dst: Path) -> None:
    text = load_text_file(src)
    tokens = load_token_file(dst)
    assert encoder.decode(tokens) == text


def main(args: argparse.Namespace) -> None:
    """Entrypoint."""
    encoder = _load_encoder(args.scheme)
    src = Path(args.input)
    dst = Path(args.output) if args.output else src.with_suffix(".tokens.txt")

    _tokenize_and_save(encoder, src=src, dst=dst)
    if args.validate:
        _validate(encoder, src=src, dst=dst)
        print("Validated encode-decode consistency")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Tokenize a UTF-8 text file.")
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        required=True,
        help="The text file to tokenize",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        required=False,
        default="",
        help="Where to write the tokens (defaults to <input>.tokens.txt)",
    )
    parser.add_argument(
        "-s",
        "--scheme",
        type=str,
        required=False,
        default="gpt3",
        help="The encoding scheme to use",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Decode the written tokens and check they reproduce the input",
    )
    args = parser.parse_args()

    main(args)
