"""Cross-check the encoder against tiktoken's reference "gpt2" encoding, and compare their speed."""

import argparse

import tiktoken

from gpt3enc.data.loaders import load_text_file
from gpt3enc.tokenizers import TokenEncoder
from gpt3enc.utils.profile import Profile


SAMPLE_TEXTS = [
    "This is some text.",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
    "Hello World! my name is AMAZING  123 LOL (안녕하세요!) joined123 😉",
    "I'm sure they'll say it's what we've done, and I'd agree.\n\n\tIndented   line   ",
    "naïve café résumé — “quoted” ½ 𝔘𝔫𝔦𝔠𝔬𝔡𝔢",
]


def _test(encoder: TokenEncoder, reference: tiktoken.Encoding) -> None:
    print("-- Testing against tiktoken --------------------------------------")
    for text in SAMPLE_TEXTS:
        ref_tokens = reference.encode(text)
        these_tokens = encoder.encode(text)
        assert these_tokens == ref_tokens, f"{text=}: {these_tokens=} != {ref_tokens=}"
        assert encoder.decode(these_tokens) == text
        print(f"  OK: {len(these_tokens):>3} tokens : {text[:40]!r}")


def _profile(encoder: TokenEncoder, reference: tiktoken.Encoding, text: str) -> None:
    print("-- Profiling -----------------------------------------------------")
    num_bytes = len(text.encode("utf-8"))
    print(f"Loaded text of {num_bytes / 1024 / 1024:.1f} MB")

    with Profile("tiktoken") as prof:
        ref_tokens = reference.encode(text)
    print(prof.report(num_bytes))

    with Profile("TokenEncoder") as prof:
        these_tokens = encoder.encode(text, use_cache=False)
    print(prof.report(num_bytes))

    with Profile("TokenEncoder+cache") as prof:
        encoder.encode(text, use_cache=True)
    print(prof.report(num_bytes))

    assert these_tokens == ref_tokens


def main(args: argparse.Namespace) -> None:
    """Entrypoint."""
    encoder = TokenEncoder.load("gpt3")
    reference = tiktoken.get_encoding("gpt2")
    print(f"Loaded encoder with vocab_size={encoder.vocab_size:,} (tiktoken: n_vocab={reference.n_vocab:,})")

    _test(encoder, reference)

    text = load_text_file(args.text_file) if args.text_file else "\n".join(SAMPLE_TEXTS) * 1_000
    _profile(encoder, reference, text)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Cross-check the encoder against tiktoken.")
    parser.add_argument(
        "-f",
        "--text_file",
        type=str,
        required=False,
        default="",
        help="A UTF-8 text file to profile on (defaults to repeated sample texts)",
    )
    args = parser.parse_args()

    main(args)
