"""Download the published GPT-2/GPT-3 encoder resources."""

import argparse

import requests

from gpt3enc.data.registry import EncodingRegistry
from gpt3enc.data.resources import MappingResourceReader
from gpt3enc.tokenizers import EncodingScheme, Vocabulary


_registry = EncodingRegistry()


def _download(url: str) -> bytes:
    response = requests.get(url=url, allow_redirects=False, verify=True, stream=True, timeout=60)
    response.raise_for_status()

    data = bytearray()
    for chunk in response.iter_content(chunk_size=4096):
        data.extend(chunk)
        if len(data) > _registry.MAX_DOWNLOAD_SIZE:
            raise ValueError(f"Download data size exceeded expected size: {url}")
    return bytes(data)


def _download_and_save(scheme_name: str, overwrite: bool) -> None:
    scheme = EncodingScheme.get_scheme(scheme_name)
    encoding_dir = _registry.encoding_dir(scheme.name)
    resource_names = [scheme.encoder_resource, scheme.merges_resource]

    if encoding_dir.exists() and not overwrite:
        raise RuntimeError(f"Encoding dir {encoding_dir} already exists. Provide -y flag to overwrite.")

    resources: dict[str, bytes] = {}
    for name in resource_names:
        url = _registry.source_url(name)
        print(f"Downloading {url}")
        resources[name] = _download(url)

    # Parse before writing anything, so a bad download never lands on disk
    vocabulary = Vocabulary.load(
        MappingResourceReader(resources),
        encoder_name=scheme.encoder_resource,
        merges_name=scheme.merges_resource,
    )
    print(f"Parsed vocab_size={vocabulary.vocab_size:,} and num_merges={len(vocabulary.bpe_ranks):,}")

    encoding_dir.mkdir(parents=True, exist_ok=True)
    for name, data in resources.items():
        path = encoding_dir / name
        with open(path, "wb") as f:
            f.write(data)
        print(f"Saved {len(data):,} bytes to: {path}")


def main(args: argparse.Namespace) -> None:
    """Entrypoint."""
    _download_and_save(args.scheme, overwrite=args.overwrite)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Download the published GPT-2/GPT-3 encoder resources.")
    parser.add_argument(
        "-s",
        "--scheme",
        type=str,
        required=False,
        default=EncodingScheme.default_scheme_name(),
        choices=EncodingScheme.all_scheme_names(),
        help="The encoding scheme to download",
    )
    parser.add_argument(
        "-y",
        "--overwrite",
        action="store_true",
        help="Overwrite existing resources if they already exist",
    )
    args = parser.parse_args()

    main(args)
