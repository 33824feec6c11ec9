"""Unit tests for registry.py."""

import unittest


from gpt3enc.data.registry import EncodingRegistry


class TestEncodingRegistry(unittest.TestCase):
    """Unit tests for EncodingRegistry."""

    def test_all(self) -> None:
        registry = EncodingRegistry()

        self.assertTrue(registry.encodings_dir.as_posix().endswith("assets/encodings"))
        self.assertTrue(registry.encoding_dir("gpt3").as_posix().endswith("assets/encodings/gpt3"))
        self.assertTrue(
            registry.encoder_file("gpt3").as_posix().endswith("assets/encodings/gpt3/encoder.json")
        )
        self.assertTrue(registry.merges_file("gpt3").as_posix().endswith("assets/encodings/gpt3/vocab.bpe"))

    def test_project_dir(self) -> None:
        registry = EncodingRegistry()

        self.assertTrue(registry.project_dir.joinpath("gpt3enc", "data", "registry.py").exists())

    def test_source_url(self) -> None:
        registry = EncodingRegistry()

        self.assertEqual(
            registry.source_url(registry.MERGES_FILE_NAME),
            "https://openaipublic.blob.core.windows.net/gpt-2/encodings/main/vocab.bpe",
        )
        self.assertTrue(registry.source_url(registry.ENCODER_FILE_NAME).endswith("/encoder.json"))
