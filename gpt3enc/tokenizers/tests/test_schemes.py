"""Unit tests for schemes.py."""

import unittest

from gpt3enc.errors import ResourceError, UnknownSchemeError
from gpt3enc.tokenizers.schemes import EncodingScheme
from gpt3enc.tokenizers.split_pattern import SplitPattern


class TestEncodingScheme(unittest.TestCase):
    """Unit tests for EncodingScheme."""

    def test_all_and_default(self) -> None:
        default_name = EncodingScheme.default_scheme_name()
        all_names = EncodingScheme.all_scheme_names()

        self.assertEqual(default_name, "gpt3")
        self.assertIn(default_name, all_names)
        self.assertIn("gpt2", all_names)

    def test_get_scheme(self) -> None:
        scheme = EncodingScheme.get_scheme("gpt3")
        self.assertEqual(scheme.name, "gpt3")
        self.assertEqual(scheme.encoder_resource, "encoder.json")
        self.assertEqual(scheme.merges_resource, "vocab.bpe")
        self.assertIn(scheme.split_pattern_name, SplitPattern.all_pattern_names())

    def test_alias(self) -> None:
        self.assertEqual(EncodingScheme.get_scheme("gpt2"), EncodingScheme.get_scheme("gpt3"))

    def test_get_scheme_raises(self) -> None:
        with self.assertRaises(UnknownSchemeError) as cm:
            EncodingScheme.get_scheme("==gibberrish==")
        self.assertEqual(cm.exception.name, "==gibberrish==")
        self.assertIn("gpt3", cm.exception.available)
        self.assertIsInstance(cm.exception, ResourceError)
