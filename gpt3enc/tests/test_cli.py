"""Unit tests for cli.py."""

import contextlib
import io
from pathlib import Path
import tempfile
import unittest

from gpt3enc.cli import build_parser, main
from gpt3enc.tokenizers.tests.fixtures import fixture_resources


class TestCLI(unittest.TestCase):
    """Run the command line entrypoint against the fixture vocabulary."""

    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.encodings_dir = self._tmp_dir.name
        for name, data in fixture_resources().items():
            Path(self.encodings_dir, name).write_bytes(data)

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def _run(self, *argv: str) -> tuple[int, list[str], str]:
        out: list[str] = []
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            code = main(["-d", self.encodings_dir, *argv], write=out.append)
        return code, out, err.getvalue()

    def test_count(self) -> None:
        code, out, err = self._run("count", "This is some text.")
        self.assertEqual(code, 0)
        self.assertListEqual(out, ["Token Count", "===========", "", "Count: 5"])
        self.assertEqual(err, "")

    def test_list(self) -> None:
        code, out, _ = self._run("list", "This is some text.")
        self.assertEqual(code, 0)
        self.assertListEqual(
            out,
            ["Token Encoding", "==============", "", "Tokens: [1212, 318, 617, 2420, 13]"],
        )

    def test_list_verbose(self) -> None:
        code, out, _ = self._run("list", "-v", "This is")
        self.assertEqual(code, 0)
        self.assertIn("Text: This is", out)
        self.assertIn("Tokens: [1212, 318]", out)
        self.assertIn("Count: 2", out)
        self.assertIn("Pieces", out)
        self.assertEqual(out[-2], "   1,212: [This]")
        self.assertEqual(out[-1], "     318: [ is]")

    def test_decode(self) -> None:
        code, out, _ = self._run("decode", "43", "29625")
        self.assertEqual(code, 0)
        self.assertListEqual(out, ["Token Decoding", "==============", "", "Text: Lorem"])

    def test_decode_nothing(self) -> None:
        code, out, _ = self._run("decode")
        self.assertEqual(code, 0)
        self.assertEqual(out[-1], "Text: ")

    def test_decode_invalid_token(self) -> None:
        code, out, err = self._run("decode", "43", "150000")
        self.assertEqual(code, 1)
        self.assertListEqual(out, [])
        self.assertTrue(err.startswith("error: Invalid token: 150000"))

    def test_lone_surrogate_prompt(self) -> None:
        # Invalid UTF-8 in argv arrives as lone surrogates
        code, out, err = self._run("count", "abc \udcff")
        self.assertEqual(code, 1)
        self.assertListEqual(out, [])
        self.assertTrue(err.startswith("error: "))

    def test_missing_resources(self) -> None:
        with tempfile.TemporaryDirectory() as empty_dir:
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                code = main(["-d", empty_dir, "count", "abc"], write=lambda line: None)
        self.assertEqual(code, 1)
        self.assertIn("Missing resource", err.getvalue())

    def test_unknown_scheme(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                build_parser().parse_args(["-s", "==gibberrish==", "count", "abc"])

    def test_alias_scheme(self) -> None:
        code, out, _ = self._run("-s", "gpt2", "count", "Lorem")
        self.assertEqual(code, 0)
        self.assertEqual(out[-1], "Count: 2")
