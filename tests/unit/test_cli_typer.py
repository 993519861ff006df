# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import importlib
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from tests.test_support import (
    HELLO_WORLD_BASE64,
    HELLO_WORLD_Z85,
    PNG_DATA_URL,
    PNG_Z85_DATA_URL,
    default_config_args,
    strip_ansi,
)
from z85kit.cli import app
from z85kit.config import DEFAULT_CONFIG_PATH, UiDefaults

APP_MODULE = importlib.import_module("z85kit.cli.app")


def _patch_startup(*, should_exit: bool = False, **kwargs):
    if "side_effect" in kwargs:
        return mock.patch.object(APP_MODULE, "run_startup", **kwargs)
    return mock.patch.object(APP_MODULE, "run_startup", return_value=(should_exit, UiDefaults()))


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def _invoke(self, args: list[str], **kwargs):
        with _patch_startup():
            return self.runner.invoke(app, [*default_config_args(), *args], **kwargs)

    def test_root_info_commands(self) -> None:
        cases = (
            {
                "args": ["--help"],
                "contains": ("encode", "decode", "to-z85", "to-base64", "efficiency"),
            },
            {
                "args": ["--version"],
                "contains": ("z85kit",),
            },
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                with _patch_startup():
                    result = self.runner.invoke(app, case["args"])
                self.assertEqual(result.exit_code, 0)
                output = strip_ansi(result.output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_root_no_subcommand_references_help(self) -> None:
        with _patch_startup():
            result = self.runner.invoke(app, [])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("z85kit --help", strip_ansi(result.output))

    def test_init_config_exits_after_startup(self) -> None:
        with _patch_startup(should_exit=True) as startup_mock:
            result = self.runner.invoke(app, ["--init-config"])
        self.assertEqual(result.exit_code, 0)
        self.assertTrue(startup_mock.call_args.kwargs["init_config"])

    def test_startup_error_is_reported(self) -> None:
        with _patch_startup(side_effect=ValueError("ui.quiet must be a boolean")):
            result = self.runner.invoke(app, ["efficiency"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("ui.quiet must be a boolean", strip_ansi(result.output))

    def test_encode_text_and_stdin(self) -> None:
        cases = (
            {"args": ["encode", "Hello World"], "input": None},
            {"args": ["encode"], "input": "Hello World"},
            {"args": ["encode", "-"], "input": "Hello World"},
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self._invoke(case["args"], input=case["input"])
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(strip_ansi(result.output).strip(), HELLO_WORLD_Z85)

    def test_encode_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "payload.bin"
            path.write_bytes(b"\x86\x4f\xd2\x6f\xb5\x59\xf7\x5b")
            result = self._invoke(["encode", "--file", str(path)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(strip_ansi(result.output).strip(), "HelloWorld:0")

    def test_encode_rejects_text_and_file(self) -> None:
        result = self._invoke(["encode", "abc", "--file", "payload.bin"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("use either TEXT or --file", strip_ansi(result.output))

    def test_decode_to_stdout_and_file(self) -> None:
        result = self._invoke(["decode"], input=f"{HELLO_WORLD_Z85}\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Hello World", result.output)

        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "out.bin"
            result = self._invoke(["decode", HELLO_WORLD_Z85, "--output", str(target)])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(target.read_bytes(), b"Hello World")

    def test_decode_invalid_input_reports_error(self) -> None:
        cases = (
            ("nm=QNzY&b1A+]m^", "expected 'z85_data:padding'"),
            ("nm=QNzY&b1A+]m^:7", "Invalid padding number"),
            ("#####:0", "exceeds the 32-bit range"),
        )
        for text, message in cases:
            with self.subTest(text=text):
                result = self._invoke(["decode", text])
                self.assertEqual(result.exit_code, 2)
                self.assertIn(message, strip_ansi(result.output))

    def test_transcode_commands(self) -> None:
        cases = (
            (["to-z85", HELLO_WORLD_BASE64], HELLO_WORLD_Z85),
            (["to-base64", HELLO_WORLD_Z85], HELLO_WORLD_BASE64),
            (["to-z85", PNG_DATA_URL, "-i", "dataurl", "-o", "dataurl"], PNG_Z85_DATA_URL),
            (["to-z85", PNG_DATA_URL, "--input", "DataURL"], HELLO_WORLD_Z85),
            (["to-base64", PNG_Z85_DATA_URL, "-i", "dataurl", "-o", "dataurl"], PNG_DATA_URL),
            (["to-base64", PNG_Z85_DATA_URL, "-i", "data-url", "-o", "raw"], HELLO_WORLD_BASE64),
        )
        for args, expected in cases:
            with self.subTest(args=args):
                result = self._invoke(args)
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertEqual(strip_ansi(result.output).strip(), expected)

    def test_transcode_errors(self) -> None:
        cases = (
            (
                ["to-z85", HELLO_WORLD_BASE64, "-o", "dataurl"],
                "Cannot convert raw to data URL: MIME type unknown",
            ),
            (["to-z85", "not valid base64!"], "Base64 decode error"),
            (
                ["to-base64", PNG_DATA_URL, "-i", "dataurl"],
                "does not contain ;z85, marker",
            ),
        )
        for args, message in cases:
            with self.subTest(args=args):
                result = self._invoke(args)
                self.assertEqual(result.exit_code, 2)
                self.assertIn(message, strip_ansi(result.output))

    def test_transcode_rejects_unknown_container(self) -> None:
        result = self._invoke(["to-z85", HELLO_WORLD_BASE64, "--input", "url"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("dataurl", strip_ansi(result.output))

    def test_transcode_uses_config_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text('[convert]\ninput = "dataurl"\noutput = "dataurl"\n', encoding="utf-8")
            with _patch_startup():
                result = self.runner.invoke(app, ["--config", str(path), "to-z85", PNG_DATA_URL])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(strip_ansi(result.output).strip(), PNG_Z85_DATA_URL)

    def test_efficiency_json(self) -> None:
        result = self._invoke(["efficiency", "1000", "100000", "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual([entry["original_size"] for entry in payload], [1000, 100000])
        self.assertEqual(payload[1]["base64_size"], 133336)
        self.assertEqual(payload[1]["z85_size"], 125000)
        self.assertAlmostEqual(payload[1]["bandwidth_saving"], 6.25, places=2)

    def test_efficiency_table_uses_config_sizes(self) -> None:
        result = self._invoke(["efficiency"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = strip_ansi(result.output)
        self.assertIn("Encoding efficiency", output)
        self.assertIn("1,000,000 B", output)
        self.assertIn("1,250,000 B", output)

    def test_efficiency_rejects_negative_size(self) -> None:
        result = self._invoke(["efficiency", "--", "-1"])
        self.assertEqual(result.exit_code, 2)

    def test_demo_runs_every_section(self) -> None:
        result = self._invoke(["demo"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = strip_ansi(result.output)
        for title in (
            "Base64 <-> Z85",
            "Encode/decode raw bytes",
            "Data URL conversion",
            "Encoding efficiency",
            "Padding scenarios",
            "Error handling",
        ):
            self.assertIn(title, output)
        self.assertIn("MimeTypeUnknownError", output)

    def test_config_print_path_and_show(self) -> None:
        result = self._invoke(["config", "--print-path"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(strip_ansi(result.output).strip(), str(DEFAULT_CONFIG_PATH))

        result = self._invoke(["config", "--show"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = strip_ansi(result.output)
        self.assertIn("convert.input", output)
        self.assertIn("efficiency.sizes", output)


if __name__ == "__main__":
    unittest.main()
