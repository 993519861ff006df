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

import dataclasses
import unittest

from tests.test_support import (
    HELLO_WORLD_BASE64,
    HELLO_WORLD_Z85,
    PNG_DATA_URL,
    PNG_Z85_DATA_URL,
)
from z85kit import (
    ConversionOptions,
    DataType,
    DataUrlFormatError,
    MimeTypeUnknownError,
    base64_to_z85_with_options,
    z85_to_base64_with_options,
)
from z85kit.convert import DEFAULT_OPTIONS, parse_data_type

RAW_RAW = ConversionOptions(DataType.RAW, DataType.RAW)
URL_URL = ConversionOptions(DataType.DATA_URL, DataType.DATA_URL)
URL_RAW = ConversionOptions(DataType.DATA_URL, DataType.RAW)
RAW_URL = ConversionOptions(DataType.RAW, DataType.DATA_URL)


class TestConversionOptions(unittest.TestCase):
    def test_defaults_are_raw(self) -> None:
        self.assertEqual(ConversionOptions(), RAW_RAW)
        self.assertEqual(DEFAULT_OPTIONS, RAW_RAW)

    def test_accepts_string_names(self) -> None:
        options = ConversionOptions("dataurl", "raw")
        self.assertIs(options.input, DataType.DATA_URL)
        self.assertIs(options.output, DataType.RAW)

    def test_rejects_unknown_names(self) -> None:
        with self.assertRaisesRegex(ValueError, "input must be 'raw' or 'dataurl'"):
            ConversionOptions("url", "raw")

    def test_is_immutable(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            RAW_RAW.input = DataType.DATA_URL  # type: ignore[misc]

    def test_parse_data_type_aliases(self) -> None:
        for value in ("dataurl", "DataURL", "data-url", "data_url", " DATAURL "):
            with self.subTest(value=value):
                self.assertIs(parse_data_type(value), DataType.DATA_URL)


class TestBase64ToZ85WithOptions(unittest.TestCase):
    def test_raw_raw(self) -> None:
        self.assertEqual(base64_to_z85_with_options(HELLO_WORLD_BASE64, RAW_RAW), HELLO_WORLD_Z85)

    def test_none_options_mean_raw_raw(self) -> None:
        self.assertEqual(base64_to_z85_with_options(HELLO_WORLD_BASE64), HELLO_WORLD_Z85)
        self.assertEqual(base64_to_z85_with_options(HELLO_WORLD_BASE64, None), HELLO_WORLD_Z85)

    def test_data_url_to_data_url_flips_token(self) -> None:
        self.assertEqual(base64_to_z85_with_options(PNG_DATA_URL, URL_URL), PNG_Z85_DATA_URL)

    def test_various_mime_types_are_preserved(self) -> None:
        for mime in ("image/jpeg", "image/webp", "application/pdf", "text/plain;charset=utf-8"):
            with self.subTest(mime=mime):
                result = base64_to_z85_with_options(
                    f"data:{mime};base64,{HELLO_WORLD_BASE64}", URL_URL
                )
                self.assertEqual(result, f"data:{mime};z85,{HELLO_WORLD_Z85}")

    def test_data_url_to_raw_strips_container(self) -> None:
        self.assertEqual(base64_to_z85_with_options(PNG_DATA_URL, URL_RAW), HELLO_WORLD_Z85)

    def test_raw_to_data_url_is_rejected(self) -> None:
        with self.assertRaisesRegex(MimeTypeUnknownError, "MIME type unknown"):
            base64_to_z85_with_options(HELLO_WORLD_BASE64, RAW_URL)

    def test_wrong_token_is_rejected(self) -> None:
        with self.assertRaisesRegex(DataUrlFormatError, ";base64,"):
            base64_to_z85_with_options(PNG_Z85_DATA_URL, URL_URL)

    def test_non_data_url_input_is_rejected(self) -> None:
        with self.assertRaises(DataUrlFormatError):
            base64_to_z85_with_options("not_a_dataurl", URL_URL)

    def test_empty_payload(self) -> None:
        self.assertEqual(
            base64_to_z85_with_options("data:image/png;base64,", URL_URL),
            "data:image/png;z85,:0",
        )


class TestZ85ToBase64WithOptions(unittest.TestCase):
    def test_raw_raw(self) -> None:
        self.assertEqual(z85_to_base64_with_options(HELLO_WORLD_Z85, RAW_RAW), HELLO_WORLD_BASE64)

    def test_data_url_to_data_url(self) -> None:
        self.assertEqual(z85_to_base64_with_options(PNG_Z85_DATA_URL, URL_URL), PNG_DATA_URL)

    def test_data_url_to_raw(self) -> None:
        self.assertEqual(
            z85_to_base64_with_options(PNG_Z85_DATA_URL, URL_RAW),
            HELLO_WORLD_BASE64,
        )

    def test_raw_to_data_url_is_rejected(self) -> None:
        with self.assertRaisesRegex(
            MimeTypeUnknownError, "Cannot convert raw to data URL: MIME type unknown"
        ):
            z85_to_base64_with_options(HELLO_WORLD_Z85, RAW_URL)

    def test_wrong_token_is_rejected(self) -> None:
        with self.assertRaisesRegex(DataUrlFormatError, ";z85,"):
            z85_to_base64_with_options(PNG_DATA_URL, URL_URL)

    def test_data_url_roundtrip(self) -> None:
        url = "data:text/plain;charset=utf-8;base64,QUJDREU="
        there = base64_to_z85_with_options(url, URL_URL)
        self.assertTrue(there.startswith("data:text/plain;charset=utf-8;z85,"))
        self.assertEqual(z85_to_base64_with_options(there, URL_URL), url)


if __name__ == "__main__":
    unittest.main()
