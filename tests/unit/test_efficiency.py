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

import unittest

from z85kit import EfficiencyStats, get_encoding_efficiency
from z85kit.efficiency import base64_encoded_size, z85_encoded_size


class TestEncodingEfficiency(unittest.TestCase):
    def test_reference_sizes(self) -> None:
        cases = (
            (1_000, 1_336, 1_250),
            (100_000, 133_336, 125_000),
        )
        for size, base64_size, z85_size in cases:
            with self.subTest(size=size):
                stats = get_encoding_efficiency(size)
                self.assertEqual(stats.original_size, size)
                self.assertEqual(stats.base64_size, base64_size)
                self.assertEqual(stats.z85_size, z85_size)
                self.assertAlmostEqual(stats.efficiency_ratio, z85_size / base64_size)
                self.assertAlmostEqual(
                    stats.bandwidth_saving, (1 - z85_size / base64_size) * 100
                )

    def test_large_payload_ratio(self) -> None:
        stats = get_encoding_efficiency(100_000)
        self.assertAlmostEqual(stats.efficiency_ratio, 0.9375, places=3)
        self.assertAlmostEqual(stats.bandwidth_saving, 6.25, places=1)

    def test_zero_size_has_unit_ratio(self) -> None:
        stats = get_encoding_efficiency(0)
        self.assertEqual(stats, EfficiencyStats(0, 0, 0, 1.0, 0.0))

    def test_tiny_payload_costs_more_in_z85(self) -> None:
        stats = get_encoding_efficiency(1)
        self.assertEqual((stats.base64_size, stats.z85_size), (4, 5))
        self.assertAlmostEqual(stats.efficiency_ratio, 1.25)
        self.assertAlmostEqual(stats.bandwidth_saving, -25.0)

    def test_size_helpers(self) -> None:
        for size in range(0, 13):
            with self.subTest(size=size):
                self.assertEqual(base64_encoded_size(size) % 4, 0)
                self.assertEqual(z85_encoded_size(size) % 5, 0)
                self.assertGreaterEqual(base64_encoded_size(size) * 3, size * 4)

    def test_to_dict_keys(self) -> None:
        data = get_encoding_efficiency(10).to_dict()
        self.assertEqual(
            set(data),
            {"original_size", "base64_size", "z85_size", "efficiency_ratio", "bandwidth_saving"},
        )
        self.assertEqual(data["z85_size"], 15)
        self.assertEqual(data["base64_size"], 16)

    def test_rejects_invalid_sizes(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-negative"):
            get_encoding_efficiency(-1)
        with self.assertRaises(TypeError):
            get_encoding_efficiency(True)
        with self.assertRaises(TypeError):
            get_encoding_efficiency(1.5)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
