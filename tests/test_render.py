from __future__ import annotations

import unittest

from hanoi_cli.pegs import PegSet
from hanoi_cli.render import format_pegs, format_rows


class TestRender(unittest.TestCase):
    def test_initial_board(self) -> None:
        self.assertEqual(
            format_pegs(PegSet(3)),
            "\n".join(
                [
                    "  A   B   C",
                    "-------------",
                    "  1   0   0",
                    "  2   0   0",
                    "  3   0   0",
                ]
            ),
        )

    def test_one_row_per_disk_height(self) -> None:
        lines = format_pegs(PegSet(6)).splitlines()
        self.assertEqual(len(lines), 2 + 6)

    def test_format_rows_keeps_fixed_width(self) -> None:
        text = format_rows([(10, 0, 7)])
        self.assertEqual(text.splitlines()[-1], " 10   0   7")


if __name__ == "__main__":
    unittest.main()
