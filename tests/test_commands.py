from __future__ import annotations

import io
import unittest

from hanoi_cli.commands import (
    InputStreamClosed,
    MalformedCommandError,
    MoveCommand,
    is_quit,
    parse_command,
    read_command_line,
)


class TestParseCommand(unittest.TestCase):
    def test_parses_source_and_destination(self) -> None:
        self.assertEqual(parse_command("A>C"), MoveCommand("A", "C"))

    def test_trims_and_uppercases_tokens(self) -> None:
        self.assertEqual(parse_command("  b > a \n"), MoveCommand("B", "A"))

    def test_custom_delimiter(self) -> None:
        self.assertEqual(parse_command("A-B", delimiter="-"), MoveCommand("A", "B"))

    def test_unknown_labels_are_left_for_resolution(self) -> None:
        self.assertEqual(parse_command("Q>A"), MoveCommand("Q", "A"))
        self.assertEqual(parse_command("A>"), MoveCommand("A", ""))

    def test_malformed_lines(self) -> None:
        for line in ("AC", "", "A>B>C", "   "):
            with self.subTest(line=line):
                with self.assertRaises(MalformedCommandError):
                    parse_command(line)

    def test_malformed_error_mentions_delimiter(self) -> None:
        with self.assertRaises(MalformedCommandError) as ctx:
            parse_command("AC")
        self.assertIn("A>C", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)


class TestQuitAndRead(unittest.TestCase):
    def test_is_quit_case_insensitive(self) -> None:
        self.assertTrue(is_quit("X"))
        self.assertTrue(is_quit(" x\n"))
        self.assertFalse(is_quit("X>A"))
        self.assertTrue(is_quit("quit", "QUIT"))

    def test_read_command_line_raises_at_end_of_input(self) -> None:
        stream = io.StringIO("A>C\n\n")
        self.assertEqual(read_command_line(stream), "A>C\n")
        self.assertEqual(read_command_line(stream), "\n")
        with self.assertRaises(InputStreamClosed):
            read_command_line(stream)


if __name__ == "__main__":
    unittest.main()
