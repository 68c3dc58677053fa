import unittest

from PySubmerge.Cue import Cue
from PySubmerge.Formats.SrtLineSerializer import SrtLineSerializer
from PySubmerge.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name, skip_if_debugger_attached
from PySubmerge.SubtitleError import FieldEncodingError, InvalidRangeError, MalformedTimeError, SubtitleParseError
from PySubmerge.TimeCode import TimeCode
from PySubmerge.TimeRange import TimeRange


class TestSrtLineSerializer(unittest.TestCase):
    def setUp(self) -> None:
        log_test_name(self._testMethodName)
        self.serializer = SrtLineSerializer()
        self.cue = Cue("Default", TimeRange(TimeCode(0), TimeCode(5000)), ["Hello", "World"])

    def test_serialize(self):
        result = self.serializer.serialize(self.cue, 1)
        expected = ["1", "00:00:00,000 --> 00:00:05,000", "Hello", "World"]
        log_input_expected_result(self.cue, expected, result.split("\n"))
        self.assertEqual(result.split("\n"), expected)
        self.assertEqual(result, "1\n00:00:00,000 --> 00:00:05,000\nHello\nWorld")

    def test_serialize_millisecond_precision(self):
        cue = Cue("Default", TimeRange.from_milliseconds(3723456, 3725001), ["Precise"])
        result = self.serializer.serialize(cue, 42)
        log_input_expected_result(cue, "42\n01:02:03,456 --> 01:02:05,001\nPrecise", result)
        self.assertEqual(result, "42\n01:02:03,456 --> 01:02:05,001\nPrecise")

    def test_drops_ssa_only_fields(self):
        cue = Cue("Signs", TimeRange.from_milliseconds(0, 1000), ["{\\an8}Sign"], layer=4, name="Bob", margin_left="0100", effect="Banner;2")
        result = self.serializer.serialize(cue, 3)
        log_input_expected_result(cue, "3\n00:00:00,000 --> 00:00:01,000\n{\\an8}Sign", result)
        self.assertEqual(result, "3\n00:00:00,000 --> 00:00:01,000\n{\\an8}Sign")

    def test_embedded_newlines_become_physical_lines(self):
        cue = Cue("Default", TimeRange.from_milliseconds(0, 1000), ["One\nTwo", "Three"])
        result = self.serializer.serialize(cue, 1)
        log_input_expected_result(cue.text_lines, ["One", "Two", "Three"], result.split("\n")[2:])
        self.assertEqual(result.split("\n")[2:], ["One", "Two", "Three"])

    def test_sequence_index_required(self):
        if skip_if_debugger_attached("test_sequence_index_required"):
            return

        for index in (None, 0, -1, "1", True):
            with self.subTest(index=index):
                with self.assertRaises(ValueError) as e:
                    self.serializer.serialize(self.cue, index)  # type: ignore[arg-type]
                log_input_expected_error(index, ValueError, e.exception)

    def test_text_encoding_errors(self):
        if skip_if_debugger_attached("test_text_encoding_errors"):
            return

        for lines in ([], ["Hello", ""], ["   "], ["Hello\n\nWorld"]):
            with self.subTest(lines=lines):
                cue = Cue("Default", TimeRange.from_milliseconds(0, 1000), lines)
                with self.assertRaises(FieldEncodingError) as e:
                    self.serializer.serialize(cue, 1)
                log_input_expected_error(lines, FieldEncodingError, e.exception)
                self.assertEqual(e.exception.field, "Text")

    def test_parse_block(self):
        index, cue = self.serializer.parse_block("7\n00:00:01,500 --> 00:00:03,250\nFirst line\nSecond line\n")

        log_input_expected_result("index", 7, index)
        self.assertEqual(index, 7)
        self.assertEqual(cue.time_range, TimeRange.from_milliseconds(1500, 3250))
        self.assertEqual(cue.text_lines, ["First line", "Second line"])
        self.assertEqual(cue.style, "Default")
        self.assertEqual(cue.layer, 0)
        self.assertEqual(cue.margin_left, "0000")
        self.assertEqual(cue.effect, "")

    def test_parse_windows_line_endings_and_bom(self):
        index, cue = self.serializer.parse_block("\ufeff1\r\n00:00:00,000 --> 00:00:05,000\r\nHello\r\nWorld\r\n")
        log_input_expected_result("CRLF block", ["Hello", "World"], cue.text_lines)
        self.assertEqual(index, 1)
        self.assertEqual(cue, self.cue)

    def test_parse_inverts_serialize(self):
        block = self.serializer.serialize(self.cue, 12)
        index, cue = self.serializer.parse_block(block)
        log_input_expected_result(block, (12, self.cue), (index, cue))
        self.assertEqual(index, 12)
        self.assertEqual(cue, self.cue)

    def test_default_style_from_options(self):
        serializer = SrtLineSerializer({'default_style': 'Main'})
        cue = serializer.parse("1\n00:00:00,000 --> 00:00:01,000\nText")
        log_input_expected_result("style", "Main", cue.style)
        self.assertEqual(cue.style, "Main")

    def test_parse_errors(self):
        if skip_if_debugger_attached("test_parse_errors"):
            return

        test_cases = [
            ("", SubtitleParseError),
            ("1", SubtitleParseError),
            ("one\n00:00:00,000 --> 00:00:01,000\nText", SubtitleParseError),
            ("0\n00:00:00,000 --> 00:00:01,000\nText", SubtitleParseError),
            ("1\n00:00:00.000 --> 00:00:01,000\nText", MalformedTimeError),
            ("1\n00:00:00,000 -> 00:00:01,000\nText", MalformedTimeError),
            ("1\n00:00:02,000 --> 00:00:01,000\nText", InvalidRangeError),
        ]

        for block, expected_error in test_cases:
            with self.subTest(block=block):
                with self.assertRaises(expected_error) as e:
                    self.serializer.parse_block(block)
                log_input_expected_error(block, expected_error, e.exception)

    def test_parse_all(self):
        blocks = [
            "1\n00:00:00,000 --> 00:00:01,000\nOne",
            "2\n00:00:01,000 --> 00:00:00,500\nBackwards",
            "3\n00:00:02,000 --> 00:00:03,000\nThree",
        ]

        with self.assertLogs(level='WARNING'):
            cues, errors = self.serializer.parse_all(blocks)

        log_input_expected_result("parsed / errors", (2, 1), (len(cues), len(errors)))
        self.assertEqual([cue.text_lines for cue in cues], [["One"], ["Three"]])
        self.assertIsInstance(errors[0], InvalidRangeError)


if __name__ == '__main__':
    unittest.main()
