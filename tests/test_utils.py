"""Tests for utility functions."""

import unittest

from src.babymusic import utils


class TestVideoIdExtraction(unittest.TestCase):
    """Test cases for video ID extraction."""

    def test_parse_raw_id(self):
        """Test that canonical IDs are returned unchanged."""
        test_cases = [
            "035d3iiFej4",
            "n2-beumXxEM",
            "O8BThfcH-F4",
            "abc_DEF-123",
        ]
        for video_id in test_cases:
            with self.subTest(video_id=video_id):
                self.assertEqual(utils.extract_video_id(video_id), video_id)

    def test_padded_raw_id(self):
        """Test that whitespace around a pasted ID is ignored."""
        test_cases = [" 035d3iiFej4", "035d3iiFej4 ", "\t035d3iiFej4\n"]
        for raw in test_cases:
            with self.subTest(raw=raw):
                self.assertEqual(utils.extract_video_id(raw), "035d3iiFej4")
        self.assertIsNone(utils.extract_video_id("035d3 iiFej4"))

    def test_parse_video_url(self):
        """Test extracting IDs from the recognized URL shapes."""
        test_cases = [
            ("https://www.youtube.com/watch?v=HAzZH6wccew", "HAzZH6wccew"),
            ("https://youtu.be/XGSSmQiqBl8", "XGSSmQiqBl8"),
            ("https://youtu.be/XGSSmQiqBl8?si=abcdef", "XGSSmQiqBl8"),
            ("https://www.youtube.com/embed/Na0w3Mz46GA", "Na0w3Mz46GA"),
            ("https://www.youtube.com/v/P6tFwmw2OEY?version=3", "P6tFwmw2OEY"),
            ("https://www.youtube.com/user/someone#p/u/1/REtbaAA4j7U", "REtbaAA4j7U"),
            ("https://m.youtube.com/watch?v=BW4H15rK6iI&t=42s", "BW4H15rK6iI"),
            ("https://www.youtube.com/watch?feature=share&v=CaqHOvgAnO0", "CaqHOvgAnO0"),
            ("youtube.com/watch?v=XzorjCt7Cv8&list=PL1234567890abcdef", "XzorjCt7Cv8"),
            ("  https://youtu.be/hRxJRkMXuZI  ", "hRxJRkMXuZI"),
        ]
        for url, expected_id in test_cases:
            with self.subTest(url=url):
                self.assertEqual(utils.extract_video_id(url), expected_id)

    def test_invalid_input(self):
        """Test handling of invalid inputs."""
        test_cases = [
            None,
            "",  # Empty string
            "not a url",  # Random text
            "035d3iiFej",  # Too short
            "!@#$%^&*()_",  # Invalid characters
            "https://youtube.com/playlist?list=PL1234567890abcdef",  # Playlist URL
            "https://youtu.be/short",  # ID too short
            "https://example.com/page",
        ]
        for invalid_input in test_cases:
            with self.subTest(invalid_input=invalid_input):
                self.assertIsNone(utils.extract_video_id(invalid_input))

    def test_extraction_is_idempotent(self):
        """Test that extracting from an extracted ID gives the same ID."""
        test_cases = [
            "035d3iiFej4",
            "https://www.youtube.com/watch?v=HAzZH6wccew",
            "https://youtu.be/XGSSmQiqBl8",
            "https://www.youtube.com/embed/Na0w3Mz46GA?autoplay=1",
        ]
        for raw in test_cases:
            with self.subTest(raw=raw):
                video_id = utils.extract_video_id(raw)
                self.assertIsNotNone(video_id)
                self.assertEqual(utils.extract_video_id(video_id), video_id)


if __name__ == "__main__":
    unittest.main()
