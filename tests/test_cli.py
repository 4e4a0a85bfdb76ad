"""Test cases for CLI functionality."""

import shutil
import tempfile
from pathlib import Path
from unittest import TestCase, main
from unittest.mock import patch, MagicMock, call

from src.babymusic import cli
from src.babymusic.modes import DEFAULT_VIDEOS, Mode
from src.babymusic.store import PlaylistStore


class TestCLI(TestCase):
    """Test cases for CLI functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_logger = MagicMock()
        patcher = patch("src.babymusic.cli.logger", self.mock_logger)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.tmpdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmpdir, True)
        self.database_url = f"sqlite:///{Path(self.tmpdir) / 'music_urls.db'}"

    def run_cli(self, *args):
        return cli.main(["--database-url", self.database_url, *args])

    def stored_video_ids(self, mode):
        store = PlaylistStore(self.database_url)
        try:
            return [entry.video_id for entry in store.list_by_mode(mode)]
        finally:
            store.close()

    def test_no_arguments_prints_help(self):
        """Test running without a command."""
        with patch("sys.stdout"):
            self.assertEqual(cli.main([]), 0)

    def test_invalid_mode(self):
        """Test that argparse rejects unknown modes."""
        with patch("sys.stderr"):
            self.assertEqual(self.run_cli("list", "party"), 1)

    def test_init_seeds_once(self):
        """Test seeding through the CLI."""
        self.assertEqual(self.run_cli("init"), 0)
        self.mock_logger.info.assert_called_with("Seeded %d default videos", 12)

        self.assertEqual(self.run_cli("init"), 0)
        self.mock_logger.info.assert_called_with("Database already initialized")

    def test_list(self):
        """Test listing a mode in order."""
        self.run_cli("init")
        self.mock_logger.reset_mock()

        self.assertEqual(self.run_cli("list", "relax"), 0)

        logged = [c.args[2] for c in self.mock_logger.info.call_args_list]
        self.assertEqual(logged, DEFAULT_VIDEOS[Mode.RELAX])

    def test_add(self):
        """Test adding a video by URL."""
        result = self.run_cli("add", "play", "https://www.youtube.com/watch?v=CaqHOvgAnO0")

        self.assertEqual(result, 0)
        self.assertEqual(self.stored_video_ids("play"), ["CaqHOvgAnO0"])

    def test_add_invalid_video(self):
        """Test that invalid input fails the command."""
        result = self.run_cli("add", "play", "not a url")

        self.assertEqual(result, 1)
        self.mock_logger.error.assert_called_once_with(
            "Command failed: %s", "Invalid video URL or ID: 'not a url'"
        )
        self.assertEqual(self.stored_video_ids("play"), [])

    def test_remove(self):
        """Test removing by id, twice."""
        self.run_cli("add", "sleep", "035d3iiFej4")
        store = PlaylistStore(self.database_url)
        entry_id = store.list_by_mode("sleep")[0].id
        store.close()

        self.assertEqual(self.run_cli("remove", "sleep", str(entry_id)), 0)
        self.assertEqual(self.stored_video_ids("sleep"), [])

        self.assertEqual(self.run_cli("remove", "sleep", str(entry_id)), 0)
        self.mock_logger.info.assert_called_with("No entry with id %d", entry_id)

    def test_next(self):
        """Test picking the next video."""
        self.run_cli("init")
        current = DEFAULT_VIDEOS[Mode.PLAY][0]
        self.mock_logger.reset_mock()

        self.assertEqual(self.run_cli("next", "play", "--current", current), 0)

        picked = self.mock_logger.info.call_args.args[1]
        self.assertIn(picked, DEFAULT_VIDEOS[Mode.PLAY])
        self.assertNotEqual(picked, current)

    def test_next_empty_mode(self):
        """Test picking from an empty mode."""
        self.assertEqual(self.run_cli("next", "learning"), 1)
        self.mock_logger.error.assert_called_once_with(
            "Command failed: %s", "No videos available"
        )

    def test_serve(self):
        """Test that serve hands the app to uvicorn."""
        with patch("uvicorn.run") as mock_run:
            result = cli.main(["serve", "--host", "127.0.0.1", "--port", "4000"])

        self.assertEqual(result, 0)
        from src.babymusic.webapi import app

        mock_run.assert_called_once_with(app, host="127.0.0.1", port=4000)
        self.assertIn(
            call("Baby Music server running on http://%s:%d", "127.0.0.1", 4000),
            self.mock_logger.info.call_args_list,
        )


if __name__ == "__main__":
    main()
