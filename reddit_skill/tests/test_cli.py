"""Tests for the CLI module."""

import os
import tempfile
import unittest
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from conftest import make_child, make_listing
from reddit_skill.cli import app
from reddit_skill.exceptions import TransportFailure
from reddit_skill.reddit_client import RedditClient

LISTING = make_listing([make_child("Markets rally"), make_child("Storm hits coast")])


class TestCli(unittest.TestCase):
    """Test cases for the CLI interface."""

    def setUp(self):
        """Set up test environment."""
        self.runner = CliRunner()

        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.temp_dir.name, "config.yaml")

        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write("""
supported_topics:
  - news
  - world news
  - jokes
log_level: INFO
            """)

    def tearDown(self):
        """Clean up test environment."""
        self.temp_dir.cleanup()

    def test_resolve_command(self):
        result = self.runner.invoke(app, ["resolve", "world news"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("r/worldnews/", result.stdout)
        self.assertIn("category: worldnews", result.stdout)

    @patch("reddit_skill.cli.setup_logging")
    def test_ask_command_prints_ssml(self, mock_setup_logging):
        with patch.object(RedditClient, "fetch_listing", AsyncMock(return_value=LISTING)) as fetch:
            result = self.runner.invoke(app, ["ask", "world news", "--config", self.config_path])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("<speak>Here is your world news from Reddit", result.stdout)
        self.assertIn("2<break time='1s'/>Storm hits coast", result.stdout)
        fetch.assert_awaited_once_with("r/worldnews/")
        mock_setup_logging.assert_called_once()

    @patch("reddit_skill.cli.setup_logging")
    def test_ask_command_plain(self, mock_setup_logging):
        with patch.object(RedditClient, "fetch_listing", AsyncMock(return_value=LISTING)):
            result = self.runner.invoke(
                app, ["ask", "news", "--plain", "--list-type", "top", "--config", self.config_path]
            )

        self.assertEqual(result.exit_code, 0)
        self.assertNotIn("<speak>", result.stdout)
        self.assertIn("1 Markets rally 2 Storm hits coast", result.stdout)

    @patch("reddit_skill.cli.setup_logging")
    def test_ask_command_unsupported_topic(self, mock_setup_logging):
        with patch.object(RedditClient, "fetch_listing", AsyncMock()) as fetch:
            result = self.runner.invoke(app, ["ask", "cats", "--config", self.config_path])

        self.assertEqual(result.exit_code, 1)
        fetch.assert_not_awaited()

    @patch("reddit_skill.cli.setup_logging")
    def test_ask_command_fetch_failure(self, mock_setup_logging):
        with patch.object(RedditClient, "fetch_listing", AsyncMock(side_effect=TransportFailure("down"))):
            result = self.runner.invoke(app, ["ask", "news", "--config", self.config_path])

        self.assertEqual(result.exit_code, 1)

    @patch("reddit_skill.cli.setup_logging")
    def test_invalid_config_aborts(self, mock_setup_logging):
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write("api_port: 0\n")

        result = self.runner.invoke(app, ["ask", "news", "--config", self.config_path])

        self.assertEqual(result.exit_code, 1)

    @patch("reddit_skill.cli.setup_logging")
    def test_serve_command(self, mock_setup_logging):
        with patch("uvicorn.run") as mock_run:
            result = self.runner.invoke(app, ["serve", "--port", "9999", "--config", self.config_path])

        self.assertEqual(result.exit_code, 0)
        mock_run.assert_called_once()
        self.assertEqual(mock_run.call_args.kwargs["port"], 9999)
        self.assertEqual(mock_run.call_args.kwargs["host"], "0.0.0.0")

    @patch("reddit_skill.cli.setup_logging")
    @patch("reddit_skill.cli.PrometheusExporter")
    def test_serve_starts_exporter_when_enabled(self, mock_exporter_cls, mock_setup_logging):
        with open(self.config_path, "a", encoding="utf-8") as f:
            f.write("\nmonitoring:\n  enable_prometheus: true\n  prometheus_port: 9101\n")

        with patch("uvicorn.run"):
            result = self.runner.invoke(app, ["serve", "--config", self.config_path])

        self.assertEqual(result.exit_code, 0)
        mock_exporter_cls.assert_called_once_with(9101)
        mock_exporter_cls.return_value.start_server.assert_called_once()


if __name__ == "__main__":
    unittest.main()
