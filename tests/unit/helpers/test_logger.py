"""Test logger utilities."""

import unittest
from unittest.mock import MagicMock, patch

from archive_folder.helpers.logger import LOG, log_debug_json


class TestLogging(unittest.TestCase):
    """Test logger utilities."""

    def test_logger_name(self) -> None:
        """Test the package logger."""

        self.assertEqual(LOG.name, "archive_folder")

    @patch("archive_folder.helpers.logger.LOG")
    def test_log_debug_json(self, mock_log: MagicMock) -> None:
        """Test log_debug_json."""

        log_debug_json({"repository_identifier": "repo", "uri": "http://example.org/foo"})

        mock_log.debug.assert_called_once()
        args, _ = mock_log.debug.call_args
        logged_output = args[0]
        expected_output = "{\n" '    "repository_identifier": "repo",\n' '    "uri": "http://example.org/foo"\n' "}"
        self.assertEqual(logged_output, expected_output)
