import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from buildgrinder.cli_logger import Logger, LogLevel


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.log_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.log_dir)

    def read_log(self, logger):
        with open(logger.log_file) as f:
            return f.read()

    def test_parse(self):
        self.assertIs(LogLevel.parse("info"), LogLevel.INFO)
        self.assertIs(LogLevel.parse(" Lifecycle "), LogLevel.LIFECYCLE)
        self.assertIs(LogLevel.parse(30), LogLevel.WARNING)
        self.assertIs(LogLevel.parse(LogLevel.DEBUG), LogLevel.DEBUG)
        with self.assertRaises(ValueError):
            LogLevel.parse("verbose")

    @patch.dict(os.environ, {"BUILDGRINDER_LOG_LEVEL": "debug"})
    def test_threshold_from_environment(self):
        self.assertIs(Logger(log_dir=self.log_dir).threshold, LogLevel.DEBUG)

    def test_default_threshold(self):
        with patch.dict(os.environ):
            os.environ.pop("BUILDGRINDER_LOG_LEVEL", None)
            logger = Logger(log_dir=self.log_dir)
        self.assertIs(logger.threshold, LogLevel.LIFECYCLE)
        self.assertFalse(logger.is_enabled(LogLevel.INFO))
        self.assertTrue(logger.is_enabled(LogLevel.LIFECYCLE))
        self.assertTrue(logger.is_enabled("error"))

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_messages_below_threshold_are_dropped(self, mock_stdout):
        logger = Logger(threshold=LogLevel.LIFECYCLE, log_dir=self.log_dir)
        logger.info("hidden")
        logger.debug("hidden too")
        self.assertEqual(mock_stdout.getvalue(), "")
        self.assertFalse(os.path.exists(logger.log_file))

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_log_writes_console_and_file(self, mock_stdout):
        logger = Logger(threshold=LogLevel.INFO, log_dir=self.log_dir)
        logger.log(LogLevel.INFO, "Trying to resolve file")
        logger.lifecycle("Resolved")
        self.assertIn("Trying to resolve file", mock_stdout.getvalue())
        content = self.read_log(logger)
        self.assertIn("[INFO] Trying to resolve file", content)
        self.assertIn("[LIFECYCLE] Resolved", content)

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_errors_go_to_stderr(self, mock_stderr):
        logger = Logger(threshold=LogLevel.ERROR, log_dir=self.log_dir)
        logger.warning("not shown")
        logger.error("broken")
        self.assertIn("broken", mock_stderr.getvalue())
        self.assertNotIn("not shown", mock_stderr.getvalue())
        self.assertIn("[ERROR]", self.read_log(logger))

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_exception(self, mock_stderr):
        logger = Logger(log_dir=self.log_dir)
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            logger.exception(type(e), e, e.__traceback__)
        self.assertIn("boom", mock_stderr.getvalue())
        self.assertIn("[TRACEBACK] >> RuntimeError: boom", self.read_log(logger))


if __name__ == "__main__":
    unittest.main()
