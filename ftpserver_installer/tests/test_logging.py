# Path and File Name : /home/ftpserver/installer/ftpserver_installer/tests/test_logging.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Tests log line format, SUCCESS level and append-only file sink

import io
import logging
import re
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from ftpserver_installer.logger import SUCCESS, ConsoleFormatter, setup_logging
from ftpserver_installer.tests.fakes import reset_logging

LINE_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[(INFO|SUCCESS|WARNING|ERROR)\] .+$")


class TestInstallerLogging(unittest.TestCase):

    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="logging_test_"))
        self.log_file = self.test_dir / "log" / "ftp_install.log"
        self.console = io.StringIO()

    def tearDown(self):
        reset_logging()
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_file_lines_have_timestamp_level_message(self):
        logger = setup_logging(self.log_file, stream=self.console)
        logger.info("Performing system prerequisite checks...")
        logger.log(SUCCESS, "All prerequisite checks passed")
        logger.warning("No existing config to back up")
        logger.error("Insufficient disk space. Requires at least 500MB.")

        lines = self.log_file.read_text().splitlines()
        self.assertEqual(len(lines), 4)
        for line in lines:
            self.assertRegex(line, LINE_PATTERN)
        self.assertTrue(lines[1].endswith("[SUCCESS] All prerequisite checks passed"))

    def test_console_without_tty_has_no_color(self):
        logger = setup_logging(self.log_file, stream=self.console)
        logger.log(SUCCESS, "done")
        self.assertEqual(self.console.getvalue(), "[SUCCESS] done\n")

    def test_console_color_codes(self):
        formatter = ConsoleFormatter(use_color=True)
        record = logging.LogRecord("ftpserver_installer", logging.ERROR, __file__, 1, "boom", (), None)
        self.assertEqual(formatter.format(record), "\033[31m[ERROR]\033[0m boom")

    def test_console_keeps_traceback(self):
        logger = setup_logging(self.log_file, stream=self.console)
        try:
            raise ValueError("disk vanished")
        except ValueError:
            logger.exception("Fatal error during installation: disk vanished")

        output = self.console.getvalue()
        self.assertTrue(output.startswith("[ERROR] Fatal error during installation: disk vanished\n"))
        self.assertIn("Traceback (most recent call last):", output)
        self.assertIn("ValueError: disk vanished", output)

    def test_file_is_appended_across_setups(self):
        setup_logging(self.log_file, stream=self.console).info("first run")
        setup_logging(self.log_file, stream=self.console).info("second run")

        content = self.log_file.read_text()
        self.assertIn("first run", content)
        self.assertIn("second run", content)
        self.assertEqual(len(content.splitlines()), 2)

    def test_unwritable_log_falls_back_to_console(self):
        blocker = self.test_dir / "blocker"
        blocker.write_text("")
        logger = setup_logging(blocker / "ftp_install.log", stream=self.console)
        logger.info("still visible")

        output = self.console.getvalue()
        self.assertIn("[WARNING] Cannot write log file", output)
        self.assertIn("[INFO] still visible", output)


if __name__ == '__main__':
    unittest.main(verbosity=2)
