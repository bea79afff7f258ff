# Path and File Name : /home/ftpserver/installer/ftpserver_installer/tests/test_pipeline.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Tests the phase runner halts on the first failure and records per-phase results

import logging
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from ftpserver_installer.errors import CommandError, PreconditionError
from ftpserver_installer.pipeline import Phase, PhaseStatus, PipelineRunner


class TestPipelineRunner(unittest.TestCase):
    """Fail-closed sequencing."""

    def setUp(self):
        self.calls = []
        self.logger = logging.getLogger("ftpserver_installer.tests.pipeline")

    def _phase(self, name, error=None):
        def action():
            self.calls.append(name)
            if error is not None:
                raise error
        return Phase(name, f"Running {name}", action)

    def test_all_phases_run_in_order(self):
        phases = [self._phase("one"), self._phase("two"), self._phase("three")]
        with self.assertLogs(self.logger, level="INFO") as logs:
            report = PipelineRunner(phases, self.logger).run()

        self.assertTrue(report.succeeded)
        self.assertIsNone(report.failed_phase)
        self.assertEqual(self.calls, ["one", "two", "three"])
        self.assertEqual([r.status for r in report.results], [PhaseStatus.SUCCESS] * 3)
        self.assertIn("INFO:ftpserver_installer.tests.pipeline:[2/3] Running two...", logs.output)

    def test_halts_on_first_failure(self):
        error = CommandError(["apt-get", "install", "-y", "vsftpd"], 100, "E: Unable to locate package")
        phases = [self._phase("one"), self._phase("two", error), self._phase("three")]

        with self.assertLogs(self.logger, level="ERROR") as logs:
            report = PipelineRunner(phases, self.logger).run()

        self.assertFalse(report.succeeded)
        self.assertEqual(self.calls, ["one", "two"])
        self.assertEqual(len(report.results), 2)

        failed = report.failed_phase
        self.assertEqual(failed.phase, "two")
        self.assertEqual(failed.status, PhaseStatus.FAILURE)
        self.assertIs(failed.error, error)
        self.assertIn("exit code 100", failed.reason)
        self.assertIn("Unable to locate package", failed.reason)
        self.assertTrue(any("1 remaining phase(s) not executed" in line for line in logs.output))

    def test_precondition_failure_in_first_phase_stops_everything(self):
        phases = [self._phase("check", PreconditionError("Insufficient disk space")),
                  self._phase("mutate")]
        with self.assertLogs(self.logger, level="ERROR"):
            report = PipelineRunner(phases, self.logger).run()

        self.assertEqual(self.calls, ["check"])
        self.assertEqual(report.failed_phase.reason, "Insufficient disk space")

    def test_unexpected_exception_propagates(self):
        phases = [self._phase("boom", ValueError("bug")), self._phase("after")]
        with self.assertRaises(ValueError):
            PipelineRunner(phases, self.logger).run()
        self.assertEqual(self.calls, ["boom"])


class TestCommandError(unittest.TestCase):

    def test_message_without_start(self):
        error = CommandError(["ufw", "enable"], None, "No such file or directory")
        self.assertIn("could not be started: ufw enable", str(error))
        self.assertIsNone(error.returncode)
        self.assertEqual(error.command, ["ufw", "enable"])

    def test_message_uses_last_stderr_line(self):
        error = CommandError(["systemctl", "restart", "vsftpd"], 1, "line one\nJob failed\n")
        self.assertTrue(str(error).endswith("(Job failed)"))


if __name__ == '__main__':
    unittest.main(verbosity=2)
