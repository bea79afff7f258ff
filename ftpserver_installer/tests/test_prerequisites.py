# Path and File Name : /home/ftpserver/installer/ftpserver_installer/tests/test_prerequisites.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Tests privilege, OS and disk prerequisite checks and fail-closed abort before any mutation

"""
Prerequisite Check Tests

Verifies:
1. os-release parsing and the ubuntu 22.04/24.04 allow-list
2. Disk space threshold (default 500 MB)
3. Any failed prerequisite aborts the run with exit status 1 and no
   filesystem or package mutation besides the log file
"""

import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from ftpserver_installer.installer import FTPServerInstaller
from ftpserver_installer.accounts.credential_source import StaticCredentialSource
from ftpserver_installer.system.disk_check import DiskCheck, MB
from ftpserver_installer.system.os_check import OSCheck, InstallationTarget, parse_os_release
from ftpserver_installer.system.privilege_check import PrivilegeCheck
from ftpserver_installer.tests.fakes import RecordingMutator, make_config, reset_logging


def _snapshot(root: Path):
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


class TestOSCheck(unittest.TestCase):
    """OS identity checks."""

    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="os_check_test_"))
        self.os_release = self.test_dir / "os-release"

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _check(self, content: str) -> OSCheck:
        self.os_release.write_text(content)
        return OSCheck(self.os_release, "ubuntu", ["22.04", "24.04"])

    def test_parse_strips_quotes_and_comments(self):
        values = parse_os_release('# comment\nID=ubuntu\nVERSION_ID="24.04"\nNAME=\'Ubuntu\'\n\n')
        self.assertEqual(values["ID"], "ubuntu")
        self.assertEqual(values["VERSION_ID"], "24.04")
        self.assertEqual(values["NAME"], "Ubuntu")

    def test_supported_versions_pass(self):
        for version in ("22.04", "24.04"):
            check = self._check(f'ID=ubuntu\nVERSION_ID="{version}"\n')
            ok, message = check.is_supported()
            self.assertTrue(ok, message)
            self.assertEqual(check.detect(), InstallationTarget("ubuntu", version))

    def test_unsupported_combinations_fail(self):
        cases = [
            'ID=ubuntu\nVERSION_ID="20.04"\n',
            'ID=debian\nVERSION_ID="22.04"\n',
            'ID=fedora\nVERSION_ID="40"\n',
            'NAME=unknown\n',
        ]
        for content in cases:
            ok, message = self._check(content).is_supported()
            self.assertFalse(ok, content)
            self.assertIn("Unsupported Ubuntu version", message)

    def test_missing_os_release_fails(self):
        check = OSCheck(self.test_dir / "missing", "ubuntu", ["22.04"])
        ok, message = check.is_supported()
        self.assertFalse(ok)
        self.assertIn("Cannot read", message)


class TestDiskAndPrivilegeChecks(unittest.TestCase):

    def test_disk_below_minimum_fails(self):
        with patch('ftpserver_installer.system.disk_check.shutil.disk_usage',
                   return_value=MagicMock(free=499 * MB)):
            ok, message, available = DiskCheck(Path("/"), 500).check_availability()
        self.assertFalse(ok)
        self.assertEqual(available, 499)
        self.assertIn("Requires at least 500MB", message)

    def test_disk_at_minimum_passes(self):
        with patch('ftpserver_installer.system.disk_check.shutil.disk_usage',
                   return_value=MagicMock(free=500 * MB)):
            ok, _, available = DiskCheck(Path("/"), 500).check_availability()
        self.assertTrue(ok)
        self.assertEqual(available, 500)

    def test_non_root_fails(self):
        with patch('ftpserver_installer.system.privilege_check.os.geteuid', return_value=1000):
            ok, message = PrivilegeCheck().is_root()
        self.assertFalse(ok)
        self.assertIn("must be run as root", message)

    def test_root_passes(self):
        with patch('ftpserver_installer.system.privilege_check.os.geteuid', return_value=0):
            ok, _ = PrivilegeCheck().is_root()
        self.assertTrue(ok)


class TestPrerequisiteAbort(unittest.TestCase):
    """A failed prerequisite stops the whole run before any mutation."""

    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="prereq_test_"))
        self.config = make_config(self.test_dir)
        self.mutator = RecordingMutator(default_home=self.config.home_root)

    def tearDown(self):
        reset_logging()
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _run(self, euid=0, free_mb=1000):
        installer = FTPServerInstaller(
            config=self.config,
            mutator=self.mutator,
            credential_source=StaticCredentialSource("alice", "Sup3r$ecretPass"),
        )
        before = _snapshot(self.test_dir)
        with patch('ftpserver_installer.system.privilege_check.os.geteuid', return_value=euid), \
             patch('ftpserver_installer.system.disk_check.shutil.disk_usage',
                   return_value=MagicMock(free=free_mb * MB)):
            report = installer.run()
        after = _snapshot(self.test_dir)
        return report, before, after

    def _assert_no_mutation(self, before, after):
        self.assertEqual(self.mutator.commands, [], "No external command may run")
        self.assertEqual(before, after, "No file may be created besides the log")

    def test_unsupported_os_aborts_without_mutation(self):
        for content in ('ID=ubuntu\nVERSION_ID="20.04"\n', 'ID=debian\nVERSION_ID="12"\n'):
            self.config.os_release_file.write_text(content)
            report, before, after = self._run()

            self.assertFalse(report.succeeded)
            self.assertEqual(len(report.results), 1)
            self.assertEqual(report.failed_phase.phase, "Prerequisite verification")
            self._assert_no_mutation(before, after)
            self.assertIn("[ERROR] Prerequisite verification failed: Unsupported Ubuntu version",
                          self.config.log_file.read_text())

    def test_insufficient_disk_aborts_before_package_operations(self):
        report, before, after = self._run(free_mb=100)

        self.assertFalse(report.succeeded)
        self.assertIn("Insufficient disk space", report.failed_phase.reason)
        self.assertEqual(self.mutator.ran("apt-get"), [])
        self._assert_no_mutation(before, after)

    def test_non_root_aborts(self):
        report, before, after = self._run(euid=1000)

        self.assertFalse(report.succeeded)
        self.assertIn("must be run as root", report.failed_phase.reason)
        self._assert_no_mutation(before, after)

    def test_main_exits_non_zero_on_failed_prerequisite(self):
        from ftpserver_installer import installer as installer_module

        self.config.os_release_file.write_text('ID=ubuntu\nVERSION_ID="18.04"\n')
        real_init = installer_module.FTPServerInstaller.__init__

        def init_with_fakes(obj, config=None, **kwargs):
            real_init(obj, config=self.config, mutator=self.mutator,
                      credential_source=StaticCredentialSource("alice", "Sup3r$ecretPass"))

        with patch.object(installer_module.InstallerConfig, 'load', return_value=self.config), \
             patch.object(installer_module.FTPServerInstaller, '__init__', init_with_fakes), \
             patch('ftpserver_installer.system.privilege_check.os.geteuid', return_value=0):
            exit_code = installer_module.main([])

        self.assertEqual(exit_code, 1)
        self.assertEqual(self.mutator.commands, [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
