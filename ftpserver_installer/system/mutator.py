# Path and File Name : /home/ftpserver/installer/ftpserver_installer/system/mutator.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Single gateway for external system commands - fails closed on any non-zero exit

"""
System Mutator: every external command the installer runs goes through here.

Commands run to completion (no timeout, no retry). A non-zero exit status
or a missing binary raises CommandError so the pipeline can stop.
Tests substitute a recording double for this class.
"""

import os
import subprocess
from typing import Dict, Optional, Sequence

from ..errors import CommandError
from ..logger import get_logger

logger = get_logger("system")


class SystemMutator:
    """Runs external commands with checked exit status."""

    def run(self, args: Sequence[str], input: Optional[str] = None,
            env: Optional[Dict[str, str]] = None) -> subprocess.CompletedProcess:
        """
        Run a command and fail closed on non-zero exit.

        Args:
            args: Command and arguments (never passed through a shell)
            input: Text written to the command's stdin
            env: Extra environment variables merged over os.environ

        Returns:
            Completed process (stdout/stderr captured as text)

        Raises:
            CommandError: If the command cannot be started or exits non-zero
        """
        args = [str(a) for a in args]
        logger.debug(f"Running: {' '.join(args)}")

        try:
            result = subprocess.run(
                args,
                input=input,
                env=self._merge_env(env),
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise CommandError(args, None, str(e))

        if result.returncode != 0:
            raise CommandError(args, result.returncode, result.stderr)

        return result

    def probe(self, args: Sequence[str]) -> Optional[subprocess.CompletedProcess]:
        """
        Run a read-only query command without failing on its exit status.

        Returns:
            Completed process, or None if the binary cannot be started
        """
        args = [str(a) for a in args]
        try:
            return subprocess.run(args, capture_output=True, text=True)
        except OSError:
            return None

    @staticmethod
    def _merge_env(env: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if not env:
            return None
        merged = dict(os.environ)
        merged.update(env)
        return merged
