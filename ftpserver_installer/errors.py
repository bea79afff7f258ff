# Path and File Name : /home/ftpserver/installer/ftpserver_installer/errors.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Installer error taxonomy - precondition, command, input, configuration and artifact failures

"""
Installer errors.

Every expected failure raised by a phase derives from InstallerError.
The pipeline runner converts these into failed phase results; anything
else is treated as a crash.
"""

from typing import Optional, Sequence


class InstallerError(RuntimeError):
    """Base class for all expected installer failures."""


class PreconditionError(InstallerError):
    """Privilege, OS compatibility or disk space check failed."""


class CommandError(InstallerError):
    """External command exited non-zero or could not be started."""

    def __init__(self, args: Sequence[str], returncode: Optional[int], stderr: str = ""):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = (stderr or "").strip()

        if returncode is None:
            message = f"Command could not be started: {' '.join(self.command)}"
        else:
            message = f"Command failed with exit code {returncode}: {' '.join(self.command)}"
        if self.stderr:
            message = f"{message} ({self.stderr.splitlines()[-1]})"
        super().__init__(message)


class InputValidationError(InstallerError):
    """Operator supplied an unusable username or password."""


class ConfigurationError(InstallerError):
    """Installer configuration file is unreadable or invalid."""


class ArtifactError(InstallerError):
    """A file-system artifact could not be written."""
