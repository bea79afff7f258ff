# Path and File Name : /home/ftpserver/installer/ftpserver_installer/system/os_check.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Reads the installation target from os-release and checks it against the supported allow-list

"""
OS Check: identifies the installation target and validates it.

The target is read once from the os-release file (ID and VERSION_ID).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class InstallationTarget:
    """Operating system identity of the host being provisioned."""
    distribution_id: str
    version_id: str


def parse_os_release(content: str) -> Dict[str, str]:
    """
    Parse os-release KEY=value lines.

    Quotes around values are stripped; comments and blank lines ignored.
    """
    values = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        values[key.strip()] = value
    return values


class OSCheck:
    """Validates the OS distribution and version."""

    def __init__(self, os_release_file: Path, supported_id: str,
                 supported_versions: Iterable[str]):
        self.os_release_file = Path(os_release_file)
        self.supported_id = supported_id
        self.supported_versions = list(supported_versions)
        self._target: Optional[InstallationTarget] = None

    def detect(self) -> InstallationTarget:
        """
        Read the installation target (cached after the first call).

        Raises:
            OSError: If the os-release file cannot be read
        """
        if self._target is None:
            values = parse_os_release(self.os_release_file.read_text())
            self._target = InstallationTarget(
                distribution_id=values.get("ID", "").lower(),
                version_id=values.get("VERSION_ID", ""),
            )
        return self._target

    def is_supported(self) -> Tuple[bool, str]:
        """
        Returns:
            Tuple of (is_supported: bool, message: str)
        """
        versions = " and ".join(self.supported_versions)
        unsupported = f"Unsupported Ubuntu version. Supports {versions} only."

        try:
            target = self.detect()
        except OSError as e:
            return False, f"{unsupported} Cannot read {self.os_release_file}: {e}"

        if target.distribution_id != self.supported_id or target.version_id not in self.supported_versions:
            found = f"{target.distribution_id or 'unknown'} {target.version_id or 'unknown'}"
            return False, f"{unsupported} Detected: {found}"

        return True, f"Supported OS: {target.distribution_id} {target.version_id}"
