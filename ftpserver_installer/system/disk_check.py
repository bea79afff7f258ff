# Path and File Name : /home/ftpserver/installer/ftpserver_installer/system/disk_check.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Checks free space on the root filesystem against the installer minimum

import shutil
from pathlib import Path
from typing import Tuple

MB = 1024 * 1024


class DiskCheck:
    """Free disk space check."""

    def __init__(self, mount_point: Path = Path("/"), required_mb: int = 500):
        self.mount_point = Path(mount_point)
        self.required_mb = required_mb

    def available_mb(self) -> int:
        return shutil.disk_usage(self.mount_point).free // MB

    def check_availability(self) -> Tuple[bool, str, int]:
        """
        Returns:
            Tuple of (is_available: bool, message: str, available_mb: int)
        """
        try:
            available = self.available_mb()
        except OSError as e:
            return False, f"Cannot determine free space on {self.mount_point}: {e}", 0

        if available < self.required_mb:
            return False, f"Insufficient disk space. Requires at least {self.required_mb}MB.", available

        return True, f"Disk space OK: {available}MB available on {self.mount_point}", available
