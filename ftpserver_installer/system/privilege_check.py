# Path and File Name : /home/ftpserver/installer/ftpserver_installer/system/privilege_check.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Verifies the installer runs with root privileges

import os
from typing import Tuple


class PrivilegeCheck:
    """Root privilege check."""

    def is_root(self) -> Tuple[bool, str]:
        """
        Returns:
            Tuple of (is_root: bool, message: str)
        """
        if os.geteuid() != 0:
            return False, "This script must be run as root. Use sudo."
        return True, "Running with root privileges"
