# Path and File Name : /home/ftpserver/installer/ftpserver_installer/system/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: System checks and command execution package initialization

"""
System Package: prerequisite checks, external command gateway, apt wrapper.
"""

from .privilege_check import PrivilegeCheck
from .os_check import OSCheck, InstallationTarget
from .disk_check import DiskCheck
from .mutator import SystemMutator
from .package_manager import PackageManager

__all__ = [
    'PrivilegeCheck',
    'OSCheck',
    'InstallationTarget',
    'DiskCheck',
    'SystemMutator',
    'PackageManager',
]
