# Path and File Name : /home/ftpserver/installer/ftpserver_installer/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: FTP server installer package initialization

"""
FTP Server Installer

Installs and hardens vsftpd on Ubuntu 22.04/24.04 in nine fail-closed phases:
prerequisites, system preparation, packages and PAM policy, TLS certificate,
vsftpd configuration, Fail2Ban, UFW, FTP account, service activation.
"""

from .installer import FTPServerInstaller, main
from .errors import (
    InstallerError,
    PreconditionError,
    CommandError,
    InputValidationError,
    ConfigurationError,
    ArtifactError,
)

__all__ = [
    'FTPServerInstaller',
    'main',
    'InstallerError',
    'PreconditionError',
    'CommandError',
    'InputValidationError',
    'ConfigurationError',
    'ArtifactError',
]

__version__ = "1.0.0"
