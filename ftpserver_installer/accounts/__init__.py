# Path and File Name : /home/ftpserver/installer/ftpserver_installer/accounts/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: FTP account package initialization

from .credential_source import (
    Credentials,
    CredentialSource,
    InteractiveCredentialSource,
    StaticCredentialSource,
    validate_credentials,
)
from .user_creator import FtpAccount, FtpUserCreator

__all__ = [
    'Credentials',
    'CredentialSource',
    'InteractiveCredentialSource',
    'StaticCredentialSource',
    'validate_credentials',
    'FtpAccount',
    'FtpUserCreator',
]
