# Path and File Name : /home/ftpserver/installer/ftpserver_installer/accounts/user_creator.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Creates the FTP system account, sets its password, allow-lists it and locks down its home directory

"""
FTP User Creator.

Steps (each fail-closed):
1. useradd -m -d <home_root>/<username> -s <restricted shell> <username>
   (home_root created first if missing)
2. chpasswd with "username:password" on stdin (never on the command line)
3. append username to the vsftpd allow-list
4. chmod the home directory (0555 by default)

NOTE: a 0555 home under chroot_local_user=YES with allow_writeable_chroot=NO
leaves the account unable to upload even though write_enable=YES.
The mode is kept as configured; the installer logs a warning.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import ArtifactError
from ..system.mutator import SystemMutator
from .credential_source import Credentials


@dataclass(frozen=True)
class FtpAccount:
    """OS-level account created for FTP access."""
    username: str
    home_directory: Path
    shell: str
    password: str = field(repr=False, default="")


class FtpUserCreator:
    """Creates a single FTP account."""

    def __init__(self, mutator: SystemMutator, allowed_users_file: Path,
                 home_root: Path = Path("/home"), shell: str = "/bin/false",
                 home_mode: int = 0o555):
        self.mutator = mutator
        self.allowed_users_file = Path(allowed_users_file)
        self.home_root = Path(home_root)
        self.shell = shell
        self.home_mode = home_mode

    def create(self, credentials: Credentials) -> FtpAccount:
        """
        Create the account described by credentials.

        Returns:
            The created account

        Raises:
            CommandError: If useradd or chpasswd fails
            ArtifactError: If the home root, allow-list or home permissions cannot
                be updated
        """
        account = FtpAccount(
            username=credentials.username,
            home_directory=self.home_root / credentials.username,
            shell=self.shell,
            password=credentials.password,
        )

        self._ensure_home_root()
        self.mutator.run([
            "useradd", "-m", "-d", str(account.home_directory), "-s", account.shell, account.username,
        ])
        self.mutator.run(["chpasswd"], input=f"{account.username}:{account.password}\n")

        self._append_allowed_user(account.username)
        self._restrict_home(account.home_directory)

        return account

    def _ensure_home_root(self) -> None:
        # useradd -m creates only the last path component
        try:
            self.home_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactError(f"Failed to create home root {self.home_root}: {e}")

    def _append_allowed_user(self, username: str) -> None:
        try:
            self.allowed_users_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.allowed_users_file, 'a') as f:
                f.write(f"{username}\n")
        except OSError as e:
            raise ArtifactError(f"Failed to update allow-list {self.allowed_users_file}: {e}")

    def _restrict_home(self, home: Path) -> None:
        try:
            os.chmod(home, self.home_mode)
        except OSError as e:
            raise ArtifactError(f"Failed to set permissions on {home}: {e}")
