# Path and File Name : /home/ftpserver/installer/ftpserver_installer/services/fail2ban_writer.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Writes the Fail2Ban vsftpd jail and restarts fail2ban

"""
Fail2Ban Writer: brute-force protection for the FTP login.

jail.local is overwritten with a single [vsftpd] jail:
3 failed logins in vsftpd.log -> 1 hour ban.
"""

from pathlib import Path

from ..errors import ArtifactError
from .service_manager import ServiceManager

MAX_RETRY = 3
BAN_TIME_SECONDS = 3600


def render_jail(logpath: Path) -> str:
    return (
        "[vsftpd]\n"
        "enabled = true\n"
        "port = ftp\n"
        "filter = vsftpd\n"
        f"logpath = {logpath}\n"
        f"maxretry = {MAX_RETRY}\n"
        f"bantime = {BAN_TIME_SECONDS}\n"
    )


class Fail2BanWriter:
    """Writes jail.local and restarts the fail2ban service."""

    SERVICE_NAME = "fail2ban"

    def __init__(self, jail_path: Path, vsftpd_log: Path, services: ServiceManager):
        self.jail_path = Path(jail_path)
        self.vsftpd_log = Path(vsftpd_log)
        self.services = services

    def write_jail(self) -> Path:
        try:
            self.jail_path.parent.mkdir(parents=True, exist_ok=True)
            self.jail_path.write_text(render_jail(self.vsftpd_log))
        except OSError as e:
            raise ArtifactError(f"Failed to write Fail2Ban jail {self.jail_path}: {e}")
        return self.jail_path

    def configure(self) -> Path:
        """Write the jail and restart fail2ban so it takes effect."""
        path = self.write_jail()
        self.services.restart(self.SERVICE_NAME)
        return path
