# Path and File Name : /home/ftpserver/installer/ftpserver_installer/services/vsftpd_writer.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Backs up and rewrites vsftpd.conf from the hardened template and prepares the user allow-list

"""
vsftpd Writer: full replacement of the server configuration.

- Existing vsftpd.conf is copied to <backup_dir>/vsftpd.conf.<YYYYmmdd_HHMMSS>
  (numeric suffix added if that name is taken, so every run gets its own copy)
- The new file is rendered from a fixed template; only file paths vary
- No merge or diff with the previous content
"""

import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..errors import ArtifactError

VSFTPD_TEMPLATE = """# Advanced vsftpd Configuration

# Basic Settings
listen=YES
listen_ipv6=NO

# User Access Control
anonymous_enable=NO
local_enable=YES
write_enable=YES

# Security Enhancements
local_umask=077
disable_challtxt=YES
one_process_model=YES

# Chroot Isolation
chroot_local_user=YES
allow_writeable_chroot=NO
secure_chroot_dir=/var/run/vsftpd/empty

# SSL/TLS Configuration
ssl_enable=YES
ssl_tlsv1_2=YES
ssl_tlsv1_3=YES
ssl_ciphers=HIGH:!aNULL:!MD5
rsa_cert_file={cert_file}
rsa_private_key_file={key_file}

# Connection Limits
max_clients=50
max_per_ip=3

# Logging
xferlog_enable=YES
xferlog_file={xferlog_file}
log_ftp_protocol=YES

# Performance
idle_session_timeout=300
data_connection_timeout=120

# PAM Authentication
pam_service_name=vsftpd

# User Access Control
userlist_enable=YES
userlist_file={userlist_file}
userlist_deny=NO
"""

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def render_vsftpd_conf(cert_file: Path, key_file: Path, userlist_file: Path,
                       xferlog_file: Path) -> str:
    """Render the vsftpd template with the installation paths."""
    return VSFTPD_TEMPLATE.format(
        cert_file=cert_file,
        key_file=key_file,
        userlist_file=userlist_file,
        xferlog_file=xferlog_file,
    )


class VsftpdConfigWriter:
    """Writes vsftpd.conf and the allow-list file."""

    def __init__(self, conf_path: Path, backup_dir: Path, cert_file: Path,
                 key_file: Path, userlist_file: Path, xferlog_file: Path):
        self.conf_path = Path(conf_path)
        self.backup_dir = Path(backup_dir)
        self.cert_file = Path(cert_file)
        self.key_file = Path(key_file)
        self.userlist_file = Path(userlist_file)
        self.xferlog_file = Path(xferlog_file)

    def _backup_path(self, now: datetime) -> Path:
        base = self.backup_dir / f"{self.conf_path.name}.{now.strftime(BACKUP_TIMESTAMP_FORMAT)}"
        candidate = base
        counter = 1
        while candidate.exists():
            candidate = base.with_name(f"{base.name}.{counter}")
            counter += 1
        return candidate

    def backup(self, now: Optional[datetime] = None) -> Optional[Path]:
        """
        Copy the current configuration to the backup directory.

        Returns:
            Backup path, or None if there was no configuration to back up

        Raises:
            ArtifactError: If the copy fails
        """
        if not self.conf_path.exists():
            return None

        if now is None:
            now = datetime.now()

        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            backup_path = self._backup_path(now)
            shutil.copy2(self.conf_path, backup_path)
        except OSError as e:
            raise ArtifactError(f"Failed to back up {self.conf_path}: {e}")

        return backup_path

    def write(self) -> Path:
        """
        Write the rendered configuration (full replacement).

        Raises:
            ArtifactError: If the file cannot be written
        """
        content = render_vsftpd_conf(
            cert_file=self.cert_file,
            key_file=self.key_file,
            userlist_file=self.userlist_file,
            xferlog_file=self.xferlog_file,
        )
        try:
            self.conf_path.parent.mkdir(parents=True, exist_ok=True)
            self.conf_path.write_text(content)
            self.conf_path.chmod(0o644)
        except OSError as e:
            raise ArtifactError(f"Failed to write {self.conf_path}: {e}")
        return self.conf_path

    def ensure_userlist(self) -> Path:
        """Create the allow-list file if missing (existing entries kept)."""
        try:
            self.userlist_file.parent.mkdir(parents=True, exist_ok=True)
            self.userlist_file.touch(exist_ok=True)
        except OSError as e:
            raise ArtifactError(f"Failed to create allow-list {self.userlist_file}: {e}")
        return self.userlist_file
