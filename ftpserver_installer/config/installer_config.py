# Path and File Name : /home/ftpserver/installer/ftpserver_installer/config/installer_config.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Installer configuration - fixed defaults with optional YAML override validated by JSON schema

"""
Installer Configuration: every path and constant the installer uses.

Defaults reproduce the fixed layout of a standard Ubuntu host. An optional
YAML file may override individual keys:
- FTP_INSTALLER_CONFIG environment variable, or
- /etc/ftp-server/installer.yaml if present.

Unknown keys or wrong types are rejected (fail-closed).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from ..errors import ConfigurationError

CONFIG_ENV_VAR = "FTP_INSTALLER_CONFIG"
DEFAULT_CONFIG_FILE = Path("/etc/ftp-server/installer.yaml")

PATH_KEYS = (
    'log_file',
    'config_dir',
    'backup_dir',
    'vsftpd_conf',
    'vsftpd_log',
    'pam_password_file',
    'fail2ban_jail',
    'os_release_file',
    'home_root',
    'root_mount',
)

_STRING_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        **{key: {"type": "string", "minLength": 1} for key in PATH_KEYS},
        "min_free_mb": {"type": "integer", "minimum": 0},
        "supported_os_id": {"type": "string", "minLength": 1},
        "supported_versions": {**_STRING_LIST, "minItems": 1},
        "base_packages": _STRING_LIST,
        "server_packages": _STRING_LIST,
        "firewall_package": {"type": "string", "minLength": 1},
        "firewall_ports": {
            "type": "array",
            "items": {"type": "string", "pattern": r"^\d+(:\d+)?/(tcp|udp)$"},
        },
        "user_shell": {"type": "string", "pattern": "^/"},
        "home_mode": {"type": "integer", "minimum": 0, "maximum": 0o7777},
        "certificate_days": {"type": "integer", "minimum": 1},
        "certificate_subject": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "country": {"type": "string", "minLength": 2, "maxLength": 2},
                "state": {"type": "string", "minLength": 1},
                "locality": {"type": "string", "minLength": 1},
                "organization": {"type": "string", "minLength": 1},
                "common_name": {"type": "string", "minLength": 1},
            },
        },
    },
}


def _default_subject() -> Dict[str, str]:
    return {
        'country': 'US',
        'state': 'ServerSecure',
        'locality': 'SecureCity',
        'organization': 'FTPOrg',
        'common_name': 'localhost',
    }


@dataclass
class InstallerConfig:
    """Resolved installer configuration."""

    log_file: Path = Path("/var/log/ftp_install.log")
    config_dir: Path = Path("/etc/ftp-server")
    backup_dir: Path = Path("/var/backups/ftp-server")
    vsftpd_conf: Path = Path("/etc/vsftpd.conf")
    vsftpd_log: Path = Path("/var/log/vsftpd.log")
    pam_password_file: Path = Path("/etc/pam.d/common-password")
    fail2ban_jail: Path = Path("/etc/fail2ban/jail.local")
    os_release_file: Path = Path("/etc/os-release")
    home_root: Path = Path("/home")
    root_mount: Path = Path("/")

    min_free_mb: int = 500
    supported_os_id: str = "ubuntu"
    supported_versions: List[str] = field(default_factory=lambda: ["22.04", "24.04"])

    base_packages: List[str] = field(
        default_factory=lambda: ["software-properties-common", "curl", "wget", "net-tools"]
    )
    server_packages: List[str] = field(
        default_factory=lambda: ["vsftpd", "fail2ban", "libpam-pwquality"]
    )
    firewall_package: str = "ufw"
    firewall_ports: List[str] = field(
        default_factory=lambda: ["20/tcp", "21/tcp", "990/tcp", "40000:50000/tcp"]
    )

    user_shell: str = "/bin/false"
    home_mode: int = 0o555

    certificate_days: int = 365
    certificate_subject: Dict[str, str] = field(default_factory=_default_subject)

    @property
    def certificate_path(self) -> Path:
        return self.config_dir / "vsftpd.crt"

    @property
    def private_key_path(self) -> Path:
        return self.config_dir / "vsftpd.key"

    @property
    def allowed_users_file(self) -> Path:
        return self.config_dir / "allowed_users"

    @classmethod
    def from_dict(cls, overrides: Dict[str, Any]) -> "InstallerConfig":
        """
        Build a configuration from defaults plus validated overrides.

        Raises:
            ConfigurationError: If overrides violate the schema
        """
        try:
            jsonschema.validate(overrides, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            location = ".".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigurationError(f"Invalid installer configuration at {location}: {e.message}")

        values = dict(overrides)
        for key in PATH_KEYS:
            if key in values:
                values[key] = Path(values[key])
        if 'certificate_subject' in values:
            subject = _default_subject()
            subject.update(values['certificate_subject'])
            values['certificate_subject'] = subject

        return cls(**values)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "InstallerConfig":
        """
        Load configuration.

        Resolution order: explicit path, FTP_INSTALLER_CONFIG, default file
        (only if it exists), built-in defaults.

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
            if env_path:
                path = Path(env_path)
            elif DEFAULT_CONFIG_FILE.exists():
                path = DEFAULT_CONFIG_FILE
            else:
                return cls()

        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Installer configuration not found: {path}")

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Installer configuration is not valid YAML ({path}): {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to read installer configuration {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Installer configuration must be a mapping: {path}")

        return cls.from_dict(data)

