# Path and File Name : /home/ftpserver/installer/ftpserver_installer/installer.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Main installer orchestrator - validates prerequisites, installs and hardens vsftpd, creates the FTP user, activates the service

"""
FTP Server Installer: main orchestrator.

Nine phases, executed once and in order:
 1. Prerequisite verification (root, supported Ubuntu, free disk space)
 2. System preparation (directories, apt update/upgrade, base utilities)
 3. Server package installation (vsftpd, fail2ban, pwquality + PAM policy)
 4. TLS certificate generation (self-signed, 365 days)
 5. vsftpd configuration (backup + full rewrite)
 6. Fail2Ban jail
 7. UFW firewall rules
 8. FTP account creation (interactive)
 9. Service activation

Any failure stops the run; later phases never execute and the process
exits non-zero. Nothing is rolled back.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .accounts.credential_source import CredentialSource, InteractiveCredentialSource
from .accounts.user_creator import FtpAccount, FtpUserCreator
from .config.installer_config import InstallerConfig
from .crypto.certificate_generator import CertificateGenerator
from .errors import ArtifactError, ConfigurationError, PreconditionError
from .logger import SUCCESS, setup_logging
from .pipeline import Phase, PipelineReport, PipelineRunner
from .security.pam_policy import PamPolicyWriter
from .services.fail2ban_writer import Fail2BanWriter
from .services.firewall import FirewallConfigurator
from .services.service_manager import ServiceManager
from .services.vsftpd_writer import VsftpdConfigWriter
from .system.disk_check import DiskCheck
from .system.mutator import SystemMutator
from .system.os_check import OSCheck
from .system.package_manager import PackageManager
from .system.privilege_check import PrivilegeCheck


class FTPServerInstaller:
    """Main installer orchestrator."""

    VERSION = "1.0.0"
    SERVICE_NAME = "vsftpd"

    def __init__(self, config: Optional[InstallerConfig] = None,
                 mutator: Optional[SystemMutator] = None,
                 credential_source: Optional[CredentialSource] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config if config is not None else InstallerConfig.load()
        self.logger = logger if logger is not None else setup_logging(self.config.log_file)
        self.mutator = mutator if mutator is not None else SystemMutator()
        self.credential_source = credential_source if credential_source is not None else InteractiveCredentialSource()

        cfg = self.config

        # Prerequisite checks
        self.privilege_check = PrivilegeCheck()
        self.os_check = OSCheck(cfg.os_release_file, cfg.supported_os_id, cfg.supported_versions)
        self.disk_check = DiskCheck(cfg.root_mount, cfg.min_free_mb)

        # System mutation
        self.packages = PackageManager(self.mutator)
        self.services = ServiceManager(self.mutator)
        self.pam_policy = PamPolicyWriter(cfg.pam_password_file)
        self.certificate_generator = CertificateGenerator(
            key_path=cfg.private_key_path,
            cert_path=cfg.certificate_path,
            subject=cfg.certificate_subject,
            validity_days=cfg.certificate_days,
        )
        self.vsftpd_writer = VsftpdConfigWriter(
            conf_path=cfg.vsftpd_conf,
            backup_dir=cfg.backup_dir,
            cert_file=cfg.certificate_path,
            key_file=cfg.private_key_path,
            userlist_file=cfg.allowed_users_file,
            xferlog_file=cfg.vsftpd_log,
        )
        self.fail2ban_writer = Fail2BanWriter(cfg.fail2ban_jail, cfg.vsftpd_log, self.services)
        self.firewall = FirewallConfigurator(
            self.mutator, self.packages, cfg.firewall_ports, cfg.firewall_package
        )
        self.user_creator = FtpUserCreator(
            self.mutator,
            allowed_users_file=cfg.allowed_users_file,
            home_root=cfg.home_root,
            shell=cfg.user_shell,
            home_mode=cfg.home_mode,
        )

        self.backup_path: Optional[Path] = None
        self.account: Optional[FtpAccount] = None

    def _success(self, message: str) -> None:
        self.logger.log(SUCCESS, message)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _verify_prerequisites(self) -> None:
        """
        Check root privileges, OS identity and free disk space, in that order.

        Runs before anything touches the filesystem (other than the log).

        Raises:
            PreconditionError: On the first failed check
        """
        is_root, message = self.privilege_check.is_root()
        if not is_root:
            raise PreconditionError(message)

        is_supported, os_message = self.os_check.is_supported()
        if not is_supported:
            raise PreconditionError(os_message)
        self.logger.info(os_message)

        is_available, disk_message, _ = self.disk_check.check_availability()
        if not is_available:
            raise PreconditionError(disk_message)
        self.logger.info(disk_message)

        self._success("All prerequisite checks passed")

    def _prepare_system(self) -> None:
        for directory in (self.config.config_dir, self.config.backup_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ArtifactError(f"Failed to create directory {directory}: {e}")

        self.packages.update_index()
        self.packages.upgrade()
        self.packages.install(self.config.base_packages)

        self._success("System preparation completed")

    def _install_server_packages(self) -> None:
        self.packages.install(self.config.server_packages)

        replaced, pam_file = self.pam_policy.apply()
        if replaced:
            self.logger.info(f"Password quality policy applied to {pam_file} ({replaced} line(s))")
        else:
            self.logger.warning(f"No 'password requisite' line found in {pam_file}; password policy unchanged")

        self._success("FTP server and security packages installed")

    def _generate_certificate(self) -> None:
        certificate = self.certificate_generator.generate()
        self.logger.info(
            f"Certificate {self.config.certificate_path} valid until "
            f"{certificate.not_valid_after_utc:%Y-%m-%d %H:%M:%S} UTC"
        )
        self._success("SSL/TLS certificate generated")

    def _configure_vsftpd(self) -> None:
        self.backup_path = self.vsftpd_writer.backup()
        if self.backup_path:
            self.logger.info(f"Existing configuration backed up to {self.backup_path}")
        else:
            self.logger.warning(f"No existing {self.config.vsftpd_conf} to back up")

        self.vsftpd_writer.write()
        self.vsftpd_writer.ensure_userlist()

        self._success("vsftpd configured with advanced security settings")

    def _configure_fail2ban(self) -> None:
        self.fail2ban_writer.configure()
        self._success("Fail2Ban configured to protect FTP server")

    def _configure_firewall(self) -> None:
        self.firewall.configure()
        self._success("Firewall configured for FTP server")

    def _create_ftp_user(self) -> None:
        credentials = self.credential_source.get_credentials()
        self.account = self.user_creator.create(credentials)

        if not self.config.home_mode & 0o222:
            self.logger.warning(
                f"Home directory {self.account.home_directory} is read-only "
                f"({oct(self.config.home_mode)}); uploads to it will fail despite write_enable=YES"
            )

        self._success(f"FTP user {self.account.username} created with restricted shell")

    def _restart_services(self) -> None:
        self.services.restart(self.SERVICE_NAME)
        self.services.enable(self.SERVICE_NAME)
        self._success("FTP server services restarted")

    # ------------------------------------------------------------------

    def build_phases(self) -> List[Phase]:
        return [
            Phase("Prerequisite verification", "Performing system prerequisite checks", self._verify_prerequisites),
            Phase("System preparation", "Preparing system for FTP server installation", self._prepare_system),
            Phase("Server package installation", "Installing advanced FTP server (vsftpd)", self._install_server_packages),
            Phase("Certificate generation", "Generating SSL/TLS certificate for secure FTP", self._generate_certificate),
            Phase("Server configuration", "Configuring vsftpd with enhanced security", self._configure_vsftpd),
            Phase("Intrusion-prevention configuration", "Configuring Fail2Ban for FTP protection", self._configure_fail2ban),
            Phase("Firewall configuration", "Configuring firewall rules", self._configure_firewall),
            Phase("Account creation", "Creating FTP user", self._create_ftp_user),
            Phase("Service activation", "Restarting services", self._restart_services),
        ]

    def run(self) -> PipelineReport:
        """
        SINGLE INSTALLER ENTRYPOINT.

        Returns:
            Report with one result per executed phase; report.succeeded is
            False if any phase failed (remaining phases were not executed)
        """
        print("Advanced Ubuntu FTP Server Installer")
        print("=" * 36)
        print(f"Version: {self.VERSION}\n")

        report = PipelineRunner(self.build_phases(), self.logger).run()

        if report.succeeded:
            self._success("Advanced FTP Server Installation Complete!")
            print("FTP Server is now secure and ready to use.")
        else:
            failed = report.failed_phase
            self.logger.error(f"Installation failed during: {failed.phase}")
        print(f"Log file: {self.config.log_file}")

        return report

    def install(self) -> bool:
        """Run and reduce the report to a boolean."""
        return self.run().succeeded


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point for the installer.

    Returns:
        Process exit code (0 on success, 1 on any failure)
    """
    parser = argparse.ArgumentParser(
        prog="ftp-server-installer",
        description=(
            "Install and harden vsftpd on Ubuntu 22.04/24.04 (TLS, PAM password policy, "
            "Fail2Ban, UFW) and create one FTP user. Must be run as root. "
            "Optional settings are read from the YAML file named by FTP_INSTALLER_CONFIG."
        ),
    )
    parser.parse_args(argv)

    try:
        config = InstallerConfig.load()
    except ConfigurationError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    installer = FTPServerInstaller(config=config)

    try:
        report = installer.run()
    except KeyboardInterrupt:
        installer.logger.error("Installation cancelled by user.")
        return 1
    except Exception as e:
        installer.logger.exception(f"Fatal error during installation: {e}")
        return 1

    return 0 if report.succeeded else 1


if __name__ == '__main__':
    sys.exit(main())
