# Path and File Name : /home/ftpserver/installer/ftpserver_installer/services/firewall.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: UFW firewall setup - installs ufw if absent, opens FTP ports and force-enables the firewall

from typing import Iterable, List

from ..logger import get_logger
from ..system.mutator import SystemMutator
from ..system.package_manager import PackageManager

logger = get_logger("firewall")


class FirewallConfigurator:
    """Opens FTP control, data, FTPS and passive ports in UFW."""

    def __init__(self, mutator: SystemMutator, packages: PackageManager,
                 ports: Iterable[str], package_name: str = "ufw"):
        self.mutator = mutator
        self.packages = packages
        self.ports: List[str] = list(ports)
        self.package_name = package_name

    def ensure_installed(self) -> bool:
        """
        Install UFW if dpkg does not report it.

        Returns:
            True if the package was installed by this call
        """
        if self.packages.is_installed(self.package_name):
            return False
        self.packages.install([self.package_name])
        return True

    def allow_ports(self) -> None:
        for port in self.ports:
            self.mutator.run(["ufw", "allow", port])
            logger.info(f"Firewall rule added: allow {port}")

    def enable(self) -> None:
        # --force answers the "may disrupt existing ssh connections" prompt
        self.mutator.run(["ufw", "--force", "enable"])

    def configure(self) -> None:
        if self.ensure_installed():
            logger.info(f"Installed {self.package_name}")
        self.allow_ports()
        self.enable()
