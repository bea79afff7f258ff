# Path and File Name : /home/ftpserver/installer/ftpserver_installer/system/package_manager.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: apt-get wrapper for index refresh, non-interactive upgrade and package installation

from typing import Iterable

from .mutator import SystemMutator

NONINTERACTIVE_ENV = {"DEBIAN_FRONTEND": "noninteractive"}


class PackageManager:
    """apt-get operations routed through the system mutator."""

    def __init__(self, mutator: SystemMutator):
        self.mutator = mutator

    def update_index(self) -> None:
        self.mutator.run(["apt-get", "update", "-q"])

    def upgrade(self) -> None:
        self.mutator.run(["apt-get", "upgrade", "-y", "-q"], env=NONINTERACTIVE_ENV)

    def install(self, packages: Iterable[str]) -> None:
        packages = list(packages)
        if not packages:
            return
        self.mutator.run(["apt-get", "install", "-y", *packages], env=NONINTERACTIVE_ENV)

    def is_installed(self, package: str) -> bool:
        """True if dpkg reports the package as installed."""
        result = self.mutator.probe(["dpkg-query", "-W", "-f=${Status}", package])
        if result is None or result.returncode != 0:
            return False
        # removed-but-not-purged packages still exit 0
        return "install ok installed" in (result.stdout or "")
