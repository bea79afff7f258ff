# Path and File Name : /home/ftpserver/installer/ftpserver_installer/services/service_manager.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: systemctl restart/enable wrapper

from ..system.mutator import SystemMutator


class ServiceManager:
    """systemd service control via systemctl."""

    def __init__(self, mutator: SystemMutator):
        self.mutator = mutator

    def restart(self, service: str) -> None:
        self.mutator.run(["systemctl", "restart", service])

    def enable(self, service: str) -> None:
        self.mutator.run(["systemctl", "enable", service])
