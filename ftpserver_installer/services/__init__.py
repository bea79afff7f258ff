# Path and File Name : /home/ftpserver/installer/ftpserver_installer/services/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Service configuration package initialization

"""
Services Package: vsftpd, Fail2Ban, UFW and systemd service control.
"""

from .service_manager import ServiceManager
from .vsftpd_writer import VsftpdConfigWriter, render_vsftpd_conf
from .fail2ban_writer import Fail2BanWriter
from .firewall import FirewallConfigurator

__all__ = [
    'ServiceManager',
    'VsftpdConfigWriter',
    'render_vsftpd_conf',
    'Fail2BanWriter',
    'FirewallConfigurator',
]
