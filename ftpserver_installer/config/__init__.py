# Path and File Name : /home/ftpserver/installer/ftpserver_installer/config/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Installer configuration package initialization

"""
Installer Configuration Package: defaults and YAML overrides.
"""

from .installer_config import InstallerConfig, CONFIG_SCHEMA, CONFIG_ENV_VAR

__all__ = ['InstallerConfig', 'CONFIG_SCHEMA', 'CONFIG_ENV_VAR']
