# Path and File Name : /home/ftpserver/installer/ftpserver_installer/security/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Security policy package initialization

from .pam_policy import PamPolicyWriter, PWQUALITY_RULE, MIN_PASSWORD_LENGTH

__all__ = ['PamPolicyWriter', 'PWQUALITY_RULE', 'MIN_PASSWORD_LENGTH']
