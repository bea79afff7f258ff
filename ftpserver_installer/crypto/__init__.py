# Path and File Name : /home/ftpserver/installer/ftpserver_installer/crypto/__init__.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: TLS material package initialization

from .certificate_generator import CertificateGenerator

__all__ = ['CertificateGenerator']
