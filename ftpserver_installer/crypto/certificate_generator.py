# Path and File Name : /home/ftpserver/installer/ftpserver_installer/crypto/certificate_generator.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Generates the self-signed RSA key and X.509 certificate used by vsftpd for FTPS

"""
Certificate Generator: self-signed TLS material for vsftpd.

Properties:
- Key: RSA 2048, unencrypted PEM (protected by filesystem perms)
- Certificate: X.509 v3, SHA-256, self-signed
- Validity: fixed window (365 days by default) starting at generation time
- No renewal, no expiry monitoring

Files:
- Private key: <config_dir>/vsftpd.key (600)
- Certificate: <config_dir>/vsftpd.crt (644)
"""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, Optional, Tuple

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from ..errors import ArtifactError

KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537


class CertificateGenerator:
    """Generates a self-signed key/certificate pair."""

    def __init__(self, key_path: Path, cert_path: Path, subject: Dict[str, str],
                 validity_days: int = 365):
        self.key_path = Path(key_path)
        self.cert_path = Path(cert_path)
        self.subject = subject
        self.validity_days = validity_days

    def _build_name(self) -> x509.Name:
        return x509.Name([
            x509.NameAttribute(NameOID.COUNTRY_NAME, self.subject['country']),
            x509.NameAttribute(NameOID.STATE_OR_PROVINCE_NAME, self.subject['state']),
            x509.NameAttribute(NameOID.LOCALITY_NAME, self.subject['locality']),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, self.subject['organization']),
            x509.NameAttribute(NameOID.COMMON_NAME, self.subject['common_name']),
        ])

    def build(self, now: Optional[datetime] = None) -> Tuple[rsa.RSAPrivateKey, x509.Certificate]:
        """
        Generate the key and certificate in memory.

        Args:
            now: Start of the validity window (defaults to current UTC time)

        Returns:
            Tuple of (private_key, certificate)
        """
        if now is None:
            now = datetime.now(timezone.utc)

        private_key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=KEY_SIZE)
        name = self._build_name()

        certificate = (
            x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(private_key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now)
            .not_valid_after(now + timedelta(days=self.validity_days))
            .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
            .add_extension(
                x509.SubjectAlternativeName([x509.DNSName(self.subject['common_name'])]),
                critical=False,
            )
            .sign(private_key, hashes.SHA256())
        )

        return private_key, certificate

    def generate(self, now: Optional[datetime] = None) -> x509.Certificate:
        """
        Generate and write the key/certificate pair.

        An existing pair is overwritten.

        Returns:
            The written certificate

        Raises:
            ArtifactError: If either file cannot be written
        """
        private_key, certificate = self.build(now)

        key_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
        cert_pem = certificate.public_bytes(serialization.Encoding.PEM)

        try:
            self.key_path.parent.mkdir(parents=True, exist_ok=True)

            self.key_path.write_bytes(key_pem)
            os.chmod(self.key_path, 0o600)

            self.cert_path.write_bytes(cert_pem)
            os.chmod(self.cert_path, 0o644)
        except OSError as e:
            raise ArtifactError(f"Failed to write TLS key/certificate: {e}")

        return certificate
