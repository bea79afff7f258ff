# Path and File Name : /home/ftpserver/installer/ftpserver_installer/security/pam_policy.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Rewrites the system-wide pam_pwquality password policy line

"""
PAM Password Policy: enforces a strong password-quality rule.

Every "password requisite <module>" line in common-password, except
pam_deny.so, is replaced with the pam_pwquality rule below. This changes
the policy for ALL local accounts, not only FTP users.
"""

import re
from pathlib import Path
from typing import Tuple

from ..errors import ArtifactError

# pam_deny.so terminates the stack and is left in place
REQUISITE_LINE = re.compile(r"^password[ \t]+requisite[ \t]+(?![ \t]|pam_deny\.so\b).*$", re.MULTILINE)

PWQUALITY_RULE = (
    "password    requisite     pam_pwquality.so retry=3 minlen=12 difok=3 "
    "ucredit=-1 lcredit=-1 dcredit=-1 ocredit=-1"
)

# Mirrors PWQUALITY_RULE for validating FTP passwords before chpasswd
MIN_PASSWORD_LENGTH = 12


class PamPolicyWriter:
    """Applies the pwquality rule to the PAM password stack."""

    def __init__(self, common_password: Path):
        self.common_password = Path(common_password)

    def apply(self) -> Tuple[int, Path]:
        """
        Rewrite matching policy lines in place.

        Returns:
            Tuple of (lines_replaced, path)

        Raises:
            ArtifactError: If the PAM file cannot be read or written
        """
        try:
            content = self.common_password.read_text()
        except OSError as e:
            raise ArtifactError(f"Failed to read PAM policy {self.common_password}: {e}")

        updated, count = REQUISITE_LINE.subn(PWQUALITY_RULE, content)
        if count == 0:
            return 0, self.common_password

        try:
            self.common_password.write_text(updated)
        except OSError as e:
            raise ArtifactError(f"Failed to write PAM policy {self.common_password}: {e}")

        return count, self.common_password
