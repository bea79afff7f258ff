# Path and File Name : /home/ftpserver/installer/ftpserver_installer/accounts/credential_source.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Credential sources for the FTP account (interactive TTY or static) and input validation

"""
Credential Sources: where the FTP username and password come from.

- InteractiveCredentialSource: prompts on the controlling terminal
  (username echoed, password via getpass, confirmation required)
- StaticCredentialSource: fixed values, for automation and tests

Both validate input before it reaches useradd/chpasswd.
"""

import getpass
import re
import sys
from dataclasses import dataclass, field
from typing import Callable, List

from ..errors import InputValidationError
from ..security.pam_policy import MIN_PASSWORD_LENGTH

USERNAME_PATTERN = re.compile(r"^[a-z_][a-z0-9_-]{0,31}$")
MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class Credentials:
    """Username/password pair for the FTP account."""
    username: str
    password: str = field(repr=False)


def validate_username(username: str) -> List[str]:
    """Returns a list of problems (empty if valid)."""
    if not username:
        return ["Username must not be empty"]
    if not USERNAME_PATTERN.match(username):
        return [
            "Username must start with a lowercase letter or underscore and contain "
            "only lowercase letters, digits, '_' or '-' (max 32 characters)"
        ]
    return []


def validate_password(password: str, username: str = "") -> List[str]:
    """
    Check a password against the pam_pwquality rule the installer applies.

    Returns:
        List of problems (empty if valid)
    """
    problems = []
    if len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not any(c.isupper() for c in password):
        problems.append("Password must contain an uppercase letter")
    if not any(c.islower() for c in password):
        problems.append("Password must contain a lowercase letter")
    if not any(c.isdigit() for c in password):
        problems.append("Password must contain a digit")
    if all(c.isalnum() for c in password):
        problems.append("Password must contain a symbol")
    if ":" in password or "\n" in password:
        problems.append("Password must not contain ':' or newlines")
    if username and username in password.lower():
        problems.append("Password must not contain the username")
    return problems


def validate_credentials(credentials: Credentials) -> Credentials:
    """
    Raises:
        InputValidationError: Listing every problem found
    """
    problems = validate_username(credentials.username)
    problems += validate_password(credentials.password, credentials.username)
    if problems:
        raise InputValidationError("; ".join(problems))
    return credentials


class CredentialSource:
    """Supplies credentials for the FTP account."""

    def get_credentials(self) -> Credentials:
        raise NotImplementedError


class StaticCredentialSource(CredentialSource):
    """Fixed credentials."""

    def __init__(self, username: str, password: str):
        self._credentials = Credentials(username=username, password=password)

    def get_credentials(self) -> Credentials:
        return validate_credentials(self._credentials)


class InteractiveCredentialSource(CredentialSource):
    """Prompts the operator on the terminal."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 password_func: Callable[[str], str] = getpass.getpass,
                 stdin=None, max_attempts: int = MAX_ATTEMPTS):
        self.input_func = input_func
        self.password_func = password_func
        self.stdin = stdin if stdin is not None else sys.stdin
        self.max_attempts = max_attempts

    def get_credentials(self) -> Credentials:
        """
        Prompt until valid credentials are entered.

        Raises:
            InputValidationError: If not interactive, input is closed or attempts
                are exhausted
        """
        if not self.stdin.isatty():
            raise InputValidationError(
                "FTP account creation requires an interactive TTY. "
                "Re-run the installer from a terminal."
            )

        last_error = ""
        for _ in range(self.max_attempts):
            username = self._ask(self.input_func, "Enter FTP username: ").strip()
            problems = validate_username(username)
            if problems:
                last_error = "; ".join(problems)
                print(f"✗ {last_error}")
                continue

            password = self._ask(self.password_func, "Enter FTP user password: ")
            confirm = self._ask(self.password_func, "Confirm FTP user password: ")
            if password != confirm:
                last_error = "Passwords do not match"
                print(f"✗ {last_error}")
                continue

            problems = validate_password(password, username)
            if problems:
                last_error = "; ".join(problems)
                print(f"✗ {last_error}")
                continue

            return Credentials(username=username, password=password)

        raise InputValidationError(
            f"No valid FTP credentials after {self.max_attempts} attempts: {last_error}"
        )

    @staticmethod
    def _ask(prompt_func: Callable[[str], str], prompt: str) -> str:
        try:
            return prompt_func(prompt)
        except EOFError:
            raise InputValidationError("Input closed before credentials were entered")
