"""Application service: Log In use case.

The storefront has exactly two accounts, one per role, so credentials
are a static mapping rather than a user store.
"""

from __future__ import annotations

from dataclasses import dataclass

from qualipure.domain.exceptions import ValidationError
from qualipure.domain.model.session import Role, Session


@dataclass(frozen=True)
class Credential:
    username: str
    password: str
    role: Role


class AuthenticateHandler:

    def __init__(self, credentials: list[Credential]) -> None:
        self._credentials = list(credentials)

    def handle(self, username: str, password: str) -> Session:
        if not username or not username.strip():
            raise ValidationError("Please enter your username")
        if not password:
            raise ValidationError("Please enter your password")

        for credential in self._credentials:
            if credential.username == username and credential.password == password:
                return Session(username=credential.username, role=credential.role)

        raise ValidationError("Invalid username or password")
