"""Session — who is using the storefront and in which role.

The role decides which ledger operations are reachable: customers shop,
cancel and hide their own orders; the admin advances, archives and
purges them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from qualipure.domain.exceptions import AccessDeniedError


class Role(Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Session:
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def require(self, role: Role) -> None:
        if self.role != role:
            raise AccessDeniedError(
                f"Only a {role.value.lower()} session can do that "
                f"(logged in as {self.role.value.lower()})"
            )
