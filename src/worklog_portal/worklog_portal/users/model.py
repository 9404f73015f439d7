from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from ..core.enums import Role

# Fields that never leave the server.
SECRET_FIELDS = ("password", "passwordHash")

_KNOWN_FIELDS = (
    "id",
    "name",
    "email",
    "password",
    "passwordHash",
    "role",
    "country",
    "manager",
    "managerEmail",
    "manager_email",
    "designation",
)


def _role_of(value: Any) -> Role:
    try:
        return Role(value)
    except ValueError:
        return Role.USER


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    The record schema is open: fields the portal does not know about are kept in
    ``extra`` and written back unchanged.
    """

    id: str
    name: str
    email: str
    password_hash: str
    role: Role = Role.USER
    country: str = ""
    manager: str = ""
    manager_email: str = ""
    designation: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "User":
        # Older files keep the hash under "password" and use snake_case manager_email.
        return cls(
            id=str(record.get("id") or ""),
            name=record.get("name") or "",
            email=record.get("email") or "",
            password_hash=record.get("passwordHash") or record.get("password") or "",
            role=_role_of(record.get("role", Role.USER.value)),
            country=record.get("country") or "",
            manager=record.get("manager") or "",
            manager_email=record.get("managerEmail") or record.get("manager_email") or "",
            designation=record.get("designation") or "",
            extra={k: v for k, v in record.items() if k not in _KNOWN_FIELDS},
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "passwordHash": self.password_hash,
            "role": self.role.value,
            "country": self.country,
            "manager": self.manager,
            "managerEmail": self.manager_email,
            "designation": self.designation,
        }
        record.update(self.extra)
        return record

    def to_public(self) -> Dict[str, Any]:
        return sanitize(self.to_record())

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def sanitize(record: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if k not in SECRET_FIELDS}
