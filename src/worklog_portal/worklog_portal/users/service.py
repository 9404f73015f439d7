from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.passwords import hash_password, is_password_hash, verify_password
from ..common.validators import require_fields, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, StorageError, ValidationError
from .model import User, sanitize
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserKey(str, Enum):
    """Which field a user route addresses. EMAIL is canonical; ID and NAME are compatibility lookups."""

    ID = "id"
    EMAIL = "email"
    NAME = "name"


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, email: str, password: str) -> User:
        # NotFoundError propagates when there is no user store at all.
        user = self._users.get_by_email(email or "")
        if not user or not verify_password(password or "", user.password_hash):
            logger.info("failed login for %r", email)
            raise AuthenticationError("Invalid credentials")

        logger.info("login ok for %r", email)
        return user


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def _get(self, key: UserKey, value: str) -> Optional[User]:
        if key == UserKey.ID:
            return self._users.get_by_id(value)
        if key == UserKey.NAME:
            return self._users.get_by_name(value)
        return self._users.get_by_email(value)

    def list_users(self) -> List[dict]:
        return [u.to_public() for u in self._users.list_all(initialize=True)]

    def list_directory(self) -> List[dict]:
        try:
            users = self._users.list_all()
        except NotFoundError as e:
            raise StorageError("Failed to read users data") from e
        return [u.to_public() for u in users]

    def create_user(self, fields: Mapping[str, Any]) -> User:
        require_fields(fields, ("name", "email", "password"))
        email = require_non_empty(fields.get("email"), "email")
        try:
            role = Role(fields.get("role") or Role.USER.value)
        except ValueError:
            raise ValidationError("Invalid role")

        # The collection is created with its default users before the duplicate check.
        existing = {u.email for u in self._users.list_all(initialize=True)}
        if email in existing:
            raise ValidationError("A user with this email already exists")

        record = {k: v for k, v in fields.items() if k not in ("id", "password", "passwordHash")}
        record.update(
            id=str(uuid.uuid4()),
            email=email,
            role=role.value,
            passwordHash=hash_password(fields["password"]),
        )
        user = User.from_record(record)
        self._users.add(user)
        logger.info("created user %s (%s)", user.id, user.email)
        return user

    def get_user(self, key: UserKey, value: str) -> User:
        user = self._get(key, value)
        if not user:
            logger.info("user not found for %s=%r", key.value, value)
            raise NotFoundError("User not found")
        return user

    def update_user(self, key: UserKey, value: str, partial: Mapping[str, Any]) -> User:
        """Shallow-merge ``partial`` onto the stored user; caller fields win.

        ``id`` is immutable and a new ``password`` is re-hashed.
        """
        user = self.get_user(key, value)

        changes = {k: v for k, v in partial.items() if k not in ("id", "password", "passwordHash")}
        if "email" in changes and changes["email"] != user.email:
            new_email = require_non_empty(changes["email"], "email")
            if self._users.get_by_email(new_email):
                raise ValidationError("A user with this email already exists")
            changes["email"] = new_email
        if "role" in changes:
            try:
                changes["role"] = Role(changes["role"]).value
            except ValueError:
                raise ValidationError("Invalid role")

        merged = {**user.to_record(), **changes}
        if partial.get("password"):
            merged["passwordHash"] = hash_password(partial["password"])
        if not user.id:
            # Legacy records without an id get one on their first update.
            merged["id"] = str(uuid.uuid4())

        updated = User.from_record(merged)
        if not self._users.update(updated, match_field=key.value, match_value=value):
            raise NotFoundError("User not found")
        logger.info("updated user %s fields=%s", updated.id, sorted(changes))
        return updated

    def delete_user(self, key: UserKey, value: str) -> User:
        if key == UserKey.NAME:
            deleted = self._users.delete_by_name(value)
        elif key == UserKey.ID:
            deleted = self._users.delete_by_id(value)
        else:
            user = self.get_user(key, value)
            deleted = self._users.delete_by_id(user.id)
        if not deleted:
            raise NotFoundError("User not found")
        logger.info("deleted user %s (%s)", deleted.id, deleted.email)
        return deleted

    def debug_dump(self) -> List[dict]:
        return list(self._users.raw_records())

    def replace_all(self, records: Sequence[Mapping[str, Any]]) -> int:
        """Overwrite the whole users collection; plaintext passwords are hashed on the way in."""
        processed: List[Dict[str, Any]] = []
        for r in records:
            if not isinstance(r, Mapping):
                raise ValidationError("Each user must be an object")
            record = dict(r)
            secret = record.pop("password", None)
            if secret and not record.get("passwordHash"):
                record["passwordHash"] = secret if is_password_hash(secret) else hash_password(secret)
            processed.append(record)

        self._users.replace_all(processed)
        logger.info("replaced users collection (%d users)", len(processed))
        return len(processed)
