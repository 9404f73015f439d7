from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..core.enums import Collection
from ..core.exceptions import StorageError
from ..storage.bootstrap import default_user_records
from ..storage.collection import JsonCollection
from ..storage.store import DocumentStore
from .model import User
from .repository import UserRepository

MISSING_MESSAGE = "User database not found"


def _records(document: Any) -> List[dict]:
    # Both a bare array and {"users": [...]} exist in the wild.
    if isinstance(document, list):
        return list(document)
    if isinstance(document, dict):
        return list(document.get("users") or [])
    raise StorageError("Unexpected shape for users collection")


class JsonUserRepository(UserRepository):
    def __init__(self, store: DocumentStore):
        self._users = JsonCollection(store, Collection.USERS.value, lambda: {"users": default_user_records()})

    def _load(self) -> List[dict]:
        return _records(self._users.require(MISSING_MESSAGE))

    def _save(self, records: Sequence[dict]) -> None:
        self._users.save({"users": list(records)})

    def _find(self, field: str, value: str) -> Optional[User]:
        for r in self._load():
            if r.get(field) == value:
                return User.from_record(r)
        return None

    def _delete(self, field: str, value: str) -> Optional[User]:
        records = self._load()
        for i, r in enumerate(records):
            if r.get(field) == value:
                deleted = records.pop(i)
                self._save(records)
                return User.from_record(deleted)
        return None

    def list_all(self, *, initialize: bool = False) -> Sequence[User]:
        document = self._users.load_or_initialize() if initialize else self._users.require(MISSING_MESSAGE)
        return [User.from_record(r) for r in _records(document)]

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._find("id", user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._find("email", email)

    def get_by_name(self, name: str) -> Optional[User]:
        return self._find("name", name)

    def add(self, user: User) -> None:
        records = _records(self._users.load_or_initialize())
        records.append(user.to_record())
        self._save(records)

    def update(self, user: User, *, match_field: str = "id", match_value: Optional[str] = None) -> bool:
        target = user.id if match_value is None else match_value
        if not target:
            return False
        records = self._load()
        for i, r in enumerate(records):
            if r.get(match_field) == target:
                records[i] = user.to_record()
                self._save(records)
                return True
        return False

    def delete_by_id(self, user_id: str) -> Optional[User]:
        return self._delete("id", user_id)

    def delete_by_name(self, name: str) -> Optional[User]:
        return self._delete("name", name)

    def raw_records(self) -> Sequence[dict]:
        return self._load()

    def replace_all(self, records: Sequence[dict]) -> None:
        self._save(records)
