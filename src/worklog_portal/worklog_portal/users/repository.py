from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    Lookups raise NotFoundError when the users collection itself does not exist.
    """

    def list_all(self, *, initialize: bool = False) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[User]:
        raise NotImplementedError

    def add(self, user: User) -> None:
        raise NotImplementedError

    def update(self, user: User, *, match_field: str = "id", match_value: Optional[str] = None) -> bool:
        """Replace the first record whose ``match_field`` equals ``match_value`` (``user.id`` by default)."""

        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def delete_by_name(self, name: str) -> Optional[User]:
        raise NotImplementedError

    def raw_records(self) -> Sequence[dict]:
        raise NotImplementedError

    def replace_all(self, records: Sequence[dict]) -> None:
        raise NotImplementedError
