from __future__ import annotations

import pytest

from src.worklog_portal.worklog_portal.common.passwords import verify_password
from src.worklog_portal.worklog_portal.core.exceptions import NotFoundError, StorageError, ValidationError
from src.worklog_portal.worklog_portal.users.json_user_repository import JsonUserRepository
from src.worklog_portal.worklog_portal.users.service import UserKey, UserService


def _service(store) -> UserService:
    return UserService(JsonUserRepository(store))


def _new_user(**overrides):
    fields = {
        "name": "Priya",
        "email": "priya@example.com",
        "password": "s3cret",
        "country": "India",
        "manager": "Admin User",
        "managerEmail": "admin",
        "designation": "Engineer",
    }
    fields.update(overrides)
    return fields


def test_list_users_initializes_defaults_once(store):
    svc = _service(store)
    first = svc.list_users()
    second = svc.list_users()

    assert [u["email"] for u in first] == ["admin", "bhargav"]
    assert [u["id"] for u in first] == [u["id"] for u in second]
    assert all("passwordHash" not in u for u in first)


def test_create_then_find_returns_same_record(store):
    svc = _service(store)
    created = svc.create_user(_new_user(team="Robotics"))

    found = svc.get_user(UserKey.ID, created.id)
    assert found == created
    assert found.extra == {"team": "Robotics"}
    assert svc.get_user(UserKey.EMAIL, "priya@example.com").id == created.id
    assert svc.get_user(UserKey.NAME, "Priya").id == created.id
    assert verify_password("s3cret", found.password_hash)


def test_create_requires_name_email_password(store):
    with pytest.raises(ValidationError):
        _service(store).create_user({"name": "No Email", "password": "x"})


def test_create_rejects_duplicate_email(store):
    svc = _service(store)
    svc.create_user(_new_user())
    with pytest.raises(ValidationError):
        svc.create_user(_new_user(name="Other"))


def test_update_merges_only_supplied_fields(store):
    svc = _service(store)
    created = svc.create_user(_new_user())

    updated = svc.update_user(UserKey.ID, created.id, {"designation": "Lead", "id": "hijack"})

    assert updated.id == created.id
    assert updated.designation == "Lead"
    assert updated.country == created.country
    assert updated.manager_email == created.manager_email
    assert updated.password_hash == created.password_hash
    assert svc.get_user(UserKey.ID, created.id).designation == "Lead"


def test_update_rehashes_new_password(store):
    svc = _service(store)
    created = svc.create_user(_new_user())

    updated = svc.update_user(UserKey.EMAIL, "priya@example.com", {"password": "new-pw"})
    assert verify_password("new-pw", updated.password_hash)
    assert not verify_password("s3cret", updated.password_hash)
    assert "password" not in store.raw("users")["users"][-1]


def test_update_unknown_user_is_not_found(seeded_store):
    with pytest.raises(NotFoundError):
        _service(seeded_store).update_user(UserKey.ID, "missing", {"name": "X"})


def test_delete_missing_user_leaves_collection_unchanged(seeded_store):
    svc = _service(seeded_store)
    before = seeded_store.raw("users")

    with pytest.raises(NotFoundError):
        svc.delete_user(UserKey.ID, "missing")
    assert seeded_store.raw("users") == before


def test_delete_by_name(seeded_store):
    svc = _service(seeded_store)
    deleted = svc.delete_user(UserKey.NAME, "Bhargav")

    assert deleted.email == "bhargav"
    assert [u["email"] for u in svc.list_users()] == ["admin"]


def test_directory_fails_without_user_store(store):
    with pytest.raises(StorageError):
        _service(store).list_directory()


def test_replace_all_hashes_plaintext_only(store):
    svc = _service(store)
    svc.replace_all(
        [
            {"id": "1", "email": "a", "password": "plain"},
            {"id": "2", "email": "b", "passwordHash": "scrypt:32768:8:1$salt$abc"},
        ]
    )

    users = store.raw("users")["users"]
    assert verify_password("plain", users[0]["passwordHash"])
    assert "password" not in users[0]
    assert users[1]["passwordHash"] == "scrypt:32768:8:1$salt$abc"


def test_update_legacy_records_without_ids_touches_only_the_match(store):
    store.put("users", [{"name": "Asha", "email": "asha"}, {"name": "Ben", "email": "ben"}])
    svc = _service(store)

    updated = svc.update_user(UserKey.EMAIL, "ben", {"designation": "Lead"})

    users = store.raw("users")["users"]
    assert users[0] == {"name": "Asha", "email": "asha"}
    assert users[1]["email"] == "ben"
    assert users[1]["designation"] == "Lead"
    assert users[1]["id"] == updated.id != ""


def test_update_rejects_email_taken_by_another_user(seeded_store):
    svc = _service(seeded_store)
    before = seeded_store.raw("users")

    with pytest.raises(ValidationError, match="already exists"):
        svc.update_user(UserKey.EMAIL, "bhargav", {"email": "admin"})
    assert seeded_store.raw("users") == before


def test_update_can_change_email_to_a_free_one(seeded_store):
    svc = _service(seeded_store)
    svc.update_user(UserKey.EMAIL, "bhargav", {"email": "bhargav@example.com"})

    assert [u["email"] for u in svc.list_users()] == ["admin", "bhargav@example.com"]
