from __future__ import annotations

import logging
import uuid
from typing import List

from ..common.passwords import hash_password
from ..core.constants import DEFAULT_TOTAL_LEAVES, DEFAULT_USERS
from ..core.enums import Collection
from .store import DocumentStore

logger = logging.getLogger(__name__)


def default_user_records() -> List[dict]:
    records = []
    for seed in DEFAULT_USERS:
        record = {k: v for k, v in seed.items() if k != "password"}
        record["id"] = str(uuid.uuid4())
        record["passwordHash"] = hash_password(seed["password"])
        records.append(record)
    return records


def default_leave_data() -> dict:
    return {"users": [], "defaultTotalLeaves": DEFAULT_TOTAL_LEAVES}


def _empty_documents() -> dict:
    return {
        Collection.PROJECTS.value: [],
        Collection.PROJECT_MEMBERS.value: [],
        Collection.TIMESHEETS.value: {},
        Collection.LEAVE_REQUESTS.value: [],
        Collection.LEAVE_DATA.value: default_leave_data(),
        Collection.MATRICES.value: {},
        Collection.SAFETY.value: {},
    }


def initialize_collections(store: DocumentStore) -> List[str]:
    """Create every missing collection with its default document.

    Existing collections are left untouched. Returns the names that were created.
    """
    created: List[str] = []

    if store.get(Collection.USERS.value).is_empty:
        store.put(Collection.USERS.value, {"users": default_user_records()})
        created.append(Collection.USERS.value)

    for name, document in _empty_documents().items():
        if store.get(name).is_empty:
            store.put(name, document)
            created.append(name)

    if created:
        logger.info("initialized collections: %s", ", ".join(created))
    return created
