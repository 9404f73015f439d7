from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class DocumentState(str, Enum):
    """Whether a collection has ever been written.

    A missing file is EMPTY; a file with broken JSON is neither and raises StorageError.
    """

    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class StoredDocument:
    state: DocumentState
    document: Any = None

    @property
    def is_empty(self) -> bool:
        return self.state == DocumentState.EMPTY

    @classmethod
    def empty(cls) -> "StoredDocument":
        return cls(DocumentState.EMPTY)

    @classmethod
    def populated(cls, document: Any) -> "StoredDocument":
        return cls(DocumentState.POPULATED, document)


class DocumentStore(Protocol):
    """Storage seam for whole-document JSON collections.

    Note (DIP): repositories depend on this interface, not on the file system.
    Writes replace the whole document; there is no locking, so the last save wins.
    """

    def get(self, collection: str) -> StoredDocument:
        raise NotImplementedError

    def put(self, collection: str, document: Any) -> None:
        raise NotImplementedError
