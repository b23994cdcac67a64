"""Single-file JSON document store.

The whole application state lives in one JSON document with three
collections (``users``, ``sets``, ``flashcards``). Every logical operation
runs as one read -> mutate -> write unit under the store lock, so no handler
can write back a stale copy over another handler's changes.
"""
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Iterator

from core.config import settings
from core.errors import StorageError

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "sets", "flashcards")

Document = dict[str, list[dict[str, Any]]]


def empty_document() -> Document:
    return {name: [] for name in COLLECTIONS}


class DocumentStore:
    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = threading.Lock()

    def read(self) -> Document:
        """Load the current on-disk state. A missing file is an empty document."""
        if not self.path.exists():
            return empty_document()
        try:
            with open(self.path, encoding="utf-8") as fh:
                raw = fh.read()
            document = json.loads(raw) if raw.strip() else {}
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc
        if not isinstance(document, dict):
            raise StorageError(f"Malformed document in {self.path}")
        for name in COLLECTIONS:
            document.setdefault(name, [])
        return document

    def write(self, document: Document) -> None:
        """Atomically replace the on-disk state with ``document``."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc
        logger.debug("Wrote %s (%s)", self.path, ", ".join(f"{k}={len(document[k])}" for k in COLLECTIONS))

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Read, hand the document to the caller for mutation, then write it back.

        Nothing is written if the block raises.
        """
        with self._lock:
            document = self.read()
            yield document
            self.write(document)

    @contextmanager
    def snapshot(self) -> Iterator[Document]:
        with self._lock:
            yield self.read()


store = DocumentStore(settings.DB_PATH)


# dependency
def get_store() -> Generator[DocumentStore, None, None]:
    yield store
