"""store/memory.py — magazyn dokumentów w pamięci procesu (domyślny)."""

from __future__ import annotations

import threading
import time

from data_model.documents import StoredDocument
from store.base import make_doc_id


class MemoryDocumentStore:
    """Słownik doc_id → StoredDocument chroniony lockiem (serwer wielowątkowy)."""

    def __init__(self) -> None:
        self._docs: dict[str, StoredDocument] = {}
        self._lock = threading.Lock()

    def create(self, file_name: str, text: str) -> StoredDocument:
        with self._lock:
            millis = int(time.time() * 1000)
            doc_id = make_doc_id(file_name, millis)
            # Dwa uploady tego samego pliku w tej samej milisekundzie
            while doc_id in self._docs:
                millis += 1
                doc_id = make_doc_id(file_name, millis)
            doc = StoredDocument(
                doc_id=doc_id,
                file_name=file_name,
                original_text=text,
                edited_text=text,
            )
            self._docs[doc_id] = doc
            return _copy(doc)

    def get(self, doc_id: str) -> StoredDocument | None:
        with self._lock:
            doc = self._docs.get(doc_id)
            return _copy(doc) if doc is not None else None

    def update_edited(self, doc_id: str, edited_text: str) -> bool:
        with self._lock:
            doc = self._docs.get(doc_id)
            if doc is None:
                return False
            doc.edited_text = edited_text
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)


def _copy(doc: StoredDocument) -> StoredDocument:
    # Wywołujący nie może zmienić stanu magazynu przez zwrócony obiekt.
    return StoredDocument(
        doc_id=doc.doc_id,
        file_name=doc.file_name,
        original_text=doc.original_text,
        edited_text=doc.edited_text,
    )
