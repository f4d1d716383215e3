"""
store/base.py — kontrakt magazynu dokumentów.

Magazyn trzyma {original_text, edited_text, file_name} pod wygenerowanym
identyfikatorem "<nazwa pliku>_<epoch ms>". Operacje: create / get /
update_edited. Usuwania nie ma — magazyn rośnie bez ograniczeń (znane
ograniczenie).
"""

from __future__ import annotations

import time
from typing import Protocol

from data_model.documents import StoredDocument


class DocumentStore(Protocol):
    def create(self, file_name: str, text: str) -> StoredDocument:
        ...

    def get(self, doc_id: str) -> StoredDocument | None:
        ...

    def update_edited(self, doc_id: str, edited_text: str) -> bool:
        """Zwraca False, gdy dokument nie istnieje."""
        ...


def make_doc_id(file_name: str, millis: int | None = None) -> str:
    if millis is None:
        millis = int(time.time() * 1000)
    return f"{file_name}_{millis}"
