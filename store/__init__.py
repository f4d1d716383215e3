"""
store — magazyn dokumentów (tekst oryginalny + edytowany) dla API i CLI.

Publiczne API:
  DocumentStore                 protokół: create / get / update_edited
  MemoryDocumentStore           w pamięci procesu (domyślny)
  PostgresDocumentStore         tabela document_text (psycopg2)
  open_store(kind)              -> DocumentStore   (kind: "memory" | "postgres";
                                   domyślnie z AKP_STORE)
"""

from __future__ import annotations

import os

from .base import DocumentStore, make_doc_id
from .memory import MemoryDocumentStore

_ENV_KEY = "AKP_STORE"


def open_store(kind: str | None = None) -> DocumentStore:
    kind = (kind or os.getenv(_ENV_KEY, "memory")).lower()
    if kind == "memory":
        return MemoryDocumentStore()
    if kind == "postgres":
        from .postgres import PostgresDocumentStore
        return PostgresDocumentStore()
    raise ValueError(f"Nieznany rodzaj magazynu {kind!r} (dozwolone: memory, postgres).")


__all__ = [
    "DocumentStore",
    "make_doc_id",
    "MemoryDocumentStore",
    "open_store",
]
