"""
store/postgres.py — magazyn dokumentów w PostgreSQL (tabela document_text).

Schemat: db/schema.sql (akp apply-schema). Każda operacja otwiera własne
połączenie i zamyka je po zatwierdzeniu transakcji.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import psycopg2.extensions

from data_model.documents import StoredDocument
from store._db import get_connection
from store.base import make_doc_id

_INSERT_SQL = """
    INSERT INTO document_text (doc_id, file_name, original_text, edited_text)
    VALUES (%s, %s, %s, %s)
    ON CONFLICT (doc_id) DO NOTHING
"""

_SELECT_SQL = """
    SELECT doc_id, file_name, original_text, edited_text
    FROM document_text
    WHERE doc_id = %s
"""

_UPDATE_SQL = """
    UPDATE document_text
    SET edited_text = %s, updated_at = now()
    WHERE doc_id = %s
"""

# Ile kolejnych milisekund próbujemy przy kolizji identyfikatora.
_MAX_ID_ATTEMPTS = 50


class PostgresDocumentStore:
    def __init__(
        self,
        connect: Callable[[], psycopg2.extensions.connection] = get_connection,
    ) -> None:
        self._connect = connect

    def create(self, file_name: str, text: str) -> StoredDocument:
        millis = int(time.time() * 1000)
        conn = self._connect()
        try:
            with conn, conn.cursor() as cur:
                for attempt in range(_MAX_ID_ATTEMPTS):
                    doc_id = make_doc_id(file_name, millis + attempt)
                    cur.execute(_INSERT_SQL, (doc_id, file_name, text, text))
                    if cur.rowcount == 1:
                        return StoredDocument(
                            doc_id=doc_id,
                            file_name=file_name,
                            original_text=text,
                            edited_text=text,
                        )
        finally:
            conn.close()
        raise RuntimeError(f"Nie udało się nadać unikalnego doc_id dla {file_name!r}.")

    def get(self, doc_id: str) -> StoredDocument | None:
        conn = self._connect()
        try:
            with conn.cursor() as cur:
                cur.execute(_SELECT_SQL, (doc_id,))
                row = cur.fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return StoredDocument(
            doc_id=row[0],
            file_name=row[1],
            original_text=row[2],
            edited_text=row[3],
        )

    def update_edited(self, doc_id: str, edited_text: str) -> bool:
        conn = self._connect()
        try:
            with conn, conn.cursor() as cur:
                cur.execute(_UPDATE_SQL, (edited_text, doc_id))
                return cur.rowcount == 1
        finally:
            conn.close()
