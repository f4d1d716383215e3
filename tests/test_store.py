"""Document store tests (magazyn w pamięci; PostgreSQL nie jest potrzebny)."""

import threading

import pytest

from store import MemoryDocumentStore, make_doc_id, open_store


@pytest.fixture
def store():
    return MemoryDocumentStore()


def test_make_doc_id():
    assert make_doc_id("raport.pdf", 1700000000123) == "raport.pdf_1700000000123"
    assert make_doc_id("raport.pdf").startswith("raport.pdf_")


def test_create_sets_edited_to_original(store):
    doc = store.create("raport.pdf", "1. Texto.")
    assert doc.doc_id.startswith("raport.pdf_")
    assert doc.original_text == doc.edited_text == "1. Texto."
    assert store.get(doc.doc_id) == doc


def test_get_unknown_returns_none(store):
    assert store.get("brak_123") is None


def test_update_edited(store):
    doc = store.create("raport.pdf", "orig")
    assert store.update_edited(doc.doc_id, "poprawiony") is True

    stored = store.get(doc.doc_id)
    assert stored.edited_text == "poprawiony"
    assert stored.original_text == "orig"


def test_update_unknown_returns_false(store):
    assert store.update_edited("brak_123", "x") is False
    assert len(store) == 0


def test_returned_documents_are_copies(store):
    doc = store.create("raport.pdf", "orig")
    doc.edited_text = "zmiana poza magazynem"
    assert store.get(doc.doc_id).edited_text == "orig"


def test_same_file_gets_distinct_ids(store):
    ids = {store.create("raport.pdf", "t").doc_id for _ in range(20)}
    assert len(ids) == 20
    assert len(store) == 20


def test_concurrent_creates(store):
    def worker():
        for _ in range(25):
            store.create("raport.pdf", "t")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 100


def test_stored_document_to_dict(store):
    doc = store.create("raport.pdf", "texto")
    assert doc.to_dict() == {
        "pdfId": doc.doc_id,
        "fileName": "raport.pdf",
        "originalText": "texto",
        "editedText": "texto",
    }


def test_open_store(monkeypatch):
    monkeypatch.delenv("AKP_STORE", raising=False)
    assert isinstance(open_store(), MemoryDocumentStore)
    monkeypatch.setenv("AKP_STORE", "MEMORY")
    assert isinstance(open_store(), MemoryDocumentStore)
    with pytest.raises(ValueError):
        open_store("redis")


# ---------------------------------------------------------------------------
# PostgresDocumentStore z atrapą połączenia psycopg2
# ---------------------------------------------------------------------------

class FakeCursor:
    def __init__(self, db):
        self.db = db
        self.rowcount = 0
        self._row = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params):
        verb = sql.split()[0]
        if verb == "INSERT":
            doc_id, file_name, original, edited = params
            if doc_id in self.db:
                self.rowcount = 0
            else:
                self.db[doc_id] = (doc_id, file_name, original, edited)
                self.rowcount = 1
        elif verb == "SELECT":
            self._row = self.db.get(params[0])
        elif verb == "UPDATE":
            edited, doc_id = params
            row = self.db.get(doc_id)
            self.rowcount = 0 if row is None else 1
            if row is not None:
                self.db[doc_id] = (*row[:3], edited)

    def fetchone(self):
        return self._row


class FakeConnection:
    def __init__(self, db):
        self.db = db
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def cursor(self):
        return FakeCursor(self.db)

    def close(self):
        self.closed = True


@pytest.fixture
def pg_store():
    from store.postgres import PostgresDocumentStore

    db = {}
    return PostgresDocumentStore(connect=lambda: FakeConnection(db)), db


def test_postgres_create_get_update(pg_store):
    store, db = pg_store
    doc = store.create("raport.pdf", "orig")

    assert doc.doc_id in db
    assert store.get(doc.doc_id) == doc
    assert store.update_edited(doc.doc_id, "nowy") is True
    assert store.get(doc.doc_id).edited_text == "nowy"
    assert store.update_edited("brak_1", "x") is False
    assert store.get("brak_1") is None


def test_postgres_create_retries_on_id_collision(pg_store, monkeypatch):
    store, db = pg_store
    monkeypatch.setattr("store.postgres.time.time", lambda: 1.0)

    first = store.create("raport.pdf", "a")
    second = store.create("raport.pdf", "b")

    assert first.doc_id == "raport.pdf_1000"
    assert second.doc_id == "raport.pdf_1001"
