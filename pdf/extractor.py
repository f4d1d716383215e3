"""
pdf/extractor.py — ekstrakcja surowego tekstu z PDF z zachowaniem łamań linii.

Architektura:
  bajty / ścieżka → fitz.open() → strony → page.get_text("text")
  → strony sklejone pustą linią → tekst dla reconstruct.clean_lines()

Nie czyścimy tu nic: numery stron, symbole dokumentów i bloki przypisów
zostają w tekście — usuwa je filtr szumu rdzenia (użytkownik może też
poprawić tekst ręcznie przed ekstrakcją akapitów).

Kluczowe funkcje publiczne:
  extract_text(data)              -> str
  extract_text_from_path(path)    -> str
"""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF


class IngestionError(RuntimeError):
    """Nie udało się odczytać tekstu ze źródła (uszkodzony plik, nie-PDF itp.)."""


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def extract_text(data: bytes) -> str:
    """Zwraca tekst PDF podanego jako bajty."""
    if not data:
        raise IngestionError("Pusty plik PDF.")
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise IngestionError(f"Nie można otworzyć PDF: {e}") from e
    try:
        return _document_text(doc)
    finally:
        doc.close()


def extract_text_from_path(path: str | Path) -> str:
    p = Path(path)
    if not p.exists():
        raise IngestionError(f"Plik nie istnieje: {p}")
    try:
        doc = fitz.open(str(p))
    except Exception as e:
        raise IngestionError(f"Nie można otworzyć PDF {p.name}: {e}") from e
    try:
        return _document_text(doc)
    finally:
        doc.close()


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _document_text(doc: fitz.Document) -> str:
    if doc.needs_pass:
        raise IngestionError("PDF jest zaszyfrowany hasłem.")
    pages = [_page_text(page) for page in doc]
    return "\n\n".join(p for p in pages if p)


def _page_text(page: fitz.Page) -> str:
    # sort=True: kolejność czytania (góra→dół, lewo→prawo) zamiast kolejności strumienia
    text = page.get_text("text", sort=True)
    lines = [line.rstrip() for line in text.splitlines()]
    return "\n".join(lines).strip("\n")
