"""Komenda: akp ingest — PDF / strona HTML → plik tekstowy i/lub magazyn dokumentów."""

from __future__ import annotations

import argparse
from pathlib import Path
from urllib.parse import urlparse

from rich.console import Console

from pdf.extractor import IngestionError

console = Console()


def _is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def _load_text(source: str) -> tuple[str, str]:
    """(nazwa pliku, tekst) dla URL lub ścieżki .pdf."""
    if _is_url(source):
        from html_parser.parser import fetch_text
        name = Path(urlparse(source).path).name or urlparse(source).netloc
        return name, fetch_text(source)

    path = Path(source)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    if path.suffix.lower() != ".pdf":
        console.print(f"[red]Oczekiwano pliku .pdf lub URL, otrzymano:[/red] {path.suffix}")
        raise SystemExit(1)

    from pdf.extractor import extract_text_from_path
    return path.name, extract_text_from_path(path)


# ---------------------------------------------------------------------------
# Zapis
# ---------------------------------------------------------------------------

def _write_text(text: str, file_name: str, out_dir: Path) -> None:
    target = out_dir / (Path(file_name).stem or "dokument")
    target = target.with_suffix(".txt")
    target.write_text(text, encoding="utf-8")
    console.print(f"[green]Tekst:[/green] {target}  ({len(text.splitlines())} linii)")


def _write_db(text: str, file_name: str) -> None:
    from store.postgres import PostgresDocumentStore

    try:
        doc = PostgresDocumentStore().create(file_name, text)
    except Exception as e:
        console.print(f"[red]Błąd zapisu do bazy:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]DB:[/green] zapisano dokument pdfId='[cyan]{doc.doc_id}[/cyan]'")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    console.print(f"Ekstrakcja tekstu z [bold]{args.source}[/bold] …")

    try:
        file_name, text = _load_text(args.source)
    except IngestionError as e:
        console.print(f"[red]Błąd ekstrakcji:[/red] {e}")
        raise SystemExit(1)

    if not text.strip():
        console.print("[yellow]Dokument nie zawiera tekstu (skan bez OCR?).[/yellow]")

    if args.out in ("text", "both"):
        _write_text(text, file_name, Path(args.out_dir))

    if args.out in ("db", "both"):
        _write_db(text, file_name)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "ingest",
        help="PDF / URL → plik tekstowy i/lub magazyn dokumentów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga surowy tekst z pliku PDF (PyMuPDF) albo strony HTML i zapisuje go
do pliku .txt (do ręcznej korekty) i/lub do tabeli document_text.

Przykłady:
  akp ingest raport.pdf --out text
  akp ingest raport.pdf --out db
  akp ingest https://example.org/raport.html --out both --out-dir teksty
        """,
    )
    p.add_argument(
        "source",
        metavar="PLIK.pdf|URL",
        help="Ścieżka do pliku PDF albo adres strony HTML.",
    )
    p.add_argument(
        "--out",
        choices=["text", "db", "both"],
        default="text",
        help="Cel zapisu: text, db lub both (domyślnie: text).",
    )
    p.add_argument(
        "--out-dir",
        metavar="KATALOG",
        default=".",
        help="Katalog dla pliku .txt (domyślnie: bieżący).",
    )
    p.set_defaults(func=run)
