"""Komenda: akp apply-schema — tworzy tabelę document_text (db/schema.sql)."""

from __future__ import annotations

import argparse
import pathlib
import re

from rich.console import Console

from store._db import get_connection

console = Console()

SCHEMA_PATH = pathlib.Path(__file__).resolve().parents[2] / "db" / "schema.sql"

# Koniec instrukcji: średnik na końcu linii.
_STATEMENT_END_RE = re.compile(r";[ \t]*$", re.MULTILINE)


def split_statements(sql: str) -> list[str]:
    """Instrukcje SQL bez linii komentarzy "--"; puste fragmenty są pomijane."""
    body = "\n".join(
        line for line in sql.splitlines() if not line.lstrip().startswith("--")
    )
    return [
        chunk.strip() + ";"
        for chunk in _STATEMENT_END_RE.split(body)
        if chunk.strip()
    ]


def run(args: argparse.Namespace) -> None:
    schema_path = pathlib.Path(args.schema) if args.schema else SCHEMA_PATH
    if not schema_path.is_file():
        console.print(f"[red]Brak pliku schematu:[/red] {schema_path}")
        raise SystemExit(1)

    statements = split_statements(schema_path.read_text(encoding="utf-8"))

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Brak połączenia z PostgreSQL:[/red] {e}")
        raise SystemExit(1)

    conn.autocommit = True
    try:
        with conn.cursor() as cur:
            for statement in statements:
                cur.execute(statement)
    except Exception as e:
        console.print(f"[red]Schemat nie został zastosowany:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]Schemat zastosowany:[/green] {schema_path} ({len(statements)} instrukcji)")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "apply-schema",
        help="Tworzy tabelę document_text w PostgreSQL (idempotentne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wykonuje db/schema.sql na bazie wskazanej zmiennymi PG* (PGHOST, PGPORT,
PGDATABASE, PGUSER, PGPASSWORD). Schemat używa IF NOT EXISTS, więc można
go uruchamiać wielokrotnie.

Przykłady:
  akp apply-schema
  AKP_STORE=postgres akp serve
        """,
    )
    p.add_argument(
        "--schema",
        metavar="PLIK.sql",
        help="Inny plik schematu niż db/schema.sql.",
    )
    p.set_defaults(func=run)
