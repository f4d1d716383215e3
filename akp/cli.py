"""
akp — narzędzie CLI do rekonstrukcji akapitów numerowanych (Akapity).

Użycie:
  akp <komenda> [opcje]

Komendy:
  extract       Wyciąga wskazane akapity z pliku .pdf / .txt (lub stdin).
  numbers       Listuje rozpoznane numery akapitów.
  classify      Tabela rodzajów linii (diagnostyka klasyfikatora).
  ingest        PDF / URL → plik tekstowy i/lub magazyn dokumentów.
  serve         Uruchamia API HTTP (Flask).
  apply-schema  Aplikuje db/schema.sql do bazy danych (idempotentne).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby polskie
# i hiszpańskie znaki były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from akp.commands import extract as cmd_extract
from akp.commands import numbers as cmd_numbers
from akp.commands import classify as cmd_classify
from akp.commands import ingest as cmd_ingest
from akp.commands import serve as cmd_serve
from akp.commands import apply_schema as cmd_apply_schema


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="akp",
        description="Akapity — rekonstrukcja akapitów numerowanych.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="akp 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_numbers.add_parser(subparsers)
    cmd_classify.add_parser(subparsers)
    cmd_ingest.add_parser(subparsers)
    cmd_serve.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
