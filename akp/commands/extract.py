"""Komenda: akp extract — wyciąga wskazane akapity numerowane z dokumentu."""

from __future__ import annotations

import argparse
import json
import re

from rich.console import Console
from rich.table import Table
from rich import box

from akp.commands._common import (
    add_config_argument,
    add_policy_argument,
    read_document,
    resolve_config,
)
from data_model.paragraphs import NumberingPolicy, ParagraphRecord
from reconstruct import InputError, extract_paragraphs

console = Console()

_RANGE_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")


# ---------------------------------------------------------------------------
# Lista numerów: "1,2,5-7"
# ---------------------------------------------------------------------------

def parse_number_list(spec: str) -> list[int]:
    """
    "1,2,5-7" → [1, 2, 5, 6, 7]. Zakresy są domknięte; kolejność zachowana.

    Rzuca argparse.ArgumentTypeError dla niepoprawnego wpisu.
    """
    out: list[int] = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        if part.isdigit():
            out.append(int(part))
            continue
        m = _RANGE_RE.match(part)
        if not m:
            raise argparse.ArgumentTypeError(f"Niepoprawny numer lub zakres: {part!r}")
        start, end = int(m.group(1)), int(m.group(2))
        if start > end:
            raise argparse.ArgumentTypeError(f"Pusty zakres: {part!r}")
        out.extend(range(start, end + 1))
    if not out:
        raise argparse.ArgumentTypeError("Lista numerów jest pusta.")
    return out


# ---------------------------------------------------------------------------
# Wyjście
# ---------------------------------------------------------------------------

def _show_table(records: list[ParagraphRecord], keywords: dict[int, list[str]] | None) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR", justify="right", no_wrap=True, style="bold cyan")
    table.add_column("TEKST", no_wrap=False)
    if keywords is not None:
        table.add_column("SŁOWA KLUCZOWE", no_wrap=False, max_width=40, style="green")

    for r in records:
        row = [str(r.number), r.text]
        if keywords is not None:
            row.append(", ".join(keywords.get(r.number, [])))
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(records)} akapitów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    config = resolve_config(args.config)
    text = read_document(args.file)

    try:
        records = extract_paragraphs(text, args.numbers, args.policy, config)
    except InputError as e:
        console.print(f"[red]Błąd argumentów:[/red] {e}")
        raise SystemExit(1)

    found = {r.number for r in records}
    missing = [n for n in args.numbers if n not in found]
    if missing:
        console.print(
            f"[yellow]Nie znaleziono akapitów:[/yellow] {', '.join(map(str, missing))}",
            highlight=False,
        )

    annotated = None
    if args.keywords:
        from llm_query.keywords import annotate_paragraphs, print_token_summary
        annotated, usage = annotate_paragraphs(records)
        print_token_summary(annotated, usage)

    if args.json:
        payload = (
            [a.to_dict() for a in annotated]
            if annotated is not None
            else [r.to_dict() for r in records]
        )
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if not records:
        console.print("[yellow]Brak akapitów.[/yellow]")
        return

    kw = {a.paragraph.number: a.keywords for a in annotated} if annotated is not None else None
    _show_table(records, kw)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Wyciąga wskazane akapity numerowane z pliku .pdf / .txt.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rekonstruuje akapity numerowane o podanych numerach, pomijając przypisy,
numery stron, sygnatury dokumentów i cytowania.

Przykłady:
  akp extract raport.pdf -n 1,2,5-7
  akp extract raport.txt -n 12 --policy strict --json
  cat raport.txt | akp extract - -n 3 --keywords
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik .pdf, plik tekstowy lub '-' (stdin).",
    )
    p.add_argument(
        "-n", "--numbers",
        metavar="LISTA",
        type=parse_number_list,
        required=True,
        help="Numery akapitów, np. 1,2,5-7.",
    )
    add_policy_argument(p, NumberingPolicy.PERMISSIVE)
    add_config_argument(p)
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz wynik jako JSON na stdout.",
    )
    p.add_argument(
        "--keywords",
        action="store_true",
        help="Dodaj słowa kluczowe z Gemini (wymaga GEMINI_API_KEY).",
    )
    p.set_defaults(func=run)
