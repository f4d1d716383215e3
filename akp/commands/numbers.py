"""Komenda: akp numbers — listuje rozpoznane numery akapitów."""

from __future__ import annotations

import argparse

from rich.console import Console

from akp.commands._common import (
    add_config_argument,
    add_policy_argument,
    read_document,
    resolve_config,
)
from data_model.paragraphs import NumberingPolicy
from reconstruct import InputError, paragraph_numbers

console = Console()


def run(args: argparse.Namespace) -> None:
    config = resolve_config(args.config)
    try:
        numbers = paragraph_numbers(read_document(args.file), args.policy, config)
    except InputError as e:
        console.print(f"[red]Błąd argumentów:[/red] {e}")
        raise SystemExit(1)

    if not numbers:
        console.print("[yellow]Nie rozpoznano akapitów numerowanych.[/yellow]")
        return

    console.print(", ".join(map(str, numbers)), highlight=False)
    console.print(f"  [dim]{len(numbers)} akapitów (polityka: {args.policy})[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "numbers",
        help="Listuje rozpoznane numery akapitów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje numery akapitów rozpoznane w dokumencie, w kolejności wystąpienia.

Polityka strict wymaga ciągłej numeracji od 1; permissive przyjmuje każdą
linię zaczynającą się od "<numer>." w oczyszczonym tekście.

Przykłady:
  akp numbers raport.pdf
  akp numbers raport.txt --policy permissive
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik .pdf, plik tekstowy lub '-' (stdin).")
    add_policy_argument(p, NumberingPolicy.STRICT)
    add_config_argument(p)
    p.set_defaults(func=run)
