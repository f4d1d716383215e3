"""Komenda: akp classify — tabela rodzajów linii (diagnostyka klasyfikatora)."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from akp.commands._common import add_config_argument, read_document, resolve_config
from data_model.paragraphs import NOISE_KINDS, LineKind
from reconstruct.noise_filter import clean_lines, split_lines

console = Console()

_KIND_STYLES = {
    LineKind.PARAGRAPH_START:  "bold cyan",
    LineKind.SECTION_TITLE:    "bold magenta",
    LineKind.SUBSECTION_TITLE: "magenta",
    LineKind.CITATION:         "yellow",
    LineKind.FOOTNOTE_START:   "red",
}


def run(args: argparse.Namespace) -> None:
    config = resolve_config(args.config)
    text = read_document(args.file)
    lines = clean_lines(text, config) if args.cleaned else split_lines(text)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("LINIA", justify="right", no_wrap=True, style="dim")
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("NR", justify="right", no_wrap=True)
    table.add_column("TEKST", no_wrap=False, max_width=90)

    counts: dict[LineKind, int] = {}
    for rec in lines:
        cls = rec.classify(config)
        counts[cls.kind] = counts.get(cls.kind, 0) + 1
        if cls.kind in NOISE_KINDS and not args.all:
            continue
        kind = str(cls.kind) + (" (soft)" if cls.soft else "")
        style = _KIND_STYLES.get(cls.kind, "")
        table.add_row(
            str(rec.index + 1),
            f"[{style}]{kind}[/{style}]" if style else kind,
            str(cls.number) if cls.number is not None else "",
            rec.trimmed_text,
        )

    console.print()
    console.print(table)
    summary = ", ".join(f"{k}: {v}" for k, v in sorted(counts.items()))
    console.print(f"  [dim]{len(lines)} linii — {summary}[/dim]\n", highlight=False)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "classify",
        help="Tabela rodzajów linii (diagnostyka klasyfikatora).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Klasyfikuje każdą linię dokumentu i wypisuje tabelę rodzajów.
Linie szumu (puste, separatory, numery stron, sygnatury) są domyślnie ukryte.

Przykłady:
  akp classify raport.txt
  akp classify raport.pdf --cleaned
  akp classify raport.pdf --all
        """,
    )
    p.add_argument("file", metavar="PLIK", help="Plik .pdf, plik tekstowy lub '-' (stdin).")
    p.add_argument(
        "--cleaned",
        action="store_true",
        help="Klasyfikuj linie po filtrze szumu (bez bloków przypisów).",
    )
    p.add_argument(
        "--all",
        action="store_true",
        help="Pokaż także linie szumu.",
    )
    add_config_argument(p)
    p.set_defaults(func=run)
