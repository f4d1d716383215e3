"""Wspólne pomocniki komend: wczytanie dokumentu, konfiguracja, polityka."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from rich.console import Console

from data_model.paragraphs import NumberingPolicy
from reconstruct.config import ReconstructionConfig, config_from_env, load_config
from reconstruct.errors import ConfigError

console = Console(stderr=True)


def read_document(source: str) -> str:
    """
    Tekst dokumentu z pliku .pdf, pliku tekstowego albo stdin ("-").

    Błędy są wypisywane i kończą komendę (SystemExit(1)).
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    if path.suffix.lower() == ".pdf":
        from pdf.extractor import IngestionError, extract_text_from_path
        try:
            return extract_text_from_path(path)
        except IngestionError as e:
            console.print(f"[red]Błąd ekstrakcji PDF:[/red] {e}")
            raise SystemExit(1)

    return path.read_text(encoding="utf-8")


def resolve_config(path: str | None) -> ReconstructionConfig:
    try:
        return load_config(path) if path else config_from_env()
    except ConfigError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        for detail in e.details:
            console.print(f"  [dim]-[/dim] {detail}")
        raise SystemExit(1)


def add_policy_argument(p: argparse.ArgumentParser, default: NumberingPolicy) -> None:
    p.add_argument(
        "--policy",
        choices=[pol.value for pol in NumberingPolicy],
        default=os.getenv("AKP_POLICY", default.value),
        help=f"Polityka numeracji (domyślnie: AKP_POLICY lub {default.value}).",
    )


def add_config_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        metavar="PLIK.json",
        default=None,
        help="Plik konfiguracji rekonstrukcji (domyślnie: AKP_CONFIG lub wbudowana).",
    )
