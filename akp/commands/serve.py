"""Komenda: akp serve — uruchamia API HTTP (Flask)."""

from __future__ import annotations

import argparse

from rich.console import Console

console = Console()


def run(args: argparse.Namespace) -> None:
    from web.app import create_app
    from web.config import Config

    try:
        app = create_app()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    host = args.host or Config.HOST
    port = args.port or Config.PORT
    debug = args.debug or Config.DEBUG

    console.print(f"API: [bold]http://{host}:{port}[/bold]")
    app.run(host=host, port=port, debug=debug)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "serve",
        help="Uruchamia API HTTP (Flask).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Uruchamia serwer API (upload PDF, zapis edycji, ekstrakcja akapitów).

Magazyn dokumentów wybiera AKP_STORE (memory | postgres).

Przykłady:
  akp serve
  akp serve --host 0.0.0.0 --port 8080 --debug
        """,
    )
    p.add_argument("--host", default=None, help="Adres nasłuchu (domyślnie: AKP_WEB_HOST).")
    p.add_argument("--port", type=int, default=None, help="Port (domyślnie: AKP_WEB_PORT lub 5000).")
    p.add_argument("--debug", action="store_true", help="Tryb debug Flask.")
    p.set_defaults(func=run)
