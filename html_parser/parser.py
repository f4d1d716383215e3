"""
html_parser/parser.py — tekst strony HTML jako linie dla rekonstrukcji akapitów.

Każdy "liść blokowy" (p, li, td, nagłówek… bez blokowych potomków) daje
jedną linię; <br> wewnątrz bloku dzieli ją na kilka. Kontenery (div z <p>
w środku) nie emitują własnego tekstu, żeby treść nie dublowała się.
Dalej tekst trafia do reconstruct jak tekst z PDF.
"""

from __future__ import annotations

from collections.abc import Iterator

import requests
from bs4 import BeautifulSoup, Tag

from pdf.extractor import IngestionError

_HEADINGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_BLOCKS = _HEADINGS + [
    "article", "aside", "blockquote", "dd", "div", "dt", "footer", "header",
    "li", "main", "ol", "p", "pre", "section", "table", "td", "th", "tr", "ul",
]
_NOISE = ["script", "style", "noscript", "nav", "form", "template"]

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


def _leaf_blocks(root: Tag) -> Iterator[Tag]:
    """Bloki bez blokowych potomków, w kolejności dokumentu. Nagłówek zawsze jest liściem."""
    for el in root.find_all(_BLOCKS):
        if el.find_parent(_HEADINGS) is not None:
            continue
        if el.name in _HEADINGS or el.find(_BLOCKS) is None:
            yield el


def _block_lines(block: Tag) -> Iterator[str]:
    for piece in block.get_text("\n", strip=True).splitlines():
        line = " ".join(piece.split())
        if line:
            yield line


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(_NOISE):
        tag.decompose()
    root = soup.body or soup
    return "\n".join(line for block in _leaf_blocks(root) for line in _block_lines(block))


def fetch_text(url: str, timeout: float = 30.0) -> str:
    """Pobiera stronę i zwraca jej tekst liniami; błąd sieci → IngestionError."""
    try:
        resp = requests.get(url, timeout=timeout, headers=_HEADERS)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise IngestionError(f"Nie można pobrać {url}: {e}") from e
    resp.encoding = resp.apparent_encoding or "utf-8"
    return html_to_text(resp.text)
