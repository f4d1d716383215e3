"""
data_model/paragraphs.py — typy rekonstrukcji akapitów numerowanych.

LineKind / LineClass  — zamknięty zbiór rodzajów linii (wynik klasyfikatora)
LineRecord            — linia dokumentu z indeksem źródłowym
ParagraphRecord       — wynik ekstrakcji: numer + oczyszczony tekst
ExtractionRequest     — parametry jednego wywołania ekstrakcji
NumberingPolicy       — polityka rozpoznawania numerów akapitów
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reconstruct.config import ReconstructionConfig


class LineKind(StrEnum):
    """Rodzaj linii; kolejność odpowiada kolejności reguł klasyfikatora."""

    BLANK            = "blank"
    SEPARATOR_RULE   = "separator_rule"
    PAGE_NUMBER      = "page_number"
    DOCUMENT_CODE    = "document_code"
    FORMAT_MARKER    = "format_marker"
    CITATION         = "citation"
    SECTION_TITLE    = "section_title"
    SUBSECTION_TITLE = "subsection_title"
    PARAGRAPH_START  = "paragraph_start"
    FOOTNOTE_START   = "footnote_start"
    CONTINUATION     = "continuation"


# Rodzaje, które są szumem strukturalnym (nigdy nie trafiają do treści akapitu).
NOISE_KINDS: frozenset[LineKind] = frozenset({
    LineKind.BLANK,
    LineKind.SEPARATOR_RULE,
    LineKind.PAGE_NUMBER,
    LineKind.DOCUMENT_CODE,
    LineKind.FORMAT_MARKER,
})


class NumberingPolicy(StrEnum):
    STRICT     = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class LineClass:
    """
    Wynik klasyfikacji jednej linii.

    - number: tylko dla PARAGRAPH_START (sparsowany numer akapitu)
    - soft:   tylko dla CONTINUATION — linia ewidentnie kontynuuje zdanie
              (mała litera, spójnik, wyliczenie); kończy przerwanie przypisem
    """

    kind: LineKind
    number: int | None = None
    soft: bool = False


@dataclass(frozen=True, slots=True)
class LineRecord:
    index: int           # 0-based indeks linii w tekście źródłowym
    raw_text: str
    trimmed_text: str

    @classmethod
    def from_raw(cls, index: int, raw_text: str) -> LineRecord:
        return cls(index=index, raw_text=raw_text, trimmed_text=raw_text.strip())

    def classify(self, config: ReconstructionConfig | None = None) -> LineClass:
        """Rodzaj liczony na żądanie — nie jest przechowywany w rekordzie."""
        from reconstruct.classifier import classify
        return classify(self.trimmed_text, config)


@dataclass(frozen=True, slots=True)
class ParagraphRecord:
    number: int
    text: str            # bez łamań linii, prefiksu numeru i podwójnych spacji

    def to_dict(self) -> dict:
        return {"number": self.number, "text": self.text}


@dataclass(frozen=True, slots=True)
class ExtractionRequest:
    document_text: str
    requested_numbers: tuple[int, ...]   # kolejność zachowana, duplikaty dozwolone
    policy: NumberingPolicy = NumberingPolicy.PERMISSIVE
