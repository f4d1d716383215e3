"""
reconstruct/patterns.py — wzorce regex klasyfikatora linii.

Wzorce stałe (numery stron, symbole dokumentów, nagłówki sekcji) są
kompilowane raz przy imporcie. Wzorce zależne od konfiguracji (listy słów)
kompiluje compile_patterns(config) — wynik jest cache'owany per config
(ReconstructionConfig jest frozen, więc hashowalny).

Nagłówki sekcji/podsekcji są opisane listą HeadingPattern; testowane są
w kolejności, pierwszy pasujący wygrywa.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from reconstruct.config import ReconstructionConfig

# Klasy liter z diakrytykami (tekst hiszpański / francuski / angielski).
UPPER = "A-ZÁÉÍÓÚÜÑÀÈÌÒÙÇÂÊÎÔÛ"
LOWER = "a-záéíóúüñàèìòùçâêîôûœ"


def _p(pattern: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(pattern, flags | re.UNICODE)


# ---------------------------------------------------------------------------
# Szum strukturalny
# ---------------------------------------------------------------------------

SEPARATOR_RE     = _p(r"_{2,}")
PAGE_NUMBER_RE   = _p(r"^(?:-\s?\d+\s?-|\d+)$")
DOCUMENT_CODE_RE = _p(r"(?<!\d)\d{2}-\d{5}(?!\d)")
# "(S)", "(E)", "(SP)", ale nie "(2008)", to jest rok w przypisie
FORMAT_MARKER_RE = _p(r"^\((?!\d{4}\))[A-Za-z0-9]+\)$")

# Token, który może stać obok symbolu dokumentu w linii-stopce:
# "GE.08-63561", "(S)", "*0863561*", "270508"
_CODE_LINE_TOKEN_RE = _p(r"^(?:\S*(?<!\d)\d{2}-\d{5}(?!\d)\S*|\(\w+\)|\*?\d+\*?)$")


def is_document_code_only(trimmed: str) -> bool:
    """True gdy linia składa się wyłącznie z symbolu dokumentu i znaczników."""
    if not DOCUMENT_CODE_RE.search(trimmed):
        return False
    return all(_CODE_LINE_TOKEN_RE.match(tok) for tok in trimmed.split())


# ---------------------------------------------------------------------------
# Numery akapitów i przypisy
# ---------------------------------------------------------------------------

PARAGRAPH_START_RE  = _p(r"^(\d+)\.\s?")
PARAGRAPH_NUMBER_RE = _p(r"^(\d+)\.\s?(.+)")
FOOTNOTE_START_RE   = _p(rf"^\d+\s+([{UPPER}][{LOWER}]\w*)")
ENUMERATOR_RE       = _p(r"^\(?(?:[a-z]|\d+|[ivxlc]+)\)\s")
PAREN_YEAR_END_RE   = _p(r"\(\d{4}\)[.,;:]?$")
LOWERCASE_START_RE  = _p(rf"^[{LOWER}]")


@functools.lru_cache(maxsize=1024)
def paragraph_prefix_re(number: int) -> re.Pattern[str]:
    """Wzorzec początku akapitu o konkretnym numerze: "^12\\.\\s?"."""
    return _p(rf"^{number}\.\s?")


# ---------------------------------------------------------------------------
# Nagłówki
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HeadingPattern:
    regex: re.Pattern[str]
    label: str


SECTION_PATTERNS: list[HeadingPattern] = [
    # "A. Introducción", "B. El derecho a la educación"
    HeadingPattern(_p(rf"^[{UPPER}]\.\s+[{UPPER}][{LOWER}]+"), "letter"),
    # "IV. Conclusiones", "II. MARCO JURÍDICO"
    HeadingPattern(_p(rf"^[IVXLC]+\.\s+[{UPPER}]"), "roman"),
]

SUBSECTION_PATTERNS: list[HeadingPattern] = [
    # "a) Salud", "3) Vivienda", "iv) Educación": dokładnie jedno słowo
    HeadingPattern(_p(rf"^[a-z]\)\s+[{UPPER}][{LOWER}]+$"), "letter"),
    HeadingPattern(_p(rf"^\d+\)\s+[{UPPER}][{LOWER}]+$"), "digit"),
    HeadingPattern(_p(rf"^[ivxlc]+\)\s+[{UPPER}][{LOWER}]+$"), "roman"),
]


# ---------------------------------------------------------------------------
# Wzorce z konfiguracji
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CompiledPatterns:
    citation_intro:  re.Pattern[str] | None
    institutional:   re.Pattern[str] | None
    section_keyword: re.Pattern[str] | None
    safe_words:      frozenset[str]
    connector:       re.Pattern[str] | None


def _alternation(words: tuple[str, ...]) -> str:
    # Dłuższe frazy najpierw, żeby "Observación general" wygrało z "Observación".
    ordered = sorted(set(words), key=len, reverse=True)
    return "|".join(re.escape(w) for w in ordered)


@functools.lru_cache(maxsize=32)
def compile_patterns(config: ReconstructionConfig) -> CompiledPatterns:
    citation_intro = None
    if config.citation_intro_words:
        citation_intro = _p(
            rf"^\d+\.?\s*(?:{_alternation(config.citation_intro_words)})(?!\w)",
            re.IGNORECASE,
        )

    institutional = None
    if config.institutional_prefixes:
        institutional = _p(
            rf"(?<![\w/.])(?:{_alternation(config.institutional_prefixes)})(?![A-Za-z])"
        )

    section_keyword = None
    if config.section_keywords:
        section_keyword = _p(
            rf"^(?:{_alternation(config.section_keywords)})[.:]?$",
            re.IGNORECASE,
        )

    connector = None
    if config.connector_words:
        connector = _p(
            rf"^(?:{_alternation(config.connector_words)})(?!\w)",
            re.IGNORECASE,
        )

    return CompiledPatterns(
        citation_intro=citation_intro,
        institutional=institutional,
        section_keyword=section_keyword,
        safe_words=frozenset(config.footnote_safe_words),
        connector=connector,
    )
