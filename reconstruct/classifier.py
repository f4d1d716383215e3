"""
reconstruct/classifier.py — klasyfikacja pojedynczej linii tekstu.

Kolejność reguł (pierwsza pasująca wygrywa):
   1. BLANK            pusta po strip()
   2. SEPARATOR_RULE   ciąg ≥2 podkreślników (otwiera blok przypisów)
   3. PAGE_NUMBER      "-4-" lub same cyfry
   4. DOCUMENT_CODE    zawiera symbol dokumentu "08-63561"
   5. FORMAT_MARKER    pojedynczy token w nawiasie, np. "(S)"
   6. CITATION         "<cyfry>[.] Véase ...", prefiks instytucjonalny
                       ("A/HRC/7/3") lub rok w nawiasie na końcu linii
   7. SECTION_TITLE    "A. Título", "IV. Título", "INTRODUCCIÓN"
   8. SUBSECTION_TITLE "a) Título" — wyliczenie + jedno słowo
   9. PARAGRAPH_START  "^<cyfry>.\\s?"
  10. FOOTNOTE_START   "<cyfry> <Słowo>" (cyfra + spacja, bez kropki),
                       chyba że słowo jest na liście footnote_safe_words
  11. CONTINUATION     wszystko inne; soft=True gdy linia zaczyna się małą
                       literą, spójnikiem z konfiguracji lub wyliczeniem

Publiczne API:
  classify(trimmed_line, config) -> LineClass
  is_citation(trimmed_line, config) -> bool
"""

from __future__ import annotations

from data_model.paragraphs import LineClass, LineKind
from reconstruct.config import DEFAULT_CONFIG, ReconstructionConfig
from reconstruct.patterns import (
    DOCUMENT_CODE_RE,
    ENUMERATOR_RE,
    FOOTNOTE_START_RE,
    FORMAT_MARKER_RE,
    LOWERCASE_START_RE,
    PAGE_NUMBER_RE,
    PARAGRAPH_START_RE,
    PAREN_YEAR_END_RE,
    SECTION_PATTERNS,
    SEPARATOR_RE,
    SUBSECTION_PATTERNS,
    CompiledPatterns,
    compile_patterns,
)

_BLANK      = LineClass(LineKind.BLANK)
_SEPARATOR  = LineClass(LineKind.SEPARATOR_RULE)
_PAGE       = LineClass(LineKind.PAGE_NUMBER)
_CODE       = LineClass(LineKind.DOCUMENT_CODE)
_MARKER     = LineClass(LineKind.FORMAT_MARKER)
_CITATION   = LineClass(LineKind.CITATION)
_SECTION    = LineClass(LineKind.SECTION_TITLE)
_SUBSECTION = LineClass(LineKind.SUBSECTION_TITLE)
_FOOTNOTE   = LineClass(LineKind.FOOTNOTE_START)
_HARD       = LineClass(LineKind.CONTINUATION, soft=False)
_SOFT       = LineClass(LineKind.CONTINUATION, soft=True)


def classify(line: str, config: ReconstructionConfig | None = None) -> LineClass:
    """
    Klasyfikuje linię. Oczekuje linii po strip(); dla bezpieczeństwa
    białe znaki na krańcach i tak są ignorowane.
    """
    text = line.strip()
    pats = compile_patterns(config or DEFAULT_CONFIG)

    if not text:
        return _BLANK
    if SEPARATOR_RE.search(text):
        return _SEPARATOR
    if PAGE_NUMBER_RE.match(text):
        return _PAGE
    if DOCUMENT_CODE_RE.search(text):
        return _CODE
    if FORMAT_MARKER_RE.match(text):
        return _MARKER
    if _is_citation(text, pats):
        return _CITATION
    if _is_section_title(text, pats):
        return _SECTION
    if any(p.regex.match(text) for p in SUBSECTION_PATTERNS):
        return _SUBSECTION

    m = PARAGRAPH_START_RE.match(text)
    if m:
        return LineClass(LineKind.PARAGRAPH_START, number=int(m.group(1)))

    m = FOOTNOTE_START_RE.match(text)
    if m and m.group(1) not in pats.safe_words:
        return _FOOTNOTE

    return _SOFT if _is_soft(text, pats) else _HARD


def is_citation(line: str, config: ReconstructionConfig | None = None) -> bool:
    return _is_citation(line.strip(), compile_patterns(config or DEFAULT_CONFIG))


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _is_citation(text: str, pats: CompiledPatterns) -> bool:
    if pats.citation_intro is not None and pats.citation_intro.match(text):
        return True
    if pats.institutional is not None and pats.institutional.search(text):
        return True
    return bool(PAREN_YEAR_END_RE.search(text))


def _is_section_title(text: str, pats: CompiledPatterns) -> bool:
    if any(p.regex.match(text) for p in SECTION_PATTERNS):
        return True
    return pats.section_keyword is not None and bool(pats.section_keyword.match(text))


def _is_soft(text: str, pats: CompiledPatterns) -> bool:
    if LOWERCASE_START_RE.match(text):
        return True
    if pats.connector is not None and pats.connector.match(text):
        return True
    return bool(ENUMERATOR_RE.match(text))
