"""
reconstruct/assembler.py — składanie treści jednego akapitu numerowanego.

Algorytm dla numeru n:
  1. Pierwsza oczyszczona linia pasująca do "^n.\\s?" (brak → None, nigdy wyjątek).
  2. Akumulator zaczyna się od tej linii.
  3. Kolejne linie:
       - STOP (linia nie wchodzi): akapit "<m>." z m w valid_numbers,
         tytuł sekcji, tytuł podsekcji
       - POMIŃ: cytat, początek przypisu, resztkowy szum
       - po przypisie (footnote_recovery): pomijaj "twarde" kontynuacje,
         dopiero miękka kontynuacja wznawia treść akapitu
       - inaczej: doklej z jedną spacją (bez spacji przed przecinkiem)
  4. Usuń prefiks "n.", znormalizuj białe znaki, strip().

Przy duplikatach numeracji (polityka permissive) wygrywa pierwsze wystąpienie
w dokumencie; późniejsze duplikaty są nieosiągalne.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence

from data_model.paragraphs import NOISE_KINDS, LineKind, LineRecord, ParagraphRecord
from reconstruct.classifier import classify
from reconstruct.config import DEFAULT_CONFIG, ReconstructionConfig
from reconstruct.patterns import PARAGRAPH_START_RE, paragraph_prefix_re

_WS_RE = re.compile(r"\s+")

_STOP_KINDS = frozenset({LineKind.SECTION_TITLE, LineKind.SUBSECTION_TITLE})
_SKIP_KINDS = NOISE_KINDS | {LineKind.CITATION}


def assemble(
    cleaned_lines: Sequence[LineRecord],
    valid_numbers: Collection[int],
    number: int,
    config: ReconstructionConfig | None = None,
) -> ParagraphRecord | None:
    config = config or DEFAULT_CONFIG
    prefix = paragraph_prefix_re(number)

    start = find_start(cleaned_lines, number)
    if start is None:
        return None

    text = cleaned_lines[start].trimmed_text
    in_footnote = False

    for rec in cleaned_lines[start + 1:]:
        line = rec.trimmed_text

        m = PARAGRAPH_START_RE.match(line)
        if m and int(m.group(1)) in valid_numbers:
            break

        cls = classify(line, config)
        if cls.kind in _STOP_KINDS:
            break
        if cls.kind in _SKIP_KINDS:
            continue
        if cls.kind is LineKind.FOOTNOTE_START:
            in_footnote = config.footnote_recovery
            continue
        if in_footnote:
            if not (cls.kind is LineKind.CONTINUATION and cls.soft):
                continue
            in_footnote = False

        text = _append(text, line)

    body = prefix.sub("", text, count=1)
    return ParagraphRecord(number=number, text=_normalize(body))


def find_start(cleaned_lines: Sequence[LineRecord], number: int) -> int | None:
    """Indeks pierwszej linii zaczynającej akapit o danym numerze."""
    prefix = paragraph_prefix_re(number)
    for i, rec in enumerate(cleaned_lines):
        if prefix.match(rec.trimmed_text):
            return i
    return None


def _append(acc: str, line: str) -> str:
    if not line:
        return acc
    if line.startswith(","):
        return acc.rstrip() + line
    if acc.endswith(" "):
        return acc + line
    return f"{acc} {line}"


def _normalize(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()
