"""
reconstruct/noise_filter.py — usuwanie szumu strukturalnego przed rozpoznaniem numerów.

Co usuwamy:
  - Bloki przypisów: od linii separatora "____" do terminatora (następny numer
    strony albo następny akapit numerowany, który sam nie jest cytatem)
  - Numery stron ("-4-", "17")
  - Linie zawierające wyłącznie symbol dokumentu ("08-63561", "GE.08-63561 (S)")
  - Samotne znaczniki formatu ("(S)")
  - Każdą linię z podkreślnikiem oraz puste linie

Wejście nie jest modyfikowane; wynik to nowa krotka LineRecord z zachowanymi
indeksami linii źródłowych (kolejność dokumentu).

Znany przypadek stratny: separator bez terminatora wycina wszystko do końca
dokumentu. To jest akceptowane i nie jest maskowane.

Publiczne API:
  split_lines(text)                 -> tuple[LineRecord, ...]
  strip_footnote_blocks(lines, cfg) -> tuple[LineRecord, ...]
  clean_lines(text | lines, cfg)    -> tuple[LineRecord, ...]
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.paragraphs import LineKind, LineRecord
from reconstruct.classifier import classify
from reconstruct.config import DEFAULT_CONFIG, ReconstructionConfig
from reconstruct.patterns import PARAGRAPH_START_RE, is_document_code_only

_DROPPED_KINDS = frozenset({
    LineKind.BLANK,
    LineKind.PAGE_NUMBER,
    LineKind.FORMAT_MARKER,
})


def split_lines(text: str) -> tuple[LineRecord, ...]:
    """Dzieli tekst na linie ("\\n", "\\r\\n", "\\r") z indeksami 0-based."""
    return tuple(
        LineRecord.from_raw(i, raw)
        for i, raw in enumerate(text.splitlines())
    )


def clean_lines(
    source: str | Sequence[LineRecord],
    config: ReconstructionConfig | None = None,
) -> tuple[LineRecord, ...]:
    """Pass 1 (bloki przypisów) + pass 2 (szum resztkowy)."""
    config = config or DEFAULT_CONFIG
    lines = split_lines(source) if isinstance(source, str) else tuple(source)
    kept = strip_footnote_blocks(lines, config)
    return tuple(rec for rec in kept if not _is_residual_noise(rec, config))


def strip_footnote_blocks(
    lines: Sequence[LineRecord],
    config: ReconstructionConfig | None = None,
) -> tuple[LineRecord, ...]:
    """
    Pass 1: wycina bloki przypisów otwierane linią separatora.

    Terminator bloku:
      - numer strony → wycinany razem z blokiem
      - akapit numerowany "<n>. " niebędący cytatem → zostaje (nowy akapit)
    Brak terminatora → wycięcie do końca dokumentu.
    """
    config = config or DEFAULT_CONFIG
    out: list[LineRecord] = []
    i = 0
    n = len(lines)

    while i < n:
        rec = lines[i]
        if classify(rec.trimmed_text, config).kind is not LineKind.SEPARATOR_RULE:
            out.append(rec)
            i += 1
            continue

        end = _find_block_end(lines, i + 1, config)
        if end is None:
            break
        i = end

    return tuple(out)


def _find_block_end(
    lines: Sequence[LineRecord],
    start: int,
    config: ReconstructionConfig,
) -> int | None:
    """
    Zwraca indeks pierwszej linii PO bloku przypisów albo None (brak terminatora).
    """
    for j in range(start, len(lines)):
        text = lines[j].trimmed_text
        kind = classify(text, config).kind
        if kind is LineKind.PAGE_NUMBER:
            return j + 1
        # Numerowana linia-cytat ("12. Véase ...") to wciąż treść przypisu.
        if PARAGRAPH_START_RE.match(text) and kind is not LineKind.CITATION:
            return j
    return None


def _is_residual_noise(rec: LineRecord, config: ReconstructionConfig) -> bool:
    text = rec.trimmed_text
    if "_" in text:
        return True
    kind = classify(text, config).kind
    if kind in _DROPPED_KINDS:
        return True
    return kind is LineKind.DOCUMENT_CODE and is_document_code_only(text)
