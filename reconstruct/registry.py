"""
reconstruct/registry.py — rozpoznawanie numerów akapitów w oczyszczonych liniach.

Polityki (NumberingPolicy):
  strict      numer n jest ważny tylko gdy n == poprzedni_ważny + 1 (start od 0).
              Luka wstrzymuje rozpoznawanie, dopóki w dalszym tekście nie pojawi
              się brakujący numer — wtedy sekwencja biegnie dalej od niego.
  permissive  każda linia "^<cyfry>.\\s?<tekst>" dodaje swój numer, bez
              ograniczeń kolejności; duplikaty dozwolone.

Linia zaczynająca się od "0." ("0.5 por ciento…") nigdy nie daje numeru:
numery akapitów są dodatnie.

Zbiór jest budowany od nowa przy każdym wywołaniu (edycja tekstu może
przesunąć granice akapitów).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from data_model.paragraphs import LineRecord, NumberingPolicy
from reconstruct.patterns import PARAGRAPH_NUMBER_RE


def valid_numbers(
    cleaned_lines: Sequence[LineRecord],
    policy: NumberingPolicy | str = NumberingPolicy.PERMISSIVE,
) -> frozenset[int]:
    return frozenset(_scan(cleaned_lines, NumberingPolicy(policy)))


def ordered_numbers(
    cleaned_lines: Sequence[LineRecord],
    policy: NumberingPolicy | str = NumberingPolicy.PERMISSIVE,
) -> list[int]:
    """Te same numery co valid_numbers(), bez powtórzeń, w kolejności pierwszego wystąpienia."""
    seen: set[int] = set()
    out: list[int] = []
    for number in _scan(cleaned_lines, NumberingPolicy(policy)):
        if number not in seen:
            seen.add(number)
            out.append(number)
    return out


def _scan(cleaned_lines: Sequence[LineRecord], policy: NumberingPolicy) -> Iterator[int]:
    previous = 0
    for rec in cleaned_lines:
        m = PARAGRAPH_NUMBER_RE.match(rec.trimmed_text)
        if not m:
            continue
        number = int(m.group(1))
        if number < 1:
            continue
        if policy is NumberingPolicy.PERMISSIVE:
            yield number
        elif number == previous + 1:
            previous = number
            yield number
