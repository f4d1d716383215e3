"""
reconstruct/pipeline.py — publiczne API rekonstrukcji akapitów.

Przepływ:
  tekst → clean_lines() → valid_numbers() → assemble() per żądany numer
        → list[ParagraphRecord] (kolejność żądania, nie dokumentu)

Numery spoza rozpoznanego zbioru są pomijane bez błędu. Jedyny wyjątek
rzucany przez rdzeń to InputError dla niepoprawnych argumentów — przed
jakimkolwiek przetwarzaniem.

Funkcje publiczne:
  extract_paragraphs(text, numbers, policy, config)  -> list[ParagraphRecord]
  extract_all_paragraphs(text, policy, config)       -> list[ParagraphRecord]
  paragraph_numbers(text, policy, config)            -> list[int]
  run_request(request, config)                       -> list[ParagraphRecord]
  validate_requested_numbers(numbers)                -> tuple[int, ...]
  coerce_policy(policy)                              -> NumberingPolicy
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.paragraphs import ExtractionRequest, NumberingPolicy, ParagraphRecord
from reconstruct.assembler import assemble
from reconstruct.config import DEFAULT_CONFIG, ReconstructionConfig
from reconstruct.errors import InputError
from reconstruct.noise_filter import clean_lines
from reconstruct.registry import ordered_numbers, valid_numbers


def extract_paragraphs(
    document_text: str,
    requested_numbers: Sequence[int],
    policy: NumberingPolicy | str = NumberingPolicy.PERMISSIVE,
    config: ReconstructionConfig | None = None,
) -> list[ParagraphRecord]:
    numbers = validate_requested_numbers(requested_numbers)
    policy = coerce_policy(policy)
    if not isinstance(document_text, str):
        raise InputError("document_text musi być napisem (str).")

    config = config or DEFAULT_CONFIG
    cleaned = clean_lines(document_text, config)
    valid = valid_numbers(cleaned, policy)

    # Rekordy są niemutowalne; powtórzone żądanie dostaje identyczny rekord.
    assembled: dict[int, ParagraphRecord | None] = {}
    out: list[ParagraphRecord] = []
    for number in numbers:
        if number not in valid:
            continue
        if number not in assembled:
            assembled[number] = assemble(cleaned, valid, number, config)
        record = assembled[number]
        if record is not None:
            out.append(record)
    return out


def paragraph_numbers(
    document_text: str,
    policy: NumberingPolicy | str = NumberingPolicy.STRICT,
    config: ReconstructionConfig | None = None,
) -> list[int]:
    """Rozpoznane numery akapitów w kolejności pierwszego wystąpienia."""
    policy = coerce_policy(policy)
    cleaned = clean_lines(document_text, config or DEFAULT_CONFIG)
    return ordered_numbers(cleaned, policy)


def extract_all_paragraphs(
    document_text: str,
    policy: NumberingPolicy | str = NumberingPolicy.STRICT,
    config: ReconstructionConfig | None = None,
) -> list[ParagraphRecord]:
    numbers = paragraph_numbers(document_text, policy, config)
    if not numbers:
        return []
    return extract_paragraphs(document_text, numbers, policy, config)


def run_request(
    request: ExtractionRequest,
    config: ReconstructionConfig | None = None,
) -> list[ParagraphRecord]:
    return extract_paragraphs(
        request.document_text,
        request.requested_numbers,
        request.policy,
        config,
    )


def validate_requested_numbers(numbers: object) -> tuple[int, ...]:
    """
    Sprawdza, że numbers to sekwencja dodatnich liczb całkowitych.

    Napisy, bajty, zbiory i słowniki są odrzucane (brak kolejności lub to nie
    liczby); bool też, choć w Pythonie jest podklasą int.
    """
    if isinstance(numbers, (str, bytes, bytearray)) or not isinstance(numbers, Sequence):
        raise InputError(
            f"requested_numbers musi być sekwencją liczb całkowitych, "
            f"otrzymano {type(numbers).__name__}."
        )
    for i, value in enumerate(numbers):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InputError(
                f"requested_numbers[{i}] = {value!r} nie jest liczbą całkowitą."
            )
        if value < 1:
            raise InputError(
                f"requested_numbers[{i}] = {value} — numer akapitu musi być dodatni."
            )
    return tuple(numbers)


def coerce_policy(policy: NumberingPolicy | str) -> NumberingPolicy:
    try:
        return NumberingPolicy(policy)
    except ValueError:
        allowed = ", ".join(p.value for p in NumberingPolicy)
        raise InputError(f"Nieznana polityka numeracji {policy!r} (dozwolone: {allowed}).") from None
