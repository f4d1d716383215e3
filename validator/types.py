"""
validator/types.py — kody błędów i wyjątek walidacji żądań API.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer i komunikatem.
RequestError    — wyjątek niosący listę błędów; warstwa web mapuje go na 400.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów walidacji żądań."""

    SCHEMA_VIOLATION   = "E_SCHEMA_VIOLATION"
    BODY_NOT_OBJECT    = "E_BODY_NOT_OBJECT"
    NUMBERS_NOT_JSON   = "E_NUMBERS_NOT_JSON"
    NUMBERS_NOT_ARRAY  = "E_NUMBERS_NOT_ARRAY"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:    stały identyfikator klasy błędu (ErrorCode)
    - path:    JSON Pointer do miejsca błędu, np. "/paragraphNumbers/2"
    - message: czytelny opis błędu
    """

    code: ErrorCode
    path: str
    message: str

    def to_dict(self) -> dict:
        d = asdict(self)
        d["code"] = str(self.code)
        return d


class RequestError(ValueError):
    def __init__(self, message: str, errors: list[ValidationError] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict:
        return {
            "error": str(self),
            "details": [e.to_dict() for e in self.errors],
        }
