"""reconstruct/errors.py — wyjątki rdzenia."""

from __future__ import annotations


class InputError(ValueError):
    """Niepoprawne argumenty wywołania (np. requested_numbers nie są liczbami całkowitymi)."""


class ConfigError(ValueError):
    """Niepoprawny plik konfiguracji klasyfikatora."""

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = details or []
