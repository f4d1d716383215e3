"""
validator/request_validator.py — walidacja ciał żądań HTTP (JSON Schema).

Etapy:
  A — ciało jest obiektem JSON zgodnym ze schematem endpointu
  B — paragraphNumbers: tablica JSON albo napis zawierający tablicę JSON
      (klient formularzowy wysyła JSON.stringify(lista)); elementy to
      dodatnie liczby całkowite

Każda funkcja parse_* zwraca już przekonwertowane wartości albo rzuca
RequestError z pełną listą błędów (nic nie jest przetwarzane częściowo).
"""

from __future__ import annotations

import json
from typing import Any

import jsonschema

from data_model.paragraphs import NumberingPolicy
from validator.types import ErrorCode, RequestError, ValidationError

MAX_ERRORS = 20

_POLICY = {"type": "string", "enum": [p.value for p in NumberingPolicy]}
_PDF_ID = {"type": "string", "minLength": 1}

SAVE_EDITED_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["pdfId", "editedText"],
    "properties": {
        "pdfId": _PDF_ID,
        "editedText": {"type": "string"},
    },
}

EXTRACT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["pdfId", "paragraphNumbers"],
    "properties": {
        "pdfId": _PDF_ID,
        "paragraphNumbers": {"type": ["array", "string"]},
        "policy": _POLICY,
    },
}

EXTRACT_ALL_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["pdfId"],
    "properties": {
        "pdfId": _PDF_ID,
        "policy": _POLICY,
    },
}

NUMBERS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {"type": "integer", "minimum": 1},
}


def validate_payload(payload: Any, schema: dict[str, Any], base_path: str = "") -> list[ValidationError]:
    validator = jsonschema.Draft202012Validator(schema)
    errors: list[ValidationError] = []
    for e in sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path)):
        path = base_path + (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else ("" if base_path else "/")
        )
        errors.append(ValidationError(
            code=ErrorCode.SCHEMA_VIOLATION,
            path=path,
            message=e.message,
        ))
        if len(errors) >= MAX_ERRORS:
            break
    return errors


def parse_save_edited(payload: Any) -> tuple[str, str]:
    _require_valid(payload, SAVE_EDITED_SCHEMA)
    return payload["pdfId"], payload["editedText"]


def parse_extract(payload: Any) -> tuple[str, tuple[int, ...], NumberingPolicy]:
    _require_valid(payload, EXTRACT_SCHEMA)
    numbers = parse_paragraph_numbers(payload["paragraphNumbers"])
    policy = NumberingPolicy(payload.get("policy", NumberingPolicy.PERMISSIVE))
    return payload["pdfId"], numbers, policy


def parse_extract_all(payload: Any) -> tuple[str, NumberingPolicy]:
    _require_valid(payload, EXTRACT_ALL_SCHEMA)
    policy = NumberingPolicy(payload.get("policy", NumberingPolicy.STRICT))
    return payload["pdfId"], policy


def parse_paragraph_numbers(raw: Any) -> tuple[int, ...]:
    """Tablica albo napis z tablicą JSON → krotka dodatnich int."""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise RequestError(
                "Invalid paragraphNumbers format.",
                [ValidationError(ErrorCode.NUMBERS_NOT_JSON, "/paragraphNumbers", str(e))],
            ) from e
    if not isinstance(raw, list):
        raise RequestError(
            "paragraphNumbers must be an array.",
            [ValidationError(
                ErrorCode.NUMBERS_NOT_ARRAY,
                "/paragraphNumbers",
                f"Oczekiwano tablicy, otrzymano {type(raw).__name__}.",
            )],
        )
    errors = validate_payload(raw, NUMBERS_SCHEMA, base_path="/paragraphNumbers")
    if errors:
        raise RequestError("Invalid paragraphNumbers format.", errors)
    # JSON Schema uznaje 3.0 za integer, normalizujemy do int.
    return tuple(int(n) for n in raw)


def _require_valid(payload: Any, schema: dict[str, Any]) -> None:
    if not isinstance(payload, dict):
        raise RequestError(
            "Missing required fields",
            [ValidationError(ErrorCode.BODY_NOT_OBJECT, "/", "Ciało żądania musi być obiektem JSON.")],
        )
    errors = validate_payload(payload, schema)
    if errors:
        raise RequestError("Missing required fields", errors)
