"""
validator — walidacja ciał żądań API względem schematów JSON.

Interfejs publiczny:
    parse_save_edited(payload)        -> (pdf_id, edited_text)
    parse_extract(payload)            -> (pdf_id, numbers, policy)
    parse_extract_all(payload)        -> (pdf_id, policy)
    parse_paragraph_numbers(raw)      -> tuple[int, ...]
    RequestError, ValidationError, ErrorCode — typy błędów

Typowe użycie:
    from validator import parse_extract, RequestError

    try:
        pdf_id, numbers, policy = parse_extract(request.get_json(silent=True))
    except RequestError as e:
        return jsonify(e.to_dict()), 400
"""

from .types import ErrorCode, RequestError, ValidationError
from .request_validator import (
    parse_extract,
    parse_extract_all,
    parse_paragraph_numbers,
    parse_save_edited,
    validate_payload,
)

__all__ = [
    "ErrorCode",
    "RequestError",
    "ValidationError",
    "parse_extract",
    "parse_extract_all",
    "parse_paragraph_numbers",
    "parse_save_edited",
    "validate_payload",
]
