"""Request validator tests: schematy ciał żądań i paragraphNumbers."""

import pytest

from data_model.paragraphs import NumberingPolicy
from validator import (
    ErrorCode,
    RequestError,
    parse_extract,
    parse_extract_all,
    parse_paragraph_numbers,
    parse_save_edited,
)


def test_parse_extract_with_array():
    pdf_id, numbers, policy = parse_extract({"pdfId": "a.pdf_1", "paragraphNumbers": [3, 1]})
    assert pdf_id == "a.pdf_1"
    assert numbers == (3, 1)
    assert policy is NumberingPolicy.PERMISSIVE


def test_parse_extract_with_json_string_and_policy():
    _, numbers, policy = parse_extract({
        "pdfId": "a.pdf_1",
        "paragraphNumbers": "[1, 2, 5]",
        "policy": "strict",
    })
    assert numbers == (1, 2, 5)
    assert policy is NumberingPolicy.STRICT


def test_parse_extract_all_defaults_to_strict():
    assert parse_extract_all({"pdfId": "a.pdf_1"}) == ("a.pdf_1", NumberingPolicy.STRICT)


def test_parse_save_edited():
    assert parse_save_edited({"pdfId": "a.pdf_1", "editedText": ""}) == ("a.pdf_1", "")


@pytest.mark.parametrize("payload", [
    {"paragraphNumbers": [1]},
    {"pdfId": "", "paragraphNumbers": [1]},
    {"pdfId": "a.pdf_1"},
    {"pdfId": 7, "paragraphNumbers": [1]},
    {"pdfId": "a.pdf_1", "paragraphNumbers": [1], "policy": "loose"},
])
def test_missing_or_invalid_fields(payload):
    with pytest.raises(RequestError, match="Missing required fields") as exc_info:
        parse_extract(payload)
    assert all(e.code is ErrorCode.SCHEMA_VIOLATION for e in exc_info.value.errors)


@pytest.mark.parametrize("payload", [None, [], "pdfId"])
def test_body_must_be_object(payload):
    with pytest.raises(RequestError) as exc_info:
        parse_save_edited(payload)
    assert exc_info.value.errors[0].code is ErrorCode.BODY_NOT_OBJECT


def test_numbers_not_json():
    with pytest.raises(RequestError, match="Invalid paragraphNumbers format") as exc_info:
        parse_paragraph_numbers("[1, 2")
    assert exc_info.value.errors[0].code is ErrorCode.NUMBERS_NOT_JSON


def test_numbers_not_array():
    with pytest.raises(RequestError, match="must be an array") as exc_info:
        parse_paragraph_numbers('{"a": 1}')
    assert exc_info.value.errors[0].code is ErrorCode.NUMBERS_NOT_ARRAY


def test_numbers_must_be_positive_integers():
    with pytest.raises(RequestError) as exc_info:
        parse_paragraph_numbers([1, 0, "3"])
    paths = [e.path for e in exc_info.value.errors]
    assert paths == ["/paragraphNumbers/1", "/paragraphNumbers/2"]


def test_integral_floats_become_int():
    assert parse_paragraph_numbers([1.0, 2]) == (1, 2)
    assert all(type(n) is int for n in parse_paragraph_numbers([1.0]))


def test_request_error_to_dict():
    with pytest.raises(RequestError) as exc_info:
        parse_paragraph_numbers("x")
    body = exc_info.value.to_dict()
    assert body["error"] == "Invalid paragraphNumbers format."
    assert body["details"][0]["code"] == "E_NUMBERS_NOT_JSON"
    assert body["details"][0]["path"] == "/paragraphNumbers"
