"""CLI tests: lista numerów, parser argumentów, komendy na plikach tekstowych."""

import argparse
import json

import pytest

from akp.cli import build_parser, main
from akp.commands.apply_schema import split_statements
from akp.commands.extract import parse_number_list


@pytest.mark.parametrize("spec,expected", [
    ("1", [1]),
    ("1,2,5-7", [1, 2, 5, 6, 7]),
    (" 3 , 1 ", [3, 1]),
    ("4-4", [4]),
    ("2,2", [2, 2]),
    ("1,,2", [1, 2]),
])
def test_parse_number_list(spec, expected):
    assert parse_number_list(spec) == expected


@pytest.mark.parametrize("spec", ["", "a", "7-3", "1-", "-2", "1.5"])
def test_parse_number_list_rejects(spec):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_number_list(spec)


def test_extract_arguments(monkeypatch):
    monkeypatch.delenv("AKP_POLICY", raising=False)
    args = build_parser().parse_args(["extract", "raport.txt", "-n", "1,3-4", "--json"])
    assert args.numbers == [1, 3, 4]
    assert args.policy == "permissive"
    assert args.json is True
    assert args.keywords is False


def test_numbers_defaults_to_strict(monkeypatch):
    monkeypatch.delenv("AKP_POLICY", raising=False)
    args = build_parser().parse_args(["numbers", "raport.txt"])
    assert args.policy == "strict"


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_extract_json_output(tmp_path, capsys, simple_text):
    path = tmp_path / "raport.txt"
    path.write_text(simple_text, encoding="utf-8")

    main(["extract", str(path), "-n", "2,1", "--json"])

    out = json.loads(capsys.readouterr().out)
    assert out == [
        {"number": 2, "text": "Segunda oración del párrafo dos que continúa en la siguiente línea."},
        {"number": 1, "text": "Primera oración del párrafo uno."},
    ]


def test_extract_warns_about_missing_numbers(tmp_path, capsys, simple_text):
    path = tmp_path / "raport.txt"
    path.write_text(simple_text, encoding="utf-8")

    main(["extract", str(path), "-n", "1,40-42", "--json"])

    captured = capsys.readouterr()
    assert [p["number"] for p in json.loads(captured.out)] == [1]
    assert "40, 41, 42" in captured.err


def test_extract_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["extract", str(tmp_path / "brak.txt"), "-n", "1"])
    assert exc_info.value.code == 1


def test_extract_invalid_config(tmp_path, simple_text):
    path = tmp_path / "raport.txt"
    path.write_text(simple_text, encoding="utf-8")
    config = tmp_path / "akp.json"
    config.write_text('{"nieznane": 1}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["extract", str(path), "-n", "1", "--config", str(config)])
    assert exc_info.value.code == 1


def test_split_statements():
    sql = "\n".join([
        "-- komentarz",
        "CREATE TABLE IF NOT EXISTS a (",
        "    x int",
        ");",
        "",
        "CREATE INDEX IF NOT EXISTS a_x_idx ON a (x);",
        "-- tylko komentarz",
    ])
    assert split_statements(sql) == [
        "CREATE TABLE IF NOT EXISTS a (\n    x int\n);",
        "CREATE INDEX IF NOT EXISTS a_x_idx ON a (x);",
    ]


def test_schema_file_splits_into_statements():
    from akp.commands.apply_schema import SCHEMA_PATH

    stmts = split_statements(SCHEMA_PATH.read_text(encoding="utf-8"))
    assert len(stmts) == 2
    assert "document_text" in stmts[0]
