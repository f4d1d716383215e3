"""Reconstruction config tests: nakładanie na domyślne, walidacja, AKP_CONFIG."""

import json

import pytest

from data_model.paragraphs import LineKind
from reconstruct.classifier import classify
from reconstruct.config import (
    DEFAULT_CONFIG,
    config_from_env,
    config_from_mapping,
    load_config,
)
from reconstruct.errors import ConfigError


def test_defaults():
    assert DEFAULT_CONFIG.footnote_recovery is True
    assert "Véase" in DEFAULT_CONFIG.citation_intro_words
    assert "A/HRC" in DEFAULT_CONFIG.institutional_prefixes


def test_mapping_replaces_lists():
    config = config_from_mapping({"section_keywords": ["RESUMEN"]})
    assert config.section_keywords == ("RESUMEN",)
    assert classify("RESUMEN", config).kind is LineKind.SECTION_TITLE
    assert classify("INTRODUCCIÓN", config).kind is LineKind.CONTINUATION
    # pozostałe pola bez zmian
    assert config.citation_intro_words == DEFAULT_CONFIG.citation_intro_words


def test_mapping_extends_defaults():
    config = config_from_mapping({
        "extend_defaults": True,
        "section_keywords": ["RESUMEN", "ANEXO"],
    })
    assert config.section_keywords == DEFAULT_CONFIG.section_keywords + ("RESUMEN",)


def test_mapping_sets_footnote_recovery():
    assert config_from_mapping({"footnote_recovery": False}).footnote_recovery is False


def test_empty_mapping_equals_default():
    assert config_from_mapping({}) == DEFAULT_CONFIG


@pytest.mark.parametrize("data", [
    {"unknown_key": []},
    {"section_keywords": "RESUMEN"},
    {"section_keywords": [""]},
    {"footnote_recovery": "yes"},
    ["RESUMEN"],
])
def test_invalid_mapping_raises_config_error(data):
    with pytest.raises(ConfigError) as exc_info:
        config_from_mapping(data)
    assert exc_info.value.details


def test_load_config(tmp_path):
    path = tmp_path / "akp.json"
    path.write_text(json.dumps({"footnote_safe_words": ["Naciones"]}), encoding="utf-8")
    assert load_config(path).footnote_safe_words == ("Naciones",)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "brak.json")


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "akp.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_from_env(tmp_path, monkeypatch):
    monkeypatch.delenv("AKP_CONFIG", raising=False)
    assert config_from_env() is DEFAULT_CONFIG

    path = tmp_path / "akp.json"
    path.write_text(json.dumps({"footnote_recovery": False}), encoding="utf-8")
    monkeypatch.setenv("AKP_CONFIG", str(path))
    assert config_from_env().footnote_recovery is False


def test_config_is_hashable():
    assert hash(config_from_mapping({})) == hash(DEFAULT_CONFIG)
