"""
reconstruct/config.py — konfigurowalne listy słów klasyfikatora linii.

Heurystyki cytatów i przypisów dają fałszywe trafienia na zwykłym tekście,
dlatego listy nie są stałymi w kodzie, tylko konfiguracją:

  citation_intro_words    słowa otwierające przypis-cytat ("12 Véase ...")
  institutional_prefixes  prefiksy symboli dokumentów ONZ ("A/HRC", "CCPR/C")
  section_keywords        samodzielne nagłówki sekcji ("INTRODUCCIÓN", "ANNEX")
  footnote_safe_words     słowa po "<cyfry> ", które NIE otwierają przypisu
                          ("15 Estados miembros ..." to zwykła kontynuacja)
  connector_words         spójniki/frazy, od których zaczyna się kontynuacja zdania
  footnote_recovery       po przypisie pomijaj linie aż do "miękkiej" kontynuacji

Plik JSON (AKP_CONFIG lub --config) nadpisuje wartości domyślne; przy
"extend_defaults": true listy są doklejane do domyślnych zamiast je zastępować.

Publiczne API:
  DEFAULT_CONFIG
  load_config(path)        -> ReconstructionConfig
  config_from_env()        -> ReconstructionConfig
"""

from __future__ import annotations

import dataclasses
import json
import os
import pathlib
from dataclasses import dataclass
from typing import Any

import jsonschema

from reconstruct.errors import ConfigError

_ENV_KEY = "AKP_CONFIG"

_LIST_FIELDS = (
    "citation_intro_words",
    "institutional_prefixes",
    "section_keywords",
    "footnote_safe_words",
    "connector_words",
)


@dataclass(frozen=True, slots=True)
class ReconstructionConfig:
    citation_intro_words: tuple[str, ...] = (
        # es
        "Véase", "Ver", "Cf.", "Vid.", "Ibid.", "Ibíd.",
        "Declaración", "Convención", "Pacto", "Tratado",
        "Observación general", "Recomendación general",
        "art.", "apartado", "párrafo",
        # en
        "See", "Convention", "Declaration", "Covenant", "Treaty",
        "General comment", "General recommendation",
    )
    institutional_prefixes: tuple[str, ...] = (
        "A/HRC", "A/RES", "A/CONF", "E/CN", "E/C.12",
        "CEDAW/C", "CCPR/C", "CERD/C", "CRC/C", "CAT/C",
        "CMW/C", "CRPD/C", "CED/C", "HRI/GEN",
    )
    section_keywords: tuple[str, ...] = (
        "INTRODUCCIÓN", "CONCLUSIONES", "RECOMENDACIONES", "ANEXO", "ANEXOS",
        "INTRODUCTION", "CONCLUSIONS", "RECOMMENDATIONS", "ANNEX", "ANNEXES",
    )
    footnote_safe_words: tuple[str, ...] = (
        "Estados", "Miembros", "Partes", "Gobiernos",
        "States", "Member", "Parties", "Governments",
    )
    connector_words: tuple[str, ...] = (
        "otra", "otras", "otro", "otros",
        "de", "en", "con", "y", "o", "u", "las", "los", "del", "pero", "sin",
        "aunque", "por", "que", "cuando", "si", "mientras", "además", "también",
        "así", "como", "pues", "porque", "a pesar", "no obstante", "sin embargo",
        "and", "or", "but", "nor", "whereas", "which", "including",
    )
    footnote_recovery: bool = True


DEFAULT_CONFIG = ReconstructionConfig()


CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        **{
            name: {
                "type": "array",
                "items": {"type": "string", "minLength": 1},
            }
            for name in _LIST_FIELDS
        },
        "footnote_recovery": {"type": "boolean"},
        "extend_defaults":   {"type": "boolean"},
    },
}


def config_from_mapping(data: dict[str, Any]) -> ReconstructionConfig:
    """Waliduje słownik (JSON Schema) i nakłada go na DEFAULT_CONFIG."""
    validator = jsonschema.Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        details = [
            ("/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/")
            + f": {e.message}"
            for e in errors
        ]
        raise ConfigError("Niepoprawna konfiguracja klasyfikatora.", details)

    extend = data.get("extend_defaults", False)
    changes: dict[str, Any] = {}
    for name in _LIST_FIELDS:
        if name not in data:
            continue
        values = tuple(data[name])
        if extend:
            base = getattr(DEFAULT_CONFIG, name)
            values = base + tuple(v for v in values if v not in base)
        changes[name] = values
    if "footnote_recovery" in data:
        changes["footnote_recovery"] = data["footnote_recovery"]

    return dataclasses.replace(DEFAULT_CONFIG, **changes)


def load_config(path: str | pathlib.Path) -> ReconstructionConfig:
    p = pathlib.Path(path)
    if not p.exists():
        raise ConfigError(f"Plik konfiguracji nie istnieje: {p}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Plik konfiguracji nie jest poprawnym JSON: {e}") from e
    return config_from_mapping(data)


def config_from_env() -> ReconstructionConfig:
    """Konfiguracja z pliku wskazanego przez AKP_CONFIG; bez zmiennej — domyślna."""
    path = os.getenv(_ENV_KEY)
    if not path:
        return DEFAULT_CONFIG
    return load_config(path)
