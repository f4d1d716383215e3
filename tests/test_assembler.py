"""
Paragraph assembler tests.

Granice akapitu, pomijanie cytatów i przypisów, powrót po przypisie,
łączenie linii i normalizacja białych znaków.
"""

import dataclasses

from data_model.paragraphs import ParagraphRecord
from reconstruct.assembler import assemble, find_start
from reconstruct.config import DEFAULT_CONFIG
from reconstruct.noise_filter import clean_lines


def _assemble(text, number, valid=None, config=None):
    lines = clean_lines(text)
    if valid is None:
        valid = {number}
    return assemble(lines, valid, number, config)


def test_missing_number_returns_none():
    assert _assemble("1. Uno.\n2. Dos.", 7) is None


def test_find_start_uses_first_occurrence():
    lines = clean_lines("1. Primero.\n2. Dos.\n1. Duplicado.")
    assert find_start(lines, 1) == 0
    assert assemble(lines, {1, 2}, 1) == ParagraphRecord(1, "Primero.")


def test_stops_only_at_valid_number():
    text = "1. El Comité recuerda\n2. lo dicho antes.\n3. Otro."
    assert _assemble(text, 1, valid={1, 3}).text == "El Comité recuerda 2. lo dicho antes."
    assert _assemble(text, 1, valid={1, 2, 3}).text == "El Comité recuerda"


def test_stops_at_section_and_subsection_titles():
    text = "1. Texto del párrafo\nB. Marco jurídico\ncontinúa aquí."
    assert _assemble(text, 1).text == "Texto del párrafo"
    text = "1. Texto del párrafo\na) Salud\ncontinúa aquí."
    assert _assemble(text, 1).text == "Texto del párrafo"


def test_skips_citation_lines():
    text = "1. El Comité recuerda\nCCPR/C/GC/34, párr. 3.\nsu observación general."
    assert _assemble(text, 1).text == "El Comité recuerda su observación general."


def test_skips_line_with_embedded_document_code():
    text = "1. El informe\nInforme 08-63561 del Comité\nfue aprobado."
    assert _assemble(text, 1).text == "El informe fue aprobado."


def test_footnote_recovery_waits_for_soft_continuation():
    text = "\n".join([
        "1. Los Estados deben adoptar medidas",
        "3 Informe anual del Comité, párr. 4.",
        "Documento oficial de la Asamblea.",
        "y eficaces para proteger a los migrantes.",
    ])
    record = _assemble(text, 1)
    assert record.text == "Los Estados deben adoptar medidas y eficaces para proteger a los migrantes."


def test_footnote_recovery_disabled_keeps_hard_lines():
    text = "\n".join([
        "1. Los Estados deben adoptar medidas",
        "3 Informe anual del Comité, párr. 4.",
        "Documento oficial de la Asamblea.",
        "y eficaces.",
    ])
    config = dataclasses.replace(DEFAULT_CONFIG, footnote_recovery=False)
    record = _assemble(text, 1, config=config)
    assert record.text == "Los Estados deben adoptar medidas Documento oficial de la Asamblea. y eficaces."


def test_no_space_before_comma():
    text = "1. El Comité\n, en su informe,\nrecomienda."
    assert _assemble(text, 1).text == "El Comité, en su informe, recomienda."


def test_prefix_stripped_and_whitespace_collapsed():
    assert _assemble("1.   Texto   con \t espacios  ", 1).text == "Texto con espacios"
    assert _assemble("12.Texto pegado", 12).text == "Texto pegado"


def test_prefix_of_other_number_does_not_match():
    # "12." nie jest początkiem akapitu 1
    lines = clean_lines("12. Doce.\n1. Uno.")
    assert find_start(lines, 1) == 1
