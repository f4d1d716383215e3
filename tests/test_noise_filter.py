"""
Noise filter tests: bloki przypisów (pass 1) i szum resztkowy (pass 2).
"""

from data_model.paragraphs import LineRecord
from reconstruct.noise_filter import clean_lines, split_lines, strip_footnote_blocks


def _texts(lines):
    return [rec.trimmed_text for rec in lines]


def test_split_lines_keeps_indices_and_raw_text():
    lines = split_lines("  1. Uno.\r\nDos\n")
    assert lines == (
        LineRecord(index=0, raw_text="  1. Uno.", trimmed_text="1. Uno."),
        LineRecord(index=1, raw_text="Dos", trimmed_text="Dos"),
    )


def test_footnote_block_closed_by_page_number(footnote_text):
    cleaned = clean_lines(footnote_text)
    assert _texts(cleaned) == [
        "1. El Estado debe garantizar el acceso a la educación",
        "de todos los niños migrantes.",
        "2. El segundo párrafo trata de la salud.",
    ]
    # indeksy źródłowe zachowane (linie 1–4 wycięte)
    assert [rec.index for rec in cleaned] == [0, 5, 6]


def test_footnote_block_closed_by_paragraph_start_keeps_it():
    text = "\n".join([
        "1. Primer párrafo.",
        "_____",
        "1 Véase el informe.",
        "4. Nuevo párrafo.",
    ])
    assert _texts(clean_lines(text)) == ["1. Primer párrafo.", "4. Nuevo párrafo."]


def test_numbered_citation_does_not_close_block():
    text = "\n".join([
        "1. Primer párrafo.",
        "_____",
        "12. Véase el documento E/CN.4/2006/3.",
        "-5-",
        "3. Sigue el texto.",
    ])
    assert _texts(clean_lines(text)) == ["1. Primer párrafo.", "3. Sigue el texto."]


def test_unterminated_block_removes_rest_of_document():
    text = "\n".join([
        "1. Texto.",
        "_____",
        "1 Véase algo.",
        "Más texto sin número.",
    ])
    assert _texts(clean_lines(text)) == ["1. Texto."]


def test_residual_noise_is_dropped():
    text = "\n".join([
        "GE.08-63561 (S)",
        "",
        "1. Texto con _ subrayado",
        "2. Texto.",
        "-3-",
        "(S)",
        "Informe 08-63561 del Comité",
    ])
    # linia z symbolem i innym tekstem zostaje, pomija ją dopiero asembler
    assert _texts(clean_lines(text)) == ["2. Texto.", "Informe 08-63561 del Comité"]


def test_input_is_not_mutated(footnote_text):
    lines = split_lines(footnote_text)
    before = list(lines)
    strip_footnote_blocks(lines)
    clean_lines(lines)
    assert list(lines) == before


def test_clean_lines_accepts_records_and_text(simple_text):
    assert clean_lines(simple_text) == clean_lines(split_lines(simple_text))
