"""Paragraph number registry tests: polityka strict vs permissive."""

import pytest

from data_model.paragraphs import NumberingPolicy
from reconstruct.noise_filter import clean_lines
from reconstruct.registry import ordered_numbers, valid_numbers


def test_strict_stops_at_gap(gap_text):
    assert valid_numbers(clean_lines(gap_text), NumberingPolicy.STRICT) == {1, 2}


def test_permissive_accepts_every_numbered_line(gap_text):
    assert valid_numbers(clean_lines(gap_text), NumberingPolicy.PERMISSIVE) == {1, 2, 4, 5}


def test_permissive_is_default(gap_text):
    assert valid_numbers(clean_lines(gap_text)) == {1, 2, 4, 5}


def test_strict_resumes_from_stalled_value():
    lines = clean_lines("1. a\n2. b\n4. d\n3. c\n4. d bis\n6. f")
    assert valid_numbers(lines, "strict") == {1, 2, 3, 4}


def test_number_without_text_is_not_recognized():
    lines = clean_lines("1. Uno.\n2.\n3. Tres.")
    assert valid_numbers(lines, NumberingPolicy.PERMISSIVE) == {1, 3}


def test_zero_is_never_a_paragraph_number():
    lines = clean_lines("1. Uno.\n0.5 por ciento.\n00. Nada.\n2. Dos.")
    assert valid_numbers(lines, NumberingPolicy.PERMISSIVE) == {1, 2}
    assert valid_numbers(lines, NumberingPolicy.STRICT) == {1, 2}


def test_ordered_numbers_first_occurrence_without_duplicates():
    lines = clean_lines("2. b\n1. a\n2. b otra vez\n7. g")
    assert ordered_numbers(lines, NumberingPolicy.PERMISSIVE) == [2, 1, 7]
    assert ordered_numbers(lines, NumberingPolicy.STRICT) == [1, 2]


def test_result_is_frozenset(simple_text):
    assert isinstance(valid_numbers(clean_lines(simple_text)), frozenset)


def test_unknown_policy_raises_value_error(simple_text):
    with pytest.raises(ValueError):
        valid_numbers(clean_lines(simple_text), "loose")
