import pytest

from english_tts.context import (
    MalformedPatternError,
    left_match,
    right_match,
    validate_pattern,
)


def test_empty_pattern_matches_any_context():
    assert left_match("", " XYZ ", 2)
    assert right_match("", " XYZ ", 2)


def test_literal_letters_and_apostrophe():
    assert left_match("TH", " THEW ", 2)
    assert not left_match("SH", " THEW ", 2)
    assert right_match("'S", " DOG'S ", 4)


def test_space_only_matches_word_edge():
    assert left_match(" ", " A ", 0)
    assert not left_match(" ", " BA ", 1)
    assert right_match(" ", " A ", 2)


def test_vowel_run_consumes_every_vowel():
    # '#' eats both A and E, leaving B for '^'
    assert left_match("^#", " BAE ", 3)
    assert not left_match("^#", "  AE ", 3)
    assert right_match("#^", " AEB ", 1)


def test_vowel_run_needs_at_least_one_vowel():
    assert not left_match("#", " BX ", 2)
    assert not right_match("#", " BX ", 1)


def test_consonant_run_matches_zero_or_more():
    assert left_match(":", " A ", 1)
    # consumes X and B, then the boundary space
    assert left_match(" :", " BX", 2)
    assert right_match(": ", " STR ", 1)


def test_greedy_quantifiers_never_backtrack():
    # ':' swallows B, C and D so '^' has nothing left
    assert not right_match(":^", " BCD ", 1)
    assert not left_match("^:", " BCD ", 3)
    # '#' swallows A and E so the literal E cannot match
    assert not right_match("#E", " AE ", 1)


def test_single_consonant():
    assert right_match("^", " B ", 1)
    assert not right_match("^", " A ", 1)
    assert not right_match("^", " ' ", 1)


@pytest.mark.parametrize("letter", list("BDVGJLMNRWZ"))
def test_voiced_consonants(letter):
    assert right_match(".", f" {letter} ", 1)
    assert left_match(".", f" {letter} ", 1)


@pytest.mark.parametrize("letter", list("PTKFSHCXQY"))
def test_unvoiced_letters_are_not_voiced(letter):
    assert not right_match(".", f" {letter} ", 1)


@pytest.mark.parametrize("letter,expected", [("E", True), ("I", True), ("Y", True), ("A", False), ("O", False)])
def test_front_vowels(letter, expected):
    assert right_match("+", f" {letter} ", 1) is expected


@pytest.mark.parametrize("suffix", ["ER", "ES", "ED", "ELY", "ING"])
def test_suffix_class_accepts_endings(suffix):
    assert right_match("%", f" {suffix} ", 1)


def test_suffix_class_accepts_bare_e():
    assert right_match("%", " E ", 1)
    assert right_match("^%", " KE ", 1)


def test_suffix_class_ending_settles_context():
    # EL, ER, ES, ED accept without looking at the rest of the pattern
    assert right_match("%X", " ELK ", 1)
    assert right_match("%X", " EDGE ", 1)


def test_suffix_class_bare_e_continues_matching():
    assert right_match("%N", " EN ", 1)
    assert not right_match("%N", " EX ", 1)


@pytest.mark.parametrize("text", ["IN ", "IT ", "A ", "X ", " "])
def test_suffix_class_rejects_other_continuations(text):
    assert not right_match("%", f" {text}", 1)


def test_out_of_range_positions_do_not_wrap():
    assert not left_match("^", "B", -1)
    assert not right_match("^", "B", 1)


def test_validate_pattern_accepts_table_symbols():
    validate_pattern("#:^.+' AB", "left")
    validate_pattern("#:^.+%' AB", "right")


@pytest.mark.parametrize("pattern,side", [("%", "left"), ("@", "right"), ("a", "left"), ("*", "right")])
def test_validate_pattern_rejects_unknown_symbols(pattern, side):
    with pytest.raises(MalformedPatternError):
        validate_pattern(pattern, side)


def test_unvalidated_bad_symbol_raises():
    with pytest.raises(MalformedPatternError):
        left_match("%", " E ", 1)
    with pytest.raises(MalformedPatternError):
        right_match("@", " E ", 1)
