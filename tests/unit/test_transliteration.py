"""Tests for schema-driven transliteration."""

import pytest

from translit.models import Schema
from translit.normalize.segmentation import split_words
from translit.normalize.transliteration import (
    iter_windows,
    parse_ending,
    parse_letter,
    transliterate,
    transliterate_word,
)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("б", "b"),
        ("пол", "pol"),
        ("ель", "yel"),
        ("бульон", "bulyon"),
        ("ноГа", "noGa"),
        ("Рука", "Ruka"),
        ("хороший", "khoroshy"),
        ("ВЕЛИКИЙ", "VELIKY"),
    ],
)
def test_wikipedia_words(wikipedia, source, expected):
    """Single words through the Wikipedia schema."""
    assert transliterate(source, wikipedia) == expected


def test_wikipedia_sentence(wikipedia):
    """A full sentence keeps punctuation and spacing."""
    source = "Юлия, съешь ещё этих мягких французских булок из Йошкар-Олы, да выпей алтайского чаю"
    expected = (
        "Yuliya, syesh yeshchyo etikh myagkikh frantsuzskikh bulok iz Yoshkar-Oly, "
        "da vypey altayskogo chayu"
    )
    assert transliterate(source, wikipedia) == expected


def test_unmapped_characters_are_identity(wikipedia):
    """Characters with no rule pass through unchanged."""
    for char in ["Z", "7", "!", " ", "ß", "$"]:
        assert transliterate(char, wikipedia) == char

    assert transliterate("hello, мир 2024", wikipedia) == "hello, mir 2024"


def test_empty_text(wikipedia):
    assert transliterate("", wikipedia) == ""


def test_schema_without_tables():
    """A schema with no rules is the identity transformation."""
    schema = Schema(name="empty")
    assert transliterate("Юлия, привет!", schema) == "Юлия, привет!"


def test_first_symbol_case(wikipedia):
    """An uppercase letter capitalizes only the first replacement character."""
    assert transliterate("Щука", wikipedia) == "Shchuka"
    assert transliterate("ЩУКА", wikipedia) == "ShchUKA"


def test_prefix_beats_postfix_and_letter(context_schema):
    """The prefix rule wins when letter, postfix and prefix rules all match."""
    assert transliterate("cab", context_schema) == "3p2"
    assert transliterate("CAB", context_schema) == "3P2"


def test_postfix_beats_letter(context_schema):
    assert transliterate("dab", context_schema) == "dx2"
    assert transliterate("dad", context_schema) == "d1d"


def test_boundary_rules(context_schema):
    """Degenerate postfix keys only apply at the end of a segment."""
    assert transliterate("an", context_schema) == "1ng"
    assert transliterate("na", context_schema) == "n1"
    assert transliterate("an-na", context_schema) == "1ng-n1"


def test_one_character_ending_checked_first(context_schema):
    """A one-character ending wins over a two-character ending."""
    assert transliterate("dzq", context_schema) == "dzone"
    assert transliterate("dzw", context_schema) == "dthree"


def test_ending_case_is_whole(context_schema):
    """An uppercase character in the tail uppercases the whole ending."""
    assert transliterate("DZQ", context_schema) == "DZONE"
    assert transliterate("dZw", context_schema) == "dTHREE"


def test_short_words_have_no_ending(context_schema):
    """Words shorter than three characters keep their tail."""
    assert transliterate("zq", context_schema) == "zq"
    assert parse_ending(list("zq"), context_schema) is None


def test_parse_ending_start(context_schema):
    ending = parse_ending(list("abzw"), context_schema)

    assert ending is not None
    assert ending.translation == "three"
    assert ending.start == 2


def test_iter_windows_count():
    """One window per character, padded at both edges."""
    windows = list(iter_windows(list("аб")))
    assert windows == [("$", "а", "б"), ("а", "б", "$")]
    assert list(iter_windows([])) == []


def test_parse_letter_identity(context_schema):
    assert parse_letter("$", "z", "$", context_schema) == "z"


def test_segments_transliterated_independently(wikipedia):
    """Output is the concatenation of per-segment output."""
    text = "Великий Новгород, ель!"
    expected = "".join(transliterate_word(word, wikipedia) for word in split_words(text))

    assert transliterate(text, wikipedia) == expected
    assert expected == "Veliky Novgorod, yel!"
