import pytest

from string_analyzer.errors import ConflictingFilters
from string_analyzer.query_parser import parse_natural_language_query


@pytest.mark.parametrize("query,expected", [
    ("all single word palindromic strings", {"is_palindrome": True, "word_count": 1}),
    ("strings longer than 5", {"min_length": 6}),
    ("strings with more than 3 characters", {"min_length": 4}),
    ("strings shorter than 5", {"max_length": 4}),
    ("less than 4", {"max_length": 3}),
    ("one word Palindrome", {"is_palindrome": True, "word_count": 1}),
    ("strings containing the letter b", {"contains_character": "b"}),
    ("strings containing a vowel", {"contains_character": "a"}),
])
def test_rules(query, expected):
    assert parse_natural_language_query(query) == expected


def test_unmatched_query_returns_none():
    assert parse_natural_language_query("gibberish") is None


def test_first_length_match_wins():
    assert parse_natural_language_query("longer than 2 or longer than 8") == {"min_length": 3}


def test_character_rules_last_one_wins():
    assert parse_natural_language_query("letter b and a vowel") == {"contains_character": "a"}
    # a z anywhere, even inside another word, overrides the others
    assert parse_natural_language_query("lazy strings with the letter b") == {"contains_character": "z"}
    assert parse_natural_language_query("the letter q") == {"contains_character": "q"}


def test_conflicting_bounds_raise():
    with pytest.raises(ConflictingFilters):
        parse_natural_language_query("strings longer than 9 and shorter than 4")


def test_touching_bounds_do_not_conflict():
    assert parse_natural_language_query("longer than 3 and shorter than 5") == {
        "min_length": 4,
        "max_length": 4,
    }
