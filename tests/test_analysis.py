import hashlib

from string_analyzer.analysis import (
    analyze_string,
    compute_sha256,
    count_words,
    is_palindrome,
)


def test_sha256_is_stable_and_over_raw_value():
    assert compute_sha256("hello") == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
    assert analyze_string("Hello").sha256_hash == analyze_string("Hello").sha256_hash
    # digest is taken before any case folding
    assert compute_sha256("Hello") != compute_sha256("hello")
    assert compute_sha256("héllo") == hashlib.sha256("héllo".encode("utf-8")).hexdigest()


def test_length_counts_every_character():
    assert analyze_string("hello world").length == 11
    assert analyze_string("   ").length == 3
    assert analyze_string("").length == 0


def test_palindrome_is_case_insensitive_but_literal():
    assert analyze_string("Level").is_palindrome is True
    assert analyze_string("racecar").is_palindrome is True
    assert analyze_string("level ").is_palindrome is False
    # spaces are not stripped
    assert is_palindrome("nurses run") is False
    assert is_palindrome("a b a") is True


def test_word_count():
    assert analyze_string("hello world").word_count == 2
    assert count_words("  several   spaced\twords\n") == 3
    # blank input still counts as one empty token
    assert analyze_string("   ").word_count == 1
    assert count_words("") == 1


def test_unique_characters_and_frequency():
    properties = analyze_string("aabb")
    assert properties.unique_characters == 2
    assert properties.character_frequency_map == {"a": 2, "b": 2}


def test_frequency_is_case_sensitive_and_counts_spaces():
    properties = analyze_string("Aa a")
    assert properties.character_frequency_map == {"A": 1, "a": 2, " ": 1}
    assert properties.unique_characters == 3


def test_lone_surrogate_still_gets_a_digest():
    properties = analyze_string("\ud800")
    assert properties.sha256_hash == hashlib.sha256(b"\xed\xa0\x80").hexdigest()
    assert properties.length == 1
    assert properties.character_frequency_map == {"\ud800": 1}
    assert compute_sha256("\ud800") != compute_sha256("\ud801")


def test_characters_outside_the_bmp_count_once():
    properties = analyze_string("a\U0001F600b")
    assert properties.length == 3
    assert properties.unique_characters == 3
    assert properties.character_frequency_map == {"a": 1, "\U0001F600": 1, "b": 1}
    assert properties.sha256_hash == hashlib.sha256("a\U0001F600b".encode("utf-8")).hexdigest()

    emoji = analyze_string("\U0001F600")
    assert emoji.length == 1
    assert emoji.is_palindrome is True
