import hashlib
import re
from collections import Counter
from typing import Dict

from string_analyzer.schemas import StringProperties

WHITESPACE_RUN = re.compile(r"\s+")


def encode_value(text: str) -> bytes:
    """UTF-8 bytes of a string; lone surrogates are kept as their own code units"""
    return text.encode("utf-8", "surrogatepass")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(encode_value(text)).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, nothing stripped)"""
    return text.lower() == text[::-1].lower()


def count_words(text: str) -> int:
    """
    Count whitespace separated tokens after trimming.

    A blank string still yields one (empty) token.
    """
    return len(WHITESPACE_RUN.split(text.strip()))


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    frequency = get_character_frequency(value)

    # Built without validation: pydantic refuses str values holding surrogates
    return StringProperties.model_construct(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(frequency),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=frequency,
    )
