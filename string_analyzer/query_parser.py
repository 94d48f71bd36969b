import logging
import re
from typing import Optional

from string_analyzer.errors import ConflictingFilters
from string_analyzer.filters import FilterSet

logger = logging.getLogger(__name__)

LOWER_BOUND = re.compile(r"longer than (\d+)|more than (\d+)")
UPPER_BOUND = re.compile(r"shorter than (\d+)|less than (\d+)")
LETTER = re.compile(r"letter ([a-z])")


def _first_number(match: re.Match) -> int:
    return int(match.group(1) or match.group(2))


def parse_natural_language_query(query: str) -> Optional[FilterSet]:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Rules are keyword heuristics applied in order; the character rules
    (letter X, vowel, z) overwrite one another, last one wins. Returns None
    when nothing matched and raises ConflictingFilters when the length
    bounds cannot both hold.
    """
    text = query.lower()
    filters: FilterSet = {}

    # Check for palindrome
    if "palindromic" in text or "palindrome" in text:
        filters["is_palindrome"] = True

    # Check for single word / one word
    if "single word" in text or "one word" in text:
        filters["word_count"] = 1

    # Check for "longer than X" / "more than X"
    length_match = LOWER_BOUND.search(text)
    if length_match:
        filters["min_length"] = _first_number(length_match) + 1

    # Check for "shorter than X" / "less than X"
    length_match = UPPER_BOUND.search(text)
    if length_match:
        filters["max_length"] = _first_number(length_match) - 1

    # Check for "letter X"
    letter_match = LETTER.search(text)
    if letter_match:
        filters["contains_character"] = letter_match.group(1)

    # "vowel" -> 'a'
    if "vowel" in text:
        filters["contains_character"] = "a"

    # Any z in the query, even inside another word
    if "z" in text:
        filters["contains_character"] = "z"

    if not filters:
        logger.debug(f"No rule matched query {query!r}")
        return None

    if (
        "min_length" in filters
        and "max_length" in filters
        and filters["min_length"] > filters["max_length"]
    ):
        raise ConflictingFilters()

    logger.debug(f"Parsed {query!r} into {filters}")
    return filters
