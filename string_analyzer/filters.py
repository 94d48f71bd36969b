from typing import Any, Callable, Dict, Iterable, List

from string_analyzer.schemas import StringProperties, StringRecord

FilterSet = Dict[str, Any]

# Each predicate receives the record's properties and the filter value
PREDICATES: Dict[str, Callable[[StringProperties, Any], bool]] = {
    "is_palindrome": lambda p, v: p.is_palindrome == v,
    "min_length": lambda p, v: p.length >= v,
    "max_length": lambda p, v: p.length <= v,
    "word_count": lambda p, v: p.word_count == v,
    "contains_character": lambda p, v: v in p.character_frequency_map,
}


def active_filters(filters: FilterSet) -> FilterSet:
    """Drop absent (None) and unknown entries from a filter set"""
    return {k: v for k, v in filters.items() if k in PREDICATES and v is not None}


def matches(record: StringRecord, filters: FilterSet) -> bool:
    """
    True when the record satisfies every present filter.

    Range sanity is not checked here: min_length above max_length simply
    matches nothing.
    """
    return all(
        PREDICATES[key](record.properties, value)
        for key, value in active_filters(filters).items()
    )


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    return [record for record in records if matches(record, filters)]
