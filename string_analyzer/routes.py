from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import Optional
import logging

from string_analyzer import schemas
from string_analyzer.analysis import compute_sha256
from string_analyzer.errors import InvalidInput, NotFound, UnparseableQuery
from string_analyzer.query_parser import parse_natural_language_query
from string_analyzer.store import StringStore

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store


@router.post("/strings", response_model=schemas.StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(
    string_data: schemas.StringCreate,
    store: StringStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    return store.create(string_data.value)


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    if contains_character is not None and len(contains_character) != 1:
        raise InvalidInput()
    if min_length is not None and max_length is not None and min_length > max_length:
        raise InvalidInput()

    result = store.list({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })

    return schemas.StringListResponse(
        data=result.records,
        count=result.count,
        filters_applied=result.filters_applied
    )


@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise UnparseableQuery()

    filters = parse_natural_language_query(query)
    if filters is None:
        raise UnparseableQuery()

    result = store.list(filters)

    return schemas.NaturalLanguageResponse(
        data=result.records,
        count=result.count,
        filters_applied=result.filters_applied,
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=filters
        )
    )


@router.get("/strings/{value:path}", response_model=schemas.StringRecord)
def get_string(
    value: str,
    store: StringStore = Depends(get_store)
):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = store.get(compute_sha256(value))
    if record is None:
        raise NotFound()
    return record


@router.delete("/strings/{value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(
    value: str,
    store: StringStore = Depends(get_store)
):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not store.delete(compute_sha256(value)):
        raise NotFound()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
