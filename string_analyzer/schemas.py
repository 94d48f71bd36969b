from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class StringCreate(BaseModel):
    value: StrictStr = Field(..., min_length=1, description="String to analyze")


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]
    interpreted_query: InterpretedQuery
