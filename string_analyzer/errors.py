from typing import Optional

from fastapi import status


class StringAnalyzerError(Exception):
    """Base class for failures that map onto an HTTP error response."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidInput(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid query parameter values or types"


class AlreadyExists(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    message = "String already exists in the system"


class NotFound(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "String does not exist in the system"


class UnparseableQuery(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Unable to parse natural language query"


class ConflictingFilters(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    message = "Query parsed but resulted in conflicting filters"
