from datetime import datetime, timezone
from typing import List, NamedTuple, Optional
import logging
import threading

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from string_analyzer.analysis import analyze_string
from string_analyzer.database import create_memory_engine, init_db
from string_analyzer.errors import AlreadyExists
from string_analyzer.filters import FilterSet, active_filters, apply_filters
from string_analyzer.models import StringAnalysis
from string_analyzer.schemas import StringProperties, StringRecord

logger = logging.getLogger(__name__)


class ListResult(NamedTuple):
    records: List[StringRecord]
    count: int
    filters_applied: FilterSet


def _to_record(row: StringAnalysis) -> StringRecord:
    created_at = row.created_at
    # SQLite hands back naive datetimes
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    # Rows were validated on the way in; re-validating would reject surrogates
    return StringRecord.model_construct(
        id=row.id,
        value=row.value,
        properties=StringProperties.model_construct(
            length=row.length,
            is_palindrome=row.is_palindrome,
            unique_characters=row.unique_characters,
            word_count=row.word_count,
            sha256_hash=row.sha256_hash,
            character_frequency_map=row.character_frequency_map,
        ),
        created_at=created_at,
    )


class StringStore:
    """
    Content-addressed store of analyzed strings.

    Records are keyed by the SHA-256 digest of their value and never change
    after creation. All access goes through one lock so the existence check
    and the insert of ``create`` happen as a single step.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else create_memory_engine()
        self._session_factory = init_db(self.engine)
        self._lock = threading.RLock()

    def create(self, value: str) -> StringRecord:
        """Analyze and store a string; raises AlreadyExists on a duplicate digest"""
        properties = analyze_string(value)
        key = properties.sha256_hash

        with self._lock, self._session_factory() as db:
            if db.get(StringAnalysis, key) is not None:
                logger.warning(f"Duplicate create rejected for {key}")
                raise AlreadyExists()

            db_string = StringAnalysis(
                id=key,
                value=value,
                length=properties.length,
                is_palindrome=properties.is_palindrome,
                unique_characters=properties.unique_characters,
                word_count=properties.word_count,
                sha256_hash=key,
                character_frequency_map=properties.character_frequency_map,
                created_at=datetime.now(timezone.utc),
            )
            db.add(db_string)
            db.commit()
            logger.info(f"Stored string {key} (length={properties.length})")
            return _to_record(db_string)

    def get(self, key: str) -> Optional[StringRecord]:
        """Get a record by digest"""
        with self._lock, self._session_factory() as db:
            db_string = db.get(StringAnalysis, key)
            return _to_record(db_string) if db_string is not None else None

    def delete(self, key: str) -> bool:
        """Delete a record by digest; False when nothing was stored under it"""
        with self._lock, self._session_factory() as db:
            db_string = db.get(StringAnalysis, key)
            if db_string is None:
                return False
            db.delete(db_string)
            db.commit()
            logger.info(f"Deleted string {key}")
            return True

    def all(self) -> List[StringRecord]:
        with self._lock, self._session_factory() as db:
            rows = db.scalars(select(StringAnalysis).order_by(StringAnalysis.created_at)).all()
            return [_to_record(row) for row in rows]

    def list(self, filters: Optional[FilterSet] = None) -> ListResult:
        """Get every record matching all filters (an empty set matches everything)"""
        applied = active_filters(filters or {})
        records = apply_filters(self.all(), applied)
        return ListResult(records=records, count=len(records), filters_applied=applied)

    def __len__(self) -> int:
        with self._lock, self._session_factory() as db:
            return db.scalar(select(func.count()).select_from(StringAnalysis))
