from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, LargeBinary
from sqlalchemy.types import TypeDecorator

from string_analyzer.analysis import encode_value
from string_analyzer.database import Base


class RawText(TypeDecorator):
    """Text kept as UTF-8 bytes so any Python str, surrogates included, round-trips."""

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encode_value(value) if value is not None else None

    def process_result_value(self, value, dialect):
        return bytes(value).decode("utf-8", "surrogatepass") if value is not None else None


class StringAnalysis(Base):
    __tablename__ = "string_analyses"

    id = Column(String(64), primary_key=True)  # SHA-256 hash
    value = Column(RawText, nullable=False)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    sha256_hash = Column(String(64), nullable=False)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
