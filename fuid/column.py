"""
SQLAlchemy column type for Fuid values.

Identifiers are stored as their base62 string in a VARCHAR(22) column, so
they stay readable in the database.

The database compares the column as text, so ORDER BY and range filters on
it follow string order, not the numeric order of Fuid: "z" (61) sorts after
"10" (62). Sort in Python when numeric order matters. Usage:

    class Document(Base):
        __tablename__ = "documents"

        id: Mapped[Fuid] = mapped_column(FuidType(), primary_key=True, default=Fuid.new)
"""
from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from fuid import base62
from fuid.exceptions import DecodeError
from fuid.identifier import Fuid
from fuid.logging_config import setup_logging

logger = setup_logging()


class FuidType(TypeDecorator):
    """Stores a Fuid as its base62 encoding."""

    impl = String(base62.MAX_LENGTH)
    cache_ok = True

    def process_bind_param(self, value, dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, Fuid):
            return value.to_string()
        if isinstance(value, str):
            # Validate and canonicalise raw strings before they reach the database
            try:
                return Fuid.from_string(value).to_string()
            except DecodeError:
                logger.debug(f"Refusing to bind invalid FUID string {value!r}")
                raise
        raise TypeError(f"Expected Fuid or str, got {type(value).__name__}")

    def process_result_value(self, value, dialect) -> Fuid | None:
        if value is None:
            return None
        return Fuid.from_string(value)

    @property
    def python_type(self) -> type:
        return Fuid
