"""
Custom SQLAlchemy types for list-valued columns.
"""

from datetime import date
from typing import Any, List, Optional

from sqlalchemy import JSON, TypeDecorator


class JSONList(TypeDecorator):
    """
    JSON array column.

    Stores scalar lists (months, attachments, fee month names) and always
    hands back a list.
    """

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[list]:
        if value is None:
            return value
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"JSONList requires a list, got {type(value)}")
        return list(value)

    def process_result_value(self, value: Any, dialect) -> List[Any]:
        return list(value or [])


class DateList(TypeDecorator):
    """JSON array of ISO dates, loaded back as `datetime.date` objects."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[List[str]]:
        if value is None:
            return value
        return [item.isoformat() if isinstance(item, date) else str(item) for item in value]

    def process_result_value(self, value: Any, dialect) -> List[date]:
        return [date.fromisoformat(item) for item in (value or [])]
