"""
Declarative base and shared columns for the catalog models.

Every table gets an integer primary key (None until the first flush) and
created/updated timestamps maintained by the ORM.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

from recipe_day.utils.datetime_utils import utc_now

Base = declarative_base()

# Bookkeeping columns never copied from caller data
PROTECTED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


class BaseModel(Base):
    """
    Abstract parent of Category, Recipe and Favorite.

    Attributes:
        id: Primary key, assigned by the store
        created_at: Insert time
        updated_at: Last modification time
    """

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)

    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def to_dict(self, include_relationships: bool = False) -> Dict[str, Any]:
        """
        Column values as JSON-friendly data.

        Datetimes become ISO strings and Decimals become strings.

        Args:
            include_relationships: Also nest related objects (one level)

        Returns:
            Dictionary keyed by column (and relationship) name
        """
        result = {
            column.key: _plain(getattr(self, column.key)) for column in self.__table__.columns
        }

        if include_relationships:
            for relationship in self.__mapper__.relationships:
                related = getattr(self, relationship.key)
                if related is None:
                    result[relationship.key] = None
                elif relationship.uselist:
                    result[relationship.key] = [item.to_dict() for item in related]
                else:
                    result[relationship.key] = related.to_dict()

        return result

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """Copy column values present in data, skipping id and timestamps."""
        for column in self.__table__.columns:
            if column.key in data and column.key not in PROTECTED_COLUMNS:
                setattr(self, column.key, data[column.key])

        self.updated_at = utc_now()

    def __repr__(self) -> str:
        title = getattr(self, "title", None)
        if title is None:
            return f"{type(self).__name__}(id={self.id})"
        return f"{type(self).__name__}(id={self.id}, title='{title}')"
