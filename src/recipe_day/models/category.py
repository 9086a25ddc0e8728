"""
Category model for recipe grouping.

Categories are flat named groups (e.g., "Soups", "Desserts"). A category
does not own its recipes: deleting a category that still has recipes is
refused rather than cascaded (see models.referential.RECIPE_CATEGORY).
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import validates

from recipe_day.utils.constants import (
    DEFAULT_CATEGORY_ICON,
    MAX_CATEGORY_TITLE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_ICON_LENGTH,
)

from .base import BaseModel


class Category(BaseModel):
    """
    Category model representing a recipe grouping.

    Attributes:
        title: Display title, unique across categories (exact match)
        description: Optional description text
        icon: Font Awesome icon identifier (defaults to DEFAULT_CATEGORY_ICON)
    """

    __tablename__ = "categories"

    title = Column(String(MAX_CATEGORY_TITLE_LENGTH), nullable=False, unique=True, index=True)
    description = Column(String(MAX_DESCRIPTION_LENGTH), nullable=True)
    icon = Column(String(MAX_ICON_LENGTH), nullable=False, default=DEFAULT_CATEGORY_ICON)

    def __init__(self, **kwargs):
        kwargs.setdefault("icon", None)
        super().__init__(**kwargs)

    @validates("icon")
    def _default_icon(self, key, value):
        return DEFAULT_CATEGORY_ICON if value is None else value

    def __repr__(self) -> str:
        return f"Category(id={self.id}, title='{self.title}')"
