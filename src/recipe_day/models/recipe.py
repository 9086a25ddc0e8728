"""
Recipe model for dish definitions.

A recipe belongs to exactly one Category and owns its Favorites:
deleting a recipe removes every favorite pointing at it
(see models.referential.FAVORITE_RECIPE).
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from recipe_day.utils.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_DIFFICULTY,
    MAX_INGREDIENTS_LENGTH,
    MAX_INSTRUCTIONS_LENGTH,
    MAX_PREPARATION_TIME,
    MAX_RATING,
    MAX_RECIPE_TITLE_LENGTH,
    MAX_SERVINGS,
    MIN_DIFFICULTY,
    MIN_PREPARATION_TIME,
    MIN_RATING,
    MIN_SERVINGS,
)

from .base import BaseModel
from .referential import FAVORITE_RECIPE, RECIPE_CATEGORY


class Recipe(BaseModel):
    """
    Recipe model representing a dish with preparation metadata.

    Attributes:
        title: Recipe title (required, up to 200 characters)
        description: Optional short description
        category_id / category: Owning category (required)
        preparation_time: Minutes, 5-1440
        difficulty: 1-5
        rating: Optional decimal, 0.0-5.0, one decimal place
        ingredients: Ingredient list as free text
        instructions: Cooking instructions as free text
        servings: 1-20
        favorites: Favorites bookmarking this recipe (owned, cascade delete)
    """

    __tablename__ = "recipes"

    title = Column(String(MAX_RECIPE_TITLE_LENGTH), nullable=False, index=True)
    description = Column(String(MAX_DESCRIPTION_LENGTH), nullable=True)

    category_id = Column(
        Integer,
        ForeignKey(RECIPE_CATEGORY.target, ondelete=RECIPE_CATEGORY.ondelete),
        nullable=False,
    )

    preparation_time = Column(Integer, nullable=False)
    difficulty = Column(Integer, nullable=False)
    rating = Column(Numeric(3, 1), nullable=True)
    ingredients = Column(Text, nullable=False)
    instructions = Column(Text, nullable=False)
    servings = Column(Integer, nullable=False)

    # Relationships
    category = relationship("Category", lazy="joined")

    favorites = relationship(
        "Favorite",
        back_populates="recipe",
        cascade=FAVORITE_RECIPE.orm_cascade,
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint(
            f"preparation_time >= {MIN_PREPARATION_TIME} "
            f"AND preparation_time <= {MAX_PREPARATION_TIME}",
            name="ck_recipe_preparation_time_range",
        ),
        CheckConstraint(
            f"difficulty >= {MIN_DIFFICULTY} AND difficulty <= {MAX_DIFFICULTY}",
            name="ck_recipe_difficulty_range",
        ),
        CheckConstraint(
            f"servings >= {MIN_SERVINGS} AND servings <= {MAX_SERVINGS}",
            name="ck_recipe_servings_range",
        ),
        CheckConstraint(
            f"rating IS NULL OR (rating >= {MIN_RATING} AND rating <= {MAX_RATING})",
            name="ck_recipe_rating_range",
        ),
        CheckConstraint(
            f"length(ingredients) <= {MAX_INGREDIENTS_LENGTH}",
            name="ck_recipe_ingredients_length",
        ),
        CheckConstraint(
            f"length(instructions) <= {MAX_INSTRUCTIONS_LENGTH}",
            name="ck_recipe_instructions_length",
        ),
        Index("idx_recipe_category", "category_id"),
        Index("idx_recipe_preparation_time", "preparation_time"),
    )

    def add_favorite(self, favorite) -> None:
        """Attach a favorite to this recipe, detaching it from any other."""
        favorite.link_recipe(self)

    def remove_favorite(self, favorite) -> None:
        """Detach a favorite from this recipe if it is linked here."""
        if favorite.recipe is self:
            favorite.link_recipe(None)

    @property
    def formatted_preparation_time(self) -> str:
        """
        Preparation time as hours and minutes.

        Returns:
            "1 h 30 min" style string, "45 min" below one hour, "" if unset
        """
        if self.preparation_time is None:
            return ""
        hours, minutes = divmod(self.preparation_time, 60)
        if hours > 0:
            return f"{hours} h {minutes} min"
        return f"{minutes} min"

    @property
    def difficulty_stars(self) -> str:
        """Difficulty rendered as filled and empty stars out of MAX_DIFFICULTY."""
        if self.difficulty is None:
            return ""
        filled = max(0, min(self.difficulty, MAX_DIFFICULTY))
        return "★" * filled + "☆" * (MAX_DIFFICULTY - filled)

    def to_dict(self, include_relationships: bool = False) -> dict:
        result = super().to_dict(include_relationships)
        result["formatted_preparation_time"] = self.formatted_preparation_time
        return result

    def __repr__(self) -> str:
        category_title = self.category.title if self.category is not None else None
        return f"Recipe(id={self.id}, title='{self.title}', category='{category_title}')"
