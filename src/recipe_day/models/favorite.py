"""
Favorite model for per-user recipe bookmarks.

A favorite belongs to exactly one Recipe. The Recipe <-> Favorite link is
kept consistent on both sides by ``Favorite.link_recipe``; callers change
the association through it (or through Recipe.add_favorite /
Recipe.remove_favorite) rather than editing either side directly.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import relationship, validates

from recipe_day.utils.constants import MAX_COMMENT_LENGTH, MAX_USER_NAME_LENGTH
from recipe_day.utils.datetime_utils import format_timestamp, utc_now

from .base import BaseModel
from .referential import FAVORITE_RECIPE


class Favorite(BaseModel):
    """
    Favorite model representing one user's bookmark of one recipe.

    At most one favorite exists per (recipe, user_name) pair with
    user_name compared case-insensitively. The service layer checks this
    before creating a favorite; a unique functional index backs it up.

    Attributes:
        recipe_id / recipe: Bookmarked recipe (required)
        user_name: Free-text user identifier (1-100 characters)
        comment: Optional note (up to 500 characters)
        added_date: When the favorite was added (defaults to creation time)
    """

    __tablename__ = "favorites"

    recipe_id = Column(
        Integer,
        ForeignKey(FAVORITE_RECIPE.target, ondelete=FAVORITE_RECIPE.ondelete),
        nullable=False,
    )
    user_name = Column(String(MAX_USER_NAME_LENGTH), nullable=False)
    comment = Column(String(MAX_COMMENT_LENGTH), nullable=True)
    added_date = Column(DateTime, nullable=False, default=utc_now, index=True)

    recipe = relationship("Recipe", back_populates="favorites", lazy="joined")

    def __init__(self, **kwargs):
        recipe = kwargs.pop("recipe", None)
        kwargs.setdefault("added_date", None)
        super().__init__(**kwargs)
        if recipe is not None:
            self.link_recipe(recipe)

    @validates("added_date")
    def _keep_added_date(self, key, value):
        # None keeps the current date; a new favorite gets the creation time
        if value is None:
            return self.added_date or utc_now()
        return value

    def link_recipe(self, recipe) -> None:
        """
        Point this favorite at a recipe, keeping both sides consistent.

        No-op when already linked to the same recipe. Otherwise the
        back-reference is set and the favorite moves from the previous
        recipe's favorites to the new recipe's favorites. Passing None
        detaches the favorite. No persistence I/O happens here; collections
        that were never loaded record the move and apply it when loaded.

        Args:
            recipe: Recipe to link to, or None
        """
        current = self.recipe
        if current is recipe or _same_row(current, recipe):
            return

        # back_populates removes self from current.favorites and appends it
        # to recipe.favorites
        self.recipe = recipe

    @property
    def formatted_date(self) -> str:
        """added_date as "YYYY-MM-DD HH:MM:SS"."""
        return format_timestamp(self.added_date)

    def __repr__(self) -> str:
        recipe_title = self.recipe.title if self.recipe is not None else None
        return (
            f"Favorite(id={self.id}, recipe='{recipe_title}', "
            f"user_name='{self.user_name}', added_date={self.added_date})"
        )


def _same_row(left, right) -> bool:
    """True when two persisted instances refer to the same database row."""
    if left is None or right is None:
        return False
    return type(left) is type(right) and left.id is not None and left.id == right.id


# One favorite per (recipe, user) with user names compared case-insensitively
Index(
    "uq_favorite_recipe_user",
    Favorite.recipe_id,
    func.lower(Favorite.user_name),
    unique=True,
)
