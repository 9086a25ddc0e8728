"""Tests for FavoriteService: duplicate guard, relinking and listings."""

from datetime import datetime

import pytest

from recipe_day.models import Favorite
from recipe_day.utils.constants import (
    ERROR_DUPLICATE_FAVORITE,
    ERROR_NOT_FOUND,
    ERROR_RECIPE_NOT_SAVED,
)


@pytest.fixture
def soup(soups, create_recipe):
    return create_recipe(soups, title="Tomato Soup")


@pytest.fixture
def borscht(soups, create_recipe):
    return create_recipe(soups, title="Borscht", preparation_time=90)


class TestCreate:
    def test_create(self, services, soup):
        result = services.favorites.save(
            Favorite(recipe=soup, user_name="Anna", comment="Every winter")
        )

        assert result.success
        favorite = result.entity
        assert favorite.id is not None
        assert favorite.recipe_id == soup.id
        assert favorite.added_date is not None
        assert services.favorites.is_favorite(soup.id, "Anna") is True

    def test_duplicate_rejected_case_insensitive(self, services, soup):
        services.favorites.save(Favorite(recipe=soup, user_name="Ann")).unwrap()

        result = services.favorites.save(Favorite(recipe=soup, user_name="ann"))

        assert not result.success
        assert result.errors == {"user_name": ERROR_DUPLICATE_FAVORITE}
        assert len(services.favorites.by_recipe(soup.id)) == 1

    def test_same_user_other_recipe_allowed(self, services, soup, borscht):
        services.favorites.save(Favorite(recipe=soup, user_name="Ann")).unwrap()

        result = services.favorites.save(Favorite(recipe=borscht, user_name="ann"))

        assert result.success

    def test_rejected_favorite_not_saved_with_recipe(self, services, soup):
        services.favorites.save(Favorite(recipe=soup, user_name="Ann")).unwrap()
        rejected = services.favorites.save(Favorite(recipe=soup, user_name="ANN")).entity

        assert rejected.recipe is None
        assert rejected.recipe_id == soup.id

        # A later favorite on the same in-memory recipe does not drag it along
        services.favorites.save(Favorite(recipe=soup, user_name="Ben")).unwrap()
        names = sorted(f.user_name for f in services.favorites.by_recipe(soup.id))
        assert names == ["Ann", "Ben"]

    def test_field_validation(self, services, soup):
        result = services.favorites.save(Favorite(recipe=soup, user_name="", comment="c" * 501))
        assert set(result.errors) == {"user_name", "comment"}

    def test_recipe_required(self, services):
        result = services.favorites.save(Favorite(user_name="Anna"))
        assert set(result.errors) == {"recipe"}

    def test_unsaved_recipe_rejected(self, services, soups, make_recipe):
        recipe = make_recipe(soups, title="x" * 300)

        result = services.favorites.save(Favorite(recipe=recipe, user_name="Ann"))

        assert result.errors == {"recipe": ERROR_RECIPE_NOT_SAVED}
        assert recipe.favorites == []
        assert services.recipes.list() == []
        assert services.favorites.list() == []

    def test_is_favorite(self, services, soup, borscht):
        services.favorites.save(Favorite(recipe=soup, user_name="Anna")).unwrap()

        assert services.favorites.is_favorite(soup.id, "ANNA") is True
        assert services.favorites.is_favorite(soup.id, "Ann") is False
        assert services.favorites.is_favorite(borscht.id, "Anna") is False


class TestUpdate:
    def test_update_comment(self, services, soup):
        favorite = services.favorites.save(Favorite(recipe=soup, user_name="Anna")).unwrap()
        favorite.comment = "With sour cream"

        result = services.favorites.save(favorite)

        assert result.success
        assert services.favorites.get(favorite.id).comment == "With sour cream"

    def test_update_clearing_added_date_keeps_it(self, services, soup):
        when = datetime(2024, 1, 5, 12, 0, 0)
        favorite = services.favorites.save(
            Favorite(recipe=soup, user_name="Anna", added_date=when)
        ).unwrap()
        favorite.added_date = None

        result = services.favorites.save(favorite)

        assert result.success
        assert services.favorites.get(favorite.id).added_date == when

    def test_unknown_id_is_not_inserted(self, services, soup):
        result = services.favorites.save(Favorite(id=42, recipe=soup, user_name="Anna"))

        assert result.errors == {"id": ERROR_NOT_FOUND}
        assert result.entity.recipe is None
        assert services.favorites.list() == []

    def test_relink_moves_between_recipes(self, services, soup, borscht):
        favorite = services.favorites.save(Favorite(recipe=soup, user_name="Anna")).unwrap()

        favorite.link_recipe(borscht)
        services.favorites.save(favorite).unwrap()

        assert services.favorites.by_recipe(soup.id) == []
        moved = services.favorites.by_recipe(borscht.id)
        assert [f.id for f in moved] == [favorite.id]
        assert moved[0].recipe.title == "Borscht"

    def test_relink_loaded_favorite(self, services, soup, borscht):
        created = services.favorites.save(Favorite(recipe=soup, user_name="Anna")).unwrap()

        favorite = services.favorites.get(created.id)
        favorite.link_recipe(services.recipes.get(borscht.id))
        services.favorites.save(favorite).unwrap()

        assert services.favorites.get(created.id).recipe_id == borscht.id
        assert [f.id for f in services.recipes.get(borscht.id).favorites] == [created.id]
        assert services.recipes.get(soup.id).favorites == []


class TestDelete:
    def test_delete(self, services, soup):
        favorite = services.favorites.save(Favorite(recipe=soup, user_name="Anna")).unwrap()

        assert services.favorites.delete(favorite.id) is True

        assert services.favorites.get(favorite.id) is None
        assert services.recipes.get(soup.id) is not None
        assert services.recipes.get(soup.id).favorites == []

    def test_delete_missing(self, services):
        assert services.favorites.delete(999) is False


class TestListings:
    @pytest.fixture
    def favorites(self, services, soup, borscht):
        return [
            services.favorites.save(
                Favorite(recipe=recipe, user_name=name, added_date=datetime(2024, 1, day))
            ).unwrap()
            for recipe, name, day in [
                (soup, "Anna", 1),
                (borscht, "Joanna", 2),
                (borscht, "Ben", 3),
            ]
        ]

    def test_list_newest_first(self, services, favorites):
        assert [f.user_name for f in services.favorites.list()] == ["Ben", "Joanna", "Anna"]

    def test_by_user_contains_case_insensitive(self, services, favorites):
        assert [f.user_name for f in services.favorites.by_user("ANNA")] == ["Joanna", "Anna"]
        assert [f.user_name for f in services.favorites.by_user("ben")] == ["Ben"]
        assert services.favorites.by_user("zoe") == []

    def test_by_recipe_newest_first(self, services, borscht, favorites):
        assert [f.user_name for f in services.favorites.by_recipe(borscht.id)] == ["Ben", "Joanna"]

    def test_listed_favorites_carry_recipe(self, services, favorites):
        titles = {f.recipe.title for f in services.favorites.list()}
        assert titles == {"Tomato Soup", "Borscht"}
