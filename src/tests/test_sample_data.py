"""Tests for loading the bundled sample catalog."""

import json
from decimal import Decimal

import pytest

from recipe_day.models import Category
from recipe_day.services.exceptions import ValidationError
from recipe_day.utils.load_sample_data import DEFAULT_SAMPLE_DATA, load_sample_data


class TestLoadSampleData:
    def test_default_file_exists(self):
        assert DEFAULT_SAMPLE_DATA.exists()

    def test_load_default(self, services):
        counts = load_sample_data(services=services)

        assert counts == {"categories": 3, "recipes": 4, "favorites": 3}
        assert [c.title for c in services.categories.list()] == ["Breakfast", "Desserts", "Soups"]

        borscht = services.recipes.search("borscht")[0]
        assert borscht.rating == Decimal("4.8")
        assert borscht.category.title == "Soups"
        assert [f.user_name for f in services.favorites.by_recipe(borscht.id)] == ["Anna"]

    def test_existing_categories_reused(self, services):
        services.categories.save(Category(title="Soups"))

        counts = load_sample_data(services=services)

        assert counts["categories"] == 2
        assert len(services.categories.list()) == 3

    def test_invalid_recipe_aborts(self, services, tmp_path):
        data = {
            "categories": [{"title": "Soups"}],
            "recipes": [
                {
                    "title": "Instant Soup",
                    "category": "Soups",
                    "preparation_time": 1,
                    "difficulty": 1,
                    "ingredients": "One packet of soup",
                    "instructions": "Pour boiling water over it and stir well.",
                    "servings": 1,
                }
            ],
        }
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ValidationError, match="preparation_time"):
            load_sample_data(path, services)

        assert services.recipes.list() == []
