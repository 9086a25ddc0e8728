"""Tests for the recipe-day command-line interface."""

import pytest

from recipe_day.main import build_parser, main
from recipe_day.models import Category
from recipe_day.utils.config import reset_config
from recipe_day.utils.load_sample_data import load_sample_data


@pytest.fixture
def seeded(services):
    load_sample_data(services=services)
    return services


class TestParser:
    def test_quick_default_minutes(self):
        args = build_parser().parse_args(["quick"])
        assert args.minutes == 30

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_delete_category_needs_integer(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["delete-category", "soups"])


class TestCommands:
    def test_init(self, services, monkeypatch, capsys):
        monkeypatch.setenv("RECIPE_DAY_DATABASE_URL", "sqlite:///:memory:")
        reset_config()
        try:
            assert main(["init"], services=services) == 0
        finally:
            reset_config()

        assert "sqlite:///:memory:" in capsys.readouterr().out

    def test_seed(self, services, capsys):
        assert main(["seed"], services=services) == 0

        assert "Loaded 3 categories, 4 recipes, 3 favorites" in capsys.readouterr().out

    def test_random(self, seeded, capsys):
        assert main(["random"], services=seeded) == 0

        out = capsys.readouterr().out
        assert "Recipe of the day:" in out
        assert "Ingredients:" in out

    def test_random_empty_catalog(self, services, capsys):
        assert main(["random"], services=services) == 1
        assert "No recipes yet" in capsys.readouterr().out

    def test_quick(self, seeded, capsys):
        assert main(["quick", "--minutes", "45"], services=seeded) == 0

        out = capsys.readouterr().out
        assert "Recipes ready in 45 minutes or less: 2" in out
        assert out.index("Buttermilk Pancakes") < out.index("Tomato Soup")

    def test_search(self, seeded, capsys):
        assert main(["search", "SOUP"], services=seeded) == 0

        out = capsys.readouterr().out
        assert "Tomato Soup" in out
        assert "Borscht" not in out

    def test_search_blank_term(self, seeded, capsys):
        assert main(["search", "  "], services=seeded) == 1

    def test_categories(self, seeded, capsys):
        assert main(["categories"], services=seeded) == 0

        out = capsys.readouterr().out
        assert "Soups (2 recipe(s))" in out
        assert "Desserts (1 recipe(s))" in out

    def test_favorites_by_user(self, seeded, capsys):
        assert main(["favorites", "--user", "ben"], services=seeded) == 0

        out = capsys.readouterr().out
        assert "Ben: Buttermilk Pancakes - Add blueberries" in out
        assert "Anna" not in out

    def test_delete_category_in_use(self, seeded, capsys):
        soups = [c for c in seeded.categories.list() if c.title == "Soups"][0]

        assert main(["delete-category", str(soups.id)], services=seeded) == 1
        assert "still has recipes" in capsys.readouterr().out

    def test_delete_category_unused(self, services, capsys):
        salads = services.categories.save(Category(title="Salads"))

        assert main(["delete-category", str(salads.id)], services=services) == 0
        assert services.categories.list() == []

    def test_delete_category_missing(self, services, capsys):
        assert main(["delete-category", "999"], services=services) == 1
        assert "not found" in capsys.readouterr().out
