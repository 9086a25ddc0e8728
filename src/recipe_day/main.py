"""
Command-line entry point for Recipe of the Day.

Usage Examples:
    # Create the database tables
    recipe-day init

    # Load the bundled sample catalog
    recipe-day seed

    # Show today's random recipe
    recipe-day random

    # Recipes ready in 20 minutes or less
    recipe-day quick --minutes 20

    # Search titles, list categories, list a user's favorites
    recipe-day search soup
    recipe-day categories
    recipe-day favorites --user anna

    # Delete an unused category
    recipe-day delete-category 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from recipe_day.services.catalog import CatalogServices, build_services
from recipe_day.services.database import initialize_app_database
from recipe_day.services.dto import DeleteOutcome
from recipe_day.services.exceptions import ServiceError
from recipe_day.utils.config import get_config
from recipe_day.utils.constants import QUICK_RECIPE_MAX_MINUTES
from recipe_day.utils.load_sample_data import load_sample_data


def _print_recipe_line(recipe) -> None:
    print(
        f"  [{recipe.id}] {recipe.title} - {recipe.category.title}, "
        f"{recipe.formatted_preparation_time}, {recipe.difficulty_stars}"
    )


def show_random(services: CatalogServices, args) -> int:
    """Print one random recipe in full."""
    recipe = services.recipes.random_recipe()
    if recipe is None:
        print("No recipes yet. Run 'recipe-day seed' to load sample data.")
        return 1

    print(f"Recipe of the day: {recipe.title}")
    print(f"Category: {recipe.category.title}")
    print(f"Time: {recipe.formatted_preparation_time}  Difficulty: {recipe.difficulty_stars}")
    if recipe.rating is not None:
        print(f"Rating: {recipe.rating}")
    print(f"Servings: {recipe.servings}")
    print(f"\nIngredients:\n{recipe.ingredients}")
    print(f"\nInstructions:\n{recipe.instructions}")
    return 0


def show_quick(services: CatalogServices, args) -> int:
    """List recipes ready within the given minutes."""
    recipes = services.recipes.quick(args.minutes)
    print(f"Recipes ready in {args.minutes} minutes or less: {len(recipes)}")
    for recipe in recipes:
        _print_recipe_line(recipe)
    return 0


def show_search(services: CatalogServices, args) -> int:
    """List recipes whose title contains the term."""
    term = args.term.strip()
    if not term:
        print("ERROR: search term is empty")
        return 1
    recipes = services.recipes.search(term)
    print(f"Recipes matching '{term}': {len(recipes)}")
    for recipe in recipes:
        _print_recipe_line(recipe)
    return 0


def show_categories(services: CatalogServices, args) -> int:
    """List categories with their recipe counts."""
    for category in services.categories.list():
        count = len(services.recipes.by_category(category.id))
        print(f"  [{category.id}] {category.title} ({count} recipe(s))")
    return 0


def show_favorites(services: CatalogServices, args) -> int:
    """List favorites, optionally filtered by user."""
    if args.user and args.user.strip():
        favorites = services.favorites.by_user(args.user.strip())
    else:
        favorites = services.favorites.list()
    for favorite in favorites:
        comment = f" - {favorite.comment}" if favorite.comment else ""
        print(
            f"  {favorite.formatted_date} {favorite.user_name}: "
            f"{favorite.recipe.title}{comment}"
        )
    return 0


def delete_category(services: CatalogServices, args) -> int:
    """Delete a category unless recipes use it."""
    outcome = services.categories.delete(args.category_id)
    if outcome is DeleteOutcome.DELETED:
        print(f"Category {args.category_id} deleted")
        return 0
    if outcome is DeleteOutcome.IN_USE:
        print(f"ERROR: category {args.category_id} still has recipes")
    else:
        print(f"ERROR: category {args.category_id} not found")
    return 1


def seed(services: CatalogServices, args) -> int:
    """Load sample data from JSON."""
    counts = load_sample_data(args.file, services)
    print(
        f"Loaded {counts['categories']} categories, {counts['recipes']} recipes, "
        f"{counts['favorites']} favorites"
    )
    return 0


def init(services: CatalogServices, args) -> int:
    """Tables are created before every command; nothing else to do."""
    print(f"Database ready: {get_config().database_url}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-day",
        description="Recipe catalog with categories, favorites and a random recipe of the day",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create database tables").set_defaults(handler=init)

    seed_parser = subparsers.add_parser("seed", help="Load sample data")
    seed_parser.add_argument(
        "file", nargs="?", default=None, help="JSON file (default: bundled sample)"
    )
    seed_parser.set_defaults(handler=seed)

    subparsers.add_parser("random", help="Show a random recipe").set_defaults(handler=show_random)

    quick_parser = subparsers.add_parser("quick", help="List quick recipes")
    quick_parser.add_argument("--minutes", type=int, default=QUICK_RECIPE_MAX_MINUTES)
    quick_parser.set_defaults(handler=show_quick)

    search_parser = subparsers.add_parser("search", help="Search recipes by title")
    search_parser.add_argument("term")
    search_parser.set_defaults(handler=show_search)

    subparsers.add_parser("categories", help="List categories").set_defaults(
        handler=show_categories
    )

    favorites_parser = subparsers.add_parser("favorites", help="List favorites")
    favorites_parser.add_argument("--user", default=None)
    favorites_parser.set_defaults(handler=show_favorites)

    delete_parser = subparsers.add_parser("delete-category", help="Delete an unused category")
    delete_parser.add_argument("category_id", type=int)
    delete_parser.set_defaults(handler=delete_category)

    return parser


def main(argv: Optional[List[str]] = None, services: Optional[CatalogServices] = None) -> int:
    """
    Main application entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        services: Pre-built services; when None the configured database is
                  initialized and the default services are used

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if services is None:
            initialize_app_database()
            services = build_services()
        return args.handler(services, args)
    except ServiceError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
