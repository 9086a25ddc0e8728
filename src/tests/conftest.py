"""Pytest configuration and fixtures for model, service and CLI tests."""

from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker

from recipe_day.models import Base, Category, Recipe
from recipe_day.services.catalog import build_services
from recipe_day.services.database import create_database_engine, make_session_scope


@pytest.fixture(scope="function")
def test_db():
    """Provide a clean test database for each test function.

    This fixture:
    1. Creates an in-memory SQLite database (foreign keys enforced)
    2. Creates all tables
    3. Provides the session factory to the test
    4. Drops all tables after the test completes
    """
    engine = create_database_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)

    session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    yield session_factory

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def scope(test_db):
    """Session scope over the test database, as repositories expect it."""
    return make_session_scope(test_db)


@pytest.fixture(scope="function")
def services(scope):
    """Catalog services wired to the test database."""
    return build_services(scope)


@pytest.fixture(scope="function")
def soups(services):
    """Provide a saved "Soups" category."""
    return services.categories.save(Category(title="Soups", description="Hot and cold soups"))


@pytest.fixture(scope="function")
def desserts(services):
    """Provide a saved "Desserts" category."""
    return services.categories.save(Category(title="Desserts", icon="fas fa-ice-cream"))


@pytest.fixture(scope="function")
def make_recipe():
    """Build an unsaved, valid recipe; keyword arguments override fields."""

    def _make(category, **overrides):
        fields = {
            "title": "Tomato Soup",
            "description": "Smooth soup from roasted tomatoes",
            "category": category,
            "preparation_time": 45,
            "difficulty": 2,
            "rating": Decimal("4.0"),
            "ingredients": "1 kg tomatoes, 1 onion, 2 cloves garlic",
            "instructions": "Roast the tomatoes, simmer with onion and garlic, then blend.",
            "servings": 4,
        }
        fields.update(overrides)
        return Recipe(**fields)

    return _make


@pytest.fixture(scope="function")
def create_recipe(services, make_recipe):
    """Save a valid recipe and return the persisted instance."""

    def _create(category, **overrides):
        return services.recipes.save(make_recipe(category, **overrides)).unwrap()

    return _create
