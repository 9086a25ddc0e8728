"""Tests for service layer structured logging.

These tests verify that catalog operations emit structured log entries
with their outcome and entity ids.
"""

import logging

from recipe_day.models import Category, Favorite
from recipe_day.services.logging_utils import get_service_logger, log_operation


class TestLoggingUtilities:
    """Tests for logging utility functions."""

    def test_get_service_logger_returns_logger(self):
        """get_service_logger returns a configured Logger instance."""
        logger = get_service_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "recipe_day.services.test_module"

    def test_get_service_logger_extracts_module_name(self):
        """get_service_logger extracts module name from full path."""
        logger = get_service_logger("recipe_day.services.favorite_service")
        assert logger.name == "recipe_day.services.favorite_service"

    def test_log_operation_logs_at_info_level(self, caplog):
        """log_operation logs at INFO level by default."""
        logger = get_service_logger("test")

        with caplog.at_level(logging.INFO):
            log_operation(logger, operation="test_op", outcome="success", entity_id=123)

        assert "test_op: success" in caplog.text
        assert caplog.records[0].levelno == logging.INFO

    def test_log_operation_logs_at_custom_level(self, caplog):
        """log_operation respects custom log level."""
        logger = get_service_logger("test")

        with caplog.at_level(logging.DEBUG):
            log_operation(
                logger,
                operation="debug_op",
                outcome="debug_outcome",
                level=logging.DEBUG,
            )

        assert "debug_op: debug_outcome" in caplog.text

    def test_log_operation_includes_extra_context(self, caplog):
        """log_operation includes extra context in log records."""
        logger = get_service_logger("test")

        with caplog.at_level(logging.INFO):
            log_operation(
                logger,
                operation="context_test",
                outcome="success",
                recipe_id=42,
                category_id=7,
            )

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.operation == "context_test"
        assert record.outcome == "success"
        assert record.recipe_id == 42
        assert record.category_id == 7


class TestCatalogLogging:
    """Tests for the outcomes logged by the catalog services."""

    def test_category_create_logged(self, services, caplog):
        with caplog.at_level(logging.INFO, logger="recipe_day.services"):
            category = services.categories.save(Category(title="Salads"))

        records = [r for r in caplog.records if getattr(r, "operation", None) == "create_category"]
        assert len(records) == 1
        assert records[0].outcome == "success"
        assert records[0].category_id == category.id

    def test_category_in_use_logged(self, services, soups, create_recipe, caplog):
        create_recipe(soups)

        with caplog.at_level(logging.INFO, logger="recipe_day.services"):
            services.categories.delete(soups.id)

        assert "delete_category: in_use" in caplog.text

    def test_recipe_validation_failure_logged(self, services, soups, make_recipe, caplog):
        with caplog.at_level(logging.INFO, logger="recipe_day.services"):
            services.recipes.save(make_recipe(soups, difficulty=9))

        records = [r for r in caplog.records if getattr(r, "outcome", None) == "validation_failed"]
        assert len(records) == 1
        assert records[0].operation == "save_recipe"
        assert records[0].fields == ["difficulty"]

    def test_duplicate_favorite_logged(self, services, soups, create_recipe, caplog):
        recipe = create_recipe(soups)
        services.favorites.save(Favorite(recipe=recipe, user_name="Ann")).unwrap()

        with caplog.at_level(logging.INFO, logger="recipe_day.services"):
            services.favorites.save(Favorite(recipe=recipe, user_name="ANN"))

        assert "create_favorite: duplicate" in caplog.text
