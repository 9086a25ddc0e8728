"""Structured logging for catalog service operations.

Every create/update/delete outcome is logged through ``log_operation`` so
records share one shape: the message reads "<operation>: <outcome>" and the
operation, outcome and entity ids travel as record attributes.

Usage:
    from recipe_day.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)
    log_operation(logger, operation="delete_category", outcome="in_use", category_id=3)
"""

import logging
from typing import Any


def get_service_logger(name: str) -> logging.Logger:
    """
    Logger under the ``recipe_day.services`` namespace.

    Only the last dotted segment of name is kept, so
    ``get_service_logger("recipe_day.services.favorite_service").name`` is
    ``"recipe_day.services.favorite_service"``.
    """
    module = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"recipe_day.services.{module}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Emit one record for a service operation.

    Args:
        logger: Target logger
        operation: e.g. "save_recipe"
        outcome: e.g. "success", "validation_failed", "in_use"
        level: Log level (INFO by default)
        **context: Entity ids and other fields attached via ``extra``
    """
    extra = {"operation": operation, "outcome": outcome, **context}
    logger.log(level, f"{operation}: {outcome}", extra=extra)
