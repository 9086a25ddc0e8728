"""
Input validation functions for the Recipe of the Day application.

This module provides:
- Primitive checks returning (is_valid, error_message) tuples
- Entity validators returning {field_name: message} dictionaries, used by
  the services to reject a save before anything is persisted
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple

from .constants import (
    ERROR_CATEGORY_NOT_SAVED,
    ERROR_CATEGORY_REQUIRED,
    ERROR_INVALID_INTEGER,
    ERROR_INVALID_NUMBER,
    ERROR_RECIPE_NOT_SAVED,
    ERROR_RECIPE_REQUIRED,
    ERROR_REQUIRED_FIELD,
    MAX_CATEGORY_TITLE_LENGTH,
    MAX_COMMENT_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_DIFFICULTY,
    MAX_ICON_LENGTH,
    MAX_INGREDIENTS_LENGTH,
    MAX_INSTRUCTIONS_LENGTH,
    MAX_PREPARATION_TIME,
    MAX_RATING,
    MAX_RECIPE_TITLE_LENGTH,
    MAX_SERVINGS,
    MAX_USER_NAME_LENGTH,
    MIN_DIFFICULTY,
    MIN_INGREDIENTS_LENGTH,
    MIN_INSTRUCTIONS_LENGTH,
    MIN_PREPARATION_TIME,
    MIN_RATING,
    MIN_SERVINGS,
)


def validate_required_string(value: Optional[str], field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    return True, ""


def validate_string_length(
    value: Optional[str], max_length: int, field_name: str = "Field", min_length: int = 0
) -> Tuple[bool, str]:
    """
    Validate that a string's length is within [min_length, max_length].

    None and "" are only checked against min_length; use
    validate_required_string for presence.

    Args:
        value: The string value to validate
        max_length: Maximum allowed length
        field_name: Name of the field for error messages
        min_length: Minimum allowed length (default 0)

    Returns:
        Tuple of (is_valid, error_message)
    """
    length = len(value) if value else 0
    if length > max_length:
        return False, f"{field_name}: Must be {max_length} characters or less"
    if length < min_length:
        return False, f"{field_name}: Must be at least {min_length} characters"
    return True, ""


def validate_integer_range(
    value: Any, min_value: int, max_value: int, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a value is a whole number within [min_value, max_value].

    Args:
        value: The value to validate
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None:
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"{field_name}: {ERROR_INVALID_INTEGER}"
    if value < min_value or value > max_value:
        return False, f"{field_name}: Must be between {min_value} and {max_value}"
    return True, ""


def validate_decimal_range(
    value: Any, min_value: str, max_value: str, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a value is a number within [min_value, max_value].

    Bounds are given as strings so they compare exactly as Decimals.

    Args:
        value: The value to validate (Decimal, int, float or numeric string)
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if not number.is_finite():
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if number < Decimal(min_value) or number > Decimal(max_value):
        return False, f"{field_name}: Must be between {min_value} and {max_value}"
    return True, ""


def _collect(errors: Dict[str, str], field: str, check: Tuple[bool, str]) -> None:
    """Record the first failing check for a field."""
    is_valid, message = check
    if not is_valid and field not in errors:
        errors[field] = message


def _check_text(
    errors: Dict[str, str],
    field: str,
    label: str,
    value: Optional[str],
    max_length: int,
    min_length: int = 0,
    required: bool = False,
) -> None:
    if required:
        _collect(errors, field, validate_required_string(value, label))
    _collect(errors, field, validate_string_length(value, max_length, label, min_length))


def validate_category(category) -> Dict[str, str]:
    """
    Validate a category's fields.

    Uniqueness is not checked here (it needs the store); see
    CategoryService.validate.

    Returns:
        Mapping of field name to error message (empty when valid)
    """
    errors: Dict[str, str] = {}
    _check_text(errors, "title", "Title", category.title, MAX_CATEGORY_TITLE_LENGTH, required=True)
    _check_text(errors, "description", "Description", category.description, MAX_DESCRIPTION_LENGTH)
    _check_text(errors, "icon", "Icon", category.icon, MAX_ICON_LENGTH)
    return errors


def validate_recipe(recipe) -> Dict[str, str]:
    """
    Validate a recipe's fields and its category, which must already be stored.

    Returns:
        Mapping of field name to error message (empty when valid)
    """
    errors: Dict[str, str] = {}
    _check_text(errors, "title", "Title", recipe.title, MAX_RECIPE_TITLE_LENGTH, required=True)
    _check_text(errors, "description", "Description", recipe.description, MAX_DESCRIPTION_LENGTH)

    if recipe.category is not None:
        if recipe.category.id is None:
            errors["category"] = ERROR_CATEGORY_NOT_SAVED
    elif recipe.category_id is None:
        errors["category"] = ERROR_CATEGORY_REQUIRED

    _collect(
        errors,
        "preparation_time",
        validate_integer_range(
            recipe.preparation_time,
            MIN_PREPARATION_TIME,
            MAX_PREPARATION_TIME,
            "Preparation time",
        ),
    )
    _collect(
        errors,
        "difficulty",
        validate_integer_range(recipe.difficulty, MIN_DIFFICULTY, MAX_DIFFICULTY, "Difficulty"),
    )
    if recipe.rating is not None:
        _collect(
            errors,
            "rating",
            validate_decimal_range(recipe.rating, MIN_RATING, MAX_RATING, "Rating"),
        )

    _check_text(
        errors,
        "ingredients",
        "Ingredients",
        recipe.ingredients,
        MAX_INGREDIENTS_LENGTH,
        MIN_INGREDIENTS_LENGTH,
        required=True,
    )
    _check_text(
        errors,
        "instructions",
        "Instructions",
        recipe.instructions,
        MAX_INSTRUCTIONS_LENGTH,
        MIN_INSTRUCTIONS_LENGTH,
        required=True,
    )
    _collect(
        errors,
        "servings",
        validate_integer_range(recipe.servings, MIN_SERVINGS, MAX_SERVINGS, "Servings"),
    )
    return errors


def validate_favorite(favorite) -> Dict[str, str]:
    """
    Validate a favorite's fields and its recipe, which must already be stored.

    Returns:
        Mapping of field name to error message (empty when valid)
    """
    errors: Dict[str, str] = {}
    if favorite.recipe is not None:
        if favorite.recipe.id is None:
            errors["recipe"] = ERROR_RECIPE_NOT_SAVED
    elif favorite.recipe_id is None:
        errors["recipe"] = ERROR_RECIPE_REQUIRED
    _check_text(
        errors, "user_name", "User name", favorite.user_name, MAX_USER_NAME_LENGTH, required=True
    )
    _check_text(errors, "comment", "Comment", favorite.comment, MAX_COMMENT_LENGTH)
    return errors
