"""
Constants for the Recipe of the Day application.

This module defines system-wide constants including:
- Application metadata
- Field limits for categories, recipes and favorites
- Default values and validation messages
"""

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Recipe of the Day"
APP_VERSION = "0.1.0"
DATABASE_FILENAME = "recipe_day.db"

# Environment variables
ENV_VAR_ENVIRONMENT = "RECIPE_DAY_ENV"
ENV_VAR_DATABASE_URL = "RECIPE_DAY_DATABASE_URL"

# ============================================================================
# Category Limits
# ============================================================================

MAX_CATEGORY_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_ICON_LENGTH = 50

# Font Awesome icon used when a category has none
DEFAULT_CATEGORY_ICON = "fas fa-utensils"

# ============================================================================
# Recipe Limits
# ============================================================================

MAX_RECIPE_TITLE_LENGTH = 200

MIN_PREPARATION_TIME = 5
MAX_PREPARATION_TIME = 1440  # 24 hours

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

MIN_RATING = "0.0"
MAX_RATING = "5.0"

MIN_INGREDIENTS_LENGTH = 10
MAX_INGREDIENTS_LENGTH = 2000

MIN_INSTRUCTIONS_LENGTH = 20
MAX_INSTRUCTIONS_LENGTH = 5000

MIN_SERVINGS = 1
MAX_SERVINGS = 20

# Threshold used by the "quick recipes" listing
QUICK_RECIPE_MAX_MINUTES = 30

# ============================================================================
# Favorite Limits
# ============================================================================

MAX_USER_NAME_LENGTH = 100
MAX_COMMENT_LENGTH = 500

# ============================================================================
# Validation Messages
# ============================================================================

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Must be a valid number"
ERROR_INVALID_INTEGER = "Must be a whole number"
ERROR_DUPLICATE_CATEGORY = "A category with this title already exists"
ERROR_DUPLICATE_FAVORITE = "This recipe is already favorited by this user"
ERROR_CATEGORY_REQUIRED = "Category is required"
ERROR_RECIPE_REQUIRED = "Recipe is required"
ERROR_CATEGORY_NOT_SAVED = "Category must be saved first"
ERROR_RECIPE_NOT_SAVED = "Recipe must be saved first"
ERROR_NOT_FOUND = "No stored record has this id"
