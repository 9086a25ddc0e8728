"""
Runtime configuration for Recipe of the Day.

Where the database lives depends on the environment:
- production (default): ``~/.recipe_day/recipe_day.db``
- development: ``<project>/data/recipe_day.db``

RECIPE_DAY_ENV picks the environment and RECIPE_DAY_DATABASE_URL replaces
the SQLite file with any SQLAlchemy URL.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DATABASE_FILENAME,
    ENV_VAR_DATABASE_URL,
    ENV_VAR_ENVIRONMENT,
)

logger = logging.getLogger(__name__)

PRODUCTION = "production"
DEVELOPMENT = "development"


class Config:
    """
    Database location and environment settings.

    Args:
        environment: PRODUCTION or DEVELOPMENT
        database_url: Explicit SQLAlchemy URL. When None the
                      RECIPE_DAY_DATABASE_URL variable is consulted, then the
                      environment's SQLite file is used. The data directory is
                      only created when the SQLite file is in use.
    """

    def __init__(self, environment: str = PRODUCTION, database_url: Optional[str] = None):
        self.environment = environment
        self._url_override = database_url or os.environ.get(ENV_VAR_DATABASE_URL)

        if environment == DEVELOPMENT:
            # src/recipe_day/utils/config.py -> <project>/data
            self._data_dir = Path(__file__).resolve().parents[3] / "data"
        else:
            self._data_dir = Path.home() / ".recipe_day"

        if self._url_override is None:
            self._data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def app_name(self) -> str:
        return APP_NAME

    @property
    def app_version(self) -> str:
        return APP_VERSION

    @property
    def database_path(self) -> Path:
        """Location of the SQLite file (meaningful only without a URL override)."""
        return self._data_dir / DATABASE_FILENAME

    @property
    def database_url(self) -> str:
        """The override URL if set, else a ``sqlite:///`` URL for database_path."""
        if self._url_override:
            return self._url_override
        return "sqlite:///" + self.database_path.as_posix()

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    def database_exists(self) -> bool:
        """Whether the SQLite file exists; always True for an external URL."""
        return bool(self._url_override) or self.database_path.exists()

    def __repr__(self) -> str:
        return f"Config(environment='{self.environment}', database_url='{self.database_url}')"


_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Return the process-wide Config, creating it on first call.

    Args:
        environment: Environment for the first call; RECIPE_DAY_ENV (or
                     production) when None. Later calls cannot switch it: a
                     different value is logged and the existing Config kept.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config(environment or os.environ.get(ENV_VAR_ENVIRONMENT, PRODUCTION))
    elif environment is not None and environment != _config_instance.environment:
        logger.warning(
            f"Ignoring get_config(environment='{environment}'): the config singleton already "
            f"exists with environment='{_config_instance.environment}'"
        )

    return _config_instance


def reset_config() -> None:
    """Forget the process-wide Config (tests)."""
    global _config_instance
    _config_instance = None


def get_database_url() -> str:
    """Database URL of the process-wide Config."""
    return get_config().database_url
