"""Services package - Business logic layer for Recipe of the Day.

Architecture:
- Services: classes receiving their repositories through the constructor
- Transactions: managed via session_scope() / make_session_scope()
- Results: SaveResult carries field errors, DeleteOutcome the guarded delete
- Exceptions: DatabaseError for storage faults

Service Modules:
- category_service: CategoryService (uniqueness check, guarded delete)
- recipe_service: RecipeService (validated save, search, quick, random)
- favorite_service: FavoriteService (duplicate guard, per-user listings)

Infrastructure:
- database: Engine and session management
- dto: SaveResult and DeleteOutcome
- exceptions: Service layer exception classes
- logging_utils: Structured operation logging

Service modules are imported directly (``from recipe_day.services.recipe_service
import RecipeService``); the repositories they depend on import this
package's database module, so it is kept free of service imports.
"""

from . import database, dto, exceptions, logging_utils

__all__ = ["database", "dto", "exceptions", "logging_utils"]
