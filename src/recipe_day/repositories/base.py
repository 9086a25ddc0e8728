"""
Generic repository over a SQLAlchemy session scope.

Session Management Pattern:
- Every method accepts an optional ``session`` parameter
- If session is provided, use it directly (the caller manages the transaction)
- If session is None, open a new scope for the single operation

Storage faults (any SQLAlchemyError) are logged and re-raised as
services.exceptions.DatabaseError; the scope rolls the transaction back.
"""

import logging
from typing import Any, Callable, ContextManager, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recipe_day.services.database import SessionScope, session_scope
from recipe_day.services.exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Repository(Generic[T]):
    """
    Base repository offering find/save/delete for one model.

    Subclasses set ``model`` and ``default_order`` and add their own
    filtered lookups built on ``_run``.

    Args:
        scope: Storage collaborator - a zero-argument callable returning a
               transactional session context. Defaults to the global
               services.database.session_scope.
    """

    model: Type[T]
    default_order: Tuple[Any, ...] = ()

    def __init__(self, scope: Optional[SessionScope] = None) -> None:
        self._scope = scope or session_scope

    def transaction(self) -> ContextManager[Session]:
        """Open a transactional scope to group several calls atomically."""
        return self._scope()

    def _run(
        self,
        operation: str,
        impl: Callable[[Session], R],
        session: Optional[Session] = None,
    ) -> R:
        """Execute impl in the given session or a fresh scope, wrapping storage faults."""
        try:
            if session is not None:
                return impl(session)
            with self._scope() as sess:
                return impl(sess)
        except SQLAlchemyError as e:
            logger.error(f"Database error in {self.model.__name__}.{operation}: {e}")
            raise DatabaseError(f"{operation} failed for {self.model.__name__}", e) from e

    def _query(self, sess: Session):
        return sess.query(self.model)

    def find_by_id(self, entity_id: int, session: Optional[Session] = None) -> Optional[T]:
        """Return the entity with the given id, or None."""

        def _impl(sess: Session) -> Optional[T]:
            return sess.get(self.model, entity_id)

        return self._run("find_by_id", _impl, session)

    def find_all(self, session: Optional[Session] = None) -> List[T]:
        """Return all entities in the repository's default order."""

        def _impl(sess: Session) -> List[T]:
            return self._query(sess).order_by(*self.default_order).all()

        return self._run("find_all", _impl, session)

    def exists_by(self, session: Optional[Session] = None, **criteria: Any) -> bool:
        """True if any entity matches all the given column == value criteria."""

        def _impl(sess: Session) -> bool:
            return self._query(sess).filter_by(**criteria).first() is not None

        return self._run("exists_by", _impl, session)

    def save(self, entity: T, session: Optional[Session] = None) -> Optional[T]:
        """
        Insert or update an entity.

        New entities (id is None) are added and get their id from the store.
        For existing ones the stored row is loaded and the entity's column
        values copied onto it, so a stale detached copy never overwrites
        collections it did not load.

        Returns:
            The persistent instance, refreshed from the store, or None when
            the entity carries an id with no stored row (nothing written)
        """

        def _impl(sess: Session) -> Optional[T]:
            entity_id = getattr(entity, "id", None)
            if entity_id is None:
                sess.add(entity)
                persistent = entity
            else:
                persistent = sess.get(self.model, entity_id)
                if persistent is None:
                    logger.debug(f"{self.model.__name__}.save: no stored row with id {entity_id}")
                    return None
                persistent.update_from_dict(self._column_values(entity))
                self._apply_links(persistent, entity, sess)
            sess.flush()
            sess.refresh(persistent)
            return persistent

        return self._run("save", _impl, session)

    def _column_values(self, entity: T) -> dict:
        return {column.key: getattr(entity, column.key) for column in self.model.__table__.columns}

    def _apply_links(self, persistent: T, entity: T, sess: Session) -> None:
        """Hook for subclasses to carry relationship changes onto the stored row."""
        pass

    def delete_by_id(self, entity_id: int, session: Optional[Session] = None) -> bool:
        """
        Delete the entity with the given id.

        Returns:
            True if a row was deleted, False if none existed
        """

        def _impl(sess: Session) -> bool:
            entity = sess.get(self.model, entity_id)
            if entity is None:
                return False
            self._before_delete(entity)
            sess.delete(entity)
            sess.flush()
            return True

        return self._run("delete_by_id", _impl, session)

    def _before_delete(self, entity: T) -> None:
        """Hook for subclasses to adjust in-memory links before a delete."""
        pass

    def count(self, session: Optional[Session] = None) -> int:
        """Return the number of stored entities."""

        def _impl(sess: Session) -> int:
            return self._query(sess).count()

        return self._run("count", _impl, session)
