"""Data Transfer Objects for service layer results.

- SaveResult: outcome of a validated save, carrying field errors
- DeleteOutcome: outcome of a guarded delete
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, TypeVar

from .exceptions import ValidationError

T = TypeVar("T")


@dataclass
class SaveResult(Generic[T]):
    """Result of a save that may be rejected by validation.

    On success ``entity`` is the persisted instance (with its id).
    On rejection ``entity`` is the input as submitted and ``errors`` maps
    field names to messages so a form can be redisplayed.

    Attributes:
        entity: Persisted entity, or the rejected input
        errors: Field name -> message (empty on success)

    Examples:
        result = recipe_service.save(recipe)
        if not result.success:
            show_form(result.entity, result.errors)
    """

    entity: T
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """True when nothing was rejected."""
        return not self.errors

    def unwrap(self) -> T:
        """
        Return the entity, raising if the save was rejected.

        Raises:
            ValidationError: If errors are present
        """
        if self.errors:
            raise ValidationError(self.errors)
        return self.entity


class DeleteOutcome(str, Enum):
    """
    Outcome of a guarded delete.

    Values:
        DELETED: Row removed
        NOT_FOUND: No row with that id
        IN_USE: Refused because dependents still reference the row
    """

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    IN_USE = "in_use"
