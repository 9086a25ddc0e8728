"""
Enumerations shared by the catalog models.

- ReferentialAction: What happens to dependents when their parent is deleted
"""

from enum import Enum


class ReferentialAction(str, Enum):
    """
    Delete behaviour declared for a parent/child relationship.

    Values:
        CASCADE: Deleting the parent deletes its dependents
        RESTRICT: Deleting the parent is refused while dependents exist
    """

    CASCADE = "cascade"
    RESTRICT = "restrict"
