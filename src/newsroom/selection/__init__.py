"""Selection criteria for publication."""

from newsroom.selection.criteria import (
    IS_SENSATIONALIST,
    JOURNALIST_LIKES,
    AllOf,
    ImportanceRange,
    IsSensationalist,
    JournalistLikes,
    SelectionCriterion,
)

__all__ = [
    "IS_SENSATIONALIST",
    "JOURNALIST_LIKES",
    "AllOf",
    "ImportanceRange",
    "IsSensationalist",
    "JournalistLikes",
    "SelectionCriterion",
]
