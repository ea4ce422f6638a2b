"""Category traversal engine."""

from orgs_transform.traversal.engine import (
    EventKind,
    TraversalEvent,
    is_leaf,
    iter_events,
    parse_categories,
    transform_categories,
    traverse,
)

__all__ = [
    "EventKind",
    "TraversalEvent",
    "is_leaf",
    "iter_events",
    "parse_categories",
    "transform_categories",
    "traverse",
]
