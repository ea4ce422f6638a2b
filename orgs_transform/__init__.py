"""Render normalized GitHub organization data as HTML, JSON, Markdown or text."""

from orgs_transform.control import TransformControl
from orgs_transform.core.errors import InvalidInputError, TransformError, UnknownFormatError
from orgs_transform.core.schemas import TransformOptions
from orgs_transform.pipeline import InspectOrgsTransform
from orgs_transform.traversal.engine import iter_events, transform_categories, traverse

__all__ = [
    "InspectOrgsTransform",
    "InvalidInputError",
    "TransformControl",
    "TransformError",
    "TransformOptions",
    "UnknownFormatError",
    "iter_events",
    "transform_categories",
    "traverse",
]
