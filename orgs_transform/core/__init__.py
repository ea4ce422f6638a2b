"""Core module - interfaces, schemas, errors and configuration."""

from orgs_transform.core.errors import InvalidInputError, TransformError, UnknownFormatError
from orgs_transform.core.interfaces import DocumentTransform, InspectOrgsSource, RenderFunction
from orgs_transform.core.schemas import (
    DepthState,
    QueryResult,
    TransformContext,
    TransformOptions,
    VisitPass,
    new_context,
)

__all__ = [
    "DepthState",
    "DocumentTransform",
    "InspectOrgsSource",
    "InvalidInputError",
    "QueryResult",
    "RenderFunction",
    "TransformContext",
    "TransformError",
    "TransformOptions",
    "UnknownFormatError",
    "VisitPass",
    "new_context",
]
