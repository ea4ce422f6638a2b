"""Shared machinery for category renderers."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from orgs_transform.core.schemas import TransformContext, VisitPass

# Categories whose entries are GitHub users (name + profile url).
USER_CATEGORIES = ("collaborators", "contributors", "members", "owners", "users")

CategoryHandler = Callable[[str, Mapping[str, Any], int, TransformContext], str]


def format_reset(value: Any) -> str:
    """Format a rate limit reset timestamp (epoch seconds) as UTC.

    Values that are not numbers, or fall outside the representable range, are
    returned as given.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            reset = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, ValueError, OSError):
            return str(value)
        return reset.strftime("%Y-%m-%d %H:%M:%S UTC")
    return str(value)


def format_rate(label: str, rate: Mapping[str, Any]) -> str:
    """Format one rate limit resource line."""
    return (
        f"{label}: limit: {rate['limit']}, remaining: {rate['remaining']}, "
        f"reset: {format_reset(rate['reset'])}"
    )


def compact_json(entry: Any) -> str:
    """Serialize an entry on a single line."""
    return json.dumps(entry, separators=(",", ":"))


class CategoryRenderer(ABC):
    """Two-pass render callback dispatching on category name.

    Subclasses provide a table of per-category handlers for the open pass and
    may override ``close`` for formats that need closing text. Categories
    without a handler render as an empty string on both passes.
    """

    def __init__(self, indent_width: int = 3):
        self.indent_width = indent_width
        self._handlers: dict[str, CategoryHandler] = self._build_handlers()

    @abstractmethod
    def _build_handlers(self) -> dict[str, CategoryHandler]:
        """Return the open pass handler for every supported category."""
        pass

    def handles(self, category: str) -> bool:
        return category in self._handlers

    def __call__(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        if not self.handles(category):
            return ""

        if context.state(depth).visit_pass == VisitPass.OPEN:
            return self.open(category, entry, depth, context)
        return self.close(category, entry, depth, context)

    def open(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        return self._handlers[category](category, entry, depth, context)

    def close(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        # Flat formats only respond to the open pass.
        return ""

    def indent(self, depth: int) -> str:
        """Indentation for an entry at ``depth``."""
        if not isinstance(depth, int):
            raise TypeError(f"depth must be an int, got {type(depth).__name__}")
        return " " * (self.indent_width * depth)
