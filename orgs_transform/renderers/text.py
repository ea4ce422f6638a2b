"""Plain text renderer."""

from typing import Any, Mapping

from orgs_transform.core.schemas import DepthState, TransformContext
from orgs_transform.renderers.base import (
    USER_CATEGORIES,
    CategoryHandler,
    CategoryRenderer,
    compact_json,
    format_rate,
)


class TextRenderer(CategoryRenderer):
    """Renders one indented line per entry.

    A blank line follows the last leaf of a nested group so sibling groups
    stay visually separated.
    """

    def _build_handlers(self) -> dict[str, CategoryHandler]:
        handlers: dict[str, CategoryHandler] = {name: self._user for name in USER_CATEGORIES}
        handlers.update(
            orgs=self._org,
            repos=self._described,
            teams=self._described,
            ratelimit=self._rate_limit,
            stats=self._stats,
        )
        return handlers

    def _tail(self, depth: int, state: DepthState) -> str:
        if depth > 0 and state.last_entry and state.is_leaf:
            return "\n\n"
        return "\n"

    def _user(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        tail = self._tail(depth, context.state(depth))
        line = entry["name"]
        if context.description and entry.get("url"):
            line += f" - {entry['url']}"
        return f"{self.indent(depth)}{line}{tail}"

    def _org(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        state = context.state(depth)
        if depth == 0 and context.chain_length > 1 and state.is_leaf:
            tail = "\n\n"
        else:
            tail = self._tail(depth, state)
        return f"{self.indent(depth)}{self._name(entry, context)}{tail}"

    def _described(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        tail = self._tail(depth, context.state(depth))
        return f"{self.indent(depth)}{self._name(entry, context)}{tail}"

    def _rate_limit(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        tail = self._tail(depth, context.state(depth))
        prefix = self.indent(depth)
        return (
            f"{prefix}{format_rate('Core', entry['core'])}\n"
            f"{prefix}{format_rate('Search', entry['search'])}{tail}"
        )

    def _stats(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        tail = "\n\n" if depth > 0 and context.state(depth).is_leaf else "\n"
        return f"{self.indent(depth)}{compact_json(entry)}{tail}"

    @staticmethod
    def _name(entry: Mapping[str, Any], context: TransformContext) -> str:
        if context.description and entry.get("description"):
            return f"{entry['name']} - {entry['description']}"
        return entry["name"]
