"""Markdown renderer."""

from typing import Any, Mapping

from orgs_transform.core.schemas import TransformContext
from orgs_transform.renderers.base import (
    USER_CATEGORIES,
    CategoryHandler,
    CategoryRenderer,
    compact_json,
    format_rate,
)


class MarkdownRenderer(CategoryRenderer):
    """Renders depth 0 entries as paragraphs and deeper entries as nested bullet lists."""

    def _build_handlers(self) -> dict[str, CategoryHandler]:
        handlers: dict[str, CategoryHandler] = {name: self._user for name in USER_CATEGORIES}
        handlers.update(
            orgs=self._described,
            repos=self._described,
            teams=self._team,
            ratelimit=self._rate_limit,
            stats=self._stats,
        )
        return handlers

    def _layout(self, depth: int, context: TransformContext) -> tuple[str, str]:
        """Return the (prefix, tail) pair for an entry at ``depth``."""
        if depth == 0:
            return "", "\n\n"

        state = context.state(depth)
        marker = "-" if depth == 1 else "*"
        tail = "\n\n" if state.last_entry and state.is_leaf else "\n"
        return f"{self.indent(depth)}{marker} ", tail

    @staticmethod
    def _link(entry: Mapping[str, Any]) -> str:
        if entry.get("url"):
            return f"[{entry['name']}]({entry['url']})"
        return entry["name"]

    def _user(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        prefix, tail = self._layout(depth, context)
        # A flat list of users reads better as a list than as paragraphs
        if depth == 0 and context.chain_length == 1:
            prefix, tail = "- ", "\n"
        return f"{prefix}{self._link(entry)}{tail}"

    def _described(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        prefix, tail = self._layout(depth, context)
        text = self._link(entry)
        if context.description and entry.get("description"):
            text += f" - {entry['description']}"
        return f"{prefix}{text}{tail}"

    def _team(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        prefix, tail = self._layout(depth, context)
        text = entry["name"]
        if context.description and entry.get("description"):
            text += f" - {entry['description']}"
        return f"{prefix}{text}{tail}"

    def _rate_limit(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        prefix, tail = self._layout(depth, context)
        return (
            f"{prefix}{format_rate('Core', entry['core'])}\n"
            f"{prefix}{format_rate('Search', entry['search'])}{tail}"
        )

    def _stats(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        prefix, tail = self._layout(depth, context)
        return f"{prefix}`{compact_json(entry)}`{tail}"
