"""HTML renderer producing nested unordered lists."""

from html import escape
from typing import Any, Mapping

from orgs_transform.core.schemas import TransformContext
from orgs_transform.renderers.base import (
    USER_CATEGORIES,
    CategoryHandler,
    CategoryRenderer,
    compact_json,
    format_rate,
)


class HTMLRenderer(CategoryRenderer):
    """Renders each category as a ``<ul id="{category}">`` list.

    The open pass emits the list and item openings plus the entry content; the
    close pass emits ``</li>`` for entries that had children and ``</ul>`` after
    the last sibling. Non-first items at depth 0 of a nested chain carry the
    ``li-depth-0`` CSS class for spacing.
    """

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

    def open(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        state = context.state(depth)

        if state.first_entry:
            prefix = f'{self.indent(depth)}<ul id="{escape(category)}">\n{self.indent(depth + 1)}<li>'
        elif depth == 0 and depth < context.chain_length - 1:
            prefix = f'{self.indent(depth + 1)}<li class="li-depth-0">'
        else:
            prefix = f"{self.indent(depth + 1)}<li>"

        tail = "</li>\n" if state.is_leaf else "\n"

        return f"{prefix}{super().open(category, entry, depth, context)}{tail}"

    def close(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        state = context.state(depth)

        result = ""
        if not state.is_leaf:
            result += f"{self.indent(depth + 1)}</li>\n"
        if state.last_entry:
            result += f"{self.indent(depth)}</ul>\n"
        return result

    @staticmethod
    def _anchor(entry: Mapping[str, Any]) -> str:
        name = escape(str(entry["name"]))
        if entry.get("url"):
            return f'<a href="{escape(entry["url"], quote=True)}" target="_blank">{name}</a>'
        return name

    @staticmethod
    def _description(entry: Mapping[str, Any], context: TransformContext) -> str:
        if context.description and entry.get("description"):
            return f" - {escape(str(entry['description']))}"
        return ""

    def _user(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        return self._anchor(entry)

    def _described(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        return f"{self._anchor(entry)}{self._description(entry, context)}"

    def _team(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        return f"{escape(str(entry['name']))}{self._description(entry, context)}"

    def _rate_limit(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        # Two items: the core line is closed here, the search line by the open pass tail.
        return (
            f"{format_rate('Core', entry['core'])}</li>\n"
            f"{self.indent(depth + 1)}<li>{format_rate('Search', entry['search'])}"
        )

    def _stats(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        return f"<pre>{escape(compact_json(entry))}</pre>"
