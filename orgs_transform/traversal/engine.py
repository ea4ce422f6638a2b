"""Category traversal engine - two-pass depth-first walk over a category chain.

A category chain such as ``orgs:repos:collaborators`` names the list-valued
field to descend into at each depth. Every entry at every depth is visited
twice: an ENTER (open) event before its children and an EXIT (close) event
after them. Leaves get both events back to back.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping, Sequence

from orgs_transform.core.errors import InvalidInputError
from orgs_transform.core.interfaces import RenderFunction
from orgs_transform.core.schemas import (
    DepthState,
    TransformContext,
    TransformOptions,
    VisitPass,
    new_context,
)

logger = logging.getLogger(__name__)

CATEGORY_SEPARATOR = ":"


class EventKind(str, Enum):
    """Traversal event kinds."""

    ENTER = "ENTER"
    EXIT = "EXIT"


@dataclass(frozen=True)
class TraversalEvent:
    """One visit of an entry.

    Attributes:
        kind:      ENTER for the open pass, EXIT for the close pass.
        category:  Category name of the list holding the entry.
        entry:     The visited entry itself (not copied).
        depth:     Index of ``category`` in the chain.
        state:     Depth state of the visit; the same object the context held
                   when the event was yielded.
    """

    kind: EventKind
    category: str
    entry: Mapping[str, Any]
    depth: int
    state: DepthState


def parse_categories(descriptor: str | Sequence[str]) -> list[str]:
    """Parse a colon-delimited string or a sequence of names into a category chain."""
    if isinstance(descriptor, str):
        categories = descriptor.split(CATEGORY_SEPARATOR)
    elif isinstance(descriptor, Sequence):
        categories = list(descriptor)
    else:
        raise InvalidInputError(
            f"Category chain must be a string or a list of names, got {type(descriptor).__name__}"
        )

    if not categories or categories == [""]:
        raise InvalidInputError("Category chain is empty")

    for name in categories:
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError(f"Invalid category name in chain: {name!r}")

    return categories


def is_leaf(entry: Mapping[str, Any], categories: Sequence[str], depth: int) -> bool:
    """Whether ``entry`` has no deeper children to descend into.

    True at the end of the chain, and also when the next category's field is
    absent, not a list, or an empty list.
    """
    if depth + 1 >= len(categories):
        return True

    children = entry.get(categories[depth + 1]) if isinstance(entry, Mapping) else None
    return not (isinstance(children, list) and len(children) > 0)


def _entries(node: Any, category: str) -> list:
    if not isinstance(node, Mapping):
        raise InvalidInputError(f"Data node must be a mapping, got {type(node).__name__}")

    entries = node.get(category)
    if not isinstance(entries, list):
        raise InvalidInputError(f"Data node field '{category}' must be a list")

    return entries


def iter_events(
    root: Mapping[str, Any],
    categories: Sequence[str],
    context: TransformContext | None = None,
) -> Iterator[TraversalEvent]:
    """
    Lazily walk the category tree yielding ENTER / EXIT events.

    The depth state in ``context`` is overwritten before each event is yielded,
    so a consumer acting on the event immediately sees the live state.

    Args:
        root: Data node holding the list for ``categories[0]``
        categories: Non-empty category chain
        context: Per-call context; allocated when omitted

    Raises:
        InvalidInputError: Empty chain or root lacking a list for the first category
    """
    if not categories:
        raise InvalidInputError("Category chain is empty")

    categories = tuple(categories)
    if context is None:
        context = new_context(len(categories))
    elif len(context.states) < len(categories):
        raise InvalidInputError(
            f"Context holds {len(context.states)} depth states for a chain of {len(categories)}"
        )

    # Root is checked here, before the generator starts.
    entries = _entries(root, categories[0])

    return _walk(entries, categories, 0, context)


def _walk(
    entries: list, categories: tuple[str, ...], depth: int, context: TransformContext
) -> Iterator[TraversalEvent]:
    category = categories[depth]
    last_index = len(entries) - 1

    for index, entry in enumerate(entries):
        leaf = is_leaf(entry, categories, depth)

        first_entry = index == 0
        last_entry = index == last_index

        # Each visit gets a new state object; states are never mutated in place.
        state = DepthState(
            first_entry=first_entry, last_entry=last_entry, is_leaf=leaf, visit_pass=VisitPass.OPEN
        )
        context.states[depth] = state

        yield TraversalEvent(EventKind.ENTER, category, entry, depth, state)

        if not leaf:
            yield from _walk(entry[categories[depth + 1]], categories, depth + 1, context)

        state = DepthState(
            first_entry=first_entry, last_entry=last_entry, is_leaf=leaf, visit_pass=VisitPass.CLOSE
        )
        context.states[depth] = state

        yield TraversalEvent(EventKind.EXIT, category, entry, depth, state)


def traverse(
    root: Mapping[str, Any],
    categories: Sequence[str],
    render: RenderFunction,
    context: TransformContext | None = None,
) -> str:
    """
    Render the category tree by calling ``render`` on every ENTER and EXIT event.

    Exceptions raised by ``render`` propagate unchanged.

    Returns:
        Concatenation of all rendered fragments in visitation order
    """
    if context is None:
        context = new_context(len(categories)) if categories else None

    parts = []
    for event in iter_events(root, categories, context):
        parts.append(render(event.category, event.entry, event.depth, context))

    return "".join(parts)


def transform_categories(
    data: Mapping[str, Any],
    render: RenderFunction,
    options: TransformOptions | None = None,
) -> str:
    """Traverse ``data`` along its declared ``categories`` chain with a fresh context."""
    if not isinstance(data, Mapping):
        raise InvalidInputError(f"Data must be a mapping, got {type(data).__name__}")
    if "categories" not in data:
        raise InvalidInputError("Data node does not declare a 'categories' chain")

    categories = parse_categories(data["categories"])
    context = new_context(len(categories), options)

    logger.debug("Traversing category chain %s", CATEGORY_SEPARATOR.join(categories))

    return traverse(data, categories, render, context)
