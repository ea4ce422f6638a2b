"""Output rendering module."""

from orgs_transform.renderers.base import USER_CATEGORIES, CategoryRenderer
from orgs_transform.renderers.html import HTMLRenderer
from orgs_transform.renderers.markdown import MarkdownRenderer
from orgs_transform.renderers.structured import StructuredRenderer
from orgs_transform.renderers.text import TextRenderer

__all__ = [
    "USER_CATEGORIES",
    "CategoryRenderer",
    "HTMLRenderer",
    "MarkdownRenderer",
    "StructuredRenderer",
    "TextRenderer",
]
