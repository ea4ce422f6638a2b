"""Structured output renderer for JSON and web-ready formats."""

import json
from typing import Any, Mapping

from orgs_transform.core.interfaces import DocumentTransform
from orgs_transform.core.schemas import TransformOptions


class StructuredRenderer(DocumentTransform):
    """Serializes the whole normalized data node as JSON.

    Category traversal is bypassed; the category chain plays no part in the
    output beyond being one more field of the data node.
    """

    def __init__(self, pretty: bool = False, indent: int = 2):
        self.pretty = pretty
        self.indent = indent

    def transform(self, data: Mapping[str, Any], options: TransformOptions | None = None) -> str:
        """Render the data node as a JSON string."""
        if self.pretty:
            return json.dumps(data, indent=self.indent)
        return json.dumps(data)

