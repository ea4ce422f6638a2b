"""Transform control - dispatches normalized data to the active transform.

Built-in transform types are ``html``, ``json``, ``markdown`` and ``text``.
Category renderers are driven by the traversal engine; document transforms
(``json``) receive the whole data node. User supplied transforms may return
any type of data.
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from orgs_transform.core.config import OutputConfig
from orgs_transform.core.errors import InvalidInputError, UnknownFormatError
from orgs_transform.core.interfaces import DocumentTransform, RenderFunction
from orgs_transform.core.schemas import TransformOptions
from orgs_transform.renderers import HTMLRenderer, MarkdownRenderer, StructuredRenderer, TextRenderer
from orgs_transform.traversal.engine import transform_categories

logger = logging.getLogger(__name__)

DEFAULT_TRANSFORM_TYPE = "text"

Transform = RenderFunction | DocumentTransform


def default_transforms(output: OutputConfig | None = None) -> dict[str, Transform]:
    """Build the built-in transforms."""
    output = output or OutputConfig()
    return {
        "html": HTMLRenderer(indent_width=output.indent_width),
        "json": StructuredRenderer(pretty=output.json_pretty, indent=output.json_indent),
        "markdown": MarkdownRenderer(indent_width=output.indent_width),
        "text": TextRenderer(indent_width=output.indent_width),
    }


class TransformControl:
    """Registry of transforms by name holding the currently active transform type."""

    def __init__(
        self,
        transform_type: str = DEFAULT_TRANSFORM_TYPE,
        transforms: Mapping[str, Transform] | None = None,
        output: OutputConfig | None = None,
    ):
        self._transforms: dict[str, Transform] = default_transforms(output)

        # Add any user supplied transforms.
        for name, transform in (transforms or {}).items():
            self._validate(name, transform)
            self._transforms[name] = transform

        if transform_type not in self._transforms:
            raise UnknownFormatError(transform_type, list(self._transforms))

        self._transform_type = transform_type

    @staticmethod
    def _validate(name: Any, transform: Any) -> None:
        if not isinstance(name, str) or not name:
            raise TypeError(f"Transform name must be a non-empty string, got {name!r}")
        if not isinstance(transform, DocumentTransform) and not callable(transform):
            raise TypeError(f"Transform {name!r} must be callable or a DocumentTransform")

    def register_format(self, name: str, transform: Transform) -> None:
        """Add or replace the transform stored under ``name``."""
        self._validate(name, transform)
        if name in self._transforms:
            logger.debug("Replacing transform %r", name)
        self._transforms[name] = transform

    def available_formats(self) -> list[str]:
        """List registered transform types."""
        return sorted(self._transforms)

    def get_active_format(self) -> str:
        """Return the active transform type."""
        return self._transform_type

    def set_active_format(self, transform_type: str) -> None:
        """Set the active transform type."""
        if transform_type not in self._transforms:
            raise UnknownFormatError(transform_type, list(self._transforms))

        logger.debug("Transform type set to %r", transform_type)
        self._transform_type = transform_type

    def get_transform(self, transform_type: str | None = None) -> Transform:
        """Resolve a transform by name, defaulting to the current transform type."""
        name = self._transform_type if transform_type is None else transform_type
        try:
            return self._transforms[name]
        except KeyError:
            raise UnknownFormatError(name, list(self._transforms)) from None

    def transform(
        self,
        data: Mapping[str, Any],
        options: TransformOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Transform normalized data by the current or overridden transform type.

        Args:
            data: Normalized data node declaring its ``categories`` chain
            options: ``description`` and ``transform_type`` override

        Returns:
            The transformed result; a string for the built-in transforms

        Raises:
            UnknownFormatError: The resolved transform type is not registered
            InvalidInputError: The options or data are invalid
        """
        if options is None:
            options = TransformOptions()
        elif not isinstance(options, TransformOptions):
            try:
                options = TransformOptions.model_validate(options)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid transform options: {e}") from e

        transform = self.get_transform(options.transform_type)

        if isinstance(transform, DocumentTransform):
            return transform.transform(data, options)

        return transform_categories(data, transform, options)
