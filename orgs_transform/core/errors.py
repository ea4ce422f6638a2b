"""Error taxonomy for the transform core."""


class TransformError(Exception):
    """Base class for errors raised by the transform core."""


class InvalidInputError(TransformError, ValueError):
    """Data node or category chain cannot be traversed."""


class UnknownFormatError(TransformError, ValueError):
    """No renderer is registered under the requested format name."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = sorted(available or [])
        message = f"Unknown transform type: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)
