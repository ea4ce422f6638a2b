"""Schemas for traversal state and transform options."""

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class VisitPass(int, Enum):
    """Visitation phase of an entry."""

    OPEN = 0  # Before descending into children
    CLOSE = 1  # After returning from children (immediately for leaves)


class DepthState(BaseModel):
    """Traversal state of the entry currently visited at one depth."""

    first_entry: bool = Field(False, description="Entry is index 0 of its parent list")
    last_entry: bool = Field(False, description="Entry is the last index of its parent list")
    is_leaf: bool = Field(
        True, description="No further category, or next category list is absent or empty"
    )
    visit_pass: VisitPass = VisitPass.OPEN


class TransformOptions(BaseModel):
    """Options accepted by a single transform call."""

    model_config = ConfigDict(extra="forbid")

    description: bool = Field(
        False, description="Include secondary descriptive fields when present"
    )
    transform_type: Optional[str] = Field(
        None,
        description="One-shot override of the active transform type",
        validation_alias=AliasChoices("transform_type", "format_override", "formatOverride"),
    )


class TransformContext(BaseModel):
    """Per-call state handed to render callbacks.

    A fresh context is allocated for every top-level transform. ``states`` holds
    one ``DepthState`` per category in the chain and is owned by the engine.
    """

    description: bool = False
    chain_length: int = Field(..., ge=1)
    states: list[DepthState] = Field(default_factory=list)

    @field_validator("states")
    @classmethod
    def validate_states(cls, v: list[DepthState], info: ValidationInfo) -> list[DepthState]:
        chain_length = info.data.get("chain_length")
        if chain_length is not None and v and len(v) != chain_length:
            raise ValueError("states must hold one entry per category depth")
        return v

    def state(self, depth: int) -> DepthState:
        """Return the state for the entry being visited at ``depth``."""
        return self.states[depth]


def new_context(chain_length: int, options: TransformOptions | None = None) -> TransformContext:
    """Allocate a context sized to the category chain."""
    options = options or TransformOptions()
    return TransformContext(
        description=options.description,
        chain_length=chain_length,
        states=[DepthState() for _ in range(chain_length)],
    )


class QueryResult(BaseModel):
    """Result of a data source query with its transformed rendering attached."""

    model_config = ConfigDict(extra="allow")

    normalized: dict[str, Any]
    raw: Any = None
    transformed: Any = None
