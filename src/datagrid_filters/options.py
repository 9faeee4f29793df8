"""FilterOptions: validated, immutable filter configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .conditions import Condition
from .exceptions import FilterConfigurationError


class FilterOptions(BaseModel):
    """
    Recognized filter options.

    ``if`` and ``unless`` are Python keywords; pass them through a mapping
    (``{"if": ...}``) or as ``if_`` / ``unless``.  Both are coerced into
    :class:`~datagrid_filters.conditions.Condition` variants here, so no
    re-interpretation happens per call.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    multiple: bool | str = False
    allow_nil: bool | None = None
    allow_blank: bool = False
    default: Any = None
    dummy: bool = False
    if_: Condition | None = Field(default=None, alias="if")
    unless: Condition | None = None
    header: Any = None
    input_options: dict[str, Any] = Field(default_factory=dict)
    label_options: dict[str, Any] = Field(default_factory=dict)

    # kind-specific
    range: bool = False
    select: Any = None
    strict: bool = False
    checkboxes: bool = False
    include_blank: Any = True

    @field_validator("if_", "unless", mode="before")
    @classmethod
    def _coerce_condition(cls, value: Any) -> Condition | None:
        try:
            return Condition.coerce(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def build(cls, filter_name: str, options: dict[str, Any]) -> FilterOptions:
        """Validate *options*, raising ``FilterConfigurationError`` on failure."""
        try:
            return cls.model_validate(options)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                msg = error.get("msg", "validation error")
                errors.setdefault(loc or "__root__", []).append(msg)
            raise FilterConfigurationError(filter_name, errors) from exc

    def with_changes(self, **changes: Any) -> FilterOptions:
        """Return a copy with *changes* applied."""
        return self.model_copy(update=changes)
