"""
Filter exception hierarchy.

All exceptions inherit from ``DatagridError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class DatagridError(Exception):
    """Root exception for the filter layer."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class FilteringError(DatagridError):
    """
    A filter produced a result that is not a valid scope for its driver.

    Raised when a predicate returns e.g. the parsed value or a boolean
    instead of a narrowed scope, which breaks the filtering chain.
    """

    def __init__(self, filter_name: str, result: Any, driver: Any) -> None:
        self.filter_name = filter_name
        self.result = result
        self.driver_name = type(driver).__name__
        super().__init__(
            f"Can not apply {filter_name!r} filter: result {result!r} "
            f"no longer matches {self.driver_name}."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FILTERING_ERROR",
            "filter": self.filter_name,
            "result": repr(self.result),
            "driver": self.driver_name,
        }


class ArgumentError(DatagridError, ValueError):
    """A sequence value was given to a filter without the ``multiple`` option."""

    def __init__(self, filter_name: str, value: Any) -> None:
        self.filter_name = filter_name
        self.value = value
        super().__init__(
            f"{filter_name!r} filter can not accept a sequence argument "
            f"({value!r}). Use the multiple option."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ARGUMENT_ERROR",
            "filter": self.filter_name,
            "message": str(self),
        }


class FilterConfigurationError(DatagridError):
    """Filter options failed validation.

    Carries structured errors: ``{option: [messages]}``.
    """

    def __init__(self, filter_name: str, errors: dict[str, list[str]]) -> None:
        self.filter_name = filter_name
        self.errors = errors
        details = "; ".join(
            f"{key}: {', '.join(messages)}" for key, messages in errors.items()
        )
        super().__init__(f"Invalid options for {filter_name!r} filter: {details}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "filter": self.filter_name,
            "errors": self.errors,
        }


class FilterKindError(DatagridError, TypeError):
    """
    A filter class is not registered under any kind.

    This is a programmer error: a filter subclass was added without
    declaring or registering its kind.
    """

    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__(f"{subject} is not registered as a filter kind")
