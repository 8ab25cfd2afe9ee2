from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any

from strawberry.exceptions.exception import StrawberryException

if TYPE_CHECKING:
    from strawberry.exceptions.exception_source import ExceptionSource


class EntityError(StrawberryException):
    """Base class for entity type and reference errors."""

    @cached_property
    def exception_source(self) -> ExceptionSource | None:  # pragma: no cover
        return None


class InvalidReferenceResolverError(EntityError):
    def __init__(self, resolver: Any, *, name: str | None = None):
        self.resolver = resolver
        self.type_name = name

        target = f' for "{name}"' if name else ""
        self.message = (
            f"Reference resolver{target} has to be callable, "
            f"got {type(resolver).__name__}"
        )
        self.rich_message = (
            f"Reference resolver{target} is not callable: "
            f"[underline]{resolver!r}[/]"
        )
        self.suggestion = (
            "To fix this error, pass a function accepting "
            "(reference, context, info) as `resolve_reference`"
        )
        self.annotation_message = "reference resolver not callable"

        super().__init__(self.message)


class MissingReferenceResolverError(EntityError):
    def __init__(self, type_name: str):
        self.type_name = type_name

        self.message = (
            f'No reference resolver was set in the configuration of "{type_name}"'
        )
        self.rich_message = (
            f"No reference resolver was set for `[underline]{type_name}[/]`"
        )
        self.suggestion = (
            "To fix this error, pass `resolve_reference` when creating the type"
        )
        self.annotation_message = "missing reference resolver"

        super().__init__(self.message)


class InvalidReferenceError(EntityError):
    def __init__(self, type_name: str | None, reference: Any):
        self.type_name = type_name
        self.reference = reference

        target = f' for "{type_name}"' if type_name else ""
        self.message = f"Type name must be provided in the reference{target}"
        self.rich_message = (
            f"Reference [underline]{reference!r}[/] is missing `__typename`"
        )
        self.suggestion = (
            "To fix this error, include `__typename` in the reference"
        )
        self.annotation_message = "invalid reference"

        super().__init__(self.message)


class UnknownEntityTypeError(EntityError):
    def __init__(self, type_name: str):
        self.type_name = type_name

        self.message = f'Type "{type_name}" is not an entity type of this schema'
        self.rich_message = (
            f"`[underline]{type_name}[/]` is not an entity type of this schema"
        )
        self.suggestion = (
            "To fix this error, make sure the type is an `EntityObjectType` "
            "and is part of the schema"
        )
        self.annotation_message = "unknown entity type"

        super().__init__(self.message)
