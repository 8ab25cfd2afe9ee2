"""Federation entity object types.

An entity is a type that can be referenced by another service. Entities
declare the fields that, taken together, uniquely identify an instance across
the federated graph, and may carry a reference resolver that re-resolves an
instance from a partial reference such as ``{"__typename": "User", "id": 1}``.

Sample usage::

    user_type = EntityObjectType(
        "User",
        {"id": GraphQLField(GraphQLID), "email": GraphQLField(GraphQLString)},
        key_fields=["id", "email"],
        resolve_reference=lambda reference, context, info: ...,
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional

from graphql import GraphQLObjectType
from graphql.type.definition import GraphQLObjectTypeKwargs

from .exceptions import (
    InvalidReferenceError,
    InvalidReferenceResolverError,
    MissingReferenceResolverError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphql.pyutils import AwaitableOrValue

__all__ = [
    "TYPENAME_KEY",
    "EntityObjectType",
    "EntityObjectTypeKwargs",
    "ReferenceResolver",
]

TYPENAME_KEY = "__typename"

ReferenceResolver = Callable[[Mapping[str, Any], Any, Any], "AwaitableOrValue[Any]"]


class EntityObjectTypeKwargs(GraphQLObjectTypeKwargs, total=False):
    key_fields: tuple[str, ...]
    resolve_reference: Optional[ReferenceResolver]


class EntityObjectType(GraphQLObjectType):
    """Object type that can be referenced and re-resolved across services.

    `key_fields` and `resolve_reference` are consumed here, everything else is
    handed to `GraphQLObjectType` untouched. Both are fixed once the type is
    built.
    """

    _key_fields: tuple[str, ...]
    _reference_resolver: ReferenceResolver | None

    def __init__(
        self,
        *args: Any,
        key_fields: Sequence[str] | None = None,
        resolve_reference: ReferenceResolver | None = None,
        **kwargs: Any,
    ) -> None:
        if isinstance(key_fields, str):
            key_fields = (key_fields,)

        self._key_fields = tuple(key_fields or ())
        self._reference_resolver = None

        if resolve_reference is not None:
            self.validate_reference_resolver(
                resolve_reference,
                name=kwargs.get("name", args[0] if args else None),
            )
            self._reference_resolver = resolve_reference

        super().__init__(*args, **kwargs)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> EntityObjectType:
        """Build an entity type from a loosely-typed configuration mapping."""
        return cls(**dict(config))

    @property
    def key_fields(self) -> tuple[str, ...]:
        return self._key_fields

    @property
    def reference_resolver(self) -> ReferenceResolver | None:
        return self._reference_resolver

    def get_key_fields(self) -> tuple[str, ...]:
        """Get the fields that serve as the unique key of the entity."""
        return self._key_fields

    def has_reference_resolver(self) -> bool:
        return self._reference_resolver is not None

    def resolve_reference(
        self,
        reference: Mapping[str, Any] | None,
        context: Any = None,
        info: Any = None,
    ) -> AwaitableOrValue[Any]:
        """Resolve an entity instance from a reference.

        The resolver's return value is handed back as is, awaitables included,
        and anything it raises propagates to the caller.
        """
        resolver = self._reference_resolver
        if resolver is None:
            raise MissingReferenceResolverError(self.name)

        if (
            not isinstance(reference, Mapping)
            or reference.get(TYPENAME_KEY) is None
        ):
            raise InvalidReferenceError(self.name, reference)

        return resolver(reference, context, info)

    @staticmethod
    def validate_reference_resolver(
        resolver: Any,
        *,
        name: str | None = None,
    ) -> None:
        if not callable(resolver):
            raise InvalidReferenceResolverError(resolver, name=name)

    def to_entity_kwargs(self) -> EntityObjectTypeKwargs:
        """Get the keyword arguments to rebuild this type, entity ones included.

        `to_kwargs` stays limited to `GraphQLObjectType` arguments, since
        graphql-core schema transforms pass it to the base class.
        """
        return EntityObjectTypeKwargs(  # type: ignore[typeddict-item]
            self.to_kwargs(),
            key_fields=self._key_fields,
            resolve_reference=self._reference_resolver,
        )

    def __copy__(self) -> EntityObjectType:
        return self.__class__(**self.to_entity_kwargs())
