"""Subgraph `_entities` resolution for entity object types.

A gateway re-resolves entities owned by a subgraph by sending a list of
representations, each carrying a `__typename` and the entity's key fields, to
the subgraph's `_entities` root field. This module provides the pieces that
wire that field to `EntityObjectType.resolve_reference`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
    GraphQLUnionType,
)

from .exceptions import InvalidReferenceError, UnknownEntityTypeError
from .types import TYPENAME_KEY, EntityObjectType

if TYPE_CHECKING:
    from graphql import GraphQLResolveInfo, GraphQLSchema

__all__ = [
    "AnyScalar",
    "entities_field",
    "entity_union",
    "get_entity_type",
    "resolve_entities",
]

AnyScalar = GraphQLScalarType(
    "_Any",
    description="Representation of an entity: `__typename` plus its key fields.",
)


def entity_union(types: Iterable[EntityObjectType]) -> GraphQLUnionType:
    """Build the `_Entity` union over the given entity types.

    Concrete types are picked by graphql-core's default type resolver: the
    `__typename` of mapping results first, then each type's `is_type_of`.
    """
    return GraphQLUnionType("_Entity", list(types))


def get_entity_type(
    schema: GraphQLSchema,
    representation: Mapping[str, Any] | None,
) -> EntityObjectType:
    type_name = (
        representation.get(TYPENAME_KEY)
        if isinstance(representation, Mapping)
        else None
    )
    if type_name is None:
        raise InvalidReferenceError(None, representation)

    type_ = schema.get_type(type_name)
    if not isinstance(type_, EntityObjectType):
        raise UnknownEntityTypeError(type_name)

    return type_


def resolve_entities(
    schema: GraphQLSchema,
    representations: Iterable[Mapping[str, Any] | None],
    context: Any = None,
    info: Any = None,
) -> list[Any]:
    """Resolve each representation through its entity type, in order.

    A failing representation yields its exception in place of a result, so
    the execution engine reports it against that list item and the remaining
    entities still resolve.
    """
    results: list[Any] = []
    for representation in representations:
        try:
            entity_type = get_entity_type(schema, representation)
            result = entity_type.resolve_reference(representation, context, info)
        except Exception as e:  # noqa: BLE001
            result = e

        results.append(result)

    return results


def _resolve_entities_field(
    _root: Any,
    info: GraphQLResolveInfo,
    representations: list[Mapping[str, Any]],
) -> list[Any]:
    return resolve_entities(info.schema, representations, info.context, info)


def entities_field(types: Iterable[EntityObjectType]) -> GraphQLField:
    """Build the `_entities(representations: [_Any!]!): [_Entity]!` field."""
    return GraphQLField(
        GraphQLNonNull(GraphQLList(entity_union(types))),
        args={
            "representations": GraphQLArgument(
                GraphQLNonNull(GraphQLList(GraphQLNonNull(AnyScalar))),
            ),
        },
        resolve=_resolve_entities_field,
    )
