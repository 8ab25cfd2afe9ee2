"""Federation entity types for graphql-core schemas.

- `EntityObjectType` - object type with key fields and a reference resolver
- `entities_field` - the subgraph `_entities` root field
- `model_reference_resolver` - reference resolver backed by a Django model
"""

from .entities import (
    AnyScalar,
    entities_field,
    entity_union,
    get_entity_type,
    resolve_entities,
)
from .exceptions import (
    EntityError,
    InvalidReferenceError,
    InvalidReferenceResolverError,
    MissingReferenceResolverError,
    UnknownEntityTypeError,
)
from .resolve import model_reference_resolver, resolve_model_reference
from .types import TYPENAME_KEY, EntityObjectType, ReferenceResolver

__all__ = [
    "TYPENAME_KEY",
    "AnyScalar",
    "EntityError",
    "EntityObjectType",
    "InvalidReferenceError",
    "InvalidReferenceResolverError",
    "MissingReferenceResolverError",
    "ReferenceResolver",
    "UnknownEntityTypeError",
    "entities_field",
    "entity_union",
    "get_entity_type",
    "model_reference_resolver",
    "resolve_entities",
    "resolve_model_reference",
]
