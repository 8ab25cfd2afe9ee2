"""Federation reference resolution for Django models.

This module builds reference resolvers that look entity instances up in the
database by the key fields carried in a reference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from asgiref.sync import sync_to_async
from django.db import models
from strawberry.utils.inspect import in_async_context

from .settings import graphql_entities_settings
from .types import TYPENAME_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from graphql.pyutils import AwaitableOrValue

    from .types import ReferenceResolver

_M = TypeVar("_M", bound=models.Model)


__all__ = [
    "model_reference_resolver",
    "resolve_model_reference",
]


def _get_lookups(
    reference: Mapping[str, Any],
    key_fields: Sequence[str] | None,
) -> dict[str, Any]:
    if key_fields is not None and graphql_entities_settings()["KEY_FIELDS_ONLY"]:
        return {k: v for k, v in reference.items() if k in key_fields}

    return {k: v for k, v in reference.items() if k != TYPENAME_KEY}


def _get_instance(
    model: type[_M],
    lookups: dict[str, Any],
    *,
    not_found_as_none: bool,
) -> _M | None:
    try:
        # An empty lookup would match any row
        if not lookups:
            raise model.DoesNotExist(
                f"{model._meta.object_name} reference carries no key field values"
            )

        return model._default_manager.get(**lookups)
    except model.DoesNotExist:
        if not_found_as_none:
            return None

        raise


def resolve_model_reference(
    model: type[_M],
    reference: Mapping[str, Any],
    *,
    key_fields: Sequence[str] | None = None,
) -> AwaitableOrValue[_M | None]:
    """Resolve a Django model instance by the key fields of a reference.

    The Django ORM does not support async, so the lookup runs through
    `sync_to_async` when called from an async context.
    """
    lookups = _get_lookups(reference, key_fields)
    not_found_as_none = graphql_entities_settings()["NOT_FOUND_AS_NONE"]

    if in_async_context():
        return sync_to_async(_get_instance)(
            model,
            lookups,
            not_found_as_none=not_found_as_none,
        )

    return _get_instance(model, lookups, not_found_as_none=not_found_as_none)


def model_reference_resolver(
    model: type[models.Model],
    key_fields: Sequence[str] | None = None,
) -> ReferenceResolver:
    """Generate a reference resolver for an entity backed by a Django model.

    Pass the entity's key fields to keep extra reference entries (e.g. from
    `@requires`) out of the ORM lookup.
    """
    key_fields = tuple(key_fields) if key_fields is not None else None

    def resolve_reference(
        reference: Mapping[str, Any],
        context: Any,
        info: Any,
    ) -> AwaitableOrValue[Any]:
        return resolve_model_reference(model, reference, key_fields=key_fields)

    return resolve_reference
