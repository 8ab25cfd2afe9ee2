"""Code for interacting with Django settings."""

from typing import cast

from django.conf import settings
from typing_extensions import TypedDict


class GraphQLEntitiesSettings(TypedDict):
    """Dictionary defining the shape `settings.GRAPHQL_ENTITIES` should have.

    All settings are optional and have defaults as described in their docstrings and
    defined in `DEFAULT_ENTITIES_SETTINGS`.
    """

    #: If True, model reference resolvers only forward the declared key fields
    #: of a reference to the ORM. Federation may pass extra fields (e.g. from
    #: `@requires`) that are not valid lookups.
    KEY_FIELDS_ONLY: bool

    #: If True, model reference resolvers return `None` when no instance matches
    #: the reference instead of raising `DoesNotExist`.
    NOT_FOUND_AS_NONE: bool


DEFAULT_ENTITIES_SETTINGS = GraphQLEntitiesSettings(
    KEY_FIELDS_ONLY=True,
    NOT_FOUND_AS_NONE=False,
)


def graphql_entities_settings() -> GraphQLEntitiesSettings:
    """Get graphql entities settings.

    Return the dictionary from `settings.GRAPHQL_ENTITIES`, with defaults
    for missing keys.
    """
    defaults = DEFAULT_ENTITIES_SETTINGS
    return cast(
        "GraphQLEntitiesSettings",
        {**defaults, **getattr(settings, "GRAPHQL_ENTITIES", {})},
    )
