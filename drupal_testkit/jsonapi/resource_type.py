"""
Drupal resource type labels.
"""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

TYPE_SEPARATOR = "--"


class DrupalType(str):
    """Entity type and bundle of a Drupal resource.

    Parsed from the `type` member of a JSON:API resource, e.g.
    `"taxonomy_term--person"`. Entities without bundles (e.g. `user`) have an
    empty bundle.
    """

    __slots__ = ()

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())

    def entity(self) -> str:
        """The entity (e.g. `taxonomy_term`, `node`) of this type."""
        return self.split(TYPE_SEPARATOR)[0]

    def bundle(self) -> str:
        """The bundle (e.g. `person`, `islandora_object`) of this type, or "" if there is none."""
        parts = self.split(TYPE_SEPARATOR)
        if len(parts) < 2:
            return ""
        return parts[1]

    def __repr__(self) -> str:
        return f"DrupalType({str.__repr__(self)})"
