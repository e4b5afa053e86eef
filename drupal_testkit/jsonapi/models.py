"""
JSON:API Data Models

Typed views of Drupal JSON:API documents used as projection targets for
`JsonApiResponse.to()`. Attributes are left as plain dicts; test code that
needs stricter typing declares its own models or dataclasses with the same shape.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from typing_extensions import TypedDict

from .decode import JsonModel, jsonTypeName
from .exceptions import JsonApiCardinalityError
from .resource_type import DrupalType


class JsonApiObject(TypedDict, total=False):
    """The top level `jsonapi` member."""

    version: str
    meta: Dict[str, Any]


class ResourceIdentifierDict(TypedDict):
    """Raw resource identifier object as sent on the wire."""

    type: str
    id: str


def dataAsList(value: Any) -> List[Any]:
    """`data` member as a list: `null` is empty, a single object is wrapped.

    Raises:
        ValueError: If the value is neither an object, an array nor `null`
    """
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return value
    raise ValueError(f"data must be an object, an array or null, got {jsonTypeName(value)}")


class JsonApiRelationshipData(JsonModel):
    """Resource identifier inside a relationship, e.g. the person a term links to."""

    type: DrupalType = DrupalType("")
    id: str = ""
    meta: Dict[str, Any] = Field(default_factory=dict)

    def toIdentifier(self) -> ResourceIdentifierDict:
        return {"type": str(self.type), "id": self.id}


class JsonApiRelationship(JsonModel):
    """A named relationship of a resource.

    `data` is always a list: a to-one relationship holds one identifier, an
    empty to-one relationship (`null`) holds none.
    """

    data: List[JsonApiRelationshipData] = Field(default_factory=list)
    links: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def normalizeData(cls, value: Any) -> List[Any]:
        return dataAsList(value)

    def first(self) -> Optional[JsonApiRelationshipData]:
        return self.data[0] if self.data else None

    def ids(self) -> List[str]:
        return [ref.id for ref in self.data]


class JsonApiResource(JsonModel):
    """A single resource object."""

    type: DrupalType = DrupalType("")
    id: str = ""
    attributes: Dict[str, Any] = Field(default_factory=dict)
    relationships: Dict[str, JsonApiRelationship] = Field(default_factory=dict)
    links: Dict[str, Any] = Field(default_factory=dict)

    def attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def relationship(self, name: str) -> JsonApiRelationship:
        """Named relationship.

        Raises:
            KeyError: If the resource has no such relationship
        """
        if name not in self.relationships:
            raise KeyError(f"{self.type} {self.id} has no relationship '{name}'")
        return self.relationships[name]


class JsonApiDocument(JsonModel):
    """A whole JSON:API document with `data` normalized to a list."""

    jsonapi: JsonApiObject = Field(default_factory=dict)  # type: ignore[arg-type]
    data: List[JsonApiResource] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def normalizeData(cls, value: Any) -> List[Any]:
        return dataAsList(value)

    def single(self) -> JsonApiResource:
        """The only resource of the document.

        Raises:
            JsonApiCardinalityError: If the document does not hold exactly one resource
        """
        if len(self.data) != 1:
            raise JsonApiCardinalityError(
                f"Exactly one JSONAPI data element is expected in the document, but found {len(self.data)} element(s)",
                count=len(self.data),
            )
        return self.data[0]
