"""
Drupal JSON:API access for tests.

Example usage:
    from drupal_testkit.jsonapi import JsonApiClient, JsonApiDocument

    with JsonApiClient(config=config) as client:
        document = client.urlFor("taxonomy_term", "genre", "name", "Photographs").getSingle(JsonApiDocument, client)
"""

from .client import JsonApiClient, closeDefaultClient, defaultClient
from .decode import JsonModel, decodeDocument, decodeJson, decodeValue, encodeValue
from .exceptions import (
    JsonApiCardinalityError,
    JsonApiDecodeError,
    JsonApiError,
    JsonApiTransportError,
    JsonApiUrlError,
)
from .models import (
    JsonApiDocument,
    JsonApiObject,
    JsonApiRelationship,
    JsonApiRelationshipData,
    JsonApiResource,
    ResourceIdentifierDict,
)
from .resource_type import TYPE_SEPARATOR, DrupalType
from .response import (
    CollectionData,
    JsonApiData,
    JsonApiResponse,
    SingleData,
    assertSingle,
    parseData,
    unmarshalResponse,
    unmarshalSingleResponse,
)
from .url import JsonApiUrl

__all__ = [
    "JsonApiClient",
    "defaultClient",
    "closeDefaultClient",
    "JsonModel",
    "decodeDocument",
    "decodeJson",
    "decodeValue",
    "encodeValue",
    "JsonApiCardinalityError",
    "JsonApiDecodeError",
    "JsonApiError",
    "JsonApiTransportError",
    "JsonApiUrlError",
    "JsonApiDocument",
    "JsonApiObject",
    "JsonApiRelationship",
    "JsonApiRelationshipData",
    "JsonApiResource",
    "ResourceIdentifierDict",
    "TYPE_SEPARATOR",
    "DrupalType",
    "CollectionData",
    "JsonApiData",
    "JsonApiResponse",
    "SingleData",
    "assertSingle",
    "parseData",
    "unmarshalResponse",
    "unmarshalSingleResponse",
    "JsonApiUrl",
]
