"""
Generic JSON:API response decoding

The `data` member of a JSON:API document is either a single resource object
or an array of resource objects. `parseData` resolves that once into
`SingleData` or `CollectionData`, so callers always see `items` as a list of
field maps regardless of the shape the server sent.
"""

import copy
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from drupal_testkit.utils import jsonDumps, shorten

from .decode import decodeValue, jsonTypeName
from .exceptions import JsonApiCardinalityError, JsonApiDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

FieldMap = Dict[str, Any]


@dataclass(frozen=True)
class SingleData:
    """`data` held one resource object."""

    item: FieldMap

    @property
    def items(self) -> List[FieldMap]:
        return [self.item]


@dataclass(frozen=True)
class CollectionData:
    """`data` held an array of resource objects."""

    items: List[FieldMap]


JsonApiData = Union[SingleData, CollectionData]


def parseData(value: Any) -> JsonApiData:
    """Resolve the `data` member of a JSON:API document.

    Raises:
        JsonApiDecodeError: If value is neither an object nor an array of objects
    """
    if isinstance(value, dict):
        return SingleData(item=value)
    if isinstance(value, list):
        for i, element in enumerate(value):
            if not isinstance(element, dict):
                raise JsonApiDecodeError(
                    f"JSONAPI 'data' element {i} must be an object, found {jsonTypeName(element)}",
                    path=f"$.data[{i}]",
                )
        return CollectionData(items=list(value))
    raise JsonApiDecodeError(
        f"unable to determine type of JSONAPI key 'data': {jsonTypeName(value)} {shorten(jsonDumps(value))}",
        path="$.data",
    )


class JsonApiResponse:
    """Generic JSON:API response, dood!

    Holds the normalized `data` element(s) and the optional `jsonapi` member.
    Use `to()` to project it into a typed structure.

    Example:
        >>> response = JsonApiResponse.fromBytes(body)
        >>> document = response.to(JsonApiDocument)
        >>> print(document.data[0].attributes["name"])
    """

    def __init__(self, data: JsonApiData, jsonapi: Optional[Dict[str, Any]] = None):
        self.data = data
        self.jsonapi = jsonapi

    @property
    def items(self) -> List[FieldMap]:
        """The `data` element(s), always as a list."""
        return self.data.items

    @property
    def isSingle(self) -> bool:
        return isinstance(self.data, SingleData)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        kind = "single" if self.isSingle else "collection"
        return f"JsonApiResponse({kind}, items={len(self)})"

    @classmethod
    def fromDict(cls, document: Any) -> "JsonApiResponse":
        """Build a response from an already parsed JSON document.

        Raises:
            JsonApiDecodeError: If document is not an object or has no `data` key
        """
        if not isinstance(document, dict):
            raise JsonApiDecodeError(
                f"JSONAPI response must be an object, found {jsonTypeName(document)}",
                path="$",
            )
        if "data" not in document:
            raise JsonApiDecodeError(
                f"missing 'data' key when unmarshaling JSONAPI response, keys: {sorted(document.keys())}",
                path="$",
            )

        jsonapi = document.get("jsonapi")
        if jsonapi is not None and not isinstance(jsonapi, dict):
            logger.warning(f"Ignoring non-object 'jsonapi' member: {jsonTypeName(jsonapi)}")
            jsonapi = None
        return cls(data=parseData(document["data"]), jsonapi=jsonapi)

    @classmethod
    def fromBytes(cls, body: bytes | str) -> "JsonApiResponse":
        """Parse a raw response body.

        Raises:
            JsonApiDecodeError: If the body is not valid JSON or not a JSON:API document
        """
        try:
            document = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise JsonApiDecodeError(f"Error unmarshaling JSONAPI response body: {e}") from e
        return cls.fromDict(document)

    def toDict(self) -> Dict[str, Any]:
        """Normalized document: `data` is always a list."""
        document: Dict[str, Any] = {"data": copy.deepcopy(self.items)}
        if self.jsonapi is not None:
            document["jsonapi"] = copy.deepcopy(self.jsonapi)
        return document

    def to(self, target: Type[T]) -> T:
        """Project the normalized document into target.

        target is typically a model or dataclass with a `data` list field, e.g.
        `JsonApiDocument`. Unknown fields are ignored and missing ones keep their
        defaults, so one generic response can feed any number of typed views.

        Raises:
            JsonApiDecodeError: If the document does not fit target
        """
        return decodeValue(target, self.toDict())


def unmarshalResponse(
    body: bytes | str,
    assertions: Optional[Callable[[JsonApiResponse], None]] = None,
) -> JsonApiResponse:
    """Decode a JSON:API response body and run the supplied assertions on it."""
    response = JsonApiResponse.fromBytes(body)
    if assertions is not None:
        assertions(response)
    return response


def assertSingle(response: JsonApiResponse) -> None:
    """Raises JsonApiCardinalityError unless response holds exactly one data element."""
    count = len(response)
    if count != 1:
        raise JsonApiCardinalityError(
            f"Exactly one JSONAPI data element is expected in the response, but found {count} element(s)",
            count=count,
        )


def unmarshalSingleResponse(body: bytes | str) -> JsonApiResponse:
    """Decode a JSON:API response body holding exactly one data element."""
    return unmarshalResponse(body, assertSingle)
