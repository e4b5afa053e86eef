"""
JSON decoding into typed models

`JsonModel` is the pydantic base of every model read from JSON:API responses
and fixture files. It follows the way fixture files are written by hand:
- unknown keys are ignored
- `null` values are treated like missing keys, so the field keeps its default
- a key matches the attribute name as written or all lower case (e.g.
  `linkedAgent` or `linkedagent`); other keys are declared per field with
  `Field(validation_alias=...)`

`decodeValue` validates any type pydantic understands (models, stdlib
dataclasses, TypedDicts, `List[...]`, `Dict[str, ...]`) and turns
`ValidationError` into `JsonApiDecodeError` carrying the path of the first
offending value.
"""

import copy
import functools
import json
from typing import Any, Dict, Type, TypeVar

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, TypeAdapter, ValidationError, model_validator
from pydantic_core import to_jsonable_python

from drupal_testkit.utils import jsonDumps, shorten

from .exceptions import JsonApiDecodeError

T = TypeVar("T")

ROOT_PATH = "$"

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def jsonTypeName(value: Any) -> str:
    """Name of the JSON type of a decoded value, e.g. `object` or `array`."""
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _nameOrLowercase(name: str) -> AliasChoices:
    return AliasChoices(name, name.lower())


class JsonModel(BaseModel):
    """Base model for everything decoded from JSON, dood!"""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=AliasGenerator(validation_alias=_nameOrLowercase),
    )

    @model_validator(mode="before")
    @classmethod
    def dropNulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


@functools.lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _formatLoc(loc: tuple) -> str:
    path = ROOT_PATH
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _typeName(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


def decodeValue(tp: Type[T] | Any, value: Any) -> T:
    """Validate a JSON-compatible value into an instance of tp.

    Raises:
        JsonApiDecodeError: If the value does not fit the requested type
    """
    try:
        return _adapter(tp).validate_python(value)
    except ValidationError as e:
        errors = e.errors()
        first = errors[0]
        path = _formatLoc(first["loc"])
        message = (
            f"cannot decode JSON {jsonTypeName(first.get('input'))} {shorten(jsonDumps(first.get('input')))} "
            f"into {_typeName(tp)} at {path}: {first['msg']}"
        )
        if len(errors) > 1:
            message += f" (and {len(errors) - 1} more error(s))"
        raise JsonApiDecodeError(message, path=path) from e


def _loads(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise JsonApiDecodeError(f"invalid JSON: {e}") from e


def decodeJson(tp: Type[T] | Any, raw: bytes | str) -> T:
    """Parse raw JSON and decode it into tp.

    Raises:
        JsonApiDecodeError: If raw is not valid JSON or does not fit tp
    """
    return decodeValue(tp, _loads(raw))


def normalizeDocument(document: Any) -> Any:
    """Copy of a JSON:API document with a single `data` object wrapped in a list.

    A non-object `jsonapi` member is dropped. Anything that is not an object is
    returned unchanged.
    """
    if not isinstance(document, dict):
        return document
    normalized: Dict[str, Any] = copy.deepcopy(document)
    if isinstance(normalized.get("data"), dict):
        normalized["data"] = [normalized["data"]]
    if "jsonapi" in normalized and not isinstance(normalized["jsonapi"], dict):
        del normalized["jsonapi"]
    return normalized


def decodeDocument(tp: Type[T] | Any, raw: bytes | str) -> T:
    """Parse a raw JSON:API document and decode it into tp with `data` always a list.

    Gives the same result as `JsonApiResponse.fromBytes(raw).to(tp)`.

    Raises:
        JsonApiDecodeError: If raw is not valid JSON or does not fit tp
    """
    return decodeValue(tp, normalizeDocument(_loads(raw)))


def encodeValue(value: Any) -> Any:
    """Turn a decoded structure back into JSON-compatible values keyed by attribute name."""
    return to_jsonable_python(value)
