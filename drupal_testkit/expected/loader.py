"""
Reading expected-value fixtures.
"""

import logging
from typing import Type, TypeVar

from drupal_testkit.jsonapi.decode import decodeJson
from drupal_testkit.jsonapi.exceptions import JsonApiDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fromJson(cls: Type[T], raw: bytes | str) -> T:
    """Decode a fixture document into cls.

    Raises:
        JsonApiDecodeError: If raw is not valid JSON or does not fit cls
    """
    return decodeJson(cls, raw)


def fromFile(cls: Type[T], path: str) -> T:
    """Read and decode the fixture file at path.

    Raises:
        OSError: If the file can not be read
        JsonApiDecodeError: If the content does not fit cls
    """
    logger.debug(f"Loading {cls.__name__} from {path}")
    with open(path, "rb") as f:
        raw = f.read()

    try:
        return fromJson(cls, raw)
    except JsonApiDecodeError as e:
        raise JsonApiDecodeError(f"error decoding {path} into {cls.__name__}: {e.message}", path=e.path) from e
