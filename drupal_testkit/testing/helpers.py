"""
Helpers turning library errors into test failures.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional

import pytest

from drupal_testkit.env.exceptions import EnvironmentConfigError
from drupal_testkit.jsonapi.decode import encodeValue
from drupal_testkit.jsonapi.exceptions import JsonApiError
from drupal_testkit.resources.exceptions import ExpectedJsonNotFoundError

logger = logging.getLogger(__name__)

DRUPAL_ERRORS = (JsonApiError, EnvironmentConfigError, ExpectedJsonNotFoundError)


@contextmanager
def failOnDrupalError(context: str = "") -> Iterator[None]:
    """Fail the running test if the block raises any drupal-testkit error, dood!

    Example:
        >>> with failOnDrupalError("retrieving person"):
        ...     person = url.getSingle(JsonApiDocument).single()
    """
    try:
        yield
    except DRUPAL_ERRORS as e:
        message = f"{context}: {e}" if context else str(e)
        logger.error(f"{type(e).__name__}: {message}")
        pytest.fail(message)


def fieldDifferences(expected: Any, actual: Any, fields: Optional[Iterable[str]] = None) -> List[str]:
    """Human readable list of the JSON keys whose values differ between expected and actual.

    Both sides are compared in their JSON form, so a model can be compared
    with another model, a dataclass or a plain dict. If fields is None, every key
    of expected is compared.
    """
    expectedJson = encodeValue(expected)
    actualJson = encodeValue(actual)
    if not isinstance(expectedJson, dict) or not isinstance(actualJson, dict):
        return [] if expectedJson == actualJson else [f"$: expected {expectedJson!r}, got {actualJson!r}"]

    keys = list(fields) if fields is not None else sorted(expectedJson.keys())
    differences = []
    for key in keys:
        expectedValue = expectedJson.get(key)
        actualValue = actualJson.get(key)
        if expectedValue != actualValue:
            differences.append(f"{key}: expected {expectedValue!r}, got {actualValue!r}")
    return differences


def assertFieldsEqual(expected: Any, actual: Any, fields: Optional[Iterable[str]] = None) -> None:
    """Fail the running test listing every differing field."""
    differences = fieldDifferences(expected, actual, fields)
    if differences:
        pytest.fail("Field mismatch:\n  " + "\n  ".join(differences))
