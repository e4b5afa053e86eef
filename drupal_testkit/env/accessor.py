"""
Access to the environment variables used by the Drupal test suite.

`DRUPAL_BASE_URL`, `DRUPAL_TEST_BASEDIR` and `BASE_ASSETS_URL` each have a
required accessor which raises `MissingEnvironmentError` when the variable is
unset, and an `...Or(default)` accessor. Typed accessors raise
`InvalidEnvironmentValueError` when a set value can not be parsed.
"""

import os
import re
from typing import Optional

from .exceptions import InvalidEnvironmentValueError, MissingEnvironmentError

DRUPAL_BASE_URL = "DRUPAL_BASE_URL"
DRUPAL_TEST_BASEDIR = "DRUPAL_TEST_BASEDIR"
BASE_ASSETS_URL = "BASE_ASSETS_URL"

_TRUE_VALUES = frozenset(("1", "t", "T", "TRUE", "true", "True"))
_FALSE_VALUES = frozenset(("0", "f", "F", "FALSE", "false", "False"))
_INT_RE = re.compile(r"[+-]?[0-9]+")


def baseUrl() -> str:
    """Base url of Drupal from `DRUPAL_BASE_URL`."""
    return requireEnv(DRUPAL_BASE_URL)


def baseUrlOr(defaultValue: str) -> str:
    return getEnvOr(DRUPAL_BASE_URL, defaultValue)


def testBasedir() -> str:
    """Name (not path) of the base directory of the test suite, from `DRUPAL_TEST_BASEDIR`."""
    return requireEnv(DRUPAL_TEST_BASEDIR)


def testBasedirOr(defaultValue: str) -> str:
    return getEnvOr(DRUPAL_TEST_BASEDIR, defaultValue)


def assetsBaseUrl() -> str:
    """Base URL of the test assets container, from `BASE_ASSETS_URL`."""
    return requireEnv(BASE_ASSETS_URL)


def assetsBaseUrlOr(defaultValue: str) -> str:
    return getEnvOr(BASE_ASSETS_URL, defaultValue)


def getEnv(envVar: str) -> Optional[str]:
    return os.environ.get(envVar)


def getEnvOr(envVar: str, defaultValue: str) -> str:
    """Value of the environment variable, or defaultValue if unset."""
    value = getEnv(envVar)
    return defaultValue if value is None else value


def getEnvOrInt(envVar: str, defaultValue: int) -> int:
    """Value of the environment variable as an integer, or defaultValue if unset.

    Raises:
        InvalidEnvironmentValueError: If the value is set but is not an integer
    """
    value = getEnv(envVar)
    if value is None:
        return defaultValue
    if not _INT_RE.fullmatch(value):
        raise InvalidEnvironmentValueError(envVar, value, "an integer")
    return int(value)


def getEnvOrFloat(envVar: str, defaultValue: float) -> float:
    value = getEnv(envVar)
    if value is None:
        return defaultValue
    try:
        return float(value)
    except ValueError as e:
        raise InvalidEnvironmentValueError(envVar, value, "a float") from e


def getEnvOrBool(envVar: str, defaultValue: bool) -> bool:
    """Value of the environment variable as a bool, or defaultValue if unset.

    Accepted values are 1, t, T, TRUE, true, True, 0, f, F, FALSE, false, False.

    Raises:
        InvalidEnvironmentValueError: If the value is set but is none of the above
    """
    value = getEnv(envVar)
    if value is None:
        return defaultValue
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidEnvironmentValueError(envVar, value, "a bool")


def requireEnv(envVar: str) -> str:
    """Value of the environment variable, an empty value counts as set.

    Raises:
        MissingEnvironmentError: If the variable is not set
    """
    value = getEnv(envVar)
    if value is None:
        raise MissingEnvironmentError(envVar)
    return value
