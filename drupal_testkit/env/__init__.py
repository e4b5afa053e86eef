"""
Environment access for the Drupal test suite.

Example usage:
    from drupal_testkit.env import DrupalConfig, baseUrlOr

    config = DrupalConfig.fromEnv(defaultBaseUrl="https://islandora-idc.traefik.me")
"""

from .accessor import (
    BASE_ASSETS_URL,
    DRUPAL_BASE_URL,
    DRUPAL_TEST_BASEDIR,
    assetsBaseUrl,
    assetsBaseUrlOr,
    baseUrl,
    baseUrlOr,
    getEnv,
    getEnvOr,
    getEnvOrBool,
    getEnvOrFloat,
    getEnvOrInt,
    requireEnv,
    testBasedir,
    testBasedirOr,
)
from .config import DEFAULT_REQUEST_TIMEOUT, DRUPAL_PASSWORD, DRUPAL_REQUEST_TIMEOUT, DRUPAL_USERNAME, DrupalConfig
from .exceptions import EnvironmentConfigError, InvalidEnvironmentValueError, MissingEnvironmentError

__all__ = [
    "BASE_ASSETS_URL",
    "DRUPAL_BASE_URL",
    "DRUPAL_TEST_BASEDIR",
    "DRUPAL_USERNAME",
    "DRUPAL_PASSWORD",
    "DRUPAL_REQUEST_TIMEOUT",
    "DEFAULT_REQUEST_TIMEOUT",
    "DrupalConfig",
    "EnvironmentConfigError",
    "InvalidEnvironmentValueError",
    "MissingEnvironmentError",
    "assetsBaseUrl",
    "assetsBaseUrlOr",
    "baseUrl",
    "baseUrlOr",
    "getEnv",
    "getEnvOr",
    "getEnvOrBool",
    "getEnvOrFloat",
    "getEnvOrInt",
    "requireEnv",
    "testBasedir",
    "testBasedirOr",
]
