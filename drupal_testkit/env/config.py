"""
Explicit Drupal connection settings.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from drupal_testkit.utils import loadDotEnv

from .accessor import (
    BASE_ASSETS_URL,
    DRUPAL_TEST_BASEDIR,
    baseUrl,
    baseUrlOr,
    getEnv,
    getEnvOrFloat,
)

logger = logging.getLogger(__name__)

DRUPAL_USERNAME = "DRUPAL_USERNAME"
DRUPAL_PASSWORD = "DRUPAL_PASSWORD"
DRUPAL_REQUEST_TIMEOUT = "DRUPAL_REQUEST_TIMEOUT"

DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class DrupalConfig:
    """Settings needed to talk to a Drupal JSON:API endpoint.

    `baseUrl` is mandatory, everything else may be absent.
    """

    baseUrl: str
    testBasedir: Optional[str] = None
    assetsBaseUrl: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    requestTimeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def fromEnv(cls, defaultBaseUrl: Optional[str] = None, dotEnvFile: Optional[str] = None) -> "DrupalConfig":
        """Build config from the process environment.

        Args:
            defaultBaseUrl: Base url to use when DRUPAL_BASE_URL is unset. If None,
                DRUPAL_BASE_URL is required
            dotEnvFile: Optional .env file loaded first. Variables already present
                in the environment are not overridden

        Raises:
            MissingEnvironmentError: If no base url is available
            InvalidEnvironmentValueError: If DRUPAL_REQUEST_TIMEOUT is not a number
        """
        if dotEnvFile is not None:
            if os.path.isfile(dotEnvFile):
                loadDotEnv(dotEnvFile)
            else:
                logger.debug(f"No .env file at {dotEnvFile}, using process environment only")

        return cls(
            baseUrl=baseUrl() if defaultBaseUrl is None else baseUrlOr(defaultBaseUrl),
            testBasedir=getEnv(DRUPAL_TEST_BASEDIR),
            assetsBaseUrl=getEnv(BASE_ASSETS_URL),
            username=getEnv(DRUPAL_USERNAME),
            password=getEnv(DRUPAL_PASSWORD),
            requestTimeout=getEnvOrFloat(DRUPAL_REQUEST_TIMEOUT, DEFAULT_REQUEST_TIMEOUT),
        )

    def hasCredentials(self) -> bool:
        return bool(self.username and self.username.strip())
