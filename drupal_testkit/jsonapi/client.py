"""
Drupal JSON:API Client

This module provides the JsonApiClient class which retrieves resources from
Drupal's JSON:API endpoint, optionally with basic authentication, and decodes
the responses into typed structures.
"""

import logging
from typing import Optional, Type, TypeVar

import httpx

from drupal_testkit.env import DEFAULT_REQUEST_TIMEOUT, DrupalConfig

from .exceptions import JsonApiDecodeError, JsonApiTransportError, JsonApiUrlError
from .models import JsonApiRelationshipData
from .response import JsonApiResponse, unmarshalResponse, unmarshalSingleResponse
from .url import JsonApiUrl

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonApiClient:
    """Sync client for the Drupal JSON:API, dood!

    Every request is a single blocking GET. A response with any status other
    than 200 raises JsonApiTransportError and its body is never decoded.

    Example:
        >>> config = DrupalConfig.fromEnv()
        >>> with JsonApiClient(config=config) as client:
        ...     url = client.urlFor("taxonomy_term", "person", filter="name", value="Ansel Adams")
        ...     document = client.getSingle(url, JsonApiDocument)
        ...     person = document.single()
    """

    def __init__(
        self,
        config: Optional[DrupalConfig] = None,
        requestTimeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize JSON:API client.

        Args:
            config: Connection settings, needed by `urlFor` and `resolve` (default: None)
            requestTimeout: HTTP request timeout in seconds (default: taken from config, else 10)
            transport: httpx transport to send requests through, e.g. httpx.MockTransport in tests
        """
        self.config = config
        if requestTimeout is None:
            requestTimeout = config.requestTimeout if config is not None else DEFAULT_REQUEST_TIMEOUT
        self.requestTimeout = requestTimeout
        self._client = httpx.Client(timeout=requestTimeout, transport=transport, follow_redirects=True)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JsonApiClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def getResource(self, url: str) -> bytes:
        """Retrieve url without authentication and return the response body."""
        return self.getResourceWithBasicAuth(url, "", "")

    def getResourceWithBasicAuth(self, url: str, username: str, password: str) -> bytes:
        """Retrieve url and return the response body.

        If username is blank (empty or whitespace only) no Authorization header
        is sent, whatever the password.

        Raises:
            JsonApiTransportError: On network errors or a non-200 status
        """
        auth: Optional[httpx.BasicAuth] = None
        if username.strip():
            auth = httpx.BasicAuth(username, password or "")
            logger.info(f"Retrieving (with Authorization: basic) {url}")
        else:
            logger.info(f"Retrieving {url}")

        try:
            response = self._client.get(url, auth=auth)
        except httpx.HTTPError as e:
            raise JsonApiTransportError(f"encountered error requesting {url}: {e}", url=url) from e

        if response.status_code != 200:
            raise JsonApiTransportError(
                f"{response.status_code} status encountered when requesting {url}",
                url=url,
                statusCode=response.status_code,
            )
        return response.content

    def fetch(self, url: JsonApiUrl) -> bytes:
        """Retrieve a JsonApiUrl, authenticated if the url carries a username."""
        if url.isAuthenticated:
            return self.getResourceWithBasicAuth(str(url), url.username, url.password)
        return self.getResource(str(url))

    def get(self, url: JsonApiUrl, target: Type[T]) -> T:
        """Retrieve url and project the response into target."""
        body = self.fetch(url)
        return self._decode(url, lambda: unmarshalResponse(body)).to(target)

    def getSingle(self, url: JsonApiUrl, target: Type[T]) -> T:
        """Retrieve url, require exactly one data element and project the response into target.

        Raises:
            JsonApiCardinalityError: If the response holds zero or several data elements
        """
        body = self.fetch(url)
        return self._decode(url, lambda: unmarshalSingleResponse(body)).to(target)

    def _decode(self, url: JsonApiUrl, decoder) -> JsonApiResponse:
        try:
            return decoder()
        except JsonApiDecodeError as e:
            if e.url is None:
                e.url = str(url)
            raise

    def urlFor(
        self,
        drupalEntity: str,
        drupalBundle: str,
        filter: str = "",
        value: str = "",
        rawFilter: str = "",
    ) -> JsonApiUrl:
        """JsonApiUrl using the base url and credentials of the client config.

        Raises:
            JsonApiUrlError: If the client has no config
        """
        config = self._requireConfig()
        return JsonApiUrl(
            baseUrl=config.baseUrl,
            drupalEntity=drupalEntity,
            drupalBundle=drupalBundle,
            filter=filter,
            value=value,
            rawFilter=rawFilter,
            username=config.username or "",
            password=config.password or "",
        )

    def resolve(self, ref: JsonApiRelationshipData, target: Type[T], baseUrl: Optional[str] = None) -> T:
        """Retrieve the resource a relationship points to and project it into target.

        Args:
            ref: Relationship identifier (type and id)
            target: Type to project the response into
            baseUrl: Base url of Drupal (default: base url of the client config)
        """
        username = ""
        password = ""
        if self.config is not None:
            username = self.config.username or ""
            password = self.config.password or ""
        if baseUrl is None:
            baseUrl = self._requireConfig().baseUrl

        url = JsonApiUrl.forResource(ref.type, ref.id, baseUrl, username=username, password=password)
        logger.debug(f"Resolving relationship {ref.type} {ref.id}")
        return self.getSingle(url, target)

    def _requireConfig(self) -> DrupalConfig:
        if self.config is None:
            raise JsonApiUrlError("JsonApiClient has no DrupalConfig, a base url is required")
        return self.config


_defaultClient: Optional[JsonApiClient] = None


def defaultClient() -> JsonApiClient:
    """Shared client used by JsonApiUrl.get() and getSingle() when no client is passed."""
    global _defaultClient
    if _defaultClient is None:
        _defaultClient = JsonApiClient()
    return _defaultClient


def closeDefaultClient() -> None:
    """Close the shared client, if any; the next `defaultClient()` call creates a new one."""
    global _defaultClient
    if _defaultClient is not None:
        logger.debug("Closing default JSON:API client")
        _defaultClient.close()
        _defaultClient = None
