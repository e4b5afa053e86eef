"""
JSON:API url composition.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Type, TypeVar

import httpx

from .exceptions import JsonApiUrlError
from .resource_type import DrupalType

if TYPE_CHECKING:
    from drupal_testkit.expected.base import NamedOrTitled

    from .client import JsonApiClient

T = TypeVar("T")


@dataclass
class JsonApiUrl:
    """Components of a url which executes a JSON:API request against Drupal.

    `filter` and `value` match an entity on a single field, e.g. `title` and
    `The Adventures of Sherlock Holmes`. For anything more complex use
    `rawFilter`, which is appended to the url as-is and makes `filter` and
    `value` ignored, e.g.:
    `filter[name-group][condition][operator]=ENDS_WITH&filter[name-group][condition][path]=name`

    If `username` is not blank, the request is sent with basic authentication.
    """

    baseUrl: str
    drupalEntity: str
    drupalBundle: str
    filter: str = ""
    value: str = ""
    rawFilter: str = ""
    username: str = ""
    password: str = field(default="", repr=False)

    @classmethod
    def forExpected(
        cls,
        expected: "NamedOrTitled",
        baseUrl: str,
        username: str = "",
        password: str = "",
    ) -> "JsonApiUrl":
        """Url matching the expected entity by its name or title."""
        return cls(
            baseUrl=baseUrl,
            drupalEntity=expected.entityType(),
            drupalBundle=expected.entityBundle(),
            filter=expected.fieldName(),
            value=expected.nameOrTitle(),
            username=username,
            password=password,
        )

    @classmethod
    def forResource(
        cls,
        drupalType: str,
        resourceId: str,
        baseUrl: str,
        username: str = "",
        password: str = "",
    ) -> "JsonApiUrl":
        """Url of a single resource, identified by its type and id."""
        drupalType = DrupalType(drupalType)
        return cls(
            baseUrl=baseUrl,
            drupalEntity=drupalType.entity(),
            drupalBundle=drupalType.bundle(),
            filter="id",
            value=resourceId,
            username=username,
            password=password,
        )

    @property
    def isAuthenticated(self) -> bool:
        return bool(self.username.strip())

    def toString(self) -> str:
        """Compose the url.

        Raises:
            JsonApiUrlError: If base url, entity or bundle is empty, or the result is not a valid url
        """
        for value, what in (
            (self.baseUrl, "base url"),
            (self.drupalEntity, "drupal entity"),
            (self.drupalBundle, "drupal bundle"),
        ):
            if not value:
                raise JsonApiUrlError(f"error generating a JsonAPI URL from {self!r}: {what} must not be empty")

        baseUrl = self.baseUrl
        if baseUrl.endswith("/"):
            baseUrl = baseUrl[:-1]
        url = "/".join([baseUrl, "jsonapi", self.drupalEntity, self.drupalBundle])

        if self.rawFilter:
            url = f"{url}?{self.rawFilter}"
        elif self.filter:
            url = f"{url}?filter[{self.filter}]={self.value}"

        try:
            httpx.URL(url)
        except httpx.InvalidURL as e:
            raise JsonApiUrlError(f"error generating a JsonAPI URL from {self!r}: {e}", url=url) from e
        return url

    def __str__(self) -> str:
        return self.toString()

    def get(self, target: Type[T], client: Optional["JsonApiClient"] = None) -> T:
        """Retrieve the url and project the response into target."""
        return self._client(client).get(self, target)

    def getSingle(self, target: Type[T], client: Optional["JsonApiClient"] = None) -> T:
        """Retrieve the url, require exactly one data element and project the response into target."""
        return self._client(client).getSingle(self, target)

    @staticmethod
    def _client(client: Optional["JsonApiClient"]) -> "JsonApiClient":
        if client is not None:
            return client
        from .client import defaultClient

        return defaultClient()
