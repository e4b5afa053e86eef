"""
JSON:API Exceptions

This module contains the exception classes raised while building JSON:API
urls, retrieving resources and decoding responses.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class JsonApiError(Exception):
    """Base exception class for all JSON:API errors, dood!

    Attributes:
        message: Human-readable error message
        url: Requested url (if known)
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        logger.debug(f"{self.__class__.__name__}: {message} (url: {url})")

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class JsonApiUrlError(JsonApiError):
    """Raised when a JSON:API url can not be composed.

    This typically occurs when:
    - The base url, entity or bundle is empty
    - The composed url can not be parsed
    """


class JsonApiTransportError(JsonApiError):
    """Raised when a resource can not be retrieved.

    Attributes:
        statusCode: HTTP status of the response, None for network errors
    """

    def __init__(self, message: str, url: Optional[str] = None, statusCode: Optional[int] = None) -> None:
        super().__init__(message, url)
        self.statusCode = statusCode


class JsonApiDecodeError(JsonApiError):
    """Raised when a response body or fixture can not be decoded.

    Attributes:
        path: Location of the offending value, e.g. `$.data[0].attributes`
    """

    def __init__(self, message: str, url: Optional[str] = None, path: Optional[str] = None) -> None:
        super().__init__(message, url)
        self.path = path


class JsonApiCardinalityError(JsonApiDecodeError):
    """Raised when a response holds a different number of `data` elements than expected."""

    def __init__(self, message: str, count: int, expected: int = 1, url: Optional[str] = None) -> None:
        super().__init__(message, url)
        self.count = count
        self.expected = expected
