"""
Test resource discovery.
"""

from .exceptions import ExpectedJsonNotFoundError
from .locator import findExpectedJson, loadExpected

__all__ = ["ExpectedJsonNotFoundError", "findExpectedJson", "loadExpected"]
