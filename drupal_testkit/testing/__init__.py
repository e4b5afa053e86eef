"""
Pytest integration for drupal-testkit.
"""

from .helpers import assertFieldsEqual, failOnDrupalError, fieldDifferences

__all__ = ["assertFieldsEqual", "failOnDrupalError", "fieldDifferences"]
