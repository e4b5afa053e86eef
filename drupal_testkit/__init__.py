"""
drupal-testkit: helpers for testing Drupal migrations through JSON:API, dood!
"""

__version__ = "0.1.0"
