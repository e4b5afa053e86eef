"""
Root pytest configuration: enables the drupal-testkit fixtures for every test.
"""

pytest_plugins = ["drupal_testkit.testing.plugin"]
