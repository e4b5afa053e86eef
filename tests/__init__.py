"""
End-to-end tests for drupal-testkit.
"""
