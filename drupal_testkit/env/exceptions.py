"""
Environment configuration errors.
"""


class EnvironmentConfigError(Exception):
    """Base class for configuration read from the process environment.

    Attributes:
        envVar: Name of the offending environment variable
    """

    def __init__(self, message: str, envVar: str) -> None:
        super().__init__(message)
        self.message = message
        self.envVar = envVar


class MissingEnvironmentError(EnvironmentConfigError):
    """Raised when a required environment variable is not set."""

    def __init__(self, envVar: str) -> None:
        super().__init__(f"env: missing required environment variable: {envVar}", envVar)


class InvalidEnvironmentValueError(EnvironmentConfigError, ValueError):
    """Raised when an environment variable can not be parsed as the requested type."""

    def __init__(self, envVar: str, value: str, expected: str) -> None:
        super().__init__(
            f"env: error formatting the value of environment variable '{envVar}' as {expected}: {value!r}",
            envVar,
        )
        self.value = value
        self.expected = expected
