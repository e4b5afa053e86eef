"""
Base classes shared by all expected-value fixtures.
"""

from typing import Protocol, runtime_checkable

from pydantic import ConfigDict

from drupal_testkit.jsonapi.decode import JsonModel


@runtime_checkable
class ExpectedEntity(Protocol):
    """Anything with a Drupal entity type and bundle."""

    def entityType(self) -> str: ...

    def entityBundle(self) -> str: ...


@runtime_checkable
class NamedOrTitled(ExpectedEntity, Protocol):
    """Expected entity identified by either a name or a title.

    Most, if not all, expected entities have one of the two.
    """

    def nameOrTitle(self) -> str: ...

    def fieldName(self) -> str:
        """Name of the identifying field, `name` or `title`."""
        ...


class ExpectedValue(JsonModel):
    """Immutable value read from a fixture file"""

    model_config = ConfigDict(frozen=True)


class Expected(ExpectedValue):
    """Drupal entity type and bundle of an expected entity, dood!"""

    type: str = ""
    bundle: str = ""

    def entityType(self) -> str:
        return self.type

    def entityBundle(self) -> str:
        return self.bundle


class ExpectedWithName(Expected):
    name: str = ""

    def nameOrTitle(self) -> str:
        return self.name

    def fieldName(self) -> str:
        return "name"


class ExpectedWithTitle(Expected):
    title: str = ""

    def nameOrTitle(self) -> str:
        return self.title

    def fieldName(self) -> str:
        return "title"
