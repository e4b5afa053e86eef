"""
Expected-value fixtures of migrated Drupal entities.

Example usage:
    from drupal_testkit.expected import ExpectedPerson, fromFile

    expected = fromFile(ExpectedPerson, "testdata/taxonomy/person-ansel-adams.json")
    print(expected.nameOrTitle())
"""

from .base import Expected, ExpectedEntity, ExpectedWithName, ExpectedWithTitle, NamedOrTitled
from .loader import fromFile, fromJson
from .models import (
    AuthorityLink,
    CorporateRelationship,
    ExpectedAccessRights,
    ExpectedCollection,
    ExpectedCopyrightAndUse,
    ExpectedCorporateBody,
    ExpectedFamily,
    ExpectedGenre,
    ExpectedGeolocation,
    ExpectedIslandoraAccessTerms,
    ExpectedLanguage,
    ExpectedMediaExtractedText,
    ExpectedMediaGeneric,
    ExpectedMediaImage,
    ExpectedMediaRemoteVideo,
    ExpectedPerson,
    ExpectedRepoObj,
    ExpectedResourceType,
    ExpectedSubject,
    FormattedText,
    LanguageString,
    LinkedAgent,
    MediaUri,
    ModelRef,
    PersonAuthority,
    RelatedAgent,
    TitledLink,
)

__all__ = [
    "Expected",
    "ExpectedEntity",
    "ExpectedWithName",
    "ExpectedWithTitle",
    "NamedOrTitled",
    "fromFile",
    "fromJson",
    "AuthorityLink",
    "CorporateRelationship",
    "ExpectedAccessRights",
    "ExpectedCollection",
    "ExpectedCopyrightAndUse",
    "ExpectedCorporateBody",
    "ExpectedFamily",
    "ExpectedGenre",
    "ExpectedGeolocation",
    "ExpectedIslandoraAccessTerms",
    "ExpectedLanguage",
    "ExpectedMediaExtractedText",
    "ExpectedMediaGeneric",
    "ExpectedMediaImage",
    "ExpectedMediaRemoteVideo",
    "ExpectedPerson",
    "ExpectedRepoObj",
    "ExpectedResourceType",
    "ExpectedSubject",
    "FormattedText",
    "LanguageString",
    "LinkedAgent",
    "MediaUri",
    "ModelRef",
    "PersonAuthority",
    "RelatedAgent",
    "TitledLink",
]
