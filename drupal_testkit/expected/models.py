"""
Expected-value models, dood!

Each class describes the values a migrated Drupal entity is expected to
carry. Instances are read from hand-written JSON fixtures; attribute names are
camelCase and match fixture keys as written or in lower case unless a
different key is given with `Field(validation_alias=...)`.
"""

from typing import List

from pydantic import Field

from .base import ExpectedValue, ExpectedWithName, ExpectedWithTitle


class FormattedText(ExpectedValue):
    """Drupal formatted text field"""

    value: str = ""
    format: str = ""
    processed: str = ""


class LanguageString(ExpectedValue):
    """Text value tagged with a language"""

    value: str = ""
    langCode: str = Field("", validation_alias="language")


class AuthorityLink(ExpectedValue):
    """Link to an external authority, e.g. a LCSH heading"""

    uri: str = ""
    title: str = ""
    source: str = ""


class PersonAuthority(ExpectedValue):
    uri: str = ""
    name: str = ""
    type: str = ""


class TitledLink(ExpectedValue):
    uri: str = ""
    title: str = ""


class RelatedAgent(ExpectedValue):
    """Contributor or creator with a relator type, e.g. `relators:pht`"""

    relType: str = Field("", validation_alias="rel_type")
    name: str = ""


class LinkedAgent(ExpectedValue):
    rel: str = ""
    name: str = ""


class ModelRef(ExpectedValue):
    """Islandora model term"""

    name: str = ""
    externalUri: str = Field("", validation_alias="external_uri")


class MediaUri(ExpectedValue):
    url: str = ""
    value: str = ""


class CorporateRelationship(ExpectedValue):
    name: str = ""
    rel: str = Field("", validation_alias="rel_type")


class ExpectedPerson(ExpectedWithName):
    """Expected results of a migrated person"""

    primaryName: str = Field("", validation_alias="primary_name")
    restOfName: List[str] = Field(default_factory=list, validation_alias="rest_of_name")
    fullerForm: List[str] = Field(default_factory=list, validation_alias="fuller_form")
    prefix: List[str] = Field(default_factory=list)
    suffix: List[str] = Field(default_factory=list)
    number: List[str] = Field(default_factory=list)
    altName: List[str] = Field(default_factory=list, validation_alias="alt_name")
    date: List[str] = Field(default_factory=list)
    knows: List[str] = Field(default_factory=list)
    authority: List[PersonAuthority] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedRepoObj(ExpectedWithTitle):
    """Expected results of a migrated repository object"""

    abstract: List[LanguageString] = Field(default_factory=list)
    accessRights: List[str] = Field(default_factory=list, validation_alias="access_rights")
    altTitle: List[LanguageString] = Field(default_factory=list, validation_alias="alt_title")
    collectionNumber: List[str] = Field(default_factory=list, validation_alias="collection_number")
    copyrightAndUse: str = Field("", validation_alias="copyright_and_use")
    copyrightHolder: List[str] = Field(default_factory=list, validation_alias="copyright_holder")
    contributor: List[RelatedAgent] = Field(default_factory=list)
    creator: List[RelatedAgent] = Field(default_factory=list)
    custodialHistory: List[LanguageString] = Field(default_factory=list, validation_alias="custodial_history")
    dateAvailable: str = Field("", validation_alias="date_available")
    dateCopyrighted: List[str] = Field(default_factory=list, validation_alias="date_copyrighted")
    dateCreated: List[str] = Field(default_factory=list, validation_alias="date_created")
    datePublished: List[str] = Field(default_factory=list, validation_alias="date_published")
    digitalIdentifier: List[str] = Field(default_factory=list, validation_alias="digital_identifier")
    digitalPublisher: List[str] = Field(default_factory=list, validation_alias="digital_publisher")
    displayHint: str = Field("", validation_alias="display_hints")
    dspaceIdentifier: str = Field("", validation_alias="dspace_identifier")
    dspaceItemId: str = Field("", validation_alias="dspace_itemid")
    extent: List[str] = Field(default_factory=list)
    featuredItem: bool = Field(False, validation_alias="featured_item")
    findingAid: List[TitledLink] = Field(default_factory=list, validation_alias="finding_aid")
    genre: List[str] = Field(default_factory=list)
    geoportalLink: str = Field("", validation_alias="geoportal_link")
    accessTerms: List[str] = Field(default_factory=list, validation_alias="access_terms")
    issn: str = ""
    isPartOf: str = Field("", validation_alias="is_part_of")
    itemBarcode: List[str] = Field(default_factory=list, validation_alias="item_barcode")
    jhirUri: str = Field("", validation_alias="jhir")
    libraryCatalogLink: List[str] = Field(default_factory=list, validation_alias="catalog_link")
    model: ModelRef = Field(default_factory=ModelRef)
    oclcNumber: List[str] = Field(default_factory=list, validation_alias="oclc_number")
    publisher: List[str] = Field(default_factory=list)
    publisherCountry: List[str] = Field(default_factory=list, validation_alias="publisher_country")
    resourceType: List[str] = Field(default_factory=list, validation_alias="resource_type")
    spatialCoverage: List[str] = Field(default_factory=list, validation_alias="spatial_coverage")
    subject: List[str] = Field(default_factory=list)
    tableOfContents: List[LanguageString] = Field(default_factory=list, validation_alias="toc")
    memberOf: str = Field("", validation_alias="member_of")
    # fixtures spell this key `linkedagent`
    linkedAgent: List[LinkedAgent] = Field(default_factory=list)
    description: List[LanguageString] = Field(default_factory=list)


class ExpectedAccessRights(ExpectedWithName):
    """Expected results of a migrated Access Rights taxonomy term"""

    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedIslandoraAccessTerms(ExpectedWithName):
    """Expected results of a migrated Islandora Access Terms taxonomy term"""

    parent: List[str] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedCopyrightAndUse(ExpectedWithName):
    """Expected results of a migrated Copyright and Use taxonomy term"""

    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedFamily(ExpectedWithName):
    """Expected results of a migrated Family taxonomy term"""

    date: List[str] = Field(default_factory=list)
    familyName: str = Field("", validation_alias="family_name")
    title: str = ""
    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)
    knowsAbout: List[str] = Field(default_factory=list)


class ExpectedGenre(ExpectedWithName):
    """Expected results of a migrated Genre taxonomy term"""

    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedGeolocation(ExpectedWithName):
    """Expected results of a migrated Geolocation taxonomy term"""

    geoAltName: List[str] = Field(default_factory=list, validation_alias="geo_alt_name")
    broader: List[TitledLink] = Field(default_factory=list)
    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedResourceType(ExpectedWithName):
    """Expected results of a migrated Resource Types taxonomy term"""

    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedSubject(ExpectedWithName):
    """Expected results of a migrated Subject taxonomy term"""

    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedLanguage(ExpectedWithName):
    """Expected results of a migrated Language taxonomy term"""

    languageCode: str = Field("", validation_alias="language_code")
    authority: List[AuthorityLink] = Field(default_factory=list)
    description: FormattedText = Field(default_factory=FormattedText)


class ExpectedCollection(ExpectedWithTitle):
    """Expected results of a migrated Collection entity"""

    titleLangCode: str = Field("", validation_alias="title_language")
    altTitle: List[LanguageString] = Field(default_factory=list, validation_alias="alternative_title")
    description: List[LanguageString] = Field(default_factory=list)
    contactEmail: str = Field("", validation_alias="contact_email")
    contactName: str = Field("", validation_alias="contact_name")
    collectionNumber: List[str] = Field(default_factory=list, validation_alias="collection_number")
    memberOf: str = Field("", validation_alias="member_of")
    accessTerms: List[str] = Field(default_factory=list, validation_alias="access_terms")
    findingAid: List[TitledLink] = Field(default_factory=list, validation_alias="finding_aid")


class ExpectedCorporateBody(ExpectedWithName):
    """Expected results of a migrated Corporate Body taxonomy term"""

    description: FormattedText = Field(default_factory=FormattedText)
    primaryName: str = Field("", validation_alias="primary_name")
    subordinateName: List[str] = Field(default_factory=list, validation_alias="subordinate_name")
    dateOfMeeting: List[str] = Field(default_factory=list, validation_alias="date_of_meeting_or_treaty")
    location: List[str] = Field(default_factory=list, validation_alias="location_of_meeting")
    numberOrSection: List[str] = Field(default_factory=list, validation_alias="num_of_section_or_meet")
    altName: List[str] = Field(default_factory=list, validation_alias="corporate_body_alternate_name")
    authority: List[AuthorityLink] = Field(default_factory=list)
    date: List[str] = Field(default_factory=list)
    relationship: List[CorporateRelationship] = Field(default_factory=list, validation_alias="relationships")


class ExpectedMediaGeneric(ExpectedWithName):
    """Expected results of a migrated media entity of any kind"""

    originalName: str = Field("", validation_alias="original_name")
    size: int = 0
    mimeType: str = Field("", validation_alias="mime_type")
    accessTerms: List[str] = Field(default_factory=list, validation_alias="access_terms")
    mediaUse: List[str] = Field(default_factory=list, validation_alias="use")
    mediaOf: str = Field("", validation_alias="media_of")
    uri: MediaUri = Field(default_factory=MediaUri)
    restrictedAccess: bool = Field(False, validation_alias="restricted_access")


class ExpectedMediaImage(ExpectedMediaGeneric):
    altText: str = Field("", validation_alias="alt_text")
    height: int = 0
    width: int = 0


class ExpectedMediaExtractedText(ExpectedMediaGeneric):
    extractedText: FormattedText = Field(default_factory=FormattedText, validation_alias="extracted_text")


class ExpectedMediaRemoteVideo(ExpectedWithName):
    embedUrl: str = Field("", validation_alias="embed_url")
    mediaOf: str = Field("", validation_alias="media_of")
