"""
Tests loading fixture files through the expectedJson fixture, dood!
"""

import os

import pytest

from drupal_testkit.expected import ExpectedGenre, ExpectedMediaImage, ExpectedPerson
from drupal_testkit.jsonapi import JsonApiDocument, JsonApiUrl, unmarshalSingleResponse
from drupal_testkit.testing import assertFieldsEqual

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture(autouse=True)
def fixturesBasedir(monkeypatch):
    monkeypatch.setenv("DRUPAL_TEST_BASEDIR", FIXTURES_DIR)


def test_person_fixture(expectedJson):
    """Person fixture decodes and builds its lookup url, dood!"""
    person = expectedJson(ExpectedPerson, "person-ansel-adams.json", "taxonomy")

    assert person.primaryName == "Adams"
    assert person.authority[0].type == "lcnaf"
    url = JsonApiUrl.forExpected(person, "https://islandora-idc.traefik.me")
    assert url.toString().endswith("/jsonapi/taxonomy_term/person?filter[name]=Adams, Ansel, 1902-1984")


def test_media_fixture(expectedJson):
    image = expectedJson(ExpectedMediaImage, "media-image.json", "media")

    assert image.mimeType == "image/jpeg"
    assert image.uri.value == "fedora://2021-03/moonrise.jpg"
    assert image.restrictedAccess is False
    assert (image.width, image.height) == (1024, 768)


def test_genre_matches_response(expectedJson):
    """Expected values compare against a projected JSON:API response, dood!"""
    genre = expectedJson(ExpectedGenre, "genre-photographs.json")
    body = b"""
    {
      "data": {
        "type": "taxonomy_term--genre",
        "id": "c7a2f2f4-5d5e-4e0f-8f61-3f52f6d7a0b2",
        "attributes": {"name": "Photographs", "description": {"value": "ignored"}}
      }
    }
    """
    resource = unmarshalSingleResponse(body).to(JsonApiDocument).single()

    assert resource.type.entity() == genre.entityType()
    assert resource.type.bundle() == genre.entityBundle()
    assertFieldsEqual(genre, resource.attributes, ["name"])
