"""
Tests for generic JSON:API response decoding, dood!
"""

import json
from dataclasses import dataclass
from typing import List

import pytest

from .decode import decodeDocument
from .exceptions import JsonApiCardinalityError, JsonApiDecodeError
from .models import JsonApiDocument
from .response import (
    CollectionData,
    JsonApiResponse,
    SingleData,
    parseData,
    unmarshalResponse,
    unmarshalSingleResponse,
)

PERSON = {
    "type": "taxonomy_term--person",
    "id": "8d1c0b5a-0b3e-4a4c-9f4e-0d2b7b1a6f11",
    "attributes": {"name": "Ansel Adams", "field_primary_name": "Adams"},
    "relationships": {
        "field_relationships": {"data": [{"type": "taxonomy_term--person", "id": "p2"}]},
    },
}
GENRE = {
    "type": "taxonomy_term--genre",
    "id": "c7a2f2f4-5d5e-4e0f-8f61-3f52f6d7a0b2",
    "attributes": {"name": "Photographs"},
}

SINGLE_BODY = json.dumps({"jsonapi": {"version": "1.0"}, "data": PERSON}).encode()
COLLECTION_BODY = json.dumps({"jsonapi": {"version": "1.0"}, "data": [PERSON, GENRE]}).encode()
EMPTY_BODY = json.dumps({"data": []}).encode()


class TestParseData:
    """`data` is resolved into single or collection, dood!"""

    def test_object(self):
        data = parseData(PERSON)

        assert isinstance(data, SingleData)
        assert data.items == [PERSON]

    def test_array(self):
        data = parseData([PERSON, GENRE])

        assert isinstance(data, CollectionData)
        assert data.items == [PERSON, GENRE]

    @pytest.mark.parametrize("value, typeName", [("text", "string"), (42, "number"), (True, "boolean"), (None, "null")])
    def test_other_shapes(self, value, typeName):
        with pytest.raises(JsonApiDecodeError) as excInfo:
            parseData(value)
        assert typeName in str(excInfo.value)

    def test_array_of_non_objects(self):
        with pytest.raises(JsonApiDecodeError) as excInfo:
            parseData([PERSON, "oops"])
        assert excInfo.value.path == "$.data[1]"


class TestUnmarshal:
    """Decoding of whole response bodies, dood!"""

    def test_single(self):
        response = unmarshalResponse(SINGLE_BODY)

        assert response.isSingle
        assert len(response) == 1
        assert response.items[0]["attributes"]["name"] == "Ansel Adams"
        assert response.jsonapi == {"version": "1.0"}

    def test_collection(self):
        response = unmarshalResponse(COLLECTION_BODY)

        assert not response.isSingle
        assert len(response) == 2
        assert response.jsonapi == {"version": "1.0"}

    def test_assertions_receive_response(self):
        seen = []
        unmarshalResponse(COLLECTION_BODY, seen.append)

        assert len(seen) == 1
        assert isinstance(seen[0], JsonApiResponse)

    def test_assertion_failure_propagates(self):
        def assertEmpty(response):
            assert len(response) == 0

        with pytest.raises(AssertionError):
            unmarshalResponse(SINGLE_BODY, assertEmpty)

    @pytest.mark.parametrize("body", [b"not json", b"[]", b'{"jsonapi": {"version": "1.0"}}', b"\xff\xfe"])
    def test_invalid_bodies(self, body):
        with pytest.raises(JsonApiDecodeError):
            unmarshalResponse(body)

    def test_non_object_jsonapi_is_ignored(self):
        response = unmarshalResponse(b'{"jsonapi": "1.0", "data": []}')
        assert response.jsonapi is None


class TestUnmarshalSingle:
    """Exactly one data element is required, dood!"""

    def test_single_object(self):
        assert len(unmarshalSingleResponse(SINGLE_BODY)) == 1

    def test_array_of_one(self):
        body = json.dumps({"data": [GENRE]}).encode()
        assert len(unmarshalSingleResponse(body)) == 1

    def test_empty(self):
        with pytest.raises(JsonApiCardinalityError) as excInfo:
            unmarshalSingleResponse(EMPTY_BODY)
        assert excInfo.value.count == 0

    def test_many(self):
        with pytest.raises(JsonApiCardinalityError) as excInfo:
            unmarshalSingleResponse(COLLECTION_BODY)
        assert excInfo.value.count == 2
        assert "but found 2 element(s)" in str(excInfo.value)


@dataclass
class PageRef:
    type: str
    id: str


@dataclass
class PageDocument:
    data: List[PageRef]


class TestProjection:
    """`to()` gives the same result as decoding the raw body, dood!"""

    @pytest.mark.parametrize("body", [SINGLE_BODY, COLLECTION_BODY, EMPTY_BODY])
    def test_projection_equals_direct_decode(self, body):
        projected = unmarshalResponse(body).to(JsonApiDocument)
        direct = decodeDocument(JsonApiDocument, body)

        assert projected == direct

    @pytest.mark.parametrize(
        "body",
        [
            b'{"data": {"type": "node--page", "id": "1"}}',
            b'{"data": [{"type": "node--page", "id": "1"}, {"type": "node--page", "id": "2"}]}',
            b'{"jsonapi": "1.0", "data": []}',
        ],
    )
    def test_projection_equals_direct_decode_for_plain_dataclass(self, body):
        projected = unmarshalResponse(body).to(PageDocument)
        direct = decodeDocument(PageDocument, body)

        assert projected == direct
        assert all(isinstance(ref, PageRef) for ref in direct.data)

    def test_single_object_into_plain_dataclass(self):
        document = decodeDocument(PageDocument, b'{"data": {"type": "node--page", "id": "1"}}')
        assert document == PageDocument(data=[PageRef(type="node--page", id="1")])

    def test_projection_into_dict(self):
        projected = unmarshalResponse(SINGLE_BODY).to(dict)

        assert projected["data"] == [PERSON]
        assert projected["jsonapi"] == {"version": "1.0"}

    def test_projection_does_not_share_state(self):
        response = unmarshalResponse(SINGLE_BODY)
        projected = response.to(dict)
        projected["data"][0]["attributes"]["name"] = "changed"

        assert response.items[0]["attributes"]["name"] == "Ansel Adams"
