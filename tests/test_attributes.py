"""Tests for attribute extraction."""

from jsonapi_serializer import JSONAPISerializer

PERSON = {"_type": "person", "_id": 9, "name": "Ann"}
TAG = {"_type": "tag", "_id": 1}


def test_plain_members_become_attributes():
    serializer = JSONAPISerializer()
    reference = {"_type": "article", "_id": 1, "title": "Hello", "views": 3, "draft": False}
    assert serializer.get_attributes(reference) == {
        "title": "Hello",
        "views": 3,
        "draft": False,
    }


def test_references_and_reference_lists_are_excluded():
    serializer = JSONAPISerializer()
    reference = {
        "_type": "article",
        "_id": 1,
        "title": "Hello",
        "author": PERSON,
        "tags": [TAG, TAG],
        "scores": [1, 2],
    }
    assert serializer.get_attributes(reference) == {"title": "Hello", "scores": [1, 2]}


def test_mixed_lists_are_kept_verbatim():
    serializer = JSONAPISerializer()
    reference = {"_type": "article", "_id": 1, "items": [TAG, "loose"]}
    assert serializer.get_attributes(reference) == {"items": [TAG, "loose"]}


def test_nested_maps_are_folded():
    serializer = JSONAPISerializer()
    reference = {
        "_type": "article",
        "_id": 1,
        "meta": {"words": 120, "reviewer": PERSON, "extra": {"tags": [TAG]}},
        "owners": {"main": PERSON},
        "empty": {},
    }
    assert serializer.get_attributes(reference) == {"meta": {"words": 120}}


def test_reserved_keys_only_dropped_at_top_level():
    serializer = JSONAPISerializer()
    reference = {"_type": "article", "_id": 1, "meta": {"_type": "draft"}}
    assert serializer.get_attributes(reference) == {"meta": {"_type": "draft"}}
    assert serializer.get_attributes(reference, exclude_reference_keys=False) == {
        "_type": "article",
        "_id": 1,
        "meta": {"_type": "draft"},
    }


def test_list_items_are_never_attributes():
    serializer = JSONAPISerializer()
    assert serializer.get_attributes(["a", {"b": 1}]) == {}
