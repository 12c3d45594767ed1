"""Tests for relationship extraction and included registration."""

from jsonapi_serializer import IncludedTable, JSONAPISerializer


def person(id_, **attributes):
    return {"_type": "person", "_id": id_, **attributes}


def tag(id_):
    return {"_type": "tag", "_id": id_}


def test_single_reference_is_wrapped_in_data():
    serializer = JSONAPISerializer()
    table = IncludedTable()

    relationships = serializer.get_relationships({"author": person(9, name="Ann")}, table)

    assert relationships == {"author": {"data": {"type": "person", "id": "9"}}}
    assert table.resources() == [
        {"type": "person", "id": "9", "attributes": {"name": "Ann"}}
    ]


def test_nested_call_stores_bare_identifiers():
    serializer = JSONAPISerializer()
    table = IncludedTable()

    relationships = serializer.get_relationships({"author": person(9)}, table, nested=True)

    assert relationships == {"author": {"type": "person", "id": "9"}}


def test_reference_list_collapses_onto_key():
    serializer = JSONAPISerializer()
    table = IncludedTable()

    relationships = serializer.get_relationships({"tags": [tag(1), tag(2)]}, table)

    assert relationships == {"tags": {"data": {"type": "tag", "id": "2"}}}
    assert [r["id"] for r in table.resources()] == ["1", "2"]


def test_mixed_list_skips_scalars():
    serializer = JSONAPISerializer()
    table = IncludedTable()

    relationships = serializer.get_relationships({"tags": [tag(1), "x", 3]}, table)

    assert relationships == {"tags": {"data": {"type": "tag", "id": "1"}}}
    assert len(table) == 1


def test_map_groups_are_flattened_into_dotted_keys():
    serializer = JSONAPISerializer()
    table = IncludedTable()

    relationships = serializer.get_relationships(
        {"roles": {"owner": person(1), "editor": person(2), "note": "x"}}, table
    )

    assert relationships == {
        "roles.owner": {"data": {"type": "person", "id": "1"}},
        "roles.editor": {"data": {"type": "person", "id": "2"}},
    }
    assert len(table) == 2


def test_scalar_candidates_are_skipped():
    serializer = JSONAPISerializer()
    table = IncludedTable()
    assert serializer.get_relationships({"count": 1, "name": "x"}, table) == {}
    assert not table


def test_embedded_resource_keeps_its_own_relationships():
    serializer = JSONAPISerializer()
    table = IncludedTable()
    author = person(1, name="Ann", employer={"_type": "company", "_id": 7, "name": "ACME"})

    serializer.get_relationships({"author": author}, table)

    assert table.resources() == [
        {"type": "company", "id": "7", "attributes": {"name": "ACME"}},
        {
            "type": "person",
            "id": "1",
            "attributes": {"name": "Ann"},
            "relationships": {"employer": {"data": {"type": "company", "id": "7"}}},
        },
    ]
