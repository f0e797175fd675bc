"""List query tests: cond serialization, id merging, result normalization."""

import json

import pytest

from envelope_client.core.query import (
    first_item,
    id_query,
    is_empty,
    lookup_condition,
    lookup_query,
    normalize_list_result,
    serialize_list_query,
)


def test_mapping_cond_is_json_encoded():
    params = serialize_list_query({"cond": {"Name": "a"}, "page": 2})
    assert json.loads(params["cond"]) == {"Name": "a"}
    assert params["page"] == 2


def test_string_cond_passes_through():
    assert serialize_list_query({"cond": '{"x":1}'})["cond"] == '{"x":1}'


def test_other_cond_is_dropped():
    assert "cond" not in serialize_list_query({"cond": 5})
    assert serialize_list_query(None) == {}


def test_serialize_does_not_mutate_caller_query():
    query = {"cond": {"a": 1}}
    serialize_list_query(query)
    assert query == {"cond": {"a": 1}}


def test_id_query_merges_into_existing_cond():
    query = id_query("ID", 42, {"cond": {"Status": 1}, "project": "ID,Name"})
    assert query == {"cond": {"ID": 42, "Status": 1}, "project": "ID,Name"}


def test_lookup_condition():
    assert lookup_condition("SITE_NAME") == {"Code": "SITE_NAME"}
    assert lookup_condition({"Code": "x", "Type": 1}) == {"Code": "x", "Type": 1}
    assert lookup_condition("") == {}
    assert lookup_condition(None) == {}
    assert lookup_condition({}) == {}


def test_lookup_query_shape():
    assert lookup_query({"Code": "x"}) == {
        "cond": {"Code": "x"}, "page": 1, "size": 1, "sort": "-UpdatedAt",
    }


@pytest.mark.parametrize("data", [None, {"list": None}, {}, {"list": "x"}, []])
def test_normalize_list_result_always_has_list(data):
    assert normalize_list_result(data)["list"] == []


def test_normalize_keeps_other_fields():
    assert normalize_list_result({"list": [1], "totalrecords": 1}) == {
        "list": [1], "totalrecords": 1,
    }


def test_first_item():
    assert first_item({"list": [{"a": 1}, {"a": 2}]}) == {"a": 1}
    assert first_item({"list": []}) == {}


def test_is_empty():
    assert is_empty(None) and is_empty({}) and is_empty([]) and is_empty("")
    assert not is_empty(0)
    assert not is_empty({"a": 1})
