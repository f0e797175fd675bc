"""List Queries: shaping CRUD list parameters and results.

Invariants:
    - cond reaches the wire as a string: mappings JSON-encoded, strings untouched,
      anything else dropped
    - normalize_list_result always returns a dict whose "list" is a list
    - Caller query mappings are never mutated
"""

import json
from typing import Any, Mapping

from envelope_client.core.merge import deep_merge

LOOKUP_SORT = "-UpdatedAt"


def serialize_list_query(query: Mapping[str, Any] | None) -> dict[str, Any]:
    params = dict(query or {})
    cond = params.pop("cond", None)
    if isinstance(cond, Mapping):
        params["cond"] = json.dumps(cond, ensure_ascii=False, separators=(",", ":"))
    elif isinstance(cond, str):
        params["cond"] = cond
    return params


def id_query(
    id_key: str, id_value: Any, query: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Caller query with an `{id_key: id_value}` equality merged into cond."""
    return deep_merge({"cond": {id_key: id_value}}, query or {})


def lookup_condition(code_or_object: Any) -> dict[str, Any]:
    """{'Code': code} for scalars, the mapping itself otherwise."""
    if isinstance(code_or_object, Mapping):
        return dict(code_or_object)
    if code_or_object is None or code_or_object == "":
        return {}
    return {"Code": code_or_object}


def lookup_query(cond: Mapping[str, Any]) -> dict[str, Any]:
    return {"cond": dict(cond), "page": 1, "size": 1, "sort": LOOKUP_SORT}


def normalize_list_result(data: Any) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        return {"list": []}
    result = dict(data)
    if not isinstance(result.get("list"), list):
        result["list"] = []
    return result


def first_item(result: Mapping[str, Any]) -> Any:
    """First row of a list result, {} when there is none."""
    rows = result.get("list") or []
    return rows[0] if rows and rows[0] else {}


def is_empty(value: Any) -> bool:
    """Empty collections, None and "" count as empty; scalars like 0 do not."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, Mapping, list, tuple, set)):
        return len(value) == 0
    return False
