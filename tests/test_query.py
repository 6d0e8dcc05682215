from dashboard_client.utils.query import encode_query


def test_scalars_and_arrays_keep_order():
    assert encode_query({"a": 1, "b": [2, 3]}) == "?a=1&b[]=2&b[]=3"


def test_empty_and_missing_query():
    assert encode_query(None) == ""
    assert encode_query({}) == ""


def test_tuple_values_and_booleans():
    assert encode_query({"tags": ("x", "y"), "active": True}) == "?tags[]=x&tags[]=y&active=true"


def test_none_values_are_skipped():
    assert encode_query({"a": None, "b": 2}) == "?b=2"
    assert encode_query({"a": None}) == ""


def test_values_are_not_escaped():
    assert encode_query({"q": "a b&c"}) == "?q=a b&c"


def test_empty_sequence_emits_nothing():
    assert encode_query({"ids": [], "page": 1}) == "?page=1"
