from apitest.decorators import with_api_key, with_auth, with_headers, with_query_params
from apitest.request import RequestBuilder


def _builder() -> RequestBuilder:
    return RequestBuilder("http://mock.local").get("/items")


def test_with_auth_sets_bearer_header() -> None:
    req = _builder()
    assert with_auth(req, "t1") is req
    assert req.headers["Authorization"] == "Bearer t1"


def test_with_auth_last_token_wins() -> None:
    req = with_auth(with_auth(_builder(), "t1"), "t2")
    assert req.headers.get_list("Authorization") == ["Bearer t2"]


def test_with_api_key_default_header() -> None:
    req = _builder()
    assert with_api_key(req, "k1") is req
    assert req.headers["x-api-key"] == "k1"


def test_with_api_key_custom_header() -> None:
    req = _builder()
    assert with_api_key(req, "k1", "X-Custom") is req
    assert req.headers["X-Custom"] == "k1"
    assert "x-api-key" not in req.headers


def test_with_headers_sets_every_entry() -> None:
    req = _builder()
    assert with_headers(req, {"A": "1", "B": "2"}) is req
    assert req.headers["A"] == "1"
    assert req.headers["B"] == "2"


def test_with_query_params_merges() -> None:
    req = _builder()
    with_query_params(req, {"page": 1, "tags": ["a", "b"]})
    assert with_query_params(req, {"page": 2, "q": "x"}) is req
    assert req.params == {"page": 2, "tags": ["a", "b"], "q": "x"}
    assert str(req.build().url) == "http://mock.local/items?page=2&tags=a&tags=b&q=x"
