"""
Unit tests for the OMDb search client.

Uses a fake requests session; no network access.
"""

import pytest
import requests

from app.core.search.client import build_search_params, search_movies
from app.core.search.models import MovieSummary


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, json_error=False):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeHttp:
    """Records GET calls and returns a canned response or raises."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def omdb_env(monkeypatch):
    """Pin OMDb configuration for every test."""
    monkeypatch.setenv("OMDB_API_URL", "https://omdb.test/")
    monkeypatch.setenv("OMDB_API_KEY", "test-key")
    monkeypatch.setenv("OMDB_TIMEOUT", "5")


class TestSearchRequest:
    """Test the outbound request."""

    def test_single_request_with_query_verbatim(self):
        """One GET with s, type=movie and apikey."""
        http = FakeHttp(FakeResponse({"Response": "True", "Search": []}))
        search_movies("The Matrix", session=http)

        assert len(http.calls) == 1
        call = http.calls[0]
        assert call["url"] == "https://omdb.test/"
        assert call["params"] == {"s": "The Matrix", "type": "movie", "apikey": "test-key"}
        assert call["timeout"] == 5.0

    def test_build_search_params_explicit_key(self):
        """An explicit key overrides the environment."""
        params = build_search_params("alien", api_key="other")
        assert params == {"s": "alien", "type": "movie", "apikey": "other"}


class TestSearchResults:
    """Test response normalization."""

    def test_results_parsed(self):
        """Search entries become MovieSummary records, extra fields ignored."""
        payload = {
            "Response": "True",
            "Search": [
                {"Title": "A", "Year": "1999", "Poster": "N/A", "imdbID": "tt1", "Type": "movie"},
                {"Title": "B", "Year": "2001", "Poster": "https://x/y.jpg"},
            ],
            "totalResults": "2",
        }
        movies = search_movies("x", session=FakeHttp(FakeResponse(payload)))

        assert movies == [
            MovieSummary(title="A", year="1999", poster="N/A"),
            MovieSummary(title="B", year="2001", poster="https://x/y.jpg"),
        ]

    def test_response_false_is_empty(self):
        """Response "False" means zero matches, not an error."""
        payload = {"Response": "False", "Error": "Movie not found!"}
        movies = search_movies("zzzz", session=FakeHttp(FakeResponse(payload)))
        assert movies == []

    def test_missing_search_field_is_empty(self):
        """Absent Search field is treated as an empty sequence."""
        movies = search_movies("x", session=FakeHttp(FakeResponse({"Response": "True"})))
        assert movies == []

    def test_missing_poster_defaults_to_na(self):
        """Entries without Poster get "N/A"."""
        payload = {"Response": "True", "Search": [{"Title": "A", "Year": "1999"}]}
        movies = search_movies("x", session=FakeHttp(FakeResponse(payload)))
        assert movies[0].poster == "N/A"


class TestSearchFailures:
    """Failures return None, distinct from an empty list."""

    def test_transport_error(self):
        http = FakeHttp(exc=requests.ConnectionError("connection refused"))
        assert search_movies("x", session=http) is None

    def test_timeout(self):
        http = FakeHttp(exc=requests.Timeout("timed out"))
        assert search_movies("x", session=http) is None

    def test_http_error_status(self):
        http = FakeHttp(FakeResponse({"Response": "False"}, status_code=401))
        assert search_movies("x", session=http) is None

    def test_invalid_json(self):
        http = FakeHttp(FakeResponse(json_error=True))
        assert search_movies("x", session=http) is None

    def test_non_object_payload(self):
        http = FakeHttp(FakeResponse(["not", "an", "object"]))
        assert search_movies("x", session=http) is None

    def test_malformed_entries(self):
        """Entries missing Title/Year make the whole payload unusable."""
        payload = {"Response": "True", "Search": [{"Poster": "N/A"}]}
        assert search_movies("x", session=FakeHttp(FakeResponse(payload))) is None

    def test_failure_is_logged(self, caplog):
        """Failures are logged for diagnostics."""
        http = FakeHttp(exc=requests.ConnectionError("boom"))
        with caplog.at_level("ERROR"):
            search_movies("x", session=http)
        assert "Fetch error" in caplog.text
