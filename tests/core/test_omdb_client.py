"""
Unit tests for the OMDb search provider.

The requests session is replaced by a stub so no network is used.
"""

import pytest
import requests

from app.core.errors import InternalError
from app.core.search import OmdbSearchProvider


class StubResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.json_error:
            raise self.json_error
        return self.payload


class StubSession:
    """Records calls and returns a canned response (or raises)."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response

    def close(self):
        pass


def make_provider(session):
    return OmdbSearchProvider(
        api_key="test-key", base_url="http://omdb.test/", timeout=3.0, session=session
    )


class TestOmdbSearchProvider:
    """Tests for OmdbSearchProvider.search."""

    def test_success(self):
        session = StubSession(StubResponse({
            "Search": [
                {"Title": "The Matrix", "Year": "1999", "imdbID": "tt0133093",
                 "Type": "movie", "Poster": "https://img.example.com/m.jpg"},
                {"Title": "The Matrix Reloaded", "Year": "2003", "imdbID": "tt0234215",
                 "Type": "movie", "Poster": "N/A"},
            ],
            "totalResults": "27",
            "Response": "True",
        }))

        result = make_provider(session).search("matrix", 2)

        assert [m.imdb_id for m in result.movies] == ["tt0133093", "tt0234215"]
        assert result.movies[0].title == "The Matrix"
        assert result.movies[0].year == "1999"
        assert result.total_results == "27"

    def test_request_parameters(self):
        session = StubSession(StubResponse({"Search": [], "totalResults": "0", "Response": "True"}))

        make_provider(session).search("star wars", 3)

        call = session.calls[0]
        assert call["url"] == "http://omdb.test/"
        assert call["params"] == {"apikey": "test-key", "s": "star wars", "page": 3}
        assert call["timeout"] == 3.0

    def test_no_matches_is_empty_result(self):
        session = StubSession(StubResponse({"Response": "False", "Error": "Movie not found!"}))

        result = make_provider(session).search("zzzzzz")

        assert result.movies == []
        assert result.total_results == "0"

    @pytest.mark.parametrize(
        "error",
        [requests.ConnectionError("refused"), requests.Timeout("slow")],
    )
    def test_transport_failure(self, error):
        provider = make_provider(StubSession(error=error))

        with pytest.raises(InternalError, match="Failed to search movies"):
            provider.search("matrix")

    def test_http_error(self):
        provider = make_provider(StubSession(StubResponse(status_code=503)))

        with pytest.raises(InternalError):
            provider.search("matrix")

    def test_undecodable_body(self):
        provider = make_provider(StubSession(StubResponse(json_error=ValueError("bad json"))))

        with pytest.raises(InternalError):
            provider.search("matrix")

    def test_unexpected_body(self):
        provider = make_provider(StubSession(StubResponse(["not", "a", "dict"])))

        with pytest.raises(InternalError):
            provider.search("matrix")

    def test_result_without_imdb_id(self):
        provider = make_provider(StubSession(StubResponse({
            "Search": [{"Title": "Broken"}], "totalResults": "1", "Response": "True",
        })))

        with pytest.raises(InternalError):
            provider.search("broken")
