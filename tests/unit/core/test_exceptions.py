"""
Tests unitaires pour les exceptions tvcom.
"""

import pytest

from tvcom.core.exceptions import (
    FetchFailed,
    InvalidArgument,
    LookupFailed,
    NotFound,
    TVComError,
)


class TestExceptions:
    """Tests pour la hierarchie et les messages d'erreur."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidArgument("bad"),
            LookupFailed("Prison Break"),
            NotFound("Prison Break"),
            FetchFailed(1, "http://www.tv.com/show/1/summary.html"),
        ],
    )
    def test_all_are_tvcom_errors(self, error):
        assert isinstance(error, TVComError)

    def test_invalid_argument_is_value_error(self):
        assert isinstance(InvalidArgument("bad"), ValueError)

    def test_lookup_failed_message(self):
        error = LookupFailed("Prison Break", "HTTP 500")
        assert error.reason == "HTTP 500"
        assert str(error) == "Unable to get search results for Prison Break: HTTP 500"

    def test_not_found_message(self):
        assert "Prison Break" in str(NotFound("Prison Break"))

    def test_fetch_failed_attributes(self):
        error = FetchFailed(31635, "http://www.tv.com/show/31635/summary.html", "timeout")
        assert error.entity_id == 31635
        assert error.url.endswith("/31635/summary.html")
        assert str(error).endswith(": timeout")

    def test_fetch_failed_without_reason(self):
        error = FetchFailed(31635, "http://x")
        assert error.reason is None
        assert str(error) == "Unable to fetch page for 31635 (http://x)"
