"""
Tests for the shared text fetcher.
"""

import itertools
import pytest
import requests
from unittest.mock import Mock, patch

from hackradar.config import REQUEST_TIMEOUT, USER_AGENT
from hackradar.errors import FetchError
from hackradar.fetcher import fetch_text


URL = "https://blog.example.com/feed"


def _response(status=200, chunks=(b"<rss/>",), encoding="utf-8"):
    response = Mock()
    response.status_code = status
    response.encoding = encoding
    response.iter_content.return_value = iter(chunks)
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


class TestFetchText:

    @patch("hackradar.fetcher.requests.get")
    def test_returns_body(self, mock_get):
        mock_get.return_value = _response(chunks=(b"hel", b"lo"))
        assert fetch_text(URL) == "hello"

    @patch("hackradar.fetcher.requests.get")
    def test_decodes_with_response_encoding(self, mock_get):
        mock_get.return_value = _response(chunks=("café".encode("latin-1"),), encoding="ISO-8859-1")
        assert fetch_text(URL) == "café"

    @patch("hackradar.fetcher.requests.get")
    def test_missing_or_unknown_encoding_falls_back_to_utf8(self, mock_get):
        mock_get.return_value = _response(chunks=("café".encode(),), encoding=None)
        assert fetch_text(URL) == "café"

        mock_get.return_value = _response(chunks=("café".encode(),), encoding="x-no-such-charset")
        assert fetch_text(URL) == "café"

    @patch("hackradar.fetcher.requests.get")
    def test_sends_user_agent_default_timeout_and_streams(self, mock_get):
        mock_get.return_value = _response()
        fetch_text(URL)

        _, kwargs = mock_get.call_args
        assert kwargs["headers"]["User-Agent"] == USER_AGENT
        assert kwargs["timeout"] == REQUEST_TIMEOUT
        assert kwargs["stream"] is True

    @patch("hackradar.fetcher.requests.get")
    def test_explicit_timeout(self, mock_get):
        mock_get.return_value = _response()
        fetch_text(URL, timeout=8)
        assert mock_get.call_args.kwargs["timeout"] == 8

    @patch("hackradar.fetcher.requests.get")
    def test_response_is_closed(self, mock_get):
        response = _response()
        mock_get.return_value = response
        fetch_text(URL)
        response.close.assert_called_once()

    @patch("hackradar.fetcher.requests.get")
    def test_timeout_becomes_fetch_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("slow")

        with pytest.raises(FetchError) as exc:
            fetch_text(URL, timeout=8)
        assert exc.value.url == URL
        assert exc.value.reason == "timed out after 8s"

    @patch("hackradar.fetcher.time.monotonic")
    @patch("hackradar.fetcher.requests.get")
    def test_slow_body_hits_total_deadline(self, mock_get, mock_clock):
        # Each chunk arrives within the per-read timeout but the total exceeds 8s
        mock_clock.side_effect = itertools.count(100.0, 3.0)
        response = _response(chunks=(b"a", b"b", b"c", b"d"))
        mock_get.return_value = response

        with pytest.raises(FetchError) as exc:
            fetch_text(URL, timeout=8)

        assert exc.value.reason == "timed out after 8s"
        response.close.assert_called_once()

    @patch("hackradar.fetcher.requests.get")
    def test_read_timeout_while_streaming(self, mock_get):
        response = _response()
        response.iter_content.side_effect = requests.ConnectionError("read timed out")
        mock_get.return_value = response

        with pytest.raises(FetchError) as exc:
            fetch_text(URL)
        assert "read timed out" in exc.value.reason

    @patch("hackradar.fetcher.requests.get")
    def test_non_2xx_becomes_fetch_error(self, mock_get):
        response = _response(status=503)
        mock_get.return_value = response

        with pytest.raises(FetchError) as exc:
            fetch_text(URL)
        assert exc.value.reason == "HTTP 503"
        assert str(exc.value) == f"{URL}: HTTP 503"
        response.close.assert_called_once()

    @patch("hackradar.fetcher.requests.get")
    def test_connection_error_becomes_fetch_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(FetchError) as exc:
            fetch_text(URL)
        assert "refused" in exc.value.reason
