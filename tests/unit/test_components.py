"""Unit tests for urledit.components module."""

import pytest

from urledit.components import (
    get_base_url,
    get_host,
    get_hostname,
    get_path,
    get_protocol,
    get_url_file_type,
    set_host,
    set_hostname,
    set_path,
    set_protocol,
)
from urledit.exceptions import ParseError


class TestPath:
    """Tests for path accessors."""

    def test_get_path(self):
        """Test reading the path."""
        assert get_path("http://example.com/a/b?x=1#f") == "/a/b"
        assert get_path("http://example.com") == ""

    def test_set_path(self):
        """Test that query and fragment survive a path change."""
        result = set_path("http://example.com/a?x=1#f", "/b/c")
        assert result == "http://example.com/b/c?x=1#f"

    def test_set_relative_path(self):
        """Test that a path without slash is joined to the host with one."""
        assert set_path("http://example.com/a", "b") == "http://example.com/b"

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/100%/x", "http://example.com/100%25/x"),
            ("/a b", "http://example.com/a%20b"),
        ],
    )
    def test_set_path_escapes(self, path, expected):
        """Test that a set path is escaped and read back unchanged."""
        result = set_path("http://example.com/a", path)
        assert result == expected
        assert get_path(result) == path

    def test_get_path_is_decoded(self):
        """Test that escapes in the path are decoded."""
        assert get_path("http://example.com/a%20b") == "/a b"

    def test_set_empty_path(self):
        """Test clearing the path."""
        assert set_path("http://example.com/a", "") == "http://example.com"


class TestHost:
    """Tests for host and hostname accessors."""

    def test_get_host_with_port(self):
        """Test that host includes the port but not credentials."""
        assert get_host("http://user:pw@example.com:8080/") == "example.com:8080"

    def test_set_host_keeps_credentials(self):
        """Test replacing host and port."""
        result = set_host("http://user:pw@example.com:8080/a", "example.org")
        assert result == "http://user:pw@example.org/a"

    def test_get_hostname(self):
        """Test that the port is stripped."""
        assert get_hostname("http://example.com:8080/") == "example.com"
        assert get_hostname("http://example.com/") == "example.com"

    def test_set_hostname_keeps_port(self):
        """Test that the port survives a hostname change."""
        result = set_hostname("http://example.com:8080/a", "example.org")
        assert result == "http://example.org:8080/a"

    def test_set_hostname_without_port(self):
        """Test that no colon is added when there is no port."""
        result = set_hostname("http://example.com/a", "example.org")
        assert result == "http://example.org/a"


class TestProtocol:
    """Tests for scheme accessors."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://example.com", "https"),
            ("HTTP://example.com", "http"),
            ("mailto:user@example.com", "mailto"),
            ("/relative", ""),
        ],
    )
    def test_get_protocol(self, url, expected):
        """Test reading the scheme."""
        assert get_protocol(url) == expected

    def test_set_protocol(self):
        """Test replacing the scheme."""
        assert set_protocol("http://example.com/a", "https") == (
            "https://example.com/a"
        )


class TestDerived:
    """Tests for file type and base URL."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://example.com/a/b/c.png", "png"),
            ("https://example.com/a/b/c", ""),
            ("https://example.com/a.d/c", ""),
            ("https://example.com/archive.tar.gz?x=1", "gz"),
            ("https://example.com/a/b.", ""),
            ("https://example.com/", ""),
            ("https://example.com/file.pdf#page=2", "pdf"),
        ],
    )
    def test_get_url_file_type(self, url, expected):
        """Test extracting the extension of the last path segment."""
        assert get_url_file_type(url) == expected

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://example.com/path?x=1#y", "https://example.com/path"),
            (
                "https://user@example.com:8443/p/?a=1",
                "https://user@example.com:8443/p/",
            ),
            ("http://example.com", "http://example.com"),
            ("http://example.com/#?a=1", "http://example.com/"),
        ],
    )
    def test_get_base_url(self, url, expected):
        """Test stripping query string and fragment."""
        assert get_base_url(url) == expected

    def test_invalid_url(self):
        """Test that unparseable input raises ParseError."""
        with pytest.raises(ParseError):
            get_base_url("http://example.com:port/")
