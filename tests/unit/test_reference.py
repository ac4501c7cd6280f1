"""Unit tests for uriparts.reference module."""

import dataclasses

import pytest

from uriparts.parser import parse
from uriparts.reference import UriReference


class TestUriReference:
    """Tests for UriReference class."""

    def test_defaults(self):
        """Test that an empty reference has nothing present."""
        uri = UriReference()
        assert uri.scheme is None
        assert uri.user_info is None
        assert uri.host == ""
        assert uri.port is None
        assert uri.path == ()
        assert uri.query is None
        assert uri.fragment is None
        assert not uri.authority_present

    def test_all_components(self):
        """Test the fields of a fully populated reference."""
        uri = parse("https://example.com:8443/api?v=1#top")
        assert uri.scheme == "https"
        assert uri.host == "example.com"
        assert uri.port == 8443
        assert uri.path == ("", "api")
        assert uri.query == "v=1"
        assert uri.fragment == "top"

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        uri = parse("http://joe@example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            uri.user_info = None  # type: ignore[misc]

    def test_hashable_and_comparable(self):
        """Test value semantics."""
        first = parse("http://example.com/a")
        second = parse("http://example.com/a")
        assert first == second
        assert hash(first) == hash(second)
        assert first != parse("http://example.com/b")

    def test_has_port(self):
        """Test has_port follows the port field."""
        assert UriReference(port=0).has_port
        assert not UriReference().has_port

    @pytest.mark.parametrize(
        "reference, expected",
        [
            ("http://www.example.com/", False),
            ("http://www.example.com", False),
            ("/", True),
            ("foo", True),
        ],
    )
    def test_is_relative_reference(self, reference, expected):
        """Test that only scheme-less references are relative."""
        assert parse(reference).is_relative_reference is expected

    @pytest.mark.parametrize(
        "reference, expected",
        [
            ("http://www.example.com/", False),
            ("http://www.example.com", True),
            ("/", False),
            ("foo", True),
            ("", True),
            ("mailto:joe@example.com", True),
        ],
    )
    def test_contains_relative_path(self, reference, expected):
        """Test that only paths starting with "/" are absolute."""
        assert parse(reference).contains_relative_path is expected

    def test_absolute_path_without_authority(self):
        """Test that an absolute path does not need an authority."""
        uri = parse("file:/etc/hosts")
        assert not uri.authority_present
        assert not uri.contains_relative_path
        assert uri.path == ("", "etc", "hosts")
