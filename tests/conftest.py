import pytest

from uriparts.parser import UriParser


@pytest.fixture
def parser() -> UriParser:
    """Parser with default settings."""
    return UriParser()


@pytest.fixture
def strict_parser() -> UriParser:
    """Parser that only accepts RFC 3986 schemes and short references."""
    return UriParser(strict_scheme=True, max_length=64)
