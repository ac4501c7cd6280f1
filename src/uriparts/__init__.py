"""src/uriparts/__init__.py

uriparts - RFC 3986 URI-reference decomposition for Python.

uriparts splits a URI or relative reference into scheme, user-info, host,
port, path segments, query and fragment. It does not normalize, percent-decode
or resolve references; it only reports what the string contains.

Key Features:
    - Zero external dependencies
    - Single pass over the input
    - Immutable, hashable results
    - Absent and empty components kept distinct (None versus "")
    - Full type hints (PEP 561)

Example:
    Basic usage::

        import uriparts

        uri = uriparts.parse("http://joe@www.example.com:8080/foo/bar?q#top")
        uri.scheme      # "http"
        uri.user_info   # "joe"
        uri.host        # "www.example.com"
        uri.port        # 8080
        uri.path        # ("", "foo", "bar")
        uri.query       # "q"
        uri.fragment    # "top"

    Configured parsing::

        from uriparts import UriParser

        parser = UriParser(strict_scheme=True, max_length=2048)
        parser.parse("1http:foo").is_relative_reference   # True

    Error handling::

        from uriparts import PortParseError

        try:
            uriparts.parse("http://www.example.com:65536/")
        except PortParseError as exc:
            print(exc.port)   # "65536"
"""

from uriparts.exceptions import (
    ParseError,
    PortParseError,
    ReferenceTooLongError,
    UriPartsError,
)
from uriparts.parser import UriParser, parse
from uriparts.reference import UriReference
from uriparts.version import __version__

__all__ = [
    "parse",
    "UriParser",
    "UriReference",
    "UriPartsError",
    "ParseError",
    "PortParseError",
    "ReferenceTooLongError",
    "__version__",
]
