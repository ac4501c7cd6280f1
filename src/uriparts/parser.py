"""src/uriparts/parser.py

Single-pass URI-reference parser.

The reference is consumed left to right: the scheme is split off first, then
the query/fragment boundary is located on what remains, and the text before
that boundary is divided into authority and path. Each stage is exposed as a
plain function so callers can reuse one step without the others.
"""

from typing import Optional, Tuple

from uriparts.exceptions import PortParseError, ReferenceTooLongError
from uriparts.reference import UriReference
from uriparts.utils.validators import is_valid_port, is_valid_scheme

__all__ = [
    "UriParser",
    "parse",
    "split_scheme",
    "split_query_fragment",
    "split_authority",
    "split_user_info",
    "split_host_port",
    "parse_port",
    "split_path",
]

AUTHORITY_MARKER = "//"


def _find_first(text: str, delimiters: str) -> int:
    """Index of the earliest occurrence of any delimiter, or -1."""
    positions = [pos for pos in map(text.find, delimiters) if pos != -1]
    return min(positions) if positions else -1


def split_scheme(reference: str) -> Tuple[Optional[str], str]:
    """
    Split an optional "scheme:" prefix off a reference.

    Only a ":" that appears before any "/", "?" or "#" is a scheme
    delimiter, so "a/b:c" is a relative path rather than a scheme.
    The scheme text itself is not validated.

    Returns:
        Tuple of (scheme or None, remainder).
    """
    colon = reference.find(":")
    if colon == -1:
        return None, reference

    boundary = _find_first(reference, "/?#")
    if boundary != -1 and boundary < colon:
        return None, reference

    return reference[:colon], reference[colon + 1 :]


def split_query_fragment(
    remainder: str,
) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split the query and fragment off the remainder left after the scheme.

    Whichever of "?" or "#" comes first ends the authority and path. Within
    the tail, the first "#" starts the fragment; any further "?" or "#" are
    literal content.

    Returns:
        Tuple of (authority-and-path text, query or None, fragment or None).
    """
    boundary = _find_first(remainder, "?#")
    if boundary == -1:
        return remainder, None, None

    head, tail = remainder[:boundary], remainder[boundary:]
    query_part, hash_mark, fragment = tail.partition("#")

    # An empty query part means the tail began with "#".
    query = query_part[1:] if query_part else None
    return head, query, fragment if hash_mark else None


def split_authority(head: str) -> Tuple[Optional[str], str]:
    """
    Separate a "//authority" prefix from the path.

    Returns:
        Tuple of (authority or None, path text). The path keeps its
        leading "/".
    """
    if not head.startswith(AUTHORITY_MARKER):
        return None, head

    rest = head[len(AUTHORITY_MARKER) :]
    slash = rest.find("/")
    if slash == -1:
        return rest, ""
    return rest[:slash], rest[slash:]


def split_user_info(authority: str) -> Tuple[Optional[str], str]:
    """Split "user-info@host:port" at the first "@"."""
    user_info, at_sign, host_port = authority.partition("@")
    if not at_sign:
        return None, authority
    return user_info, host_port


def parse_port(text: str) -> int:
    """
    Convert port text to an integer.

    Raises:
        PortParseError: If the text is empty, contains anything but ASCII
            digits, or exceeds 65535.
    """
    if not is_valid_port(text):
        raise PortParseError(text)
    return int(text.lstrip("0") or "0")


def split_host_port(host_port: str) -> Tuple[str, Optional[int]]:
    """
    Split "host:port" at the first ":".

    Raises:
        PortParseError: If a ":" is present and the port text is invalid.
    """
    host, colon, port = host_port.partition(":")
    if not colon:
        return host, None
    return host, parse_port(port)


def split_path(path: str) -> Tuple[str, ...]:
    """
    Split a path into segments.

    "" gives (), "/" gives ("",), and otherwise every "/" is a separator,
    so leading, trailing and doubled slashes produce empty segments.
    """
    if not path:
        return ()
    if path == "/":
        return ("",)
    return tuple(path.split("/"))


class UriParser:
    """
    URI-reference parser.

    Handles:
    - Optional scheme, authority, user-info and port.
    - Empty, absolute and relative paths.
    - Query and fragment in either order of appearance.

    Args:
        strict_scheme: Only accept schemes matching the RFC 3986 grammar.
            A rejected scheme leaves the whole input as a relative reference.
        max_length: Reject references longer than this many characters.
    """

    def __init__(
        self,
        strict_scheme: bool = False,
        max_length: Optional[int] = None,
    ):
        self.strict_scheme = strict_scheme
        self.max_length = max_length

    def parse(self, reference: str) -> UriReference:
        """
        Decompose a reference string.

        Returns:
            A new UriReference.

        Raises:
            TypeError: If reference is not a str.
            ReferenceTooLongError: If max_length is set and exceeded.
            PortParseError: If the authority carries an invalid port.
        """
        if not isinstance(reference, str):
            raise TypeError(
                f"reference must be str, not {type(reference).__name__}"
            )

        if self.max_length is not None and len(reference) > self.max_length:
            raise ReferenceTooLongError(len(reference), self.max_length)

        scheme, remainder = split_scheme(reference)
        if scheme is not None and self.strict_scheme and not is_valid_scheme(scheme):
            scheme, remainder = None, reference

        head, query, fragment = split_query_fragment(remainder)
        authority, path = split_authority(head)

        user_info: Optional[str] = None
        host = ""
        port: Optional[int] = None
        if authority is not None:
            user_info, host_port = split_user_info(authority)
            host, port = split_host_port(host_port)

        return UriReference(
            scheme=scheme,
            user_info=user_info,
            host=host,
            port=port,
            path=split_path(path),
            query=query,
            fragment=fragment,
            authority_present=authority is not None,
        )


_default_parser = UriParser()


def parse(reference: str) -> UriReference:
    """Parse a reference string with the default parser settings."""
    return _default_parser.parse(reference)
