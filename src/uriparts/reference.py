"""src/uriparts/reference.py

The parsed URI-reference value type.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = ["UriReference"]


@dataclass(frozen=True)
class UriReference:
    """
    A URI-reference decomposed into its RFC 3986 components.

    Values are produced by uriparts.parse() and never change afterwards.
    Optional components are None when absent, which keeps an absent query
    distinct from an empty one ("http://a" versus "http://a?").

    Attributes:
        scheme: Text before the scheme delimiter, or None.
        user_info: Text before "@" in the authority, or None.
        host: Host text; empty when there is no authority.
        port: Port number in [0, 65535], or None.
        path: Path segments. A leading "" marks an absolute path.
        query: Text after "?", or None.
        fragment: Text after "#", or None.
        authority_present: Whether the reference contained a "//" authority.
    """

    scheme: Optional[str] = None
    user_info: Optional[str] = None
    host: str = ""
    port: Optional[int] = None
    path: Tuple[str, ...] = ()
    query: Optional[str] = None
    fragment: Optional[str] = None
    authority_present: bool = False

    @property
    def has_port(self) -> bool:
        """Whether the authority carried a valid port."""
        return self.port is not None

    @property
    def is_relative_reference(self) -> bool:
        """True when the reference has no scheme."""
        return self.scheme is None

    @property
    def contains_relative_path(self) -> bool:
        """True when the path is empty or does not start with "/"."""
        return not self.path or self.path[0] != ""
