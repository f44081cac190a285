"""Request URI decomposition."""

from typing import Dict, List, Optional, Union
from urllib.parse import ParseResult, SplitResult, parse_qs, unquote, urlsplit

UriLike = Union[str, SplitResult, ParseResult]


def _path_segments(path: str) -> List[str]:
    """Return raw path segments, ignoring leading and trailing slashes."""
    path = path.strip("/")
    if not path:
        return []
    return path.split("/")


def _same_segment(left: str, right: str) -> bool:
    return unquote(left).casefold() == unquote(right).casefold()


def relative_segments(base_path: str, candidate_path: str) -> Optional[List[str]]:
    """Return the decoded segments of ``candidate_path`` below ``base_path``.

    None is returned when the candidate does not live under the base path.
    """
    prefix = _path_segments(base_path)
    segments = _path_segments(candidate_path)
    if len(segments) < len(prefix):
        return None

    for expected, actual in zip(prefix, segments):
        if not _same_segment(expected, actual):
            return None

    remainder = "/".join(segments[len(prefix) :])
    return [unquote(segment) for segment in _path_segments(remainder)]


class Address:
    """Parse the path and query of a URI."""

    def __init__(self, uri: UriLike):
        """Initialize Address object."""
        if isinstance(uri, str):
            uri = urlsplit(uri)
        self.path: str = uri.path
        self.query: Dict[str, List[str]] = parse_qs(uri.query, keep_blank_values=True)
