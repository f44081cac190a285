"""Template string parsing."""

from typing import List, Optional, Tuple
from urllib.parse import unquote, unquote_plus

from uri_template_matcher.patterns import variable_pattern
from uri_template_matcher.types import (
    Literal,
    LiteralValue,
    PathPattern,
    PathSegment,
    QueryExpectation,
    QueryPattern,
    QueryValue,
    Variable,
)


def _variable_name(token: str) -> Optional[str]:
    match = variable_pattern.match(token)
    if match:
        return match.groupdict()["name"]
    return None


def _parse_segment(segment: str) -> PathSegment:
    name = _variable_name(segment)
    if name is not None:
        return Variable(name)
    return Literal(unquote(segment))


def _parse_value(value: str) -> QueryValue:
    name = _variable_name(value)
    if name is not None:
        return Variable(name)
    return LiteralValue(unquote_plus(value))


def _parse_path(path: str) -> PathPattern:
    path = path.strip("/")
    if not path:
        return ()
    return tuple(_parse_segment(segment) for segment in path.split("/"))


def _parse_query(query: str) -> QueryPattern:
    expectations: List[QueryExpectation] = []
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        # keys are always literal, even when written as {name}
        expectations.append(QueryExpectation(unquote_plus(key), _parse_value(value)))
    return tuple(expectations)


def parse_template(template: str) -> Tuple[PathPattern, QueryPattern]:
    """Split a template into its path and query patterns.

    Everything before the first ``?`` describes path segments, everything
    after it describes expected query parameters. Any string is accepted;
    brace usage that is not exactly ``{identifier}`` is kept as literal text.
    Literal text is percent-decoded the same way request URIs are.

    """
    if not isinstance(template, str):
        raise TypeError(
            f"URI template must be a string, got {type(template).__name__!r}"
        )

    path, _, query = template.partition("?")
    return _parse_path(path), _parse_query(query)
