"""Path and query matching against parsed templates."""

import logging
from typing import Dict, Mapping, Sequence, Tuple

from uri_template_matcher.address import relative_segments
from uri_template_matcher.types import (
    Literal,
    LiteralValue,
    PathPattern,
    QueryPattern,
    Variable,
)

log = logging.getLogger(__name__)


def match_path(
    pattern: PathPattern, base_path: str, candidate_path: str
) -> Tuple[bool, Dict[str, str]]:
    """Match path segments below ``base_path`` against ``pattern``.

    Literal segments compare case-insensitively, variables capture the
    segment as found. The number of segments must be the same on both sides.
    """
    segments = relative_segments(base_path, candidate_path)
    if segments is None:
        log.debug("%s is not under base path %s", candidate_path, base_path)
        return False, {}

    if len(segments) != len(pattern):
        log.debug(
            "%s has %d segment(s) below %s, expected %d",
            candidate_path,
            len(segments),
            base_path,
            len(pattern),
        )
        return False, {}

    captures: Dict[str, str] = {}
    for expected, actual in zip(pattern, segments):
        if isinstance(expected, Variable):
            if not actual:
                log.debug("Empty segment for variable %s", expected.name)
                return False, {}
            captures[expected.name] = actual
        elif isinstance(expected, Literal):
            if expected.text.casefold() != actual.casefold():
                log.debug("Segment %r does not match %r", actual, expected.text)
                return False, {}

    return True, captures


def match_query(
    pattern: QueryPattern, candidate_query: Mapping[str, Sequence[str]]
) -> Tuple[bool, Dict[str, str]]:
    """Match query parameters against ``pattern``, in any order.

    Literal values are required and compared exactly. Variables are optional
    and capture an empty string when the parameter is missing. When a
    parameter is repeated only its first value is considered.
    """
    captures: Dict[str, str] = {}
    success = True
    for expectation in pattern:
        values = candidate_query.get(expectation.key)
        actual = values[0] if values else None
        value = expectation.value
        if isinstance(value, Variable):
            captures[value.name] = actual if actual is not None else ""
        elif isinstance(value, LiteralValue):
            if actual != value.text:
                log.debug(
                    "Query parameter %s=%r does not match %r",
                    expectation.key,
                    actual,
                    value.text,
                )
                success = False

    return success, captures
