"""URI template matching entry point."""

import logging
from dataclasses import dataclass, field
from typing import List

from uri_template_matcher.address import Address, UriLike
from uri_template_matcher.matching import match_path, match_query
from uri_template_matcher.parsing import parse_template
from uri_template_matcher.types import (
    MatchingResult,
    PathPattern,
    QueryPattern,
    Variable,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class UriTemplate:
    """Match request URIs against a path and query template.

    The template is parsed once, on construction::

        >>> template = UriTemplate("/users/{id}?verbose={verbose}")
        >>> result = template.is_match("http://host/api/", "http://host/api/users/42")
        >>> bool(result), result["id"], result["verbose"]
        (True, '42', '')

    Path segments are matched below the path of the base address, so the
    same template can be mounted under different prefixes.
    """

    template: str
    path_pattern: PathPattern = field(init=False, repr=False, compare=False)
    query_pattern: QueryPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Parse the template."""
        path_pattern, query_pattern = parse_template(self.template)
        object.__setattr__(self, "path_pattern", path_pattern)
        object.__setattr__(self, "query_pattern", query_pattern)

    @property
    def variables(self) -> List[str]:
        """Return declared variable names, path first then query."""
        names = [s.name for s in self.path_pattern if isinstance(s, Variable)]
        names.extend(
            e.value.name for e in self.query_pattern if isinstance(e.value, Variable)
        )
        return names

    def is_match(self, base_address: UriLike, candidate: UriLike) -> MatchingResult:
        """Match ``candidate`` relative to ``base_address``."""
        base = Address(base_address)
        request = Address(candidate)

        path_ok, path_captures = match_path(self.path_pattern, base.path, request.path)
        if not path_ok:
            log.debug("Path of %s does not match %r", candidate, self.template)
            return MatchingResult.failed()

        query_ok, query_captures = match_query(self.query_pattern, request.query)
        if not query_ok:
            log.debug("Query of %s does not match %r", candidate, self.template)

        variables = dict(path_captures)
        variables.update(query_captures)
        return MatchingResult(success=query_ok, variables=variables)

    match = is_match
