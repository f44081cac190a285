"""uri_template_matcher: match request URIs against path and query templates."""

from uri_template_matcher.log import configure_logging
from uri_template_matcher.template import UriTemplate
from uri_template_matcher.types import MatchingResult

__version__ = "1.0.0"

__all__ = ["MatchingResult", "UriTemplate", "configure_logging", "__version__"]
