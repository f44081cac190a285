"""Regex patterns for template parsing."""

import re

# Pattern matching expressions
variable_pattern = re.compile(r"^\{(?P<name>[a-zA-Z0-9_]+)\}$")
