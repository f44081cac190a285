from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Literal:
    """Path segment that must be present verbatim (case-insensitive)."""

    text: str


@dataclass(frozen=True)
class LiteralValue:
    """Query value that must be present verbatim (case-sensitive)."""

    text: str


@dataclass(frozen=True)
class Variable:
    """Named placeholder written as ``{name}``."""

    name: str


PathSegment = Union[Literal, Variable]
QueryValue = Union[LiteralValue, Variable]


@dataclass(frozen=True)
class QueryExpectation:
    key: str
    value: QueryValue


PathPattern = Tuple[PathSegment, ...]
QueryPattern = Tuple[QueryExpectation, ...]


@dataclass(frozen=True)
class MatchingResult:
    """Outcome of a single match attempt.

    Truthiness follows ``success``. Captured values are looked up with
    ``result[name]``; asking for a name that was never captured raises
    ``KeyError``.
    """

    success: bool
    variables: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "variables", MappingProxyType(dict(self.variables))
        )

    @classmethod
    def failed(cls) -> "MatchingResult":
        """Return a failed result without captures."""
        return cls(success=False)

    def __hash__(self) -> int:
        return hash((self.success, frozenset(self.variables.items())))

    def __bool__(self) -> bool:
        return self.success

    def __getitem__(self, name: str) -> str:
        return self.variables[name]

    def __contains__(self, name: object) -> bool:
        return name in self.variables

    def __iter__(self) -> Iterator[str]:
        return iter(self.variables)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the captured value for ``name`` or ``default``."""
        return self.variables.get(name, default)
