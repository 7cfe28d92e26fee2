"""Core protocols and the strategy enumeration for smartquery.

- MatchType is the closed set of matching strategies
- Query is the per-field matching port (value or Option candidate)
- Matcher is a zero-argument check with its candidate already bound
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from smartquery._option import Option


class MatchType(IntEnum):
    """Matching strategies.

    Defined for single values. The set-theoretic reading in each comment is
    what the strategy would mean once queries accept collections.
    """

    ALWAYS = 0  # S = S ∪ S, always true
    NONE = 1  # ⦰ = S
    ANY = 2  # ⦰ != S
    SOME = 3  # ⦰ != S1 ∩ S2. Same as EXACT until collections are supported.
    EXACT = 4  # ⦰ = S1 𝚫 S2
    LIKE = 5  # strings only: wildcard pattern

    def __str__(self) -> str:
        return self.name.capitalize()


@runtime_checkable
class Query[T](Protocol):
    """Match a candidate against a configured strategy and criterion.

    Both methods raise QueryError when the strategy cannot be evaluated
    for this query type.
    """

    def matches(self, value: T, /) -> bool: ...

    def matches_option(self, value: Option[T], /) -> bool: ...


@runtime_checkable
class Matcher(Protocol):
    """A query bound to its candidate, ready to evaluate."""

    def match(self) -> bool: ...
