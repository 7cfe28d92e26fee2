"""Test utilities for smartquery.

Query implementations that make evaluation order observable. Useful for
checking that a record-level query short-circuits the way you expect:

>>> from smartquery import Match, match_all, some
>>> from smartquery.testing import RaisingQuery
>>> from smartquery import FieldQuery
>>> match_all([Match(FieldQuery.exact(1), some(2)), Match(RaisingQuery(), some(3))])
False
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from smartquery._query import QueryError

if TYPE_CHECKING:
    from smartquery._option import Option
    from smartquery._types import Query


@dataclass(frozen=True, slots=True)
class RaisingQuery:
    """A query that raises QueryError whenever it is evaluated."""

    message: str = "RaisingQuery evaluated"

    def matches(self, value: Any, /) -> bool:
        raise QueryError(self.message)

    def matches_option(self, value: Option[Any], /) -> bool:
        raise QueryError(self.message)


@dataclass(slots=True)
class CountingQuery[T]:
    """Wrap a query and count how many times it is evaluated."""

    inner: Query[T]
    calls: int = field(default=0)

    def matches(self, value: T, /) -> bool:
        self.calls += 1
        return self.inner.matches(value)

    def matches_option(self, value: Option[T], /) -> bool:
        self.calls += 1
        return self.inner.matches_option(value)
