"""Match composition: a query bound to its candidate, and conjunction.

Match pairs a Query with one candidate (normalised to an Option) so a
record-level query can collect per-field checks and hand them to match_all.

    checks = [
        new_value_match(record.name, exact_string("chester")),
        new_match(record.email, always_string()),
    ]
    match_all(checks)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from smartquery._option import Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterable

    from smartquery._types import Matcher, Query


@dataclass(frozen=True, slots=True)
class Match[T]:
    """A query bound to one candidate. Evaluates via matches_option()."""

    query: Query[T]
    operand: Option[T]

    @classmethod
    def of_value(cls, operand: T, query: Query[T]) -> Match[T]:
        """Bind a definite value (wrapped as Some)."""
        return cls(query, Some(operand))

    def match(self) -> bool:
        return self.query.matches_option(self.operand)


def new_value_match[T](operand: T, query: Query[T]) -> Match[T]:
    return Match.of_value(operand, query)


def new_match[T](operand: Option[T], query: Query[T]) -> Match[T]:
    return Match(query, operand)


def match_all(matches: Iterable[Matcher]) -> bool:
    """All matchers must match (logical AND).

    Evaluates left to right and stops at the first False. An error raised by
    a matcher propagates immediately and later matchers are not evaluated.
    Empty input returns True (vacuous truth).
    """
    for i, m in enumerate(matches):
        if not m.match():
            logger.debug(f"match_all: matcher {i} did not match, short-circuiting")
            return False
    return True
