"""StringQuery: strategy matching for strings, with LIKE wildcards.

LIKE supports two wildcards: ``%`` matches any run of characters (including
none) and ``_`` matches exactly one. They are translated to ``.*`` and ``.``
by plain substitution. Other regex metacharacters in the criterion are NOT
escaped, so ``a.c`` still means "a, any char, c" and ``orig(`` is a
PatternError.

Patterns are compiled with ``google-re2`` for guaranteed linear-time matching,
and matched with search (unanchored): ``orig`` matches ``"original"``. Pin a
pattern with ``^``/``$`` for a full match.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import re2
from loguru import logger

from smartquery._option import NOTHING, Option, Some
from smartquery._query import QueryError, _unsupported
from smartquery._types import MatchType

MAX_CACHED_PATTERNS = 1024


class PatternError(QueryError):
    """A LIKE criterion did not translate into a valid RE2 pattern."""

    def __init__(self, criterion: str, pattern: str, reason: str) -> None:
        self.criterion = criterion
        self.pattern = pattern
        super().__init__(f'invalid LIKE pattern "{criterion}" (as regex "{pattern}"): {reason}')


def like_to_regex(criterion: str) -> str:
    """Translate LIKE wildcards to regex syntax: ``%`` -> ``.*``, ``_`` -> ``.``."""
    return criterion.replace("%", ".*").replace("_", ".")


@lru_cache(maxsize=MAX_CACHED_PATTERNS)
def _compile(pattern: str) -> re2.Pattern[str]:
    logger.debug(f"compiling LIKE pattern {pattern!r}")
    return re2.compile(pattern)


def like_matches(criterion: str, value: str) -> bool:
    """Return True if ``value`` contains a match for the LIKE ``criterion``.

    Raises:
        PatternError: the translated pattern is not valid RE2 syntax.
    """
    pattern = like_to_regex(criterion)
    try:
        compiled = _compile(pattern)
    except re2.error as e:
        err = PatternError(criterion, pattern, str(e))
        logger.debug(f"query rejected: {err}")
        raise err from e
    return compiled.search(value) is not None


@dataclass(frozen=True, slots=True)
class StringQuery:
    """Match a string field.

    ``value`` is the criterion and may be Nothing for any strategy.

    Truth table for matches_option (criterion / candidate presence):

    ==========  ==========  ======  ====  =====  =====  ====
    criterion   candidate   ALWAYS  NONE  ANY    EXACT  LIKE
    ==========  ==========  ======  ====  =====  =====  ====
    absent      absent      T       T     F      T      T
    absent      present     T       F     T      F      F
    present     absent      T       T     F      F      F
    present     present     T       F     T      ==     re
    ==========  ==========  ======  ====  =====  =====  ====

    NONE with a present criterion and an absent candidate is True, unlike
    the other one-sided cells.
    """

    strategy: MatchType
    value: Option[str] = NOTHING

    # ── Named constructors ────────────────────────────────────────────────

    @classmethod
    def always(cls) -> StringQuery:
        return cls(MatchType.ALWAYS, NOTHING)

    @classmethod
    def none(cls, match: str) -> StringQuery:
        return cls(MatchType.NONE, Some(match))

    @classmethod
    def any(cls, match: str) -> StringQuery:
        return cls(MatchType.ANY, Some(match))

    @classmethod
    def some(cls, match: str) -> StringQuery:
        return cls(MatchType.SOME, Some(match))

    @classmethod
    def exact(cls, match: str) -> StringQuery:
        return cls(MatchType.EXACT, Some(match))

    @classmethod
    def like(cls, match: str) -> StringQuery:
        return cls(MatchType.LIKE, Some(match))

    # ── Evaluation ────────────────────────────────────────────────────────

    def matches(self, value: str, /) -> bool:
        """Match a definite (always present) string.

        Raises:
            UnsupportedStrategyError: strategy is unrecognised.
            PatternError: LIKE criterion is not a valid pattern.
        """
        if self.value.is_none():
            return self._criterion_absent(candidate_absent=False)
        return self._matches_present(self.value.unsafe_unwrap(), value)

    def matches_option(self, value: Option[str], /) -> bool:
        """Match a string that may be absent.

        Raises:
            UnsupportedStrategyError: strategy is unrecognised.
            PatternError: LIKE criterion is not a valid pattern.
        """
        match (self.value, value):
            case (Some(value=criterion), Some(value=other)):
                return self._matches_present(criterion, other)
            case (Some(), _):
                return self._candidate_absent()
            case (_, candidate):
                return self._criterion_absent(candidate_absent=candidate.is_none())

    def _matches_present(self, criterion: str, other: str) -> bool:
        match self.strategy:
            case MatchType.ALWAYS | MatchType.ANY:
                return True
            case MatchType.NONE:
                return False
            case MatchType.EXACT | MatchType.SOME:
                return criterion == other
            case MatchType.LIKE:
                return like_matches(criterion, other)
        raise _unsupported(self.strategy, "StringQuery")

    def _criterion_absent(self, *, candidate_absent: bool) -> bool:
        # An absent criterion matches only an absent candidate, except for
        # ALWAYS and ANY.
        match self.strategy:
            case MatchType.ALWAYS:
                return True
            case MatchType.ANY:
                return not candidate_absent
            case MatchType.NONE | MatchType.EXACT | MatchType.SOME | MatchType.LIKE:
                return candidate_absent
        raise _unsupported(self.strategy, "StringQuery")

    def _candidate_absent(self) -> bool:
        match self.strategy:
            case MatchType.ALWAYS | MatchType.NONE:
                return True
            case MatchType.ANY | MatchType.EXACT | MatchType.SOME | MatchType.LIKE:
                return False
        raise _unsupported(self.strategy, "StringQuery")


def new_string_query(strategy: MatchType, value: Option[str]) -> StringQuery:
    """Build a StringQuery from an explicit strategy and criterion."""
    return StringQuery(strategy, value)


def always_string() -> StringQuery:
    return StringQuery.always()


def none_string(match: str) -> StringQuery:
    return StringQuery.none(match)


def any_string(match: str) -> StringQuery:
    return StringQuery.any(match)


def exact_string(match: str) -> StringQuery:
    return StringQuery.exact(match)


def like_string(match: str) -> StringQuery:
    return StringQuery.like(match)
