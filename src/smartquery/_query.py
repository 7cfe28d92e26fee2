"""FieldQuery: strategy matching for any equality-comparable type.

LIKE is not available here; wildcard interpretation only makes sense for
strings, see StringQuery.

"Absent matches absent" under EXACT is intentional: a query for "no value"
selects records that have no value (NULL = NULL as a filter, not SQL's
three-valued logic).
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loguru import logger

from smartquery._option import NOTHING, Option, Some
from smartquery._types import MatchType

if TYPE_CHECKING:
    from collections.abc import Callable


class QueryError(Exception):
    """Errors from query evaluation."""


class UnsupportedStrategyError(QueryError):
    """The strategy cannot be evaluated by this query type."""

    def __init__(self, strategy: Any, engine: str, hint: str | None = None) -> None:
        self.strategy = strategy
        self.engine = engine
        if hint is not None:
            msg = f"{engine}: cannot perform {_strategy_name(strategy)} matches: {hint}"
        else:
            msg = f"{engine}: unsupported matching strategy: {_strategy_name(strategy)}"
        super().__init__(msg)


def _strategy_name(strategy: Any) -> str:
    if isinstance(strategy, MatchType):
        return f"{strategy!s} ({int(strategy)})"
    return repr(strategy)


def _unsupported(strategy: Any, engine: str, hint: str | None = None) -> UnsupportedStrategyError:
    err = UnsupportedStrategyError(strategy, engine, hint)
    logger.debug(f"query rejected: {err}")
    return err


_LIKE_HINT = "LIKE is unsupported on generic types, use StringQuery instead"


@dataclass(frozen=True, slots=True)
class FieldQuery[T]:
    """Match a field of type T.

    ``value`` is the criterion and may be Nothing for any strategy.
    ``eq`` is the equality used by EXACT (and SOME); defaults to ``==``.
    """

    strategy: MatchType
    value: Option[T] = NOTHING
    eq: Callable[[T, T], bool] = field(default=operator.eq, repr=False, compare=False)

    # ── Named constructors ────────────────────────────────────────────────

    @classmethod
    def always(cls) -> FieldQuery[T]:
        return cls(MatchType.ALWAYS, NOTHING)

    @classmethod
    def none(cls, match: T) -> FieldQuery[T]:
        return cls(MatchType.NONE, Some(match))

    @classmethod
    def any(cls, match: T) -> FieldQuery[T]:
        return cls(MatchType.ANY, Some(match))

    @classmethod
    def some(cls, match: T) -> FieldQuery[T]:
        return cls(MatchType.SOME, Some(match))

    @classmethod
    def exact(cls, match: T) -> FieldQuery[T]:
        return cls(MatchType.EXACT, Some(match))

    @classmethod
    def like(cls, match: T) -> FieldQuery[T]:
        """Build a LIKE query. Evaluating it always raises; kept for symmetry."""
        return cls(MatchType.LIKE, Some(match))

    # ── Evaluation ────────────────────────────────────────────────────────

    def matches(self, value: T, /) -> bool:
        """Match a definite (always present) value.

        Raises:
            UnsupportedStrategyError: strategy is LIKE or unrecognised.
        """
        match self.strategy:
            case MatchType.ALWAYS:
                return True
            case MatchType.NONE:
                return False
            case MatchType.ANY:
                # a plain value is always present
                return True
            case MatchType.EXACT | MatchType.SOME:
                match self.value:
                    case Some(value=criterion):
                        return bool(self.eq(criterion, value))
                    case _:
                        return False
            case MatchType.LIKE:
                raise _unsupported(self.strategy, "FieldQuery", _LIKE_HINT)
        raise _unsupported(self.strategy, "FieldQuery")

    def matches_option(self, value: Option[T], /) -> bool:
        """Match a candidate that may be absent.

        Raises:
            UnsupportedStrategyError: strategy is LIKE or unrecognised.
        """
        candidate_absent = value.is_none()
        match self.strategy:
            case MatchType.ALWAYS:
                return True
            case MatchType.NONE:
                return candidate_absent
            case MatchType.ANY:
                return not candidate_absent
            case MatchType.EXACT | MatchType.SOME:
                match (self.value, value):
                    case (Some(value=criterion), Some(value=other)):
                        return bool(self.eq(criterion, other))
                    case (Some(), _) | (_, Some()):
                        return False
                    case _:
                        return True
            case MatchType.LIKE:
                raise _unsupported(self.strategy, "FieldQuery", _LIKE_HINT)
        raise _unsupported(self.strategy, "FieldQuery")


def new_query[T](strategy: MatchType, value: Option[T]) -> FieldQuery[T]:
    """Build a FieldQuery from an explicit strategy and criterion."""
    return FieldQuery(strategy, value)


def always[T]() -> FieldQuery[T]:
    return FieldQuery.always()


def exact[T](match: T) -> FieldQuery[T]:
    return FieldQuery.exact(match)


def like[T](match: T) -> FieldQuery[T]:
    return FieldQuery.like(match)
