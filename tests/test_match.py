"""Tests for Match binding and match_all conjunction."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from smartquery import (
    NOTHING,
    FieldQuery,
    Match,
    Matcher,
    Option,
    QueryError,
    Some,
    UnsupportedStrategyError,
    always_string,
    exact,
    exact_string,
    like,
    like_string,
    match_all,
    new_match,
    new_value_match,
)
from smartquery.testing import CountingQuery, RaisingQuery


class TestMatch:
    def test_value_match(self) -> None:
        assert new_value_match(47, exact(47)).match() is True
        assert new_value_match(47, exact(42)).match() is False

    def test_value_is_wrapped(self) -> None:
        m = Match.of_value(47, exact(47))
        assert m.operand == Some(47)

    def test_option_match(self) -> None:
        assert new_match(NOTHING, FieldQuery.none(47)).match() is True
        assert new_match(Some(47), FieldQuery.none(47)).match() is False

    def test_uses_matches_option(self) -> None:
        inner = CountingQuery(exact(47))
        new_value_match(47, inner).match()
        new_match(NOTHING, inner).match()
        assert inner.calls == 2

    def test_error_propagates(self) -> None:
        with pytest.raises(UnsupportedStrategyError):
            new_value_match(47, like(47)).match()

    def test_satisfies_matcher_protocol(self) -> None:
        assert isinstance(new_value_match(47, exact(47)), Matcher)

    def test_frozen(self) -> None:
        m = new_value_match(47, exact(47))
        with pytest.raises(AttributeError):
            m.operand = Some(42)  # type: ignore[misc]


class TestMatchAll:
    def test_empty_is_true(self) -> None:
        assert match_all([]) is True

    def test_all_true(self) -> None:
        assert match_all([new_value_match(47, exact(47)), new_value_match("a", exact_string("a"))])

    def test_one_false(self) -> None:
        m1 = new_value_match(47, exact(47))
        m2 = new_value_match(47, exact(42))
        assert match_all([m1, m2]) is False

    def test_short_circuits_on_false(self) -> None:
        later = RaisingQuery()
        assert match_all([new_value_match(47, exact(42)), new_value_match(47, later)]) is False

    def test_stops_evaluating_after_false(self) -> None:
        counted = CountingQuery(exact(47))
        match_all([new_value_match(47, exact(42)), new_value_match(47, counted)])
        assert counted.calls == 0

    def test_first_error_wins_over_later_false(self) -> None:
        with pytest.raises(QueryError, match="first"):
            match_all(
                [
                    new_value_match(47, RaisingQuery("first")),
                    new_value_match(47, exact(42)),
                ]
            )

    def test_false_before_error_returns_false(self) -> None:
        assert match_all([new_value_match(47, exact(42)), new_value_match(47, like(47))]) is False

    def test_accepts_any_iterable(self) -> None:
        matches = (new_value_match(n, exact(n)) for n in range(3))
        assert match_all(matches) is True

    def test_consumes_generator_lazily(self) -> None:
        produced: list[int] = []

        def gen():
            for n in (1, 2, 3):
                produced.append(n)
                yield new_value_match(n, exact(2))

        assert match_all(gen()) is False
        assert produced == [1]


# ─── Record-level query, the way a host application composes fields ─────────


@dataclass(frozen=True)
class Account:
    name: str
    email: Option[str]
    balance: int
    stars: Option[int]


@dataclass(frozen=True)
class AccountQuery:
    name: object
    email: object
    balance: FieldQuery[int]
    stars: FieldQuery[int]

    def matches(self, account: Account) -> bool:
        return match_all(
            [
                new_value_match(account.name, self.name),
                new_match(account.email, self.email),
                new_value_match(account.balance, self.balance),
                new_match(account.stars, self.stars),
            ]
        )

    def matches_option(self, account: Option[Account]) -> bool:
        if account.is_none():
            return False
        return self.matches(account.unsafe_unwrap())


class TestRecordQuery:
    chester = Account(
        name="Chester the Tester",
        email=Some("chester@testing.org"),
        balance=42,
        stars=Some(7),
    )

    def test_matches(self) -> None:
        q = AccountQuery(
            name=exact_string("Chester the Tester"),
            email=always_string(),
            balance=FieldQuery.any(42),
            stars=FieldQuery.always(),
        )
        assert q.matches(self.chester) is True
        assert q.matches_option(Some(self.chester)) is True
        assert q.matches_option(NOTHING) is False

    def test_like_on_name(self) -> None:
        q = AccountQuery(
            name=like_string("Chester%"),
            email=like_string("%@testing.org"),
            balance=exact(42),
            stars=FieldQuery.exact(7),
        )
        assert q.matches(self.chester) is True

    def test_missing_email(self) -> None:
        q = AccountQuery(
            name=always_string(),
            email=exact_string("chester@testing.org"),
            balance=FieldQuery.always(),
            stars=FieldQuery.always(),
        )
        no_email = Account(name="Chester", email=NOTHING, balance=0, stars=NOTHING)
        assert q.matches(no_email) is False

    def test_field_error_surfaces(self) -> None:
        q = AccountQuery(
            name=always_string(),
            email=always_string(),
            balance=like(42),
            stars=FieldQuery.always(),
        )
        with pytest.raises(UnsupportedStrategyError):
            q.matches(self.chester)
