"""Config parsing for dict-driven query construction.

Host applications that load filters from JSON/YAML describe each field query
as a dict and turn it into a runtime query:

  dict → parse_query_config() → FieldQuery | StringQuery

Accepted shapes:

| Shape                               | Result                          |
|-------------------------------------|---------------------------------|
| {"Exact": 42}                       | FieldQuery(EXACT, Some(42))     |
| {"Like": "orig%"}                   | StringQuery(LIKE, Some("orig%"))|
| {"Always": null}                    | FieldQuery(ALWAYS, Nothing)     |
| {"None": "x", "kind": "string"}     | StringQuery(NONE, Some("x"))    |
| {"strategy": 4, "value": 42}        | FieldQuery(EXACT, Some(42))     |

A null criterion becomes Nothing. "kind" selects the engine and defaults to
"field", or "string" for Like.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from smartquery._option import NOTHING, Some
from smartquery._query import FieldQuery
from smartquery._string_query import StringQuery
from smartquery._types import MatchType

if TYPE_CHECKING:
    from smartquery._option import Option

# Strategy variant names, as written in configs
_VARIANTS: dict[str, MatchType] = {str(m): m for m in MatchType}

_KINDS = frozenset({"field", "string"})


class ConfigParseError(Exception):
    """Error parsing a config dict into a query."""


def parse_query_config(data: dict[str, Any]) -> FieldQuery[Any] | StringQuery:
    """Parse a dict into a FieldQuery or StringQuery.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "strategy" in data:
        strategy = _parse_strategy_code(data["strategy"])
        value = data.get("value")
        variants = [k for k in data if k in _VARIANTS]
        if variants:
            msg = f"'strategy' cannot be combined with variant keys {sorted(variants)}"
            raise ConfigParseError(msg)
    else:
        strategy, value = _parse_variant(data)

    kind = _parse_kind(data, strategy)
    criterion: Option[Any] = NOTHING if value is None else Some(value)

    if kind == "string":
        if value is not None and not isinstance(value, str):
            msg = f"string query value must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
        return StringQuery(strategy, criterion)

    if strategy == MatchType.LIKE:
        msg = "Like requires kind 'string'"
        raise ConfigParseError(msg)
    return FieldQuery(strategy, criterion)


def parse_query_set(data: dict[str, Any]) -> dict[str, FieldQuery[Any] | StringQuery]:
    """Parse a mapping of field name → query config.

    Raises:
        ConfigParseError: If the mapping or any entry is malformed. The
            message is prefixed with the offending field name.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    queries: dict[str, FieldQuery[Any] | StringQuery] = {}
    for name, cfg in data.items():
        if not isinstance(name, str):
            msg = f"field name must be a string, got {type(name).__name__}"
            raise ConfigParseError(msg)
        try:
            queries[name] = parse_query_config(cfg)
        except ConfigParseError as e:
            msg = f"field {name!r}: {e}"
            raise ConfigParseError(msg) from e
    return queries


def _parse_variant(data: dict[str, Any]) -> tuple[MatchType, Any]:
    """Parse the single strategy key, e.g. { "Exact": 42 }."""
    variants = [k for k in data if k in _VARIANTS]
    if not variants:
        expected = sorted(_VARIANTS)
        msg = f"query must contain one of {expected}, got keys: {sorted(map(str, data))}"
        raise ConfigParseError(msg)
    if len(variants) > 1:
        msg = f"exactly one strategy must be set, got {sorted(variants)}"
        raise ConfigParseError(msg)
    variant = variants[0]
    return _VARIANTS[variant], data[variant]


def _parse_strategy_code(code: Any) -> MatchType:
    if not isinstance(code, int) or isinstance(code, bool):
        msg = f"'strategy' must be an integer, got {type(code).__name__}"
        raise ConfigParseError(msg)
    try:
        return MatchType(code)
    except ValueError as e:
        msg = f"unknown strategy code: {code}"
        raise ConfigParseError(msg) from e


def _parse_kind(data: dict[str, Any], strategy: MatchType) -> str:
    default = "string" if strategy == MatchType.LIKE else "field"
    kind = data.get("kind", default)
    if not isinstance(kind, str) or kind not in _KINDS:
        msg = f"unknown query kind: {kind!r} (expected one of {sorted(_KINDS)})"
        raise ConfigParseError(msg)
    return kind
