"""smartquery: present/absent-aware field matching for record filters.

All public types are exported from this module for flat imports:

    from smartquery import FieldQuery, StringQuery, MatchType, Some, match_all
"""

__version__ = "0.1.0"

from loguru import logger

# Config: see smartquery._config for the accepted shapes
from smartquery._config import ConfigParseError, parse_query_config, parse_query_set
from smartquery._logging import LogConfig, disable_logging, enable_logging

# Match composition
from smartquery._match import Match, match_all, new_match, new_value_match

# Option
from smartquery._option import (
    NOTHING,
    Nothing,
    Option,
    OptionError,
    Some,
    UnwrapError,
    from_nullable,
    nothing,
    some,
)

# Queries
from smartquery._query import (
    FieldQuery,
    QueryError,
    UnsupportedStrategyError,
    always,
    exact,
    like,
    new_query,
)
from smartquery._string_query import (
    MAX_CACHED_PATTERNS,
    PatternError,
    StringQuery,
    always_string,
    any_string,
    exact_string,
    like_matches,
    like_string,
    like_to_regex,
    new_string_query,
    none_string,
)

# Protocols
from smartquery._types import Matcher, MatchType, Query

# Library logging is off until enable_logging() is called
logger.disable("smartquery")

__all__ = [
    # Protocols
    "Query",
    "Matcher",
    "MatchType",
    # Option
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "some",
    "nothing",
    "from_nullable",
    "OptionError",
    "UnwrapError",
    # Generic queries
    "FieldQuery",
    "new_query",
    "always",
    "exact",
    "like",
    # String queries
    "StringQuery",
    "new_string_query",
    "always_string",
    "none_string",
    "any_string",
    "exact_string",
    "like_string",
    "like_to_regex",
    "like_matches",
    "MAX_CACHED_PATTERNS",
    # Errors
    "QueryError",
    "UnsupportedStrategyError",
    "PatternError",
    # Match composition
    "Match",
    "new_match",
    "new_value_match",
    "match_all",
    # Config
    "ConfigParseError",
    "parse_query_config",
    "parse_query_set",
    # Logging
    "LogConfig",
    "enable_logging",
    "disable_logging",
]
