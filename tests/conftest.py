"""Truth-table fixture loader for smartquery.

Loads YAML fixtures from tests/fixtures/ and converts them to smartquery
types for parametrized testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from smartquery import NOTHING, FieldQuery, MatchType, Option, Some, StringQuery

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class TruthCase:
    """A single case from a truth-table fixture."""

    fixture_name: str
    case_name: str
    query: FieldQuery[Any] | StringQuery
    method: str
    candidate: Option[Any]
    expect: bool | str

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


# ─── YAML → smartquery type conversion ───────────────────────────────────────


def _option(case: dict[str, Any], key: str) -> Option[Any]:
    if key in case:
        return Some(case[key])
    return NOTHING


def parse_query(engine: str, case: dict[str, Any]) -> FieldQuery[Any] | StringQuery:
    """Build the query described by a fixture case."""
    strategy = MatchType[case["strategy"].upper()]
    criterion = _option(case, "criterion")
    if engine == "field":
        return FieldQuery(strategy, criterion)
    if engine == "string":
        return StringQuery(strategy, criterion)
    msg = f"Unknown engine: {engine}"
    raise ValueError(msg)


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_truth_cases() -> list[TruthCase]:
    """Load every truth-table case from tests/fixtures/*.yaml."""
    cases: list[TruthCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[TruthCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[TruthCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc["cases"]:
                cases.append(
                    TruthCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        query=parse_query(doc["engine"], case),
                        method=doc["method"],
                        candidate=_option(case, "candidate"),
                        expect=case["expect"],
                    )
                )
    return cases
