"""Conformance fixture loader for primitive_match.

Loads YAML fixtures from tests/fixtures/ and converts them to MatchTables
for parametrized testing. Each YAML document has the shape:

    name: <fixture name>
    table: <match table config>
    cases:
      - {name: <case name>, values: [...], expect: <result or null>}
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from primitive_match import MatchTable, load_match_table, parse_match_table_config

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    table: MatchTable[Any]
    values: tuple[Any, ...]
    expect: Any


def load_conformance_cases() -> list[FixtureCase]:
    """Load every case from every fixture file, in file order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            table = load_match_table(parse_match_table_config(doc["table"]))
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=f"{path.stem}::{doc['name']}",
                        case_name=case["name"],
                        table=table,
                        values=tuple(case["values"]),
                        expect=case["expect"],
                    )
                )
    return cases
