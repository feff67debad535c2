"""Conformance fixture loader for grammex.

Loads YAML fixtures from tests/fixtures/ and converts them to matcher
trees for parametrized testing. Each document names a grammar and lists
cases: an input, the expected span (or null for failure), and the cursor
position the feed must be left at.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from grammex import (
    Matcher,
    alternation,
    character,
    optional,
    pattern,
    quantifier,
    sequence,
)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    matcher: Matcher[Any]
    input: str
    start: int
    expect: tuple[int, int] | None
    value: Any
    cursor: int


# ─── YAML → matcher conversion ──────────────────────────────────────────────


def parse_matcher(node: dict[str, Any]) -> Matcher[Any]:
    """Parse a matcher node into a matcher tree."""
    if "character" in node:
        return character(str(node["character"]))
    if "pattern" in node:
        return pattern(str(node["pattern"]))
    if "sequence" in node:
        return sequence(*(parse_matcher(m) for m in node["sequence"]))
    if "alternation" in node:
        return alternation(*(parse_matcher(m) for m in node["alternation"]))
    if "quantifier" in node:
        q = node["quantifier"]
        return quantifier(parse_matcher(q["matcher"]), q.get("min", 0), q.get("max"))
    if "optional" in node:
        return optional(parse_matcher(node["optional"]))
    msg = f"Unknown matcher type: {node}"
    raise ValueError(msg)


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all conformance fixtures."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            matcher = parse_matcher(doc["matcher"])
            for case in doc["cases"]:
                expect = case["expect"]
                start = case.get("start", 0)
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        matcher=matcher,
                        input=str(case["input"]),
                        start=start,
                        expect=tuple(expect) if expect is not None else None,
                        value=case.get("value"),
                        # Failure defaults to "cursor untouched".
                        cursor=case.get("cursor", expect[1] if expect is not None else start),
                    )
                )
    return cases
