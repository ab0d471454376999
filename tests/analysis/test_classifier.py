"""Tests for the rule-based classifier."""

from __future__ import annotations

from typing import Iterable, List

import pytest

from repodoc.analysis.classifier import (
    SUMMARY_HEADING,
    analyze,
    classify,
    fork_tier,
    infer_project_type,
    issue_tier,
    quality_indicators,
    star_tier,
)
from repodoc.models import ContentEntry, NodeKind, QualityIndicator
from tests._fixtures.fake_github import make_snapshot

_DIRECTORIES = {"tests", "__tests__", "docs", "documentation", ".github", ".circleci", "src"}


def _listing(names: Iterable[str]) -> List[ContentEntry]:
    return [
        ContentEntry(
            name=name,
            path=name,
            kind=NodeKind.DIRECTORY if name in _DIRECTORIES else NodeKind.FILE,
        )
        for name in names
    ]


@pytest.mark.parametrize(
    ("stars", "tier"),
    [(0, "emerging"), (10, "emerging"), (11, "moderate"), (100, "moderate"), (101, "strong")],
)
def test_star_tier_is_a_step_function(stars: int, tier: str) -> None:
    assert star_tier(stars) == tier


@pytest.mark.parametrize(
    ("forks", "tier"),
    [(0, "initial"), (10, "initial"), (11, "growing"), (50, "growing"), (51, "active")],
)
def test_fork_tier_boundaries(forks: int, tier: str) -> None:
    assert fork_tier(forks) == tier


@pytest.mark.parametrize(
    ("issues", "tier"),
    [(0, "stable"), (1, "under development"), (50, "under development"), (51, "actively maintained")],
)
def test_issue_tier_boundaries(issues: int, tier: str) -> None:
    assert issue_tier(issues) == tier


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        (["package.json", "next.config.ts"], "Next.js web application"),
        (["package.json", "next.config.js", "vite.config.ts"], "Next.js web application"),
        (["package.json", "vite.config.js"], "Vite-powered web application"),
        (["package.json", "tsconfig.json"], "TypeScript/JavaScript application"),
        (["package.json"], "Node.js application"),
        (["package.json", "requirements.txt"], "Node.js application"),
        (["setup.py"], "Python application"),
        (["pom.xml", "build.gradle"], "Java Maven project"),
        (["build.gradle"], "Java Gradle project"),
        (["Cargo.toml"], "Rust project"),
        (["go.mod"], "Go application"),
        (["next.config.ts"], "software project"),
        ([], "software project"),
    ],
)
def test_project_type_first_matching_rule_wins(names: List[str], expected: str) -> None:
    assert infer_project_type(_listing(names)) == expected


def test_quality_indicators_follow_fixed_order() -> None:
    snapshot = make_snapshot(license={"name": "MIT License"})
    listing = _listing(["docs", "Dockerfile", ".github", "tests", "README.md"])

    assert quality_indicators(snapshot, listing) == [
        QualityIndicator.HAS_TESTS,
        QualityIndicator.HAS_CI,
        QualityIndicator.HAS_DOCKER,
        QualityIndicator.HAS_DOCS,
        QualityIndicator.HAS_LICENSE,
    ]


def test_test_indicator_matches_names_containing_test() -> None:
    snapshot = make_snapshot()

    assert quality_indicators(snapshot, _listing(["jest.config.js"])) == []
    assert quality_indicators(snapshot, _listing(["pytest.ini"])) == [QualityIndicator.HAS_TESTS]
    assert quality_indicators(snapshot, _listing(["__tests__"])) == [QualityIndicator.HAS_TESTS]


def test_analyze_collects_recommendations() -> None:
    snapshot = make_snapshot(stargazers_count=150, forks_count=12, open_issues_count=3)
    listing = _listing(["package.json", "next.config.ts", "Dockerfile", "tests"])
    languages = {"TypeScript": 9000, "CSS": 300, "JavaScript": 20}

    result = analyze(snapshot, listing, languages)

    assert result.project_type == "Next.js web application"
    assert result.primary_language == "TypeScript"
    assert result.language_count == 3
    assert (result.star_tier, result.fork_tier, result.issue_tier) == (
        "strong",
        "growing",
        "under development",
    )
    assert result.recommendations == [
        "Building modern web applications with TypeScript",
        "Learning web development best practices",
        "Containerized deployment scenarios",
        "Learning testing methodologies",
    ]


def test_classify_renders_summary_block() -> None:
    snapshot = make_snapshot(
        stargazers_count=42,
        forks_count=3,
        open_issues_count=0,
        license={"name": "MIT License"},
        topics=["cli", "docs"],
    )
    listing = _listing(["requirements.txt", "tests"])
    languages = {"Python": 1200, "Shell": 40}

    text = classify(snapshot, listing, languages)

    assert text.startswith(SUMMARY_HEADING)
    assert "**Project Type:** Python application" in text
    assert "**Primary Language:** Python (+ 1 other)\n" in text
    assert "**Topics:** `cli`, `docs`" in text
    assert "- 42 stars indicate moderate community interest" in text
    assert "- 3 forks suggest initial community contributions" in text
    assert "- 0 open issues (stable)" in text
    assert "✅ Includes test suite" in text
    assert "✅ Licensed under MIT License" in text
    assert "- Data processing and analysis" in text
    assert "- Learning testing methodologies" in text


def test_classify_handles_empty_inputs() -> None:
    text = classify(make_snapshot(), [], {})

    assert "**Project Type:** software project" in text
    assert "**Primary Language:** Unknown\n" in text
    assert "**Topics:**" not in text
    assert "**Quality Indicators:**" not in text
    assert "**Recommended Use Cases:**" in text


def test_classify_is_deterministic() -> None:
    snapshot = make_snapshot(stargazers_count=7)
    listing = _listing(["go.mod", "docs"])
    languages = {"Go": 10}

    assert classify(snapshot, listing, languages) == classify(snapshot, listing, languages)
