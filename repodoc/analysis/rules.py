"""Rule tables for the heuristic repository classifier."""

from __future__ import annotations

from typing import Callable, FrozenSet, Tuple

from ..models import QualityIndicator

NamePredicate = Callable[[FrozenSet[str]], bool]

FALLBACK_PROJECT_TYPE = "software project"


def _has(*names: str) -> NamePredicate:
    def predicate(present: FrozenSet[str]) -> bool:
        return any(name in present for name in names)

    return predicate


def _node_with(*names: str) -> NamePredicate:
    has_config = _has(*names)

    def predicate(present: FrozenSet[str]) -> bool:
        return "package.json" in present and has_config(present)

    return predicate


# Evaluated in order; the first matching rule decides the label.
PROJECT_TYPE_RULES: Tuple[Tuple[NamePredicate, str], ...] = (
    (_node_with("next.config.js", "next.config.ts"), "Next.js web application"),
    (_node_with("vite.config.js", "vite.config.ts"), "Vite-powered web application"),
    (_node_with("tsconfig.json"), "TypeScript/JavaScript application"),
    (_has("package.json"), "Node.js application"),
    (_has("requirements.txt", "setup.py"), "Python application"),
    (_has("pom.xml"), "Java Maven project"),
    (_has("build.gradle"), "Java Gradle project"),
    (_has("Cargo.toml"), "Rust project"),
    (_has("go.mod"), "Go application"),
)


def _has_tests(present: FrozenSet[str]) -> bool:
    return any("test" in name.lower() for name in present) or bool(
        present & {"tests", "__tests__"}
    )


LISTING_INDICATORS: Tuple[Tuple[QualityIndicator, NamePredicate], ...] = (
    (QualityIndicator.HAS_TESTS, _has_tests),
    (QualityIndicator.HAS_CI, _has(".github", ".gitlab-ci.yml", ".circleci")),
    (QualityIndicator.HAS_DOCKER, _has("Dockerfile", "docker-compose.yml")),
    (QualityIndicator.HAS_DOCS, _has("docs", "documentation")),
)

# (threshold, label) pairs checked with a strict ``>``; the last label is the floor.
STAR_TIERS: Tuple[Tuple[int, str], ...] = ((100, "strong"), (10, "moderate"))
STAR_FLOOR = "emerging"
FORK_TIERS: Tuple[Tuple[int, str], ...] = ((50, "active"), (10, "growing"))
FORK_FLOOR = "initial"
ISSUE_TIERS: Tuple[Tuple[int, str], ...] = ((50, "actively maintained"), (0, "under development"))
ISSUE_FLOOR = "stable"

# First project-type keyword match contributes its use cases.
TYPE_RECOMMENDATIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "web application",
        (
            "Building modern web applications with {language}",
            "Learning web development best practices",
        ),
    ),
    ("Python", ("Data processing and analysis", "Backend API development")),
    (
        "Java",
        ("Enterprise application development", "Building scalable backend services"),
    ),
)

INDICATOR_RECOMMENDATIONS: Tuple[Tuple[QualityIndicator, str], ...] = (
    (QualityIndicator.HAS_DOCKER, "Containerized deployment scenarios"),
    (QualityIndicator.HAS_TESTS, "Learning testing methodologies"),
)


__all__ = [
    "FALLBACK_PROJECT_TYPE",
    "FORK_FLOOR",
    "FORK_TIERS",
    "INDICATOR_RECOMMENDATIONS",
    "ISSUE_FLOOR",
    "ISSUE_TIERS",
    "LISTING_INDICATORS",
    "NamePredicate",
    "PROJECT_TYPE_RULES",
    "STAR_FLOOR",
    "STAR_TIERS",
    "TYPE_RECOMMENDATIONS",
]
