"""Rule-based project classification and summary prose."""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Sequence, Tuple

from ..models import (
    Classification,
    ContentEntry,
    LanguageMap,
    QualityIndicator,
    RepositorySnapshot,
)
from .rules import (
    FALLBACK_PROJECT_TYPE,
    FORK_FLOOR,
    FORK_TIERS,
    INDICATOR_RECOMMENDATIONS,
    ISSUE_FLOOR,
    ISSUE_TIERS,
    LISTING_INDICATORS,
    PROJECT_TYPE_RULES,
    STAR_FLOOR,
    STAR_TIERS,
    TYPE_RECOMMENDATIONS,
)

SUMMARY_HEADING = "### 🤖 AI-Generated Project Analysis"


def _names(listing: Iterable[ContentEntry]) -> FrozenSet[str]:
    return frozenset(entry.name for entry in listing)


def infer_project_type(listing: Iterable[ContentEntry]) -> str:
    present = _names(listing)
    for predicate, label in PROJECT_TYPE_RULES:
        if predicate(present):
            return label
    return FALLBACK_PROJECT_TYPE


def quality_indicators(
    snapshot: RepositorySnapshot, listing: Iterable[ContentEntry]
) -> List[QualityIndicator]:
    present = _names(listing)
    indicators = [indicator for indicator, predicate in LISTING_INDICATORS if predicate(present)]
    if snapshot.license_name:
        indicators.append(QualityIndicator.HAS_LICENSE)
    return indicators


def _tier(value: int, tiers: Sequence[Tuple[int, str]], floor: str) -> str:
    for threshold, label in tiers:
        if value > threshold:
            return label
    return floor


def star_tier(stars: int) -> str:
    return _tier(stars, STAR_TIERS, STAR_FLOOR)


def fork_tier(forks: int) -> str:
    return _tier(forks, FORK_TIERS, FORK_FLOOR)


def issue_tier(open_issues: int) -> str:
    return _tier(open_issues, ISSUE_TIERS, ISSUE_FLOOR)


def recommend(
    project_type: str, indicators: Sequence[QualityIndicator], primary_language: str
) -> List[str]:
    """Look up suggested use cases for a project type and its indicators."""
    suggestions: List[str] = []
    for keyword, use_cases in TYPE_RECOMMENDATIONS:
        if keyword in project_type:
            suggestions.extend(case.format(language=primary_language) for case in use_cases)
            break
    for indicator, use_case in INDICATOR_RECOMMENDATIONS:
        if indicator in indicators:
            suggestions.append(use_case)
    return suggestions


def analyze(
    snapshot: RepositorySnapshot,
    listing: Sequence[ContentEntry],
    languages: LanguageMap,
) -> Classification:
    """Derive the structured classification for a repository."""
    primary_language = next(iter(languages), "Unknown")
    project_type = infer_project_type(listing)
    indicators = quality_indicators(snapshot, listing)
    return Classification(
        project_type=project_type,
        primary_language=primary_language,
        language_count=len(languages),
        star_tier=star_tier(snapshot.star_count),
        fork_tier=fork_tier(snapshot.fork_count),
        issue_tier=issue_tier(snapshot.open_issue_count),
        indicators=indicators,
        recommendations=recommend(project_type, indicators, primary_language),
    )


def summarize(result: Classification, snapshot: RepositorySnapshot) -> str:
    """Format a classification as the Markdown analysis block."""
    lines: List[str] = [SUMMARY_HEADING, ""]
    lines.append(f"**Project Type:** {result.project_type}")
    lines.append("")

    language = f"**Primary Language:** {result.primary_language}"
    others = result.language_count - 1
    if others > 0:
        language += f" (+ {others} other{'s' if others > 1 else ''})"
    lines.append(language)
    lines.append("")

    if snapshot.topics:
        topics = ", ".join(f"`{topic}`" for topic in snapshot.topics)
        lines.append(f"**Topics:** {topics}")
        lines.append("")

    lines.append("**Project Maturity:**")
    lines.append(f"- {snapshot.star_count} stars indicate {result.star_tier} community interest")
    lines.append(
        f"- {snapshot.fork_count} forks suggest {result.fork_tier} community contributions"
    )
    lines.append(f"- {snapshot.open_issue_count} open issues ({result.issue_tier})")
    lines.append("")

    if result.indicators:
        lines.append("**Quality Indicators:**")
        for indicator in result.indicators:
            if indicator is QualityIndicator.HAS_LICENSE:
                lines.append(f"✅ Licensed under {snapshot.license_name}")
            else:
                lines.append(f"✅ {indicator.value}")
        lines.append("")

    lines.append("**Recommended Use Cases:**")
    if result.recommendations:
        lines.extend(f"- {use_case}" for use_case in result.recommendations)
    else:
        lines.append("- General-purpose use; review the repository for details")
    return "\n".join(lines) + "\n"


def classify(
    snapshot: RepositorySnapshot,
    listing: Sequence[ContentEntry],
    languages: LanguageMap,
) -> str:
    """Return the summary text for a repository snapshot."""
    return summarize(analyze(snapshot, listing, languages), snapshot)


__all__ = [
    "SUMMARY_HEADING",
    "analyze",
    "classify",
    "fork_tier",
    "infer_project_type",
    "issue_tier",
    "quality_indicators",
    "recommend",
    "star_tier",
    "summarize",
]
