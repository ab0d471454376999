"""Tests for the table-of-contents builder."""

from __future__ import annotations

from repodoc.readme.toc import TableOfContentsBuilder


def test_slugify_drops_icons_and_punctuation() -> None:
    assert TableOfContentsBuilder.slugify("🎯 About") == "about"
    assert TableOfContentsBuilder.slugify("🛠️ Technologies") == "technologies"
    assert (
        TableOfContentsBuilder.slugify("🤖 AI-Generated Project Analysis")
        == "ai-generated-project-analysis"
    )


def test_build_replaces_placeholder_and_skips_code() -> None:
    builder = TableOfContentsBuilder()
    markdown = "\n".join(
        [
            "# Title",
            "",
            builder.PLACEHOLDER,
            "",
            "## Setup",
            "",
            "```bash",
            "## not a heading",
            "```",
            "",
            "### Details",
        ]
    )

    output = builder.build(markdown)

    assert builder.PLACEHOLDER not in output
    assert "- [Setup](#setup)\n  - [Details](#details)" in output
    assert "not-a-heading" not in output


def test_build_without_placeholder_leaves_markdown_untouched() -> None:
    markdown = "# Title\n\n## Section\n"

    assert TableOfContentsBuilder().build(markdown) == markdown
