"""Tests for README assembly."""

from __future__ import annotations

from typing import List

from repodoc.analysis.classifier import classify
from repodoc.models import ContentEntry, NodeKind
from repodoc.readme.builder import ReadmeBuilder
from repodoc.readme.constants import LICENSE_FALLBACK
from tests._fixtures.fake_github import make_snapshot

FIXED_HEADERS = [
    "## 🎯 About",
    "## 🛠️ Technologies",
    "## 📦 Installation",
    "## 🚀 Usage",
    "## ✨ Features",
    "## 🤝 Contributing",
    "## 📄 License",
    "## 📧 Contact",
]


def _files(*names: str) -> List[ContentEntry]:
    return [ContentEntry(name=name, path=name, kind=NodeKind.FILE) for name in names]


def test_minimal_repository_has_all_fixed_sections_in_order() -> None:
    snapshot = make_snapshot(description=None)

    markdown = ReadmeBuilder().build(snapshot, [], {})

    positions = [markdown.index(header) for header in FIXED_HEADERS]
    assert positions == sorted(positions)
    assert markdown.startswith("# hello\n\nA GitHub repository\n")
    assert LICENSE_FALLBACK in markdown
    assert "- Check repository for details" in markdown
    assert "Project Structure" not in markdown
    assert "AI-Generated Project Analysis" not in markdown
    assert "This project provides various functionalities and features." in markdown


def test_table_of_contents_lists_rendered_sections() -> None:
    markdown = ReadmeBuilder().build(make_snapshot(), [], {})

    assert "## 📋 Table of Contents" in markdown
    assert "- [About](#about)" in markdown
    assert "- [Technologies](#technologies)" in markdown
    assert "- [Contact](#contact)" in markdown
    assert "<!-- repodoc:toc -->" not in markdown
    assert markdown.index("## 📋 Table of Contents") < markdown.index("## 🎯 About")


def test_stats_and_contact_are_rendered() -> None:
    snapshot = make_snapshot(
        stargazers_count=5, forks_count=2, watchers_count=9, open_issues_count=1
    )

    markdown = ReadmeBuilder().build(snapshot, [], {"Python": 10, "HTML": 2})

    assert "- ⭐ Stars: 5" in markdown
    assert "- 🍴 Forks: 2" in markdown
    assert "- 👁️ Watchers: 9" in markdown
    assert "- 🐛 Open Issues: 1" in markdown
    assert "This project is built with:\n\n- Python\n- HTML" in markdown
    assert "**Project Link:** [https://github.com/octo/hello](https://github.com/octo/hello)" in markdown
    assert "**Author:** [octo](https://github.com/octo)" in markdown


def test_license_name_is_used_when_present() -> None:
    snapshot = make_snapshot(license={"name": "Apache License 2.0"})

    markdown = ReadmeBuilder().build(snapshot, [], {})

    assert "This project is licensed under the Apache License 2.0" in markdown
    assert LICENSE_FALLBACK not in markdown


def test_tree_section_is_fenced_and_rooted_at_repository_name() -> None:
    tree_text = "├── 📁 src\n└── 📄 README.md\n"

    markdown = ReadmeBuilder().build(make_snapshot(), [], {}, tree_text=tree_text)

    assert "## 📁 Project Structure" in markdown
    assert "```\nhello/\n├── 📁 src\n└── 📄 README.md\n```" in markdown
    assert "- [Project Structure](#project-structure)" in markdown
    assert markdown.index("## 🛠️ Technologies") < markdown.index("## 📁 Project Structure")
    assert markdown.index("## 📁 Project Structure") < markdown.index("## 📦 Installation")


def test_summary_follows_about_section() -> None:
    snapshot = make_snapshot()
    summary = classify(snapshot, _files("package.json"), {"JavaScript": 10})

    markdown = ReadmeBuilder().build(snapshot, [], {}, summary_text=summary)

    heading = "### 🤖 AI-Generated Project Analysis"
    assert markdown.index("## 🎯 About") < markdown.index(heading)
    assert markdown.index(heading) < markdown.index("## 🛠️ Technologies")
    assert "  - [AI-Generated Project Analysis](#ai-generated-project-analysis)" in markdown


def test_install_commands_follow_first_manifest() -> None:
    builder = ReadmeBuilder()
    snapshot = make_snapshot()

    node = builder.build(snapshot, _files("requirements.txt", "package.json"), {})
    python = builder.build(snapshot, _files("requirements.txt"), {})
    maven = builder.build(snapshot, _files("pom.xml"), {})
    bare = builder.build(snapshot, [], {})

    assert "# Install dependencies\nnpm install\n# or\nyarn install\n# or\npnpm install\n```" in node
    assert "pip install -r requirements.txt" not in node
    assert "# Install dependencies\npip install -r requirements.txt\n```" in python
    assert "# Build the project\nmvn clean install\n```" in maven
    assert "git clone https://github.com/octo/hello.git" in bare
    assert "cd hello\n```" in bare


def test_code_comments_do_not_leak_into_table_of_contents() -> None:
    markdown = ReadmeBuilder().build(make_snapshot(), _files("package.json"), {})

    toc = markdown.split("## 🎯 About", 1)[0]
    assert "Clone the repository" not in toc
    assert "Install dependencies" not in toc
