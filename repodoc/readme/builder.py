"""Assembles the README document from repository facts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ContentEntry, LanguageMap, RepositorySnapshot
from .constants import (
    ABOUT_FALLBACK,
    CONTRIBUTING_BODY,
    DEFAULT_DESCRIPTION,
    FEATURES_BODY,
    FOOTER,
    INSTALL_RULES,
    LICENSE_FALLBACK,
    SECTION_TITLES,
    TECHNOLOGIES_FALLBACK,
    USAGE_BODY,
)
from .toc import TableOfContentsBuilder


@dataclass
class Section:
    """Rendered README section details."""

    name: str
    title: Optional[str]
    body: str


class ReadmeBuilder:
    """Renders the fixed README layout through Jinja templates."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.toc_builder = TableOfContentsBuilder()

    def build(
        self,
        snapshot: RepositorySnapshot,
        listing: Sequence[ContentEntry],
        languages: LanguageMap,
        *,
        tree_text: str = "",
        summary_text: str = "",
    ) -> str:
        sections = self.build_sections(
            snapshot, listing, languages, tree_text=tree_text, summary_text=summary_text
        )
        template = self._env.get_template("readme.md.j2")
        markdown = template.render(
            name=snapshot.name,
            description=snapshot.description or DEFAULT_DESCRIPTION,
            toc_placeholder=self.toc_builder.PLACEHOLDER,
            sections=sections,
            footer=FOOTER,
        )
        markdown = self.toc_builder.build(markdown)
        return _collapse_blank_lines(markdown).strip() + "\n"

    def build_sections(
        self,
        snapshot: RepositorySnapshot,
        listing: Sequence[ContentEntry],
        languages: LanguageMap,
        *,
        tree_text: str = "",
        summary_text: str = "",
    ) -> List[Section]:
        sections: List[Section] = [self._about(snapshot)]
        if summary_text.strip():
            sections.append(Section(name="summary", title=None, body=summary_text.strip()))
        sections.append(self._technologies(languages))
        if tree_text.strip():
            sections.append(self._structure(snapshot, tree_text))
        sections.append(self._installation(snapshot, listing))
        sections.append(_static("usage", USAGE_BODY))
        sections.append(_static("features", FEATURES_BODY))
        sections.append(_static("contributing", CONTRIBUTING_BODY))
        sections.append(self._license(snapshot))
        sections.append(self._contact(snapshot))
        return sections

    @staticmethod
    def _about(snapshot: RepositorySnapshot) -> Section:
        lines = [
            snapshot.description or ABOUT_FALLBACK,
            "",
            "**Repository Stats:**",
            f"- ⭐ Stars: {snapshot.star_count}",
            f"- 🍴 Forks: {snapshot.fork_count}",
            f"- 👁️ Watchers: {snapshot.watcher_count}",
            f"- 🐛 Open Issues: {snapshot.open_issue_count}",
        ]
        return Section(name="about", title=SECTION_TITLES["about"], body="\n".join(lines))

    @staticmethod
    def _technologies(languages: LanguageMap) -> Section:
        names = list(languages) or [TECHNOLOGIES_FALLBACK]
        body = "This project is built with:\n\n" + "\n".join(f"- {name}" for name in names)
        return Section(name="technologies", title=SECTION_TITLES["technologies"], body=body)

    @staticmethod
    def _structure(snapshot: RepositorySnapshot, tree_text: str) -> Section:
        body = f"```\n{snapshot.name}/\n{tree_text.rstrip()}\n```"
        return Section(name="structure", title=SECTION_TITLES["structure"], body=body)

    def _installation(
        self, snapshot: RepositorySnapshot, listing: Iterable[ContentEntry]
    ) -> Section:
        present = {entry.name for entry in listing}
        step: Optional[str] = None
        commands: Sequence[str] = ()
        for manifest, label, rule_commands in INSTALL_RULES:
            if manifest in present:
                step, commands = label, rule_commands
                break
        body = self._env.get_template("install.md.j2").render(
            clone_url=snapshot.clone_url,
            name=snapshot.name,
            step=step,
            commands=commands,
        )
        return Section(
            name="installation", title=SECTION_TITLES["installation"], body=body.strip()
        )

    @staticmethod
    def _license(snapshot: RepositorySnapshot) -> Section:
        if snapshot.license_name:
            body = (
                f"This project is licensed under the {snapshot.license_name} - "
                "see the [LICENSE](LICENSE) file for details."
            )
        else:
            body = LICENSE_FALLBACK
        return Section(name="license", title=SECTION_TITLES["license"], body=body)

    @staticmethod
    def _contact(snapshot: RepositorySnapshot) -> Section:
        body = (
            f"**Project Link:** [{snapshot.html_url}]({snapshot.html_url})\n\n"
            f"**Author:** [{snapshot.owner_login}]({snapshot.owner_url})"
        )
        return Section(name="contact", title=SECTION_TITLES["contact"], body=body)


def _static(name: str, body: str) -> Section:
    return Section(name=name, title=SECTION_TITLES[name], body=body)


def _collapse_blank_lines(markdown: str) -> str:
    return re.sub(r"\n{3,}", "\n\n", markdown)


__all__ = ["ReadmeBuilder", "Section"]
