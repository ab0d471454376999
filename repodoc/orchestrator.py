"""Pipeline orchestration for a single documentation request."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional

from .analysis.classifier import analyze, summarize
from .config import RepoDocConfig, load_config
from .errors import GenerationSuperseded, GitHubAPIError
from .github.client import GitHubClient
from .github.urls import parse_repo_url
from .logging import get_logger
from .models import ContentEntry, LanguageMap
from .readme.builder import ReadmeBuilder
from .tree.builder import TreeBuilder
from .tree.renderer import render_tree


@dataclass
class GenerationResult:
    """Outcome of a documentation run."""

    markdown: str
    owner: str
    repo: str
    project_type: Optional[str] = None


class Orchestrator:
    """Coordinates URL parsing, GitHub lookups, analysis and assembly.

    Only the most recent call to :meth:`generate` may finish; an older
    in-flight call raises :class:`GenerationSuperseded` at its next step.
    """

    def __init__(
        self,
        client: GitHubClient | None = None,
        config: RepoDocConfig | None = None,
        readme_builder: ReadmeBuilder | None = None,
    ) -> None:
        self.config = config or load_config()
        self.client = client or GitHubClient(
            self.config.github.api_base_url,
            request_timeout=self.config.github.request_timeout,
            user_agent=self.config.github.user_agent,
        )
        self.readme_builder = readme_builder or ReadmeBuilder()
        self.logger = get_logger("orchestrator")
        self._lock = threading.Lock()
        self._generation = 0

    def generate(
        self,
        url: str,
        *,
        include_tree: bool | None = None,
        include_summary: bool | None = None,
        max_depth: int | None = None,
    ) -> GenerationResult:
        """Produce the README for ``url``."""
        owner, repo = parse_repo_url(url)
        if include_tree is None:
            include_tree = self.config.output.include_tree
        if include_summary is None:
            include_summary = self.config.output.include_summary
        depth_limit = self.config.tree.max_depth if max_depth is None else max_depth

        generation = self._start_generation()
        self.logger.info("Generating documentation for %s/%s", owner, repo)

        snapshot = self.client.get_repository(owner, repo)
        self._ensure_current(generation)

        listing = self._shallow_listing(owner, repo)
        self._ensure_current(generation)
        languages = self._languages(owner, repo)
        self._ensure_current(generation)

        tree_text = ""
        if include_tree:
            self.logger.info("Building folder structure tree (max depth %d)", depth_limit)
            builder = TreeBuilder(
                self.client,
                extra_ignore=self.config.tree.extra_ignore,
                is_cancelled=lambda: not self._is_current(generation),
            )
            nodes = builder.build(owner, repo, max_depth=depth_limit)
            tree_text = render_tree(nodes)
            self._ensure_current(generation)

        summary_text = ""
        project_type: Optional[str] = None
        if include_summary:
            self.logger.info("Generating project analysis")
            classification = analyze(snapshot, listing, languages)
            project_type = classification.project_type
            summary_text = summarize(classification, snapshot)

        markdown = self.readme_builder.build(
            snapshot,
            listing,
            languages,
            tree_text=tree_text,
            summary_text=summary_text,
        )
        self._ensure_current(generation)
        self.logger.info("Documentation generated for %s/%s", owner, repo)
        return GenerationResult(
            markdown=markdown, owner=owner, repo=repo, project_type=project_type
        )

    def _shallow_listing(self, owner: str, repo: str) -> List[ContentEntry]:
        try:
            return self.client.list_contents(owner, repo)
        except GitHubAPIError as exc:
            self.logger.warning("Could not list repository contents: %s", exc)
            return []

    def _languages(self, owner: str, repo: str) -> LanguageMap:
        try:
            return self.client.get_languages(owner, repo)
        except GitHubAPIError as exc:
            self.logger.warning("Could not fetch repository languages: %s", exc)
            return {}

    def _start_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _ensure_current(self, generation: int) -> None:
        if not self._is_current(generation):
            self.logger.debug("Abandoning generation %d; a newer request started", generation)
            raise GenerationSuperseded("A newer generation request has started")


__all__ = ["GenerationResult", "Orchestrator"]
