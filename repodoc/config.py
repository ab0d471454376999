"""Configuration loading for repodoc (.repodoc.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".repodoc.yml"
DEFAULT_API_BASE_URL = "https://api.github.com"
ENV_API_BASE_URL = "REPODOC_API_BASE_URL"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """Settings for the GitHub REST client."""

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 15.0
    user_agent: str = "repodoc"


@dataclass
class TreeConfig:
    """Folder tree traversal settings."""

    max_depth: int = 3
    extra_ignore: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Which optional document sections are generated by default."""

    include_tree: bool = True
    include_summary: bool = True


@dataclass
class RepoDocConfig:
    """Represents the settings defined in .repodoc.yml."""

    github: GitHubConfig = field(default_factory=GitHubConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    source: Optional[Path] = None


def load_config(config_path: Path | None = None) -> RepoDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config = RepoDocConfig()
    if config_path is not None:
        config_file = _resolve_config_path(config_path)
        if config_file.exists():
            data = _read_config(config_file)
            if not isinstance(data, dict):
                raise ConfigError(f"{config_file.name} must contain a mapping at the root")
            _apply(config, data)
            config.source = config_file

    env_base_url = os.getenv(ENV_API_BASE_URL)
    if env_base_url:
        config.github.api_base_url = env_base_url
    config.github.api_base_url = config.github.api_base_url.rstrip("/")
    return config


def _apply(config: RepoDocConfig, data: Dict[str, Any]) -> None:
    github_data = _as_dict(data.get("github"))
    base_url = _as_str(github_data.get("api_base_url"))
    if base_url:
        config.github.api_base_url = base_url
    timeout = _as_float(github_data.get("request_timeout"))
    if timeout is not None and timeout > 0:
        config.github.request_timeout = timeout
    user_agent = _as_str(github_data.get("user_agent"))
    if user_agent:
        config.github.user_agent = user_agent

    tree_data = _as_dict(data.get("tree"))
    max_depth = _as_int(tree_data.get("max_depth"))
    if max_depth is not None:
        if max_depth < 0:
            raise ConfigError("tree.max_depth must not be negative")
        config.tree.max_depth = max_depth
    config.tree.extra_ignore = _as_str_list(tree_data.get("extra_ignore"))

    output_data = _as_dict(data.get("output"))
    include_tree = _as_bool(output_data.get("include_tree"))
    if include_tree is not None:
        config.output.include_tree = include_tree
    include_summary = _as_bool(output_data.get("include_summary"))
    if include_summary is not None:
        config.output.include_summary = include_summary


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "ConfigError",
    "GitHubConfig",
    "OutputConfig",
    "RepoDocConfig",
    "TreeConfig",
    "load_config",
]
