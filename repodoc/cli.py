"""CLI entrypoints for repodoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import InvalidRepositoryURLError, RepoDocError, RepositoryNotFoundError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repodoc",
        description="Generate README documentation for public GitHub repositories.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a README for a repository URL.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "url",
        help="Repository URL, e.g. https://github.com/owner/repo",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the README to this file instead of stdout.",
    )
    generate_parser.add_argument(
        "--no-tree",
        dest="include_tree",
        action="store_false",
        default=None,
        help="Skip the folder structure tree.",
    )
    generate_parser.add_argument(
        "--no-summary",
        dest="include_summary",
        action="store_false",
        default=None,
        help="Skip the generated project analysis.",
    )
    generate_parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        help="Maximum folder depth to include in the tree (default 3).",
    )
    generate_parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .repodoc.yml or the directory containing it.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repodoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "generate":
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        orchestrator = Orchestrator(config=config)
        try:
            result = orchestrator.generate(
                args.url,
                include_tree=args.include_tree,
                include_summary=args.include_summary,
                max_depth=args.max_depth,
            )
        except (InvalidRepositoryURLError, RepositoryNotFoundError) as exc:
            parser.exit(1, f"{exc}\n")
        except RepoDocError as exc:
            parser.exit(1, f"repodoc generate failed: {exc}\nRun with --verbose for more details.\n")
        if args.output is None:
            sys.stdout.write(result.markdown)
        else:
            args.output.write_text(result.markdown, encoding="utf-8")
            print(f"README written to {_relativize(args.output.resolve())}")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
