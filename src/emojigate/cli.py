"""Command line entry point: lint workflow files and set the exit status."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from emojigate import __version__
from emojigate.service.linter import LintReport, WorkflowDirectoryError, WorkflowLinter
from emojigate.service.report import render_json, render_text
from emojigate.settings import Settings

logger = logging.getLogger("emojigate.cli")

EXIT_OK = 0
EXIT_FAILED = 1

_EPILOG = """\
Examples:
  emojigate workflows
  emojigate lint .github/workflows/ci.yml
  emojigate lint .github/workflows/ci.yml .github/workflows/release.yml

Pre-commit Hook:
  Add to .pre-commit-config.yaml:
    - repo: local
      hooks:
        - id: emojigate
          name: Lint workflow emojis
          entry: emojigate lint
          language: system
          files: ^\\.github/workflows/.*\\.ya?ml$
"""


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--format",
        choices=["text", "json"],
        default=settings.output_format,
        help="Output format (default: %(default)s)",
    )

    parser = argparse.ArgumentParser(
        prog="emojigate",
        description="emojigate - Lint GitHub Actions workflows for emoji usage",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    workflows = commands.add_parser(
        "workflows",
        parents=[output],
        help=f"Lint all workflow files in {settings.workflows_dir}/",
    )
    workflows.add_argument(
        "--dir",
        default=settings.workflows_dir,
        help="Workflow directory to scan (default: %(default)s)",
    )

    lint = commands.add_parser("lint", parents=[output], help="Lint specific workflow file(s)")
    lint.add_argument("files", nargs="+", metavar="FILE", help="Workflow file to lint")

    commands.add_parser("help", help="Show this help message")
    return parser


def _emit(report: LintReport, output_format: str) -> int:
    if output_format == "json":
        print(render_json(report))
    else:
        out, err = render_text(report)
        if out:
            print(out, end="")
        if err:
            print(err, end="", file=sys.stderr)
    return EXIT_OK if report.passed else EXIT_FAILED


def lint_workflows_directory(linter: WorkflowLinter, directory: Path, output_format: str) -> int:
    try:
        files = linter.discover(directory)
    except WorkflowDirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILED
    if not files:
        print(f"No workflow files found in {directory}")
        return EXIT_OK
    return _emit(linter.lint_paths(files), output_format)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.command == "help":
        parser.print_help()
        return EXIT_OK
    if args.command is None:
        parser.print_help()
        return EXIT_FAILED

    logger.debug("emojigate v%s running %r", __version__, args.command)
    linter = WorkflowLinter()
    if args.command == "workflows":
        return lint_workflows_directory(linter, Path(args.dir), args.format)
    return _emit(linter.lint_paths(Path(f) for f in args.files), args.format)


if __name__ == "__main__":
    sys.exit(main())
