"""Lint service: discover workflow files, parse and validate each one."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import BaseModel

from emojigate.models.errors import ErrorInfo, StructureError, Violation
from emojigate.parser.loader import ParseError, TrackedLoader, YAMLSafetyError
from emojigate.parser.nodes import YamlNode
from emojigate.parser.validator import NamingValidator

logger = logging.getLogger("emojigate.service")

WORKFLOW_SUFFIXES = (".yml", ".yaml")


class WorkflowDirectoryError(Exception):
    """Raised when the workflow directory does not exist or cannot be listed."""

    def __init__(self, directory: Path, reason: str) -> None:
        self.directory = directory
        super().__init__(f"directory '{directory}' {reason}")


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


class FileReport(BaseModel):
    """Outcome of linting one file: violations, or a fatal error."""

    file: str
    violations: list[Violation] = []
    error: ErrorInfo | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and not self.violations


class LintReport(BaseModel):
    """Aggregate over every linted file, in input order."""

    files: list[FileReport] = []

    @property
    def total_violations(self) -> int:
        return sum(len(f.violations) for f in self.files)

    @property
    def failed_files(self) -> list[FileReport]:
        return [f for f in self.files if not f.passed]

    @property
    def passed(self) -> bool:
        return all(f.passed for f in self.files)


# ---------------------------------------------------------------------------
# WorkflowLinter
# ---------------------------------------------------------------------------


class WorkflowLinter:
    """Runs one independent parse-then-validate pass per workflow file."""

    def __init__(
        self,
        loader: TrackedLoader | None = None,
        validator: NamingValidator | None = None,
    ) -> None:
        self._loader = loader or TrackedLoader()
        self._validator = validator or NamingValidator()

    @staticmethod
    def discover(directory: Path) -> list[Path]:
        """List ``*.yml`` / ``*.yaml`` files directly inside *directory*, sorted."""
        if not directory.is_dir():
            raise WorkflowDirectoryError(directory, "does not exist")
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            raise WorkflowDirectoryError(directory, f"cannot be read: {exc}") from exc
        files = sorted(p for p in entries if p.is_file() and p.suffix in WORKFLOW_SUFFIXES)
        logger.debug("Discovered %d workflow file(s) in %s", len(files), directory)
        return files

    def lint_text(self, content: str | bytes, filename: str = "<string>") -> FileReport:
        return self._lint(filename, lambda: self._loader.load_string(content, filename=filename))

    def lint_file(self, path: Path) -> FileReport:
        return self._lint(str(path), lambda: self._loader.load(path))

    def lint_paths(self, paths: Iterable[Path]) -> LintReport:
        return LintReport(files=[self.lint_file(p) for p in paths])

    def _lint(self, filename: str, parse: Callable[[], YamlNode]) -> FileReport:
        try:
            violations = self._validator.validate(parse())
        except YAMLSafetyError as exc:
            return self._failed(filename, "YAML_SAFETY_ERROR", exc)
        except ParseError as exc:
            return self._failed(filename, "PARSE_ERROR", exc)
        except StructureError as exc:
            return self._failed(filename, "STRUCTURE_ERROR", exc)
        logger.info("Linted %s: %d violation(s)", filename, len(violations))
        return FileReport(file=filename, violations=violations)

    @staticmethod
    def _failed(filename: str, code: str, exc: ParseError | StructureError) -> FileReport:
        logger.warning("Cannot lint %s: %s", filename, exc.message)
        path = exc.path if isinstance(exc, StructureError) else None
        return FileReport(
            file=filename,
            error=ErrorInfo(code=code, message=exc.message, path=path, span=exc.span),
        )
