"""Lint service layer shared by the command line and tests."""

from emojigate.service.linter import (
    FileReport,
    LintReport,
    WorkflowDirectoryError,
    WorkflowLinter,
)
from emojigate.service.report import render_json, render_text, violations_json

__all__ = [
    "FileReport",
    "LintReport",
    "WorkflowDirectoryError",
    "WorkflowLinter",
    "render_json",
    "render_text",
    "violations_json",
]
