"""Human-readable and JSON rendering of lint reports."""

from __future__ import annotations

from pydantic import TypeAdapter

from emojigate.models.errors import Violation
from emojigate.service.linter import LintReport

CLOSING_HINT = "❗ Please add an emoji at the beginning of each workflow, job, and step name."

_VIOLATIONS_ADAPTER = TypeAdapter(list[Violation])


def render_text(report: LintReport) -> tuple[str, str]:
    """Render *report* for a terminal.

    Returns ``(stdout_text, stderr_text)``; a passing report writes only to
    stdout, a failing one only to stderr.
    """
    if report.passed:
        return f"✅ All {len(report.files)} workflow(s) passed!\n", ""

    failed = report.failed_files
    lines = [
        f"❌ Found {report.total_violations} violation(s) across {len(failed)} file(s):",
        "",
    ]
    for file_report in failed:
        if file_report.error is not None:
            lines.append(f"Error in {file_report.file}: {file_report.error.message}")
            lines.append("")
            continue
        lines.append(f"File: {file_report.file}")
        for v in file_report.violations:
            lines.append(f"  [{v.kind}] {v.identifier}")
            lines.append(f"    → {v.message}")
        lines.append("")
    if report.total_violations:
        lines.append(CLOSING_HINT)
    return "", "\n".join(lines) + "\n"


def render_json(report: LintReport) -> str:
    """Serialize the whole report; field names are stable for snapshot diffs."""
    return report.model_dump_json(indent=2)


def violations_json(violations: list[Violation]) -> str:
    """Serialize a violation list on its own (used for golden fixtures)."""
    return _VIOLATIONS_ADAPTER.dump_json(violations, indent=2).decode("utf-8")
