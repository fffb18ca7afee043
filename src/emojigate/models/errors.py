"""Structured violation and error models with YAML source position tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

MISSING_NAME_MESSAGE = "Missing display name. Please add a 'name:' field starting with an emoji."
NOT_EMOJI_MESSAGE = "Name must start with an emoji. Example: '🚀 Deploy'"


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    column: int


class ViolationKind(StrEnum):
    WORKFLOW = "Workflow"
    JOB = "Job"
    STEP = "Step"


class Violation(BaseModel):
    """One naming-policy non-compliance. Never describes a structural defect."""

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    identifier: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None


class StructureError(Exception):
    """Raised when a workflow lacks the minimal shape needed for validation.

    Distinct from naming violations: a structural error aborts validation of
    the whole document instead of being accumulated.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        span: SourceSpan | None = None,
    ) -> None:
        self.message = message
        self.path = path
        self.span = span
        super().__init__(message)


class ErrorInfo(BaseModel):
    """A fatal parse or structure error attached to a file report."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None
