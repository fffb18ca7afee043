"""Pydantic domain models for emojigate."""

from emojigate.models.errors import (
    ErrorInfo,
    SourceSpan,
    StructureError,
    Violation,
    ViolationKind,
)
from emojigate.models.workflow import Job, Step, Workflow

__all__ = [
    "ErrorInfo",
    "Job",
    "SourceSpan",
    "Step",
    "StructureError",
    "Violation",
    "ViolationKind",
    "Workflow",
]
