"""Typed workflow structure: workflow -> ordered jobs -> ordered steps."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from emojigate.models.errors import SourceSpan


class Step(BaseModel):
    """A single step. Steps always declare a ``name`` key, though it may be empty."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    span: SourceSpan | None = None


class Job(BaseModel):
    """A job keyed by its mapping key, with an optional display name."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str | None = None
    steps: tuple[Step, ...] = ()
    path: str
    span: SourceSpan | None = None


class Workflow(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    jobs: tuple[Job, ...] = ()
    span: SourceSpan | None = None
