"""Naming validation: every workflow, job and step name starts with an emoji."""

from __future__ import annotations

from emojigate.emoji import starts_with_emoji
from emojigate.models.errors import (
    MISSING_NAME_MESSAGE,
    NOT_EMOJI_MESSAGE,
    Violation,
    ViolationKind,
)
from emojigate.models.workflow import Job, Workflow
from emojigate.parser.nodes import YamlNode
from emojigate.parser.resolver import WorkflowResolver


class NamingValidator:
    """Applies the emoji-prefix rule to a parsed workflow document.

    Structural problems raise ``StructureError`` from the resolver before
    any rule runs; naming problems are collected as ``Violation`` records
    in document order (workflow, then each job followed by its steps).
    """

    def __init__(self, resolver: WorkflowResolver | None = None) -> None:
        self._resolver = resolver or WorkflowResolver()

    def validate(self, tree: YamlNode) -> list[Violation]:
        return self.check(self._resolver.resolve(tree))

    def check(self, workflow: Workflow) -> list[Violation]:
        violations: list[Violation] = []
        violations.extend(self._check_workflow_name(workflow))
        for job in workflow.jobs:
            violations.extend(self._check_job(job))
        return violations

    def _check_workflow_name(self, workflow: Workflow) -> list[Violation]:
        if workflow.name is None:
            return [
                Violation(
                    kind=ViolationKind.WORKFLOW,
                    identifier="workflow",
                    message=MISSING_NAME_MESSAGE,
                    path="name",
                    span=workflow.span,
                )
            ]
        if not starts_with_emoji(workflow.name):
            return [
                Violation(
                    kind=ViolationKind.WORKFLOW,
                    identifier=workflow.name,
                    message=NOT_EMOJI_MESSAGE,
                    path="name",
                    span=workflow.span,
                )
            ]
        return []

    def _check_job(self, job: Job) -> list[Violation]:
        """Check a job's own name, then each of its steps."""
        violations: list[Violation] = []
        if job.name is None:
            message: str | None = MISSING_NAME_MESSAGE
        elif not starts_with_emoji(job.name):
            message = NOT_EMOJI_MESSAGE
        else:
            message = None
        if message is not None:
            violations.append(
                Violation(
                    kind=ViolationKind.JOB,
                    identifier=job.key,
                    message=message,
                    path=job.path,
                    span=job.span,
                )
            )

        for step in job.steps:
            if not starts_with_emoji(step.name):
                violations.append(
                    Violation(
                        kind=ViolationKind.STEP,
                        identifier=step.name,
                        message=NOT_EMOJI_MESSAGE,
                        path=step.path,
                        span=step.span,
                    )
                )
        return violations


def validate(tree: YamlNode) -> list[Violation]:
    """Validate a parsed workflow tree with a default ``NamingValidator``."""
    return NamingValidator().validate(tree)
