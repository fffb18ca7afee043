"""Workflow resolution: generic YAML tree -> typed Workflow/Job/Step structure."""

from __future__ import annotations

from emojigate.models.errors import StructureError
from emojigate.models.workflow import Job, Step, Workflow
from emojigate.parser.nodes import NodeKind, YamlNode, find_value, iter_pairs


class WorkflowResolver:
    """Locates names, jobs and steps by structural position.

    Only the shape needed for naming checks is enforced. Any shape problem
    raises ``StructureError`` and no partial workflow is returned.
    """

    def resolve(self, tree: YamlNode) -> Workflow:
        if (
            tree.kind is not NodeKind.DOCUMENT
            or len(tree.children) != 1
            or tree.children[0].kind is not NodeKind.MAPPING
        ):
            raise StructureError("root must be a mapping", span=tree.span)
        root = tree.children[0]

        name_node = find_value(root, "name", "workflow")
        jobs_node = find_value(root, "jobs", "workflow")
        if jobs_node is None:
            raise StructureError("jobs section not found", path="jobs", span=root.span)

        return Workflow(
            name=None if name_node is None else name_node.text,
            jobs=tuple(self._resolve_jobs(jobs_node)),
            span=root.span if name_node is None else name_node.span,
        )

    def _resolve_jobs(self, jobs_node: YamlNode) -> list[Job]:
        jobs: list[Job] = []
        for key_node, config in iter_pairs(jobs_node, "jobs"):
            key = key_node.text
            path = f"jobs.{key}"
            name_node = find_value(config, "name", path)
            jobs.append(
                Job(
                    key=key,
                    name=None if name_node is None else name_node.text,
                    steps=tuple(self._resolve_steps(config, path)),
                    path=path,
                    span=key_node.span,
                )
            )
        return jobs

    def _resolve_steps(self, config: YamlNode, job_path: str) -> list[Step]:
        steps_node = find_value(config, "steps", job_path)
        if steps_node is None:
            return []
        steps_path = f"{job_path}.steps"
        if steps_node.kind is not NodeKind.SEQUENCE:
            raise StructureError(
                f"'{steps_path}' must be a sequence", path=steps_path, span=steps_node.span
            )

        steps: list[Step] = []
        for i, step_node in enumerate(steps_node.children):
            path = f"{steps_path}[{i}]"
            name_node = find_value(step_node, "name", path)
            if name_node is None:
                raise StructureError("step has no name", path=path, span=step_node.span)
            steps.append(Step(name=name_node.text, path=path, span=name_node.span))
        return steps
