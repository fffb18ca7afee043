"""Tests for workflow resolution and the emoji naming validator."""

from __future__ import annotations

import pytest

from emojigate.models.errors import (
    MISSING_NAME_MESSAGE,
    NOT_EMOJI_MESSAGE,
    StructureError,
    ViolationKind,
)
from emojigate.parser.loader import TrackedLoader
from emojigate.parser.nodes import YamlNode
from emojigate.parser.resolver import WorkflowResolver
from emojigate.parser.validator import NamingValidator, validate
from tests.conftest import COMPLIANT_WORKFLOW_YAML, UNNAMED_WORKFLOW_YAML


def _s(value: str) -> YamlNode:
    return YamlNode.scalar(value)


class TestScenarios:
    def test_compliant_workflow(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        tree = loader.load_string(COMPLIANT_WORKFLOW_YAML)
        assert validator.validate(tree) == []

    def test_unnamed_workflow_and_job(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        tree = loader.load_string(UNNAMED_WORKFLOW_YAML)
        violations = validator.validate(tree)
        assert [(v.kind, v.identifier, v.message) for v in violations] == [
            (ViolationKind.WORKFLOW, "workflow", MISSING_NAME_MESSAGE),
            (ViolationKind.JOB, "build", MISSING_NAME_MESSAGE),
            (ViolationKind.STEP, "Checkout", NOT_EMOJI_MESSAGE),
        ]

    @pytest.mark.parametrize("n_steps", [0, 1, 3, 10])
    def test_n_plus_two_violations_in_document_order(
        self, loader: TrackedLoader, validator: NamingValidator, n_steps: int
    ) -> None:
        steps = "".join(f"      - name: Step {i}\n" for i in range(n_steps))
        yaml = "name: Workflow\njobs:\n  only:\n    name: Job\n    steps:\n" + steps
        if n_steps == 0:
            yaml += "      []\n"
        violations = validator.validate(loader.load_string(yaml))
        assert len(violations) == n_steps + 2
        assert violations[0].kind is ViolationKind.WORKFLOW
        assert violations[0].identifier == "Workflow"
        assert violations[1].kind is ViolationKind.JOB
        assert violations[1].identifier == "only"
        assert [v.identifier for v in violations[2:]] == [f"Step {i}" for i in range(n_steps)]
        assert all(v.kind is ViolationKind.STEP for v in violations[2:])

    def test_job_identified_by_key_not_declared_name(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = "name: 🚀 CI\njobs:\n  build:\n    name: Compile everything\n"
        (violation,) = validator.validate(loader.load_string(yaml))
        assert violation.kind is ViolationKind.JOB
        assert violation.identifier == "build"
        assert violation.message == NOT_EMOJI_MESSAGE

    def test_workflow_identified_by_name(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = "name: CI\njobs: {}\n"
        (violation,) = validator.validate(loader.load_string(yaml))
        assert violation.kind is ViolationKind.WORKFLOW
        assert violation.identifier == "CI"
        assert violation.message == NOT_EMOJI_MESSAGE

    def test_leading_space_before_emoji(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = 'name: " 🚀 CI"\njobs: {}\n'
        (violation,) = validator.validate(loader.load_string(yaml))
        assert violation.identifier == " 🚀 CI"

    def test_empty_name_is_present_but_not_compliant(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = "name: 🚀 CI\njobs:\n  build:\n    name: ''\n    steps:\n      - name:\n"
        violations = validator.validate(loader.load_string(yaml))
        assert [(v.kind, v.identifier, v.message) for v in violations] == [
            (ViolationKind.JOB, "build", NOT_EMOJI_MESSAGE),
            (ViolationKind.STEP, "", NOT_EMOJI_MESSAGE),
        ]

    def test_job_without_steps_is_fine(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = "name: 🚀 CI\njobs:\n  call:\n    name: 📞 Call\n    uses: org/repo/.github/workflows/x.yml@main\n"
        assert validator.validate(loader.load_string(yaml)) == []

    def test_steps_checked_across_jobs(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = (
            "name: 🚀 CI\n"
            "jobs:\n"
            "  a:\n"
            "    name: 🔤 A\n"
            "    steps:\n"
            "      - name: first\n"
            "  b:\n"
            "    name: 🐝 B\n"
            "    steps:\n"
            "      - name: ✅ ok\n"
            "      - name: second\n"
        )
        violations = validator.validate(loader.load_string(yaml))
        assert [(v.kind, v.identifier, v.path) for v in violations] == [
            (ViolationKind.STEP, "first", "jobs.a.steps[0]"),
            (ViolationKind.STEP, "second", "jobs.b.steps[1]"),
        ]

    def test_violation_spans(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        tree = loader.load_string(UNNAMED_WORKFLOW_YAML, filename="ci.yml")
        spans = [(v.span.line, v.span.column) for v in validator.validate(tree)]
        assert spans == [(1, 1), (2, 3), (4, 15)]

    def test_module_level_validate(self, loader: TrackedLoader) -> None:
        assert len(validate(loader.load_string(UNNAMED_WORKFLOW_YAML))) == 3


class TestStructuralErrors:
    def test_missing_jobs(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        with pytest.raises(StructureError, match="jobs section not found"):
            validator.validate(loader.load_string("name: CI\non: push\n"))

    def test_root_not_mapping(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        with pytest.raises(StructureError, match="root must be a mapping"):
            validator.validate(loader.load_string("- a\n- b\n"))

    def test_root_scalar(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        with pytest.raises(StructureError, match="root must be a mapping"):
            validator.validate(loader.load_string("just text\n"))

    def test_empty_document(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        with pytest.raises(StructureError, match="root must be a mapping"):
            validator.validate(loader.load_string(""))

    def test_tree_not_a_document(self, validator: NamingValidator) -> None:
        with pytest.raises(StructureError, match="root must be a mapping"):
            validator.validate(YamlNode.mapping(_s("jobs"), YamlNode.mapping()))

    def test_document_with_two_children(self, validator: NamingValidator) -> None:
        tree = YamlNode.document(YamlNode.mapping(), YamlNode.mapping())
        with pytest.raises(StructureError, match="root must be a mapping"):
            validator.validate(tree)

    def test_jobs_not_a_mapping(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        with pytest.raises(StructureError, match="must be a mapping"):
            validator.validate(loader.load_string("name: 🚀 CI\njobs: [build]\n"))

    def test_odd_length_jobs_mapping(self, validator: NamingValidator) -> None:
        jobs = YamlNode.mapping(_s("build"))
        tree = YamlNode.document(YamlNode.mapping(_s("name"), _s("🚀 CI"), _s("jobs"), jobs))
        with pytest.raises(StructureError):
            validator.validate(tree)

    def test_odd_length_job_configuration(self, validator: NamingValidator) -> None:
        config = YamlNode.mapping(_s("name"), _s("🔨 Build"), _s("steps"))
        jobs = YamlNode.mapping(_s("build"), config)
        tree = YamlNode.document(YamlNode.mapping(_s("name"), _s("🚀 CI"), _s("jobs"), jobs))
        with pytest.raises(StructureError) as info:
            validator.validate(tree)
        assert info.value.path == "jobs.build"

    def test_job_configuration_not_a_mapping(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        with pytest.raises(StructureError, match="jobs.build"):
            validator.validate(loader.load_string("name: 🚀 CI\njobs:\n  build:\n"))

    def test_steps_not_a_sequence(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        yaml = "name: 🚀 CI\njobs:\n  build:\n    name: 🔨 B\n    steps: nope\n"
        with pytest.raises(StructureError, match="must be a sequence"):
            validator.validate(loader.load_string(yaml))

    def test_step_without_name(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        yaml = (
            "name: Not compliant\n"
            "jobs:\n"
            "  build:\n"
            "    steps:\n"
            "      - name: 📥 Checkout\n"
            "      - uses: actions/setup-node@v4\n"
            "      - name: 🧪 Test\n"
        )
        with pytest.raises(StructureError, match="step has no name") as info:
            validator.validate(loader.load_string(yaml))
        assert info.value.path == "jobs.build.steps[1]"

    def test_step_not_a_mapping(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        yaml = "name: 🚀 CI\njobs:\n  build:\n    steps:\n      - run tests\n"
        with pytest.raises(StructureError):
            validator.validate(loader.load_string(yaml))


class TestPurity:
    def test_idempotent(self, loader: TrackedLoader, validator: NamingValidator) -> None:
        tree = loader.load_string(UNNAMED_WORKFLOW_YAML)
        first = validator.validate(tree)
        second = validator.validate(tree)
        assert first == second
        assert [v.model_dump_json() for v in first] == [v.model_dump_json() for v in second]

    def test_violations_are_frozen(
        self, loader: TrackedLoader, validator: NamingValidator
    ) -> None:
        (violation, *_) = validator.validate(loader.load_string(UNNAMED_WORKFLOW_YAML))
        with pytest.raises(Exception):
            violation.identifier = "changed"


class TestWorkflowResolver:
    def test_resolves_typed_structure(self, loader: TrackedLoader) -> None:
        workflow = WorkflowResolver().resolve(loader.load_string(COMPLIANT_WORKFLOW_YAML))
        assert workflow.name == "🚀 Deploy"
        assert [job.key for job in workflow.jobs] == ["build"]
        assert workflow.jobs[0].name == "🔨 Build"
        assert [step.name for step in workflow.jobs[0].steps] == ["📥 Checkout"]

    def test_optional_names_are_none(self, loader: TrackedLoader) -> None:
        workflow = WorkflowResolver().resolve(loader.load_string(UNNAMED_WORKFLOW_YAML))
        assert workflow.name is None
        assert workflow.jobs[0].name is None

    def test_non_scalar_name_reads_as_empty(self, loader: TrackedLoader) -> None:
        workflow = WorkflowResolver().resolve(
            loader.load_string("name: [a, b]\njobs: {}\n")
        )
        assert workflow.name == ""

    def test_first_name_key_wins(self) -> None:
        root = YamlNode.mapping(
            _s("name"), _s("🚀 first"), _s("name"), _s("second"), _s("jobs"), YamlNode.mapping()
        )
        workflow = WorkflowResolver().resolve(YamlNode.document(root))
        assert workflow.name == "🚀 first"
