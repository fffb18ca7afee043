"""YAML parsing and naming validation for workflow files."""

from emojigate.parser.loader import ParseError, TrackedLoader, YAMLSafetyError
from emojigate.parser.nodes import NodeKind, YamlNode
from emojigate.parser.resolver import WorkflowResolver
from emojigate.parser.validator import NamingValidator, validate

__all__ = [
    "NamingValidator",
    "NodeKind",
    "ParseError",
    "TrackedLoader",
    "WorkflowResolver",
    "YAMLSafetyError",
    "YamlNode",
    "validate",
]
