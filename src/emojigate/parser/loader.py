"""YAML loader producing a generic node tree with position tracking."""

from __future__ import annotations

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from emojigate.models.errors import SourceSpan
from emojigate.parser.nodes import YamlNode

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 20


class ParseError(Exception):
    """Raised when workflow source cannot be read or is not valid YAML."""

    def __init__(self, message: str, span: SourceSpan | None = None) -> None:
        self.message = message
        self.span = span
        super().__init__(message)


class YAMLSafetyError(ParseError):
    """Raised when YAML input violates safety constraints.

    These indicate potentially malicious input (e.g., billion-laughs
    aliases, excessive nesting, oversized documents) rather than a
    syntax error.
    """


class TrackedLoader:
    """YAML loader that keeps source order and line/column info.

    Uses ruamel.yaml composition, so scalars stay as raw text and no
    tag resolution or duplicate-key merging happens.
    """

    def __init__(self) -> None:
        self._yaml = YAML()

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> YamlNode:
        """Read a workflow file and parse it into a document node."""
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ParseError(f"failed to read file: {exc}") from exc
        return self.load_string(raw, filename=str(path))

    def load_string(self, content: str | bytes, filename: str = "<string>") -> YamlNode:
        """Parse YAML text into a document node.

        Empty input yields a document node without children.
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                raise ParseError(f"failed to decode {filename} as UTF-8: {exc}") from exc
        self._check_yaml_safety(content)
        try:
            root = self._yaml.compose(content)
        except MarkedYAMLError as exc:
            span = _span(exc.problem_mark, filename) if exc.problem_mark else None
            problem = exc.problem or str(exc)
            raise ParseError(f"failed to unmarshal YAML: {problem}", span=span) from exc
        except YAMLError as exc:
            raise ParseError(f"failed to unmarshal YAML: {exc}") from exc
        if root is None:
            return YamlNode.document()
        counter = _NodeCounter()
        return YamlNode.document(self._convert(root, filename, 1, counter))

    def _convert(self, node: Node, filename: str, depth: int, counter: _NodeCounter) -> YamlNode:
        """Recursively convert a ruamel.yaml node into a ``YamlNode``."""
        if depth > _MAX_DEPTH:
            raise YAMLSafetyError(f"YAML nesting exceeds maximum depth ({_MAX_DEPTH})")
        counter.bump()
        span = _span(node.start_mark, filename)
        if isinstance(node, MappingNode):
            flat: list[YamlNode] = []
            for key, value in node.value:
                flat.append(self._convert(key, filename, depth + 1, counter))
                flat.append(self._convert(value, filename, depth + 1, counter))
            return YamlNode.mapping(*flat, span=span)
        if isinstance(node, SequenceNode):
            items = [self._convert(item, filename, depth + 1, counter) for item in node.value]
            return YamlNode.sequence(*items, span=span)
        if isinstance(node, ScalarNode):
            return YamlNode.scalar(str(node.value), span=span)
        raise ParseError(f"unsupported YAML node type: {type(node).__name__}", span=span)


class _NodeCounter:
    """Bounds the converted tree size, which also bounds alias expansion."""

    def __init__(self, limit: int = _MAX_NODE_COUNT) -> None:
        self._limit = limit
        self._count = 0

    def bump(self) -> None:
        self._count += 1
        if self._count > self._limit:
            raise YAMLSafetyError(f"YAML document exceeds maximum node count ({self._limit:,})")


def _span(mark: object, filename: str) -> SourceSpan | None:
    line = getattr(mark, "line", None)
    column = getattr(mark, "column", None)
    if line is None or column is None:
        return None
    return SourceSpan(file=filename, line=line + 1, column=column + 1)
