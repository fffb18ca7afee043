"""Shared test fixtures for emojigate."""

from __future__ import annotations

from pathlib import Path

import pytest

from emojigate.parser.loader import TrackedLoader
from emojigate.parser.validator import NamingValidator
from emojigate.service.linter import WorkflowLinter

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def validator() -> NamingValidator:
    return NamingValidator()


@pytest.fixture
def linter() -> WorkflowLinter:
    return WorkflowLinter()


COMPLIANT_WORKFLOW_YAML = """\
name: 🚀 Deploy
jobs:
  build:
    name: 🔨 Build
    steps:
      - name: 📥 Checkout
"""

UNNAMED_WORKFLOW_YAML = """\
jobs:
  build:
    steps:
      - name: Checkout
"""
