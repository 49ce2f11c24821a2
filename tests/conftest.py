"""Pytest configuration and fixtures for test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from setkit.audit import AuditLogger  # noqa: E402
from setkit.disjoint import LinkedListDisjointSets, LinkedSetElement  # noqa: E402
from setkit.multiset import HashMultiset  # noqa: E402


@pytest.fixture
def registry() -> LinkedListDisjointSets[LinkedSetElement]:
    """Empty disjoint-set registry."""
    return LinkedListDisjointSets()


@pytest.fixture
def make_elements():
    """Factory building one fresh element per value."""

    def _factory(*values: object) -> list[LinkedSetElement]:
        return [LinkedSetElement(value) for value in values]

    return _factory


@pytest.fixture
def bag() -> HashMultiset[str]:
    """Empty multiset."""
    return HashMultiset()


@pytest.fixture
def audit_logger(tmp_path: Path):
    """Logger writing to a temporary JSONL file, closed after the test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()
