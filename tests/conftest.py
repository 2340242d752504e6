"""Shared test fixtures for the number_speller test suite.

WHY: Most test modules need the two shipped grammars and a way to see
which magnitude a node was asked to spell. Centralizing them here keeps
the grammar built once per test session and the probe node defined once.

HOW: Session-scoped fixtures build the English and Russian grammars.
The ``magnitude_probe`` fixture registers a test-only node type whose
renderer writes out the context it received.

RULES:
- Grammars are immutable, so sharing them across tests is safe
- The probe renderer is registered with monkeypatch and removed after
  each test, so RENDERERS is left exactly as shipped
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from number_speller.core.evaluator import RENDERERS
from number_speller.core.nodes import SpellerNode
from number_speller.grammars.english import build_english
from number_speller.grammars.russian import build_russian


@dataclass(frozen=True, eq=False)
class MagnitudeProbe(SpellerNode):
    """Test-only node that spells the magnitude and sign it was given."""

    label: str = "m"


def _render_probe(node, context):
    sign = "-" if context.is_negative() else ""
    return "{}={}{} ".format(node.label, sign, context.magnitude)


@pytest.fixture(scope="session")
def english():
    """The English grammar root."""
    return build_english()


@pytest.fixture(scope="session")
def russian():
    """The Russian grammar root."""
    return build_russian()


@pytest.fixture
def magnitude_probe(monkeypatch):
    """Factory for probe nodes; registers their renderer for this test only."""
    monkeypatch.setitem(RENDERERS, MagnitudeProbe, _render_probe)
    return MagnitudeProbe
