"""
Pytest fixtures for Banca tests.
"""

import sys
import pytest
from pathlib import Path
from typing import Dict, List

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from banca.models import Evaluator, EvaluationSheet, SheetDefinition
from banca.sheets import SheetLoader


class FakeSheetLoader(SheetLoader):
    """In-memory loader: rows per sheet name, or an exception to raise."""

    def __init__(self, rows: Dict[str, object]):
        self.rows = rows
        self.calls: List[str] = []

    def load(self, definition, evaluator_id):
        self.calls.append(definition.name)
        value = self.rows.get(definition.name, [])
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def evaluator():
    """Evaluator used across tests."""
    return Evaluator(id="u1", name="Maria Souza", categoria="Ensino Médio")


@pytest.fixture
def two_sheet_catalog():
    """Catalog with the DT and PITCH sheets only."""
    return (
        SheetDefinition("DT", "Design Thinking"),
        SheetDefinition("PITCH", "Pitch"),
    )


@pytest.fixture
def dt_rows():
    """DT sheet: one of three groups assigned to u1."""
    return [
        {"GRUPO": "Alpha", "AVALIADOR": "u1, u2"},
        {"GRUPO": "Beta", "AVALIADOR": "u3"},
        {"GRUPO": "Gama", "Avaliador": "Carla Lima"},
    ]


@pytest.fixture
def pitch_rows():
    """PITCH sheet: no group assigned to u1."""
    return [
        {"GRUPO": "Delta", "AVALIADOR": "u4"},
        {"GRUPO": "Epsilon", "AVALIADOR": "Pedro Almeida"},
    ]


@pytest.fixture
def raw_sheets(dt_rows, pitch_rows):
    """DT and PITCH sheets as loaded."""
    return [
        EvaluationSheet("DT", "Design Thinking", dt_rows),
        EvaluationSheet("PITCH", "Pitch", pitch_rows),
    ]


@pytest.fixture
def fake_loader(dt_rows, pitch_rows):
    """Loader serving the DT and PITCH rows."""
    return FakeSheetLoader({"DT": dt_rows, "PITCH": pitch_rows})
