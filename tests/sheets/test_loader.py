# Tests for sheet loading and the sheet catalog
"""
Test Suite for Sheet Loaders
============================
Tests:
- load_all_sheets() omits failed and empty sheets
- RemoteSheetLoader delegates to the client
- WorkbookSheetLoader reads .xlsx workbooks and CSV directories
- Catalog lookups
"""

import pytest
import pandas as pd
from unittest.mock import MagicMock

from banca.models import SheetDefinition
from banca.client import ApiResponseError
from banca.sheets import (
    EVALUATION_SHEETS,
    RemoteSheetLoader,
    WorkbookSheetLoader,
    display_name_for,
    find_sheet,
    load_all_sheets,
)
from conftest import FakeSheetLoader


class TestLoadAllSheets:
    """Test load_all_sheets()."""

    def test_loads_in_catalog_order(self, fake_loader, two_sheet_catalog):
        report = load_all_sheets(fake_loader, "u1", two_sheet_catalog)

        assert [s.name for s in report.sheets] == ["DT", "PITCH"]
        assert [s.display_name for s in report.sheets] == ["Design Thinking", "Pitch"]
        assert report.failures == []
        assert not report.all_failed

    def test_empty_sheets_are_omitted(self, dt_rows, two_sheet_catalog):
        loader = FakeSheetLoader({"DT": dt_rows, "PITCH": []})
        report = load_all_sheets(loader, "u1", two_sheet_catalog)
        assert [s.name for s in report.sheets] == ["DT"]
        assert report.failures == []

    def test_failed_sheet_is_reported_not_raised(self, dt_rows, two_sheet_catalog):
        loader = FakeSheetLoader({"DT": dt_rows, "PITCH": ApiResponseError("loadData", "Aba não encontrada")})
        report = load_all_sheets(loader, "u1", two_sheet_catalog)

        assert [s.name for s in report.sheets] == ["DT"]
        assert len(report.failures) == 1
        assert report.failures[0].name == "PITCH"
        assert "Aba não encontrada" in report.failures[0].reason
        assert not report.all_failed

    def test_all_failed(self, two_sheet_catalog):
        loader = FakeSheetLoader({"DT": RuntimeError("down"), "PITCH": RuntimeError("down")})
        report = load_all_sheets(loader, "u1", two_sheet_catalog)
        assert report.sheets == []
        assert report.all_failed

    def test_default_catalog(self):
        loader = FakeSheetLoader({})
        load_all_sheets(loader, "u1")
        assert loader.calls == [d.name for d in EVALUATION_SHEETS]


class TestRemoteSheetLoader:
    """Test RemoteSheetLoader."""

    def test_delegates_to_client(self):
        client = MagicMock()
        client.load_data.return_value = [{"GRUPO": "A"}]
        loader = RemoteSheetLoader(client)

        rows = loader.load(SheetDefinition("DT", "Design Thinking"), "u1")

        assert rows == [{"GRUPO": "A"}]
        client.load_data.assert_called_once_with("DT", "u1")


class TestWorkbookSheetLoader:
    """Test WorkbookSheetLoader."""

    def test_reads_csv_directory(self, tmp_path):
        (tmp_path / "DT.csv").write_text(
            "GRUPO,AVALIADOR,TURMA\nAlpha,u1,\n,,\nBeta,u2,3B\n",
            encoding="utf-8",
        )
        loader = WorkbookSheetLoader(tmp_path)

        rows = loader.load(SheetDefinition("DT", "Design Thinking"), "u1")

        assert rows == [
            {"GRUPO": "Alpha", "AVALIADOR": "u1", "TURMA": None},
            {"GRUPO": "Beta", "AVALIADOR": "u2", "TURMA": "3B"},
        ]

    def test_csv_name_ignores_accents(self, tmp_path):
        (tmp_path / "Prototipo.csv").write_text("GRUPO\nGama\n", encoding="utf-8")
        loader = WorkbookSheetLoader(tmp_path)
        rows = loader.load(SheetDefinition("PROTÓTIPO", "Protótipo"), "u1")
        assert rows == [{"GRUPO": "Gama"}]

    def test_missing_csv_gives_no_rows(self, tmp_path):
        loader = WorkbookSheetLoader(tmp_path)
        assert loader.load(SheetDefinition("PITCH", "Pitch"), "u1") == []

    def test_reads_xlsx_worksheets(self, tmp_path):
        path = tmp_path / "evento.xlsx"
        with pd.ExcelWriter(path) as writer:
            pd.DataFrame({"GRUPO": ["Alpha", "Beta"], "AVALIADOR": ["u1", None]}).to_excel(
                writer, sheet_name="DT", index=False
            )
            pd.DataFrame({"GRUPO": ["Delta"]}).to_excel(writer, sheet_name="Pitch", index=False)
        loader = WorkbookSheetLoader(path)

        dt_rows = loader.load(SheetDefinition("DT", "Design Thinking"), "u1")
        pitch_rows = loader.load(SheetDefinition("PITCH", "Pitch"), "u1")
        missing = loader.load(SheetDefinition("MARATONA", "Maratona"), "u1")

        assert dt_rows == [{"GRUPO": "Alpha", "AVALIADOR": "u1"}, {"GRUPO": "Beta", "AVALIADOR": None}]
        assert pitch_rows == [{"GRUPO": "Delta"}]
        assert missing == []


class TestCatalog:
    """Test sheet catalog lookups."""

    def test_display_names(self):
        assert display_name_for("DT") == "Design Thinking"
        assert display_name_for("PROTÓTIPO_FISICO") == "Protótipo Físico"
        assert display_name_for("OUTRA") == "OUTRA"

    def test_find_sheet_ignores_accents_and_case(self):
        assert find_sheet("prototipo").name == "PROTÓTIPO"
        assert find_sheet("nada") is None
