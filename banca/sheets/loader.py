# Banca Sheets - Loaders
# ======================
"""
Sheet loaders
=============
Fetch the raw group rows of each catalog sheet.

- RemoteSheetLoader: asks the spreadsheet web app (one request per sheet)
- WorkbookSheetLoader: reads a local .xlsx workbook, one worksheet per
  sheet, or a directory holding <SHEET>.csv files

load_all_sheets() runs a loader over the whole catalog. A sheet that fails
to load or has no rows is left out; failures are logged and reported,
never raised.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from banca.client import EvaluationApiClient
from banca.matching.text import normalize_text
from banca.models import EvaluationSheet, Record, SheetDefinition
from .catalog import EVALUATION_SHEETS

logger = logging.getLogger(__name__)


class SheetLoader(ABC):
    """Source of raw group records, one sheet at a time."""

    @abstractmethod
    def load(self, definition: SheetDefinition, evaluator_id: str) -> List[Record]:
        """
        Load the rows of one sheet.

        Args:
            definition: Catalog entry of the sheet
            evaluator_id: Evaluator the rows are requested for

        Returns:
            Raw records, possibly empty
        """
        pass


class RemoteSheetLoader(SheetLoader):
    """Loads sheets through the data-source web app."""

    def __init__(self, client: EvaluationApiClient):
        self.client = client

    def load(self, definition: SheetDefinition, evaluator_id: str) -> List[Record]:
        return self.client.load_data(definition.name, evaluator_id)


class WorkbookSheetLoader(SheetLoader):
    """
    Loads sheets from a local workbook export.

    Worksheet and file names are matched ignoring case and accents, so a
    "Prototipo.csv" export still feeds the PROTÓTIPO sheet. Blank cells
    become None and fully blank rows are dropped.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self, definition: SheetDefinition, evaluator_id: str) -> List[Record]:
        if self.path.is_dir():
            df = self._read_csv(definition.name)
        else:
            df = self._read_worksheet(definition.name)

        if df is None:
            logger.debug(f"No worksheet for sheet {definition.name} in {self.path}")
            return []

        return self._to_records(df)

    def _read_worksheet(self, sheet_name: str) -> Optional[pd.DataFrame]:
        with pd.ExcelFile(self.path) as excel_file:
            match = self._match_name(sheet_name, excel_file.sheet_names)
            if match is None:
                return None
            return pd.read_excel(excel_file, sheet_name=match, dtype=object)

    def _read_csv(self, sheet_name: str) -> Optional[pd.DataFrame]:
        files = {p.stem: p for p in self.path.glob("*.csv")}
        match = self._match_name(sheet_name, list(files))
        if match is None:
            return None
        return pd.read_csv(files[match], dtype=str)

    @staticmethod
    def _match_name(sheet_name: str, available: Sequence[str]) -> Optional[str]:
        if sheet_name in available:
            return sheet_name
        wanted = normalize_text(sheet_name)
        return next((name for name in available if normalize_text(str(name)) == wanted), None)

    @staticmethod
    def _to_records(df: pd.DataFrame) -> List[Record]:
        df = df.dropna(how="all")
        df.columns = [str(c).strip() for c in df.columns]
        df = df.astype(object).where(pd.notna(df), None)
        return df.to_dict(orient="records")


@dataclass
class SheetLoadFailure:
    """A sheet that could not be loaded."""
    name: str
    reason: str


@dataclass
class SheetLoadReport:
    """Outcome of loading every catalog sheet."""
    sheets: List[EvaluationSheet] = field(default_factory=list)
    failures: List[SheetLoadFailure] = field(default_factory=list)
    requested: int = 0

    @property
    def all_failed(self) -> bool:
        """True when every requested sheet failed to load."""
        return self.requested > 0 and len(self.failures) == self.requested


def load_all_sheets(loader: SheetLoader, evaluator_id: str,
                    catalog: Sequence[SheetDefinition] = EVALUATION_SHEETS) -> SheetLoadReport:
    """
    Load every catalog sheet, in catalog order.

    Args:
        loader: Sheet source
        evaluator_id: Evaluator the rows are requested for
        catalog: Sheets to request

    Returns:
        SheetLoadReport with the non-empty sheets and the failures
    """
    report = SheetLoadReport(requested=len(catalog))

    for definition in catalog:
        try:
            groups = loader.load(definition, evaluator_id)
        except Exception as e:
            logger.warning(f"Could not load sheet {definition.name}: {e}")
            report.failures.append(SheetLoadFailure(definition.name, str(e)))
            continue

        if not groups:
            continue

        report.sheets.append(EvaluationSheet(
            name=definition.name,
            display_name=definition.display_name,
            groups=list(groups),
        ))

    logger.info(
        f"Loaded {len(report.sheets)}/{report.requested} sheets for evaluator {evaluator_id} "
        f"({len(report.failures)} failed)"
    )
    return report
