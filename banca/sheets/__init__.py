# Banca Sheets Module
# ===================
"""
Evaluation sheets: catalog, loading and the per-evaluator filtered view.

Components:
- catalog: sheets requested from the data source and their labels
- loader: remote and workbook loaders, load_all_sheets()
- pipeline: build_evaluator_view() and EvaluatorViewService
"""

from .catalog import (
    EVALUATION_SHEETS,
    find_sheet,
    display_name_for,
)

from .loader import (
    SheetLoader,
    RemoteSheetLoader,
    WorkbookSheetLoader,
    SheetLoadFailure,
    SheetLoadReport,
    load_all_sheets,
)

from .pipeline import (
    build_evaluator_view,
    EvaluatorView,
    EvaluatorViewService,
    ViewStatus,
    ViewRefreshError,
)


__all__ = [
    # Catalog
    "EVALUATION_SHEETS",
    "find_sheet",
    "display_name_for",

    # Loaders
    "SheetLoader",
    "RemoteSheetLoader",
    "WorkbookSheetLoader",
    "SheetLoadFailure",
    "SheetLoadReport",
    "load_all_sheets",

    # Pipeline
    "build_evaluator_view",
    "EvaluatorView",
    "EvaluatorViewService",
    "ViewStatus",
    "ViewRefreshError",
]
