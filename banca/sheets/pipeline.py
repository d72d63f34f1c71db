# Banca Sheets - Evaluator View Pipeline
# ======================================
"""
Evaluator View Pipeline
=======================
Builds the list of sheets and groups an evaluator is allowed to score.

Steps of a refresh:
1. Load every catalog sheet (all loads finish before any filtering)
2. Keep, in each sheet, only the groups assigned to the evaluator
3. Drop sheets left without groups
4. Replace the evaluator's previous view

A refresh where every sheet failed to load raises ViewRefreshError and
keeps the previous view. A refresh where nothing is assigned is not an
error: the view has status NOTHING_ASSIGNED.

Example:
    service = EvaluatorViewService(RemoteSheetLoader(client))
    view = service.refresh(evaluator)
    if view.status == ViewStatus.NOTHING_ASSIGNED:
        ...
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from banca.matching.assignment import AssignmentMatcher, DEFAULT_ASSIGNEE_MARKER
from banca.models import EvaluationSheet, Evaluator, SheetDefinition
from .catalog import EVALUATION_SHEETS
from .loader import SheetLoader, SheetLoadFailure, load_all_sheets

logger = logging.getLogger(__name__)


def build_evaluator_view(sheets: Iterable[EvaluationSheet], evaluator: Evaluator,
                         marker: str = DEFAULT_ASSIGNEE_MARKER) -> List[EvaluationSheet]:
    """
    Filter sheets down to the groups assigned to evaluator.

    Group order is preserved and sheets with no remaining group are
    dropped. Input sheets are not modified.
    """
    matcher = AssignmentMatcher(evaluator, marker)
    view = []
    for sheet in sheets:
        groups = [group for group in sheet.groups if matcher.is_assigned(group)]
        if groups:
            view.append(sheet.with_groups(groups))
    return view


class ViewStatus(Enum):
    """State of an evaluator view."""
    READY = "ready"
    NOTHING_ASSIGNED = "nothing_assigned"


class ViewRefreshError(Exception):
    """Raised when a refresh could not load any sheet."""

    def __init__(self, evaluator_id: str, failures: List[SheetLoadFailure]):
        self.evaluator_id = evaluator_id
        self.failures = failures
        super().__init__(
            "Não foi possível carregar os dados. Tente novamente mais tarde. "
            f"({len(failures)} sheets failed to load)"
        )


@dataclass
class EvaluatorView:
    """Sheets and groups visible to one evaluator after a refresh."""
    evaluator_id: str
    sheets: List[EvaluationSheet] = field(default_factory=list)
    failures: List[SheetLoadFailure] = field(default_factory=list)
    refreshed_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def status(self) -> ViewStatus:
        return ViewStatus.READY if self.sheets else ViewStatus.NOTHING_ASSIGNED

    @property
    def group_count(self) -> int:
        return sum(len(sheet) for sheet in self.sheets)

    def sheet(self, name: str) -> Optional[EvaluationSheet]:
        return next((s for s in self.sheets if s.name == name), None)

    def select_sheet(self, previous: Optional[str] = None) -> Optional[str]:
        """Keep the previously selected sheet if still present, else the first one."""
        if previous and self.sheet(previous) is not None:
            return previous
        return self.sheets[0].name if self.sheets else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "evaluator_id": self.evaluator_id,
            "status": self.status.value,
            "sheets": [sheet.to_dict() for sheet in self.sheets],
            "failures": [{"name": f.name, "reason": f.reason} for f in self.failures],
            "refreshed_at": self.refreshed_at,
        }


class EvaluatorViewService:
    """
    Refreshes and retains evaluator views.

    Views are kept per evaluator id. Each refresh recomputes from freshly
    loaded sheets; the retained view is only replaced when a refresh
    succeeds.
    """

    def __init__(self, loader: SheetLoader,
                 catalog: Sequence[SheetDefinition] = EVALUATION_SHEETS,
                 marker: str = DEFAULT_ASSIGNEE_MARKER):
        self.loader = loader
        self.catalog = tuple(catalog)
        self.marker = marker
        self._views: Dict[str, EvaluatorView] = {}
        self._lock = threading.Lock()

    def current_view(self, evaluator_id: str) -> Optional[EvaluatorView]:
        """Last successful view for an evaluator, if any."""
        with self._lock:
            return self._views.get(evaluator_id)

    def refresh(self, evaluator: Evaluator) -> EvaluatorView:
        """
        Reload all sheets and rebuild the evaluator's view.

        Raises:
            ViewRefreshError: every sheet failed to load
        """
        report = load_all_sheets(self.loader, evaluator.id, self.catalog)

        if report.all_failed:
            logger.error(f"Refresh failed for evaluator {evaluator.id}: no sheet could be loaded")
            raise ViewRefreshError(evaluator.id, report.failures)

        view = EvaluatorView(
            evaluator_id=evaluator.id,
            sheets=build_evaluator_view(report.sheets, evaluator, self.marker),
            failures=report.failures,
        )

        if view.status == ViewStatus.NOTHING_ASSIGNED:
            logger.info(f"Nenhum projeto atribuído para o avaliador {evaluator.id}")
        else:
            logger.info(
                f"Evaluator {evaluator.id}: {view.group_count} groups in {len(view.sheets)} sheets"
            )

        with self._lock:
            self._views[evaluator.id] = view
        return view
