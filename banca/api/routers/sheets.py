# Banca API - Sheets Router
# =========================
"""Evaluator view: the sheets and groups an evaluator may score."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from banca.matching import describe_group
from banca.models import Evaluator
from banca.sheets import (
    EvaluatorView,
    EvaluatorViewService,
    ViewRefreshError,
    ViewStatus,
    display_name_for,
)
from ..dependencies import get_view_service
from ..models import GroupItem, SheetItem, ViewData, ViewRequest

logger = logging.getLogger(__name__)

router = APIRouter()

NOTHING_ASSIGNED_MESSAGE = "Nenhum projeto atribuído encontrado para você neste momento."


def _view_data(view: EvaluatorView, selected_sheet: Optional[str] = None) -> ViewData:
    sheets = []
    for sheet in view.sheets:
        groups = []
        for index, group in enumerate(sheet.groups):
            summary = describe_group(group, sheet.name, index)
            groups.append(GroupItem(**summary.to_dict(), record=group))
        sheets.append(SheetItem(
            name=sheet.name,
            display_name=sheet.display_name,
            group_count=len(groups),
            groups=groups,
        ))

    return ViewData(
        status=view.status.value,
        message=NOTHING_ASSIGNED_MESSAGE if view.status == ViewStatus.NOTHING_ASSIGNED else None,
        selected_sheet=view.select_sheet(selected_sheet),
        sheets=sheets,
        failed_sheets=[f.name for f in view.failures],
        refreshed_at=view.refreshed_at,
    )


@router.post("/view")
def refresh_view(request: ViewRequest,
                 service: EvaluatorViewService = Depends(get_view_service)):
    """
    Reload all sheets and return the groups assigned to the evaluator.

    A view with status **nothing_assigned** is a normal answer. When no
    sheet can be loaded the previous view, if any, is returned in the
    error details.
    """
    evaluator = Evaluator.from_dict(request.evaluator.model_dump())

    try:
        view = service.refresh(evaluator)
    except ViewRefreshError as e:
        previous = service.current_view(evaluator.id)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "code": "REFRESH_FAILED",
                "message": str(e),
                "failed_sheets": [display_name_for(f.name, service.catalog) for f in e.failures],
                "previous_view": (
                    _view_data(previous, request.selected_sheet).model_dump() if previous else None
                ),
            }
        )

    return {
        "success": True,
        "data": _view_data(view, request.selected_sheet).model_dump(),
        "meta": {"timestamp": datetime.now().isoformat()}
    }


@router.get("/view/{evaluator_id}")
async def get_view(evaluator_id: str,
                   service: EvaluatorViewService = Depends(get_view_service)):
    """Last successfully refreshed view of an evaluator."""
    view = service.current_view(evaluator_id)
    if view is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "VIEW_NOT_FOUND", "message": "No view refreshed yet for this evaluator"}
        )

    return {
        "success": True,
        "data": _view_data(view).model_dump(),
        "meta": {"timestamp": datetime.now().isoformat()}
    }
