# Banca API - Evaluations Router
# ==============================
"""Score form of a group and saving the scores an evaluator gives to it."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status

from banca.client import EvaluationApiClient
from banca.matching.fields import as_text, has_value
from banca.models import SheetDefinition
from banca.scoring import (
    FEEDBACK_KEY,
    ScoreValidationError,
    group_identifier,
    initial_scores,
    submit_evaluation,
)
from banca.sheets import find_sheet
from ..dependencies import get_api_client
from ..models import EvaluationFormData, EvaluationFormRequest, EvaluationRequest, SaveData

router = APIRouter()


def _require_sheet(sheet: str) -> SheetDefinition:
    definition = find_sheet(sheet)
    if definition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "SHEET_NOT_FOUND", "message": f"Unknown sheet: {sheet}"}
        )
    return definition


@router.post("/{sheet}/form")
def evaluation_form(sheet: str, request: EvaluationFormRequest,
                    client: EvaluationApiClient = Depends(get_api_client)):
    """
    Rubrics of the evaluator's category with the scores already stored
    in the group row, 0 for criteria not scored yet.
    """
    definition = _require_sheet(sheet)
    rubricas = client.get_rubricas(request.categoria)
    feedback = request.group.get(FEEDBACK_KEY)

    data = EvaluationFormData(
        sheet=definition.name,
        grupo=group_identifier(request.group),
        rubricas=[r.model_dump() for r in rubricas],
        scores=initial_scores(request.group, rubricas),
        feedback=as_text(feedback) if has_value(feedback) else None,
    )
    return {
        "success": True,
        "data": data.model_dump(),
        "meta": {"timestamp": datetime.now().isoformat()}
    }


@router.post("/{sheet}")
def save_evaluation(sheet: str, request: EvaluationRequest,
                    client: EvaluationApiClient = Depends(get_api_client)):
    """
    Validate and store scores for a group of a sheet.

    Score keys must read "NOTA <n>" and every score must be between 1 and 5.
    """
    definition = _require_sheet(sheet)

    try:
        outcome = submit_evaluation(
            client,
            sheet=definition.name,
            evaluator_id=request.evaluator_id,
            group=request.group,
            scores=request.scores,
            feedback=request.feedback,
        )
    except ScoreValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": "INVALID_SCORES", "message": str(e), "fields": e.errors}
        )

    if outcome.saved:
        message = f"Avaliação salva com sucesso! {outcome.updated_rows} linha(s) atualizadas."
    else:
        message = "Nenhuma linha foi atualizada. Verifique se o grupo existe."

    return {
        "success": True,
        "data": SaveData(grupo=outcome.grupo, updated_rows=outcome.updated_rows, message=message).model_dump(),
        "meta": {"timestamp": datetime.now().isoformat()}
    }
