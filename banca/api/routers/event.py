# Banca API - Event Router
# ========================
"""Event details and rubrics, passed through from the data source."""

from datetime import datetime

from fastapi import APIRouter, Depends

from banca.client import EvaluationApiClient
from ..dependencies import get_api_client

router = APIRouter()


@router.get("/informacoes/{avaliador_id}")
def get_informacoes(avaliador_id: str, client: EvaluationApiClient = Depends(get_api_client)):
    """Event details for an evaluator."""
    informacoes = client.get_informacoes(avaliador_id)
    return {
        "success": True,
        "data": informacoes.model_dump(),
        "meta": {"timestamp": datetime.now().isoformat()}
    }


@router.get("/rubricas/{categoria}")
def get_rubricas(categoria: str, client: EvaluationApiClient = Depends(get_api_client)):
    """Scoring criteria for an evaluator category."""
    rubricas = client.get_rubricas(categoria)
    return {
        "success": True,
        "data": {"rubricas": [r.model_dump() for r in rubricas]},
        "meta": {"timestamp": datetime.now().isoformat()}
    }
