# Banca API - Authentication Router
# =================================
"""Evaluator login, checked against the data source."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status

from banca.client import ApiResponseError, EvaluationApiClient
from ..dependencies import get_api_client
from ..models import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login")
def login(request: LoginRequest, client: EvaluationApiClient = Depends(get_api_client)):
    """
    Authenticate an evaluator.

    - **login**: Evaluator login
    - **senha**: Evaluator password

    Returns the evaluator identity used by the other endpoints.
    """
    try:
        user = client.login(request.login, request.senha)
    except ApiResponseError as e:
        logger.info(f"Login rejected for '{request.login}': {e.message}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_INVALID", "message": e.message or "Login ou senha inválidos"}
        )

    logger.info(f"Evaluator {user.id} logged in")

    return {
        "success": True,
        "data": {"user": user.model_dump()},
        "meta": {"timestamp": datetime.now().isoformat()}
    }
