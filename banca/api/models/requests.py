# Banca API Request Models
# ========================
"""Pydantic models for API requests."""

from pydantic import BaseModel, Field
from typing import Dict, Optional, Any


class LoginRequest(BaseModel):
    """Evaluator login request."""
    login: str = Field(..., min_length=1, description="Evaluator login")
    senha: str = Field(..., min_length=1, description="Evaluator password")


class EvaluatorIdentity(BaseModel):
    """Evaluator identity as returned by login."""
    id: str = Field("", description="Evaluator identifier")
    name: str = Field("", description="Evaluator display name")
    categoria: str = Field("", description="Evaluator category (rubric set)")


class ViewRequest(BaseModel):
    """Request to refresh an evaluator's view."""
    evaluator: EvaluatorIdentity
    selected_sheet: Optional[str] = Field(None, description="Sheet selected before the refresh")


class EvaluationRequest(BaseModel):
    """Scores for one group."""
    evaluator_id: str = Field(..., min_length=1)
    group: Dict[str, Any] = Field(..., description="Group row as listed in the view")
    scores: Dict[str, int] = Field(..., description="NOTA n -> score")
    feedback: Optional[str] = None


class EvaluationFormRequest(BaseModel):
    """Group to open the score form for."""
    categoria: str = Field(..., min_length=1, description="Evaluator category (rubric set)")
    group: Dict[str, Any] = Field(..., description="Group row as listed in the view")
