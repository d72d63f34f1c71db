# Banca API Response Models
# =========================
"""Pydantic models for API responses."""

from pydantic import BaseModel
from typing import Optional, List, Dict, Any


# ============================================
# Evaluator View Responses
# ============================================

class GroupItem(BaseModel):
    """A group listed in a sheet, with its resolved display fields."""
    key: str
    name: str
    project: Optional[str] = None
    turma: Optional[str] = None
    integrantes: Optional[str] = None
    categoria: Optional[str] = None
    record: Dict[str, Any]


class SheetItem(BaseModel):
    """A sheet of the evaluator view."""
    name: str
    display_name: str
    group_count: int
    groups: List[GroupItem]


class ViewData(BaseModel):
    """Evaluator view payload."""
    status: str  # ready | nothing_assigned
    message: Optional[str] = None
    selected_sheet: Optional[str] = None
    sheets: List[SheetItem]
    failed_sheets: List[str] = []
    refreshed_at: str


class SaveData(BaseModel):
    """Outcome of saving scores."""
    grupo: str
    updated_rows: int
    message: str


class EvaluationFormData(BaseModel):
    """Rubrics and stored scores of a group."""
    sheet: str
    grupo: str
    rubricas: List[Dict[str, Any]]
    scores: Dict[str, int]
    feedback: Optional[str] = None
