# Banca API Models
"""Request and response models for the Banca API."""

from .requests import (
    LoginRequest,
    EvaluatorIdentity,
    ViewRequest,
    EvaluationRequest,
    EvaluationFormRequest,
)
from .responses import (
    GroupItem,
    SheetItem,
    ViewData,
    SaveData,
    EvaluationFormData,
)

__all__ = [
    "LoginRequest",
    "EvaluatorIdentity",
    "ViewRequest",
    "EvaluationRequest",
    "EvaluationFormRequest",
    "GroupItem",
    "SheetItem",
    "ViewData",
    "SaveData",
    "EvaluationFormData",
]
