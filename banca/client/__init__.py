# Banca Client Module
# ===================
"""Client for the spreadsheet web app holding groups, rubrics and scores."""

from .errors import (
    ApiError,
    ApiConnectionError,
    ApiTimeoutError,
    ApiResponseError,
)

from .schemas import (
    LoginUser,
    Rubrica,
    InformacoesEvento,
)

from .api_client import EvaluationApiClient


__all__ = [
    # Errors
    "ApiError",
    "ApiConnectionError",
    "ApiTimeoutError",
    "ApiResponseError",

    # Payloads
    "LoginUser",
    "Rubrica",
    "InformacoesEvento",

    # Client
    "EvaluationApiClient",
]
