# Banca Client - Evaluation Data Source
# =====================================
"""
HTTP client for the spreadsheet web app that stores groups and scores.

Every call is a form-encoded POST to a single URL, with the operation in
the "action" field:

    action=login&login=...&senha=...
    action=loadData&sheet=DT&evaluatorId=u1

Answers are JSON objects with "success": true plus the payload, or
"success": false with an "error" message.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from banca.models import Record
from banca.settings import BancaConfig, get_config
from .errors import ApiConnectionError, ApiResponseError, ApiTimeoutError
from .schemas import (
    InformacoesEvento,
    InformacoesResponse,
    LoadDataResponse,
    LoginResponse,
    LoginUser,
    Rubrica,
    RubricasResponse,
    SaveNotasResponse,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class EvaluationApiClient:
    """
    Client for the evaluation data source.

    Example:
        client = EvaluationApiClient("https://example.org/exec")
        user = client.login("ana", "secret")
        groups = client.load_data("DT", user.id)
    """

    def __init__(self, base_url: str, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        """
        Args:
            base_url: Web app endpoint receiving every action
            timeout: Seconds to wait for each answer
            session: Pre-configured session (tests inject a mock)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: Optional[BancaConfig] = None) -> "EvaluationApiClient":
        config = config or get_config()
        return cls(config.require_api_base_url(), timeout=config.api_timeout_seconds)

    def _post(self, params: Dict[str, str]) -> Dict[str, Any]:
        """Send one action and return the decoded success payload."""
        action = params.get("action", "")
        try:
            response = self.session.post(
                self.base_url,
                data=params,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise ApiTimeoutError(self.base_url, self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiConnectionError(self.base_url, str(e))

        if not response.ok:
            raise ApiResponseError(action, f"HTTP error {response.status_code}", response.status_code)

        try:
            payload = response.json()
        except ValueError:
            raise ApiResponseError(action, "response is not JSON", response.status_code)

        logger.debug(f"Data source answered '{action}': {payload}")

        if not isinstance(payload, dict):
            raise ApiResponseError(action, "unexpected response shape")
        if not payload.get("success"):
            raise ApiResponseError(action, payload.get("error") or "request failed")
        return payload

    def _call(self, model: Type[ResponseT], params: Dict[str, str]) -> ResponseT:
        payload = self._post(params)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise ApiResponseError(params.get("action", ""), f"invalid payload ({e.error_count()} errors)")

    def login(self, login: str, senha: str) -> LoginUser:
        """Check evaluator credentials and return their identity."""
        result = self._call(LoginResponse, {"action": "login", "login": login, "senha": senha})
        return result.user

    def get_informacoes(self, avaliador_id: str) -> InformacoesEvento:
        """Event details for an evaluator."""
        result = self._call(InformacoesResponse, {
            "action": "getInformacoes",
            "avaliadorID": avaliador_id,
        })
        return result.informacoes

    def get_rubricas(self, tipo_hacka: str) -> List[Rubrica]:
        """Scoring criteria for an evaluator category."""
        result = self._call(RubricasResponse, {"action": "getRubricas", "tipoHacka": tipo_hacka})
        return result.rubricas

    def load_data(self, sheet: str, evaluator_id: str) -> List[Record]:
        """Raw group rows of one sheet."""
        result = self._call(LoadDataResponse, {
            "action": "loadData",
            "sheet": sheet,
            "evaluatorId": evaluator_id,
        })
        return result.data

    def save_notas(self, sheet: str, evaluator_id: str, grupo: str,
                   notas: Dict[str, str]) -> int:
        """
        Store scores for a group.

        Keys of notas never override action, sheet, evaluatorId or grupo.

        Returns:
            Number of spreadsheet rows updated (0 when the group was not found)
        """
        params = dict(notas)
        params.update({
            "action": "saveNotas",
            "sheet": sheet,
            "evaluatorId": evaluator_id,
            "grupo": grupo,
        })
        result = self._call(SaveNotasResponse, params)
        return result.updatedRows

