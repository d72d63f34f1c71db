# Banca API - Dependencies
# ========================
"""Shared service instances injected into routers."""

import logging
from typing import Optional

from banca.client import EvaluationApiClient
from banca.settings import DataSource, get_config
from banca.sheets import (
    EvaluatorViewService,
    RemoteSheetLoader,
    SheetLoader,
    WorkbookSheetLoader,
)

logger = logging.getLogger(__name__)

# Singleton instances
_api_client: Optional[EvaluationApiClient] = None
_view_service: Optional[EvaluatorViewService] = None


def get_api_client() -> EvaluationApiClient:
    """Get or create the data-source client."""
    global _api_client
    if _api_client is None:
        _api_client = EvaluationApiClient.from_config(get_config())
    return _api_client


def _create_loader() -> SheetLoader:
    config = get_config()
    if config.data_source == DataSource.WORKBOOK:
        path = config.require_workbook_path()
        logger.info(f"Loading evaluation sheets from workbook {path}")
        return WorkbookSheetLoader(path)
    return RemoteSheetLoader(get_api_client())


def get_view_service() -> EvaluatorViewService:
    """Get or create the evaluator view service."""
    global _view_service
    if _view_service is None:
        _view_service = EvaluatorViewService(
            _create_loader(),
            marker=get_config().assignee_marker,
        )
    return _view_service
