# Banca - Configuration
# =====================
"""
Runtime configuration read from environment variables.

A .env file at the project root is loaded first when present, so local
development only needs:

    BANCA_API_BASE_URL=https://script.google.com/macros/s/<deployment>/exec
"""

import os
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")


class ConfigurationError(Exception):
    """Raised when a mandatory setting is missing or unusable."""

    def __init__(self, key: str, reason: str = "not set"):
        self.key = key
        self.reason = reason
        super().__init__(f"Configuration '{key}' is {reason}. Set it in the environment or in .env.")


class DataSource(str, Enum):
    """Where evaluation sheets are loaded from."""
    REMOTE = "remote"      # spreadsheet web app over HTTP
    WORKBOOK = "workbook"  # local .xlsx file or directory of CSV files


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {key}='{raw}', using {default}")
        return default


@dataclass
class BancaConfig:
    """Settings for the data source, matching and API."""
    api_base_url: Optional[str] = None
    api_timeout_seconds: int = 30
    data_source: DataSource = DataSource.REMOTE
    workbook_path: Optional[str] = None
    assignee_marker: str = "avaliador"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BancaConfig":
        """Create config from environment variables."""
        source_str = os.getenv("BANCA_DATA_SOURCE", "remote").lower()
        try:
            data_source = DataSource(source_str)
        except ValueError:
            logger.warning(f"Unknown BANCA_DATA_SOURCE '{source_str}', defaulting to remote")
            data_source = DataSource.REMOTE

        return cls(
            api_base_url=os.getenv("BANCA_API_BASE_URL") or None,
            api_timeout_seconds=_int_env("BANCA_API_TIMEOUT_SECONDS", 30),
            data_source=data_source,
            workbook_path=os.getenv("BANCA_WORKBOOK_PATH") or None,
            assignee_marker=os.getenv("BANCA_ASSIGNEE_MARKER", "avaliador").strip() or "avaliador",
            log_level=os.getenv("BANCA_LOG_LEVEL", "INFO").upper(),
        )

    def require_api_base_url(self) -> str:
        if not self.api_base_url:
            raise ConfigurationError("BANCA_API_BASE_URL")
        return self.api_base_url

    def require_workbook_path(self) -> Path:
        if not self.workbook_path:
            raise ConfigurationError("BANCA_WORKBOOK_PATH")
        path = Path(self.workbook_path)
        if not path.exists():
            raise ConfigurationError("BANCA_WORKBOOK_PATH", f"pointing to a missing path ({path})")
        return path


# Singleton instance
_config: Optional[BancaConfig] = None


def get_config() -> BancaConfig:
    """Get or create the global configuration."""
    global _config
    if _config is None:
        _config = BancaConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration (re-read on next get_config)."""
    global _config
    _config = None
