# Banca Scoring - Group Evaluation
# ================================
"""
Scores an evaluator gives to a group, one per rubric criterion.

Scores live in the group row under "NOTA 1" ... "NOTA n" (n = number of
rubric criteria) plus an optional "FEEDBACK" text. Every score must be
between 1 and 5 before it can be saved.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from banca.client import EvaluationApiClient
from banca.client.schemas import Rubrica
from banca.matching.fields import has_value
from banca.models import Record

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5
FEEDBACK_KEY = "FEEDBACK"
SCORE_RANGE_MESSAGE = f"Nota deve ser entre {MIN_SCORE} e {MAX_SCORE}"
SCORE_KEY_MESSAGE = "Critério de nota inválido"
NO_SCORES_MESSAGE = "Nenhuma nota informada"
SCORES_FIELD = "scores"

SCORE_KEY_PATTERN = re.compile(r"NOTA [1-9][0-9]*")


class ScoreValidationError(Exception):
    """Raised when scores are missing, misnamed or out of range."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(f"Invalid scores: {', '.join(sorted(errors))}")


@dataclass
class SaveOutcome:
    """Result of saving an evaluation."""
    grupo: str
    updated_rows: int

    @property
    def saved(self) -> bool:
        return self.updated_rows > 0


def score_key(index: int) -> str:
    """Column of the score for the criterion at zero-based index."""
    return f"NOTA {index + 1}"


def parse_score(value: Any) -> int:
    """
    Integer score clamped to [0, MAX_SCORE]; unreadable input is 0.

    Decimal cells are truncated, so "4.0" reads 4 and "3.7" reads 3.
    """
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, min(MAX_SCORE, int(number)))


def initial_scores(group: Record, rubricas: Sequence[Rubrica]) -> Dict[str, int]:
    """Scores already stored in the group row, 0 when absent."""
    scores = {}
    for index, _ in enumerate(rubricas):
        key = score_key(index)
        scores[key] = parse_score(group[key]) if has_value(group.get(key)) else 0
    return scores


def is_score_key(key: str) -> bool:
    """True for "NOTA <n>" keys with n >= 1."""
    return SCORE_KEY_PATTERN.fullmatch(key) is not None


def validate_scores(scores: Mapping[str, int]) -> Dict[str, str]:
    """
    Error message per invalid score.

    Keys must read "NOTA <n>" and values must lie in [MIN_SCORE, MAX_SCORE].
    An empty mapping is reported under "scores".
    """
    if not scores:
        return {SCORES_FIELD: NO_SCORES_MESSAGE}

    errors = {}
    for key, value in scores.items():
        if not is_score_key(key):
            errors[key] = SCORE_KEY_MESSAGE
        elif value < MIN_SCORE or value > MAX_SCORE:
            errors[key] = SCORE_RANGE_MESSAGE
    return errors


def build_save_payload(scores: Mapping[str, int], feedback: Optional[str] = None) -> Dict[str, str]:
    """String fields sent to the data source; FEEDBACK only when non-blank."""
    payload = {key: str(value) for key, value in scores.items()}
    if feedback and feedback.strip():
        payload[FEEDBACK_KEY] = feedback.strip()
    return payload


def group_identifier(group: Record) -> str:
    """Identifier the data source uses to find the group row."""
    if group.get("GRUPO"):
        return str(group["GRUPO"])
    if group.get("NOME"):
        return str(group["NOME"])
    return f"Grupo_{group.get('ID') or ''}"


def submit_evaluation(client: EvaluationApiClient, sheet: str, evaluator_id: str,
                      group: Record, scores: Mapping[str, int],
                      feedback: Optional[str] = None) -> SaveOutcome:
    """
    Validate and store an evaluation.

    Raises:
        ScoreValidationError: a score is out of range
        ApiError: the data source could not store the scores
    """
    errors = validate_scores(scores)
    if errors:
        raise ScoreValidationError(errors)

    grupo = group_identifier(group)
    updated = client.save_notas(sheet, evaluator_id, grupo, build_save_payload(scores, feedback))

    if updated > 0:
        logger.info(f"Saved {len(scores)} scores for '{grupo}' in {sheet} ({updated} rows)")
    else:
        logger.warning(f"No row updated for '{grupo}' in {sheet}; the group may not exist")

    return SaveOutcome(grupo=grupo, updated_rows=updated)
