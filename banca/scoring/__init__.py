# Banca Scoring Module
"""Rubric-based scoring of groups and submission to the data source."""

from .evaluation import (
    ScoreValidationError,
    SaveOutcome,
    score_key,
    parse_score,
    initial_scores,
    validate_scores,
    build_save_payload,
    group_identifier,
    submit_evaluation,
    MIN_SCORE,
    MAX_SCORE,
    FEEDBACK_KEY,
)

__all__ = [
    "ScoreValidationError",
    "SaveOutcome",
    "score_key",
    "parse_score",
    "initial_scores",
    "validate_scores",
    "build_save_payload",
    "group_identifier",
    "submit_evaluation",
    "MIN_SCORE",
    "MAX_SCORE",
    "FEEDBACK_KEY",
]
