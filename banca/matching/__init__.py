# Banca Matching Module
# =====================
"""
Assignment resolution between evaluators and spreadsheet group records.

Components:
- text: normalization and tokenization of hand-typed names
- fields: case-insensitive lookup of logical fields by candidate column names
- assignment: decides whether an evaluator is responsible for a record
"""

from .text import (
    normalize_text,
    tokenize,
    split_entries,
    STOP_WORDS,
)

from .fields import (
    has_value,
    resolve_field,
    group_name,
    describe_group,
    GroupSummary,
)

from .assignment import (
    AssignmentMatcher,
    AssignmentDecision,
    AssigneeStatus,
    MatchRule,
    EvaluatorKeys,
    is_assigned,
    DEFAULT_ASSIGNEE_MARKER,
)


__all__ = [
    # Text
    "normalize_text",
    "tokenize",
    "split_entries",
    "STOP_WORDS",

    # Fields
    "has_value",
    "resolve_field",
    "group_name",
    "describe_group",
    "GroupSummary",

    # Assignment
    "AssignmentMatcher",
    "AssignmentDecision",
    "AssigneeStatus",
    "MatchRule",
    "EvaluatorKeys",
    "is_assigned",
    "DEFAULT_ASSIGNEE_MARKER",
]
