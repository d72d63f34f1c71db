# Banca Matching - Assignment Matcher
# ===================================
"""
Assignment Matcher
==================
Decides whether an evaluator is responsible for a group record.

Assignee columns are any column whose name contains the assignee marker
("avaliador" by default), so "AVALIADOR", "Avaliador 2" and
"avaliadores_pitch" all count. Each cell may name several people,
separated by , ; | / or new lines, or may already be a list.

Every entry is compared with the evaluator using, in order:
1. ID_EXACT      - normalized id equals the entry, or is one of its tokens
2. ID_TOKENS     - every id token appears in the entry
3. NAME_EXACT    - normalized name equals, or is a substring of, the entry
4. NAME_TOKENS   - every name token appears in the entry (any word order)

When nothing matches, the outcome depends on whether the record had any
assignee column at all:
- no assignee column      -> assigned to everyone (nothing to filter on)
- assignee column present -> not assigned

Note: NAME_EXACT substring containment can over-match short names
("Ana" is contained in "Mariana"). This is kept as-is; tightening it
would drop groups typed with extra words around the evaluator's name.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

from banca.models import Evaluator, Record
from .fields import has_value
from .text import normalize_text, split_entries, tokenize

DEFAULT_ASSIGNEE_MARKER = "avaliador"


class AssigneeStatus(Enum):
    """What the record says about its assignees, relative to an evaluator."""
    NO_ASSIGNEE_FIELD = "no_assignee_field"  # nothing to filter on
    MATCHED = "matched"
    NOT_MATCHED = "not_matched"              # assignee columns exist, evaluator absent


class MatchRule(Enum):
    """Rule that accepted a candidate entry."""
    ID_EXACT = "id_exact"
    ID_TOKENS = "id_tokens"
    NAME_EXACT = "name_exact"
    NAME_TOKENS = "name_tokens"


@dataclass(frozen=True)
class AssignmentDecision:
    """Outcome of matching one record against one evaluator."""
    status: AssigneeStatus
    rule: Optional[MatchRule] = None
    field: Optional[str] = None      # assignee column that matched
    entry: Optional[str] = None      # raw entry that matched

    @property
    def is_assigned(self) -> bool:
        return self.status != AssigneeStatus.NOT_MATCHED


@dataclass(frozen=True)
class EvaluatorKeys:
    """Normalized forms of an evaluator's id and name."""
    normalized_id: str
    normalized_name: str
    id_tokens: Tuple[str, ...]
    name_tokens: Tuple[str, ...]

    @classmethod
    def from_evaluator(cls, evaluator: Evaluator) -> "EvaluatorKeys":
        return cls(
            normalized_id=normalize_text(evaluator.id or ""),
            normalized_name=normalize_text(evaluator.name or ""),
            id_tokens=tuple(tokenize(evaluator.id)) if evaluator.id else (),
            name_tokens=tuple(tokenize(evaluator.name)) if evaluator.name else (),
        )


def candidate_entries(value: Any) -> List[Any]:
    """Raw assignee entries held by a cell: list items, or split text."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return split_entries(str(value))


def match_entry(keys: EvaluatorKeys, entry: str) -> Optional[MatchRule]:
    """
    Compare one assignee entry with the evaluator.

    Returns:
        The first rule that accepts the entry, or None
    """
    normalized = normalize_text(entry)
    if not normalized:
        return None

    tokens = tokenize(entry)

    if keys.normalized_id and (
        normalized == keys.normalized_id or keys.normalized_id in tokens
    ):
        return MatchRule.ID_EXACT

    if keys.id_tokens and all(token in tokens for token in keys.id_tokens):
        return MatchRule.ID_TOKENS

    if keys.normalized_name:
        if normalized == keys.normalized_name or keys.normalized_name in normalized:
            return MatchRule.NAME_EXACT

        if keys.name_tokens and all(token in tokens for token in keys.name_tokens):
            return MatchRule.NAME_TOKENS

    return None


class AssignmentMatcher:
    """
    Matches group records against a single evaluator.

    The evaluator's keys are normalized once, so one matcher can be reused
    over every record of every sheet in a refresh.

    Example:
        matcher = AssignmentMatcher(Evaluator(id="u1", name="Maria Souza"))
        matcher.is_assigned({"AVALIADOR": "Souza, Maria"})   # True
        matcher.is_assigned({"GRUPO": "Alpha"})               # True, no assignee column
        matcher.is_assigned({"AVALIADOR": "Carla Lima"})      # False
    """

    def __init__(self, evaluator: Evaluator, marker: str = DEFAULT_ASSIGNEE_MARKER):
        self.evaluator = evaluator
        self.marker = (marker or DEFAULT_ASSIGNEE_MARKER).lower()
        self.keys = EvaluatorKeys.from_evaluator(evaluator)

    def assignee_fields(self, record: Record) -> Iterator[str]:
        """Column names of record that designate assignees."""
        for key in record.keys():
            if key and self.marker in str(key).lower():
                yield key

    def decide(self, record: Record) -> AssignmentDecision:
        """Full decision for a record, including which rule matched."""
        has_assignee_field = False

        for key in self.assignee_fields(record):
            has_assignee_field = True
            raw_value = record[key]
            if not has_value(raw_value):
                continue

            for raw in candidate_entries(raw_value):
                if not has_value(raw):
                    continue
                rule = match_entry(self.keys, str(raw))
                if rule is not None:
                    return AssignmentDecision(
                        status=AssigneeStatus.MATCHED,
                        rule=rule,
                        field=key,
                        entry=str(raw),
                    )

        if has_assignee_field:
            return AssignmentDecision(status=AssigneeStatus.NOT_MATCHED)
        return AssignmentDecision(status=AssigneeStatus.NO_ASSIGNEE_FIELD)

    def is_assigned(self, record: Record) -> bool:
        return self.decide(record).is_assigned


def is_assigned(record: Record, evaluator: Evaluator,
                marker: str = DEFAULT_ASSIGNEE_MARKER) -> bool:
    """True when evaluator may see and score record."""
    return AssignmentMatcher(evaluator, marker).is_assigned(record)
