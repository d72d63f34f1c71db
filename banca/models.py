# Banca - Shared Models
# =====================
"""
In-memory shapes shared by the matcher, the loaders and the API.

Records arrive from spreadsheets with no fixed schema, so they stay plain
dicts. Everything else is a small dataclass.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

# One evaluee group/project row; keys keep the spreadsheet's own spelling
Record = Dict[str, Any]


@dataclass(frozen=True)
class Evaluator:
    """Identity of the logged-in evaluator."""
    id: str = ""
    name: str = ""
    categoria: str = ""
    evaluation_deadline: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Evaluator":
        """Build from the login payload ({id, name, categoria, evaluationDeadline})."""
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            categoria=str(data.get("categoria") or ""),
            evaluation_deadline=data.get("evaluationDeadline"),
        )


@dataclass(frozen=True)
class SheetDefinition:
    """A sheet the data source is asked for, with its display label."""
    name: str
    display_name: str


@dataclass
class EvaluationSheet:
    """Named, ordered set of group records for one evaluation category."""
    name: str
    display_name: str
    groups: List[Record] = field(default_factory=list)

    def with_groups(self, groups: List[Record]) -> "EvaluationSheet":
        """Copy of this sheet holding a different list of groups."""
        return replace(self, groups=list(groups))

    def __len__(self) -> int:
        return len(self.groups)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "groups": [dict(group) for group in self.groups],
        }
