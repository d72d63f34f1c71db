# Banca Matching - Field Resolver
# ===============================
"""
Field Resolver
==============
Spreadsheet columns are named by whoever built the sheet: "GRUPO",
"Nome do Grupo", "NOME_DA_EQUIPE"... This module finds a logical field in
a record from a prioritized list of candidate column names.

For each candidate, in order:
1. exact key match with a present value
2. case-insensitive key match with a present value

A value is present when it is not None and not blank once converted to
a string. List cells are converted by joining their items with ",", so
["Ana", "Bia"] reads "Ana,Bia" and an empty list is blank. The first
satisfied candidate wins.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from banca.models import Record

GROUP_NAME_KEYS = (
    "GRUPO",
    "NOME DO GRUPO",
    "NOME_DA_EQUIPE",
    "EQUIPE",
    "NOME",
    "NOME DA EQUIPE",
)
PROJECT_NAME_KEYS = (
    "PROJETO",
    "NOME DO PROJETO",
    "DESAFIO",
    "TEMA",
    "PROJETO_NOME",
    "NOME_PROJETO",
)
GROUP_ID_KEYS = ("ID", "ID_GRUPO", "CODIGO")
CLASS_KEYS = ("TURMA", "TURMAS", "CLASSE", "SALA")
MEMBERS_KEYS = ("INTEGRANTES", "PARTICIPANTES", "MEMBROS", "INTEGRANTES DO GRUPO")
CATEGORY_KEYS = ("CATEGORIA", "MODALIDADE")
GROUP_KEY_KEYS = ("ID", "GRUPO", "NOME DO GRUPO", "CODIGO")

UNNAMED_GROUP = "Grupo sem nome"


def as_text(value: Any) -> str:
    """Cell value as text; list items are joined with ',' and None is ''."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(as_text(item) for item in value)
    return str(value)


def has_value(value: Any) -> bool:
    """True when value is not None and not blank as a string."""
    return as_text(value).strip() != ""


def resolve_field(record: Record, candidate_keys: Iterable[str]) -> Optional[str]:
    """
    Return the first present value among candidate_keys, as a string.

    Args:
        record: Group record with arbitrary key spelling
        candidate_keys: Column names in priority order

    Returns:
        String value, or None when no candidate is present
    """
    record_keys = list(record.keys())

    for key in candidate_keys:
        if not key:
            continue

        if has_value(record.get(key)):
            return as_text(record[key])

        wanted = key.lower()
        found = next((k for k in record_keys if str(k).lower() == wanted), None)
        if found is not None and has_value(record[found]):
            return as_text(record[found])

    return None


def group_name(record: Record) -> str:
    """Display name for a group, falling back to project, then id."""
    name = resolve_field(record, GROUP_NAME_KEYS)
    if name:
        return name

    project = resolve_field(record, PROJECT_NAME_KEYS)
    if project:
        return project

    group_id = resolve_field(record, GROUP_ID_KEYS)
    if group_id:
        return f"Grupo {group_id}"

    return UNNAMED_GROUP


@dataclass
class GroupSummary:
    """Resolved logical fields of a group record, ready for listing."""
    key: str
    name: str
    project: Optional[str] = None
    turma: Optional[str] = None
    integrantes: Optional[str] = None
    categoria: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "project": self.project,
            "turma": self.turma,
            "integrantes": self.integrantes,
            "categoria": self.categoria,
        }


def describe_group(record: Record, sheet_name: str = "", index: int = 0) -> GroupSummary:
    """
    Resolve the fields shown for a group in a sheet listing.

    The project is only reported when it differs from the group name. The
    key falls back to "<sheet>-<index>" for rows without any identifier.
    """
    name = group_name(record)
    project = resolve_field(record, PROJECT_NAME_KEYS)
    key = resolve_field(record, GROUP_KEY_KEYS) or f"{sheet_name}-{index}"

    return GroupSummary(
        key=key,
        name=name,
        project=project if project and project != name else None,
        turma=resolve_field(record, CLASS_KEYS),
        integrantes=resolve_field(record, MEMBERS_KEYS),
        categoria=resolve_field(record, CATEGORY_KEYS),
    )
