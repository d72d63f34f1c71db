# Banca Sheets - Catalog
# ======================
"""Evaluation sheets requested from the data source, in display order."""

from typing import Optional, Sequence, Tuple

from banca.models import SheetDefinition
from banca.matching.text import normalize_text

EVALUATION_SHEETS: Tuple[SheetDefinition, ...] = (
    SheetDefinition("DT", "Design Thinking"),
    SheetDefinition("PITCH", "Pitch"),
    SheetDefinition("PROTÓTIPO", "Protótipo"),
    SheetDefinition("PROTÓTIPO_FISICO", "Protótipo Físico"),
    SheetDefinition("MARATONA", "Maratona"),  # older events still use it
)


def find_sheet(name: str,
               catalog: Sequence[SheetDefinition] = EVALUATION_SHEETS) -> Optional[SheetDefinition]:
    """Catalog entry for a sheet name, ignoring case and accents."""
    wanted = normalize_text(name)
    for definition in catalog:
        if normalize_text(definition.name) == wanted:
            return definition
    return None


def display_name_for(name: str,
                     catalog: Sequence[SheetDefinition] = EVALUATION_SHEETS) -> str:
    """Human label for a sheet, or the name itself when unknown."""
    definition = find_sheet(name, catalog)
    return definition.display_name if definition else name
