# Banca Client - Schemas
# ======================
"""
Pydantic models for data-source payloads.

Field names follow the data source (camelCase, Portuguese). Unknown
fields are ignored so new spreadsheet columns do not break parsing.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class SourceModel(BaseModel):
    """Base for data-source payloads."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class LoginUser(SourceModel):
    """Evaluator returned by a successful login."""
    id: str
    name: str
    evaluationDeadline: Optional[str] = None
    categoria: str = ""


class Rubrica(SourceModel):
    """One scoring criterion with its descriptors per score level."""
    avaliacao: str = ""
    criterio: str = ""
    cincoPontos: str = ""
    quatroPontos: str = ""
    tresPontos: str = ""
    doisPontos: str = ""
    umPonto: str = ""


class InformacoesEvento(SourceModel):
    """Event details shown to an evaluator."""
    id: Optional[str] = None
    nomeDoAvaliador: Optional[str] = None
    categoria: Optional[str] = None
    cliente: Optional[str] = None
    enderecoCliente: Optional[str] = None
    informacoesAdicionais: Optional[str] = None
    turmas: Optional[str] = None
    temaPerguntaRegras: Optional[str] = None  # embed HTML, rendered as-is
    dataLimiteAvaliacao: Optional[str] = None
    dataPitch: Optional[str] = None
    horarioInicio: Optional[str] = None
    horarioFim: Optional[str] = None


class LoginResponse(SourceModel):
    success: bool
    user: LoginUser


class RubricasResponse(SourceModel):
    success: bool
    rubricas: List[Rubrica] = []


class InformacoesResponse(SourceModel):
    success: bool
    informacoes: InformacoesEvento


class LoadDataResponse(SourceModel):
    success: bool
    data: List[Dict[str, Any]] = []


class SaveNotasResponse(SourceModel):
    success: bool
    updatedRows: int = 0
