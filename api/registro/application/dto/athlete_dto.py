"""
DTOs relacionados a atletas.
Definem o formato dos dados trocados com o formulário e o painel admin.
"""
from datetime import datetime
from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator

from registro.core.config import settings
from registro.domain.entities.athlete import Athlete
from registro.shared.constants.athlete_constants import (
    Sexo,
    LadoDominante,
    GraduacaoFaixa,
    TurnoEstudo,
)
from registro.shared.utils.datetime_utils import DateTimeUtils


class AthleteCreateDTO(BaseModel):
    """
    DTO de inscrição: a ficha completa enviada pelo formulário.

    Nome completo e CPF são obrigatórios; os demais campos aceitam vazio.
    Peso e altura chegam como texto no formulário e são convertidos.
    """

    # Dados pessoais
    nome_completo: str = Field(..., min_length=1, max_length=255, description="Nome completo do atleta")
    cpf: str = Field(..., min_length=1, max_length=20, description="CPF do atleta (único)")
    data_nascimento: Optional[str] = Field(None, max_length=10, description="Data de nascimento (AAAA-MM-DD)")
    sexo: Optional[Sexo] = None
    whatsapp: Optional[str] = Field(None, max_length=30)
    peso: Optional[float] = Field(None, ge=0, le=400, description="Peso em kg")
    altura: Optional[float] = Field(None, ge=0, le=3, description="Altura em metros")
    tam_kimono: Optional[str] = Field(None, max_length=10)
    num_calcado: Optional[str] = Field(None, max_length=10)
    foto_url: Optional[str] = Field(None, description="Foto como data URI ou URL")
    lado_dominante: Optional[LadoDominante] = None
    graduacao_faixa: Optional[GraduacaoFaixa] = None
    numero_nis: Optional[str] = Field(None, max_length=20)

    # Endereço
    logradouro: Optional[str] = Field(None, max_length=255)
    numero: Optional[str] = Field(None, max_length=20)
    bairro: Optional[str] = Field(None, max_length=120)
    cidade: Optional[str] = Field(None, max_length=120)
    uf: Optional[str] = Field(None, max_length=2)

    # Vida escolar
    escola: Optional[str] = Field(None, max_length=255)
    serie_ano: Optional[str] = Field(None, max_length=50)
    turno_estudo: Optional[TurnoEstudo] = None

    # Saúde e emergência
    restricao_medica: Optional[str] = Field(None, max_length=1000)
    possui_alergias: Optional[str] = Field(None, max_length=1000)
    tipo_sanguineo: Optional[str] = Field(None, max_length=5)
    contato_emergencia_nome: Optional[str] = Field(None, max_length=255)
    contato_emergencia_tel: Optional[str] = Field(None, max_length=30)

    # Responsabilidade
    responsavel_legal: Optional[str] = Field(None, max_length=255)
    responsavel_cpf: Optional[str] = Field(None, max_length=20)
    termo_aceite: bool = Field(False, description="Termo de participação e uso de imagem aceito")

    class Config:
        """Configuração do Pydantic."""
        str_strip_whitespace = True
        extra = "ignore"

    @field_validator("peso", "altura", mode="before")
    @classmethod
    def _parse_decimal(cls, value: Any) -> Any:
        """Vazio vira None; aceita vírgula decimal ("1,75")."""
        if isinstance(value, str):
            value = value.strip().replace(",", ".")
            if not value:
                return None
        return value

    @field_validator("termo_aceite", mode="before")
    @classmethod
    def _consent_default(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("data_nascimento")
    @classmethod
    def _check_birth_date(cls, value: Optional[str]) -> Optional[str]:
        if value and DateTimeUtils.from_iso_string(value) is None:
            raise ValueError("data_nascimento deve estar no formato AAAA-MM-DD")
        return value

    @field_validator("uf")
    @classmethod
    def _upper_state(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value else value

    @field_validator("foto_url")
    @classmethod
    def _check_photo_size(cls, value: Optional[str]) -> Optional[str]:
        if value and len(value) > settings.MAX_PHOTO_LENGTH:
            raise ValueError("foto_url excede o tamanho máximo permitido")
        return value

    def to_entity(self) -> Athlete:
        """Converte o DTO validado na entidade de domínio."""
        return Athlete(**self.model_dump(mode="json"))


class AthleteResponseDTO(BaseModel):
    """DTO de resposta: uma linha da tabela de atletas."""

    id: int
    nome_completo: str
    cpf: str
    data_nascimento: Optional[str] = None
    sexo: Optional[str] = None
    whatsapp: Optional[str] = None
    peso: Optional[float] = None
    altura: Optional[float] = None
    tam_kimono: Optional[str] = None
    num_calcado: Optional[str] = None
    foto_url: Optional[str] = None
    lado_dominante: Optional[str] = None
    graduacao_faixa: Optional[str] = None
    numero_nis: Optional[str] = None
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    escola: Optional[str] = None
    serie_ano: Optional[str] = None
    turno_estudo: Optional[str] = None
    restricao_medica: Optional[str] = None
    possui_alergias: Optional[str] = None
    tipo_sanguineo: Optional[str] = None
    contato_emergencia_nome: Optional[str] = None
    contato_emergencia_tel: Optional[str] = None
    responsavel_legal: Optional[str] = None
    responsavel_cpf: Optional[str] = None
    termo_aceite: bool
    created_at: datetime

    class Config:
        """Configuração do Pydantic."""
        from_attributes = True


class RegisterResponseDTO(BaseModel):
    """Resposta de inscrição bem-sucedida."""

    success: bool = True
    id: int


class SuccessResponseDTO(BaseModel):
    success: bool = True


class ErrorResponseDTO(BaseModel):
    """Envelope de erro único para qualquer falha da API."""

    success: bool = False
    error: str
