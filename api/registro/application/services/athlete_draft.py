"""
Rascunho da ficha cadastral em cinco etapas.

O formulário acumula os campos em memória, sem ida ao servidor, até o
envio final. Nada aqui é persistido: após uma inscrição bem-sucedida (ou ao
recomeçar) o rascunho volta aos valores iniciais.
"""
import base64
from copy import deepcopy
from typing import Any, Dict

from pydantic import TypeAdapter, ValidationError as SchemaValidationError

from registro.application.dto.athlete_dto import AthleteCreateDTO
from registro.shared.constants.athlete_constants import (
    DEFAULT_DRAFT_VALUES,
    ETAPAS_FICHA,
    TOTAL_ETAPAS,
)
from registro.shared.exceptions.domain import ValidationError


# Mesma conversão que o DTO aplica: "false", "0" e "no" valem False
_CONSENT = TypeAdapter(bool)


class AthleteDraft:
    """
    Estado do formulário de inscrição.

    Uso:
        draft = AthleteDraft()
        draft.update("nome_completo", "Ana Silva")
        draft.next_step()
        ...
        draft.update("termo_aceite", True)
        dto = draft.to_payload()
    """

    def __init__(self):
        self.data: Dict[str, Any] = deepcopy(DEFAULT_DRAFT_VALUES)
        self.step = 1

    @property
    def step_title(self) -> str:
        return ETAPAS_FICHA[self.step - 1]

    @property
    def is_last_step(self) -> bool:
        return self.step == TOTAL_ETAPAS

    def update(self, field: str, value: Any) -> None:
        """
        Altera um campo do rascunho.

        Raises:
            ValidationError: Se o campo não existe na ficha
        """
        if field not in self.data:
            raise ValidationError(f"Campo desconhecido: {field}", field=field)
        self.data[field] = value

    def merge(self, values: Dict[str, Any]) -> None:
        for field, value in values.items():
            self.update(field, value)

    def attach_photo(self, content: bytes, mime_type: str = "image/jpeg") -> str:
        """
        Anexa a foto como data URI, o mesmo formato que o navegador gera.

        Returns:
            str: data URI gravado em foto_url
        """
        encoded = base64.b64encode(content).decode("ascii")
        data_uri = f"data:{mime_type};base64,{encoded}"
        self.data["foto_url"] = data_uri
        return data_uri

    def has_consent(self) -> bool:
        """Termo aceito, lido como o DTO lê o valor (texto "false" não conta)."""
        try:
            return _CONSENT.validate_python(self.data["termo_aceite"]) is True
        except SchemaValidationError:
            return False

    def can_advance(self) -> bool:
        """Só a última etapa exige o termo aceito para seguir (finalizar)."""
        if self.is_last_step:
            return self.has_consent()
        return True

    def next_step(self) -> int:
        if not self.is_last_step:
            self.step += 1
        return self.step

    def previous_step(self) -> int:
        if self.step > 1:
            self.step -= 1
        return self.step

    def to_payload(self) -> AthleteCreateDTO:
        """
        Monta o DTO de inscrição a partir do rascunho.

        Raises:
            ValidationError: Se o termo não foi aceito
            pydantic.ValidationError: Se algum campo for inválido
        """
        if not self.has_consent():
            raise ValidationError("O termo de aceite precisa ser marcado", field="termo_aceite")
        return AthleteCreateDTO(**self.data)

    def reset(self) -> None:
        """Descarta o rascunho e volta para a primeira etapa."""
        self.data = deepcopy(DEFAULT_DRAFT_VALUES)
        self.step = 1
