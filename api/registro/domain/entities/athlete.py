"""
Entidade de domínio: Athlete (ficha cadastral do atleta).
"""
import re
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional, Dict, Any

from registro.shared.exceptions.domain import ValidationError


REQUIRED_FIELDS = ("nome_completo", "cpf")

_WHITESPACE = re.compile(r"\s+")


@dataclass
class Athlete:
    """
    Ficha cadastral completa de um atleta.

    id e created_at são atribuídos pelo banco; uma ficha não é editada
    depois de criada, apenas listada, exportada ou removida.
    """

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
    termo_aceite: bool = False

    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Nome completo e CPF são obrigatórios."""
        for field_name in REQUIRED_FIELDS:
            value = getattr(self, field_name)
            if value is None or not str(value).strip():
                raise ValidationError(f"Campo obrigatório ausente: {field_name}", field=field_name)
        self.termo_aceite = bool(self.termo_aceite)

    def has_consent(self) -> bool:
        """Indica se o termo de participação e uso de imagem foi aceito."""
        return self.termo_aceite

    def export_filename(self) -> str:
        """
        Nome do arquivo da ficha exportada.

        Returns:
            str: ex. ficha_Ana_Silva.pdf
        """
        nome = _WHITESPACE.sub("_", self.nome_completo.strip())
        return f"ficha_{nome}.pdf"

    def to_dict(self, include_identity: bool = True) -> Dict[str, Any]:
        data = asdict(self)
        if not include_identity:
            data.pop("id")
            data.pop("created_at")
        return data
