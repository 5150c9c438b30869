"""
Constantes do cadastro de atletas.
Valores aceitos nos campos de seleção da ficha cadastral.
"""
from enum import Enum


class Sexo(str, Enum):
    MASCULINO = "Masculino"
    FEMININO = "Feminino"
    OUTRO = "Outro"


class LadoDominante(str, Enum):
    DESTRO = "Destro"
    CANHOTO = "Canhoto"
    AMBIDESTRO = "Ambidestro"


class GraduacaoFaixa(str, Enum):
    """Faixas do judô, da inicial à mais alta."""
    BRANCA = "Branca"
    CINZA = "Cinza"
    AZUL = "Azul"
    AMARELA = "Amarela"
    LARANJA = "Laranja"
    VERDE = "Verde"
    ROXA = "Roxa"
    MARROM = "Marrom"
    PRETA = "Preta"


class TurnoEstudo(str, Enum):
    MANHA = "Manhã"
    TARDE = "Tarde"
    NOITE = "Noite"
    INTEGRAL = "Integral"


# Etapas da ficha, na ordem em que o formulário as apresenta
ETAPAS_FICHA = (
    "Dados Pessoais",
    "Endereço",
    "Vida Escolar",
    "Saúde & Emergência",
    "Responsabilidade",
)
TOTAL_ETAPAS = len(ETAPAS_FICHA)

# Valores iniciais do formulário (rascunho vazio)
DEFAULT_DRAFT_VALUES = {
    "nome_completo": "",
    "cpf": "",
    "data_nascimento": "",
    "sexo": Sexo.MASCULINO.value,
    "whatsapp": "",
    "peso": "",
    "altura": "1.75",
    "tam_kimono": "",
    "num_calcado": "",
    "foto_url": "",
    "lado_dominante": LadoDominante.DESTRO.value,
    "graduacao_faixa": GraduacaoFaixa.BRANCA.value,
    "numero_nis": "",
    "logradouro": "",
    "numero": "",
    "bairro": "",
    "cidade": "",
    "uf": "",
    "escola": "",
    "serie_ano": "",
    "turno_estudo": TurnoEstudo.MANHA.value,
    "restricao_medica": "",
    "possui_alergias": "",
    "tipo_sanguineo": "",
    "contato_emergencia_nome": "",
    "contato_emergencia_tel": "",
    "responsavel_legal": "",
    "responsavel_cpf": "",
    "termo_aceite": False,
}

ATHLETE_FIELDS = tuple(DEFAULT_DRAFT_VALUES)
