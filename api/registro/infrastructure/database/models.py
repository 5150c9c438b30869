"""
Modelos de banco de dados (ORM).
"""
from sqlalchemy import Column, String, Integer, DateTime, Float, Text, Boolean
from sqlalchemy.sql import func

from registro.infrastructure.database.session import Base


class AthleteModel(Base):
    """
    Ficha cadastral de um atleta.

    Uma linha por inscrição. O CPF é único no nível do banco, o que torna
    a verificação de duplicidade atômica com o INSERT. AUTOINCREMENT
    garante que um id removido nunca seja reutilizado.
    """

    __tablename__ = "athletes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome_completo = Column(Text, nullable=False)
    cpf = Column(Text, nullable=False, unique=True)
    data_nascimento = Column(Text, nullable=True)
    sexo = Column(Text, nullable=True)
    whatsapp = Column(Text, nullable=True)
    peso = Column(Float, nullable=True)
    altura = Column(Float, nullable=True)
    tam_kimono = Column(Text, nullable=True)
    num_calcado = Column(Text, nullable=True)
    foto_url = Column(Text, nullable=True)
    lado_dominante = Column(Text, nullable=True)
    graduacao_faixa = Column(Text, nullable=True)
    numero_nis = Column(Text, nullable=True)

    # Endereço
    logradouro = Column(Text, nullable=True)
    numero = Column(Text, nullable=True)
    bairro = Column(Text, nullable=True)
    cidade = Column(Text, nullable=True)
    uf = Column(String(2), nullable=True)

    # Vida escolar
    escola = Column(Text, nullable=True)
    serie_ano = Column(Text, nullable=True)
    turno_estudo = Column(Text, nullable=True)

    # Saúde e emergência
    restricao_medica = Column(Text, nullable=True)
    possui_alergias = Column(Text, nullable=True)
    tipo_sanguineo = Column(Text, nullable=True)
    contato_emergencia_nome = Column(Text, nullable=True)
    contato_emergencia_tel = Column(Text, nullable=True)

    # Responsabilidade (Boolean vira INTEGER 0/1 no SQLite)
    responsavel_legal = Column(Text, nullable=True)
    responsavel_cpf = Column(Text, nullable=True)
    termo_aceite = Column(Boolean, nullable=False, default=False, server_default="0")

    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Athlete(id={self.id}, nome={self.nome_completo}, cpf={self.cpf})>"
