"""
Configuração de banco de dados.

Importa os modelos para que se registrem no Base
antes da criação das tabelas.
"""
from registro.infrastructure.database.models import AthleteModel

__all__ = ["AthleteModel"]
