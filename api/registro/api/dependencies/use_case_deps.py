"""
Dependências para injeção de casos de uso.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from registro.application.use_cases.athlete_use_cases import AthleteUseCases
from registro.infrastructure.database.session import get_db


async def get_athlete_use_cases(
    db: AsyncSession = Depends(get_db)
) -> AthleteUseCases:
    """
    Dependência para obter os casos de uso de atletas.

    Args:
        db: Sessão de banco de dados da requisição

    Returns:
        AthleteUseCases: Instância dos casos de uso de atletas
    """
    return AthleteUseCases(db)
