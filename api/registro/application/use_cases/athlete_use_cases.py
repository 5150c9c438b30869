"""
Casos de uso relacionados a atletas.
Contém a lógica de inscrição, consulta, remoção e exportação das fichas.
"""
from typing import List, Optional, Tuple
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from registro.application.dto.athlete_dto import AthleteCreateDTO, AthleteResponseDTO
from registro.application.services.athlete_pdf_service import AthletePdfService
from registro.domain.repositories.athlete_repository import IAthleteRepository
from registro.infrastructure.repositories.athlete_repository import AthleteRepositoryImpl
from registro.shared.exceptions.domain import (
    ConflictError,
    EntityNotFoundException,
    ValidationError,
)


class AthleteUseCases:
    """
    Casos de uso do cadastro de atletas.

    Controla a transação: o repositório só faz flush, o commit (ou
    rollback) acontece aqui.
    """

    def __init__(
        self,
        db: AsyncSession,
        repository: Optional[IAthleteRepository] = None,
        pdf_service: Optional[AthletePdfService] = None
    ):
        self.db = db
        self.repository = repository or AthleteRepositoryImpl(db)
        self.pdf_service = pdf_service or AthletePdfService()

    async def register_athlete(self, dto: AthleteCreateDTO) -> int:
        """
        Inscreve um atleta.

        Args:
            dto: Ficha completa validada

        Returns:
            int: ID atribuído à ficha

        Raises:
            ValidationError: Se faltar nome completo ou CPF
            ConflictError: Se o CPF já estiver cadastrado
        """
        athlete = dto.to_entity()

        try:
            created = await self.repository.create(athlete)
            await self.db.commit()
        except (ConflictError, ValidationError) as exc:
            await self.db.rollback()
            logger.warning(f"Inscrição recusada ({exc.error_code}): {exc.message}")
            raise
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Atleta inscrito: id={created.id}")
        return created.id

    async def list_athletes(self, search: Optional[str] = None) -> List[AthleteResponseDTO]:
        """
        Lista as fichas, mais recentes primeiro.

        Args:
            search: Filtro opcional por nome ou CPF

        Returns:
            List[AthleteResponseDTO]: Fichas encontradas
        """
        athletes = await self.repository.list(search)
        return [AthleteResponseDTO.model_validate(athlete) for athlete in athletes]

    async def delete_athlete(self, athlete_id: int) -> bool:
        """
        Remove uma ficha. Remover um id inexistente não é erro.

        Returns:
            bool: True se alguma linha foi removida
        """
        deleted = await self.repository.delete_by_id(athlete_id)
        await self.db.commit()

        if deleted:
            logger.info(f"Atleta removido: id={athlete_id}")
        else:
            logger.info(f"Remoção sem efeito, id inexistente: {athlete_id}")
        return deleted

    async def export_athlete_pdf(self, athlete_id: int) -> Tuple[str, bytes]:
        """
        Gera a ficha em PDF.

        Returns:
            Tuple[str, bytes]: Nome do arquivo e conteúdo do PDF

        Raises:
            EntityNotFoundException: Se a ficha não existe
        """
        athlete = await self.repository.get_by_id(athlete_id)

        if athlete is None:
            raise EntityNotFoundException("Atleta", athlete_id)

        return athlete.export_filename(), self.pdf_service.render(athlete)
