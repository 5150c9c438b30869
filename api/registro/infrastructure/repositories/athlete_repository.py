"""
Implementação do repositório de atletas usando SQLAlchemy.
"""
from typing import List, Optional
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from registro.domain.entities.athlete import Athlete
from registro.domain.repositories.athlete_repository import IAthleteRepository
from registro.infrastructure.database.models import AthleteModel
from registro.shared.constants.athlete_constants import ATHLETE_FIELDS
from registro.shared.exceptions.domain import ConflictError, ValidationError


class AthleteRepositoryImpl(IAthleteRepository):
    """
    Repositório de fichas com SQLAlchemy.

    Apenas faz flush; commit e rollback ficam com o caso de uso que
    controla a transação.
    """

    def __init__(self, session: AsyncSession):
        """
        Inicializa o repositório com uma sessão de banco de dados.

        Args:
            session: Sessão do SQLAlchemy
        """
        self.session = session

    async def create(self, athlete: Athlete) -> Athlete:
        """Insere a ficha; a unicidade do CPF é garantida pela constraint do banco."""
        db_athlete = AthleteModel(**athlete.to_dict(include_identity=False))

        self.session.add(db_athlete)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            message = str(exc.orig)
            if "unique" in message.lower():
                raise ConflictError(message, field="cpf", value=athlete.cpf) from exc
            raise ValidationError(message) from exc

        await self.session.refresh(db_athlete)
        return self._to_entity(db_athlete)

    async def list(self, search: Optional[str] = None) -> List[Athlete]:
        """
        Fichas da mais recente para a mais antiga; id desempata o mesmo segundo.

        A busca compara o nome sem diferenciar maiúsculas (inclusive acentuadas,
        que o lower() do SQLite não converte) ou um trecho do CPF.
        """
        query = select(AthleteModel).order_by(
            AthleteModel.created_at.desc(), AthleteModel.id.desc()
        )
        result = await self.session.execute(query)
        athletes = [self._to_entity(row) for row in result.scalars().all()]

        term = search.strip() if search else ""
        if not term:
            return athletes

        folded = term.casefold()
        return [
            athlete for athlete in athletes
            if folded in athlete.nome_completo.casefold() or term in athlete.cpf
        ]

    async def get_by_id(self, athlete_id: int) -> Optional[Athlete]:
        """Obtém uma ficha pelo id."""
        result = await self.session.execute(
            select(AthleteModel).where(AthleteModel.id == athlete_id)
        )
        db_athlete = result.scalar_one_or_none()

        if db_athlete is None:
            return None

        return self._to_entity(db_athlete)

    async def delete_by_id(self, athlete_id: int) -> bool:
        """Remove a ficha; retorna False quando nenhuma linha foi afetada."""
        result = await self.session.execute(
            delete(AthleteModel).where(AthleteModel.id == athlete_id)
        )
        return result.rowcount > 0

    @staticmethod
    def _to_entity(db_athlete: AthleteModel) -> Athlete:
        """
        Converte o modelo do banco em entidade de domínio.

        Args:
            db_athlete: Modelo do SQLAlchemy

        Returns:
            Athlete: Entidade de domínio
        """
        data = {name: getattr(db_athlete, name) for name in ATHLETE_FIELDS}
        return Athlete(
            id=db_athlete.id,
            created_at=db_athlete.created_at,
            **data
        )
