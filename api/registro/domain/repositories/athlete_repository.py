"""
Interface do repositório de atletas.
Define o contrato que qualquer implementação deve cumprir.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from registro.domain.entities.athlete import Athlete


class IAthleteRepository(ABC):
    """
    Interface do repositório de atletas (Record Store).
    """

    @abstractmethod
    async def create(self, athlete: Athlete) -> Athlete:
        """
        Persiste uma nova ficha.

        Args:
            athlete: Ficha sem id/created_at

        Returns:
            Athlete: Ficha com id e created_at atribuídos

        Raises:
            ConflictError: Se o CPF já estiver cadastrado
            ValidationError: Se o banco recusar um campo obrigatório
        """
        pass

    @abstractmethod
    async def list(self, search: Optional[str] = None) -> List[Athlete]:
        """
        Lista as fichas da mais recente para a mais antiga.

        Args:
            search: Trecho do nome (sem diferenciar maiúsculas) ou do CPF

        Returns:
            List[Athlete]: Fichas encontradas
        """
        pass

    @abstractmethod
    async def get_by_id(self, athlete_id: int) -> Optional[Athlete]:
        """
        Obtém uma ficha pelo id.

        Returns:
            Optional[Athlete]: Ficha encontrada ou None
        """
        pass

    @abstractmethod
    async def delete_by_id(self, athlete_id: int) -> bool:
        """
        Remove definitivamente uma ficha.

        Returns:
            bool: True se uma linha foi removida
        """
        pass
