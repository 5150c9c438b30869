"""
Utilitários para datas e horas.
"""
from datetime import datetime
from typing import Optional


class DateTimeUtils:
    """Operações de data e hora usadas pela API e pela exportação."""

    DISPLAY_FORMAT = "%d/%m/%Y %H:%M:%S"

    @staticmethod
    def now_local() -> datetime:
        return datetime.now().astimezone()

    @classmethod
    def to_display(cls, dt: datetime) -> str:
        """
        Formata no padrão brasileiro (dd/mm/aaaa hh:mm:ss).

        Args:
            dt: Objeto datetime

        Returns:
            str: Data formatada
        """
        return dt.strftime(cls.DISPLAY_FORMAT)

    @staticmethod
    def from_iso_string(iso_string: str) -> Optional[datetime]:
        """
        Converte uma string ISO 8601 em datetime.

        Returns:
            Optional[datetime]: datetime ou None se a string for inválida
        """
        try:
            return datetime.fromisoformat(iso_string)
        except (ValueError, TypeError):
            return None
