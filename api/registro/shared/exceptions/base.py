"""
Exceção base para todas as exceções personalizadas da aplicação.
"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Exceção base da aplicação.
    Todas as exceções personalizadas devem herdar desta classe.

    O contrato HTTP público expõe apenas a mensagem; error_code e details
    servem para logs e para quem consome a camada de casos de uso.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Inicializa a exceção.

        Args:
            message: Mensagem de erro descritiva
            status_code: Código de status HTTP
            error_code: Código de erro interno
            details: Detalhes adicionais do erro
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)
