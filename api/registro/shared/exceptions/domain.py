"""
Exceções relacionadas à lógica de domínio.

Todas respondem com status 500 por padrão: o envelope de erro da API de
cadastro não diferencia duplicidade de dado malformado.
"""
from typing import Any, Optional

from registro.shared.exceptions.base import AppException


class DomainException(AppException):
    """Exceção base para erros de domínio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=500,
            error_code=error_code,
            details=details
        )


class ValidationError(DomainException):
    """Campo obrigatório ausente ou valor fora do formato esperado."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details
        )


class ConflictError(DomainException):
    """
    Violação de unicidade (CPF já cadastrado).

    A mensagem é a do banco, repassada sem alteração.
    """

    def __init__(self, message: str, field: str, value: Any):
        super().__init__(
            message=message,
            error_code="CONFLICT",
            details={"field": field, "value": str(value)}
        )


class EntityNotFoundException(DomainException):
    """Exceção quando uma entidade não é encontrada."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} com ID {entity_id} não encontrado",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)}
        )
        self.status_code = 404
