"""
Middleware para tratamento centralizado de erros.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger


def error_message(exc: Exception) -> str:
    """Mensagem repassada ao cliente; DBAPIError traz a do driver em .orig."""
    return str(getattr(exc, "orig", None) or exc)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Captura erros não tratados e responde com o envelope padrão."""

    async def dispatch(self, request: Request, call_next):
        """
        Processa a requisição e captura erros.

        Args:
            request: Requisição HTTP
            call_next: Próximo middleware/handler

        Returns:
            Response: Resposta HTTP
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            logger.opt(exception=exc).error(
                "Erro não tratado em {} {}", request.method, request.url.path
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"success": False, "error": error_message(exc)}
            )
