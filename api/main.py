"""
Ponto de entrada principal da aplicação FastAPI.
Configura a aplicação, middlewares, rotas e ciclo de vida.
"""
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from registro.core.config import settings, get_cors_origins
from registro.core.events import lifespan
from registro.api.router import api_router
from registro.api.middlewares.error_handler import ErrorHandlerMiddleware
from registro.infrastructure.database.session import create_engine, create_session_factory
from registro.shared.exceptions.base import AppException


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


def create_application(
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
    static_dir: Optional[str] = None
) -> FastAPI:
    """
    Factory para criar e configurar a aplicação FastAPI.

    Args:
        session_factory: Fábrica de sessões já pronta (ex.: banco temporário em testes).
            Sem ela, o engine é criado a partir de DATABASE_URL e as tabelas
            são criadas no startup.
        static_dir: Diretório do build do formulário (padrão: STATIC_DIR)

    Returns:
        FastAPI: Instância configurada da aplicação
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Inscrição e administração de atletas",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if session_factory is None:
        engine = create_engine(settings.DATABASE_URL, echo=settings.DEBUG)
        application.state.engine = engine
        session_factory = create_session_factory(engine)
    application.state.session_factory = session_factory

    # CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(settings.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Erros não tratados viram o envelope {success: false, error}
    application.add_middleware(ErrorHandlerMiddleware)

    application.include_router(api_router, prefix="/api")

    @application.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.message}
        )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning(f"Requisição inválida em {request.url.path}: {message}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": message}
        )

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Verifica o estado da aplicação."""
        return {
            "status": "healthy",
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT
        }

    # O build do formulário é montado por último para não encobrir /api
    static_path = Path(static_dir or settings.STATIC_DIR)
    if static_path.is_dir():
        application.mount("/", StaticFiles(directory=static_path, html=True), name="static")
    else:
        logger.debug(f"Diretório estático ausente, interface não servida: {static_path}")

    return application


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
