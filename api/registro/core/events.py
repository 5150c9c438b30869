"""
Ciclo de vida da aplicação: inicialização e encerramento.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator
from fastapi import FastAPI
from loguru import logger

from registro.core.config import settings
from registro.infrastructure.database.session import init_db, close_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Inicializa recursos no startup e os libera no shutdown.

    O engine vem de app.state; quando a aplicação recebeu só uma fábrica
    de sessões (testes), o banco é responsabilidade de quem a criou.
    """
    engine = getattr(app.state, "engine", None)
    sink_id = None

    try:
        logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Ambiente: {settings.ENVIRONMENT}")

        if engine is not None:
            await init_db(engine)
            logger.info("Banco de dados inicializado")

        sink_id = logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            level=settings.LOG_LEVEL
        )

        logger.success("Aplicação iniciada corretamente")
        _print_available_urls()
    except Exception as e:
        logger.error(f"Erro durante startup: {e}")
        logger.exception("Detalhe do erro:")
        raise

    yield

    logger.info("Encerrando aplicação...")
    if engine is not None:
        await close_db(engine)
        logger.info("Conexões de banco de dados fechadas")
    logger.success("Aplicação encerrada corretamente")
    if sink_id is not None:
        logger.remove(sink_id)


def _print_available_urls() -> None:
    """Mostra as URLs disponíveis da aplicação."""
    access_host = "localhost" if settings.HOST == "0.0.0.0" else settings.HOST
    base_url = f"http://{access_host}:{settings.PORT}"

    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONÍVEIS:</green></bold>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Formulário:  {base_url}/</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/health</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
