"""
Gestão do engine e das sessões de banco de dados.

Nada aqui é criado em tempo de import: a aplicação constrói o engine e a
fábrica de sessões uma única vez e os injeta nos handlers via app.state.
"""
from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base


# Base para modelos do SQLAlchemy
Base = declarative_base()


def _create_engine_args(database_url: str, echo: bool) -> dict:
    """
    Monta os argumentos do engine conforme o tipo de banco.
    O SQLite local não usa pool configurável.
    """
    args = {
        "echo": echo,
        "future": True,
    }

    if database_url.startswith("sqlite"):
        args["connect_args"] = {"check_same_thread": False}
    else:
        args["pool_pre_ping"] = True

    return args


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Cria o engine assíncrono.

    Args:
        database_url: URL SQLAlchemy (ex.: sqlite+aiosqlite:///./sports_management.db)
        echo: Loga o SQL emitido

    Returns:
        AsyncEngine: Engine configurado
    """
    engine = create_async_engine(database_url, **_create_engine_args(database_url, echo))

    if database_url.startswith("sqlite"):
        # Espera o lock de escrita em vez de falhar com "database is locked"
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA busy_timeout = 5000")
            cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Fábrica de sessões ligada ao engine informado."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Gerador de sessões de banco de dados.
    Usado como dependência no FastAPI; a fábrica vem de app.state.

    Yields:
        AsyncSession: Sessão de banco de dados
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine) -> None:
    """Cria as tabelas que ainda não existem."""
    # Registra os modelos no metadata antes do create_all
    from registro.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """Fecha as conexões do engine."""
    await engine.dispose()
