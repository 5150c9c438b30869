"""
Script para inicializar o banco de dados.

Uso:
    python -m scripts.init_db
"""
import asyncio
from loguru import logger

from registro.core.config import settings
from registro.infrastructure.database.session import create_engine, init_db, close_db


async def main():
    """Cria a tabela de atletas se ainda não existir."""
    logger.info(f"Inicializando banco de dados em {settings.DATABASE_URL}...")
    engine = create_engine(settings.DATABASE_URL)

    try:
        await init_db(engine)
        logger.success("Banco de dados inicializado corretamente")
    except Exception as e:
        logger.error(f"Erro ao inicializar banco de dados: {e}")
        raise
    finally:
        await close_db(engine)


if __name__ == "__main__":
    asyncio.run(main())
