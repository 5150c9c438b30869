"""
Sobe a API com recarga automática para desenvolvimento local.

Uso:
    python -m scripts.run_dev
    python -m scripts.run_dev --port 8000 --no-reload
"""
import argparse

import uvicorn
from loguru import logger

from registro.core.config import settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Servidor de desenvolvimento do cadastro de atletas")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--no-reload", dest="reload", action="store_false",
                        help="Desliga a recarga ao salvar arquivos")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logger.info(f"Banco: {settings.DATABASE_URL} | interface: {settings.STATIC_DIR}")

    uvicorn.run(
        "main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
