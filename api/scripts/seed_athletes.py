"""
Script para cadastrar atletas de exemplo a partir de um arquivo JSON.

Uso:
    python -m scripts.seed_athletes --file data/atletas.json
    python -m scripts.seed_athletes --file data/atletas.json --dry-run

Cada item do JSON é uma ficha parcial; os campos ausentes recebem os
valores iniciais do formulário. O termo de aceite é exigido como no
formulário. CPFs já cadastrados são ignorados, então o script pode ser
executado várias vezes.
"""
import asyncio
import argparse
import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError as SchemaValidationError

from registro.application.services.athlete_draft import AthleteDraft
from registro.application.use_cases.athlete_use_cases import AthleteUseCases
from registro.core.config import settings
from registro.infrastructure.database.session import (
    create_engine,
    create_session_factory,
    init_db,
    close_db,
)
from registro.shared.exceptions.domain import ConflictError, ValidationError


def load_athletes_data(file_path: Path) -> list:
    """Lê a lista de fichas do arquivo JSON."""
    with file_path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("O arquivo deve conter uma lista de fichas")
    return data


def build_payloads(items: list) -> list:
    """Passa cada item pelo mesmo rascunho usado no formulário."""
    draft = AthleteDraft()
    payloads = []
    for index, item in enumerate(items, start=1):
        draft.reset()
        try:
            draft.merge(item)
            payloads.append(draft.to_payload())
        except (ValidationError, SchemaValidationError) as e:
            logger.warning(f"Ficha {index} ignorada: {e}")
    return payloads


async def seed(file_path: Path, dry_run: bool = False) -> int:
    """
    Cadastra as fichas do arquivo.

    Returns:
        int: Quantidade de fichas novas
    """
    payloads = build_payloads(load_athletes_data(file_path))
    logger.info(f"{len(payloads)} fichas válidas em {file_path}")

    if dry_run:
        for dto in payloads:
            logger.info(f"[dry-run] {dto.nome_completo} ({dto.cpf})")
        return 0

    engine = create_engine(settings.DATABASE_URL)
    session_factory = create_session_factory(engine)
    created = 0

    try:
        await init_db(engine)
        for dto in payloads:
            async with session_factory() as session:
                try:
                    athlete_id = await AthleteUseCases(session).register_athlete(dto)
                    created += 1
                    logger.info(f"Cadastrado {dto.nome_completo} (id={athlete_id})")
                except ConflictError:
                    logger.info(f"CPF {dto.cpf} já cadastrado, ignorando")
    finally:
        await close_db(engine)

    logger.success(f"{created} fichas novas cadastradas")
    return created


def main():
    parser = argparse.ArgumentParser(description="Cadastra atletas a partir de um JSON")
    parser.add_argument("--file", required=True, type=Path, help="Arquivo JSON com as fichas")
    parser.add_argument("--dry-run", action="store_true", help="Só valida, sem gravar")
    args = parser.parse_args()

    asyncio.run(seed(args.file, dry_run=args.dry_run))


if __name__ == "__main__":
    main()
