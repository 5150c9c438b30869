"""
Configuração de fixtures para pytest.
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from registro.infrastructure.database.session import (
    create_engine,
    create_session_factory,
    init_db,
    close_db,
)


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine sobre um arquivo SQLite temporário, com as tabelas criadas.
    Um arquivo novo por teste.
    """
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await close_db(engine)


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory, tmp_path):
    """Aplicação com a fábrica de sessões do banco temporário injetada."""
    from main import create_application
    return create_application(
        session_factory=session_factory,
        static_dir=str(tmp_path / "sem-interface")
    )


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def athlete_payload() -> dict:
    """Ficha completa como o formulário envia."""
    return {
        "nome_completo": "Ana Silva",
        "cpf": "111",
        "data_nascimento": "2012-03-14",
        "sexo": "Feminino",
        "whatsapp": "(96) 99999-0000",
        "peso": 42.5,
        "altura": 1.52,
        "tam_kimono": "M1",
        "num_calcado": "35",
        "foto_url": "",
        "lado_dominante": "Canhoto",
        "graduacao_faixa": "Amarela",
        "numero_nis": "123.45678.90-1",
        "logradouro": "Rua das Palmeiras",
        "numero": "45",
        "bairro": "Centro",
        "cidade": "Macapá",
        "uf": "AP",
        "escola": "EE Prof. Maria Lima",
        "serie_ano": "6º ano",
        "turno_estudo": "Tarde",
        "restricao_medica": "",
        "possui_alergias": "Dipirona",
        "tipo_sanguineo": "O+",
        "contato_emergencia_nome": "Carlos Silva",
        "contato_emergencia_tel": "(96) 98888-0000",
        "responsavel_legal": "Carlos Silva",
        "responsavel_cpf": "222",
        "termo_aceite": True,
    }
