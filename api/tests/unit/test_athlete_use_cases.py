import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from unittest.mock import AsyncMock, Mock

from registro.application.dto.athlete_dto import AthleteCreateDTO
from registro.application.use_cases.athlete_use_cases import AthleteUseCases
from registro.domain.entities.athlete import Athlete
from registro.shared.exceptions.domain import ConflictError, EntityNotFoundException


@pytest_asyncio.fixture
async def mock_db_session():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def use_cases(mock_db_session):
    return AthleteUseCases(mock_db_session, repository=AsyncMock(), pdf_service=Mock())


@pytest.mark.asyncio
async def test_register_athlete_commits_and_returns_id(use_cases, mock_db_session, athlete_payload):
    use_cases.repository.create = AsyncMock(
        return_value=Athlete(nome_completo="Ana Silva", cpf="111", id=7)
    )

    result = await use_cases.register_athlete(AthleteCreateDTO(**athlete_payload))

    assert result == 7
    created = use_cases.repository.create.call_args[0][0]
    assert created.cpf == "111"
    assert created.termo_aceite is True
    mock_db_session.commit.assert_called_once()
    mock_db_session.rollback.assert_not_called()


@pytest.mark.asyncio
async def test_register_duplicate_cpf_rolls_back(use_cases, mock_db_session, athlete_payload):
    use_cases.repository.create = AsyncMock(
        side_effect=ConflictError("UNIQUE constraint failed: athletes.cpf", field="cpf", value="111")
    )

    with pytest.raises(ConflictError):
        await use_cases.register_athlete(AthleteCreateDTO(**athlete_payload))

    mock_db_session.rollback.assert_called_once()
    mock_db_session.commit.assert_not_called()


@pytest.mark.asyncio
async def test_register_unexpected_error_rolls_back(use_cases, mock_db_session, athlete_payload):
    use_cases.repository.create = AsyncMock(side_effect=RuntimeError("disk I/O error"))

    with pytest.raises(RuntimeError):
        await use_cases.register_athlete(AthleteCreateDTO(**athlete_payload))

    mock_db_session.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_list_athletes_passes_search(use_cases):
    from datetime import datetime
    use_cases.repository.list = AsyncMock(return_value=[
        Athlete(nome_completo="Ana Silva", cpf="111", id=1, created_at=datetime(2026, 1, 1))
    ])

    result = await use_cases.list_athletes("ana")

    use_cases.repository.list.assert_called_once_with("ana")
    assert [a.id for a in result] == [1]
    assert result[0].termo_aceite is False


@pytest.mark.asyncio
async def test_delete_missing_athlete_is_not_an_error(use_cases, mock_db_session):
    use_cases.repository.delete_by_id = AsyncMock(return_value=False)

    result = await use_cases.delete_athlete(999)

    assert result is False
    mock_db_session.commit.assert_called_once()


@pytest.mark.asyncio
async def test_export_pdf(use_cases):
    use_cases.repository.get_by_id = AsyncMock(
        return_value=Athlete(nome_completo="Ana Silva", cpf="111", id=1)
    )
    use_cases.pdf_service.render = Mock(return_value=b"%PDF-1.7")

    filename, content = await use_cases.export_athlete_pdf(1)

    assert filename == "ficha_Ana_Silva.pdf"
    assert content == b"%PDF-1.7"


@pytest.mark.asyncio
async def test_export_pdf_unknown_athlete(use_cases):
    use_cases.repository.get_by_id = AsyncMock(return_value=None)

    with pytest.raises(EntityNotFoundException) as exc_info:
        await use_cases.export_athlete_pdf(42)

    assert exc_info.value.status_code == 404
    use_cases.pdf_service.render.assert_not_called()
