"""
Endpoints de inscrição e administração de atletas.
"""
import re
import unicodedata
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response

from registro.application.dto.athlete_dto import (
    AthleteCreateDTO,
    AthleteResponseDTO,
    ErrorResponseDTO,
    RegisterResponseDTO,
    SuccessResponseDTO,
)
from registro.application.use_cases.athlete_use_cases import AthleteUseCases
from registro.api.dependencies.use_case_deps import get_athlete_use_cases


router = APIRouter(tags=["Atletas"], responses={500: {"model": ErrorResponseDTO}})

# Acima de 18 dígitos não cabe no INTEGER do SQLite; nenhuma ficha teria esse id
_INTEGER_ID = re.compile(r"-?[0-9]{1,18}")


@router.post(
    "/register",
    response_model=RegisterResponseDTO,
    summary="Inscrever um atleta"
)
async def register_athlete(
    dto: AthleteCreateDTO,
    use_cases: AthleteUseCases = Depends(get_athlete_use_cases)
) -> RegisterResponseDTO:
    """
    Recebe a ficha completa do formulário e grava a inscrição.

    Args:
        dto: Ficha do atleta
        use_cases: Casos de uso de atletas (injetado)

    Returns:
        RegisterResponseDTO: {"success": true, "id": <id>}
    """
    athlete_id = await use_cases.register_athlete(dto)
    return RegisterResponseDTO(id=athlete_id)


@router.get(
    "/athletes",
    response_model=List[AthleteResponseDTO],
    summary="Listar atletas inscritos"
)
async def list_athletes(
    search: Optional[str] = Query(None, max_length=255, description="Trecho do nome ou do CPF"),
    use_cases: AthleteUseCases = Depends(get_athlete_use_cases)
) -> List[AthleteResponseDTO]:
    """Todas as fichas, das mais recentes para as mais antigas."""
    return await use_cases.list_athletes(search)


@router.delete(
    "/athletes/{athlete_id}",
    response_model=SuccessResponseDTO,
    summary="Excluir um atleta"
)
async def delete_athlete(
    athlete_id: str,
    use_cases: AthleteUseCases = Depends(get_athlete_use_cases)
) -> SuccessResponseDTO:
    """
    Exclui a ficha. Responde sucesso mesmo quando o id não existe,
    inclusive quando nem é um número.
    """
    if not _INTEGER_ID.fullmatch(athlete_id):
        return SuccessResponseDTO()

    await use_cases.delete_athlete(int(athlete_id))
    return SuccessResponseDTO()


@router.get(
    "/athletes/{athlete_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}, 404: {"model": ErrorResponseDTO}},
    summary="Exportar a ficha em PDF"
)
async def export_athlete_pdf(
    athlete_id: int,
    use_cases: AthleteUseCases = Depends(get_athlete_use_cases)
) -> Response:
    """Ficha cadastral pronta para download."""
    filename, content = await use_cases.export_athlete_pdf(athlete_id)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(filename)}
    )


def _content_disposition(filename: str) -> str:
    """Anexo com nome ASCII de reserva e o nome original em UTF-8 (RFC 6266)."""
    fallback = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    fallback = fallback.replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
