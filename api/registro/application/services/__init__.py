"""
Serviços da camada de aplicação.
"""
from .athlete_draft import AthleteDraft
from .athlete_pdf_service import AthletePdfService

__all__ = ["AthleteDraft", "AthletePdfService"]
