"""
Casos de uso da aplicação.
"""
from .athlete_use_cases import AthleteUseCases

__all__ = ["AthleteUseCases"]
