"""
Data Transfer Objects (DTOs) da camada de aplicação.
"""
from .athlete_dto import (
    AthleteCreateDTO,
    AthleteResponseDTO,
    RegisterResponseDTO,
    SuccessResponseDTO,
    ErrorResponseDTO,
)

__all__ = [
    "AthleteCreateDTO",
    "AthleteResponseDTO",
    "RegisterResponseDTO",
    "SuccessResponseDTO",
    "ErrorResponseDTO",
]
