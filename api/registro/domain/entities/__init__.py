"""
Entidades do domínio.
"""
from registro.domain.entities.athlete import Athlete

__all__ = ["Athlete"]
