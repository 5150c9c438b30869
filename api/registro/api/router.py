"""
Router principal da API.
"""
from fastapi import APIRouter

from registro.api.endpoints import athletes


api_router = APIRouter()

api_router.include_router(athletes.router)
