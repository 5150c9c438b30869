"""
Configuração central da aplicação.
Lê variáveis de ambiente (ou arquivo .env) e fornece valores padrão
para rodar localmente com um arquivo SQLite.
"""
import json
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Configuração da aplicação.

    A persistência é um único arquivo SQLite local; DATABASE_URL pode
    apontar para outro arquivo (ou outro banco suportado pelo SQLAlchemy).
    """

    # Aplicação
    APP_NAME: str = Field(default="Judô Estrelas do Norte - Cadastro de Atletas")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    # Banco de dados
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./sports_management.db")

    # CORS (aceita lista JSON, lista separada por vírgulas ou "*")
    CORS_ORIGINS: str = Field(default="*")

    # Interface estática (build do front-end)
    STATIC_DIR: str = Field(default="dist")

    # A foto chega como data URI dentro do JSON; mesmo teto do corpo original (10 MB)
    MAX_PHOTO_LENGTH: int = Field(default=10 * 1024 * 1024)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    class Config:
        """Configuração do Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Interpreta a configuração de CORS.
    Aceita "*" para todas as origens ou uma lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        return [origin.strip() for origin in cors_string.split(",")]


settings = Settings()
