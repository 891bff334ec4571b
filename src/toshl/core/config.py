"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los servicios.
- Los adaptadores (RequestFactory, cliente httpx) leen la config de forma consistente.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from toshl.core.domain.errors import ConfigurationError

CLIENT_NAME = "toshl-client"
CLIENT_VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.toshl.com"


def default_user_agent() -> str:
    return f"{CLIENT_NAME}/{CLIENT_VERSION}"


class ClientSettings(BaseSettings):
    """Configuración central del cliente.

    Variables de entorno con prefijo `TOSHL_` (p.ej. `TOSHL_TOKEN`,
    `TOSHL_TIMEOUT_SECONDS`); también se leen desde `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOSHL_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    token: str = Field(
        ...,
        min_length=1,
        description="Bearer token personal; se usa tal cual durante toda la vida del cliente.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL de la API.",
    )
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default_factory=default_user_agent,
        min_length=1,
        description="User-Agent enviado en cada petición (<nombre>/<versión>).",
    )
    max_pages: int | None = Field(
        default=None,
        ge=1,
        description="Tope opcional de páginas por colección. None = sin tope.",
    )


def load_settings(**overrides: Any) -> ClientSettings:
    """Construye `ClientSettings` (env + `.env` + overrides) o falla con `ConfigurationError`."""

    try:
        return ClientSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid client settings: {exc}") from exc
