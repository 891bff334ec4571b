"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Objetos inmutables (frozen) y validados para lo poco que el Core necesita
  modelar: el endpoint de cada llamada y la respuesta cruda del servidor.
- El cuerpo de los recursos nunca se modela aquí: viaja como texto JSON y lo
  decodifica la capa que llama.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    """Verbos HTTP que usa el cliente."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def is_write(self) -> bool:
        """True para los verbos que mutan estado en el servidor."""

        return self is not HttpMethod.GET


class Endpoint(BaseModel):
    """Ruta de un recurso más un query string opcional.

    Se construye por llamada y no se modifica: cada página de una colección
    paginada es un `Endpoint` nuevo con el cursor como query.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(
        ...,
        description="Ruta relativa del recurso (p.ej. 'accounts' o 'accounts/42').",
    )
    query: str | None = Field(
        default=None,
        description="Query string ya codificado, sin el '?' inicial.",
    )

    def url(self, base_url: str) -> str:
        """Une base URL y ruta con una sola '/' y añade `?query` si hay query."""

        url = base_url.rstrip("/") + "/" + self.path.lstrip("/")
        if self.query:
            url = f"{url}?{self.query}"
        return url


class RawResponse(BaseModel):
    """Resultado de un intercambio HTTP.

    Las cabeceras se guardan con claves en minúscula; `header()` hace la
    búsqueda sin distinguir mayúsculas.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=100, le=599)
    headers: dict[str, str] = Field(default_factory=dict)
    content: bytes = Field(default=b"")
    encoding: str = Field(default="utf-8", min_length=1)

    @field_validator("headers", mode="before")
    @classmethod
    def _lower_header_names(cls, value: Any) -> Any:
        if value is None:
            return {}
        items = value.items() if hasattr(value, "items") else value
        return {str(name).lower(): str(val) for name, val in items}

    def header(self, name: str) -> str:
        """Valor de la cabecera `name`, o cadena vacía si no viene."""

        return self.headers.get(name.lower(), "")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        if not self.content:
            return ""
        try:
            return self.content.decode(self.encoding)
        except (LookupError, UnicodeDecodeError):
            return self.content.decode("utf-8", errors="replace")
