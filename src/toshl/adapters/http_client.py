"""Construcción de peticiones y del cliente httpx.

Responsabilidad:
- `build_http_client`: único punto donde se crea el `httpx.Client` (timeout,
  redirecciones) a partir de `ClientSettings`.
- `RequestFactory`: arma cada `httpx.Request` con las cabeceras obligatorias.
  Es construcción pura, sin I/O.
"""

from __future__ import annotations

import httpx

from toshl.core.config import ClientSettings
from toshl.core.domain.errors import ConfigurationError, InvalidEndpoint
from toshl.core.domain.models import Endpoint, HttpMethod


def build_http_client(settings: ClientSettings) -> httpx.Client:
    """Crea un `httpx.Client` con el timeout configurado.

    No sigue redirecciones: un 3xx sobre un POST no debe reenviarse como GET.
    """

    return httpx.Client(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=False,
    )


def validate_base_url(base_url: str) -> str:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"invalid base URL {base_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"invalid base URL {base_url!r}: expected http(s)://host")
    return base_url.rstrip("/")


class RequestFactory:
    """Arma peticiones autenticadas contra la base URL de la API."""

    def __init__(self, *, base_url: str, token: str, user_agent: str) -> None:
        self._base_url = validate_base_url(base_url)
        self._token = token
        self._user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> RequestFactory:
        return cls(
            base_url=settings.base_url,
            token=settings.token,
            user_agent=settings.user_agent,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def build(
        self,
        method: HttpMethod,
        endpoint: Endpoint,
        body: str | None = None,
    ) -> httpx.Request:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "User-Agent": self._user_agent,
        }
        content: bytes | None = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = body.encode("utf-8")

        url = endpoint.url(self._base_url)
        # El query (cursor incluido) va tal cual en la URL, sin re-codificar.
        try:
            return httpx.Request(method.value, url, headers=headers, content=content)
        except httpx.InvalidURL as exc:
            raise InvalidEndpoint(f"invalid endpoint {url!r}: {exc}") from exc
