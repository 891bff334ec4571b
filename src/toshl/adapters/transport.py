"""Transporte HTTP real sobre `httpx.Client`.

Notas:
- La respuesta se abre en modo stream, se drena completa con `read()` y se
  cierra en `finally` en todos los caminos, incluidos los de error.
- Los reintentos son responsabilidad de quien llama.
"""

from __future__ import annotations

import logging

import httpx

from toshl.core.domain.errors import TransportError, UnexpectedStatus
from toshl.core.domain.models import RawResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Implementación de `core.interfaces.transport.Transport` con httpx."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        return self._client

    def send(self, request: httpx.Request, *, check_status: bool) -> RawResponse:
        logger.debug("%s %s", request.method, request.url)
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.url}: {exc}") from exc

        try:
            content = response.read()
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.url}: {exc}") from exc
        finally:
            response.close()

        raw = RawResponse(
            status_code=response.status_code,
            headers=response.headers.items(),
            content=content,
            encoding=response.encoding or "utf-8",
        )
        logger.debug("%s %s -> %s", request.method, request.url, raw.status_code)

        if check_status and not raw.is_success:
            raise UnexpectedStatus(raw.status_code, raw.text)
        return raw

    def close(self) -> None:
        self._client.close()
