"""Fachada de recursos: los verbos que usa la capa de cada recurso.

Flujo:
- ResourceClient -> RequestFactory -> Transport
  -> [parse_location_id en create | PaginationWalker en colecciones].

Ningún verbo decodifica JSON: se devuelve texto crudo y la capa que llama
lo interpreta. Solo los verbos de escritura validan el status.
"""

from __future__ import annotations

from typing import Any

from toshl.adapters.http_client import RequestFactory, build_http_client
from toshl.adapters.transport import HttpxTransport
from toshl.core.config import ClientSettings, load_settings
from toshl.core.domain.models import Endpoint, HttpMethod, RawResponse
from toshl.core.interfaces.transport import Transport
from toshl.core.services.links import parse_location_id
from toshl.core.services.pagination import PaginationWalker


class ResourceClient:
    """Composición de RequestFactory, Transport y PaginationWalker.

    Sin estado mutable entre llamadas: puede compartirse entre hilos.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._factory = RequestFactory.from_settings(self._settings)

        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport(build_http_client(self._settings))
            transport = self._owned_transport
        self._transport = transport

        self._walker = PaginationWalker(
            self._transport,
            self._factory,
            max_pages=self._settings.max_pages,
        )

    @classmethod
    def from_token(
        cls,
        token: str,
        *,
        transport: Transport | None = None,
        **overrides: Any,
    ) -> ResourceClient:
        """Atajo: settings a partir del token y overrides (base_url, timeout_seconds...)."""

        settings = load_settings(token=token, **overrides)
        return cls(settings, transport=transport)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def transport(self) -> Transport:
        return self._transport

    def _send(
        self,
        method: HttpMethod,
        path: str,
        *,
        query: str | None = None,
        body: str | None = None,
    ) -> RawResponse:
        request = self._factory.build(method, Endpoint(path=path, query=query), body)
        return self._transport.send(request, check_status=method.is_write)

    def fetch_one(self, path: str, query: str | None = None) -> str:
        """GET de un único recurso; el status no se valida."""

        return self._send(HttpMethod.GET, path, query=query).text

    def fetch_collection(self, path: str, query: str | None = None) -> list[str]:
        """GET de todas las páginas de una colección, en orden."""

        return self._walker.walk(path, query)

    def create(self, path: str, body: str) -> str:
        """POST y devuelve el id extraído de la cabecera `Location`."""

        response = self._send(HttpMethod.POST, path, body=body)
        return parse_location_id(response.header("Location"))

    def submit(self, path: str, body: str) -> str:
        """POST de una acción que no crea recurso (move/reorder/merge)."""

        return self._send(HttpMethod.POST, path, body=body).text

    def replace(self, path: str, body: str) -> str:
        """PUT y devuelve la representación actualizada tal cual."""

        return self._send(HttpMethod.PUT, path, body=body).text

    def delete(self, path: str) -> None:
        self._send(HttpMethod.DELETE, path)

    def close(self) -> None:
        """Cierra el cliente httpx solo si lo creó esta fachada."""

        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> ResourceClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
