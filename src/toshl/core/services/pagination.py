"""Recorrido de colecciones paginadas por cursor.

Reglas:
- Secuencial: el cursor de la página N+1 solo se conoce al leer las
  cabeceras de la página N.
- El cursor reemplaza por completo el query anterior; el servidor lo
  devuelve autocontenido (filtros incluidos).
- Si falla cualquier página se propaga el error y se descartan las
  anteriores: nunca se devuelve una lista truncada.
"""

from __future__ import annotations

import logging

from toshl.adapters.http_client import RequestFactory
from toshl.core.domain.errors import PaginationLimitExceeded
from toshl.core.domain.models import Endpoint, HttpMethod
from toshl.core.interfaces.transport import Transport
from toshl.core.services.links import extract_next_cursor

logger = logging.getLogger(__name__)


class PaginationWalker:
    """Sigue la cabecera `Link` (`rel="next"`) acumulando los cuerpos crudos."""

    def __init__(
        self,
        transport: Transport,
        request_factory: RequestFactory,
        *,
        max_pages: int | None = None,
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        self._transport = transport
        self._factory = request_factory
        self._max_pages = max_pages

    def walk(self, path: str, query: str | None = None) -> list[str]:
        bodies: list[str] = []
        endpoint = Endpoint(path=path, query=query or None)

        while True:
            request = self._factory.build(HttpMethod.GET, endpoint)
            response = self._transport.send(request, check_status=False)
            bodies.append(response.text)

            cursor = extract_next_cursor(response.header("Link"))
            if not cursor:
                break
            if self._max_pages is not None and len(bodies) >= self._max_pages:
                raise PaginationLimitExceeded(self._max_pages)

            logger.debug("%s: page %d done, next cursor %s", path, len(bodies), cursor)
            endpoint = Endpoint(path=path, query=cursor)

        return bodies
