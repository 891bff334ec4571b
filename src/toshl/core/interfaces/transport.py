"""Contrato del transporte HTTP.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- La fachada y el paginador dependen de esta abstracción; en tests se
  inyecta un transporte falso o un `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from toshl.core.domain.models import RawResponse

if TYPE_CHECKING:
    import httpx


@runtime_checkable
class Transport(Protocol):
    """Ejecuta exactamente un intercambio request/response.

    Reglas de diseño:
    - Fallos de red o timeout -> `TransportError`; nunca reintenta.
    - Con `check_status=True`, un status fuera de [200, 300) -> `UnexpectedStatus`.
    - Con `check_status=False` devuelve el cuerpo sea cual sea el status.
    - Devuelve siempre cabeceras junto al cuerpo.
    """

    def send(self, request: httpx.Request, *, check_status: bool) -> RawResponse:
        ...
