"""Taxonomía de errores del cliente.

Reglas:
- Todo error se propaga a quien llama; el Core no registra-y-continúa.
- `MalformedLocation` es distinto de `UnexpectedStatus`: la escritura sí se
  aplicó en el servidor, solo se desconoce el id creado.
"""

from __future__ import annotations


class ToshlError(Exception):
    """Base de todos los errores del cliente."""


class ConfigurationError(ToshlError):
    """Configuración inválida (p.ej. base URL mal formada)."""


class InvalidEndpoint(ToshlError):
    """La ruta o el query de una llamada no forman una URL válida."""


class TransportError(ToshlError):
    """Fallo de red: DNS, conexión rechazada, timeout, lectura cortada."""


class UnexpectedStatus(ToshlError):
    """Una operación de escritura recibió un status fuera de [200, 300)."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected status {status_code}: {body[:200]}")


class MalformedLocation(ToshlError):
    """No se pudo extraer el id del recurso desde la cabecera Location."""

    def __init__(self, location: str | None, reason: str) -> None:
        self.location = location
        super().__init__(f"cannot parse resource id from Location {location!r}: {reason}")


class PaginationLimitExceeded(ToshlError):
    """El servidor sigue ofreciendo páginas tras alcanzar `max_pages`."""

    def __init__(self, max_pages: int) -> None:
        self.max_pages = max_pages
        super().__init__(f"collection has more than {max_pages} pages")


class ResponseDecodeError(ToshlError):
    """El cuerpo devuelto no es el JSON que espera la capa de recursos."""

    def __init__(self, message: str, body: str) -> None:
        self.body = body
        super().__init__(message)
