"""Cliente Python para la API de Toshl Finance.

Capas:
- `core`: dominio (modelos, errores), contratos y servicios puros.
- `adapters`: I/O real sobre httpx.
- `client`: operaciones por recurso (accounts, budgets, categories, entries).
"""

from __future__ import annotations

import logging

from toshl.client import ToshlClient
from toshl.core.config import CLIENT_VERSION, ClientSettings
from toshl.core.domain.errors import (
    ConfigurationError,
    InvalidEndpoint,
    MalformedLocation,
    PaginationLimitExceeded,
    ResponseDecodeError,
    ToshlError,
    TransportError,
    UnexpectedStatus,
)
from toshl.core.services.resource_client import ResourceClient

__version__ = CLIENT_VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClientSettings",
    "ConfigurationError",
    "InvalidEndpoint",
    "MalformedLocation",
    "PaginationLimitExceeded",
    "ResourceClient",
    "ResponseDecodeError",
    "ToshlClient",
    "ToshlError",
    "TransportError",
    "UnexpectedStatus",
    "__version__",
]
