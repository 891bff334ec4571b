"""Operaciones por recurso de la API de Toshl.

Responsabilidad:
- Traducir cada operación (accounts, budgets, categories, entries) a un
  verbo de `ResourceClient` con su ruta y query string.
- Decodificar el JSON devuelto a `dict` / `list[dict]` planos; no hay
  esquemas por recurso.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Mapping
from urllib.parse import urlencode

from toshl.core.domain.errors import ResponseDecodeError
from toshl.core.services.resource_client import ResourceClient


def _format_query_value(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_format_query_value(item) for item in value)
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> str | None:
    """Codifica `params` como query string (fechas en `YYYY-MM-DD`, listas separadas por comas).

    Los valores `None` se descartan. Devuelve `None` si no queda nada.
    """

    if not params:
        return None
    pairs = [(key, _format_query_value(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return None
    return urlencode(pairs)


def _decode(body: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise ResponseDecodeError(f"response is not valid JSON: {exc}", body) from exc


def _decode_object(body: str) -> dict[str, Any]:
    data = _decode(body)
    if not isinstance(data, dict):
        raise ResponseDecodeError("expected a JSON object", body)
    return data


def _decode_pages(bodies: list[str]) -> list[dict[str, Any]]:
    items: list[dict[str, Any]] = []
    for body in bodies:
        data = _decode(body)
        if not isinstance(data, list):
            raise ResponseDecodeError("expected a JSON array", body)
        items.extend(data)
    return items


def _encode(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False)


def _resource_id(resource: Mapping[str, Any]) -> str:
    resource_id = resource.get("id")
    if not resource_id:
        raise ValueError("resource has no 'id'")
    return str(resource_id)


class ToshlClient:
    """Cliente de alto nivel: accounts, budgets, categories y entries."""

    def __init__(self, resources: ResourceClient) -> None:
        self._resources = resources

    @classmethod
    def from_token(cls, token: str, **overrides: Any) -> ToshlClient:
        return cls(ResourceClient.from_token(token, **overrides))

    @property
    def resources(self) -> ResourceClient:
        return self._resources

    def close(self) -> None:
        self._resources.close()

    def __enter__(self) -> ToshlClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _list(self, path: str, params: Mapping[str, Any] | None) -> list[dict[str, Any]]:
        return _decode_pages(self._resources.fetch_collection(path, build_query(params)))

    def _get(self, path: str) -> dict[str, Any]:
        return _decode_object(self._resources.fetch_one(path))

    # Accounts

    def accounts(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        return self._list("accounts", params)

    def get_account(self, account_id: str) -> dict[str, Any]:
        return self._get(f"accounts/{account_id}")

    def create_account(self, payload: Mapping[str, Any]) -> str:
        """Crea una cuenta y devuelve su id."""

        return self._resources.create("accounts", _encode(payload))

    def search_account(self, name: str) -> dict[str, Any] | None:
        """Primera cuenta cuyo nombre coincide exactamente con `name`."""

        for account in self.accounts():
            if account.get("name") == name:
                return account
        return None

    def update_account(self, account: Mapping[str, Any]) -> dict[str, Any]:
        body = self._resources.replace(f"accounts/{_resource_id(account)}", _encode(account))
        return _decode_object(body)

    def delete_account(self, account_id: str) -> None:
        self._resources.delete(f"accounts/{account_id}")

    def move_account(self, account_id: str, position: int) -> None:
        self._resources.submit(f"accounts/{account_id}/move", _encode({"position": position}))

    def reorder_accounts(self, order: list[str]) -> None:
        self._resources.submit("accounts/reorder", _encode({"order": order}))

    def merge_accounts(self, accounts: list[str], account: str) -> None:
        """Fusiona `accounts` en la cuenta `account`."""

        self._resources.submit("accounts/merge", _encode({"accounts": accounts, "account": account}))

    # Budgets

    def budgets(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        return self._list("budgets", params)

    def get_budget(self, budget_id: str) -> dict[str, Any]:
        return self._get(f"budgets/{budget_id}")

    # Categories

    def categories(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        return self._list("categories", params)

    def get_category(self, category_id: str) -> dict[str, Any]:
        return self._get(f"categories/{category_id}")

    def create_category(self, payload: Mapping[str, Any]) -> str:
        return self._resources.create("categories", _encode(payload))

    def update_category(self, category: Mapping[str, Any]) -> dict[str, Any]:
        body = self._resources.replace(f"categories/{_resource_id(category)}", _encode(category))
        return _decode_object(body)

    def delete_category(self, category_id: str) -> None:
        self._resources.delete(f"categories/{category_id}")

    def merge_categories(self, categories: list[str], category: str) -> None:
        self._resources.submit(
            "categories/merge",
            _encode({"categories": categories, "category": category}),
        )

    # Entries

    def entries(self, from_date: date, to_date: date, **params: Any) -> list[dict[str, Any]]:
        """Todas las entradas entre `from_date` y `to_date`, recorriendo todas las páginas."""

        return self._list("entries", {"from": from_date, "to": to_date, **params})

    def create_entry(self, payload: Mapping[str, Any]) -> str:
        return self._resources.create("entries", _encode(payload))
