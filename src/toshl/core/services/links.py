"""Parsing de cabeceras `Location` y `Link`.

Funciones puras, sin I/O: se prueban contra cadenas literales.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from toshl.core.domain.errors import MalformedLocation

# Una entrada: `<url>` seguida de sus parámetros `; nombre=valor` hasta la siguiente `<`.
_LINK_ENTRY_RE = re.compile(r"<([^<>]*)>([^<>]*)")
_LINK_PARAM_RE = re.compile(r';\s*([^\s=;,]+)\s*=\s*(?:"([^"]*)"|([^\s;,]*))')


def parse_location_id(location: str | None) -> str:
    """Extrae el id del recurso creado desde la cabecera `Location`.

    `https://api.toshl.com/accounts/abc123` -> `abc123`. La ruta necesita al
    menos dos segmentos no vacíos (colección + id).
    """

    if not location or not location.strip():
        raise MalformedLocation(location, "empty header")
    try:
        path = urlsplit(location.strip()).path
    except ValueError as exc:
        raise MalformedLocation(location, str(exc)) from exc

    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        raise MalformedLocation(location, "path has no resource id segment")
    return segments[-1]


def _link_relations(params: str) -> list[str]:
    for name, quoted, bare in _LINK_PARAM_RE.findall(params):
        if name.lower() == "rel":
            return (quoted or bare).lower().split()
    return []


def extract_next_cursor(link_header: str | None) -> str:
    """Devuelve el query string de la entrada `rel="next"` de una cabecera `Link`.

    Cadena vacía cuando no hay cabecera, no hay relación `next` o su URL no
    trae query: en los tres casos no quedan más páginas.
    """

    if not link_header:
        return ""
    for match in _LINK_ENTRY_RE.finditer(link_header):
        url, params = match.group(1), match.group(2)
        if "next" not in _link_relations(params):
            continue
        _, _, query = url.partition("?")
        return query.split("#", 1)[0].strip("?")
    return ""
