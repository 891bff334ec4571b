"""Servicios del Core: parsing de cabeceras, paginación y la fachada de recursos."""
