"""Adaptadores de I/O (httpx)."""
