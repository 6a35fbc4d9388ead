"""Adaptadores de I/O (HTTP) hacia la API isEven."""
