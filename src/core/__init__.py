"""Capa Core: configuración, dominio, errores y contratos."""
