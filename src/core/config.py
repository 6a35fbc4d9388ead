"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.

Nota:
- Todo tiene default: la herramienta funciona sin ninguna variable definida.
- No hay archivo de configuración ni estado persistido.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_URL = "https://api.isevenapi.xyz/api/iseven/"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ISEVEN_API_",
        extra="ignore",
        case_sensitive=False,
    )

    api_base_url: str = Field(
        default=API_URL,
        min_length=8,
        description="Base URL del endpoint isEven; el número se agrega al final del path.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="iseven-api/0.7 (+https://isevenapi.xyz)",
        min_length=1,
        description="User-Agent enviado al servicio.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("api_base_url")
    @classmethod
    def _require_http_scheme(cls, value: str) -> str:
        value = value.strip()
        if not value.lower().startswith(("http://", "https://")):
            raise ValueError(f"api_base_url must be an http(s) URL: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
