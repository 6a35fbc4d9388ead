"""Errores tipados del cliente isEven.

Por qué una jerarquía propia:
- La CLI y los llamadores capturan `IsEvenError` sin conocer httpx ni pydantic.
- Cada tipo identifica una sola causa: transporte, status HTTP, o payload.
"""

from __future__ import annotations


class IsEvenError(Exception):
    """Base de todos los errores del cliente."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(IsEvenError):
    """Fallo de red/transporte (conexión rechazada, timeout, DNS)."""

    def __init__(self, *, url: str, original: Exception) -> None:
        super().__init__(f"request to {url} failed: {original}", url=url)
        self.original = original


class BadStatusError(IsEvenError):
    """El servicio respondió con un status HTTP no exitoso."""

    def __init__(self, *, url: str, status_code: int, api_message: str | None = None) -> None:
        message = f"{url} responded with HTTP {status_code}"
        if api_message:
            message = f"{message}: {api_message}"
        super().__init__(message, url=url)
        self.status_code = status_code
        self.api_message = api_message


class ParseError(IsEvenError):
    """El body de una respuesta exitosa no es el JSON esperado."""

    def __init__(self, *, url: str, status_code: int, body: str, reason: str) -> None:
        super().__init__(f"could not parse response from {url}: {reason}", url=url)
        self.status_code = status_code
        self.body = body
