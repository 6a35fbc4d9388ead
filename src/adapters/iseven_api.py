"""Adaptador para la API isEven (https://isevenapi.xyz).

Responsabilidad:
- Construir la URL del request a partir del número.
- Hacer un único GET (async o bloqueante) sin reintentos ni cache.
- Normalizar el body como `IsEven` y mapear fallos a errores tipados.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client, build_client
from core.config import API_URL, AppSettings
from core.domain.models import ErrorResponse, IsEven
from core.errors import BadStatusError, ParseError, TransportError

logger = logging.getLogger(__name__)

_BODY_EXCERPT_CHARS = 200


def _ensure_int(number: object) -> int:
    # bool es subclase de int pero nunca es lo que el llamador quiso enviar.
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number must be an int, got {type(number).__name__}")
    return number


def build_request_url(number: int, *, base_url: str = API_URL) -> str:
    """URL del endpoint con el número como último segmento del path."""

    number = _ensure_int(number)
    if not base_url.endswith("/"):
        base_url = f"{base_url}/"
    return f"{base_url}{number}"


def parse_response(response: httpx.Response, url: str) -> IsEven:
    """Convierte una respuesta HTTP en `IsEven` o en el error correspondiente.

    Reglas:
    - Status no 2xx -> `BadStatusError`, aunque el body no sea JSON.
    - Status 2xx con body inválido/inesperado -> `ParseError`.
    """

    status_code = response.status_code
    logger.debug("GET %s -> HTTP %s", url, status_code)

    if not response.is_success:
        try:
            api_message: str | None = ErrorResponse.model_validate_json(response.content).error
        except ValidationError:
            api_message = None
        raise BadStatusError(url=url, status_code=status_code, api_message=api_message)

    try:
        return IsEven.from_json(response.text)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise ParseError(
            url=url,
            status_code=status_code,
            body=response.text[:_BODY_EXCERPT_CHARS],
            reason=first.get("msg", str(exc)),
        ) from exc


def _check_echo(number: int, result: IsEven) -> IsEven:
    # Se confía en el flag del servicio; solo se deja constancia del desacuerdo.
    if result.number is not None and result.number != number:
        logger.warning(
            "service echoed %s for query %s; keeping its parity flag (%s)",
            result.number,
            number,
            result.parity.value,
        )
    return result


async def _get(client: httpx.AsyncClient, number: int, url: str) -> IsEven:
    try:
        response = await client.get(url)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(url=url, original=exc) from exc
    return _check_echo(number, parse_response(response, url))


def _get_blocking(client: httpx.Client, number: int, url: str) -> IsEven:
    try:
        response = client.get(url)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(url=url, original=exc) from exc
    return _check_echo(number, parse_response(response, url))


async def iseven_get(
    number: int,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> IsEven:
    """Consulta la API isEven para `number`.

    - Un request por llamada, sin reintentos.
    - Si se pasa `client`, se usa y queda abierto; si no, se crea uno efímero.

    Raises:
        TransportError, BadStatusError, ParseError.
    """

    settings = settings or AppSettings()
    url = build_request_url(number, base_url=settings.api_base_url)

    if client is not None:
        return await _get(client, number, url)
    async with build_async_client(settings) as owned:
        return await _get(owned, number, url)


def iseven_get_blocking(
    number: int,
    *,
    settings: AppSettings | None = None,
    client: httpx.Client | None = None,
) -> IsEven:
    """Variante bloqueante de `iseven_get` (mismo contrato de errores)."""

    settings = settings or AppSettings()
    url = build_request_url(number, base_url=settings.api_base_url)

    if client is not None:
        return _get_blocking(client, number, url)
    with build_client(settings) as owned:
        return _get_blocking(owned, number, url)


class IsEvenClient:
    """Cliente reutilizable: mantiene un `httpx.AsyncClient` abierto entre llamadas.

    Uso:

        async with IsEvenClient() as api:
            a, b = await asyncio.gather(api.check(41), api.check(42))

    Las llamadas no comparten estado mutable más allá del pool de conexiones.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "IsEvenClient":
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def check(self, number: int) -> IsEven:
        return await iseven_get(number, settings=self._settings, client=self._client)
