from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from core.config import AppSettings

BASE_URL = "https://isevenapi.test/api/iseven/"

Handler = Callable[[httpx.Request], httpx.Response]


def parity_service(request: httpx.Request) -> httpx.Response:
    """Doble del servicio real: calcula la paridad del último segmento del path."""

    raw = request.url.path.rsplit("/", 1)[-1]
    try:
        number = int(raw)
    except ValueError:
        return httpx.Response(400, json={"error": "Invalid number."})
    body = {
        "iseven": number % 2 == 0,
        "ad": "Buy isEvenCoin, the hottest new cryptocurrency!",
        "number": number,
    }
    return httpx.Response(200, content=json.dumps(body).encode())


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url=BASE_URL, http_timeout_seconds=1.0)


@pytest.fixture
def async_client_for() -> Callable[[Handler], httpx.AsyncClient]:
    def _build(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build


@pytest.fixture
def client_for() -> Callable[[Handler], httpx.Client]:
    def _build(handler: Handler) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return _build


@pytest.fixture
def service() -> Handler:
    return parity_service
