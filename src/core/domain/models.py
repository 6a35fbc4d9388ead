"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Un payload inesperado del servicio falla en el borde, no en la CLI.

Nota:
- Estos modelos describen *qué* responde el servicio, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, PrivateAttr, StrictBool
from pydantic.config import ConfigDict

from core.domain.parity import Parity


class IsEven(BaseModel):
    """Respuesta exitosa del servicio isEven.

    Ejemplo del servicio real:
    {"iseven": true, "ad": "Buy isEvenCoin, the hottest new cryptocurrency!"}

    Campos no declarados (p.ej. `isOdd`) se conservan como extras, y el body
    original queda disponible en `raw_json` para reimprimirlo sin cambios.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    _raw_json: str | None = PrivateAttr(default=None)

    iseven: StrictBool = Field(
        ...,
        description="`true` si el número consultado es par.",
    )
    ad: str = Field(
        ...,
        description="Texto legible que acompaña al resultado (publicidad del servicio).",
    )
    number: int | None = Field(
        default=None,
        description="Número devuelto por el servicio, si lo incluye en el body.",
    )

    @classmethod
    def from_json(cls, body: str | bytes) -> "IsEven":
        """Valida el body del servicio y guarda el texto original."""

        result = cls.model_validate_json(body)
        result._raw_json = body.decode() if isinstance(body, bytes) else body
        return result

    @property
    def raw_json(self) -> str | None:
        return self._raw_json

    @property
    def is_odd(self) -> bool:
        return not self.iseven

    @property
    def parity(self) -> Parity:
        return Parity.from_flag(self.iseven)

    def __str__(self) -> str:
        return self.parity.value


class ErrorResponse(BaseModel):
    """Body de error del servicio (p.ej. número fuera del rango del tier público)."""

    model_config = ConfigDict(extra="ignore")

    error: str = Field(
        ...,
        min_length=1,
        description="Mensaje de error reportado por el servicio.",
    )
