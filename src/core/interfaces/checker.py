"""Contrato de un verificador de paridad.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP por un doble en tests sin acoplar el Core
  a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import IsEven


@runtime_checkable
class ParityChecker(Protocol):
    """Contrato mínimo para consultar la paridad de un número.

    Reglas de diseño:
    - `check` es asíncrono porque típicamente hará I/O (HTTP).
    - Cada llamada es independiente: un request, una respuesta.
    """

    async def check(self, number: int) -> IsEven:
        """Consulta la paridad de `number` y devuelve el resultado normalizado."""

        ...
