"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""

from core.domain.models import ErrorResponse, IsEven
from core.domain.parity import Parity

__all__ = ["ErrorResponse", "IsEven", "Parity"]
