"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Mantiene la salida estable para pipelines (sin wrapping ni highlight automático).
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape

from core.domain.models import IsEven


def result_sentence(number: int, result: IsEven) -> str:
    """Frase legible: `41 is an odd number`."""

    return f"{number} is an {result.parity.value} number"


def print_result(console: Console, number: int, result: IsEven) -> None:
    """Imprime publicidad + veredicto.

    El texto del servicio se escapa: puede traer corchetes que Rich
    interpretaría como markup.
    """

    console.print(f"[dim]Advertisement:[/dim] {escape(result.ad)}", soft_wrap=True, highlight=False)
    console.print(
        f"[bold]{escape(result_sentence(number, result))}[/bold]",
        soft_wrap=True,
        highlight=False,
    )


def result_json(result: IsEven) -> str:
    """Body JSON tal como lo envió el servicio (para `--json`).

    Un `IsEven` construido en código no tiene body original; en ese caso se
    serializa el modelo, extras incluidos, en orden de declaración.
    """

    if result.raw_json is not None:
        return result.raw_json.strip()
    payload = result.model_dump(mode="json", exclude_none=True)
    return json.dumps(payload, ensure_ascii=False)


def print_error(console: Console, exc: Exception) -> None:
    console.print(f"[bold red]error:[/bold red] {escape(str(exc))}", soft_wrap=True, highlight=False)
