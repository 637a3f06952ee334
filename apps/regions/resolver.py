# apps/regions/resolver.py
"""
Resolución del tenant (región) a partir del header Host.

Reglas:
  - Se parte el host por '.'; con menos de 2 labels no hay región.
  - El candidato es el primer label (en minúsculas).
  - Se descartan: 'www', el label del dominio canónico (apex) y el propio
    marcador de desarrollo ('localhost', 'localhost:3000').
  - Excepción de desarrollo: si un label posterior es el marcador
    (tdf.localhost:3000), el primer label SIEMPRE es la región.

Nunca lanza excepciones: sin región es un resultado válido (scope global).
"""

from __future__ import annotations

from typing import Optional

RESERVED_LABELS = frozenset({"www"})


def _strip_port(label: str) -> str:
    return label.split(":", 1)[0]


def resolve_region_code(
    host: Optional[str],
    *,
    apex_label: str = "encontra",
    dev_marker: str = "localhost",
) -> str:
    """
    Devuelve el código de región del host o '' si el request es global.
    Ej.: 'tdf.encontra.com.ar' → 'tdf'; 'www.encontra.com.ar' → ''.
    """
    labels = (host or "").strip().lower().split(".")
    if len(labels) < 2:
        return ""

    candidate = labels[0]
    if not candidate or candidate.startswith(dev_marker):
        return ""

    # Hosts de desarrollo: el primer label se acepta aunque esté reservado
    if any(_strip_port(label) == dev_marker for label in labels[1:]):
        return candidate

    if candidate in RESERVED_LABELS or candidate == apex_label.lower():
        return ""
    return candidate
