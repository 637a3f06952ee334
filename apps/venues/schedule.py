# apps/venues/schedule.py
"""
Estado abierto/cerrado de un local a partir de su horario semanal.

Reglas:
- Sin horario → se devuelve el flag manual tal cual (no se calcula nada).
- Día: índice 0 = domingo … 6 = sábado, sin depender del locale.
- Día ausente o marcado cerrado → cerrado.
- Rango mismo día (end >= start): abierto si start <= ahora <= end (ambos inclusive).
- Rango nocturno (end < start): abierto si ahora >= start o ahora <= end.
- Los rangos se combinan con OR; el orden no importa y pueden solaparse.
- Un "HH:MM" mal formado hace que ESE rango no matchee; nunca se lanza error.

`now` siempre lo pasa quien llama (en producción, hora local del sitio).
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from .records import DAY_NAMES, DaySchedule, TimeRange

_HHMM = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def parse_minutes(value: Optional[str]) -> Optional[int]:
    """'HH:MM' → minutos desde medianoche (0–1439); None si es inválido."""
    match = _HHMM.fullmatch((value or "").strip())
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def day_name(now: datetime) -> str:
    """Nombre del día con domingo = 0 (isoweekday: lunes=1 … domingo=7)."""
    return DAY_NAMES[now.isoweekday() % 7]


def range_contains(time_range: TimeRange, current_minutes: int) -> bool:
    start = parse_minutes(time_range.start)
    end = parse_minutes(time_range.end)
    if start is None or end is None:
        return False

    if end < start:
        # Cruza medianoche (ej. 22:00 - 02:00)
        return current_minutes >= start or current_minutes <= end
    return start <= current_minutes <= end


def day_is_open(day: Optional[DaySchedule], current_minutes: int) -> bool:
    if day is None or not day.is_open:
        return False
    return any(range_contains(r, current_minutes) for r in day.ranges)


def is_open_now(venue, now: datetime) -> bool:
    """
    ¿Está abierto el local en `now`?
    Se usa la hora "de pared" de `now` tal como viene: quien llama decide la zona.
    """
    schedule = getattr(venue, "schedule", None)
    if schedule is None:
        return bool(getattr(venue, "manual_open", False))

    current_minutes = now.hour * 60 + now.minute
    return day_is_open(schedule.get(day_name(now)), current_minutes)
