# apps/venues/records.py
"""
Registros inmutables que consumen las reglas (schedule, planes, storefront).

Frontera de ingesta:
- Las filas del store (models.py) se validan y mapean acá UNA vez.
- Los textos multi-idioma se resuelven a un único string de display.
- El horario JSON se convierte en WeeklySchedule/DaySchedule/TimeRange.
- Una fila estructuralmente inválida levanta VenueRecordError; las reglas
  nunca ven datos sin validar.

Los strings "HH:MM" se guardan tal cual: un valor mal formado no rompe la
ingesta, el evaluador de horarios lo trata como rango que no matchea.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple

DAY_NAMES: Tuple[str, ...] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)


class VenueRecordError(ValueError):
    """Fila del store que no respeta la forma esperada de un local."""


@dataclass(frozen=True)
class TimeRange:
    start: str  # "HH:MM"
    end: str    # "HH:MM"; end < start = rango que cruza medianoche


@dataclass(frozen=True)
class DaySchedule:
    is_open: bool
    ranges: Tuple[TimeRange, ...] = ()


WeeklySchedule = Mapping[str, DaySchedule]


@dataclass(frozen=True)
class Venue:
    id: int
    slug: str
    name: str
    region_code: str
    subscription_plan: str
    subscription_status: str
    schedule: Optional[WeeklySchedule] = None
    manual_open: bool = False
    description: str = ""
    zone: str = ""
    city: str = ""
    category: str = ""
    image: str = ""
    logo: str = ""
    gallery: Tuple[str, ...] = ()
    whatsapp: str = ""
    phone: str = ""
    website: str = ""
    instagram: str = ""
    facebook: str = ""


@dataclass(frozen=True)
class Product:
    id: int
    venue_id: int
    name: str
    description: str = ""
    price: Optional[Decimal] = None
    image: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class Coupon:
    id: int
    venue_id: int
    code: str
    discount: str
    type: str = "percent"
    description: str = ""
    valid_until: Optional[date] = None
    image: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class VenueDetail:
    """Local + colecciones relacionadas que necesita la ficha."""
    venue: Venue
    products: Tuple[Product, ...] = ()
    coupons: Tuple[Coupon, ...] = ()


# ---------------------------
# Textos multi-idioma
# ---------------------------

def resolve_localized_text(value: Any, language: str = "es",
                           fallback: str = "en") -> str:
    """
    Texto plano o {"es": ..., "en": ...} → un único string.
    Preferencia: idioma pedido → fallback → ''.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return str(value.get(language) or value.get(fallback) or "")
    return str(value)


def fold_text(value: Any) -> str:
    """
    Forma comparable de un texto: sin acentos, en minúsculas, con guiones y
    espacios repetidos reducidos a un espacio ("Río-Grande" → "rio grande").
    """
    text = unicodedata.normalize("NFD", str(value or ""))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.replace("-", " ").replace("_", " ")
    return " ".join(text.casefold().split())


# ---------------------------
# Horarios
# ---------------------------

def _time_range_from_raw(raw: Any) -> TimeRange:
    if not isinstance(raw, Mapping):
        raise VenueRecordError(f"Rango horario inválido: {raw!r}")
    return TimeRange(start=str(raw.get("start") or ""),
                     end=str(raw.get("end") or ""))


def _day_from_raw(raw: Any) -> DaySchedule:
    if not isinstance(raw, Mapping):
        raise VenueRecordError(f"Día de horario inválido: {raw!r}")
    is_open = raw.get("isOpen", raw.get("is_open", False))
    if is_open is None:
        is_open = False
    if not isinstance(is_open, bool):
        raise VenueRecordError(f"'isOpen' debe ser booleano: {is_open!r}")
    ranges = raw.get("ranges") or ()
    if not isinstance(ranges, (list, tuple)):
        raise VenueRecordError(f"'ranges' debe ser una lista: {ranges!r}")
    return DaySchedule(
        is_open=is_open,
        ranges=tuple(_time_range_from_raw(r) for r in ranges),
    )


def weekly_schedule_from_raw(raw: Any) -> Optional[WeeklySchedule]:
    """
    JSON del store → WeeklySchedule inmutable (None si no hay horario).
    Días con nombre desconocido se ignoran; las claves se normalizan a minúsculas.
    """
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise VenueRecordError(f"El horario debe ser un objeto: {type(raw).__name__}")

    days = {}
    for day, value in raw.items():
        key = str(day).strip().lower()
        if key in DAY_NAMES:
            days[key] = _day_from_raw(value)
    return MappingProxyType(days)


# ---------------------------
# Filas → registros
# ---------------------------

def _text(value: Any) -> str:
    return (value or "").strip() if isinstance(value, str) else str(value or "")


def venue_from_row(row, *, language: str = "es", fallback: str = "en") -> Venue:
    """Mapea una fila de models.Venue a Venue; VenueRecordError si es inválida."""
    slug = _text(getattr(row, "slug", ""))
    if not slug:
        raise VenueRecordError(f"Local sin slug (id={getattr(row, 'pk', None)})")

    gallery = getattr(row, "gallery", None) or ()
    if not isinstance(gallery, (list, tuple)):
        raise VenueRecordError(f"Galería inválida en {slug}: {gallery!r}")

    return Venue(
        id=row.pk,
        slug=slug,
        name=resolve_localized_text(row.name, language, fallback),
        description=resolve_localized_text(row.description, language, fallback),
        region_code=_text(row.region_code).lower(),
        zone=_text(row.zone),
        city=_text(row.city),
        category=_text(row.category),
        subscription_plan=_text(row.subscription_plan).lower(),
        subscription_status=_text(row.subscription_status).lower(),
        schedule=weekly_schedule_from_raw(row.schedule),
        manual_open=bool(row.is_open),
        image=_text(row.image),
        logo=_text(row.logo),
        gallery=tuple(str(g) for g in gallery if g),
        whatsapp=_text(row.whatsapp),
        phone=_text(row.phone),
        website=_text(row.website),
        instagram=_text(row.instagram),
        facebook=_text(row.facebook),
    )


def product_from_row(row, *, language: str = "es", fallback: str = "en") -> Product:
    return Product(
        id=row.pk,
        venue_id=row.venue_id,
        name=resolve_localized_text(row.name, language, fallback),
        description=resolve_localized_text(row.description, language, fallback),
        price=row.price,
        image=_text(row.image),
        is_active=bool(row.is_active),
    )


def coupon_from_row(row) -> Coupon:
    return Coupon(
        id=row.pk,
        venue_id=row.venue_id,
        code=_text(row.code),
        discount=_text(row.discount),
        type=_text(row.type) or "percent",
        description=_text(row.description),
        valid_until=row.valid_until,
        image=_text(row.image),
        is_active=bool(row.is_active),
    )


def detail_from_rows(venue_row, product_rows: Iterable, coupon_rows: Iterable,
                     *, language: str = "es", fallback: str = "en") -> VenueDetail:
    return VenueDetail(
        venue=venue_from_row(venue_row, language=language, fallback=fallback),
        products=tuple(product_from_row(p, language=language, fallback=fallback)
                       for p in product_rows),
        coupons=tuple(coupon_from_row(c) for c in coupon_rows),
    )
