# apps/venues/services/storefront.py
"""
Hechos derivados que consume la capa de render (ficha, tarjetas, listados).

- Qué se muestra de un local según su plan vigente (productos, galería,
  contacto, redes, cupones, badge de verificado).
- Si está abierto ahora, con la hora local del sitio.
- Filtros para listados: búsqueda, rubro, "solo abiertos", orden por plan y
  carrusel de destacados.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from django.utils import timezone

from apps.saas.limits import effective_plan, venue_capabilities
from apps.saas.plans import PLAN_BASIC, PLAN_PREMIUM, CapabilitySet
from ..records import Coupon, Product, Venue, VenueDetail, fold_text
from ..schedule import is_open_now


@dataclass(frozen=True)
class Storefront:
    venue: Venue
    capabilities: CapabilitySet
    is_open: bool
    verified: bool
    show_contact: bool
    show_socials: bool
    products: Tuple[Product, ...]
    gallery: Tuple[str, ...]
    coupons: Tuple[Coupon, ...]


def _local_now(now: Optional[datetime]) -> datetime:
    """Hora de pared en TIME_ZONE; los datetimes naive se usan tal cual."""
    if now is None:
        return timezone.localtime()
    if timezone.is_aware(now):
        return timezone.localtime(now)
    return now


def venue_is_open(venue: Venue, now: Optional[datetime] = None) -> bool:
    return is_open_now(venue, _local_now(now))


def build_storefront(detail: VenueDetail, now: Optional[datetime] = None) -> Storefront:
    """
    Aplica las restricciones del plan vigente al detalle del local.
    Con suscripción inactiva todo se recorta al plan free.
    """
    venue = detail.venue
    caps = venue_capabilities(venue)
    return Storefront(
        venue=venue,
        capabilities=caps,
        is_open=venue_is_open(venue, now),
        verified=caps.verified_badge,
        show_contact=caps.whatsapp_enabled and bool(venue.whatsapp),
        show_socials=caps.socials_enabled,
        products=detail.products[:caps.product_limit],
        gallery=venue.gallery[:caps.gallery_limit],
        coupons=detail.coupons if caps.coupons_enabled else (),
    )


def filter_open_now(venues: Iterable[Venue], now: Optional[datetime] = None) -> List[Venue]:
    """Listado "solo abiertos": mantiene el orden de entrada."""
    local_now = _local_now(now)
    return [v for v in venues if is_open_now(v, local_now)]


def featured_venues(venues: Iterable[Venue]) -> List[Venue]:
    """Locales que su plan vigente habilita para el carrusel de destacados."""
    return [v for v in venues if venue_capabilities(v).featured_eligible]


# ---------------------------
# Listados regionales
# ---------------------------

_PLAN_PRIORITY = {PLAN_PREMIUM: 3, PLAN_BASIC: 2}


def plan_priority(venue: Venue) -> int:
    """3 premium, 2 basic, 1 el resto (según el plan vigente, no el nominal)."""
    plan = effective_plan(venue.subscription_plan, venue.subscription_status)
    return _PLAN_PRIORITY.get(plan, 1)


def sort_by_plan_priority(venues: Iterable[Venue]) -> List[Venue]:
    """Premium primero, luego basic, luego free. Estable dentro de cada plan."""
    return sorted(venues, key=plan_priority, reverse=True)


def venue_categories(venues: Iterable[Venue]) -> List[str]:
    """Rubros presentes en el listado (sin vacíos), ordenados."""
    return sorted({v.category for v in venues if v.category})


def filter_venues(venues: Iterable[Venue], query: str = "",
                  category: Optional[str] = None, open_only: bool = False,
                  now: Optional[datetime] = None) -> List[Venue]:
    """
    Filtros combinados del listado (todos deben cumplirse):
    - query: aparece en el nombre o la descripción (sin acentos ni mayúsculas).
    - category: rubro exacto.
    - open_only: abierto ahora, con la hora local del sitio.
    Mantiene el orden de entrada.
    """
    needle = fold_text(query)
    local_now = _local_now(now) if open_only else None

    result = []
    for venue in venues:
        if needle and not (needle in fold_text(venue.name)
                           or needle in fold_text(venue.description)):
            continue
        if category and venue.category != category:
            continue
        if open_only and not is_open_now(venue, local_now):
            continue
        result.append(venue)
    return result
