# apps/venues/selectors.py
"""
Selectores (lecturas puras) del store de locales.

Importante:
- Aquí NO hay efectos secundarios (no writes).
- Devuelven filas del ORM; el mapeo a registros inmutables está en records.py
  y la política de búsqueda (global / por región) en services/lookup.py.
- Los errores de base (DatabaseError) se propagan: los traduce el servicio.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from django.db.models import Prefetch, Q, QuerySet

from .models import Coupon, Product, Venue
from .records import fold_text


# ==============
# Query Builders
# ==============

def venues_con_relaciones() -> QuerySet[Venue]:
    """
    Locales con productos activos y cupones precargados (una consulta por relación).
    """
    return (
        Venue.objects
        .prefetch_related(
            Prefetch(
                "products",
                queryset=Product.objects.filter(is_active=True).order_by("id"),
                to_attr="productos_activos",
            ),
            Prefetch(
                "coupons",
                queryset=Coupon.objects.order_by("id"),
                to_attr="cupones",
            ),
        )
        .order_by("id")
    )


# ==================
# Single-object gets
# ==================

def venues_por_slug(slug: str, limit: int = 2) -> List[Venue]:
    """
    Búsqueda GLOBAL por slug (sin mirar la región del local).
    Trae hasta `limit` filas para que el servicio detecte slugs repetidos
    entre regiones sin una consulta extra de conteo.
    """
    return list(venues_con_relaciones().con_slug(slug)[:limit])


def venue_por_region_y_slug(region_code: str, slug: str) -> Optional[Venue]:
    """
    Búsqueda SCOPEADA: region_code (sin distinguir mayúsculas) y slug exacto.
    None si no existe.
    """
    return (
        venues_con_relaciones()
        .en_region(region_code)
        .con_slug(slug)
        .first()
    )


# ========
# Listados
# ========

def venues_en_region(region_code: str, zone_slug: Optional[str] = None) -> List[Venue]:
    """
    Locales de una región (landing regional), ordenados por id.

    Con `zone_slug` se filtra además por zona: la comparación ignora acentos,
    mayúsculas y guiones ("rio-grande" coincide con "Río Grande").
    El filtro de zona corre en Python, sobre las filas de la región.
    """
    rows = list(
        Venue.objects.en_region((region_code or "").strip()).order_by("id"))
    if zone_slug is None:
        return rows
    target = fold_text(zone_slug)
    return [row for row in rows if row.zone and fold_text(row.zone) == target]


# -------------------------------
# Contadores útiles (gating)
# -------------------------------

def count_active_coupons(venue_id: int, *, today: date) -> int:
    """
    Cupones activos del local: is_active y sin vencer (valid_until vacío o >= hoy).
    Alimenta apps.saas.limits.can_create_coupon.
    """
    return (
        Coupon.objects
        .filter(venue_id=venue_id, is_active=True)
        .filter(Q(valid_until__isnull=True) | Q(valid_until__gte=today))
        .count()
    )
