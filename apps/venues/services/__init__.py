# apps/venues/services/__init__.py
"""
Servicios (casos de uso) del módulo de locales.

Filosofía:
- Orquestan lecturas del store y las reglas puras (planes, horarios).
- No hacen rendering ni devuelven respuestas HTTP.
- No escriben nada: el store se edita desde el admin.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Error controlado de capa de servicios (negocio)."""


from .lookup import (  # noqa: E402
    LookupResult,
    LookupStatus,
    StoreUnavailable,
    VenueNotFound,
    lookup_venue,
)
from .storefront import (  # noqa: E402
    Storefront,
    build_storefront,
    featured_venues,
    filter_open_now,
    filter_venues,
    plan_priority,
    sort_by_plan_priority,
    venue_categories,
    venue_is_open,
)
from .listing import list_region_venues  # noqa: E402

__all__ = [
    "ServiceError",
    "LookupResult",
    "LookupStatus",
    "StoreUnavailable",
    "VenueNotFound",
    "lookup_venue",
    "Storefront",
    "build_storefront",
    "featured_venues",
    "filter_open_now",
    "filter_venues",
    "plan_priority",
    "sort_by_plan_priority",
    "venue_categories",
    "venue_is_open",
    "list_region_venues",
]
