# apps/venues/services/listing.py
"""
Listado de la landing regional (/<region> y /<region>/<zona>).

- Región vacía → lista vacía (la landing regional siempre tiene región).
- Las filas con forma inválida se omiten del listado (con log de error);
  una sola fila rota no tira la página entera.
- Falla del store → StoreUnavailable.
- Orden: premium, basic, free (plan vigente); estable por id dentro de cada plan.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from django.db import DatabaseError

from apps.regions.registry import normalize_code
from .. import selectors
from ..records import Venue, VenueRecordError, venue_from_row
from .lookup import StoreUnavailable, site_languages
from .storefront import sort_by_plan_priority

logger = logging.getLogger(__name__)


def list_region_venues(region: Optional[str],
                       zone_slug: Optional[str] = None) -> List[Venue]:
    region = normalize_code(region)
    if not region:
        return []

    try:
        rows = selectors.venues_en_region(region, zone_slug)
    except DatabaseError as exc:
        logger.exception(
            "Store no disponible listando locales (region=%r zona=%r)", region, zone_slug)
        raise StoreUnavailable("No se pudo consultar el store de locales.") from exc

    language, fallback = site_languages()
    venues = []
    for row in rows:
        try:
            venues.append(venue_from_row(row, language=language, fallback=fallback))
        except VenueRecordError as exc:
            logger.error("Fila de local inválida omitida del listado (id=%s): %s",
                         row.pk, exc)

    return sort_by_plan_priority(venues)
