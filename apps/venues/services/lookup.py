# apps/venues/services/lookup.py
"""
Resolución de un local por (región, slug).

Política (exacta, las vistas dependen de ambos modos):
- region vacía → búsqueda GLOBAL por slug (links cortos /<slug>). Si el slug
  se repite en varias regiones se devuelve el local más antiguo (id menor) y
  se registra un warning; la ambigüedad NO se reporta como NOT_FOUND.
- region con valor → búsqueda SCOPEADA (region_code + slug). Si no hay fila,
  NOT_FOUND: nunca se reintenta en otra región ni en modo global.
- Falla del store (DatabaseError) o fila con forma inválida → STORE_UNAVAILABLE,
  distinto de NOT_FOUND (404 vs 5xx/reintento).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from django.conf import settings
from django.db import DatabaseError

from apps.regions.registry import normalize_code
from .. import selectors
from ..records import VenueDetail, VenueRecordError, detail_from_rows
from . import ServiceError

logger = logging.getLogger(__name__)


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"


class VenueNotFound(ServiceError):
    """No hay local para la combinación (región, slug)."""


class StoreUnavailable(ServiceError):
    """El store no respondió o devolvió datos con forma inválida."""


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    detail: Optional[VenueDetail] = None
    message: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def not_found(self) -> bool:
        return self.status is LookupStatus.NOT_FOUND

    @property
    def store_unavailable(self) -> bool:
        return self.status is LookupStatus.STORE_UNAVAILABLE

    def unwrap(self) -> VenueDetail:
        """Devuelve el detalle o levanta VenueNotFound / StoreUnavailable."""
        if self.found:
            return self.detail
        if self.store_unavailable:
            raise StoreUnavailable(self.message or "Store no disponible.")
        raise VenueNotFound(self.message or "Local no encontrado.")


def site_languages():
    return (
        getattr(settings, "ENCONTRA_DEFAULT_LANGUAGE", "es"),
        getattr(settings, "ENCONTRA_FALLBACK_LANGUAGE", "en"),
    )


def _fetch_row(region: str, slug: str):
    if not region:
        rows = selectors.venues_por_slug(slug)
        if len(rows) > 1:
            logger.warning(
                "Slug %r repetido en varias regiones; se usa el local id=%s",
                slug, rows[0].pk)
        return rows[0] if rows else None
    return selectors.venue_por_region_y_slug(region, slug)


def lookup_venue(region: Optional[str], slug: Optional[str]) -> LookupResult:
    """
    Busca el local y sus colecciones (productos activos, cupones).
    No encadena modos: el scoped-then-global, si se quiere, lo arma quien llama.
    """
    region = normalize_code(region)
    slug = (slug or "").strip()
    if not slug:
        return LookupResult(LookupStatus.NOT_FOUND, message="Slug vacío.")

    try:
        row = _fetch_row(region, slug)
    except DatabaseError:
        logger.exception(
            "Store no disponible buscando local (region=%r slug=%r)", region, slug)
        return LookupResult(LookupStatus.STORE_UNAVAILABLE,
                            message="No se pudo consultar el store de locales.")

    if row is None:
        logger.info("Local no encontrado (region=%r slug=%r)", region, slug)
        return LookupResult(LookupStatus.NOT_FOUND,
                            message="Local no encontrado.")

    language, fallback = site_languages()
    try:
        detail = detail_from_rows(
            row,
            getattr(row, "productos_activos", ()),
            getattr(row, "cupones", ()),
            language=language,
            fallback=fallback,
        )
    except VenueRecordError as exc:
        logger.error("Fila de local inválida (id=%s): %s", row.pk, exc)
        return LookupResult(LookupStatus.STORE_UNAVAILABLE,
                            message="El store devolvió un local con formato inválido.")

    return LookupResult(LookupStatus.FOUND, detail=detail)
