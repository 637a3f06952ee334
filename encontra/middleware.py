# encontra/middleware.py
import logging

from django.conf import settings
from django.utils.deprecation import MiddlewareMixin

from apps.regions.registry import get_region
from apps.regions.resolver import resolve_region_code

logger = logging.getLogger(__name__)


def _header_meta_key(header: str) -> str:
    """'X-Encontra-Region' → 'HTTP_X_ENCONTRA_REGION' (formato de request.META)."""
    return "HTTP_" + header.upper().replace("-", "_")


class RegionMiddleware(MiddlewareMixin):
    """
    Inyecta en cada request:
      - request.region_code: código de región ('' = dominio global)
      - request.region: Region registrada o None (subdominio desconocido)

    Reglas:
      - La región sale del header Host (ver apps.regions.resolver).
      - Si hay región, se replica en request.META con ENCONTRA_REGION_HEADER
        para que las capas de render la lean sin volver a parsear el host.
      - Sin región no se toca el META (páginas globales / links cortos).
    """

    def process_request(self, request):
        host = request.META.get("HTTP_HOST", "")
        code = resolve_region_code(
            host,
            apex_label=getattr(settings, "ENCONTRA_APEX_LABEL", "encontra"),
            dev_marker=getattr(
                settings, "ENCONTRA_DEV_HOST_MARKER", "localhost"),
        )

        request.region_code = code
        request.region = get_region(code) if code else None

        if code:
            header = getattr(settings, "ENCONTRA_REGION_HEADER",
                             "X-Encontra-Region")
            request.META[_header_meta_key(header)] = code
            if request.region is None:
                logger.debug("Subdominio sin región registrada: %s", code)
        logger.debug("Host %r → región %r", host, code)
