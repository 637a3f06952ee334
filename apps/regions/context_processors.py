# apps/regions/context_processors.py
from .registry import get_region_name


def region(request):
    """
    Expone la región resuelta por RegionMiddleware a los templates:
      - region_code: '' en el dominio global
      - region_name: nombre visible ('' si no hay región)
    """
    code = getattr(request, "region_code", "") or ""
    return {
        "region_code": code,
        "region_name": get_region_name(code),
    }
