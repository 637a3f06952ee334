# apps/regions/registry.py
"""
Registro fijo de regiones (provincias argentinas + CABA).

- Se construye una sola vez al importar el módulo y no se modifica nunca.
- El código es case-insensitive en la entrada; la forma canónica es lowercase.
- Es la fuente de verdad para nombres visibles (landings, breadcrumbs, SEO).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Region:
    code: str
    display_name: str


_NOMBRES = (
    ("bue", "Buenos Aires"),
    ("caba", "CABA"),
    ("cat", "Catamarca"),
    ("cha", "Chaco"),
    ("chu", "Chubut"),
    ("cba", "Córdoba"),
    ("cor", "Corrientes"),
    ("ers", "Entre Ríos"),
    ("for", "Formosa"),
    ("juj", "Jujuy"),
    ("lpa", "La Pampa"),
    ("lar", "La Rioja"),
    ("mdz", "Mendoza"),
    ("mis", "Misiones"),
    ("nqn", "Neuquén"),
    ("rng", "Río Negro"),
    ("sal", "Salta"),
    ("sjn", "San Juan"),
    ("sls", "San Luis"),
    ("scz", "Santa Cruz"),
    ("sfe", "Santa Fe"),
    ("sde", "Santiago del Estero"),
    ("tdf", "Tierra del Fuego"),
    ("tuc", "Tucumán"),
)

REGIONS: Mapping[str, Region] = MappingProxyType(
    {code: Region(code=code, display_name=nombre) for code, nombre in _NOMBRES}
)


def normalize_code(code: Optional[str]) -> str:
    """Forma canónica del código: sin espacios y en minúsculas ('' si viene vacío)."""
    return (code or "").strip().lower()


def get_region(code: Optional[str]) -> Optional[Region]:
    """Region registrada para `code` (case-insensitive) o None."""
    return REGIONS.get(normalize_code(code))


def is_known_region(code: Optional[str]) -> bool:
    return get_region(code) is not None


def get_region_name(code: Optional[str]) -> str:
    """
    Nombre visible de la región.
    - '' si no hay código (scope global).
    - Nombre registrado si existe.
    - Si no, el código en mayúsculas (subdominio no registrado).
    """
    code = normalize_code(code)
    if not code:
        return ""
    region = REGIONS.get(code)
    return region.display_name if region else code.upper()
