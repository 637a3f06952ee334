# apps/saas/plans.py
"""
Tabla fija de planes de suscripción de locales.

Diseño:
- Exactamente 3 tiers: free ("Vecino"), basic ("Emprendedor"), premium ("Negocio Full").
- Cada plan trae un CapabilitySet completo (nunca parcial ni combinado).
- La tabla es una constante inmutable construida al importar; se puede leer
  desde cualquier thread sin locks.

La decisión de QUÉ plan aplica a un local vive en limits.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

PLAN_FREE = "free"
PLAN_BASIC = "basic"
PLAN_PREMIUM = "premium"

STATUS_ACTIVE = "active"


@dataclass(frozen=True)
class CapabilitySet:
    """
    Funcionalidades habilitadas por un plan.

    - product_limit / gallery_limit: cantidad máxima visible en la ficha.
    - coupon_active_limit: tope de cupones activos (None = ilimitado).
    """
    whatsapp_enabled: bool
    socials_enabled: bool
    product_limit: int
    verified_badge: bool
    coupons_enabled: bool
    coupon_active_limit: Optional[int]
    featured_eligible: bool
    gallery_limit: int
    analytics_enabled: bool


@dataclass(frozen=True)
class PlanDefinition:
    code: str
    name: str
    price: Decimal  # ARS mensual
    capabilities: CapabilitySet


PLANS: Mapping[str, PlanDefinition] = MappingProxyType({
    PLAN_FREE: PlanDefinition(
        code=PLAN_FREE,
        name="Vecino",
        price=Decimal("0"),
        capabilities=CapabilitySet(
            whatsapp_enabled=False,  # solo texto
            socials_enabled=False,
            product_limit=0,
            verified_badge=False,
            coupons_enabled=False,
            coupon_active_limit=0,
            featured_eligible=False,
            gallery_limit=1,
            analytics_enabled=False,
        ),
    ),
    PLAN_BASIC: PlanDefinition(
        code=PLAN_BASIC,
        name="Emprendedor",
        price=Decimal("12000"),
        capabilities=CapabilitySet(
            whatsapp_enabled=True,
            socials_enabled=True,
            product_limit=5,
            verified_badge=True,
            coupons_enabled=True,
            coupon_active_limit=3,
            featured_eligible=False,
            gallery_limit=3,
            analytics_enabled=True,
        ),
    ),
    PLAN_PREMIUM: PlanDefinition(
        code=PLAN_PREMIUM,
        name="Negocio Full",
        price=Decimal("20000"),
        capabilities=CapabilitySet(
            whatsapp_enabled=True,
            socials_enabled=True,
            product_limit=50,
            verified_badge=True,
            coupons_enabled=True,
            coupon_active_limit=None,
            featured_eligible=True,
            gallery_limit=10,
            analytics_enabled=True,
        ),
    ),
})

FREE_CAPABILITIES: CapabilitySet = PLANS[PLAN_FREE].capabilities

PLAN_CHOICES: Tuple[Tuple[str, str], ...] = tuple(
    (code, plan.name) for code, plan in PLANS.items()
)


def get_plan(code: Optional[str]) -> Optional[PlanDefinition]:
    """Plan por código (case-insensitive) o None si no existe."""
    return PLANS.get((code or "").strip().lower())


def plans_for_display() -> Tuple[PlanDefinition, ...]:
    """Planes ordenados por precio ascendente (página de planes / propuesta)."""
    return tuple(sorted(PLANS.values(), key=lambda p: (p.price, p.code)))
