# apps/saas/limits.py
"""
Resolución de capacidades y chequeos de límites (gating) por plan.

Filosofía:
- Este módulo NO persiste nada ni consulta la base. Recibe los datos ya leídos
  (plan/estado del local, contadores de uso) y decide.
- Una suscripción que no está "active" SIEMPRE cae al plan free: la falta de
  pago nunca deja funcionalidades pagas habilitadas.
- Plan desconocido o vacío → free. Ninguna función de resolución lanza errores.
- El modo de aplicación se controla por setting:
    ENCONTRA_ENFORCE_LIMITS = True  # bloqueo
  Con False, `GateResult.should_block()` nunca bloquea (solo aviso en UI).

Integraciones esperadas:
- Ficha pública / tarjetas → resolve_capabilities(...) / venue_capabilities(venue)
- Admin de cupones → can_create_coupon(venue, activos) / gate_create_coupon(...)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.conf import settings

from .plans import FREE_CAPABILITIES, PLAN_FREE, STATUS_ACTIVE, CapabilitySet, get_plan


# ---------------------------
# Configuración
# ---------------------------

def enforce_limits() -> bool:
    """
    Flag global para decidir si los límites son HARD (bloqueo) o SOFT (warning).
    """
    return bool(getattr(settings, "ENCONTRA_ENFORCE_LIMITS", True))


# ---------------------------
# Capacidades
# ---------------------------

def effective_plan(subscription_plan: Optional[str],
                   subscription_status: Optional[str]) -> str:
    """
    Código del plan que rige de verdad para (plan, estado).
      1) estado != "active" → free, sin importar el plan nominal.
      2) plan conocido → su código canónico.
      3) plan desconocido/vacío → free.
    """
    if (subscription_status or "").strip().lower() != STATUS_ACTIVE:
        return PLAN_FREE
    plan = get_plan(subscription_plan)
    return plan.code if plan is not None else PLAN_FREE


def resolve_capabilities(subscription_plan: Optional[str],
                         subscription_status: Optional[str]) -> CapabilitySet:
    """CapabilitySet vigente para (plan, estado); ver effective_plan."""
    plan = get_plan(effective_plan(subscription_plan, subscription_status))
    if plan is None:
        return FREE_CAPABILITIES
    return plan.capabilities


def venue_capabilities(venue) -> CapabilitySet:
    """Atajo para cualquier objeto con subscription_plan/subscription_status."""
    return resolve_capabilities(
        getattr(venue, "subscription_plan", None),
        getattr(venue, "subscription_status", None),
    )


# ---------------------------
# Resultado estándar de gate_*
# ---------------------------

@dataclass(frozen=True)
class GateResult:
    allowed: bool
    message: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None

    def should_block(self) -> bool:
        """
        True si corresponde BLOQUEAR la acción (cuando enforce_limits está ON y allowed es False).
        """
        return enforce_limits() and not self.allowed


# ---------------------------
# Reglas de gating
# ---------------------------

def can_create_coupon(venue, current_active_coupon_count: int) -> bool:
    """
    ¿Puede el local crear un cupón más?
      - Sin cupones en el plan vigente (free o suscripción inactiva) → False.
      - basic: tope duro de 3 activos.
      - premium: sin tope.
    """
    caps = venue_capabilities(venue)
    if not caps.coupons_enabled:
        return False

    limit_ = caps.coupon_active_limit
    if limit_ is not None and current_active_coupon_count >= limit_:
        return False
    return True


def gate_create_coupon(venue, current_active_coupon_count: int) -> GateResult:
    """
    Variante con mensaje y uso para el admin (mismo criterio que can_create_coupon).
    """
    caps = venue_capabilities(venue)
    usage = {"used": current_active_coupon_count,
             "limit": caps.coupon_active_limit}

    if not caps.coupons_enabled:
        msg = "Tu plan actual no incluye cupones. Pasate a Emprendedor o Negocio Full."
        return GateResult(allowed=False, message=msg, usage=usage)

    if not can_create_coupon(venue, current_active_coupon_count):
        msg = (
            "Alcanzaste el máximo de cupones activos para tu plan. "
            "Desactivá uno o pasate a Negocio Full."
        )
        return GateResult(allowed=False, message=msg, usage=usage)
    return GateResult(allowed=True, usage=usage)
