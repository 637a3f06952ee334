# apps/venues/models.py
"""
Store de locales (tablas que llenan el admin y el onboarding).

El motor de visibilidad SOLO lee estas tablas: las filas se mapean a
registros inmutables en records.py antes de llegar a cualquier regla.

Notas:
- name/description se guardan como texto plano o como objeto por idioma
  ({"es": ..., "en": ...}); por eso son JSONField.
- schedule es el horario semanal {día: {"isOpen": bool, "ranges": [...]}}.
- is_open es el flag manual, usado solo cuando no hay schedule.
"""

from __future__ import annotations

from django.db import models
from django.db.models import UniqueConstraint

from apps.saas.plans import PLAN_CHOICES, PLAN_FREE


class VenueQuerySet(models.QuerySet):
    """Consultas reutilizables para Venue (usadas por selectors)."""

    def con_slug(self, slug: str) -> "VenueQuerySet":
        return self.filter(slug=slug)

    def en_region(self, region_code: str) -> "VenueQuerySet":
        """Filtra por tenant (región), sin distinguir mayúsculas."""
        return self.filter(region_code__iexact=region_code)


class Venue(models.Model):
    """
    Local publicado en el directorio.

    - Scoping multi-tenant por region_code.
    - `slug` único por región; las búsquedas globales lo usan solo.
    """

    SUBSCRIPTION_STATUSES = (
        ("active", "Activa"),
        ("inactive", "Inactiva"),
    )

    slug = models.SlugField("Slug", max_length=140)
    region_code = models.CharField(
        "Región",
        max_length=8,
        db_index=True,
        help_text="Código de la provincia (tdf, cba, ...).",
    )
    zone = models.CharField("Zona / ciudad", max_length=120, blank=True)
    city = models.CharField("Ciudad", max_length=120, blank=True)
    category = models.CharField("Rubro", max_length=60, blank=True)

    name = models.JSONField("Nombre", default=str)
    description = models.JSONField("Descripción", default=str, blank=True)

    image = models.CharField("Imagen", max_length=255, blank=True)
    logo = models.CharField("Logo", max_length=255, blank=True)
    gallery = models.JSONField("Galería", default=list, blank=True)

    whatsapp = models.CharField("WhatsApp", max_length=30, blank=True)
    phone = models.CharField("Teléfono", max_length=30, blank=True)
    website = models.CharField("Sitio web", max_length=255, blank=True)
    instagram = models.CharField("Instagram", max_length=120, blank=True)
    facebook = models.CharField("Facebook", max_length=120, blank=True)

    subscription_plan = models.CharField(
        "Plan", max_length=20, choices=PLAN_CHOICES, default=PLAN_FREE)
    subscription_status = models.CharField(
        "Estado de suscripción",
        max_length=20,
        choices=SUBSCRIPTION_STATUSES,
        default="inactive",
    )

    schedule = models.JSONField(
        "Horario semanal",
        null=True,
        blank=True,
        help_text="Si está vacío, se usa el flag manual 'Abierto'.",
    )
    is_open = models.BooleanField(
        "Abierto (manual)",
        default=False,
        help_text="Solo se usa cuando el local no tiene horario semanal.",
    )

    creado = models.DateTimeField("Creado", auto_now_add=True)
    actualizado = models.DateTimeField("Actualizado", auto_now=True)

    objects = VenueQuerySet.as_manager()

    class Meta:
        verbose_name = "Local"
        verbose_name_plural = "Locales"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["region_code", "slug"],
                         name="venue_region_slug_idx"),
            models.Index(fields=["slug"], name="venue_slug_idx"),
        ]
        constraints = [
            UniqueConstraint(
                fields=["region_code", "slug"],
                name="uniq_venue_slug_por_region",
            ),
        ]

    def save(self, *args, **kwargs):
        # region_code se guarda en su forma canónica (minúsculas)
        self.region_code = (self.region_code or "").strip().lower()
        self.slug = (self.slug or "").strip()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.slug} ({self.region_code})"


class Product(models.Model):
    venue = models.ForeignKey(
        Venue, on_delete=models.CASCADE, related_name="products")
    name = models.JSONField("Nombre", default=str)
    description = models.JSONField("Descripción", default=str, blank=True)
    price = models.DecimalField(
        "Precio", max_digits=12, decimal_places=2, null=True, blank=True)
    image = models.CharField("Imagen", max_length=255, blank=True)
    is_active = models.BooleanField("Activo", default=True)

    class Meta:
        verbose_name = "Producto"
        verbose_name_plural = "Productos"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Producto #{self.pk} de {self.venue_id}"


class Coupon(models.Model):
    TYPES = (
        ("percent", "Porcentaje"),
        ("fixed", "Monto fijo"),
    )

    venue = models.ForeignKey(
        Venue, on_delete=models.CASCADE, related_name="coupons")
    code = models.CharField("Código", max_length=40)
    discount = models.CharField("Descuento", max_length=40)
    type = models.CharField("Tipo", max_length=10,
                            choices=TYPES, default="percent")
    description = models.CharField("Descripción", max_length=255, blank=True)
    valid_until = models.DateField("Válido hasta", null=True, blank=True)
    image = models.CharField("Imagen", max_length=255, blank=True)
    is_active = models.BooleanField("Activo", default=True)

    class Meta:
        verbose_name = "Cupón"
        verbose_name_plural = "Cupones"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.code
