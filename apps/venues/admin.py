# apps/venues/admin.py
from __future__ import annotations

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from apps.regions.registry import get_region_name
from apps.saas.limits import venue_capabilities
from .models import Coupon, Product, Venue
from .records import (
    Venue as VenueRecord,
    VenueRecordError,
    resolve_localized_text,
    weekly_schedule_from_raw,
)
from .services import venue_is_open


class ProductInline(admin.TabularInline):
    model = Product
    extra = 0
    fields = ("name", "price", "is_active")


class CouponInline(admin.TabularInline):
    model = Coupon
    extra = 0
    fields = ("code", "discount", "type", "valid_until", "is_active")


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    """
    Admin de soporte del store de locales (altas, planes, horarios).
    Las columnas calculadas usan las mismas reglas que el storefront.
    """
    list_display = (
        "slug",
        "nombre",
        "region",
        "subscription_plan",
        "subscription_status",
        "abierto_badge",
        "destacable",
    )
    list_filter = ("region_code", "subscription_plan", "subscription_status")
    search_fields = ("slug", "zone", "city")
    ordering = ("region_code", "slug", "id")
    list_per_page = 50
    inlines = (ProductInline, CouponInline)

    fieldsets = (
        (_("Datos básicos"), {
            "fields": ("region_code", "slug", "name", "description",
                       "category", "zone", "city"),
        }),
        (_("Plan"), {
            "fields": ("subscription_plan", "subscription_status"),
        }),
        (_("Horario"), {
            "fields": ("schedule", "is_open"),
        }),
        (_("Contacto y multimedia"), {
            "fields": ("whatsapp", "phone", "website", "instagram", "facebook",
                       "image", "logo", "gallery"),
            "classes": ("collapse",),
        }),
        (_("Trazabilidad"), {
            "fields": ("creado", "actualizado"),
            "classes": ("collapse",),
        }),
    )
    readonly_fields = ("creado", "actualizado")

    @admin.display(description=_("Nombre"))
    def nombre(self, obj: Venue) -> str:
        return resolve_localized_text(obj.name)

    @admin.display(description=_("Región"), ordering="region_code")
    def region(self, obj: Venue) -> str:
        return get_region_name(obj.region_code)

    @admin.display(description=_("Destacable"), boolean=True)
    def destacable(self, obj: Venue) -> bool:
        return venue_capabilities(obj).featured_eligible

    @admin.display(description=_("Ahora"))
    def abierto_badge(self, obj: Venue):
        try:
            schedule = weekly_schedule_from_raw(obj.schedule)
        except VenueRecordError:
            return format_html('<span title="{}">⚠</span>', _("Horario inválido"))

        record = VenueRecord(
            id=obj.pk, slug=obj.slug, name="", region_code=obj.region_code,
            subscription_plan=obj.subscription_plan,
            subscription_status=obj.subscription_status,
            schedule=schedule, manual_open=obj.is_open,
        )
        abierto = venue_is_open(record, timezone.now())
        color = "28a745" if abierto else "6c757d"
        label = _("Abierto") if abierto else _("Cerrado")
        return format_html(
            '<span style="display:inline-block;padding:.2rem .45rem;border-radius:.25rem;'
            'font-size:.75rem;color:#fff;background-color:#{};">{}</span>',
            color, label
        )
