"""
Tests del storefront: restricciones de plan y hora local.
"""
from datetime import datetime, timezone as dt_timezone

import pytest

from apps.venues.records import (
    Coupon,
    Product,
    Venue,
    VenueDetail,
    weekly_schedule_from_raw,
)
from apps.venues.services import (
    build_storefront,
    featured_venues,
    filter_open_now,
    filter_venues,
    plan_priority,
    sort_by_plan_priority,
    venue_categories,
    venue_is_open,
)

NINE_TO_SIX = {
    day: {"isOpen": True, "ranges": [{"start": "09:00", "end": "18:00"}]}
    for day in ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
}


def make_venue(plan="basic", status="active", schedule=None, manual_open=False,
               whatsapp="5491187654321", slug="cafe-del-sol"):
    return Venue(
        id=2,
        slug=slug,
        name="Café del Sol",
        region_code="tdf",
        subscription_plan=plan,
        subscription_status=status,
        schedule=weekly_schedule_from_raw(schedule),
        manual_open=manual_open,
        whatsapp=whatsapp,
        gallery=tuple(f"/foto-{i}.jpg" for i in range(12)),
    )


def make_detail(venue):
    return VenueDetail(
        venue=venue,
        products=tuple(Product(id=i, venue_id=venue.id, name=f"P{i}") for i in range(8)),
        coupons=(Coupon(id=1, venue_id=venue.id, code="SOL15", discount="15%"),),
    )


class TestBuildStorefront:

    def test_basic_plan_restrictions(self):
        front = build_storefront(make_detail(make_venue("basic")), datetime(2025, 1, 15, 12, 0))

        assert len(front.products) == 5
        assert len(front.gallery) == 3
        assert front.verified
        assert front.show_contact
        assert front.show_socials
        assert [c.code for c in front.coupons] == ["SOL15"]

    def test_free_plan_hides_everything_paid(self):
        front = build_storefront(make_detail(make_venue("free")), datetime(2025, 1, 15, 12, 0))

        assert front.products == ()
        assert len(front.gallery) == 1
        assert not front.verified
        assert not front.show_contact
        assert front.coupons == ()

    def test_lapsed_premium_is_free(self):
        front = build_storefront(
            make_detail(make_venue("premium", status="inactive")), datetime(2025, 1, 15, 12, 0))
        assert front.products == ()
        assert not front.capabilities.featured_eligible

    def test_contact_needs_number(self):
        front = build_storefront(
            make_detail(make_venue("premium", whatsapp="")), datetime(2025, 1, 15, 12, 0))
        assert not front.show_contact

    def test_open_flag_uses_schedule(self):
        detail = make_detail(make_venue(schedule=NINE_TO_SIX))
        assert build_storefront(detail, datetime(2025, 1, 15, 12, 0)).is_open
        assert not build_storefront(detail, datetime(2025, 1, 15, 20, 0)).is_open


class TestLocalTime:

    def test_aware_now_is_converted_to_site_timezone(self, settings):
        settings.TIME_ZONE = "America/Argentina/Buenos_Aires"
        venue = make_venue(schedule=NINE_TO_SIX)
        # 13:00 UTC = 10:00 en Buenos Aires (UTC-3)
        assert venue_is_open(venue, datetime(2025, 1, 15, 13, 0, tzinfo=dt_timezone.utc))
        # 22:00 UTC = 19:00 en Buenos Aires
        assert not venue_is_open(venue, datetime(2025, 1, 15, 22, 0, tzinfo=dt_timezone.utc))

    def test_default_now_reads_clock(self):
        assert venue_is_open(make_venue(manual_open=True)) is True


class TestListings:

    def test_filter_open_now_keeps_order(self):
        abierto = make_venue(slug="a", manual_open=True)
        cerrado = make_venue(slug="b", manual_open=False)
        con_horario = make_venue(slug="c", schedule=NINE_TO_SIX)

        result = filter_open_now([abierto, cerrado, con_horario], datetime(2025, 1, 15, 10, 0))
        assert [v.slug for v in result] == ["a", "c"]

    @pytest.mark.parametrize("plan,status,expected", [
        ("premium", "active", True),
        ("premium", "inactive", False),
        ("basic", "active", False),
        ("free", "active", False),
    ])
    def test_featured_requires_active_premium(self, plan, status, expected):
        venue = make_venue(plan, status)
        assert (featured_venues([venue]) == [venue]) is expected


def listed(slug, name, description="", category="", plan="free", status="active",
           manual_open=False):
    return Venue(
        id=len(slug),
        slug=slug,
        name=name,
        description=description,
        region_code="tdf",
        category=category,
        subscription_plan=plan,
        subscription_status=status,
        manual_open=manual_open,
    )


SUSHI = listed("sakura-sushi", "Sakura Sushi", "Cocina japonesa", "restaurant",
               plan="premium", manual_open=True)
CAFE = listed("cafe-del-sol", "Café del Sol", "Desayunos y meriendas", "cafe",
              plan="basic")
MERCADO = listed("mercado", "Mercado de Artesanías", "Regionales", "shop")


class TestFilterVenues:

    def test_no_filters_keeps_everything(self):
        assert filter_venues([SUSHI, CAFE, MERCADO]) == [SUSHI, CAFE, MERCADO]

    @pytest.mark.parametrize("query,expected", [
        ("sushi", ["sakura-sushi"]),
        ("CAFE", ["cafe-del-sol"]),
        ("artesanias", ["mercado"]),
        ("japonesa", ["sakura-sushi"]),
        ("pizza", []),
    ])
    def test_query_matches_name_or_description(self, query, expected):
        result = filter_venues([SUSHI, CAFE, MERCADO], query=query)
        assert [v.slug for v in result] == expected

    def test_category_is_exact(self):
        assert filter_venues([SUSHI, CAFE, MERCADO], category="cafe") == [CAFE]

    def test_open_only(self):
        result = filter_venues([SUSHI, CAFE, MERCADO], open_only=True,
                               now=datetime(2025, 1, 15, 12, 0))
        assert result == [SUSHI]

    def test_filters_combine(self):
        result = filter_venues([SUSHI, CAFE, MERCADO], query="sol",
                               category="cafe", open_only=True,
                               now=datetime(2025, 1, 15, 12, 0))
        assert result == []


class TestPlanOrdering:

    def test_priority_uses_effective_plan(self):
        assert plan_priority(SUSHI) == 3
        assert plan_priority(CAFE) == 2
        assert plan_priority(MERCADO) == 1
        assert plan_priority(listed("x", "X", plan="premium", status="inactive")) == 1

    def test_sort_is_stable_within_plan(self):
        otro = listed("otro", "Otro Full", plan="premium")
        assert sort_by_plan_priority([MERCADO, SUSHI, CAFE, otro]) == [
            SUSHI, otro, CAFE, MERCADO]

    def test_categories(self):
        assert venue_categories([SUSHI, CAFE, MERCADO, listed("y", "Y")]) == [
            "cafe", "restaurant", "shop"]
