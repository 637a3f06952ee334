"""
Tests de la frontera de ingesta: filas del store → registros inmutables.
"""
import dataclasses
from types import SimpleNamespace

import pytest

from apps.venues.records import (
    DaySchedule,
    TimeRange,
    VenueRecordError,
    fold_text,
    resolve_localized_text,
    venue_from_row,
    weekly_schedule_from_raw,
)


def row(**overrides):
    data = dict(
        pk=7,
        slug="sakura-sushi",
        name={"es": "Sakura Sushi", "en": "Sakura Sushi EN"},
        description="Cocina japonesa",
        region_code="TDF",
        zone="Ushuaia",
        city="",
        category="restaurant",
        subscription_plan="Premium",
        subscription_status="active",
        schedule=None,
        is_open=True,
        image="",
        logo="",
        gallery=["/a.png", "", "/b.png"],
        whatsapp="5491112345678",
        phone="",
        website="",
        instagram="sakurasushi",
        facebook="",
    )
    data.update(overrides)
    return SimpleNamespace(**data)


class TestLocalizedText:

    def test_plain_string(self):
        assert resolve_localized_text("Hola") == "Hola"

    def test_prefers_requested_language(self):
        assert resolve_localized_text({"es": "Hola", "en": "Hello"}) == "Hola"

    def test_falls_back(self):
        assert resolve_localized_text({"en": "Hello"}) == "Hello"
        assert resolve_localized_text({"es": "", "en": "Hello"}) == "Hello"

    def test_missing(self):
        assert resolve_localized_text(None) == ""
        assert resolve_localized_text({"pt": "Olá"}) == ""


class TestWeeklySchedule:

    def test_maps_store_json(self):
        schedule = weekly_schedule_from_raw({
            "Monday": {"isOpen": True, "ranges": [{"start": "09:00", "end": "18:00"}]},
            "holiday": {"isOpen": False, "ranges": []},
        })
        assert dict(schedule) == {
            "monday": DaySchedule(is_open=True, ranges=(TimeRange("09:00", "18:00"),)),
        }

    def test_absent(self):
        assert weekly_schedule_from_raw(None) is None

    def test_null_is_open_means_closed(self):
        schedule = weekly_schedule_from_raw({"monday": {"isOpen": None}})
        assert schedule["monday"].is_open is False

    def test_is_read_only(self):
        schedule = weekly_schedule_from_raw({"monday": {"isOpen": False}})
        with pytest.raises(TypeError):
            schedule["tuesday"] = DaySchedule(is_open=True)

    @pytest.mark.parametrize("raw", [
        ["monday"],
        {"monday": "9 a 18"},
        {"monday": {"isOpen": True, "ranges": "09:00-18:00"}},
        {"monday": {"isOpen": True, "ranges": ["09:00-18:00"]}},
        {"monday": {"isOpen": "false", "ranges": []}},
        {"monday": {"isOpen": 1, "ranges": []}},
    ])
    def test_structurally_invalid(self, raw):
        with pytest.raises(VenueRecordError):
            weekly_schedule_from_raw(raw)


class TestVenueFromRow:

    def test_normalizes_fields(self):
        venue = venue_from_row(row())
        assert venue.id == 7
        assert venue.name == "Sakura Sushi"
        assert venue.region_code == "tdf"
        assert venue.subscription_plan == "premium"
        assert venue.manual_open is True
        assert venue.gallery == ("/a.png", "/b.png")

    def test_language_preference(self):
        venue = venue_from_row(row(), language="en", fallback="es")
        assert venue.name == "Sakura Sushi EN"

    def test_record_is_frozen(self):
        venue = venue_from_row(row())
        with pytest.raises(dataclasses.FrozenInstanceError):
            venue.subscription_plan = "free"

    def test_blank_slug_is_invalid(self):
        with pytest.raises(VenueRecordError):
            venue_from_row(row(slug="  "))

    def test_invalid_gallery(self):
        with pytest.raises(VenueRecordError):
            venue_from_row(row(gallery="/a.png"))


class TestFoldText:

    @pytest.mark.parametrize("value,expected", [
        ("Río Grande", "rio grande"),
        ("rio-grande", "rio grande"),
        ("  SAN   Martín_de los Andes ", "san martin de los andes"),
        ("", ""),
        (None, ""),
    ])
    def test_folds(self, value, expected):
        assert fold_text(value) == expected
