"""
Tests del registro fijo de regiones.
"""
import pytest

from apps.regions.registry import (
    REGIONS,
    get_region,
    get_region_name,
    is_known_region,
)


class TestRegistry:

    def test_has_all_jurisdictions(self):
        assert len(REGIONS) == 24
        assert all(code == code.lower() for code in REGIONS)

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            REGIONS["xxx"] = None

    def test_lookup_is_case_insensitive(self):
        region = get_region(" TDF ")
        assert region is not None
        assert region.code == "tdf"
        assert region.display_name == "Tierra del Fuego"
        assert is_known_region("Cba")
        assert not is_known_region("zzz")


class TestRegionName:

    def test_known_code(self):
        assert get_region_name("tuc") == "Tucumán"

    def test_unknown_code_is_uppercased(self):
        assert get_region_name("xyz") == "XYZ"

    @pytest.mark.parametrize("code", [None, "", "  "])
    def test_empty_code(self, code):
        assert get_region_name(code) == ""
