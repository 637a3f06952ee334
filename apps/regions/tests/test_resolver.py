"""
Tests de apps.regions.resolver: región a partir del header Host.
"""
import pytest

from apps.regions.resolver import resolve_region_code


class TestProductionHosts:
    """Hosts bajo el dominio canónico."""

    def test_region_subdomain(self):
        assert resolve_region_code("tdf.encontra.com.ar") == "tdf"

    def test_www_is_global(self):
        assert resolve_region_code("www.encontra.com.ar") == ""

    def test_apex_is_global(self):
        assert resolve_region_code("encontra.com.ar") == ""

    def test_region_is_lowercased(self):
        assert resolve_region_code("TDF.Encontra.com.ar") == "tdf"

    def test_custom_apex_label(self):
        assert resolve_region_code("guia.com.ar", apex_label="guia") == ""
        assert resolve_region_code("cba.guia.com.ar", apex_label="guia") == "cba"


class TestDevelopmentHosts:
    """Hosts locales tipo tdf.localhost:3000."""

    def test_region_on_localhost_with_port(self):
        assert resolve_region_code("tdf.localhost:3000") == "tdf"

    def test_region_on_localhost_without_port(self):
        assert resolve_region_code("cba.localhost") == "cba"

    def test_bare_localhost_is_global(self):
        assert resolve_region_code("localhost:3000") == ""
        assert resolve_region_code("localhost") == ""

    def test_reserved_label_accepted_on_dev_host(self):
        assert resolve_region_code("www.localhost:3000") == "www"

    def test_localhost_first_label_never_a_region(self):
        assert resolve_region_code("localhost.localdomain") == ""


class TestDegenerateInput:
    """Nunca lanza: sin región es un resultado válido."""

    @pytest.mark.parametrize("host", [None, "", "   ", "encontra", ".encontra.com.ar"])
    def test_returns_empty(self, host):
        assert resolve_region_code(host) == ""

    def test_is_idempotent(self):
        host = "sal.encontra.com.ar"
        assert resolve_region_code(host) == resolve_region_code(host) == "sal"
