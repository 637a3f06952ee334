"""
Tests de RegionMiddleware y del context processor de región.
"""
import pytest
from django.http import HttpResponse

from apps.regions.context_processors import region
from encontra.middleware import RegionMiddleware


@pytest.fixture
def middleware():
    return RegionMiddleware(lambda request: HttpResponse("ok"))


class TestRegionMiddleware:

    def test_attaches_region(self, middleware, rf):
        request = rf.get("/", HTTP_HOST="tdf.encontra.com.ar")
        middleware.process_request(request)

        assert request.region_code == "tdf"
        assert request.region.display_name == "Tierra del Fuego"
        assert request.META["HTTP_X_ENCONTRA_REGION"] == "tdf"

    def test_global_host(self, middleware, rf):
        request = rf.get("/", HTTP_HOST="www.encontra.com.ar")
        middleware.process_request(request)

        assert request.region_code == ""
        assert request.region is None
        assert "HTTP_X_ENCONTRA_REGION" not in request.META

    def test_unregistered_subdomain_keeps_code(self, middleware, rf):
        request = rf.get("/", HTTP_HOST="demo.encontra.com.ar")
        middleware.process_request(request)

        assert request.region_code == "demo"
        assert request.region is None

    def test_uses_settings(self, middleware, rf, settings):
        settings.ENCONTRA_APEX_LABEL = "guia"
        request = rf.get("/", HTTP_HOST="guia.com.ar")
        middleware.process_request(request)
        assert request.region_code == ""

    def test_full_call_returns_response(self, middleware, rf):
        request = rf.get("/", HTTP_HOST="cba.localhost:3000")
        response = middleware(request)
        assert response.status_code == 200
        assert request.region_code == "cba"


class TestRegionContextProcessor:

    def test_exposes_code_and_name(self, rf):
        request = rf.get("/")
        request.region_code = "mdz"
        assert region(request) == {"region_code": "mdz", "region_name": "Mendoza"}

    def test_without_middleware(self, rf):
        assert region(rf.get("/")) == {"region_code": "", "region_name": ""}
