"""
Tests for the engagement service client and the request middleware.
"""
import json

import httpx
import pytest
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse
from django.test import RequestFactory

from crm.data_sources import DataSources, EngagesAPI
from crm.errors import EngagesAPIError
from crm.middleware import DataSourcesMiddleware


def make_api(handler):
    return EngagesAPI(base_url="http://engages.test/", transport=httpx.MockTransport(handler))


class TestEngagesAPI:
    def test_list(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=[{"_id": "1", "title": "Welcome"}])

        with make_api(handler) as api:
            assert api.list() == [{"_id": "1", "title": "Welcome"}]

        assert requests[0].method == "GET"
        assert str(requests[0].url) == "http://engages.test/engages/list"

    def test_send(self):
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"status": "ok"})

        api = make_api(handler)

        assert api.send({"customerId": "c1", "title": "Hello"}) == {"status": "ok"}
        assert bodies == [{"customerId": "c1", "title": "Hello"}]

    def test_engages_change_customer(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(204)

        api = make_api(handler)

        assert api.engages_change_customer(new_customer_id="new", customer_ids=["a", "b"]) is None
        assert requests[0].method == "POST"
        assert requests[0].url.path == "/engages/changeCustomer"
        assert json.loads(requests[0].content) == {"customerId": "new", "customerIds": ["a", "b"]}

    def test_http_error_status(self):
        api = make_api(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(EngagesAPIError, match="status 500") as excinfo:
            api.list()

        assert excinfo.value.path == "/engages/list"

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        api = make_api(handler)

        with pytest.raises(EngagesAPIError, match="connection refused"):
            api.send({})

    def test_missing_domain(self, settings):
        settings.ENGAGES_API_DOMAIN = ""

        with pytest.raises(ImproperlyConfigured):
            EngagesAPI().list()

    def test_settings_are_used(self, settings):
        settings.ENGAGES_API_DOMAIN = "http://engages.internal"
        settings.ENGAGES_API_TIMEOUT = 3.5

        api = EngagesAPI()

        assert api.base_url == "http://engages.internal"
        assert api.timeout == 3.5


def test_middleware_attaches_data_sources():
    seen = {}

    def get_response(request):
        seen["data_sources"] = request.data_sources
        return HttpResponse("ok")

    response = DataSourcesMiddleware(get_response)(RequestFactory().get("/graphql"))

    assert response.status_code == 200
    assert isinstance(seen["data_sources"], DataSources)
    assert isinstance(seen["data_sources"].engages, EngagesAPI)
