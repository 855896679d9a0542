"""Tests for the requests-based API client."""

import json
from unittest.mock import Mock

import pytest
import requests

from aurauspooli_client import AurauspooliAPI


def make_response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://testserver/api/v1/"
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return AurauspooliAPI(base_url="http://testserver/", caller_id="customer-1", session=session)


class TestRequests:
    """Test request construction"""

    def test_url_and_caller_header(self, api, session):
        session.request.return_value = make_response(200, [])

        api.list_postal_areas()

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://testserver/api/v1/postal-areas/"
        assert kwargs["headers"] == {"X-Caller-Id": "customer-1"}
        assert kwargs["timeout"] == 15

    def test_no_caller_header_without_caller_id(self, session):
        api = AurauspooliAPI(base_url="http://testserver", session=session)
        session.request.return_value = make_response(200, [])

        api.list_bookings()

        assert session.request.call_args.kwargs["headers"] == {}

    def test_submit_service_request_posts_json(self, api, session):
        created = {"id": 1, "status": "pending"}
        session.request.return_value = make_response(201, created)
        payload = {"postal_code": "00100", "address": "Street 1", "yard_size_category": "small"}

        data, error = api.submit_service_request(payload)

        assert (data, error) == (created, None)
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"].endswith("/api/v1/service-requests/")
        assert kwargs["json"] == payload

    def test_filters_passed_as_params(self, api, session):
        session.request.return_value = make_response(200, [{"id": 2}])

        data, error = api.list_operator_services(postal_code="02100")

        assert data == [{"id": 2}]
        assert error is None
        assert session.request.call_args.kwargs["params"] == {"postal_code": "02100"}

    def test_active_booking_count(self, api, session):
        session.request.return_value = make_response(
            200, {"postal_code": "00100", "date": "2025-01-15", "active_bookings_count": 3}
        )

        count, error = api.get_active_booking_count("00100", "2025-01-15")

        assert (count, error) == (3, None)
        assert session.request.call_args.kwargs["params"] == {"postal_code": "00100", "date": "2025-01-15"}

    def test_update_booking_status_body(self, api, session):
        session.request.return_value = make_response(200, {"id": 4, "status": "completed"})

        api.update_booking_status(4, "completed", actual_time_minutes=30)

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"].endswith("/bookings/4/status")
        assert kwargs["json"] == {"status": "completed", "actual_time_minutes": 30}

    def test_empty_response_body(self, api, session):
        session.request.return_value = make_response(204)

        assert api.toggle_operator_availability(1) == (None, None)


class TestErrors:
    """Test the (data, error) contract on failures"""

    def test_http_error_uses_detail(self, api, session):
        session.request.return_value = make_response(404, {"detail": "Booking 9 does not exist"})

        data, error = api.update_booking_status(9, "cancelled")

        assert data is None
        assert error == {"status_code": 404, "message": "Booking 9 does not exist"}

    def test_http_error_without_json(self, api, session):
        response = make_response(500)
        response._content = b"Internal Server Error"
        session.request.return_value = response

        data, error = api.get_statistics()

        assert data is None
        assert error["status_code"] == 500
        assert error["message"] == "Internal Server Error"

    def test_list_error_returns_empty_list(self, api, session):
        session.request.return_value = make_response(422, {"detail": "bad postal code"})

        data, error = api.list_service_requests(postal_code="x")

        assert data == []
        assert error["status_code"] == 422

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        count, error = api.get_active_booking_count("00100", "2025-01-15")

        assert count == 0
        assert error == {"status_code": None, "message": "connection refused"}
