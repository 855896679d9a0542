"""Aurauspooli API client.

A thin wrapper around the REST API served by ``aurauspooli_api``.  The
client uses the ``requests`` library and exposes one method per
operation:

* :meth:`list_postal_areas` / :meth:`get_postal_area`
* :meth:`submit_service_request`, :meth:`list_service_requests`,
  :meth:`update_service_request_status`
* :meth:`submit_operator_service`, :meth:`list_operator_services`,
  :meth:`toggle_operator_availability`
* :meth:`create_booking`, :meth:`list_bookings`,
  :meth:`get_active_booking_count`, :meth:`update_booking_status`
* :meth:`get_quote`, :meth:`calculate_price`
* :meth:`get_statistics`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
list operations) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.

Mutating calls for requests and listings need a caller id, sent in the
``X-Caller-Id`` header.  Pass ``caller_id`` when constructing the
client.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class AurauspooliAPI:
    """Client for the Aurauspooli booking API."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        caller_id: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            caller_id: Identity sent in the ``X-Caller-Id`` header.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.caller_id = caller_id
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to the API prefix (e.g. ``/bookings/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.caller_id:
            headers["X-Caller-Id"] = self.caller_id
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Postal areas
    # ------------------------------------------------------------------
    def list_postal_areas(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/postal-areas/")

    def get_postal_area(self, postal_code: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/postal-areas/{postal_code}")

    # ------------------------------------------------------------------
    # Service requests
    # ------------------------------------------------------------------
    def submit_service_request(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a service request.

        Args:
            payload: ``postal_code``, ``address``, ``yard_size_category``
                and optionally ``service_type``, ``requested_date`` and
                ``notes``.
        """
        return self._request("POST", "/service-requests/", json_body=payload)

    def list_service_requests(self, postal_code: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"postal_code": postal_code} if postal_code else None
        return self._list("/service-requests/", params)

    def update_service_request_status(
        self, request_id: int, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/service-requests/{request_id}/status", json_body={"status": status})

    # ------------------------------------------------------------------
    # Operator services
    # ------------------------------------------------------------------
    def submit_operator_service(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/operator-services/", json_body=payload)

    def list_operator_services(self, postal_code: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"postal_code": postal_code} if postal_code else None
        return self._list("/operator-services/", params)

    def toggle_operator_availability(self, service_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/operator-services/{service_id}/toggle-availability")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a booking.

        Args:
            payload: ``service_request_id``, ``scheduled_date`` and
                optionally ``operator_service_id``, ``scheduled_time``
                and ``status``.
        """
        return self._request("POST", "/bookings/", json_body=payload)

    def list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/bookings/")

    def get_active_booking_count(self, postal_code: str, booking_date: date | str) -> Tuple[int, Optional[Error]]:
        data, error = self._request(
            "GET",
            "/bookings/active-count",
            params={"postal_code": postal_code, "date": str(booking_date)},
        )
        if error:
            return 0, error
        return int((data or {}).get("active_bookings_count", 0)), None

    def update_booking_status(
        self, booking_id: int, status: str, actual_time_minutes: Optional[int] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        body: Dict[str, Any] = {"status": status}
        if actual_time_minutes is not None:
            body["actual_time_minutes"] = actual_time_minutes
        return self._request("PUT", f"/bookings/{booking_id}/status", json_body=body)

    # ------------------------------------------------------------------
    # Pricing and statistics
    # ------------------------------------------------------------------
    def get_quote(self, postal_code: str, yard_size_category: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "GET",
            "/pricing/quote",
            params={"postal_code": postal_code, "yard_size_category": yard_size_category},
        )

    def calculate_price(
        self, estimated_time_minutes: float, bookings_in_same_area: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/pricing/calculate",
            json_body={
                "estimated_time_minutes": estimated_time_minutes,
                "bookings_in_same_area": bookings_in_same_area,
            },
        )

    def get_statistics(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/statistics/overview")
