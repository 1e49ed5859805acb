"""Customer Directory API client.

This module defines a small client wrapper around the HTTP API of the
customer directory service.  It covers the five calls the browser UI
makes, plus the health check:

* :meth:`list_customers` – return every customer.
* :meth:`get_customer` – fetch a single customer by id.
* :meth:`create_customer` – create a customer.
* :meth:`update_customer` – replace a customer's name, email and telephone.
* :meth:`delete_customer` – delete a customer.
* :meth:`health` – check that the service is up.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``, where ``message`` is the
server's ``error`` string when it sent one.  The client uses the
``requests`` library internally.

The base URL defaults to the ``CUSTOMER_API_URL`` environment variable
and falls back to ``http://localhost:8080``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"

Error = Dict[str, Any]


class CustomerDirectoryClient:
    """Client for interacting with the customer directory API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        base_url = base_url or os.getenv("CUSTOMER_API_URL") or DEFAULT_BASE_URL
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/customers``).
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers={"Content-Type": "application/json"},
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
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _customer_path(customer_id: str) -> str:
        return f"/customers/{quote(str(customer_id), safe='')}"

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all customers.

        Returns:
            A tuple ``(customers, error)``. ``customers`` is empty on failure.
        """
        data, error = self._request("GET", "/customers")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_customer(self, customer_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single customer by id."""
        return self._request("GET", self._customer_path(customer_id))

    def create_customer(
        self, name: str, email: str, telephone: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a customer.

        ``telephone`` is only sent when given; the server stores ``""``
        otherwise.
        """
        payload: Dict[str, Any] = {"name": name, "email": email}
        if telephone is not None:
            payload["telephone"] = telephone
        return self._request("POST", "/customers", json_body=payload)

    def update_customer(
        self, customer_id: str, name: str, email: str, telephone: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a customer's name, email and telephone."""
        payload = {"name": name, "email": email, "telephone": telephone}
        return self._request("PUT", self._customer_path(customer_id), json_body=payload)

    def delete_customer(self, customer_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a customer.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._customer_path(customer_id))
        if error:
            return False, error
        return True, None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the service health status."""
        return self._request("GET", "/health")
