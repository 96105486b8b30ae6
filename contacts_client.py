"""Contacts Manager API client.

A thin wrapper around the REST API exposed by ``contacts_manager``.  The
client uses the ``requests`` library internally and never raises for
HTTP or network failures: every method returns a ``(data, error)``
tuple where ``error`` is ``None`` on success and otherwise a dictionary
with ``status_code``, ``message`` and, for validation failures, the
list of ``errors`` reported by the server.

* :meth:`list_persons` – search and sort the person directory.
* :meth:`get_person` – fetch a single person by id.
* :meth:`add_person` / :meth:`update_person` / :meth:`delete_person`.
* :meth:`list_countries` / :meth:`add_country` / :meth:`upload_countries`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ContactsAPI:
    """Client for the Contacts Manager API (version 1)."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None, files: Dict[str, Any] | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty responses) and ``error`` is ``None`` on
            success.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                files=files,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": []}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        errors: List[Dict[str, str]] = []
        if response is not None:
            try:
                body = response.json()
                message = str(body.get("detail") or body)
                errors = body.get("errors") or []
            except ValueError:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message, "errors": errors}

    # ------------------------------------------------------------------
    # Person operations
    # ------------------------------------------------------------------
    def list_persons(
        self,
        *,
        search_by: Optional[str] = None,
        search_string: Optional[str] = None,
        sort_by: str = "name",
        sort_order: str = "ASC",
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"sort_by": sort_by, "sort_order": sort_order}
        if search_by:
            params["search_by"] = search_by
        if search_string:
            params["search_string"] = search_string
        data, error = self._request("GET", "/persons/", params=params)
        if error:
            return [], error
        return data or [], None

    def get_person(self, person_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/persons/{person_id}")

    def add_person(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/persons/", json_body=payload)

    def update_person(self, person_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a person.  ``payload`` must contain every field."""
        return self._request("PUT", f"/persons/{person_id}", json_body=payload)

    def delete_person(self, person_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/persons/{person_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Country operations
    # ------------------------------------------------------------------
    def list_countries(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/countries/")
        if error:
            return [], error
        return data or [], None

    def add_country(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/countries/", json_body={"name": name})

    def upload_countries(self, filename: str, content: bytes) -> Tuple[int, Optional[Error]]:
        """Upload an ``.xlsx`` workbook; returns the number of countries added."""
        files = {
            "file": (
                filename,
                content,
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )
        }
        data, error = self._request("POST", "/countries/upload", files=files)
        if error:
            return 0, error
        return int((data or {}).get("inserted", 0)), None
