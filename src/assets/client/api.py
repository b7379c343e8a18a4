"""HTTP client for the asset endpoint.

Reads degrade to an empty list when the store cannot be reached;
writes return None. Neither raises on a transport failure, so a caller
rendering a list never crashes on a dead network.
"""

import logging
from dataclasses import dataclass, field

import requests

from ..records import from_record, to_payload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


@dataclass
class Listing:
    """Result of a list call."""

    records: list = field(default_factory=list)
    etag: str | None = None
    not_modified: bool = False


def _session_url(base_url):
    return base_url.rstrip("/").rsplit("/", 1)[0] + "/session/"


class AssetApiClient:
    """Talks to ``/api/assets/`` (and ``/api/session/`` beside it)."""

    def __init__(
        self,
        base_url,
        session=None,
        timeout=DEFAULT_TIMEOUT,
        session_url=None,
    ):
        self.base_url = base_url
        self.session_url = session_url or _session_url(base_url)
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method, url, **kwargs):
        return self.session.request(
            method, url, timeout=self.timeout, **kwargs
        )

    def list_assets(self, etag=None) -> Listing:
        """Fetch every asset; pass ``etag`` to allow a 304 reply."""
        headers = {"If-None-Match": etag} if etag else {}
        try:
            response = self._request("GET", self.base_url, headers=headers)
        except requests.RequestException as exc:
            logger.error("Failed to fetch assets: %s", exc)
            return Listing()
        if response.status_code == 304:
            return Listing(etag=etag, not_modified=True)
        if not response.ok:
            logger.error(
                "Failed to fetch assets: HTTP %s", response.status_code
            )
            return Listing()
        try:
            rows = response.json()
        except ValueError as exc:
            logger.error("Failed to decode asset list: %s", exc)
            return Listing()
        return Listing(
            records=[from_record(row) for row in rows],
            etag=response.headers.get("ETag"),
        )

    def _write(self, method, payload):
        try:
            response = self._request(method, self.base_url, json=payload)
        except requests.RequestException as exc:
            logger.error("Asset %s failed: %s", method, exc)
            return None
        if not response.ok:
            logger.warning(
                "Asset %s rejected: HTTP %s %s",
                method,
                response.status_code,
                response.text,
            )
            return None
        return response

    def create_asset(self, fields: dict):
        """Create an asset; returns the stored asset or None."""
        response = self._write("POST", to_payload(fields))
        return from_record(response.json()) if response is not None else None

    def update_asset(self, payload: dict):
        """Send an update body; returns the stored asset or None."""
        response = self._write("PUT", to_payload(payload))
        return from_record(response.json()) if response is not None else None

    def delete_asset(self, asset_id) -> bool:
        return self._write("DELETE", {"id": asset_id}) is not None

    def login(self, username, password) -> bool:
        try:
            response = self._request(
                "POST",
                self.session_url,
                json={"username": username, "password": password},
            )
        except requests.RequestException as exc:
            logger.error("Login failed: %s", exc)
            return False
        return response.ok

    def logout(self) -> None:
        try:
            self._request("DELETE", self.session_url)
        except requests.RequestException as exc:
            logger.warning("Logout failed: %s", exc)
