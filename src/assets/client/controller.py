"""Client-side controller for the asset tracker.

Owns the cache and drives every user action through the API client:
each mutation invalidates the cache and re-reads the full list.
Check-out and check-in preconditions are judged against the cached
snapshot, so two sessions holding stale snapshots can both check the
same asset out; the later write wins.
"""

import logging

from django.core.exceptions import ValidationError

from ..records import normalize_payload
from ..services.state import (
    DetailEdit,
    check_in_request,
    check_out_request,
    clean_detail_values,
)
from .cache import AssetCache

logger = logging.getLogger(__name__)


class AssetController:
    def __init__(self, api, cache=None, view_state=None):
        self.api = api
        self.cache = cache or AssetCache()
        self.view_state = view_state
        self.logged_in = False

    # --- Session ---

    def login(self, username, password) -> bool:
        self.logged_in = self.api.login(username, password)
        return self.logged_in

    def logout(self):
        self.api.logout()
        self.logged_in = False

    def show_section(self, name):
        if self.view_state is not None:
            self.view_state.section = name

    # --- Reads ---

    def refresh(self):
        return self.cache.refresh(self.api)

    def _cached(self, asset_id):
        asset = self.cache.get(asset_id)
        if asset is None:
            raise ValidationError(f"Asset {asset_id} is not in the list.")
        return asset

    # --- Mutations ---

    def _after_mutation(self):
        self.cache.invalidate()
        self.refresh()

    def add_asset(self, fields):
        record = self.api.create_asset(fields)
        self._after_mutation()
        return record

    def edit_asset(self, asset_id, fields):
        """Detail edit; status and holder fields in ``fields`` are ignored."""
        request = DetailEdit(clean_detail_values(normalize_payload(fields)))
        request.validate()
        record = self.api.update_asset(request.as_payload(asset_id))
        self._after_mutation()
        return record

    def check_out(self, asset_id, holder):
        """Check an available asset out to ``holder``."""
        asset = self._cached(asset_id)
        request = check_out_request(asset["status"], holder)
        record = self.api.update_asset(request.as_payload(asset["id"]))
        self._after_mutation()
        return record

    def check_in(self, asset_id, confirm):
        """Return an assigned asset once ``confirm(asset)`` agrees.

        Returns None without contacting the store if not confirmed.
        """
        asset = self._cached(asset_id)
        request = check_in_request(asset["status"])
        if not confirm(asset):
            logger.info("Check-in of asset %s cancelled", asset_id)
            return None
        record = self.api.update_asset(request.as_payload(asset["id"]))
        self._after_mutation()
        return record

    def delete_asset(self, asset_id) -> bool:
        deleted = self.api.delete_asset(asset_id)
        self._after_mutation()
        return deleted
