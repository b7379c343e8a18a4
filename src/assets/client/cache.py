"""In-memory snapshot of the full asset list.

Views, search and filters read the snapshot and never patch it. A
mutation marks it stale and the owner re-reads the whole list.
"""

from collections import Counter

from ..choices import (
    STATUS_ASSIGNED,
    STATUS_AVAILABLE,
    STATUS_MAINTENANCE,
    TAB_ALL,
    TAB_STATUSES,
)

SEARCH_FIELDS = ("name", "serialNumber", "assignedTo", "location")


class AssetCache:
    """Snapshot of the last full list, with its collection ETag."""

    def __init__(self):
        self.assets = []
        self.etag = None
        self.stale = True

    def invalidate(self):
        self.stale = True

    def refresh(self, api):
        """Re-read the list through ``api``.

        A fresh snapshot sends the held ETag and keeps its data on a 304.
        A stale one always fetches in full.
        """
        listing = api.list_assets(etag=None if self.stale else self.etag)
        if not listing.not_modified:
            self.assets = listing.records
            self.etag = listing.etag
        self.stale = False
        return self.assets

    def get(self, asset_id):
        for asset in self.assets:
            if str(asset["id"]) == str(asset_id):
                return asset
        return None

    def search(self, term):
        """Case-insensitive substring match over the text fields."""
        term = (term or "").strip().lower()
        if not term:
            return list(self.assets)
        return [
            asset
            for asset in self.assets
            if any(
                term in str(asset.get(name) or "").lower()
                for name in SEARCH_FIELDS
            )
        ]

    def by_category(self, category):
        return [a for a in self.assets if a.get("category") == category]

    def by_tab(self, tab):
        """Filter for a tab: ``all``, ``checked_out`` or a status name."""
        if tab == TAB_ALL:
            return list(self.assets)
        status = TAB_STATUSES.get(tab, tab)
        return [a for a in self.assets if a.get("status") == status]

    def stats(self):
        counts = Counter(a.get("status") for a in self.assets)
        return {
            "total": len(self.assets),
            "assigned": counts[STATUS_ASSIGNED],
            "available": counts[STATUS_AVAILABLE],
            "maintenance": counts[STATUS_MAINTENANCE],
        }

    def category_counts(self):
        return dict(Counter(a.get("category") or "" for a in self.assets))

    def locations(self):
        return sorted({a.get("location") for a in self.assets} - {None, ""})
