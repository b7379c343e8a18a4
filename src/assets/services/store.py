"""Asset store: list, create, update and delete persisted assets."""

import hashlib
import logging

from django.core.exceptions import ValidationError
from django.db.models import Count, Max

from ..choices import (
    DEFAULT_LOCATION,
    KIND_ASSET,
    KIND_CHOICES,
    STATUS_AVAILABLE,
)
from ..models import Asset
from ..records import normalize_payload
from .fields import (
    clean_date,
    clean_id,
    clean_name,
    clean_price,
    clean_quantity,
    clean_text,
)
from .state import parse_update

logger = logging.getLogger(__name__)


def list_assets():
    """Return every asset, newest first."""
    return list(Asset.objects.order_by("-id"))


def collection_etag() -> str:
    """Version tag for the whole record set.

    Changes whenever a row is created, updated or deleted: creation
    moves the highest id, updates move the latest ``updated_at`` and
    deletion changes the count.
    """
    agg = Asset.objects.aggregate(
        count=Count("id"), last_id=Max("id"), last_update=Max("updated_at")
    )
    last_update = agg["last_update"].isoformat() if agg["last_update"] else ""
    raw = f"{agg['count']}:{agg['last_id'] or 0}:{last_update}"
    return '"' + hashlib.md5(raw.encode()).hexdigest() + '"'


def create_asset(payload: dict) -> Asset:
    """Create an asset from a request body.

    Caller-supplied ``status`` and ``assignedTo`` are ignored: every new
    asset starts available with no holder.

    Raises ValidationError on a malformed body.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Asset body must be a JSON object.")
    data = normalize_payload(payload)
    kind = clean_text(data.get("kind")) or KIND_ASSET
    if kind not in dict(KIND_CHOICES):
        raise ValidationError({"kind": f"'{kind}' is not a valid kind."})
    asset = Asset.objects.create(
        name=clean_name(data.get("name")),
        category=clean_text(data.get("category")),
        serial_number=clean_text(data.get("serial_number")),
        status=STATUS_AVAILABLE,
        assigned_to="",
        price=clean_price(data.get("price")),
        purchase_date=clean_date(data.get("purchase_date")),
        location=clean_text(data.get("location")) or DEFAULT_LOCATION,
        quantity=clean_quantity(data.get("quantity")),
        kind=kind,
    )
    logger.info("Created asset %s (%s)", asset.pk, asset.name)
    return asset


def update_asset(payload: dict) -> Asset:
    """Apply a transition or detail update and return the stored asset.

    Raises ValidationError on a malformed body and Asset.DoesNotExist
    for an unknown id.
    """
    asset_id, request = parse_update(payload)
    asset = Asset.objects.get(pk=asset_id)
    changes = request.changes()
    for name, value in changes.items():
        setattr(asset, name, value)
    asset.save(update_fields=[*changes, "updated_at"])
    logger.info(
        "Updated asset %s (%s): %s",
        asset.pk,
        type(request).__name__,
        ", ".join(changes),
    )
    return asset


def delete_asset(asset_id) -> bool:
    """Delete by id. Deleting a missing id is not an error.

    Returns True if a row was removed.
    """
    deleted, _ = Asset.objects.filter(pk=clean_id(asset_id)).delete()
    if deleted:
        logger.info("Deleted asset %s", asset_id)
    return bool(deleted)
