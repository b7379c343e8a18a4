"""Asset lifecycle: update request variants and check-out/check-in.

An update is either a ``Transition`` (status and holder move together)
or a ``DetailEdit`` (descriptive fields only). The two never mix, so a
caller cannot rename an asset and check it out in one request.
"""

from dataclasses import dataclass, field

from django.core.exceptions import ValidationError

from ..choices import (
    STATUS_ASSIGNED,
    STATUS_AVAILABLE,
    STATUS_CHOICES,
    VALID_TRANSITIONS,
)
from ..records import normalize_payload
from .fields import (
    clean_id,
    clean_name,
    clean_price,
    clean_quantity,
    clean_text,
)

MODE_TRANSITION = "transition"
MODE_DETAIL = "detail"

DETAIL_FIELDS = ("name", "price", "location", "quantity")


@dataclass(frozen=True)
class Transition:
    """Status change that writes ``status`` and ``assigned_to`` only."""

    status: str
    assigned_to: str = ""

    def validate(self) -> None:
        if self.status not in dict(STATUS_CHOICES):
            raise ValidationError(
                {"status": f"'{self.status}' is not a valid status."}
            )
        if self.status == STATUS_AVAILABLE and self.assigned_to:
            raise ValidationError(
                {
                    "assigned_to": "An available asset cannot be "
                    "assigned to anyone."
                }
            )

    def changes(self) -> dict:
        return {"status": self.status, "assigned_to": self.assigned_to}

    def as_payload(self, asset_id) -> dict:
        return {
            "id": asset_id,
            "mode": MODE_TRANSITION,
            "status": self.status,
            "assignedTo": self.assigned_to,
        }


@dataclass(frozen=True)
class DetailEdit:
    """Descriptive edit; only the supplied detail fields are written."""

    values: dict = field(default_factory=dict)

    def validate(self) -> None:
        unknown = set(self.values) - set(DETAIL_FIELDS)
        if unknown:
            raise ValidationError(
                f"Cannot edit {', '.join(sorted(unknown))} with a detail "
                f"update."
            )
        if not self.values:
            raise ValidationError("No detail fields to update.")

    def changes(self) -> dict:
        return dict(self.values)

    def as_payload(self, asset_id) -> dict:
        payload = {"id": asset_id, "mode": MODE_DETAIL}
        for key, value in self.values.items():
            if key == "price" and value is not None:
                value = str(value)
            payload[key] = value
        return payload


def clean_detail_values(normalized: dict) -> dict:
    values = {}
    if "name" in normalized:
        values["name"] = clean_name(normalized["name"])
    if "price" in normalized:
        values["price"] = clean_price(normalized["price"])
    if "location" in normalized:
        values["location"] = clean_text(normalized["location"])
    if "quantity" in normalized:
        values["quantity"] = clean_quantity(normalized["quantity"])
    return values


def parse_update(payload: dict):
    """Parse an update body into ``(asset_id, Transition | DetailEdit)``.

    An explicit ``mode`` selects the variant. Without one, a body that
    carries both ``status`` and ``assignedTo`` (an empty holder counts)
    is a transition, and anything else is a detail edit.

    Raises ValidationError on a malformed body.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Update body must be a JSON object.")
    asset_id = clean_id(payload.get("id"))
    normalized = normalize_payload(payload)
    mode = payload.get("mode")
    if mode is None:
        if "status" in normalized and "assigned_to" in normalized:
            mode = MODE_TRANSITION
        else:
            mode = MODE_DETAIL

    if mode == MODE_TRANSITION:
        if "status" not in normalized:
            raise ValidationError({"status": "Status is required."})
        request = Transition(
            status=clean_text(normalized["status"]),
            assigned_to=clean_text(normalized.get("assigned_to")),
        )
    elif mode == MODE_DETAIL:
        request = DetailEdit(clean_detail_values(normalized))
    else:
        raise ValidationError({"mode": f"Unknown update mode '{mode}'."})

    request.validate()
    return asset_id, request


def validate_transition(current_status: str, new_status: str) -> None:
    """Raise ValidationError if the lifecycle does not allow the move."""
    allowed = VALID_TRANSITIONS.get(current_status, [])
    if new_status not in allowed:
        raise ValidationError(
            f"Cannot move an asset from '{current_status}' to "
            f"'{new_status}'. Allowed transitions: "
            f"{', '.join(allowed) or 'none'}."
        )


def check_out_request(current_status: str, holder: str) -> Transition:
    """Build the transition that checks an available asset out."""
    validate_transition(current_status, STATUS_ASSIGNED)
    holder = clean_text(holder)
    if not holder:
        raise ValidationError(
            {"assigned_to": "A holder name is required to check out."}
        )
    return Transition(status=STATUS_ASSIGNED, assigned_to=holder)


def check_in_request(current_status: str) -> Transition:
    """Build the transition that returns an assigned asset."""
    validate_transition(current_status, STATUS_AVAILABLE)
    return Transition(status=STATUS_AVAILABLE, assigned_to="")
