"""Request-field cleaning shared by the store and the importer."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError

# price column holds 12 digits, 2 after the point
MAX_PRICE = Decimal("10000000000")

# largest value a PositiveIntegerField holds on every backend
MAX_QUANTITY = 2147483647


def clean_id(value) -> int:
    if isinstance(value, bool):
        raise ValidationError({"id": "Asset id must be an integer."})
    try:
        asset_id = int(value)
    except (TypeError, ValueError):
        raise ValidationError({"id": "Asset id must be an integer."})
    if asset_id <= 0:
        raise ValidationError({"id": "Asset id must be positive."})
    return asset_id


def clean_name(value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError({"name": "Name is required."})
    return value.strip()


def clean_text(value, default="") -> str:
    if value is None:
        return default
    return str(value).strip()


def clean_price(value):
    """Return a Decimal, or None for a blank price."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError({"price": "Price must be a number."})
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError({"price": "Price must be a number."})
    if not price.is_finite():
        # NaN is what a browser form sends for an empty price field
        return None
    if price < 0:
        raise ValidationError({"price": "Price cannot be negative."})
    if price >= MAX_PRICE:
        raise ValidationError({"price": "Price is too large."})
    return price.quantize(Decimal("0.01"))


def clean_quantity(value, default=1) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise ValidationError({"quantity": "Quantity must be an integer."})
    try:
        quantity = int(str(value).strip())
    except ValueError:
        raise ValidationError({"quantity": "Quantity must be an integer."})
    if quantity < 0:
        raise ValidationError({"quantity": "Quantity cannot be negative."})
    if quantity > MAX_QUANTITY:
        raise ValidationError({"quantity": "Quantity is too large."})
    return quantity


def clean_date(value):
    """Accept ``YYYY-MM-DD`` or a full ISO timestamp; blank is None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text.split("T")[0])
    except ValueError:
        raise ValidationError(
            {"purchase_date": "Purchase date must be YYYY-MM-DD."}
        )
