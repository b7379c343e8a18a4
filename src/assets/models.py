"""Models for asset tracking."""

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from .choices import (
    DEFAULT_LOCATION,
    KIND_ASSET,
    KIND_CHOICES,
    STATUS_ASSIGNED,
    STATUS_AVAILABLE,
    STATUS_CHOICES,
    VALID_TRANSITIONS,
)


class Asset(models.Model):
    """Tracked physical item or stock-quantity line."""

    STATUS_CHOICES = STATUS_CHOICES
    KIND_CHOICES = KIND_CHOICES
    VALID_TRANSITIONS = VALID_TRANSITIONS

    name = models.TextField()
    category = models.TextField(blank=True, default="")
    serial_number = models.TextField(
        blank=True,
        default="",
        help_text="Free text; not unique",
    )
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_AVAILABLE
    )
    assigned_to = models.TextField(
        blank=True,
        default="",
        help_text="Holder name while the asset is checked out",
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    purchase_date = models.DateField(null=True, blank=True)
    location = models.TextField(blank=True, default=DEFAULT_LOCATION)
    quantity = models.PositiveIntegerField(default=1)
    kind = models.CharField(
        max_length=10, choices=KIND_CHOICES, default=KIND_ASSET
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["status"], name="idx_asset_status"),
            models.Index(fields=["category"], name="idx_asset_category"),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.status == STATUS_AVAILABLE and self.assigned_to:
            raise ValidationError(
                {"assigned_to": "An available asset cannot be assigned."}
            )

    @property
    def is_checked_out(self):
        return self.status == STATUS_ASSIGNED

    def can_transition_to(self, new_status):
        """Check if the check-out/check-in transition is valid."""
        return new_status in self.VALID_TRANSITIONS.get(self.status, [])
