"""Admin configuration for assets app using django-unfold."""

from unfold.admin import ModelAdmin
from unfold.contrib.filters.admin import ChoicesDropdownFilter
from unfold.decorators import action, display

from django.contrib import admin, messages
from django.utils import timezone

from .choices import STATUS_ASSIGNED, STATUS_AVAILABLE
from .models import Asset


@admin.register(Asset)
class AssetAdmin(ModelAdmin):
    list_display = [
        "display_header",
        "display_status",
        "category",
        "location",
        "quantity",
        "display_assigned_to",
        "updated_at",
    ]
    list_filter = [
        ("status", ChoicesDropdownFilter),
        ("kind", ChoicesDropdownFilter),
        "category",
    ]
    list_filter_submit = True
    search_fields = ["name", "serial_number", "assigned_to", "location"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["check_in_selected"]

    fieldsets = (
        (
            None,
            {
                "fields": (
                    "name",
                    "category",
                    "kind",
                    "serial_number",
                    "location",
                    "quantity",
                )
            },
        ),
        (
            "Custody",
            {
                "fields": ("status", "assigned_to"),
                "classes": ["tab"],
            },
        ),
        (
            "Purchase",
            {
                "fields": ("price", "purchase_date"),
                "classes": ["tab"],
            },
        ),
        (
            "Tracking",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ["tab"],
            },
        ),
    )

    @display(description="Asset", header=True, ordering="name")
    def display_header(self, obj):
        return obj.name, obj.serial_number

    @display(
        description="Status",
        label={
            "available": "success",
            "assigned": "info",
            "maintenance": "warning",
        },
    )
    def display_status(self, obj):
        return obj.status

    @display(description="Assigned To", empty_value="-")
    def display_assigned_to(self, obj):
        return obj.assigned_to or None

    # Admin-only bulk override of the one-at-a-time confirmed check-in
    @action(description="Check in selected")
    def check_in_selected(self, request, queryset):
        updated = queryset.filter(status=STATUS_ASSIGNED).update(
            status=STATUS_AVAILABLE,
            assigned_to="",
            updated_at=timezone.now(),
        )
        messages.success(request, f"{updated} asset(s) checked in.")
