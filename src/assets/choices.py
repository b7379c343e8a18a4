"""Status and kind vocabularies shared by the server and the client."""

STATUS_AVAILABLE = "available"
STATUS_ASSIGNED = "assigned"
STATUS_MAINTENANCE = "maintenance"

STATUS_CHOICES = [
    (STATUS_AVAILABLE, "Available"),
    (STATUS_ASSIGNED, "Assigned"),
    (STATUS_MAINTENANCE, "Maintenance"),
]

KIND_ASSET = "asset"
KIND_STOCK = "stock"

KIND_CHOICES = [
    (KIND_ASSET, "Asset"),
    (KIND_STOCK, "Stock"),
]

DEFAULT_LOCATION = "Unassigned"

# Valid check-out/check-in transitions: from_status -> [to_statuses].
# Maintenance has no control path in or out.
VALID_TRANSITIONS = {
    STATUS_AVAILABLE: [STATUS_ASSIGNED],
    STATUS_ASSIGNED: [STATUS_AVAILABLE],
    STATUS_MAINTENANCE: [],
}

# View tabs over the cached asset list
TAB_ALL = "all"
TAB_CHECKED_OUT = "checked_out"
TAB_STATUSES = {
    TAB_CHECKED_OUT: STATUS_ASSIGNED,
}
