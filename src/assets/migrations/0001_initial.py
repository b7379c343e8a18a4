import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Asset",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.TextField()),
                (
                    "category",
                    models.TextField(blank=True, default=""),
                ),
                (
                    "serial_number",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Free text; not unique",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("available", "Available"),
                            ("assigned", "Assigned"),
                            ("maintenance", "Maintenance"),
                        ],
                        default="available",
                        max_length=20,
                    ),
                ),
                (
                    "assigned_to",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Holder name while the asset is checked out",
                    ),
                ),
                (
                    "price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=12,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0)
                        ],
                    ),
                ),
                ("purchase_date", models.DateField(blank=True, null=True)),
                (
                    "location",
                    models.TextField(blank=True, default="Unassigned"),
                ),
                ("quantity", models.PositiveIntegerField(default=1)),
                (
                    "kind",
                    models.CharField(
                        choices=[("asset", "Asset"), ("stock", "Stock")],
                        default="asset",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-id"],
                "indexes": [
                    models.Index(
                        fields=["status"], name="idx_asset_status"
                    ),
                    models.Index(
                        fields=["category"], name="idx_asset_category"
                    ),
                ],
            },
        ),
    ]
