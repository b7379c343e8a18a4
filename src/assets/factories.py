"""Factory Boy factories for asset tracker test data."""

from decimal import Decimal

import factory
from factory.django import DjangoModelFactory

from django.utils import timezone


class UserFactory(DjangoModelFactory):
    class Meta:
        model = "auth.User"
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    is_active = True

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        pwd = extracted or "testpass123!"
        self.set_password(pwd)
        if create:
            self.save(update_fields=["password"])


class AssetFactory(DjangoModelFactory):
    """Factory for an individually tracked asset."""

    class Meta:
        model = "assets.Asset"

    name = factory.Sequence(lambda n: f"Asset {n}")
    category = "Electronics"
    serial_number = factory.Sequence(lambda n: f"SN-{n:05d}")
    status = "available"
    assigned_to = ""
    price = Decimal("100.00")
    purchase_date = factory.LazyFunction(lambda: timezone.now().date())
    location = "Main Office"
    quantity = 1
    kind = "asset"


class StockLineFactory(AssetFactory):
    """Factory for a stock line imported in bulk."""

    name = factory.Sequence(lambda n: f"Stock line {n}")
    category = "General"
    serial_number = factory.Sequence(lambda n: f"STOCK-{n}")
    location = "Unassigned"
    quantity = 10
    kind = "stock"
