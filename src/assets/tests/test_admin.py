"""Tests for the asset admin."""

from django.urls import reverse

from assets.admin import AssetAdmin
from assets.factories import AssetFactory
from assets.models import Asset


class TestAssetAdmin:
    def test_changelist(self, admin_client, asset, assigned_asset):
        url = reverse("admin:assets_asset_changelist")
        response = admin_client.get(url)
        assert response.status_code == 200
        assert b"Laptop A" in response.content
        assert b"check_in_selected" in response.content

    def test_changelist_search_by_holder(self, admin_client, assigned_asset):
        url = reverse("admin:assets_asset_changelist")
        response = admin_client.get(url, {"q": "Bo"})
        assert response.status_code == 200
        assert b"Projector" in response.content

    def test_change_form(self, admin_client, asset):
        url = reverse("admin:assets_asset_change", args=[asset.pk])
        assert admin_client.get(url).status_code == 200

    def test_display_header(self, asset):
        admin_instance = AssetAdmin(Asset, None)
        assert admin_instance.display_header(asset) == ("Laptop A", "SN-001")

    def test_display_assigned_to_blank(self, asset):
        admin_instance = AssetAdmin(Asset, None)
        assert admin_instance.display_assigned_to(asset) is None

    def test_anonymous_redirected(self, client, db):
        url = reverse("admin:assets_asset_changelist")
        assert client.get(url).status_code == 302


class TestCheckInAction:
    def test_checks_in_assigned_only(
        self, admin_client, asset, assigned_asset, maintenance_asset
    ):
        url = reverse("admin:assets_asset_changelist")
        response = admin_client.post(
            url,
            {
                "action": "check_in_selected",
                "_selected_action": [
                    asset.pk,
                    assigned_asset.pk,
                    maintenance_asset.pk,
                ],
            },
            follow=True,
        )
        assert response.status_code == 200
        assert b"1 asset(s) checked in." in response.content
        assigned_asset.refresh_from_db()
        assert assigned_asset.status == "available"
        assert assigned_asset.assigned_to == ""
        maintenance_asset.refresh_from_db()
        assert maintenance_asset.status == "maintenance"

    def test_check_in_bumps_updated_at(self, admin_client, db):
        a = AssetFactory(status="assigned", assigned_to="Al")
        before = a.updated_at
        admin_client.post(
            reverse("admin:assets_asset_changelist"),
            {"action": "check_in_selected", "_selected_action": [a.pk]},
        )
        a.refresh_from_db()
        assert a.updated_at > before
