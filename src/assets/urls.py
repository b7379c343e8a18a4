"""URL configuration for assets app."""

from django.urls import path

from . import views

app_name = "assets"

urlpatterns = [
    path("", views.asset_endpoint, name="asset_endpoint"),
]
