"""URL configuration for the asset tracker project."""

from django.contrib import admin
from django.urls import include, path

from tracker.views import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/session/", include("accounts.urls")),
    path("api/assets/", include("assets.urls")),
    path("health/", health_check, name="health_check"),
]
