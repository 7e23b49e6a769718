"""URL configuration for the lumen backend."""

from __future__ import annotations

from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="api-docs",
    ),
    path("", include("lights.urls")),
]

handler404 = "lights.exceptions.endpoint_not_found"
handler500 = "lights.exceptions.server_error"
