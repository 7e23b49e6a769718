from __future__ import annotations

from django.apps import AppConfig


class LightsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "lights"
    verbose_name = "Lights & Groups"
