"""Request body validation for the light endpoints."""

from __future__ import annotations

from rest_framework import serializers

from lumen import LightColor, LightStatus
from lumen.models import MAX_BRIGHTNESS, MIN_BRIGHTNESS

ACTION_CHOICES = [status.value for status in LightStatus]
COLOR_CHOICES = [color.value for color in LightColor]


class BrightnessSerializer(serializers.Serializer):
    brightness = serializers.IntegerField(min_value=MIN_BRIGHTNESS, max_value=MAX_BRIGHTNESS)


class ColorSerializer(serializers.Serializer):
    color = serializers.ChoiceField(choices=COLOR_CHOICES)


class ActionSerializer(serializers.Serializer):
    action = serializers.ChoiceField(
        choices=ACTION_CHOICES,
        error_messages={"invalid_choice": 'Action must be "on" or "off"'},
    )


class ScheduleSerializer(ActionSerializer):
    time = serializers.CharField(allow_blank=False, trim_whitespace=True)


class GroupCreateSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=False, max_length=255)
    lightIds = serializers.ListField(  # noqa: N815 - wire name
        child=serializers.IntegerField(min_value=1), allow_empty=True
    )


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(allow_blank=True, trim_whitespace=False)


__all__ = [
    "ActionSerializer",
    "BrightnessSerializer",
    "ColorSerializer",
    "GroupCreateSerializer",
    "LoginSerializer",
    "ScheduleSerializer",
]
