"""API views for lights, light groups and scheduled actions."""

from __future__ import annotations

import logging
from typing import Sequence

from django.conf import settings
from rest_framework import exceptions, status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from lumen import LightService, LightStatus

from .authentication import credentials_match
from .serializers import (
    ActionSerializer,
    BrightnessSerializer,
    ColorSerializer,
    GroupCreateSerializer,
    LoginSerializer,
    ScheduleSerializer,
)
from .services import get_default_service

logger = logging.getLogger(__name__)


def parse_identifier(value: str, kind: str) -> int:
    """Return ``value`` as a positive integer id or raise a 400."""

    try:
        identifier = int(value)
    except (TypeError, ValueError):
        identifier = 0
    if identifier < 1:
        raise exceptions.ParseError(f"Invalid {kind} ID")
    return identifier


class LightServiceView(APIView):
    """Base view handing out the process-wide :class:`LightService`."""

    def get_service(self) -> LightService:
        return get_default_service()


class LightListView(LightServiceView):
    def get(self, request: Request) -> Response:
        lights = self.get_service().list_lights()
        return Response({str(light_id): light.as_dict() for light_id, light in lights.items()})

    def post(self, request: Request) -> Response:
        light_id = self.get_service().add_light()
        return Response(
            {"message": f"New light added with ID {light_id}", "id": light_id},
            status=status.HTTP_201_CREATED,
        )


class LightDetailView(LightServiceView):
    def get(self, request: Request, light_id: str) -> Response:
        light = self.get_service().get_light(parse_identifier(light_id, "light"))
        return Response(light.as_dict())

    def delete(self, request: Request, light_id: str) -> Response:
        identifier = parse_identifier(light_id, "light")
        self.get_service().delete_light(identifier)
        return Response({"message": f"Light {identifier} deleted"})


class LightPowerView(LightServiceView):
    """Turn a light on or off; the action comes from the URL."""

    power: LightStatus = LightStatus.ON

    def post(self, request: Request, light_id: str) -> Response:
        identifier = parse_identifier(light_id, "light")
        service = self.get_service()
        if self.power is LightStatus.ON:
            service.turn_on(identifier)
        else:
            service.turn_off(identifier)
        return Response({"message": f"Light {identifier} turned {self.power.value}"})


class LightBrightnessView(LightServiceView):
    def post(self, request: Request, light_id: str) -> Response:
        identifier = parse_identifier(light_id, "light")
        serializer = BrightnessSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        brightness = serializer.validated_data["brightness"]
        self.get_service().set_brightness(identifier, brightness)
        return Response({"message": f"Light {identifier} brightness set to {brightness}"})


class LightColorView(LightServiceView):
    def post(self, request: Request, light_id: str) -> Response:
        identifier = parse_identifier(light_id, "light")
        serializer = ColorSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        color = serializer.validated_data["color"]
        self.get_service().set_color(identifier, color)
        return Response({"message": f"Light {identifier} color changed to {color}"})


class LightScheduleView(LightServiceView):
    def post(self, request: Request, light_id: str) -> Response:
        identifier = parse_identifier(light_id, "light")
        serializer = ScheduleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        fire_time = serializer.validated_data["time"]
        action = serializer.validated_data["action"]
        self.get_service().schedule_action(identifier, fire_time, action)
        return Response(
            {"message": f"Light {identifier} scheduled to turn {action} at {fire_time}"},
            status=status.HTTP_202_ACCEPTED,
        )


class GroupListView(LightServiceView):
    def post(self, request: Request) -> Response:
        serializer = GroupCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        name = serializer.validated_data["name"]
        group_id = self.get_service().create_group(name, serializer.validated_data["lightIds"])
        return Response(
            {"message": f'Group "{name}" created with ID {group_id}', "id": group_id},
            status=status.HTTP_201_CREATED,
        )


class GroupDetailView(LightServiceView):
    def get(self, request: Request, group_id: str) -> Response:
        group = self.get_service().get_group(parse_identifier(group_id, "group"))
        return Response(group.as_dict())

    def delete(self, request: Request, group_id: str) -> Response:
        identifier = parse_identifier(group_id, "group")
        self.get_service().delete_group(identifier)
        return Response({"message": f"Group {identifier} deleted"})


class GroupControlView(LightServiceView):
    def post(self, request: Request, group_id: str) -> Response:
        identifier = parse_identifier(group_id, "group")
        serializer = ActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.validated_data["action"]
        self.get_service().control_group(identifier, action)
        return Response({"message": f"Group {identifier} turned {action}"})


class GroupMemberView(LightServiceView):
    """Add a light to a group, or remove it.

    Removal deletes the light from the whole system, not only from this
    group; every other group loses it as well.
    """

    def post(self, request: Request, group_id: str, light_id: str) -> Response:
        group = parse_identifier(group_id, "group")
        light = parse_identifier(light_id, "light")
        self.get_service().add_light_to_group(group, light)
        return Response({"message": f"Light {light} added to group {group}"})

    def delete(self, request: Request, group_id: str, light_id: str) -> Response:
        group = parse_identifier(group_id, "group")
        light = parse_identifier(light_id, "light")
        self.get_service().delete_light_from_system(light)
        return Response({"message": f"Light {light} removed from group {group}"})


class SaveStateView(LightServiceView):
    def post(self, request: Request) -> Response:
        self.get_service().save_state()
        return Response({"message": "Current state saved"})


class LoadStateView(LightServiceView):
    def post(self, request: Request) -> Response:
        self.get_service().load_state()
        return Response({"message": "State loaded"})


class LoginView(APIView):
    """Check the shared credentials when login is enabled."""

    permission_classes = [AllowAny]
    authentication_classes: Sequence[type] = []
    throttle_classes: Sequence[type] = []

    def post(self, request: Request) -> Response:
        if not settings.LOGIN_REQUIRED:
            return Response({"message": "Login is not required in this environment"})

        serializer = LoginSerializer(data=request.data)
        if serializer.is_valid() and credentials_match(
            serializer.validated_data["username"], serializer.validated_data["password"]
        ):
            return Response({"message": "Login successful"})

        logger.info("Rejected login attempt")
        return Response(
            {"error": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED
        )


__all__ = [
    "GroupControlView",
    "GroupDetailView",
    "GroupListView",
    "GroupMemberView",
    "LightBrightnessView",
    "LightColorView",
    "LightDetailView",
    "LightListView",
    "LightPowerView",
    "LightScheduleView",
    "LoadStateView",
    "LoginView",
    "SaveStateView",
    "parse_identifier",
]
