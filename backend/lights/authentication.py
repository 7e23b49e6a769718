"""Authentication against the single shared credential pair."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from django.conf import settings
from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions
from rest_framework.authentication import BasicAuthentication
from rest_framework.permissions import BasePermission


@dataclass(frozen=True)
class Operator:
    """The identity behind the shared credentials."""

    username: str

    @property
    def is_authenticated(self) -> bool:
        return True


def credentials_match(username: str, password: str) -> bool:
    user_ok = secrets.compare_digest(
        str(username).encode("utf-8"), settings.BASIC_AUTH_USER.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        str(password).encode("utf-8"), settings.BASIC_AUTH_PASSWORD.encode("utf-8")
    )
    return user_ok and password_ok


class SharedCredentialAuthentication(BasicAuthentication):
    """HTTP Basic authentication checked against ``BASIC_AUTH_USER``/``PASSWORD``.

    Django's user model is not involved: there is exactly one operator and
    its credentials come from the environment.
    """

    www_authenticate_realm = "lumen"

    def authenticate(self, request):
        if not settings.LOGIN_REQUIRED:
            return None
        return super().authenticate(request)

    def authenticate_credentials(self, userid, password, request=None):
        if not credentials_match(userid, password):
            raise exceptions.AuthenticationFailed(_("Unauthorized"))
        return (Operator(username=userid), None)


class LoginRequiredPermission(BasePermission):
    """Demand an authenticated operator only while ``LOGIN_REQUIRED`` is on."""

    def has_permission(self, request, view) -> bool:
        if not settings.LOGIN_REQUIRED:
            return True
        user = request.user
        return bool(user and user.is_authenticated)


__all__ = [
    "LoginRequiredPermission",
    "Operator",
    "SharedCredentialAuthentication",
    "credentials_match",
]
