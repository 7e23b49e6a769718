"""URL routing for the lights app."""

from __future__ import annotations

from django.urls import path

from lumen import LightStatus

from . import views

urlpatterns = [
    path("login", views.LoginView.as_view(), name="login"),
    path("lights", views.LightListView.as_view(), name="light-list"),
    path("lights/<str:light_id>", views.LightDetailView.as_view(), name="light-detail"),
    path(
        "lights/<str:light_id>/on",
        views.LightPowerView.as_view(power=LightStatus.ON),
        name="light-on",
    ),
    path(
        "lights/<str:light_id>/off",
        views.LightPowerView.as_view(power=LightStatus.OFF),
        name="light-off",
    ),
    path(
        "lights/<str:light_id>/brightness",
        views.LightBrightnessView.as_view(),
        name="light-brightness",
    ),
    path("lights/<str:light_id>/color", views.LightColorView.as_view(), name="light-color"),
    path(
        "lights/<str:light_id>/schedule",
        views.LightScheduleView.as_view(),
        name="light-schedule",
    ),
    path("groups", views.GroupListView.as_view(), name="group-list"),
    path("groups/<str:group_id>", views.GroupDetailView.as_view(), name="group-detail"),
    path(
        "groups/<str:group_id>/control",
        views.GroupControlView.as_view(),
        name="group-control",
    ),
    path(
        "groups/<str:group_id>/add-light/<str:light_id>",
        views.GroupMemberView.as_view(),
        name="group-add-light",
    ),
    path(
        "groups/<str:group_id>/remove-light/<str:light_id>",
        views.GroupMemberView.as_view(),
        name="group-remove-light",
    ),
    path("save", views.SaveStateView.as_view(), name="save-state"),
    path("load", views.LoadStateView.as_view(), name="load-state"),
]
