# Response schemas for the shell's core routes.
# Created: 2026-09-17

from __future__ import annotations

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionResponse(APIResponse):
    token: str
    username: str
    roles: list[str] = Field(default_factory=list)


class MeResponse(APIResponse):
    username: str
    roles: list[str] = Field(default_factory=list)
    is_admin: bool = False


class NavigationItemOut(APIResponse):
    label: str
    route: str
    icon: str
    admin_only: bool = False
    feature: str | None = None


class RouteOut(APIResponse):
    path: str
    view: str
    guards: list[str] = Field(default_factory=list)
    methods: list[str] = Field(default_factory=list)
    name: str | None = None


class FeatureOut(APIResponse):
    name: str
    enabled: bool
    routes: list[RouteOut] = Field(default_factory=list)
    navigation: list[NavigationItemOut] = Field(default_factory=list)
    has_widgets: bool = False


class WidgetOut(APIResponse):
    title: str
    value: int | float
    icon: str
    route: str | None = None


class StatusResponse(APIResponse):
    status: str = "ok"
