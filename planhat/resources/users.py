"""Planhat users (the people on your own team, not end users)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from planhat.core.models import DATETIME, JSONModel, json_field, nested
from .base import Service


@dataclass
class UserImage(JSONModel):
    path: str | None = json_field("path")


@dataclass
class GettingStartedSteps(JSONModel):
    """Onboarding steps the user chose to skip."""
    email: bool | None = json_field("email")
    linkedin: bool | None = json_field("linkedin")
    avatar: bool | None = json_field("avatar")
    all: bool | None = json_field("all")
    team: bool | None = json_field("team")
    customers: bool | None = json_field("customers")


@dataclass
class User(JSONModel):
    """A Planhat user."""
    id: str | None = json_field("_id")
    first_name: str | None = json_field("firstName")
    last_name: str | None = json_field("lastName")
    nick_name: str | None = json_field("nickName")
    email: str | None = json_field("email")
    image: UserImage | None = json_field("image", codec=nested(UserImage))
    skipped_getting_started_steps: GettingStartedSteps | None = json_field(
        "skippedGettingStartedSteps", codec=nested(GettingStartedSteps)
    )
    is_hidden: bool | None = json_field("isHidden")
    removed: bool | None = json_field("removed")
    inactive: bool | None = json_field("inactive")
    roles: list[str] | None = json_field("roles")
    create_date: datetime | None = json_field("createDate", codec=DATETIME)
    default_meeting_length: int | None = json_field("defaultMeetingLength")
    is_exposed_as_sender_option: bool | None = json_field("isExposedAsSenderOption")
    compressed_view: bool | None = json_field("compressedView")
    company_filter: str | None = json_field("companyFilter")
    task_filter: str | None = json_field("taskFilter")
    workflow_filter: str | None = json_field("workflowFilter")
    play_log_disabled: bool | None = json_field("playLogDisabled")
    radar_one_line: bool | None = json_field("radarOneLine")
    collapsed_folders: list[str] | None = json_field("collapsedFolders")
    rev_report_period_type: str | None = json_field("revReportPeriodType")
    split_layout_disabled: bool | None = json_field("splitLayoutDisabled")
    daily_digest: bool | None = json_field("dailyDigest")
    follower_update: bool | None = json_field("followerUpdate")
    in_app_notifications: bool | None = json_field("inAppNotifications")
    last_visited_companies: list[str] | None = json_field("lastVisitedCompanies")
    last_visited_endusers: list[str] | None = json_field("lastVisitedEndusers")
    recent_open_page: str | None = json_field("recentOpenPage")
    segment: str | None = json_field("segment")
    v: int | None = json_field("__v")
    # UI and integration preferences, passed through as raw JSON
    recent_open_tabs: dict[str, Any] | None = json_field("recentOpenTabs")
    bubble_chart_settings: dict[str, Any] | None = json_field("bubbleChartSettings")
    recent_tab_searches: dict[str, Any] | None = json_field("recentTabSearches")
    google_api: dict[str, Any] | None = json_field("googleApi")
    ms_api: dict[str, Any] | None = json_field("msApi")
    google_calendar_api: dict[str, Any] | None = json_field("googleCalendarApi")


class UserService(Service):
    """User endpoints."""

    @property
    def resource(self) -> str:
        return "users"

    def list(self, *, cancel=None, timeout=None) -> list[User]:
        """Return every Planhat user."""
        users = self._call("GET", self._url(), decode=User.from_list, cancel=cancel, timeout=timeout)
        return users if users is not None else []

    def get(self, id: str, *, cancel=None, timeout=None) -> User:
        """Return a single user given its Planhat id."""
        user = self._call("GET", self._url(id), decode=User.from_dict, cancel=cancel, timeout=timeout)
        return user if user is not None else User()
