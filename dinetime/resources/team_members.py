"""Team members and their events."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..contracts import PageCursor, PageResult, RequestDescriptor
from ..pagination import TEAM_MEMBER_EVENTS
from .base import Resource


class TeamMembersResource(Resource):
    async def get_team_members(
        self,
        site_uid: str,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                f"/Site/{site_uid}/TeamMembers",
                {"startTime": start_time, "endTime": end_time},
            )
        )

    async def get_team_member_events(
        self, site_uid: str, start_time: datetime, end_time: datetime
    ) -> PageResult[Any]:
        """One page (up to 100) of team member events, oldest update first."""
        return await self._client.get_page(
            TEAM_MEMBER_EVENTS,
            f"/Site/{site_uid}/TeamMembers/Events",
            PageCursor.create(start_time, end_time),
        )

    async def get_all_team_member_events(
        self,
        site_uid: str,
        start_time: datetime,
        end_time: datetime,
        num_pages: int = 0,
    ) -> List[Any]:
        """Every team member event in the window, or the first ``num_pages`` pages."""
        return await self._client.get_all(
            TEAM_MEMBER_EVENTS,
            f"/Site/{site_uid}/TeamMembers/Events",
            start_time,
            end_time,
            num_pages,
        )

    async def add_team_member(self, site_uid: str, team_member: Dict[str, Any]) -> Any:
        return await self._client.request(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/TeamMembers", json_body=team_member)
        )

    async def update_team_member(
        self, site_uid: str, team_member_id: str, update: Dict[str, Any]
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "PATCH", f"/Site/{site_uid}/TeamMembers/{team_member_id}", json_body=update
            )
        )

    async def remove_team_member(self, site_uid: str, team_member_id: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build("DELETE", f"/Site/{site_uid}/TeamMembers/{team_member_id}")
        )
