"""Pydantic V2 schemas for campaign collaboration records.

Campaigns, notes, log items, and audio tracks are shared session state.
They carry ownership and sharing metadata but no game computation.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator

from dnd_campaign.models.common import (
    CampaignUserSummaries,
    Owned,
    Shareable,
    Timestamped,
    UserID,
)
from dnd_campaign.models.enums import CampaignMode, CampaignRole, LogItemType


Email = Annotated[str, Field(min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")]


class Campaign(Timestamped):
    """Campaign metadata and membership.

    Attributes:
        name: Player-facing campaign name.
        color: Display color (hex, e.g. '#aa3300').
        description: Player-facing description, e.g. backstory.
        dm_user_ids: Users running the campaign (the campaign owners).
        dm_invite_emails: Pending DM invites.
        player_user_ids: Users playing in the campaign.
        user_summaries: Denormalized member summaries keyed by user ID.
        player_invite_emails: Pending player invites.
        mode: Current mode; determines the view shown to players and DMs.
    """

    name: str = Field(min_length=1, max_length=200, description="Campaign name")
    color: str | None = Field(
        default=None,
        pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$",
        description="Display color",
    )
    description: str | None = Field(default=None, max_length=10000)
    dm_user_ids: list[UserID] = Field(default_factory=list)
    dm_invite_emails: list[Email] = Field(default_factory=list)
    player_user_ids: list[UserID] = Field(default_factory=list)
    user_summaries: CampaignUserSummaries = Field(default_factory=dict)
    player_invite_emails: list[Email] = Field(default_factory=list)
    mode: CampaignMode = Field(default=CampaignMode.OUT_OF_COMBAT)

    @field_validator("dm_invite_emails", "player_invite_emails", mode="after")
    @classmethod
    def lowercase_emails(cls, v: list[str]) -> list[str]:
        return [email.lower() for email in v]

    def is_dm(self, user_id: str) -> bool:
        return user_id in self.dm_user_ids

    def is_player(self, user_id: str) -> bool:
        return user_id in self.player_user_ids

    def role_of(self, user_id: str) -> CampaignRole | None:
        """Get the role ``user_id`` has in this campaign, DM first."""
        if self.is_dm(user_id):
            return CampaignRole.DM
        if self.is_player(user_id):
            return CampaignRole.PLAYER
        return None

    def has_pending_invite(self, email: str) -> bool:
        email = email.lower()
        return email in self.dm_invite_emails or email in self.player_invite_emails

    @property
    def is_in_combat(self) -> bool:
        return self.mode == CampaignMode.COMBAT


class Note(Owned, Shareable, Timestamped):
    """A campaign note written by a DM or player."""

    title: str | None = Field(default=None, max_length=200)
    body: str = Field(default="", max_length=100000, description="Note content")
    tags: list[str] = Field(default_factory=list, description="Search tags")


class LogItem(Timestamped):
    """Something logged at a particular moment in the campaign.

    Attributes:
        type: Kind of event.
        message: Display message.
        payload: Event-specific data (an item, spell, chat text, ...).
        source_user_ids: Users who caused the event.
        target_user_ids: Users the event concerns.
        user_summaries: Member summaries at the time of the event.
    """

    type: LogItemType = Field(description="Kind of event")
    message: str | None = Field(default=None, max_length=5000)
    payload: Any = Field(default=None, description="Event payload")
    source_user_ids: list[UserID] = Field(default_factory=list)
    target_user_ids: list[UserID] = Field(default_factory=list)
    user_summaries: CampaignUserSummaries = Field(default_factory=dict)


class Audio(Owned, Shareable, Timestamped):
    """An audio track played during sessions.

    Attributes:
        name: Track name.
        description: Track description.
        is_playing: Whether the track is currently playing.
        is_looped: Whether the track loops.
        default_volume: Volume between 0 and 1.
        file_path: Path to the file in object storage (e.g. 'campaigns/camp1/cave.mp3').
    """

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    is_playing: bool | None = None
    is_looped: bool | None = None
    default_volume: Annotated[float, Field(ge=0.0, le=1.0)] | None = None
    file_path: str = Field(min_length=1, description="Object storage path")


__all__ = [
    "Email",
    "Campaign",
    "Note",
    "LogItem",
    "Audio",
]
