"""Shared building blocks for stored records.

Most records the campaign manager persists are owned by a user, can be
shared with other users, carry creation/update timestamps, and (for
reference data) cite the book they came from. Those concerns are
expressed as mixin models combined by the concrete records.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from dnd_campaign.models.enums import CampaignRole


UserID = Annotated[str, Field(min_length=1, description="Opaque user identifier")]
"""Identifier of an authenticated user, issued by the auth provider."""

Entries = list[str]
"""Rich-text description paragraphs, in display order."""


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


class Record(BaseModel):
    """Base class for every stored record.

    Unknown fields are rejected so typos in stored documents surface as
    validation errors instead of being dropped.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )


class Source(Record):
    """Citation of a published source.

    Attributes:
        name: Book or supplement name (e.g., 'PHB').
        pages: Page numbers the record appears on.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=100, description="Source book name")
    pages: list[Annotated[int, Field(ge=1)]] = Field(
        default_factory=list,
        description="Pages the record appears on",
    )

    def __str__(self) -> str:
        if not self.pages:
            return self.name
        return f"{self.name} p.{', '.join(str(p) for p in self.pages)}"


class Owned(Record):
    """Mixin for records with an owning user."""

    owner_user_id: UserID | None = Field(
        default=None,
        description="Creator and owner of the record",
    )

    def is_owned_by(self, user_id: str) -> bool:
        """Check whether ``user_id`` owns this record."""
        return self.owner_user_id is not None and self.owner_user_id == user_id


class Shareable(Record):
    """Mixin for records that can be shown to users other than the owner."""

    shared_with_user_ids: list[UserID] = Field(
        default_factory=list,
        description="Users the record has been shared with",
    )
    is_public: bool = Field(
        default=False,
        description="Visible to every member of the campaign",
    )

    def is_shared_with(self, user_id: str) -> bool:
        """Check whether ``user_id`` may view this record."""
        return self.is_public or user_id in self.shared_with_user_ids


class Timestamped(Record):
    """Mixin for records with creation and modification times."""

    created_at: datetime = Field(
        default_factory=utc_now,
        description="When the record was created",
    )
    updated_at: datetime | None = Field(
        default=None,
        description="When the record was last modified",
    )

    @property
    def last_modified(self) -> datetime:
        """The most recent of the creation and update times."""
        return self.updated_at or self.created_at


class Sourced(Record):
    """Mixin for reference data that cites a published source."""

    source: Source | None = Field(default=None, description="Published source")


class CampaignUserSummary(Record):
    """Denormalized view of a campaign member.

    Kept on campaign and log records so they can be displayed without
    looking up the user and character documents.

    Attributes:
        role: Whether the user runs or plays in the campaign.
        name: User display name.
        character_name: Name of the user's active character, for players.
    """

    role: CampaignRole = Field(description="Role in the campaign")
    name: str = Field(default="", max_length=100, description="User display name")
    character_name: str | None = Field(
        default=None,
        max_length=100,
        description="Active character name (players only)",
    )


CampaignUserSummaries = dict[str, CampaignUserSummary]
"""Member summaries keyed by user ID."""


__all__ = [
    "UserID",
    "Entries",
    "utc_now",
    "Record",
    "Source",
    "Owned",
    "Shareable",
    "Timestamped",
    "Sourced",
    "CampaignUserSummary",
    "CampaignUserSummaries",
]
