"""Tests for campaign collaboration records and maps."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from dnd_campaign.models import (
    Audio,
    BattleMap,
    BattleMapToken,
    Campaign,
    CampaignMode,
    CampaignRole,
    LogItem,
    LogItemType,
    Note,
    PinLocation,
    WorldMap,
)


class TestCampaign:
    """Tests for Campaign."""

    @pytest.fixture
    def campaign(self) -> Campaign:
        return Campaign(
            name="Lost Mine of Phandelver",
            color="#aa3300",
            dm_user_ids=["dm-1"],
            player_user_ids=["player-1", "dm-1"],
            player_invite_emails=["Friend@Example.com"],
            user_summaries={
                "player-1": {"role": "player", "name": "Sam", "character_name": "Lia"},
            },
        )

    def test_roles(self, campaign: Campaign) -> None:
        """DM role wins for users listed twice."""
        assert campaign.role_of("dm-1") is CampaignRole.DM
        assert campaign.role_of("player-1") is CampaignRole.PLAYER
        assert campaign.role_of("stranger") is None

    def test_invites(self, campaign: Campaign) -> None:
        """Invite emails are stored lowercase and matched case-insensitively."""
        assert campaign.player_invite_emails == ["friend@example.com"]
        assert campaign.has_pending_invite("FRIEND@example.com")
        assert not campaign.has_pending_invite("other@example.com")

    def test_invalid_email(self) -> None:
        """Invites must look like email addresses."""
        with pytest.raises(ValidationError):
            Campaign(name="Test", dm_invite_emails=["not-an-email"])

    def test_invalid_color(self) -> None:
        """Colors are hex strings."""
        with pytest.raises(ValidationError):
            Campaign(name="Test", color="red")

    def test_mode(self, campaign: Campaign) -> None:
        """Campaigns start out of combat."""
        assert campaign.mode is CampaignMode.OUT_OF_COMBAT
        assert not campaign.is_in_combat
        campaign.mode = "combat"
        assert campaign.is_in_combat

    @pytest.mark.parametrize("raw", ["out-of-combat", "out_of_combat", "Out of Combat"])
    def test_mode_written_as_stored(self, raw: str) -> None:
        """Any spelling of the mode reads in and dumps as the stored value."""
        campaign = Campaign(name="Test", mode=raw)
        assert campaign.mode is CampaignMode.OUT_OF_COMBAT
        assert campaign.model_dump(mode="json")["mode"] == "out-of-combat"

    def test_user_summaries(self, campaign: Campaign) -> None:
        """Member summaries are keyed by user ID."""
        assert campaign.user_summaries["player-1"].character_name == "Lia"

    def test_timestamps(self, campaign: Campaign) -> None:
        """Records default their creation time to now (UTC)."""
        assert campaign.created_at.tzinfo is not None
        assert campaign.last_modified == campaign.created_at
        later = datetime(2030, 1, 1, tzinfo=UTC)
        campaign.updated_at = later
        assert campaign.last_modified == later


class TestCollaborationRecords:
    """Tests for notes, log items, and audio."""

    def test_note_ownership(self) -> None:
        """Owners and shared users can read a note."""
        note = Note(owner_user_id="dm-1", title="Plot", shared_with_user_ids=["dm-2"])
        assert note.is_owned_by("dm-1")
        assert not note.is_owned_by("dm-2")
        assert note.is_shared_with("dm-2")
        assert not note.is_public

    def test_log_item(self) -> None:
        """Log items carry an arbitrary payload."""
        item = LogItem(
            type="player invited",
            message="Sam was invited",
            payload={"email": "sam@example.com"},
            source_user_ids=["dm-1"],
        )
        assert item.type is LogItemType.PLAYER_INVITED
        assert item.payload["email"] == "sam@example.com"

    def test_audio_volume(self) -> None:
        """Volume is between 0 and 1."""
        track = Audio(name="Cave", file_path="campaigns/camp1/cave.mp3", default_volume=0.4)
        assert track.default_volume == 0.4
        with pytest.raises(ValidationError):
            Audio(name="Loud", file_path="loud.mp3", default_volume=1.5)


class TestMaps:
    """Tests for world maps and battle maps."""

    def test_pin_to_pixels(self) -> None:
        """Pins convert from percentages to pixels."""
        pin = PinLocation(x_percentage=25, y_percentage=50)
        assert pin.to_pixels(800, 600) == (200, 300)

    def test_pin_bounds(self) -> None:
        """Percentages stay within 0-100."""
        with pytest.raises(ValidationError):
            PinLocation(x_percentage=120, y_percentage=50)

    def test_linked_maps(self) -> None:
        """Pins may link to nested maps."""
        world = WorldMap(
            name="Sword Coast",
            pins=[
                {"location": {"x_percentage": 10, "y_percentage": 20},
                 "name": "Neverwinter", "target_map_id": "map-neverwinter"},
                {"location": {"x_percentage": 40, "y_percentage": 60}, "name": "Ruins"},
            ],
        )
        assert world.linked_map_ids == ["map-neverwinter"]

    def test_battle_map_grid(self) -> None:
        """Grid size determines rows, columns, and cells."""
        battle = BattleMap(
            name="Cragmaw Hideout",
            grid_cell_size=50,
            grid_total_width=1000,
            grid_total_height=750,
        )
        assert battle.columns == 20
        assert battle.rows == 15
        assert battle.cell_at(0, 0) == (0, 0)
        assert battle.cell_at(125, 740) == (2, 14)
        assert battle.cell_at(1000, 10) is None
        assert battle.cell_at(-1, 10) is None

    def test_battle_map_needs_grid(self) -> None:
        """Grid dimensions must be positive."""
        with pytest.raises(ValidationError):
            BattleMap(name="Broken", grid_cell_size=0, grid_total_width=10, grid_total_height=10)

    def test_token(self) -> None:
        """Tokens point at a creature or character."""
        token = BattleMapToken(
            thumbnail_file_path="tokens/goblin.png",
            type="creature",
            source_id="creature-1",
            x=100,
            y=150,
        )
        assert token.is_visible
        assert token.type == "creature"
