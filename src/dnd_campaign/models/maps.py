"""Pydantic V2 schemas for world maps and battle maps."""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field

from dnd_campaign.models.common import Owned, Record, Shareable, Timestamped
from dnd_campaign.models.enums import TokenType


Percentage = Annotated[float, Field(ge=0.0, le=100.0)]
Pixels = Annotated[int, Field(gt=0)]


class PinLocation(Record):
    """Pin position as percentages, so it holds for any rendered map size."""

    model_config = ConfigDict(frozen=True)

    x_percentage: Percentage
    y_percentage: Percentage

    def to_pixels(self, width: int, height: int) -> tuple[int, int]:
        """Convert to pixel coordinates on a map of the given size."""
        return (
            round(width * self.x_percentage / 100),
            round(height * self.y_percentage / 100),
        )


class WorldMapPin(Record):
    """A pinned location on a world map.

    Attributes:
        location: Relative position of the pin.
        name: Displayed name.
        description: Displayed description.
        target_map_id: If set, the pin links to another map.
    """

    location: PinLocation
    name: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    target_map_id: str | None = None


class WorldMap(Owned, Shareable, Timestamped):
    """A world map with pins; maps nest through ``parent_map_id``."""

    parent_map_id: str | None = None
    name: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    pins: list[WorldMapPin] = Field(default_factory=list)

    @property
    def linked_map_ids(self) -> list[str]:
        return [pin.target_map_id for pin in self.pins if pin.target_map_id]


class BattleMapBGImage(Record):
    """A background image placed on a battle map. Coordinates in pixels."""

    file_path: str = Field(min_length=1, description="Object storage path")
    width: Pixels
    height: Pixels
    x: int = 0
    y: int = 0
    rotation: float = Field(default=0.0, description="Rotation in degrees")


class BattleMapToken(Shareable, Timestamped):
    """A creature or character token placed on a battle map.

    Attributes:
        thumbnail_file_path: Object storage path of the token image.
        type: Whether the token is a creature or a character.
        source_id: ID of the creature or character.
        x: X coordinate in pixels.
        y: Y coordinate in pixels.
        is_visible: Whether players can see the token.
    """

    thumbnail_file_path: str = Field(min_length=1)
    type: TokenType
    source_id: str = Field(min_length=1)
    x: int = 0
    y: int = 0
    is_visible: bool = True


class BattleMap(Owned, Shareable, Timestamped):
    """A gridded battle map.

    Attributes:
        name: User-facing name.
        is_active: Whether players can see and open the map.
        background_images: Images making up the map setting.
        thumbnail_file_path: Object storage path of the thumbnail.
        grid_cell_size: Pixel size of one 5-foot cell.
        grid_total_width: Grid width in pixels.
        grid_total_height: Grid height in pixels.
    """

    name: str = Field(min_length=1, max_length=200)
    is_active: bool = False
    background_images: list[BattleMapBGImage] = Field(default_factory=list)
    thumbnail_file_path: str | None = None
    grid_cell_size: Pixels
    grid_total_width: Pixels
    grid_total_height: Pixels

    @property
    def columns(self) -> int:
        return self.grid_total_width // self.grid_cell_size

    @property
    def rows(self) -> int:
        return self.grid_total_height // self.grid_cell_size

    def cell_at(self, x: int, y: int) -> tuple[int, int] | None:
        """Get the (column, row) of the cell containing a pixel, if on the grid."""
        if not (0 <= x < self.grid_total_width and 0 <= y < self.grid_total_height):
            return None
        return x // self.grid_cell_size, y // self.grid_cell_size


__all__ = [
    "PinLocation",
    "WorldMapPin",
    "WorldMap",
    "BattleMapBGImage",
    "BattleMapToken",
    "BattleMap",
]
