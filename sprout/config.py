"""
Game configuration.

GameSettings holds every tunable rule constant. Values are validated on
construction, so a game never starts with a zero-sized grid or a negative
resource cap.

Environment overrides use the SPROUT_ prefix, e.g. SPROUT_GRID_SIZE=6.
"""

from __future__ import annotations
import os

from pydantic import BaseModel, Field, model_validator


ENV_PREFIX = "SPROUT_"


class GameSettings(BaseModel):
    """Rule constants for one game."""

    grid_size: int = Field(5, ge=1, le=20, description="Side length of each garden")
    max_resources: int = Field(20, ge=1, description="Cap for every resource count")
    max_infestations: int = Field(3, ge=1, description="Infestation level that ends a player's game")
    draft_size: int = Field(5, ge=1, description="Capacity of the shared draft zone")

    starting_resources: int = Field(1, ge=0, description="Initial amount of each resource")
    end_turn_resource_gain: int = Field(1, ge=0, description="Random resource units granted by next_turn")

    # Deck composition, scaled by player count
    plant_copies_per_player: int = Field(3, ge=0)
    pest_copies_per_player: int = Field(8, ge=0)
    action_copies_per_player: int = Field(4, ge=0)

    min_players: int = Field(2, ge=1)

    # Pests drawn mid-game become owed pests for everyone instead of draft cards
    swarm_on_refill: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_starting_resources(self) -> GameSettings:
        if self.starting_resources > self.max_resources:
            raise ValueError("starting_resources cannot exceed max_resources")
        return self

    @classmethod
    def from_env(cls, **overrides) -> GameSettings:
        """
        Build settings from SPROUT_* environment variables.

        Explicit keyword overrides win over the environment.
        """
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        values.update(overrides)
        return cls.model_validate(values)


DEFAULT_SETTINGS = GameSettings()
