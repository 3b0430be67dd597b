"""
Garden - a drafting game of plants, pests and resources.

Key mechanics:
- Players draft from a shared zone and place cards on their own grid
- Plants score on placement and can be grown once for an effect
- Pests destroy plants and raise infestation
- Action cards trade resources for immediate effects
- A player is done when their garden is full, they are overrun, or the
  cards run out; the highest score among finished players wins

This module contains:
- Card catalogs
- Effect table
- Game setup
- The GardenGame object
"""

from .cards import ACTION_LIBRARY, PEST_LIBRARY, PLANT_LIBRARY, get_action, get_pest, get_plant
from .effects import EFFECTS
from .game import GardenGame
from .setup import setup_garden_game

__all__ = [
    "PLANT_LIBRARY",
    "PEST_LIBRARY",
    "ACTION_LIBRARY",
    "get_plant",
    "get_pest",
    "get_action",
    "EFFECTS",
    "GardenGame",
    "setup_garden_game",
]
