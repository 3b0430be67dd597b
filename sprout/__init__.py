"""
Sprout - Garden Drafting Game Engine

A deterministic, rules-driven engine for a turn-based multiplayer garden
game. Players draft plants, pests and action cards from a shared zone,
build their own grid and race for points. The engine provides:
- State management and the per-player phase machine
- Legal action generation
- Deterministic effect resolution
- Bot policies, sessions and an HTTP API
"""

__version__ = "0.1.0"
