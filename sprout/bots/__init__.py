"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy: Seeded uniform choice among legal actions
- FirstLegalPolicy: Deterministic baseline
"""

from .policy import BotPolicy, BotDecision, RandomPolicy, FirstLegalPolicy

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
]
