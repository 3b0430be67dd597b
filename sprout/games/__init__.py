"""
Games module - Game-specific implementations.

Each game has its own subpackage with:
- Card catalogs
- An effect table keyed by (card kind, card name)
- Setup of the initial state
- A game object wrapping the engine core
"""
