"""
Triwizard - Card Effect Engine

A small, deterministic engine for the effect-card mechanic of a
race-style board game. The engine provides:
- A 48-card deck with draw, discard and reshuffle-from-discard
- Effect application against player state
- A per-player position history used by the rewind card
- In-memory game sessions exposed over a REST API
"""

__version__ = "0.1.0"
