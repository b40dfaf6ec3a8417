"""Core rules engine package for Spider Solitaire."""

__all__ = [
    "cards",
    "pile",
    "deck",
    "mechanics",
    "game",
    "rules_schema",
    "service",
]
