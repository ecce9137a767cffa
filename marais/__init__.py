"""A turn-based terminal role-playing game on an island board."""

__version__ = "0.1.0"