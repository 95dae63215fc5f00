"""World state, asset catalogue and collision rules of a two-hero role-playing game."""

__version__ = "0.1.0"