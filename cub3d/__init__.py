"""Game state, raycast rendering, sprites, doors, shooting and minimap for a grid-based shooter."""

__version__ = "1.0.0"