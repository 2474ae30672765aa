"""Game logic for a side-scrolling egg platformer: world, entities, player, camera and map editor model."""

__version__ = "0.1.0"