"""Arkanoid game logic: entities, physics, world state and the simulation step."""
