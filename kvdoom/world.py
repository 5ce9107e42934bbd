"""The game world: every live entity plus the player and the level."""

from __future__ import annotations

import random

from kvdoom.entities import GameObject, Keletappi, Particle, Potion
from kvdoom.level import LevelManager
from kvdoom.player import Player


class World:
    """Holds the player, the entity tables and the level manager."""

    def __init__(self, assets_dir="assets"):
        self.rng = random.Random()
        self.player = Player()
        self.key_states: dict[str, bool] = {}

        self.enemies: dict[int, Keletappi] = {}
        self.objects: dict[int, GameObject] = {}
        self.potions: dict[int, Potion] = {}
        self.particles: dict[int, Particle] = {}

        self.enemy_index = 0
        self.particle_index = 0
        self.potion_index = 0
        self.object_index = 0
        self.score = 0

        self.level_manager = LevelManager(self, assets_dir)