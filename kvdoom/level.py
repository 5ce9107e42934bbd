"""Level files and the manager that populates the world from them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

from kvdoom.entities import GameObject, Keletappi, ObjectKind, Potion

logger = logging.getLogger(__name__)

LEVEL_COUNT = 3
TILE_SIZE = 5.0
GRID_OFFSET = 16

_GROUND_TEXTURES = {
    "k": ("assets/textures/kukkanen.png", 1.0),
    "g": ("assets/textures/gravel.png", 2.0),
}

_STRUCTURES = {kind.value for kind in ObjectKind}


def read_level(path) -> list[list[str]]:
    """Read a level grid: one row per line, spaces ignored."""
    with open(path, encoding="utf-8") as handle:
        return [[ch for ch in line.rstrip("\n") if ch != " "] for line in handle]


def _grid_position(row: int, col: int) -> tuple[float, float]:
    offset = GRID_OFFSET * TILE_SIZE
    return row * TILE_SIZE - offset, col * TILE_SIZE - offset


def _cells(grid: list[list[str]]) -> Iterator[tuple[str, float, float]]:
    for row, cells in enumerate(grid):
        for col, ch in enumerate(cells):
            x, z = _grid_position(row, col)
            yield ch, x, z


class LevelManager:
    """Cycles through the levels and fills the world with their contents."""

    def __init__(self, world: Any, assets_dir="assets"):
        self.world = world
        self.assets_dir = Path(assets_dir)
        self.level = 0
        self.gambiina_count = 0
        self.tile_grid: list[list[str]] = []
        self.object_grid: list[list[str]] = []
        self.new_level()

    def new_level(self) -> None:
        """Advance to the next level, wrapping after the last one."""
        self.level += 1
        if self.level > LEVEL_COUNT:
            self.level = 1
        self.clean_level()
        self.build_level()

    def _load(self, name: str) -> list[list[str]]:
        path = self.assets_dir / "levels" / f"{name}{self.level}.txt"
        try:
            return read_level(path)
        except OSError:
            logger.error("Could not open level file: %s", path)
            return []

    def build_level(self) -> None:
        """Read the current level's files and spawn its objects."""
        self.gambiina_count = 0
        self.tile_grid = self._load("ground")
        self.object_grid = self._load("level")

        world = self.world
        for ch, x, z in _cells(self.object_grid):
            if ch == "g":
                world.potions[world.potion_index] = Potion(world.potion_index, x, 0.0, z)
                world.potion_index += 1
                self.gambiina_count += 1
            elif ch == "k":
                world.enemies[world.enemy_index] = Keletappi(world.enemy_index, x, 0.0, z)
                world.enemy_index += 1
            elif ch in _STRUCTURES:
                world.objects[world.object_index] = GameObject(ch, x, 0.0, z)
                world.object_index += 1

    def clean_level(self) -> None:
        """Remove the potions and structures of the current level."""
        self.world.potions.clear()
        self.world.objects.clear()

    def ground_tiles(self) -> Iterator[tuple[str, float, float, float]]:
        """Yield (texture, x, z, tex_scale) for every textured ground tile."""
        for ch, x, z in _cells(self.tile_grid):
            if ch in _GROUND_TEXTURES:
                texture, scale = _GROUND_TEXTURES[ch]
                yield texture, x, z, scale