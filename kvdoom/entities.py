"""Game entities: static level objects, potions, enemies and particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ObjectKind(Enum):
    """Kinds of static level object, keyed by their level-file character."""

    PILLAR = "t"
    WALL = "s"
    ELECTRIC = "e"


@dataclass(frozen=True)
class CubePart:
    """One textured box that makes up part of a static object's model."""

    texture: str
    y_offset: float
    width: float
    height: float
    tex_scale: float


_HALF_EXTENTS = {
    ObjectKind.PILLAR: 2.0,
    ObjectKind.WALL: 2.5,
    ObjectKind.ELECTRIC: 1.25,
}

_STONE = "assets/textures/stone.png"

_MODELS = {
    ObjectKind.PILLAR: (
        CubePart(_STONE, 0.0, 3.0, 7.0, 3.0),
        CubePart(_STONE, 0.0, 4.0, 1.0, 5.0),
        CubePart(_STONE, 7.0, 4.0, 1.0, 3.0),
    ),
    ObjectKind.WALL: (
        CubePart("assets/textures/bricks.png", 0.0, 5.0, 10.0, 2.0),
    ),
    ObjectKind.ELECTRIC: (
        CubePart("assets/textures/electric.png", 0.0, 2.0, 3.5, 8.0),
        CubePart(_STONE, 0.0, 2.5, 0.5, 0.5),
        CubePart(_STONE, 3.5, 2.5, 0.5, 0.5),
    ),
}


class GameObject:
    """A static, collidable level structure located by its bottom centre."""

    def __init__(self, kind, x, y, z):
        self.kind = ObjectKind(kind)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        half = _HALF_EXTENTS[self.kind]
        self.min_x = -half
        self.max_x = half
        self.min_z = -half
        self.max_z = half

    @property
    def parts(self) -> tuple[CubePart, ...]:
        """The boxes this object is drawn with."""
        return _MODELS[self.kind]

    def bounds(self) -> tuple[float, float, float, float]:
        """World-space collision box as (min_x, max_x, min_z, max_z)."""
        return (
            self.x + self.min_x,
            self.x + self.max_x,
            self.z + self.min_z,
            self.z + self.max_z,
        )


class Potion:
    """A collectable health potion."""

    texture = "assets/textures/isoG.png"
    width = 0.8
    height = 2.2

    def __init__(self, index, x, y, z):
        self.index = index
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.r = 1.7


class Keletappi:
    """A melee enemy that wakes when the player comes near and chases them."""

    texture = "assets/textures/keletappi.png"
    width = 3.0
    height = 4.0
    particles_per_hit = 20
    move_speed = 0.12
    attack_cooldown = 30

    def __init__(self, index, x, y, z):
        self.index = index
        self.location = [float(x), float(y), float(z)]
        self.min_x = -2.5
        self.max_x = 2.5
        self.min_z = -2.5
        self.max_z = 2.5
        self.hp = 30
        self.damage = 12
        self.aggro = False
        self.aggro_range = 20.0
        self.cooldown = 0
        self.hit_range = 6.2

    def _distance_to(self, px: float, pz: float) -> float:
        return math.hypot(self.location[0] - px, self.location[2] - pz)

    def update(self, world: Any) -> None:
        """Advance one frame: wake up, attack when in reach, and close in."""
        player = world.player
        px = player.location[0]
        pz = player.location[2]

        if not self.aggro:
            if self._distance_to(px, pz) < self.aggro_range:
                self.aggro = True
            else:
                return

        if self.cooldown < self.attack_cooldown:
            self.cooldown += 1
        elif self._distance_to(px, pz) < self.hit_range:
            player.hp -= self.damage
            self.cooldown = 0

        nx = px - self.location[0]
        nz = pz - self.location[2]
        length = math.hypot(nx, nz)
        if length != 0.0:
            nx /= length
            nz /= length
        self.location[0] += nx * self.move_speed
        self.location[2] += nz * self.move_speed

    def emit_particles(self, world: Any) -> None:
        """Spawn a burst of particles at this enemy into the world."""
        for _ in range(self.particles_per_hit):
            index = world.particle_index
            world.particles[index] = Particle(
                index, self.location[0], 3.5, self.location[2], world.rng
            )
            world.particle_index += 1


@dataclass
class _Motion:
    location: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    velocity: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])


class Particle:
    """A short-lived debris sprite affected by gravity and friction."""

    texture = "assets/textures/particle1.png"
    gravity = -0.007
    friction = 0.05
    min_speed = 0.03
    max_speed = 0.45
    width = 0.48

    def __init__(self, index, x, y, z, rng=None):
        rng = rng if rng is not None else random.Random()
        self.index = index

        angle = rng.uniform(0.0, 2 * 3.14)
        speed = rng.uniform(self.min_speed, self.max_speed)
        vz = -math.cos(angle) * speed
        vx = rng.uniform(-0.05, 0.3)

        # Spawn coordinates are whole units.
        self._motion = _Motion(
            location=[float(int(x)), float(int(y)), float(int(z))],
            velocity=[vx, 0.0, vz],
        )
        self.lifetime = rng.randint(20, 40)

    @property
    def location(self) -> list[float]:
        return self._motion.location

    @property
    def velocity(self) -> list[float]:
        return self._motion.velocity

    def update(self, world: Any) -> bool:
        """Advance one frame; remove itself from the world when expired.

        Returns True while the particle is still alive.
        """
        loc = self._motion.location
        vel = self._motion.velocity
        for axis in range(3):
            loc[axis] += vel[axis]
        vel[0] -= vel[0] * self.friction
        vel[1] += self.gravity
        vel[2] -= vel[2] * self.friction

        self.lifetime -= 1
        if self.lifetime < 0:
            world.particles.pop(self.index, None)
            return False
        return True