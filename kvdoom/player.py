"""The player: movement, collision response, potion pickup and melee strikes."""

from __future__ import annotations

import math
from typing import Any, Iterable

_REST_HAND = (720, 220)
_STRUCK_HAND = (520, 270)


def _corner_push(
    bounds: tuple[float, float, float, float],
    corners: Iterable[tuple[float, float, float, float]],
) -> tuple[float, float]:
    """Sum the push-back directions for player corners lying inside a box."""
    lo_x, hi_x, lo_z, hi_z = bounds
    dx = dz = 0.0
    for cx, cz, push_x, push_z in corners:
        if lo_x < cx < hi_x and lo_z < cz < hi_z:
            dx += push_x
            dz += push_z
    return dx, dz


class Player:
    """First-person player with a square collision footprint and a melee attack."""

    rotate_speed = 2.3
    speed = 0.62
    strike_cooldown = 20
    eye_height = 1.75

    def __init__(self):
        self.hp = 100
        self.damage_dealt = 12
        self.location = [0.0, self.eye_height, 0.0]
        self.velocity = [0.0, 0.0, 0.0]
        self.rotation_y = 0.0
        self.fov = 75.0
        self.d_x = 0.0
        self.d_z = 0.0
        self.min_x = -1.5
        self.max_x = 1.5
        self.min_z = -1.5
        self.max_z = 1.5
        self.grab_distance = 2.0
        self.is_striking = False
        self.strike_timer = 0
        self.hand_x = 760
        self.hand_y = 220
        self._bob = 0.0

    def move(self, v, r) -> None:
        """Turn by ``r`` steps and push forward by ``v`` steps along the view."""
        self.rotation_y += float(r) * self.rotate_speed
        radians = self.rotation_y * 3.14159 / 180.0
        self.d_x = math.sin(radians)
        self.d_z = -math.cos(radians)

        vx = self.d_x * self.speed * float(v)
        vz = self.d_z * self.speed * float(v)
        self.velocity[0] += vx
        self.velocity[2] += vz
        self._bob += math.hypot(vx, vz) / 1.5

    def _corners(self) -> list[tuple[float, float, float, float]]:
        x, z = self.location[0], self.location[2]
        return [
            (x + self.min_x, z + self.min_z, 1.0, 1.0),
            (x + self.min_x, z + self.max_z, 1.0, -1.0),
            (x + self.max_x, z + self.min_z, -1.0, 1.0),
            (x + self.max_x, z + self.max_z, -1.0, -1.0),
        ]

    def apply_collision(self, world: Any) -> None:
        """Push the player away from any enemy or structure it overlaps."""
        corners = self._corners()
        dx = dz = 0.0

        boxes = [
            (
                e.location[0] + e.min_x,
                e.location[0] + e.max_x,
                e.location[2] + e.min_z,
                e.location[2] + e.max_z,
            )
            for e in world.enemies.values()
        ]
        boxes.extend(obj.bounds() for obj in world.objects.values())

        for box in boxes:
            px, pz = _corner_push(box, corners)
            dx += px
            dz += pz

        length = math.hypot(dx, dz)
        if length != 0:
            dx = dx / length * self.speed
            dz = dz / length * self.speed
        self.velocity[0] += dx
        self.velocity[2] += dz

    def update(self, world: Any) -> None:
        """Advance one frame: move, pick up potions and resolve strikes."""
        self.location[0] += self.velocity[0]
        self.location[1] = self.eye_height + math.sin(self._bob) / 3
        self.location[2] += self.velocity[2]
        self.velocity = [0.0, 0.0, 0.0]

        self._collect_potions(world)

        if self.is_striking:
            self._advance_strike(world)

    def _collect_potions(self, world: Any) -> None:
        for potion in list(world.potions.values()):
            distance = math.hypot(self.location[0] - potion.x, self.location[2] - potion.z)
            if distance < self.grab_distance:
                self.hp = min(self.hp + 20, 100)
                world.potions.pop(potion.index, None)
                world.score += 50
                world.level_manager.gambiina_count -= 1

    def _advance_strike(self, world: Any) -> None:
        self.strike_timer += 1
        if self.strike_timer >= self.strike_cooldown:
            self.is_striking = False
            self.strike_timer = 0
            self.hand_x, self.hand_y = _REST_HAND

        half = self.strike_cooldown // 2
        progress = self.strike_timer / self.strike_cooldown
        if self.strike_timer <= half:
            t = 2.0 * progress
        else:
            t = 1.0 - (progress - 0.5) * 2

        rest_x, rest_y = _REST_HAND
        struck_x, struck_y = _STRUCK_HAND
        self.hand_x = int(rest_x + t * (struck_x - rest_x))
        self.hand_y = int(rest_y + t * (struck_y - rest_y))

        if self.strike_timer == half:
            self._resolve_hits(world)

    def _resolve_hits(self, world: Any) -> None:
        for enemy in list(world.enemies.values()):
            if not self.check_intersection(enemy):
                continue
            enemy.hp -= self.damage_dealt
            enemy.aggro = True
            enemy.emit_particles(world)
            if enemy.hp < 0:
                world.enemies.pop(enemy.index, None)
                world.score += 100

    def strike(self) -> None:
        """Start a melee strike unless one is already under way."""
        if not self.is_striking:
            self.is_striking = True

    def check_intersection(self, enemy) -> bool:
        """Whether the line of sight crosses the enemy's collision box."""
        if self.d_x == 0.0:
            self.d_x = 1e-6
        if self.d_z == 0.0:
            self.d_z = 1e-6

        lo_x = enemy.location[0] + enemy.min_x
        hi_x = enemy.location[0] + enemy.max_x
        lo_z = enemy.location[2] + enemy.min_z
        hi_z = enemy.location[2] + enemy.max_z

        px, pz = self.location[0], self.location[2]
        slope_x = self.d_x / self.d_z
        slope_z = self.d_z / self.d_x

        x_at_far = slope_x * (hi_z - pz) + px
        x_at_near = slope_x * (lo_z - pz) + px
        z_at_far = slope_z * (hi_x - px) + pz
        z_at_near = slope_z * (lo_x - px) + pz

        return (
            lo_x < x_at_far < hi_x
            or lo_x < x_at_near < hi_x
            or lo_z < z_at_far < hi_z
            or lo_z < z_at_near < hi_z
        )