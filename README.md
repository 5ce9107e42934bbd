# kvdoom

This package holds the game logic of a small first-person dungeon crawler.
Nothing here draws to the screen. A level is built from two text grids. The
player walks through the level and strikes the wandering skeletons
("keletappi"). Potions heal the player and add to the score.

## Installing

```
pip install .
```

## Level files

`LevelManager` reads its level files from `<assets_dir>/levels/`. The default
`assets_dir` is `assets`. Each level has two grids of characters. Spaces
between the characters are ignored. Each cell is a 5 × 5 slab, and the grid is
placed so that row 16, column 16 sits at the origin. A row maps to x and a
column maps to z.

- `groundN.txt` is the ground layer. `k` is flowers and `g` is gravel.
- `levelN.txt` is the object layer:
  - `g` is a potion
  - `k` is an enemy (`Keletappi`)
  - `t`, `s` and `e` are static structures (`ObjectKind.PILLAR`, `WALL` and
    `ELECTRIC`), each with a collision box

There are three levels. `LevelManager.new_level()` moves to the next one and
goes back to level 1 after level 3. If a level file is missing, an error is
logged and that grid is left empty.

`clean_level()` removes potions and structures. It does not remove enemies.

## Usage

```python
from kvdoom.world import World

world = World("path/to/assets")        # directory holding levels/
player = world.player

player.move(1, 0)                      # step forward, no turn
player.apply_collision(world)          # push back from enemies and structures
player.update(world)                   # move, pick up potions, resolve strikes

for enemy in list(world.enemies.values()):
    enemy.update(world)                # aggro, chase and attack

for particle in list(world.particles.values()):
    particle.update(world)             # returns False once expired and removed

player.strike()
print(player.hp, world.score, world.level_manager.gambiina_count)
```

The main pieces:

- **Potions.** Picking up a potion restores 20 HP, up to a cap of 100. It also
  adds 50 to `world.score` and lowers `level_manager.gambiina_count` by one.
- **Strikes.** A strike lasts 20 frames. At the halfway frame it hits every
  enemy whose box lies across the player's line of sight, which is tested
  with `Player.check_intersection`. Each hit takes 12 HP and makes the enemy
  emit 20 particles. When an enemy's HP drops below zero, the enemy is removed
  and 100 is added to the score.
- **Enemies.** An enemy becomes aggressive once the player comes within 20
  units. After that it chases the player and hits for 12 damage every 30
  frames while it is within 6.2 units.
- **Randomness.** `Particle` takes an optional `random.Random`. The world
  passes in its own `world.rng`.

### Helpers for a renderer

- `kvdoom.level.read_level(path)` reads one grid file and returns a list of
  rows of characters.
- `LevelManager.ground_tiles()` yields `(texture, x, z, tex_scale)` for each
  textured ground tile.
- `GameObject.parts` gives the `CubePart` boxes that a structure is drawn
  with.
- `GameObject.bounds()` gives the structure's collision box in world space.
- `Potion`, `Keletappi` and `Particle` each carry `texture`, `width` and
  `height` (particles have only `width`) for sprite drawing.

## What this package does not do

There is no window, no rendering, no texture loading and no keyboard
handling. There is also no game loop or command to start a game. You call
`update` on the player and on each entity yourself, once per frame.
`World.key_states` is an empty dictionary for your own input code.

## Running the tests

```
pip install .[test]
pytest
```