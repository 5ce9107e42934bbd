from types import SimpleNamespace

import pytest

from kvdoom.entities import GameObject, Keletappi, ObjectKind, Potion
from kvdoom.level import LevelManager, read_level


def make_world():
    return SimpleNamespace(
        potions={},
        enemies={},
        objects={},
        potion_index=0,
        enemy_index=0,
        object_index=0,
    )


def write_level(root, name, text):
    levels = root / "levels"
    levels.mkdir(exist_ok=True)
    (levels / name).write_text(text, encoding="utf-8")


def test_read_level_strips_spaces(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text("a b c\nd e\n", encoding="utf-8")
    assert read_level(path) == [["a", "b", "c"], ["d", "e"]]


def test_read_level_keeps_empty_rows(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text("x\n\ny", encoding="utf-8")
    assert read_level(path) == [["x"], [], ["y"]]


def test_read_level_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_level(tmp_path / "nope.txt")


def test_missing_files_give_empty_level(tmp_path):
    world = make_world()
    manager = LevelManager(world, tmp_path)
    assert manager.level == 1
    assert manager.tile_grid == []
    assert manager.object_grid == []
    assert list(manager.ground_tiles()) == []


def test_build_spawns_objects(tmp_path):
    write_level(tmp_path, "level1.txt", "g k t\ns e .\ng")
    world = make_world()
    manager = LevelManager(world, tmp_path)
    assert len(world.potions) == 2
    assert manager.gambiina_count == 2
    assert all(isinstance(p, Potion) for p in world.potions.values())
    assert list(world.enemies) == [0]
    assert isinstance(world.enemies[0], Keletappi)
    kinds = [obj.kind for obj in world.objects.values()]
    assert kinds == [ObjectKind.PILLAR, ObjectKind.WALL, ObjectKind.ELECTRIC]
    assert world.object_index == 3


def test_grid_positions(tmp_path):
    write_level(tmp_path, "level1.txt", "g g\ng")
    world = make_world()
    LevelManager(world, tmp_path)
    first, second, third = world.potions.values()
    assert first.x == -80.0
    assert first.z == first.x
    assert second.z - first.z == 5.0
    assert third.x - first.x == 5.0
    assert third.z == first.z


def test_new_level_wraps_after_three(tmp_path):
    world = make_world()
    manager = LevelManager(world, tmp_path)
    levels = [manager.level]
    for _ in range(3):
        manager.new_level()
        levels.append(manager.level)
    assert levels == [1, 2, 3, 1]


def test_new_level_reads_matching_file(tmp_path):
    write_level(tmp_path, "level2.txt", "k k")
    world = make_world()
    manager = LevelManager(world, tmp_path)
    assert world.enemies == {}
    manager.new_level()
    assert len(world.enemies) == 2


def test_clean_level_keeps_enemies(tmp_path):
    write_level(tmp_path, "level1.txt", "g k t")
    world = make_world()
    manager = LevelManager(world, tmp_path)
    manager.clean_level()
    assert world.potions == {}
    assert world.objects == {}
    assert len(world.enemies) == 1


def test_ground_tiles(tmp_path):
    write_level(tmp_path, "ground1.txt", "k x\n. g")
    manager = LevelManager(make_world(), tmp_path)
    tiles = list(manager.ground_tiles())
    assert [t[0] for t in tiles] == [
        "assets/textures/kukkanen.png",
        "assets/textures/gravel.png",
    ]
    assert [t[3] for t in tiles] == [1.0, 2.0]
    assert tiles[1][1] > tiles[0][1]


def test_structures_are_game_objects(tmp_path):
    write_level(tmp_path, "level1.txt", "t")
    world = make_world()
    LevelManager(world, tmp_path)
    obj = world.objects[0]
    assert isinstance(obj, GameObject)
    lo_x, hi_x, lo_z, hi_z = obj.bounds()
    assert hi_x - lo_x == 4.0
    assert hi_z - lo_z == hi_x - lo_x