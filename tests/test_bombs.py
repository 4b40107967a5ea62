"""
Tests for bomb placement, fuses and blast propagation
"""
import pytest

from bomber.bombs import BombEngine
from bomber.config import BOMB_FUSE_TIME
from bomber.entities import Enemy
from bomber.grid import Grid, Tile


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def make_engine(rows, enemies=None):
    grid = Grid.from_rows(rows)
    clock = FakeClock()
    engine = BombEngine(grid, enemies if enemies is not None else [], clock)
    return engine, grid, clock


def blast_cells(engine):
    return {ex.cell for ex in engine.explosions}


OPEN_ROW = [
    "#####",
    "#...#",
    "#####",
]


def test_place_bomb_rounds_to_nearest_cell():
    engine, _, _ = make_engine(OPEN_ROW)
    assert engine.place_bomb(1.4, 0.6)
    assert engine.bombs[0].cell == (1, 1)
    assert engine.bombs[0].fuse == BOMB_FUSE_TIME


def test_one_bomb_per_cell():
    engine, _, _ = make_engine(OPEN_ROW)
    assert engine.place_bomb(2.0, 1.0)
    assert not engine.place_bomb(1.6, 1.2)
    assert len(engine.bombs) == 1
    assert engine.place_bomb(1.0, 1.0)
    assert len(engine.bombs) == 2


def test_fuse_counts_down_with_frame_time():
    engine, _, _ = make_engine(OPEN_ROW)
    engine.place_bomb(1, 1)
    assert engine.tick(BOMB_FUSE_TIME - 1) == []
    assert len(engine.bombs) == 1
    detonated = engine.tick(1)
    assert len(detonated) == 1
    assert engine.bombs == []
    assert (1, 1) in blast_cells(engine)


def test_ray_stops_at_indestructible():
    """Open cells keep the ray going; solid walls stop it without being hit"""
    engine, grid, _ = make_engine([
        "######",
        "#..###",
        "######",
    ])
    engine.place_bomb(1, 1)
    engine.detonate(engine.bombs[0])
    assert blast_cells(engine) == {(1, 1), (2, 1)}
    assert engine.score == 0
    assert grid.cell_at(3, 1) == Tile.INDESTRUCTIBLE


def test_ray_limited_by_range():
    engine, _, _ = make_engine([
        "#######",
        "#.....#",
        "#######",
    ])
    engine.place_bomb(1, 1)
    engine.detonate(engine.bombs[0])
    assert blast_cells(engine) == {(1, 1), (2, 1), (3, 1)}


def test_breakable_wall_absorbs_blast():
    """A destroyed wall is cleared, scores 10 and stops the ray"""
    engine, grid, _ = make_engine([
        "######",
        "#.+..#",
        "######",
    ])
    engine.place_bomb(1, 1)
    engine.detonate(engine.bombs[0])
    assert blast_cells(engine) == {(1, 1), (2, 1)}
    assert grid.cell_at(2, 1) == Tile.EMPTY
    assert grid.cell_at(3, 1) == Tile.EMPTY
    assert engine.score == 10


def test_enemy_in_blast_is_removed():
    enemies = [Enemy(2.9, 1.0), Enemy(3.5, 1.0, direction=(-1, 0))]
    engine, _, _ = make_engine([
        "######",
        "#....#",
        "######",
    ], enemies)
    engine.place_bomb(1, 1)
    engine.detonate(engine.bombs[0])
    # Blast reaches (2, 1) and (3, 1); both enemies truncate into those cells
    assert enemies == []
    assert engine.score == 200


def test_enemy_and_wall_scores_add_up():
    enemies = [Enemy(2, 1)]
    engine, _, _ = make_engine([
        "#####",
        "#.+.#",
        "#####",
    ], enemies)
    engine.apply_explosion(2, 1)
    assert enemies == []
    assert engine.score == 110


def test_blocked_cells_leave_no_trace():
    engine, _, _ = make_engine(OPEN_ROW)
    assert engine.apply_explosion(-1, 1) is False
    assert engine.apply_explosion(0, 1) is False
    assert engine.apply_explosion(1, 1) is True
    assert blast_cells(engine) == {(1, 1)}


def test_explosions_expire_after_duration():
    engine, _, clock = make_engine(OPEN_ROW)
    clock.now = 1000
    engine.apply_explosion(1, 1)
    engine.expire(1500)
    assert engine.explosion_at(1, 1) is not None
    engine.expire(1501)
    assert engine.explosions == []


def test_score_listener():
    seen = []
    grid = Grid.from_rows(["#####", "#.+.#", "#####"])
    engine = BombEngine(grid, [], FakeClock(), on_score=seen.append)
    engine.apply_explosion(2, 1)
    assert seen == [10]


def test_clear_drops_pending_bombs():
    engine, _, _ = make_engine(OPEN_ROW)
    engine.place_bomb(1, 1)
    engine.apply_explosion(2, 1)
    engine.clear()
    assert engine.bombs == []
    assert engine.explosions == []
    assert engine.tick(BOMB_FUSE_TIME) == []


@pytest.mark.parametrize("x, y", [(1, 1), (2, 1), (3, 1)])
def test_lookup_by_cell(x, y):
    engine, _, _ = make_engine(OPEN_ROW)
    engine.place_bomb(x, y)
    assert engine.bomb_at(x, y) is engine.bombs[0]
    assert engine.bomb_at(x + 10, y) is None
