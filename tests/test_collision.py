import pytest

from puyo_chain.game import GameGrid, Orientation, Piece, can_place, occupied_cells
from puyo_chain.game.collision import can_place_piece
from tests.helpers import grid_from_rows


@pytest.mark.parametrize("orientation, satellite", [
    (Orientation.VERTICAL, (6, 3)),
    (Orientation.RIGHT, (5, 4)),
    (Orientation.INVERTED, (4, 3)),
    (Orientation.LEFT, (5, 2)),
])
def test_occupied_cells_per_orientation(orientation, satellite):
    assert occupied_cells((5, 3), orientation) == ((5, 3), satellite)


def test_rotation_cycles_through_all_four_states():
    seen = [Orientation.VERTICAL]
    for _ in range(4):
        seen.append(seen[-1].rotated())
    assert seen == [
        Orientation.VERTICAL, Orientation.RIGHT, Orientation.INVERTED,
        Orientation.LEFT, Orientation.VERTICAL,
    ]


def test_can_place_rejects_each_edge():
    grid = GameGrid(12, 6)
    assert can_place(grid, (0, 0), Orientation.VERTICAL)
    assert not can_place(grid, (0, 0), Orientation.INVERTED)
    assert not can_place(grid, (11, 0), Orientation.VERTICAL)
    assert not can_place(grid, (3, 0), Orientation.LEFT)
    assert not can_place(grid, (3, 5), Orientation.RIGHT)
    assert can_place(grid, (11, 5), Orientation.LEFT)


def test_can_place_rejects_occupied_satellite():
    grid = grid_from_rows([
        "...",
        "...",
        ".G.",
    ])
    assert not can_place(grid, (1, 1), Orientation.VERTICAL)
    assert can_place(grid, (1, 1), Orientation.RIGHT)
    assert not can_place_piece(grid, Piece((1, 2), 2, 0, Orientation.RIGHT))


def test_can_place_has_no_side_effects():
    grid = grid_from_rows(["...", ".R."])
    before = grid.clone_state()
    can_place(grid, (0, 1), Orientation.VERTICAL)
    assert (grid.grid == before).all()
