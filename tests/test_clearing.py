import numpy as np

from puyo_chain.game import ScoringRules, apply_gravity, find_clusters, find_regions, resolve_chains
from tests.helpers import board_from_rows, grid_from_rows, rows_from_grid


def test_single_cluster_of_four_is_cleared_for_four_points():
    grid = grid_from_rows([
        "......",
        "......",
        ".RR...",
        ".RR...",
    ])
    result = resolve_chains(grid)
    assert grid.filled_count() == 0
    assert result.chain_count == 1
    assert result.cells_cleared == 4
    assert result.score_delta == 4


def test_cluster_of_three_is_never_cleared():
    rows = [
        "......",
        "R.....",
        "RR....",
    ]
    grid = grid_from_rows(rows)
    result = resolve_chains(grid)
    assert result.chain_count == 0
    assert result.score_delta == 0
    assert rows_from_grid(grid) == rows


def test_stable_board_is_left_unchanged():
    rows = [
        "RGBY..",
        "GBYP..",
        "RGBYPR",
    ]
    grid = grid_from_rows(rows)
    result = resolve_chains(grid)
    assert result.steps == []
    assert result.score_delta == 0
    assert rows_from_grid(grid) == rows


def test_cleared_cells_let_the_rest_fall():
    grid = grid_from_rows([
        "B.....",
        "Y.....",
        "RR....",
        "RRG...",
    ])
    result = resolve_chains(grid)
    assert result.score_delta == 4
    assert rows_from_grid(grid) == [
        "......",
        "......",
        "B.....",
        "Y.G...",
    ]


def test_second_pass_scores_with_chain_multiplier():
    grid = grid_from_rows([
        "......",
        "G.....",
        "R.....",
        "R.....",
        "R.....",
        "RGGG..",
    ])
    result = resolve_chains(grid)
    assert result.chain_count == 2
    assert [step.score for step in result.steps] == [4, 8]
    assert result.score_delta == 12
    assert grid.filled_count() == 0


def test_clusters_in_one_pass_share_the_multiplier():
    grid = grid_from_rows([
        "......",
        "RR.BB.",
        "RR.BB.",
    ])
    result = resolve_chains(grid)
    assert result.chain_count == 1
    assert result.steps[0].clusters == 2
    assert result.steps[0].cells_cleared == 8
    assert result.score_delta == 8


def test_diagonal_cells_are_not_connected():
    board = board_from_rows([
        "R.R",
        ".R.",
        "R.R",
    ])
    assert find_clusters(board) == []


def test_find_clusters_returns_whole_regions_in_scan_order():
    board = board_from_rows([
        "GGG..",
        "..G.R",
        "RRRRR",
    ])
    clusters = find_clusters(board)
    assert [len(c) for c in clusters] == [4, 6]
    assert sorted(clusters[0]) == [(0, 0), (0, 1), (0, 2), (1, 2)]
    assert (1, 4) in clusters[1]


def test_find_clusters_honours_threshold():
    board = board_from_rows(["RR.", "..."])
    clusters = find_clusters(board, threshold=2)
    assert len(clusters) == 1
    assert sorted(clusters[0]) == [(0, 0), (0, 1)]
    assert find_clusters(board, threshold=3) == []


def test_custom_threshold_clears_pairs():
    grid = grid_from_rows(["...", "GG."])
    result = resolve_chains(grid, ScoringRules(clear_threshold=2))
    assert result.score_delta == 2
    assert grid.filled_count() == 0


def test_gravity_keeps_column_order():
    board = board_from_rows([
        "R.",
        "G.",
        "..",
        ".B",
        "..",
    ])
    assert apply_gravity(board)
    assert (board == board_from_rows([
        "..",
        "..",
        "..",
        "R.",
        "GB",
    ])).all()


def test_gravity_on_packed_board_is_idempotent():
    board = board_from_rows([
        "....",
        "R..G",
        "GB.G",
    ])
    before = board.copy()
    assert not apply_gravity(board)
    assert np.array_equal(board, before)


def test_pass_clears_only_regions_the_rules_accept():
    rows = [
        "......",
        "RRR.GG",
        "B...GG",
    ]
    grid = grid_from_rows(rows)
    assert ScoringRules(clear_threshold=4).qualifies(4)
    assert not ScoringRules(clear_threshold=4).qualifies(3)
    assert [len(r) for r in find_regions(grid.grid)] == [3, 4, 1]
    result = resolve_chains(grid, ScoringRules(clear_threshold=4))
    assert result.cells_cleared == 4
    assert rows_from_grid(grid) == [
        "......",
        "R.....",
        "BRR...",
    ]
