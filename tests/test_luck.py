"""Tests for snakes_sim.luck."""

from snakes_sim.board import Board, blank, canon_board
from snakes_sim.luck import LuckSets, compute_luck


def test_lucky_and_unlucky_spaces():
    board = Board(20, {5: 8, 14: 2})
    lucky, unlucky = compute_luck(board)
    assert lucky == {
        5,                # ladder up
        12, 13, 15, 16,   # near a snake
        20,               # winning square
    }
    assert unlucky == {14}


def test_blank_board_only_winning_square_is_lucky():
    luck = compute_luck(blank(10))
    assert luck.lucky == {10}
    assert luck.unlucky == set()


def test_near_miss_ignores_start_square():
    """Neighbours at or below square 0 are skipped, so square 0 sees only 1 and 2."""
    luck = compute_luck(Board(10, {2: 1}))
    assert luck.lucky == {0, 1, 3, 4, 10}
    assert luck.unlucky == {2}


def test_snake_next_to_snake_is_both():
    luck = compute_luck(Board(20, {10: 1, 11: 2}))
    assert 10 in luck.lucky and 10 in luck.unlucky
    assert luck.classify(10) == "unlucky"


def test_classify():
    luck = compute_luck(Board(20, {5: 8, 14: 2}))
    assert luck.classify(5) == "lucky"
    assert luck.classify(14) == "unlucky"
    assert luck.classify(1) is None
    assert luck.classify(20) == "lucky"


def test_luck_is_deterministic():
    board = canon_board()
    assert compute_luck(board) == compute_luck(board)


def test_returns_frozensets():
    luck = compute_luck(canon_board())
    assert isinstance(luck, LuckSets)
    assert isinstance(luck.lucky, frozenset)
    assert isinstance(luck.unlucky, frozenset)
