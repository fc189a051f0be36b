import pytest

from terminal_hanoi.solver import expected_moves, move_stack, plan_moves, solve
from terminal_hanoi.tower import Peg, Tower


@pytest.mark.parametrize("height", range(0, 9))
def test_move_count_is_two_to_the_n_minus_one(height):
    tower = Tower(height)
    assert solve(tower) == 2 ** height - 1
    assert tower.moves == 2 ** height - 1
    assert expected_moves(height) == 2 ** height - 1


@pytest.mark.parametrize("height", [0, 1, 2, 5, 7])
def test_all_disks_end_on_right_peg(height):
    tower = Tower(height)
    solve(tower)
    assert tower.pegs[Peg.LEFT.value] == []
    assert tower.pegs[Peg.MIDDLE.value] == []
    assert tower.pegs[Peg.RIGHT.value] == list(range(height, 0, -1))
    assert tower.is_solved()


@pytest.mark.parametrize("height", [1, 3, 6])
def test_every_move_is_legal_and_keeps_order(height):
    tower = Tower(height)
    seen = []

    def check(t, move):
        # Destination was empty or topped by a larger disk before the move.
        below = t.pegs[move.target.value][:-1]
        assert t.pegs[move.target.value][-1] == move.disk
        assert not below or below[-1] > move.disk
        for peg in t.pegs:
            assert all(a > b for a, b in zip(peg, peg[1:]))
        assert sorted(d for peg in t.pegs for d in peg) == list(range(1, height + 1))
        seen.append((move.source, move.target))

    solve(tower, on_move=check)
    assert seen == list(plan_moves(height))


def test_callback_runs_after_each_move_in_order():
    tower = Tower(2)
    counts = []
    solve(tower, on_move=lambda t, m: counts.append(t.moves))
    assert counts == [1, 2, 3]


def test_two_disk_sequence():
    assert list(plan_moves(2)) == [
        (Peg.LEFT, Peg.MIDDLE),
        (Peg.LEFT, Peg.RIGHT),
        (Peg.MIDDLE, Peg.RIGHT),
    ]


def test_zero_height_makes_no_calls():
    calls = []
    assert solve(Tower(0), on_move=lambda t, m: calls.append(m)) == 0
    assert calls == []


def test_move_stack_partial():
    tower = Tower(3)
    assert move_stack(tower, 2, Peg.LEFT, Peg.MIDDLE, Peg.RIGHT) == 3
    assert tower.pegs == [[3], [2, 1], []]


def test_expected_moves_rejects_negative():
    with pytest.raises(ValueError):
        expected_moves(-1)
