import pytest

from drop_stack.game import DropStackGame, GameConfig, InvalidToken, OutOfBounds, ShapeType, solve


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Q0", 2),
        ("Q0,Q1", 4),
        ("Q0,Q2,Q4,Q6,Q8", 0),
        ("Q0,Q2,Q4,Q6,Q8,Q1", 2),
        ("Q0,Q2,Q4,Q6,Q8,Q1,Q1", 4),
        ("I0,I4,Q8", 1),
        ("I0,I4,Q8,I0,I4", 0),
        ("L0,J2,L4,J6,Q8", 2),
        ("L0,Z1,Z3,Z5,Z7", 2),
        ("T0,T3", 2),
        ("T0,T3,I6,I6", 1),
        ("I0,I6,S4", 1),
        ("T1,Z3,I4", 4),
        ("L0,J3,L5,J8,T1", 3),
        ("L0,J3,L5,J8,T1,T6", 1),
        ("L0,J3,L5,J8,T1,T6,J2,L6,T0,T7", 2),
        ("L0,J3,L5,J8,T1,T6,J2,L6,T0,T7,Q4", 1),
        ("S0,S2,S4,S6", 8),
        ("S0,S2,S4,S5,Q8,Q8,Q8,Q8,T1,Q1,I0,Q4", 8),
        ("L0,J3,L5,J8,T1,T6,S2,Z5,T0,T7", 0),
        ("Q0,I2,I6,I0,I6,I6,Q2,Q4", 3),
    ],
)
def test_solve(line, expected):
    assert solve(line) == expected


def test_cleared_row_opens_a_reachable_hole():
    # After I0,I6,T4,J8,T6 the board is
    #
    #                   x
    #             x x x x
    #         x x x x x x
    # x x x x   x x x x x
    #
    # I0 clears row 1, which lets T3 drop into the gap in row 0.
    assert solve("I0,I6,T4,J8,T6") == 4
    assert solve("I0,I6,T4,J8,T6,I0") == 3
    assert solve("I0,I6,T4,J8,T6,I0,T3") == 2


def test_solve_errors():
    with pytest.raises(OutOfBounds):
        solve("Q9")
    with pytest.raises(OutOfBounds):
        solve("I0,I7")
    with pytest.raises(InvalidToken):
        solve("Q0,X1")


def test_play_stops_at_first_error():
    game = DropStackGame()
    with pytest.raises(OutOfBounds):
        game.play([(ShapeType.Q, 0), (ShapeType.Q, 9), (ShapeType.Q, 0)])
    assert game.pieces_placed == 1
    assert game.height == 2


def test_game_totals_and_reset():
    game = DropStackGame()
    assert game.play([(ShapeType.I, 0), (ShapeType.I, 4)]) == 1
    result = game.place("Q", 8)
    assert result.lines_cleared == 1
    assert game.lines_cleared_total == 1
    assert game.pieces_placed == 3
    assert game.history[-1] == (ShapeType.Q, 8)
    game.reset()
    assert game.height == 0
    assert game.history == []
    assert game.lines_cleared_total == 0


def test_config_sets_board_size():
    game = DropStackGame(GameConfig(width=4, height=3))
    assert game.place(ShapeType.I, 0).lines_cleared == 1
    assert game.height == 0
    with pytest.raises(OutOfBounds):
        game.place(ShapeType.Z, 2)
    assert solve("L0,L0", GameConfig(width=10, height=6)) == 6
    with pytest.raises(OutOfBounds):
        solve("L0,L0,L0", GameConfig(width=10, height=6))
