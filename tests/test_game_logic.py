"""Unit tests for the tic-tac-toe engine."""

import pytest

from tictactoe.game_logic import (
    GameLogic, GameStatus, Mark, MoveOutcome, Phase, WIN_LINES,
)


def play(game, *indices):
    result = None
    for i in indices:
        result = game.make_move(i)
    return result


def line_game(line):
    """alternating moves that complete `line` for X without O winning first"""
    others = [i for i in range(9) if i not in line]
    moves = []
    for k, x_cell in enumerate(line):
        moves.append(x_cell)
        if k < 2:
            moves.append(others[k])
    return moves


def test_fresh_game():
    game = GameLogic()
    assert game.get_status() == GameStatus(Phase.IN_PROGRESS, current_player=Mark.X)
    assert game.board == (None,) * 9
    assert game.move_count == 0
    assert not game.game_over
    assert not game.is_draw
    assert game.winner is None


def test_turns_alternate():
    game = GameLogic()
    res = game.make_move(4)
    assert res.outcome is MoveOutcome.CONTINUE
    assert res.status.current_player is Mark.O
    assert game.board[4] is Mark.X
    game.make_move(0)
    assert game.board[0] is Mark.O
    assert game.current_player is Mark.X


def test_occupied_cell_is_noop():
    game = GameLogic()
    game.make_move(4)
    before = (game.board, game.current_player, game.get_status())
    res = game.make_move(4)
    assert res.outcome is MoveOutcome.OCCUPIED
    assert not res.outcome.accepted
    assert (game.board, game.current_player, game.get_status()) == before


def test_row_win_and_game_over():
    game = GameLogic()
    res = play(game, 0, 3, 1, 4, 2)
    assert res.outcome is MoveOutcome.WIN
    assert res.status == GameStatus(Phase.WON, winner=Mark.X, winning_line=(0, 1, 2))
    assert game.winner is Mark.X
    assert game.winning_line == (0, 1, 2)

    board = game.board
    res = game.make_move(8)
    assert res.outcome is MoveOutcome.GAME_OVER
    assert game.board == board


def test_game_over_checked_before_occupied():
    game = GameLogic()
    play(game, 0, 3, 1, 4, 2)
    assert game.make_move(0).outcome is MoveOutcome.GAME_OVER


def test_o_can_win():
    game = GameLogic()
    res = play(game, 0, 3, 1, 4, 8, 5)
    assert res.outcome is MoveOutcome.WIN
    assert res.status.winner is Mark.O
    assert res.status.winning_line == (3, 4, 5)


def test_draw():
    game = GameLogic()
    moves = [0, 1, 2, 4, 3, 5, 7, 6]
    for i in moves:
        assert game.make_move(i).outcome is MoveOutcome.CONTINUE
    res = game.make_move(8)
    assert res.outcome is MoveOutcome.DRAW
    assert res.status == GameStatus(Phase.DRAW)
    assert game.is_draw
    assert game.winner is None
    assert game.make_move(0).outcome is MoveOutcome.GAME_OVER


def test_filling_move_that_wins_is_a_win():
    game = GameLogic()
    # ninth move fills the board and closes the left column for X
    res = play(game, 0, 1, 2, 4, 3, 5, 7, 8, 6)
    assert res.outcome is MoveOutcome.WIN
    assert res.status.winning_line == (0, 3, 6)
    assert not game.is_draw


@pytest.mark.parametrize("line", WIN_LINES)
def test_each_win_line(line):
    game = GameLogic()
    res = play(game, *line_game(line))
    assert res.outcome is MoveOutcome.WIN
    assert res.status.winner is Mark.X
    assert res.status.winning_line == line


@pytest.mark.parametrize("index", [-1, 9, 100, "4", None, 1.0, True])
def test_invalid_index(index):
    game = GameLogic()
    game.make_move(4)
    board = game.board
    res = game.make_move(index)
    assert res.outcome is MoveOutcome.INVALID
    assert game.board == board
    assert game.current_player is Mark.O


def test_reset_restores_fresh_state():
    game = GameLogic()
    play(game, 0, 3, 1, 4, 2)
    game.reset_game()
    fresh = GameLogic()
    assert game.board == fresh.board
    assert game.get_status() == fresh.get_status()
    assert game.winning_line is None
    assert game.make_move(0).outcome is MoveOutcome.CONTINUE


def test_reset_after_draw():
    game = GameLogic()
    play(game, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    game.reset_game()
    assert not game.is_draw
    assert game.current_player is Mark.X


def test_status_is_idempotent():
    game = GameLogic()
    play(game, 0, 4)
    assert game.get_status() == game.get_status()
    play(game, 1, 7, 2)
    first = game.get_status()
    assert all(game.get_status() == first for _ in range(5))


def test_board_is_read_only_copy():
    game = GameLogic()
    game.make_move(0)
    assert isinstance(game.board, tuple)
    assert game.cell(0, 0) is Mark.X
    assert game.cell(2, 2) is None


@pytest.mark.parametrize("row, col", [(-1, 2), (0, 8), (3, 0), (0, -1)])
def test_cell_off_the_board(row, col):
    game = GameLogic()
    # bottom-right is what wrapped indexing would land on
    play(game, 8, 0, 2)
    assert game.cell(2, 2) is Mark.X
    assert game.cell(row, col) is None


def test_helpers():
    game = GameLogic()
    play(game, 4, 0)
    assert game.move_count == 2
    assert not game.is_cell_empty(4)
    assert game.is_cell_empty(8)
    assert not game.is_cell_empty(9)


def test_mark_opposite():
    assert Mark.X.opposite() is Mark.O
    assert Mark.O.opposite() is Mark.X
