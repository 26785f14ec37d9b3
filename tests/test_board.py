import random

import pytest

from lifegrid.board import (
    Board,
    create_board,
    load_board,
    parse_board,
    parse_int,
    parse_size,
    randomize,
)


def board_with(width, height, cells):
    board = Board(width, height)
    for x, y in cells:
        board.set(x, y, True)
    return board


def test_new_board_is_empty():
    board = Board(4, 3)
    assert (board.width, board.height) == (4, 3)
    assert list(board.living()) == []


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Board(-1, 2)


def test_set_and_toggle():
    board = Board(3, 3)
    board.set(1, 2, True)
    assert board.is_alive(1, 2) is True
    assert board.toggle(1, 2) is False
    assert board.is_alive(1, 2) is False
    assert board.toggle(0, 0) is True
    assert set(board.living()) == {(0, 0)}


def test_out_of_bounds_access_raises():
    board = Board(2, 2)
    with pytest.raises(IndexError):
        board.is_alive(2, 0)
    with pytest.raises(IndexError):
        board.set(0, -1, True)
    with pytest.raises(IndexError):
        board.toggle(5, 5)


def test_count_neighbors_does_not_wrap():
    full = [(x, y) for x in range(3) for y in range(3)]
    board = board_with(3, 3, full)
    assert board.count_neighbors(1, 1) == 8
    assert board.count_neighbors(0, 0) == 3
    lone = board_with(3, 3, [(2, 2)])
    assert lone.count_neighbors(0, 0) == 0


def test_lonely_cell_dies():
    board = board_with(5, 5, [(2, 2)])
    board.step()
    assert list(board.living()) == []


def test_block_is_still_life():
    cells = {(1, 1), (2, 1), (1, 2), (2, 2)}
    board = board_with(4, 4, cells)
    board.step()
    assert set(board.living()) == cells


def test_blinker_has_period_two():
    cells = {(1, 2), (2, 2), (3, 2)}
    board = board_with(5, 5, cells)
    board.step()
    after_one = set(board.living())
    assert after_one != cells
    assert len(after_one) == len(cells)
    board.step()
    assert set(board.living()) == cells


def test_birth_with_three_neighbours():
    board = board_with(4, 4, [(0, 0), (1, 0), (0, 1)])
    board.step()
    assert board.is_alive(1, 1) is True
    stable = set(board.living())
    board.step()
    assert set(board.living()) == stable


@pytest.mark.parametrize("text, value", [("42", 42), ("-7", -7), ("+3", 3), ("0", 0)])
def test_parse_int_accepts(text, value):
    assert parse_int(text) == value


@pytest.mark.parametrize("text", ["", "4a", " 4", "4 ", "--4", "2147483648", "١٢"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


def test_parse_size():
    assert parse_size("50") == 50
    with pytest.raises(ValueError):
        parse_size("-1")
    with pytest.raises(ValueError):
        parse_size("pattern.txt")


def test_create_board_adds_padding():
    padding = 2
    board = create_board(3, 5, padding)
    assert board.width == 3 + 2 * padding
    assert board.height == 5 + 2 * padding
    assert list(board.living()) == []


def test_parse_board_places_cells_inside_padding():
    lines = ["1 0 1\n", "0 1 0\n"]
    board = parse_board(lines, 1)
    assert (board.width, board.height) == (5, 4)
    pattern = {(0, 0), (2, 0), (1, 1)}
    assert set(board.living()) == {(x + 1, y + 1) for x, y in pattern}


def test_parse_board_ignores_extra_tokens_and_short_rows():
    board = parse_board(["1 1", "1 1 1 1 1 1", "1"], 0)
    assert (board.width, board.height) == (2, 3)
    assert set(board.living()) == {(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)}


def test_parse_board_empty_input():
    board = parse_board([], 2)
    assert (board.width, board.height) == (4, 4)
    assert list(board.living()) == []


def test_load_board_matches_parse(tmp_path):
    lines = ["0 1 0\n", "0 1 0\n", "0 1 0\n"]
    path = tmp_path / "map.txt"
    path.write_text("".join(lines), encoding="utf-8")
    loaded = load_board(path, 3)
    parsed = parse_board(lines, 3)
    assert (loaded.width, loaded.height) == (parsed.width, parsed.height)
    assert list(loaded.living()) == list(parsed.living())


def test_load_board_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_board(tmp_path / "absent.txt", 1)


def test_randomize_respects_padding_and_seed():
    padding = 2
    first = create_board(6, 6, padding)
    second = create_board(6, 6, padding)
    randomize(first, padding, random.Random(1234))
    randomize(second, padding, random.Random(1234))
    cells = list(first.living())
    assert cells == list(second.living())
    assert cells
    for x, y in cells:
        assert padding <= x < first.width - padding
        assert padding <= y < first.height - padding