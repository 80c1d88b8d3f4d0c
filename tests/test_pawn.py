import pytest

from draughtsboard.pawn import Color, Pawn


def test_new_pawn_is_alive_and_not_queen():
    pawn = Pawn(Color.WHITE, (150, 250))
    assert pawn.is_alive is True
    assert pawn.is_queen is False
    assert pawn.color is Color.WHITE


def test_cell_from_pixel_position():
    pawn = Pawn(Color.BLACK, (350, 250))
    assert pawn.cell() == (3, 2)


def test_change_position_stores_new_position():
    pawn = Pawn(Color.BLACK, (50, 50))
    pawn.change_position((750, 650))
    assert pawn.position == (750, 650)


@pytest.mark.parametrize("cell", [(0, 0), (7, 7), (2, 5), (6, 1)])
def test_cell_round_trip(cell):
    pawn = Pawn(Color.WHITE, (0, 0))
    x, y = cell
    pawn.change_position((x * 100 + 50, y * 100 + 50))
    assert pawn.cell() == cell


def test_pawns_compare_by_identity():
    first = Pawn(Color.WHITE, (50, 50))
    second = Pawn(Color.WHITE, (50, 50))
    assert [first, second].index(second) == 1
    assert first == first


@pytest.mark.parametrize(
    "color, rgb", [(Color.WHITE, (255, 255, 255)), (Color.BLACK, (0, 0, 0))]
)
def test_pawn_color_is_rgb(color, rgb):
    pawn = Pawn(color, (50, 50))
    assert pawn.color.value == rgb