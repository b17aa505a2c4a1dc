import pytest

from ats_game.lerp import Position
from ats_game.selection_box import Selected, SelectionBox, is_inside


@pytest.mark.parametrize(
    "first, second",
    [
        (Position(10, 10), Position(-10, -10)),
        (Position(10, -10), Position(-10, 10)),
        (Position(-10, 10), Position(10, -10)),
    ],
)
def test_is_inside_covered_orientations(first, second):
    assert is_inside(Position(0, 0), first, second) is True


def test_is_inside_first_corner_bottom_left_not_selected():
    assert is_inside(Position(0, 0), Position(-10, -10), Position(10, 10)) is False


def test_is_inside_boundary_excluded():
    assert is_inside(Position(10, 0), Position(10, 10), Position(-10, -10)) is False


def test_is_inside_outside():
    assert is_inside(Position(50, 0), Position(10, 10), Position(-10, -10)) is False


def test_selected_add_and_entities():
    selected = Selected()
    selected.add(1)
    selected.add(1)
    selected.add(2)
    assert selected.entities() == frozenset({1, 2})
    assert 2 in selected
    assert len(selected) == 2


def test_move_sets_first_corner_only():
    box = SelectionBox()
    box.move(Position(5, 5), True, False)
    assert box.first == Position(5, 5)
    box.move(Position(-3, 8), False, True)
    assert box.first == Position(-3, 8)
    assert box.second == Position(0, 0)


def test_move_without_mouse_or_buttons():
    box = SelectionBox(Position(1, 1), Position(2, 2))
    box.move(None, True, True)
    box.move(Position(9, 9), False, False)
    assert box.first == Position(1, 1)
    assert box.second == Position(2, 2)


def test_select_units():
    box = SelectionBox(Position(10, 10), Position(-10, -10))
    selected = Selected()
    units = [("a", Position(0, 0)), ("b", Position(20, 0)), ("c", Position(-5, 5))]
    box.select_units(units, selected)
    assert selected.entities() == frozenset({"a", "c"})


def test_select_units_keeps_previous_selection():
    box = SelectionBox(Position(10, 10), Position(-10, -10))
    selected = Selected()
    selected.add("far")
    box.select_units([("far", Position(100, 100))], selected)
    assert selected.entities() == frozenset({"far"})