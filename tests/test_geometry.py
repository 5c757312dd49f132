import pytest

from bsptree.geometry import MoveDirection, Rectangle, SplitDirection


def test_new_rejects_negative_and_non_integers():
    assert Rectangle.new(0, 0, 640, 480) == (0, 0, 640, 480)
    with pytest.raises(ValueError):
        Rectangle.new(-1, 0, 10, 10)
    with pytest.raises(ValueError):
        Rectangle.new(0, 0, 10.5, 10)
    with pytest.raises(ValueError):
        Rectangle.new(0, 0, True, 10)


def test_contains_is_inclusive_on_both_edges():
    rect = Rectangle(10, 20, 30, 40)
    assert rect.contains(10, 20)
    assert rect.contains(40, 60)
    assert rect.contains(25, 30)
    assert not rect.contains(9, 20)
    assert not rect.contains(41, 20)
    assert not rect.contains(10, 61)
    assert not rect.contains(-1, -1)


def test_shared_edge_belongs_to_both_halves():
    left, right = SplitDirection.VERTICAL.split(Rectangle(0, 0, 640, 480))
    assert left.contains(320, 100)
    assert right.contains(320, 100)


def test_split_halves():
    rect = Rectangle(0, 0, 640, 480)
    assert SplitDirection.VERTICAL.split(rect) == (
        Rectangle(0, 0, 320, 480), Rectangle(320, 0, 320, 480))
    assert SplitDirection.HORIZONTAL.split(rect) == (
        Rectangle(0, 0, 640, 240), Rectangle(0, 240, 640, 240))


def test_split_truncates_odd_dimensions():
    top, bottom = SplitDirection.HORIZONTAL.split(Rectangle(3, 4, 7, 5))
    assert top == Rectangle(3, 4, 7, 2)
    assert bottom == Rectangle(3, 6, 7, 2)
    assert top.h + bottom.h == 4
    left, right = SplitDirection.VERTICAL.split(Rectangle(3, 4, 7, 5))
    assert left == Rectangle(3, 4, 3, 5)
    assert right == Rectangle(6, 4, 3, 5)
    assert left.w + right.w == 6


def test_toggled():
    assert SplitDirection.VERTICAL.toggled() is SplitDirection.HORIZONTAL
    assert SplitDirection.HORIZONTAL.toggled() is SplitDirection.VERTICAL


def test_coerce_names():
    assert SplitDirection.coerce("Horizontal") is SplitDirection.HORIZONTAL
    assert MoveDirection.coerce(MoveDirection.UP) is MoveDirection.UP
    assert MoveDirection.coerce("down") is MoveDirection.DOWN
    with pytest.raises(ValueError):
        SplitDirection.coerce("diagonal")
    with pytest.raises(ValueError):
        MoveDirection.coerce(1)


def test_probe_points():
    rect = Rectangle(320, 0, 320, 480)
    assert MoveDirection.LEFT.probe(rect) == (319, 0)
    assert MoveDirection.RIGHT.probe(rect) == (641, 0)
    assert MoveDirection.UP.probe(rect) == (320, -1)
    assert MoveDirection.DOWN.probe(rect) == (320, 481)


def test_str_and_corners():
    rect = Rectangle(1, 2, 3, 4)
    assert str(rect) == "(1, 2); (3, 4)"
    assert rect.corners() == ((1, 2), (4, 6))
