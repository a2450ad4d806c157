import pytest

from dungeon.util.coordinates import Rect, is_on_board


def test_rect_bounds_are_exclusive() -> None:
    rect = Rect(2, 3, 4, 5)
    assert (rect.x1, rect.y1, rect.x2, rect.y2) == (2, 3, 6, 8)
    assert rect.width == 4
    assert rect.height == 5


def test_from_bounds_round_trip() -> None:
    assert Rect.from_bounds(1, 2, 5, 9) == Rect(1, 2, 4, 7)


def test_center() -> None:
    assert Rect(0, 0, 5, 4).center() == (2, 2)
    assert Rect(10, 10, 1, 1).center() == (10, 10)


@pytest.mark.parametrize(
    ("a", "b", "margin", "expected"),
    [
        (Rect(0, 0, 3, 3), Rect(2, 2, 3, 3), 0, True),
        (Rect(0, 0, 3, 3), Rect(3, 0, 3, 3), 0, False),
        (Rect(0, 0, 3, 3), Rect(3, 0, 3, 3), 1, True),
        (Rect(0, 0, 3, 3), Rect(4, 0, 3, 3), 1, False),
        (Rect(0, 0, 3, 3), Rect(0, 5, 3, 3), 2, False),
        (Rect(0, 0, 3, 3), Rect(0, 5, 3, 3), 3, True),
    ],
)
def test_intersects(a: Rect, b: Rect, margin: int, expected: bool) -> None:
    assert a.intersects(b, margin) is expected


def test_expanded_matches_margin_intersection() -> None:
    a = Rect(5, 5, 2, 2)
    b = Rect(8, 5, 2, 2)
    assert a.expanded(1) == Rect.from_bounds(4, 4, 8, 8)
    assert a.expanded(1).intersects(b) == a.intersects(b, margin=1)
    assert a.expanded(2).intersects(b) == a.intersects(b, margin=2)


def test_contains() -> None:
    outer = Rect(0, 0, 10, 10)
    assert outer.contains(Rect(0, 0, 10, 10))
    assert outer.contains(Rect(2, 2, 3, 3))
    assert not outer.contains(Rect(8, 8, 3, 3))


def test_rects_hash_by_bounds() -> None:
    assert {Rect(1, 1, 2, 2), Rect.from_bounds(1, 1, 3, 3)} == {Rect(1, 1, 2, 2)}


def test_is_on_board() -> None:
    assert is_on_board(0, 0, 5, 3)
    assert is_on_board(4, 2, 5, 3)
    assert not is_on_board(5, 0, 5, 3)
    assert not is_on_board(0, 3, 5, 3)
    assert not is_on_board(-1, 0, 5, 3)
