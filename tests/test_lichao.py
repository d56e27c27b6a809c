import random

import pytest

from algokit.lichao import ConvexHullTrick, LiChaoTree, Line

LINES = [Line(3, -10), Line(-2, 15), Line(0, 4), Line(1, -1), Line(-5, 40)]


def test_line_value_matches_slope_and_intercept():
    line = Line(7, -3)
    assert line.value(0) == line.intercept
    assert line.value(1) - line.value(0) == line.slope


@pytest.mark.parametrize("order", [LINES, LINES[::-1]])
def test_lichao_minimum_envelope(order):
    tree = LiChaoTree(-50, 50)
    for line in order:
        tree.add(line)
    for x in range(-50, 51):
        assert tree.query(x) == min(line.value(x) for line in LINES)


def test_lichao_maximum_envelope():
    tree = LiChaoTree(-30, 30, maximize=True)
    for line in LINES:
        tree.add(line)
    for x in range(-30, 31):
        assert tree.query(x) == max(line.value(x) for line in LINES)


def test_lichao_random_prefixes():
    rng = random.Random(1234)
    tree = LiChaoTree(0, 40)
    added = []
    for _ in range(30):
        line = Line(rng.randint(-20, 20), rng.randint(-200, 200))
        tree.add(line)
        added.append(line)
        for x in range(0, 41):
            assert tree.query(x) == min(l.value(x) for l in added)


def test_lichao_empty_and_out_of_range():
    tree = LiChaoTree(0, 10)
    with pytest.raises(ValueError):
        tree.query(5)
    tree.add(Line(1, 1))
    with pytest.raises(ValueError):
        tree.query(11)
    with pytest.raises(ValueError):
        LiChaoTree(5, 4)


def test_convex_hull_trick_monotone_queries():
    lines = sorted(LINES, key=lambda l: l.slope, reverse=True)
    cht = ConvexHullTrick()
    for line in lines:
        cht.add(line)
    for x in range(-20, 21):
        assert cht.query(x) == min(line.value(x) for line in LINES)


def test_convex_hull_trick_discards_dominated_line():
    cht = ConvexHullTrick()
    cht.add(Line(1, 0))
    cht.add(Line(0, 100))
    cht.add(Line(-1, 0))
    assert len(cht) == 2


def test_convex_hull_trick_empty_query():
    with pytest.raises(ValueError):
        ConvexHullTrick().query(0)