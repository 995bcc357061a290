import itertools

import numpy

from quadindex import Bounds


def test_within_is_half_open():
    b = Bounds(0, 0, 10, 10)
    assert b.within(0, 0)
    assert b.within(9.999, 5)
    assert not b.within(10, 5)
    assert not b.within(5, 10)
    assert not b.within(-0.001, 5)


def test_within_many_agrees_with_within():
    b = Bounds(10, 20, 30, 40)
    rng = numpy.random.default_rng(0)
    xs = rng.random(200) * 60
    ys = rng.random(200) * 80
    xs[:4] = [10, 40, 10, 39.5]
    ys[:4] = [20, 20, 60, 59.5]
    mask = b.within_many(xs, ys)
    assert list(mask) == [b.within(x, y) for x, y in zip(xs, ys)]


def test_intersects_is_strict():
    b = Bounds(0, 0, 10, 10)
    assert b.intersects(Bounds(5, 5, 10, 10))
    assert b.intersects(Bounds(2, 2, 1, 1))
    assert Bounds(2, 2, 1, 1).intersects(b)
    # Shared edge and shared corner.
    assert not b.intersects(Bounds(10, 0, 10, 10))
    assert not b.intersects(Bounds(0, 10, 10, 10))
    assert not b.intersects(Bounds(10, 10, 5, 5))
    assert not b.intersects(Bounds(20, 20, 5, 5))


def test_quadrants_tile_parent():
    b = Bounds(0, 0, 100, 60)
    quads = b.quadrants()
    assert quads == (
        Bounds(0, 0, 50, 30),
        Bounds(50, 0, 50, 30),
        Bounds(50, 30, 50, 30),
        Bounds(0, 30, 50, 30),
    )
    assert sum(q.area for q in quads) == b.area
    assert all(b.contains(q) for q in quads)
    for q1, q2 in itertools.combinations(quads, 2):
        assert not q1.intersects(q2)


def test_each_point_in_one_quadrant():
    b = Bounds(0, 0, 8, 8)
    for x, y in itertools.product(numpy.arange(0, 8, 0.5), repeat=2):
        assert sum(q.within(x, y) for q in b.quadrants()) == 1
