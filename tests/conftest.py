import numpy
import pytest

from quadindex import Object, Quadtree


def check_invariants(node):
    """Asserts the structural invariants of the subtree rooted at `node`."""
    if node.nodes is None:
        assert node.total == len(node.objects)
        assert all(node.bounds.within(o.x, o.y) for o in node.objects)
        return
    assert node.objects == []
    assert len(node.nodes) == 4
    assert node.total > 0
    assert node.total == sum(child.total for child in node.nodes)
    assert [child.bounds for child in node.nodes] == list(
        node.bounds.quadrants())
    for child in node.nodes:
        assert child.level == node.level + 1
        assert child.max_objects == node.max_objects
        assert child.max_level == node.max_level
        check_invariants(child)


def as_tuples(objects):
    return sorted((o.x, o.y, o.data) for o in objects)


@pytest.fixture
def random_objects():
    rng = numpy.random.default_rng(42)
    coords = rng.random((500, 2)) * 100
    return [Object(float(x), float(y), i) for i, (x, y) in enumerate(coords)]


@pytest.fixture
def tree(random_objects):
    res = Quadtree((0., 0., 100., 100.))
    for obj in random_objects:
        res.insert(obj)
    return res
