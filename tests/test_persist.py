import pytest

from quadindex import MemoryBackend, NodeNotFound, Object, Quadtree, load, save

from conftest import as_tuples, check_invariants


def same_structure(left, right):
    pairs = list(zip(left.walk(), right.walk()))
    assert len(pairs) == len(list(left.walk())) == len(list(right.walk()))
    for a, b in pairs:
        assert (a.uuid, a.bounds, a.level, a.total, a.is_leaf) == (
            b.uuid, b.bounds, b.level, b.total, b.is_leaf)


def test_save_load_roundtrip(tree, random_objects):
    backend = MemoryBackend()
    save(backend, tree)
    assert len(backend) == len(list(tree.walk()))
    loaded = load(backend, tree.uuid)
    same_structure(tree, loaded)
    check_invariants(loaded)
    query = (20, 30, 40, 25)
    assert as_tuples(loaded.find_all_within(query)) == as_tuples(
        tree.find_all_within(query))


def test_loaded_tree_is_usable(tree, random_objects):
    backend = MemoryBackend()
    save(backend, tree)
    loaded = load(backend, tree.uuid)
    for obj in random_objects[:100]:
        loaded.remove(obj)
    loaded.insert(Object(1., 1., "new"))
    assert len(loaded) == 401
    check_invariants(loaded)


def test_load_subtree(tree):
    backend = MemoryBackend()
    save(backend, tree)
    child = tree.nodes[2]
    same_structure(child, load(backend, child.uuid))


def test_save_after_collapse_detaches_stale_nodes(tree, random_objects):
    backend = MemoryBackend()
    save(backend, tree)
    for obj in random_objects:
        tree.remove(obj)
    tree.insert(Object(3., 4., "last"))
    save(backend, tree)
    assert len(backend) == 1
    assert backend.get_children(tree.uuid) == []
    loaded = load(backend, tree.uuid)
    assert loaded.is_leaf
    assert loaded.objects == [Object(3., 4., "last")]


def test_load_missing():
    tree_backend = MemoryBackend()
    with pytest.raises(NodeNotFound):
        load(tree_backend, "nope")


def test_save_after_resplit_replaces_children(tree, random_objects):
    backend = MemoryBackend()
    save(backend, tree)
    old = {node.uuid for node in tree.walk()}
    for obj in random_objects:
        tree.remove(obj)
    for obj in random_objects[:50]:
        tree.insert(obj)
    save(backend, tree)
    current = {node.uuid for node in tree.walk()}
    assert set(backend.nodes) == current
    assert not (old - {tree.uuid}) & set(backend.nodes)
    same_structure(tree, load(backend, tree.uuid))


def test_load_recounts_equal_objects():
    tree = Quadtree((0, 0, 100, 100), max_objects=2)
    for _ in range(2):
        tree.insert(Object(5, 5, "a"))
    tree.insert(Object(80, 80, "b"))
    assert len(tree) == 3
    backend = MemoryBackend()
    save(backend, tree)
    loaded = load(backend, tree.uuid)
    check_invariants(loaded)
    assert len(loaded) == 2
    loaded.remove(Object(5, 5, "a"))
    loaded.remove(Object(80, 80, "b"))
    assert len(loaded) == 0
    assert loaded.is_leaf
