import pandas
import pytest

from quadindex import OutOfBounds
import quadindex.pandas as qpandas


@pytest.fixture
def frame():
    return pandas.DataFrame({
        'x': [1., 20., 55., 90., 120.],
        'y': [1., 80., 55., 10., 5.],
        'name': ['a', 'b', 'c', 'd', 'e'],
    }, index=pandas.Index([10, 11, 12, 13, 14], name='id'))


def test_from_frame_raises_out_of_bounds(frame):
    with pytest.raises(OutOfBounds):
        qpandas.from_frame(frame, (0, 0, 100, 100))


def test_from_frame_ignore(frame):
    tree = qpandas.from_frame(frame, (0, 0, 100, 100), errors='ignore',
                              max_objects=2)
    assert len(tree) == 4
    assert not tree.is_leaf
    assert sorted(o.data for o in tree) == [10, 11, 12, 13]


def test_from_frame_invalid_errors(frame):
    with pytest.raises(ValueError):
        qpandas.from_frame(frame, (0, 0, 100, 100), errors='coerce')


def test_select(frame):
    tree = qpandas.from_frame(frame, (0, 0, 200, 200))
    res = qpandas.select(frame, tree, (0, 0, 60, 60))
    assert sorted(res['name']) == ['a', 'c']
    assert res.index.name == 'id'
    assert qpandas.select(frame, tree, (150, 150, 10, 10)).empty


def test_custom_columns():
    frame = pandas.DataFrame({'lon': [1., 2.], 'lat': [3., 4.]})
    tree = qpandas.from_frame(frame, (0, 0, 10, 10), x='lon', y='lat')
    assert list(qpandas.select(frame, tree, (1.5, 0, 5, 10)).index) == [1]


def test_from_frame_requires_dataframe():
    with pytest.raises(TypeError):
        qpandas.from_frame([(1, 2)], (0, 0, 10, 10))
