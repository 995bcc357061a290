# Copyright (C) 2018 DataStorm
#
# This file is part of QuadIndex.
#
# QuadIndex is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# QuadIndex is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
"""
Module wrapping pandas DataFrames.

Rows are indexed by their position columns. The payload of each indexed
object is the row label.
"""
import numpy
import pandas

from .bounds import Bounds
from .quadtree import Object, Quadtree


def from_frame(frame, bounds, x='x', y='y', errors='raise', **kwargs):
    """
    Builds a quadtree over the rows of a DataFrame.

    Parameters
    ----------
    frame: pandas DataFrame
    bounds: Bounds or 4-sequence
        Region covered by the tree.
    x, y: str (default 'x' and 'y')
        Names of the position columns.
    errors: str (default 'raise')
        1. 'raise': rows outside `bounds` raise OutOfBounds.
        1. 'ignore': rows outside `bounds` are left out of the tree.
    kwargs:
        keyword arguments of :class:`Quadtree`.

    Returns
    -------
    Quadtree
    """
    if not isinstance(frame, pandas.DataFrame):
        raise TypeError("Unrecognized type for frame: {}".format(type(frame)))
    valid_errors = ('raise', 'ignore')
    if errors not in valid_errors:
        raise ValueError("errors {} is not supported, should be one of {}"
                         .format(errors, valid_errors))
    tree = Quadtree(bounds, **kwargs)
    xs = frame[x].to_numpy(dtype=float)
    ys = frame[y].to_numpy(dtype=float)
    if errors == 'ignore':
        mask = tree.bounds.within_many(xs, ys)
    else:
        mask = numpy.ones(len(frame), dtype=bool)
    for label, px, py in zip(frame.index[mask], xs[mask], ys[mask]):
        tree.insert(Object(float(px), float(py), label))
    return tree


def select(frame, tree, bounds):
    """
    Returns the rows of `frame` whose objects in `tree` lie within `bounds`.
    """
    labels = [obj.data for obj in tree.find_all_within(Bounds(*bounds))]
    return frame[frame.index.isin(labels)]
