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
'''
Axis-aligned rectangles.

Points are tested against half-open rectangles: the left and top edges are
inside, the right and bottom edges are not. Two quadrants sharing an edge
therefore never both claim a point lying on it.

Rectangle intersection uses strict inequalities on all four edges, so
rectangles touching only along an edge or at a corner do not intersect.
Since points on the far edge of a rectangle are never within it, no point
is lost when pruning such neighbours.
'''
import collections

import numpy


class Bounds(collections.namedtuple('Bounds', 'x y width height')):
    """Rectangle given by its origin and extents."""
    __slots__ = ()

    @property
    def area(self):
        return self.width * self.height

    def within(self, x, y):
        """Is the point (x, y) within the rectangle?"""
        return (self.x <= x < self.x + self.width
                and self.y <= y < self.y + self.height)

    def within_many(self, xs, ys):
        """
        Vectorised version of :meth:`within`.

        Args:
            xs, ys (array-like): coordinates of the points.

        Returns:
            1d-bool-array: mask of the points within the rectangle.
        """
        xs = numpy.asarray(xs, dtype=float)
        ys = numpy.asarray(ys, dtype=float)
        return (
            (self.x <= xs) & (xs < self.x + self.width)
            & (self.y <= ys) & (ys < self.y + self.height)
        )

    def intersects(self, other):
        return (self.x + self.width > other.x
                and self.y + self.height > other.y
                and self.x < other.x + other.width
                and self.y < other.y + other.height)

    def contains(self, other):
        """Does the rectangle entirely cover `other`?"""
        return (self.x <= other.x
                and self.y <= other.y
                and other.x + other.width <= self.x + self.width
                and other.y + other.height <= self.y + self.height)

    def quadrants(self):
        """
        Split into 4 equal rectangles.

        The order is fixed: origin, shifted right, shifted right and down,
        shifted down.
        """
        hw, hh = self.width / 2, self.height / 2
        return (
            Bounds(self.x, self.y, hw, hh),
            Bounds(self.x + hw, self.y, hw, hh),
            Bounds(self.x + hw, self.y + hh, hw, hh),
            Bounds(self.x, self.y + hh, hw, hh),
        )
