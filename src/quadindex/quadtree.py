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
Point quadtree supporting inserts, removals and moves.

The tree is made of :class:`Quadtree` nodes, each owning either a list of
objects (leaf) or exactly 4 children tiling its bounds (internal node).
Every node keeps the number of objects held in its whole subtree.

The data model of the tree is given by the following specifications:
  1. A leaf holds at most `max_objects` objects, unless it sits at
     `max_level`, where capacity is no longer enforced.
  1. An internal node holds no objects itself.
  1. Children are the quadrants of their parent, see
     :meth:`Bounds.quadrants`.
  1. A node collapses back to an empty leaf as soon as its subtree becomes
     empty.
  1. Every node has a random UUID identifying it in storage backends.
'''
import logging
import sys
import uuid as uuidlib

import toolz

from .bounds import Bounds
from .exceptions import (AlreadySplit, InsertFailure, ObjectNotFound,
                         OutOfBounds, QuadtreeError)

log = logging.getLogger(__name__)

DEFAULT_MAX_OBJECTS = 5
DEFAULT_MAX_LEVEL = 4


class Object():
    """
    Point object stored in a quadtree.

    Objects compare equal when both position and payload are equal, which is
    how removals find them.

    Attributes:
        x, y (float): position.
        data: caller-defined payload.
    """
    __slots__ = ('x', 'y', 'data')

    def __init__(self, x, y, data=None):
        self.x = x
        self.y = y
        self.data = data

    def __eq__(self, other):
        if not isinstance(other, Object):
            return NotImplemented
        return (self.x, self.y, self.data) == (other.x, other.y, other.data)

    # Position is mutable.
    __hash__ = None

    def __repr__(self):
        return "Object(x={!r}, y={!r}, data={!r})".format(
            self.x, self.y, self.data)


class Quadtree():
    """
    Node of a point quadtree. The root node is the tree.

    Args:
        bounds (Bounds or 4-sequence): region covered by the node.
        max_objects (int): capacity of a leaf before it splits.
        max_level (int): level at which leaves stop splitting.
        level (int): depth of the node, 0 for the root.
        uuid (UUID, optional): identifier. A random one by default.

    Attributes:
        nodes (list of Quadtree or None): the 4 children, None for a leaf.
        objects (list of Object): objects held by a leaf.
        total (int): number of objects in the subtree.
    """

    def __init__(self, bounds, max_objects=DEFAULT_MAX_OBJECTS,
                 max_level=DEFAULT_MAX_LEVEL, level=0, uuid=None):
        bounds = Bounds(*bounds)
        if bounds.width <= 0 or bounds.height <= 0:
            raise ValueError("Bounds must have positive extents, got {}"
                             .format(bounds))
        if max_objects < 1:
            raise ValueError("max_objects must be at least 1, got {}"
                             .format(max_objects))
        if max_level < 0:
            raise ValueError("max_level must be non-negative, got {}"
                             .format(max_level))
        self.uuid = uuidlib.uuid4() if uuid is None else uuid
        self.bounds = bounds
        self.level = level
        self.max_objects = max_objects
        self.max_level = max_level
        self.nodes = None
        self.objects = []
        self.total = 0

    def __repr__(self):
        return "<Quadtree {} {} level={} total={}>".format(
            self.uuid, tuple(self.bounds), self.level, self.total)

    def __len__(self):
        return self.total

    def __iter__(self):
        """Iterates over all the objects in the tree."""
        return toolz.concat(node.objects for node in self.walk())

    @property
    def is_leaf(self):
        return self.nodes is None

    def walk(self):
        """Yields the nodes of the tree, parents before children."""
        yield self
        if self.nodes is not None:
            for node in self.nodes:
                yield from node.walk()

    def depth(self):
        """Deepest level of the tree."""
        return max(node.level for node in self.walk())

    def _child(self, bounds):
        return Quadtree(bounds, self.max_objects, self.max_level,
                        level=self.level + 1)

    def insert(self, obj):
        """
        Inserts `obj` in the tree.

        Raises:
            OutOfBounds: the position of `obj` is not within the node.
            InsertFailure: no child accepted the object.
        """
        if not self.bounds.within(obj.x, obj.y):
            raise OutOfBounds("{!r} is not within {}".format(obj, self.bounds))
        if self.nodes is None:
            if (len(self.objects) < self.max_objects
                    or self.level >= self.max_level):
                self.objects.append(obj)
                self.total += 1
                return
            self.split()
        for node in self.nodes:
            try:
                node.insert(obj)
            except OutOfBounds:
                continue
            self.total += 1
            return
        log.error("No quadrant of %r accepted %r", self, obj)
        raise InsertFailure("No quadrant of {} accepted {!r}"
                            .format(self.bounds, obj))

    def split(self):
        """
        Turns the leaf into an internal node of 4 quadrants.

        The held objects are redistributed among the quadrants. The total is
        left unchanged.
        """
        if self.nodes is not None:
            raise AlreadySplit("{!r} is already split".format(self))
        self.nodes = [self._child(b) for b in self.bounds.quadrants()]
        objects, self.objects = self.objects, []
        # Re-inserting counts the objects again.
        self.total -= len(objects)
        for obj in objects:
            self.insert(obj)
        log.debug("Split %r", self)

    def _collapse(self):
        log.debug("Collapsing %r", self)
        self.nodes = None

    def remove(self, obj):
        """
        Removes an object equal to `obj` from the tree.

        The order of the objects remaining in the leaf is not preserved.

        Raises:
            ObjectNotFound: no equal object is in the tree.
        """
        if self.nodes is None:
            for idx, held in enumerate(self.objects):
                if held == obj:
                    last = self.objects.pop()
                    if idx < len(self.objects):
                        self.objects[idx] = last
                    self.total -= 1
                    return
            raise ObjectNotFound(obj)
        try:
            for node in self.nodes:
                if not node.bounds.within(obj.x, obj.y):
                    continue
                node.remove(obj)
                self.total -= 1
                return
            raise ObjectNotFound(obj)
        finally:
            if self.total == 0 and self.nodes is not None:
                self._collapse()

    def move(self, obj, x, y):
        """
        Moves `obj` to position (x, y).

        The object is removed, its coordinates are updated in place and it is
        inserted back. This is not atomic: if the insertion fails, the object
        is left out of the tree and the error is raised.
        """
        self.remove(obj)
        obj.x = x
        obj.y = y
        try:
            self.insert(obj)
        except QuadtreeError:
            log.warning("%r evicted from %r while moving", obj, self)
            raise

    def find_all_within(self, bounds):
        """
        Returns the objects positioned within `bounds`.

        Objects are returned as stored, not copied, in no particular order.
        """
        bounds = Bounds(*bounds)
        if self.nodes is None:
            return [obj for obj in self.objects if bounds.within(obj.x, obj.y)]
        return list(toolz.concat(
            node.find_all_within(bounds) for node in self.nodes
            if bounds.intersects(node.bounds)
        ))

    def debug_print(self, file=None):
        if file is None:
            file = sys.stdout
        for node in self.walk():
            print("{}Node ({:05.2f}, {:05.2f}): {} objects --- Level: {}"
                  .format(" " * node.level, node.bounds.x, node.bounds.y,
                          len(node.objects), node.level),
                  file=file)
