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
"""Errors raised by quadtrees and their storage backends."""


class QuadtreeError(Exception):
    pass


class OutOfBounds(QuadtreeError):
    """Object position is not within the bounds of the node."""


class AlreadySplit(QuadtreeError):
    """Split attempted on a node that already has children."""


class InsertFailure(QuadtreeError):
    """No child accepted an object its parent contains."""


class NotFound(QuadtreeError, KeyError):
    pass


class ObjectNotFound(NotFound):
    """Object is not in the quadtree."""


class NodeNotFound(NotFound):
    """Backend holds no node under the given identifier."""


class CorruptRecord(QuadtreeError, ValueError):
    """A persisted record could not be decoded."""
