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
Binary records for quadtree nodes and objects.

Records are msgpack arrays, not maps: decoding depends on the exact order
and number of fields.

Node metadata::

    [uuid (16 bytes), [x, y, width, height], level, max_level, max_objects,
     total]

Objects::

    [x, y, data]

Positions are always stored as floats, so that objects equal in memory, such
as `Object(5, 5)` and `Object(5.0, 5.0)`, share one encoding. Object payloads
must be msgpack-native values. Two objects compare equal in storage when
their encodings are byte-identical.
'''
import uuid as uuidlib

import msgpack

from .exceptions import CorruptRecord
from .quadtree import Object, Quadtree

NODE_FIELDS = ('uuid', 'bounds', 'level', 'max_level', 'max_objects', 'total')


def encode_node(node):
    return msgpack.packb([
        node.uuid.bytes,
        list(node.bounds),
        node.level,
        node.max_level,
        node.max_objects,
        node.total,
    ], use_bin_type=True)


def decode_node(raw):
    """Returns a childless, objectless :class:`Quadtree` from metadata."""
    fields = _unpack(raw)
    if len(fields) != len(NODE_FIELDS):
        raise CorruptRecord("Node record has {} fields, expected {}"
                            .format(len(fields), len(NODE_FIELDS)))
    uuid, bounds, level, max_level, max_objects, total = fields
    try:
        node = Quadtree(bounds, max_objects=max_objects, max_level=max_level,
                        level=level, uuid=uuidlib.UUID(bytes=uuid))
    except (TypeError, ValueError) as err:
        raise CorruptRecord("Invalid node record: {}".format(err)) from err
    node.total = total
    return node


def encode_object(obj):
    return msgpack.packb([float(obj.x), float(obj.y), obj.data],
                         use_bin_type=True)


def decode_object(raw):
    fields = _unpack(raw)
    if len(fields) != 3:
        raise CorruptRecord("Object record has {} fields, expected 3"
                            .format(len(fields)))
    return Object(*fields)


def _unpack(raw):
    try:
        fields = msgpack.unpackb(raw, raw=False)
    except (TypeError, ValueError) as err:
        raise CorruptRecord("Undecodable record: {}".format(err)) from err
    if not isinstance(fields, list):
        raise CorruptRecord("Record is not an array: {!r}".format(fields))
    return fields
