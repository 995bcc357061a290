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
Redis storage backend.

Keys, for a node of UUID `id` and an optional key prefix:
  1. `{prefix}{id}`: string holding the encoded node metadata.
  1. `{prefix}nodes_{id}`: list of children UUIDs, in quadrant order.
  1. `{prefix}objects_{id}`: set of encoded objects.

The client is created and configured by the caller (see
:meth:`redis.Redis.from_url`). It must return raw bytes, that is it must not
be created with `decode_responses=True`. Connection errors are raised as is.
"""
import uuid as uuidlib

from . import codec
from .backend import Backend, check_children
from .exceptions import NodeNotFound


class RedisBackend(Backend):

    def __init__(self, client, prefix=""):
        self.redis = client
        self.prefix = prefix

    def key_of_node(self, uuid):
        return "{}{}".format(self.prefix, uuid)

    def key_of_nodes(self, uuid):
        return "{}nodes_{}".format(self.prefix, uuid)

    def key_of_objects(self, uuid):
        return "{}objects_{}".format(self.prefix, uuid)

    def get_node(self, uuid):
        raw = self.redis.get(self.key_of_node(uuid))
        if raw is None:
            raise NodeNotFound(uuid)
        return codec.decode_node(raw)

    def set_node(self, node):
        self.redis.set(self.key_of_node(node.uuid), codec.encode_node(node))

    def delete_node(self, uuid):
        self.redis.delete(self.key_of_node(uuid))

    def get_children(self, uuid):
        values = self.redis.lrange(self.key_of_nodes(uuid), 0, -1)
        return [uuidlib.UUID(_text(v)) for v in values]

    def set_children(self, uuid, children):
        children = check_children(children)
        key = self.key_of_nodes(uuid)
        self.redis.delete(key)
        self.redis.rpush(key, *(str(c) for c in children))

    def delete_children(self, uuid):
        self.redis.delete(self.key_of_nodes(uuid))

    def get_objects(self, uuid):
        return [codec.decode_object(raw)
                for raw in self.redis.smembers(self.key_of_objects(uuid))]

    def add_object(self, uuid, obj):
        self.redis.sadd(self.key_of_objects(uuid), codec.encode_object(obj))

    def remove_object(self, uuid, obj):
        self.redis.srem(self.key_of_objects(uuid), codec.encode_object(obj))

    def clear_objects(self, uuid):
        self.redis.delete(self.key_of_objects(uuid))


def _text(value):
    if isinstance(value, bytes):
        return value.decode("ascii")
    return value
