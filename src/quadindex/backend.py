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
Keyed storage for quadtree nodes.

A backend stores a quadtree as flat records addressed by node UUID, instead
of a pointer-connected structure:
  1. node metadata (bounds, level, configuration and total),
  1. the ordered list of the 4 children UUIDs of internal nodes,
  1. the set of objects held by leaves, keyed by their encoded content.

Since objects are kept in a set, adding an object already present does
nothing and removal matches on content, as removal does in memory.

Backends offer no transactions. In particular :meth:`Backend.detach_subtree`
may leave a partially deleted subtree behind if a call fails midway.
'''
import abc
import logging

from . import codec
from .exceptions import NodeNotFound

log = logging.getLogger(__name__)


class Backend(abc.ABC):
    """Abstract storage contract for quadtree nodes."""

    @abc.abstractmethod
    def get_node(self, uuid):
        """
        Returns the node stored under `uuid`, without children or objects.

        Raises:
            NodeNotFound: nothing is stored under `uuid`.
        """
        pass

    @abc.abstractmethod
    def set_node(self, node):
        """Stores the metadata of `node` under its UUID (upsert)."""
        pass

    @abc.abstractmethod
    def delete_node(self, uuid):
        pass

    @abc.abstractmethod
    def get_children(self, uuid):
        """Returns the list of children UUIDs, empty for a leaf."""
        pass

    @abc.abstractmethod
    def set_children(self, uuid, children):
        pass

    @abc.abstractmethod
    def delete_children(self, uuid):
        pass

    @abc.abstractmethod
    def get_objects(self, uuid):
        """Returns the objects held by the node as a list without duplicates."""
        pass

    @abc.abstractmethod
    def add_object(self, uuid, obj):
        pass

    @abc.abstractmethod
    def remove_object(self, uuid, obj):
        pass

    @abc.abstractmethod
    def clear_objects(self, uuid):
        pass

    def detach_subtree(self, uuid):
        """
        Deletes the node `uuid` and all its descendants.

        Children are deleted depth-first before their parent. Deletions
        already performed are kept if a later one fails.
        """
        for child in self.get_children(uuid):
            self.detach_subtree(child)
        self.delete_node(uuid)
        self.delete_children(uuid)
        self.clear_objects(uuid)
        log.debug("Detached node %s", uuid)


def check_children(children):
    children = list(children)
    if len(children) != 4:
        raise ValueError("A node has exactly 4 children, got {}"
                         .format(len(children)))
    return children


class MemoryBackend(Backend):
    """
    Backend keeping encoded records in dictionaries.

    Attributes:
        nodes (dict): UUID to encoded node metadata.
        children (dict): UUID to list of children UUIDs.
        objects (dict): UUID to set of encoded objects.
    """

    def __init__(self):
        self.nodes = {}
        self.children = {}
        self.objects = {}

    def __len__(self):
        return len(self.nodes)

    def get_node(self, uuid):
        try:
            raw = self.nodes[uuid]
        except KeyError:
            raise NodeNotFound(uuid) from None
        return codec.decode_node(raw)

    def set_node(self, node):
        self.nodes[node.uuid] = codec.encode_node(node)

    def delete_node(self, uuid):
        self.nodes.pop(uuid, None)

    def get_children(self, uuid):
        return list(self.children.get(uuid, ()))

    def set_children(self, uuid, children):
        self.children[uuid] = check_children(children)

    def delete_children(self, uuid):
        self.children.pop(uuid, None)

    def get_objects(self, uuid):
        return [codec.decode_object(raw)
                for raw in self.objects.get(uuid, ())]

    def add_object(self, uuid, obj):
        self.objects.setdefault(uuid, set()).add(codec.encode_object(obj))

    def remove_object(self, uuid, obj):
        self.objects.get(uuid, set()).discard(codec.encode_object(obj))

    def clear_objects(self, uuid):
        self.objects.pop(uuid, None)
