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
Materialisation of in-memory quadtrees to and from storage backends.
"""
import logging

log = logging.getLogger(__name__)


def save(backend, tree):
    """
    Writes every node of `tree` to `backend`.

    Subtrees persisted by an earlier save that are no longer part of the tree,
    because a node collapsed or split again, are detached. Equal objects held
    by the same leaf are stored once.
    """
    for node in tree.walk():
        backend.set_node(node)
        current = [] if node.nodes is None else [n.uuid for n in node.nodes]
        for stale in backend.get_children(node.uuid):
            if stale not in current:
                backend.detach_subtree(stale)
        if current:
            backend.set_children(node.uuid, current)
        else:
            backend.delete_children(node.uuid)
        backend.clear_objects(node.uuid)
        for obj in node.objects:
            backend.add_object(node.uuid, obj)
    log.debug("Saved %r", tree)


def load(backend, uuid):
    """
    Rebuilds the in-memory subtree rooted at node `uuid`.

    Totals are recounted from the loaded objects.

    Raises:
        NodeNotFound: a node of the subtree is missing from `backend`.
    """
    node = backend.get_node(uuid)
    children = backend.get_children(uuid)
    if children:
        node.nodes = [load(backend, child) for child in children]
        total = sum(child.total for child in node.nodes)
    else:
        node.objects = backend.get_objects(uuid)
        total = len(node.objects)
    if total != node.total:
        # Equal objects of a leaf are stored once.
        log.warning("Node %s stored a total of %d but holds %d objects",
                    uuid, node.total, total)
        node.total = total
    log.debug("Loaded %r", node)
    return node
