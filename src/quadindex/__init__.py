"""
Point quadtree with pluggable storage.

A :class:`Quadtree` recursively splits a rectangle into quadrants so that
range queries do not scan every object. Objects can be inserted, removed
and moved at runtime, which suits simulations where entities keep moving.

Trees live in memory, and can be saved to and loaded from a keyed storage
backend (:class:`MemoryBackend`, :class:`RedisBackend`), where each node is
addressed by its UUID.
"""
from .bounds import Bounds  # noqa: F401
from .exceptions import (QuadtreeError, OutOfBounds, AlreadySplit,  # noqa: F401
                         InsertFailure, NotFound, ObjectNotFound,
                         NodeNotFound, CorruptRecord)
from .quadtree import Object, Quadtree  # noqa: F401
from .backend import Backend, MemoryBackend  # noqa: F401
from .redis_backend import RedisBackend  # noqa: F401
from .persist import save, load  # noqa: F401

__version__ = "0.1.0"
