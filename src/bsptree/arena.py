# Copyright (C) 2018 DataStorm
#
# This file is part of BSPTree.
#
# BSPTree is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# BSPTree is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Node records and the buffer that stores them.

Nodes do not reference each other directly. They live in a 1d-buffer and
point to their parent and children through indices in that buffer.
'''
import collections


# ========================  Node Data Model  ==================================

# The data model for the nodes is given by the following rules:
#   1. Nodes are stored in a 1d-buffer indexed by non-negative integers.
#   1. Indices are stable: a node keeps its index until it is freed. Freed
#      indices are recycled by later allocations.
#   1. NIL (-1) stands for a missing parent or child.
#   1. A node has either two children or none. A node without children is a
#      leaf, only leaves hold a payload.
#   1. A node is owned by the buffer. The left and right indices of a node
#      are the only way to reach a child, the parent index is a
#      back-reference for upward walks.
#   1. Records are immutable; a node is updated by storing a new record at
#      its index.

NIL = -1

BaseNode = collections.namedtuple(
    'BaseNode_',
    'rect split payload leaf focused right_child parent left right')


class Node(BaseNode):
    """
    Record of a BSP tree node.

    Attributes:
        rect (Rectangle): region covered by the node.
        split (SplitDirection): how the region is halved for the children.
        payload (object): data held by a leaf, None if absent.
        leaf (bool): True if the node has no children.
        focused (bool): True if the node has the focus.
        right_child (bool): True if the node is the second child of its
            parent.
        parent (int): index of the parent, NIL for the root.
        left (int): index of the first child, NIL for a leaf.
        right (int): index of the second child, NIL for a leaf.
    """
    __slots__ = ()

    @classmethod
    def new_leaf(cls, rect, split, payload, parent=NIL, right_child=False,
                 focused=False):
        return cls(rect=rect, split=split, payload=payload, leaf=True,
                   focused=focused, right_child=right_child, parent=parent,
                   left=NIL, right=NIL)

    @property
    def children(self):
        '''Indices of the children, empty for a leaf.'''
        if self.leaf:
            return ()
        return (self.left, self.right)

    def is_focused(self):
        return self.focused

    def get_data(self):
        return self.payload

    def get_rect(self):
        return self.rect

    def __str__(self):
        return "value:{!r} size:{} focus:{} right_child:{}".format(
            self.payload, self.rect, self.focused, self.right_child)


class NodeArena():
    """
    Buffer of node records addressed by stable indices.

    Attributes:
        nodes (list): records by index, None for a free slot.
    """
    def __init__(self):
        self.clear()

    def clear(self):
        self.nodes = []
        self._free = []

    def __len__(self):
        '''Number of live nodes.'''
        return len(self.nodes) - len(self._free)

    def __contains__(self, idx):
        return 0 <= idx < len(self.nodes) and self.nodes[idx] is not None

    def __getitem__(self, idx):
        if idx not in self:
            raise KeyError("No live node at index {}".format(idx))
        return self.nodes[idx]

    def __setitem__(self, idx, node):
        if idx not in self:
            raise KeyError("No live node at index {}".format(idx))
        self.nodes[idx] = node

    def alloc(self, node):
        '''Stores `node` and returns its index.'''
        if self._free:
            idx = self._free.pop()
            self.nodes[idx] = node
        else:
            idx = len(self.nodes)
            self.nodes.append(node)
        return idx

    def free(self, idx):
        '''Releases the index `idx` for later allocations.'''
        if idx not in self:
            raise KeyError("No live node at index {}".format(idx))
        self.nodes[idx] = None
        self._free.append(idx)

    def update(self, idx, **fields):
        '''Replaces `fields` of the node at `idx` and returns the record.'''
        node = self[idx]._replace(**fields)
        self.nodes[idx] = node
        return node

    def live(self):
        '''Iterates through the indices of live nodes in buffer order.'''
        return (idx for idx, node in enumerate(self.nodes) if node is not None)
