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
Binary Space Partitioning tree with a focus cursor.

The base data structure is the class :class:`BSPTree`. It divides a bounding
rectangle into halves, then halves of halves, and so on, every leaf of the
tree holding one payload. One leaf has the focus: new payloads are inserted
by splitting it, and deletions remove it.
'''
import logging
import sys
import warnings

import numpy

from . import traversal
from .arena import NIL, Node, NodeArena
from .geometry import MoveDirection, Rectangle, SplitDirection

logger = logging.getLogger(__name__)


# ========================  BSPTree Data Structure  ===========================

# The tree only ever changes through its public methods. They maintain:
#   1. Every node has either zero or two children.
#   1. A non-empty tree has exactly one focused node, it is a leaf and it is
#      indexed by `focused`.
#   1. The children rectangles of a node are the halves of its rectangle
#      under its split direction.
#   1. The right_child flag of a node matches its slot in the parent.
# Operations that have nothing to do (deleting from an empty tree, moving
# focus out of the bounds...) are no-ops, not errors.


class BSPTree():
    """
    Binary Space Partitioning tree over a bounding rectangle.

    Args:
        size (Rectangle or 4-tuple): bounding rectangle `(x, y, w, h)`.
            Width and height must be positive.
        split (SplitDirection or str, optional): split direction given to
            the root. Defaults to vertical.
        indent (int, optional): spaces per level of depth in printed dumps.
            Defaults to 4.

    Attributes:
        nodes (NodeArena): buffer of the nodes.
        root (int): index of the root node, NIL if the tree is empty.
        focused (int): index of the focused leaf, NIL if the tree is empty.
    """

    def __init__(self, size, split=SplitDirection.VERTICAL, indent=4):
        size = Rectangle.new(*size)
        if size.w == 0 or size.h == 0:
            raise ValueError(
                "Bounding rectangle must have a positive area, got {}"
                .format(size))
        if isinstance(indent, bool) or not isinstance(indent, int) \
                or indent < 0:
            raise ValueError(
                "indent must be a non-negative integer, got {!r}"
                .format(indent))
        self._size = size
        self.split = SplitDirection.coerce(split)
        self.indent = indent
        self.nodes = NodeArena()
        self.root = NIL
        self.focused = NIL

    @property
    def size(self):
        """Bounding rectangle, fixed at creation."""
        return self._size

    @property
    def is_empty(self):
        return self.root == NIL

    def __len__(self):
        """Returns the number of leaves."""
        return sum(1 for _ in self.leaves())

    @property
    def root_node(self):
        if self.is_empty:
            return None
        return self.nodes[self.root]

    @property
    def focused_node(self):
        if self.focused == NIL:
            return None
        return self.nodes[self.focused]

    # ---------------------------  Mutations  ---------------------------------

    def insert(self, payload):
        """
        Inserts `payload` by splitting the focused leaf.

        The focused leaf becomes an internal node. Its payload moves to a new
        left child while `payload` goes into a new right child, which gets
        the focus. Both children start with the split direction of their
        parent. On an empty tree, the root is created instead.
        """
        if self.is_empty:
            self.root = self.nodes.alloc(Node.new_leaf(
                self._size, self.split, payload, focused=True))
            self.focused = self.root
            logger.debug("Created root %d with %r", self.root, payload)
            return

        idx = self.focused
        node = self.nodes[idx]
        lrect, rrect = node.split.split(node.rect)
        left = self.nodes.alloc(Node.new_leaf(
            lrect, node.split, node.payload, parent=idx))
        right = self.nodes.alloc(Node.new_leaf(
            rrect, node.split, payload, parent=idx, right_child=True,
            focused=True))
        self.nodes[idx] = node._replace(
            leaf=False, focused=False, payload=None, left=left, right=right)
        self.focused = right
        logger.debug("Split node %d %s into %d and %d", idx,
                     node.split.value, left, right)

    def delete_focused(self):
        """
        Deletes the focused leaf.

        The sibling of the leaf takes the place of their parent, its subtree
        being resized to the parent's rectangle. The focus then goes to the
        leaf now covering the top-left corner of the deleted one.
        """
        if self.focused == NIL:
            logger.debug("Nothing focused, no deletion")
            return

        idx = self.focused
        node = self.nodes[idx]
        if node.parent == NIL:
            self.nodes.clear()
            self.root = NIL
            self.focused = NIL
            logger.debug("Deleted root %d, tree is empty", idx)
            return

        pidx = node.parent
        parent = self.nodes[pidx]
        sidx = parent.left if node.right_child else parent.right
        sibling = self.nodes[sidx]

        # The sibling moves into the parent's slot so that every reference
        # to the parent index now reaches the promoted subtree.
        promoted = sibling._replace(
            parent=parent.parent, rect=parent.rect,
            right_child=parent.right_child)
        self.nodes[pidx] = promoted
        if promoted.parent != NIL:
            if promoted.right_child:
                self.nodes.update(promoted.parent, right=pidx)
            else:
                self.nodes.update(promoted.parent, left=pidx)
        for child in promoted.children:
            self.nodes.update(child, parent=pidx)
        self.nodes.free(sidx)
        self.nodes.free(idx)
        self.focused = NIL
        self._resize(pidx, promoted.rect)
        logger.debug("Deleted node %d, node %d promoted into %d",
                     idx, sidx, pidx)

        self.focus_coords(node.rect.x, node.rect.y)
        if self.focused == NIL:
            fallback = next(self._leaf_indices(pidx))
            warnings.warn(
                "No leaf found at {} after deleting node {}, focusing node "
                "{} instead.".format(node.rect.corners()[0], idx, fallback),
                RuntimeWarning,
            )
            self._set_focus(fallback)

    def _resize(self, idx, rect):
        # Top-down propagation of a new rectangle through a subtree.
        stack = [(idx, rect)]
        while stack:
            idx, rect = stack.pop()
            node = self.nodes.update(idx, rect=rect)
            if not node.leaf:
                lrect, rrect = node.split.split(rect)
                stack.append((node.right, rrect))
                stack.append((node.left, lrect))

    def set_split(self, split):
        """Sets the split direction the focused leaf uses on its next split."""
        split = SplitDirection.coerce(split)
        if self.focused == NIL:
            logger.debug("Nothing focused, split direction unchanged")
            return
        self.nodes.update(self.focused, split=split)

    def toggle_split(self):
        """Swaps the split direction of the focused leaf."""
        if self.focused == NIL:
            logger.debug("Nothing focused, split direction unchanged")
            return
        node = self.nodes[self.focused]
        self.nodes.update(self.focused, split=node.split.toggled())

    # ----------------------------  Focus  ------------------------------------

    def find(self, x, y):
        """
        Index of the leaf containing the point `(x, y)`, NIL if none.

        The descent tests both children of each internal node. On the
        boundary they share, the second child wins.
        """
        if self.is_empty or not self.nodes[self.root].rect.contains(x, y):
            return NIL
        idx = self.root
        while True:
            node = self.nodes[idx]
            new_idx = NIL
            for child in node.children:
                if self.nodes[child].rect.contains(x, y):
                    new_idx = child
            if new_idx == NIL:
                break
            idx = new_idx
        if not self.nodes[idx].leaf:
            return NIL
        return idx

    def get_node(self, x, y):
        """Leaf record containing the point `(x, y)`, None if none."""
        idx = self.find(x, y)
        if idx == NIL:
            return None
        return self.nodes[idx]

    def focus_coords(self, x, y):
        """Focuses the leaf at `(x, y)`. Nothing happens if there is none."""
        idx = self.find(x, y)
        if idx == NIL:
            logger.debug("No leaf at (%s, %s), focus unchanged", x, y)
            return
        self._set_focus(idx)

    def move_focus(self, direction):
        """
        Moves the focus to the neighbouring leaf in `direction`.

        Args:
            direction (MoveDirection or str): one of left, right, up, down.
        """
        direction = MoveDirection.coerce(direction)
        if self.focused == NIL:
            logger.debug("Nothing focused, cannot move %s", direction.value)
            return
        x, y = direction.probe(self.nodes[self.focused].rect)
        self.focus_coords(x, y)

    def _set_focus(self, idx):
        if self.focused != NIL:
            self.nodes.update(self.focused, focused=False)
        self.nodes.update(idx, focused=True)
        self.focused = idx

    # --------------------------  Traversals  ---------------------------------

    def accept(self, visitor):
        '''Accept `visitor` to operate on the structure.'''
        if self.is_empty:
            return visitor.visit_empty(self)
        return visitor.visit(self)

    def walk(self):
        """Node records, root first then left subtrees before right ones."""
        return self.accept(traversal.Walker())

    def walk_indices(self):
        if self.is_empty:
            return
        yield from (idx for idx, _ in traversal.preorder(self.nodes,
                                                         self.root))

    def _leaf_indices(self, idx):
        return (i for i, _ in traversal.preorder(self.nodes, idx)
                if self.nodes[i].leaf)

    def leaves(self):
        """Iterates through `(index, node)` pairs of the leaves."""
        if self.is_empty:
            return
        for idx in self._leaf_indices(self.root):
            yield idx, self.nodes[idx]

    def rects(self, leaves_only=False):
        """
        Rectangles of the nodes in walk order.

        Returns:
            Nx4 int array with `x, y, w, h` columns.
        """
        if leaves_only:
            rects = [node.rect for _, node in self.leaves()]
        else:
            rects = [node.rect for node in self.walk()]
        return numpy.array(rects, dtype=int).reshape(-1, 4)

    def stats(self):
        """Number of nodes by kind and depth of the tree."""
        return self.accept(traversal.Stats())

    def dump(self, mode=traversal.PRE_ORDER):
        """
        Text representation of the tree, one node per line.

        Args:
            mode (int): 0 for pre-order, 1 for in-order, any other value for
                post-order.
        """
        lines = self.accept(traversal.Printer(mode, self.indent))
        return "".join(line + "\n" for line in lines)

    def print(self, mode=traversal.PRE_ORDER, file=None):
        """Writes :meth:`dump` to `file`, the standard output by default."""
        if file is None:
            file = sys.stdout
        file.write(self.dump(mode))

    def __repr__(self):
        return "{}(size={!r}, leaves={}, focused={})".format(
            self.__class__.__name__, tuple(self._size), len(self),
            self.focused)
