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
"""
Depth-first traversals of a node buffer, and visitors built on them.

Traversals yield `(index, depth)` pairs, the root having depth 0. They walk
the buffer with an explicit stack, so the depth of a tree is not limited by
the interpreter's recursion limit. Visitors are accepted by
:meth:`bsptree.tree.BSPTree.accept` and implement two methods:
`visit_empty` for an empty tree and `visit` for the others.
"""
import toolz

PRE_ORDER = 0
IN_ORDER = 1
POST_ORDER = 2


def preorder(nodes, idx, depth=0):
    """Node first, then its left subtree, then its right subtree."""
    stack = [(idx, depth)]
    while stack:
        idx, depth = stack.pop()
        yield idx, depth
        # Right pushed first so that the left subtree comes out first.
        for child in reversed(nodes[idx].children):
            stack.append((child, depth + 1))


def inorder(nodes, idx, depth=0):
    """Left subtree, node, right subtree."""
    # The flag marks an internal node whose left subtree was already pushed.
    stack = [(idx, depth, False)]
    while stack:
        idx, depth, expanded = stack.pop()
        node = nodes[idx]
        if expanded or node.leaf:
            yield idx, depth
            continue
        stack.append((node.right, depth + 1, False))
        stack.append((idx, depth, True))
        stack.append((node.left, depth + 1, False))


def postorder(nodes, idx, depth=0):
    """Both subtrees, then the node."""
    stack = [(idx, depth, False)]
    while stack:
        idx, depth, expanded = stack.pop()
        node = nodes[idx]
        if expanded or node.leaf:
            yield idx, depth
            continue
        stack.append((idx, depth, True))
        stack.append((node.right, depth + 1, False))
        stack.append((node.left, depth + 1, False))


def traversal(mode):
    """
    Traversal function for a print mode.

    Args:
        mode (int): 0 for pre-order, 1 for in-order, any other value for
            post-order.
    """
    if mode == PRE_ORDER:
        return preorder
    if mode == IN_ORDER:
        return inorder
    return postorder


class Walker():
    """Collects the node records in pre-order, for drawing."""

    def visit_empty(self, tree):
        return []

    def visit(self, tree):
        return [tree.nodes[idx] for idx, _ in preorder(tree.nodes, tree.root)]


class Printer():
    """
    Formats one line per node, indented by depth.

    Args:
        mode (int): traversal order, see :func:`traversal`.
        indent (int): number of spaces per level of depth.
    """

    def __init__(self, mode=PRE_ORDER, indent=4):
        self.mode = mode
        self.indent = indent

    def visit_empty(self, tree):
        return []

    def visit(self, tree):
        walk = traversal(self.mode)
        return [
            "{}{}".format(" " * (depth * self.indent), tree.nodes[idx])
            for idx, depth in walk(tree.nodes, tree.root)
        ]


class Stats():
    """Counts nodes by kind and measures the depth of the tree."""

    def visit_empty(self, tree):
        return {
            "number_nodes": 0,
            "number_leaves": 0,
            "number_internal": 0,
            "max_depth": 0,
        }

    def visit(self, tree):
        visits = list(preorder(tree.nodes, tree.root))
        kinds = toolz.countby(lambda visit: tree.nodes[visit[0]].leaf, visits)
        return {
            "number_nodes": len(visits),
            "number_leaves": kinds.get(True, 0),
            "number_internal": kinds.get(False, 0),
            "max_depth": max(toolz.pluck(1, visits)),
        }
