"""
Binary Space Partitioning of a rectangle, with a focus cursor.

A BSP tree recursively halves a bounding rectangle: every internal node has
exactly two children covering the halves of its rectangle, and every leaf
holds one payload. This is the layout of tiling window managers, where each
leaf is a window and the focused leaf receives new windows.

Classically, nodes hold pointers to their parent and children. Our
implementation stores nodes in a buffer and links them through indices
instead, so that removing a node never leaves a stale reference behind:
the surviving sibling is moved into its parent's index.
"""
from .geometry import Rectangle, SplitDirection, MoveDirection  # noqa: F401
from .arena import NIL, Node, NodeArena  # noqa: F401
from .tree import BSPTree  # noqa: F401

__version__ = "0.1.0"
