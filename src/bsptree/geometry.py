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
Integer rectangles and the two ways of halving them.

Rectangles are anchored at their **top-left** corner, as on a canvas: `x`
grows to the right and `y` grows downwards.
"""
import collections
import enum
import numbers


class Rectangle(collections.namedtuple("Rectangle", "x y w h")):
    """
    Axis-aligned integer rectangle.

    Attributes:
        x (int): left edge.
        y (int): top edge.
        w (int): width starting from the left edge.
        h (int): height starting from the top edge.
    """
    __slots__ = ()

    @classmethod
    def new(cls, x, y, w, h):
        """Builds a rectangle, checking coordinates are non-negative ints."""
        values = (x, y, w, h)
        for name, value in zip(cls._fields, values):
            if isinstance(value, bool) or not isinstance(value,
                                                          numbers.Integral):
                raise ValueError(
                    "Rectangle.{} must be an integer, got {!r}"
                    .format(name, value)
                )
            if value < 0:
                raise ValueError(
                    "Rectangle.{} must be non-negative, got {}"
                    .format(name, value)
                )
        return cls(*(int(v) for v in values))

    @property
    def x2(self):
        """Right edge."""
        return self.x + self.w

    @property
    def y2(self):
        """Bottom edge."""
        return self.y + self.h

    def corners(self):
        """Top-left and bottom-right points, the way a canvas draws them."""
        return (self.x, self.y), (self.x2, self.y2)

    def contains(self, px, py):
        """
        Whether the point `(px, py)` lies in the rectangle.

        Both edges are inclusive, so two adjacent rectangles both claim the
        pixels of their shared boundary.
        """
        return self.x <= px <= self.x2 and self.y <= py <= self.y2

    def __str__(self):
        return "({}, {}); ({}, {})".format(*self)


class _Named(enum.Enum):
    # Shared lookup by member name for the direction enums.

    @classmethod
    def coerce(cls, value):
        """Returns the member for `value`, either a member or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise ValueError(
            "Invalid {} {!r}: must be one of {}"
            .format(cls.__name__, value,
                    tuple(m.lower() for m in cls.__members__))
        )


class SplitDirection(_Named):
    """
    How a rectangle is halved when its node gets children.

    HORIZONTAL gives a top and a bottom half, VERTICAL a left and a right one.
    Halves are computed with integer division so that an odd dimension loses
    one unit: the two halves of a 5 pixels high rectangle are 2 pixels high.
    """
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def split(self, rect):
        """
        Args:
            rect (Rectangle): the rectangle to halve.

        Returns:
            A 2-tuple of rectangles (first, second): (top, bottom) or
            (left, right).
        """
        if self is SplitDirection.HORIZONTAL:
            half = rect.h // 2
            return (
                Rectangle(rect.x, rect.y, rect.w, half),
                Rectangle(rect.x, rect.y + half, rect.w, half),
            )
        half = rect.w // 2
        return (
            Rectangle(rect.x, rect.y, half, rect.h),
            Rectangle(rect.x + half, rect.y, half, rect.h),
        )

    def toggled(self):
        if self is SplitDirection.HORIZONTAL:
            return SplitDirection.VERTICAL
        return SplitDirection.HORIZONTAL


class MoveDirection(_Named):
    """The four ways focus can move around the partition."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def probe(self, rect):
        """
        Point one pixel past the side of `rect` facing this direction.

        The point is anchored on the top-left corner of `rect`. It may have
        negative coordinates, which no rectangle contains.
        """
        if self is MoveDirection.LEFT:
            return (rect.x - 1, rect.y)
        if self is MoveDirection.RIGHT:
            return (rect.x + rect.w + 1, rect.y)
        if self is MoveDirection.UP:
            return (rect.x, rect.y - 1)
        return (rect.x, rect.y + rect.h + 1)
