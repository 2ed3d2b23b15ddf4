# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Axis-aligned rectangles in terminal cell coordinates.

Both bounds are inclusive: ``Box(0, 4, 0, 2)`` covers 5 columns and
3 rows. A box with ``x_max < x_min`` or ``y_max < y_min`` is empty, which
is the state of a freshly constructed ``Box()``.
"""


class Box(object):
    def __init__(self, x_min=0, x_max=-1, y_min=0, y_max=-1):
        self.x_min = x_min
        self.x_max = x_max
        self.y_min = y_min
        self.y_max = y_max

    def copy(self):
        return Box(self.x_min, self.x_max, self.y_min, self.y_max)

    def contain(self, x, y):
        return (self.x_min <= x <= self.x_max and
                self.y_min <= y <= self.y_max)

    def cells(self):
        for y in range(self.y_min, self.y_max + 1):
            for x in range(self.x_min, self.x_max + 1):
                yield x, y

    def __eq__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        return (self.x_min, self.x_max, self.y_min, self.y_max) == \
               (other.x_min, other.x_max, other.y_min, other.y_max)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return ('#<box x=%s..%s y=%s..%s>'
                % (self.x_min, self.x_max, self.y_min, self.y_max))
