# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Decorators placing a window on screen and giving it a drop shadow.
"""

from cuiwin import dom

SHADOW_FOREGROUND = 'gray_dark'
SHADOW_BACKGROUND = 'black'


def position_and_size(left, top, width, height):
    """
    Decorator sizing an element to exactly ``width`` x ``height`` and
    placing it ``left`` columns and ``top`` rows from the origin of the
    box it is laid out in.
    """
    def _position_and_size(element):
        element = element | dom.size(dom.WIDTH, dom.EQUAL, width)
        element = element | dom.size(dom.HEIGHT, dom.EQUAL, height)

        padding_left = dom.empty_element() | dom.size(dom.WIDTH, dom.EQUAL, left)
        padding_top = dom.empty_element() | dom.size(dom.HEIGHT, dom.EQUAL, top)

        return dom.vbox([
            padding_top,
            dom.hbox([
                padding_left,
                element,
            ]),
        ])
    return _position_and_size


def paint_shadow(screen, box, foreground=SHADOW_FOREGROUND, background=SHADOW_BACKGROUND):
    """
    Paint a one cell wide shadow to the right of and below ``box``.

    The shadow is offset by one row (right edge) and one column (bottom
    edge) from the box, the corner cell belongs to the right edge. Only
    colors change, characters are kept. Shadow cells are excluded from
    automatic merging.
    """
    def _shade(x, y):
        cell = screen.cell_at(x, y)
        cell.foreground = foreground
        cell.background = background
        cell.automerge = False

    for y in range(box.y_min, box.y_max + 1):
        _shade(box.x_max + 1, y + 1)

    for x in range(box.x_min, box.x_max):
        _shade(x + 1, box.y_max + 1)


class DropShadow(dom.NodeDecorator):
    def __init__(self, child, foreground=SHADOW_FOREGROUND, background=SHADOW_BACKGROUND):
        super(DropShadow, self).__init__(child)
        self.foreground = foreground
        self.background = background

    def render(self, screen):
        super(DropShadow, self).render(screen)
        paint_shadow(screen, self.box, self.foreground, self.background)


def drop_shadow(foreground=SHADOW_FOREGROUND, background=SHADOW_BACKGROUND):
    def _drop_shadow(element):
        return DropShadow(element, foreground, background)
    return _drop_shadow
