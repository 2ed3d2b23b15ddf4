# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the renderable tree that components produce each
frame.

An element is rendered onto a ``Screen`` in three passes, all started by
``render``:

- ``compute_requirement`` walks the tree bottom-up and computes the
  minimum number of columns and rows each element needs,
- ``set_box`` walks it top-down and assigns each element the box it
  occupies,
- ``render`` paints the elements onto the screen.

Decorators are functions from element to element. They may be applied
with the ``|`` operator, ``text('x') | dim`` is the same as
``dim(text('x'))``.
"""

from cuiwin.box import Box
from cuiwin.colors import check_color
from cuiwin import symbols

WIDTH = 'width'
HEIGHT = 'height'

EQUAL = 'equal'
LESS_THAN = 'less_than'
GREATER_THAN = 'greater_than'


class Requirement(object):
    def __init__(self, min_x=0, min_y=0):
        self.min_x = min_x
        self.min_y = min_y

    def copy(self):
        return Requirement(self.min_x, self.min_y)


class Node(object):
    def __init__(self, children=()):
        self.children = list(children)
        self.requirement = Requirement()
        self.box = Box()

    def __or__(self, decorator):
        return decorator(self)

    def compute_requirement(self):
        for child in self.children:
            child.compute_requirement()

    def set_box(self, box):
        self.box = box

    def render(self, screen):
        for child in self.children:
            child.render(screen)


class NodeDecorator(Node):
    """
    Base class for elements wrapping exactly one child, taking over its
    requirement and handing it the full box.
    """

    def __init__(self, child):
        super(NodeDecorator, self).__init__([child])

    @property
    def child(self):
        return self.children[0]

    def compute_requirement(self):
        super(NodeDecorator, self).compute_requirement()
        self.requirement = self.child.requirement.copy()

    def set_box(self, box):
        super(NodeDecorator, self).set_box(box)
        self.child.set_box(box)


def render(screen, element):
    """Lay out ``element`` on the whole of ``screen`` and paint it."""
    element.compute_requirement()
    element.set_box(screen.box)
    element.render(screen)


# ------------ Leafs ------------

class Text(Node):
    def __init__(self, content):
        super(Text, self).__init__()
        self.content = content

    def compute_requirement(self):
        self.requirement = Requirement(len(self.content), 1)

    def render(self, screen):
        y = self.box.y_min
        if y > self.box.y_max:
            return
        for idx, char in enumerate(self.content):
            x = self.box.x_min + idx
            if x > self.box.x_max:
                break
            screen.cell_at(x, y).character = char


def text(content):
    return Text(content)


def empty_element():
    return Node()


# ------------ Layout ------------

class VBox(Node):
    def compute_requirement(self):
        super(VBox, self).compute_requirement()
        self.requirement = Requirement(
            max([c.requirement.min_x for c in self.children] or [0]),
            sum(c.requirement.min_y for c in self.children))

    def set_box(self, box):
        super(VBox, self).set_box(box)
        y = box.y_min
        for child in self.children:
            height = child.requirement.min_y
            child.set_box(Box(box.x_min, box.x_max, y, y + height - 1))
            y += height


class HBox(Node):
    def compute_requirement(self):
        super(HBox, self).compute_requirement()
        self.requirement = Requirement(
            sum(c.requirement.min_x for c in self.children),
            max([c.requirement.min_y for c in self.children] or [0]))

    def set_box(self, box):
        super(HBox, self).set_box(box)
        x = box.x_min
        for child in self.children:
            width = child.requirement.min_x
            child.set_box(Box(x, x + width - 1, box.y_min, box.y_max))
            x += width


def vbox(children):
    return VBox(children)


def hbox(children):
    return HBox(children)


class Size(NodeDecorator):
    def __init__(self, child, direction, constraint, value):
        super(Size, self).__init__(child)
        self.direction = direction
        self.constraint = constraint
        self.value = value

    def _constrain(self, minimum):
        if self.constraint == EQUAL:
            return self.value
        elif self.constraint == LESS_THAN:
            return min(minimum, self.value)
        return max(minimum, self.value)

    def compute_requirement(self):
        super(Size, self).compute_requirement()
        if self.direction == WIDTH:
            self.requirement.min_x = self._constrain(self.requirement.min_x)
        else:
            self.requirement.min_y = self._constrain(self.requirement.min_y)

    def set_box(self, box):
        Node.set_box(self, box)
        new_box = box.copy()
        if self.constraint != GREATER_THAN:
            if self.direction == WIDTH:
                new_box.x_max = min(box.x_max, box.x_min + self.requirement.min_x - 1)
            else:
                new_box.y_max = min(box.y_max, box.y_min + self.requirement.min_y - 1)
        self.child.set_box(new_box)


def size(direction, constraint, value):
    def _size(element):
        return Size(element, direction, constraint, value)
    return _size


class Center(NodeDecorator):
    def set_box(self, box):
        Node.set_box(self, box)
        req = self.child.requirement
        off_x = max(0, (box.x_max - box.x_min + 1 - req.min_x) // 2)
        off_y = max(0, (box.y_max - box.y_min + 1 - req.min_y) // 2)
        x_min = box.x_min + off_x
        y_min = box.y_min + off_y
        self.child.set_box(Box(x_min, min(box.x_max, x_min + req.min_x - 1),
                               y_min, min(box.y_max, y_min + req.min_y - 1)))


def center(element):
    return Center(element)


# ------------ Cell attributes ------------

class Dim(NodeDecorator):
    def render(self, screen):
        super(Dim, self).render(screen)
        for x, y in self.box.cells():
            screen.cell_at(x, y).dim = True


def dim(element):
    return Dim(element)


class BgColor(NodeDecorator):
    def __init__(self, child, color):
        super(BgColor, self).__init__(child)
        self.color = check_color(color)

    def render(self, screen):
        for x, y in self.box.cells():
            screen.cell_at(x, y).background = self.color
        super(BgColor, self).render(screen)


def bgcolor(color):
    check_color(color)

    def _bgcolor(element):
        return BgColor(element, color)
    return _bgcolor


class ClearUnder(NodeDecorator):
    def render(self, screen):
        for x, y in self.box.cells():
            screen.cell_at(x, y).reset()
        super(ClearUnder, self).render(screen)


def clear_under(element):
    return ClearUnder(element)


class Reflect(NodeDecorator):
    def __init__(self, child, on_box):
        super(Reflect, self).__init__(child)
        self._on_box = on_box

    def set_box(self, box):
        super(Reflect, self).set_box(box)
        self._on_box(box.copy())


def reflect(on_box):
    """
    Decorator reporting the box its element is laid out in.

    ``on_box`` is called with a copy of the box during the layout pass of
    every render.
    """
    def _reflect(element):
        return Reflect(element, on_box)
    return _reflect


# ------------ Border ------------

class Window(Node):
    """A border around ``content``, with ``title`` drawn over its top edge."""

    def __init__(self, title, content, active=True):
        super(Window, self).__init__([content, title])
        self.charset = symbols.border_charset(active)

    def compute_requirement(self):
        super(Window, self).compute_requirement()
        content, title = self.children
        self.requirement = Requirement(
            max(content.requirement.min_x, title.requirement.min_x) + 2,
            content.requirement.min_y + 2)

    def set_box(self, box):
        super(Window, self).set_box(box)
        content, title = self.children
        content.set_box(Box(box.x_min + 1, box.x_max - 1, box.y_min + 1, box.y_max - 1))
        title.set_box(Box(box.x_min + 1, box.x_max - 1, box.y_min, box.y_min))

    def _render_border(self, screen):
        box = self.box
        charset = self.charset
        for x in range(box.x_min + 1, box.x_max):
            screen.cell_at(x, box.y_min).character = charset[symbols.BORDER_H]
            screen.cell_at(x, box.y_max).character = charset[symbols.BORDER_H]
        for y in range(box.y_min + 1, box.y_max):
            screen.cell_at(box.x_min, y).character = charset[symbols.BORDER_V]
            screen.cell_at(box.x_max, y).character = charset[symbols.BORDER_V]
        screen.cell_at(box.x_min, box.y_min).character = charset[symbols.BORDER_UL]
        screen.cell_at(box.x_max, box.y_min).character = charset[symbols.BORDER_UR]
        screen.cell_at(box.x_min, box.y_max).character = charset[symbols.BORDER_LL]
        screen.cell_at(box.x_max, box.y_max).character = charset[symbols.BORDER_LR]

    def render(self, screen):
        content, title = self.children
        content.render(screen)
        # Too small to hold a border
        if self.box.x_min >= self.box.x_max or self.box.y_min >= self.box.y_max:
            return
        self._render_border(screen)
        title.render(screen)


def window(title, content, active=True):
    return Window(title, content, active)
