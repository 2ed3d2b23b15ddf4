# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Components are the interactive nodes of a user interface. Each frame a
component returns an element describing its current appearance, and
between frames it receives input events.

Components form a tree. Events are offered to the children first, the
first child that consumes an event ends its propagation. Each component
designates one of its children as active; a component is focused if it
is active in every ancestor.
"""

from cuiwin import dom
from cuiwin.mouse import CapturedMouse


class ComponentBase(object):
    def __init__(self):
        self._parent = None
        self._children = []
        self._active_child = None

    @property
    def parent(self):
        return self._parent

    @property
    def children(self):
        return list(self._children)

    def add(self, child):
        child.detach()
        child._parent = self
        self._children.append(child)
        return child

    def detach(self):
        if self._parent is None:
            return
        parent = self._parent
        parent._children.remove(self)
        if parent._active_child is self:
            parent._active_child = None
        self._parent = None

    # --------------- Override these ------------

    def render(self):
        if len(self._children) == 1:
            return self._children[0].render()
        return dom.text('')

    def on_event(self, event):
        """
        Offer ``event`` to this component. Return True if it has been
        consumed.
        """
        for child in self._children:
            if child.on_event(event):
                return True
        return False

    # --------------- Focus ------------

    def active_child(self):
        if self._active_child is not None:
            return self._active_child
        return self._children[0] if self._children else None

    def set_active_child(self, child):
        if child in self._children:
            self._active_child = child

    def active(self):
        return self._parent is None or self._parent.active_child() is self

    def focused(self):
        component = self
        while component is not None:
            if not component.active():
                return False
            component = component._parent
        return True

    def take_focus(self):
        child = self
        while child._parent is not None:
            child._parent.set_active_child(child)
            child = child._parent

    # --------------- Mouse ------------

    def capture_mouse(self, event):
        """
        Try to obtain exclusive ownership of the mouse.

        Events that were not dispatched by a frame have nobody to compete
        with, they always yield a token.
        """
        if event.screen is None:
            return CapturedMouse()
        return event.screen.capture_mouse()


class Renderer(ComponentBase):
    """Component rendering the element returned by ``render_fn``."""

    def __init__(self, render_fn):
        super(Renderer, self).__init__()
        self._render_fn = render_fn

    def render(self):
        return self._render_fn()
