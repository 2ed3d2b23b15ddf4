# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Frames host a component tree on a terminal.

A frame alternates between rendering its root component into a fresh
``Screen`` and dispatching input events to it. Events dispatched by a
frame carry the frame as their ``screen``, which is the mouse-capture
broker components compete for during drag gestures.
"""

from cuiwin import core
from cuiwin import dom
from cuiwin.mouse import MouseCapture
from cuiwin.screen import Screen
from cuiwin.util import forward


@forward(lambda self: self._mouse,
         ['capture_mouse', 'is_capture_available'],
         MouseCapture)
class Frame(object):
    def __init__(self, component):
        self._core = core.Core()
        self._component = component
        self._mouse = MouseCapture()
        self.screen = None
        self.initialize()
        self._core.set_active_frame(self)

    def initialize(self):
        pass

    def close(self):
        if self._core.active_frame() is self:
            self._core.set_active_frame(None)

    @property
    def component(self):
        return self._component

    def render(self):
        dimy, dimx = self.get_dimensions()
        self.screen = Screen(dimx, dimy)
        dom.render(self.screen, self._component.render())
        self.draw(self.screen)

    def dispatch_event(self, event):
        event.screen = self
        return self._component.on_event(event)

    def get_dimensions(self):
        """Return ``(rows, columns)`` of the terminal."""
        raise NotImplementedError()

    def draw(self, screen):
        raise NotImplementedError()
