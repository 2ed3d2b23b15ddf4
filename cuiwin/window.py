# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
A window that can be moved and resized with the mouse.

The window draws its inner component inside a titled border and places
the result at ``left``/``top`` with a size of ``width`` x ``height``.
Pressing the left button on the window body and moving the mouse drags
the window, pressing on its bottom-right corner resizes it. Either
gesture lasts until the button is released.

Positions are hit-tested against the boxes recorded during the last
render, so geometry changes take effect on the next frame.

To show several windows at once they must be stacked by a container
component.
"""

import collections

from cuiwin import api
from cuiwin import core
from cuiwin import dom
from cuiwin.box import Box
from cuiwin.component import ComponentBase
from cuiwin.decorators import drop_shadow, position_and_size
from cuiwin.event import Mouse

MIN_WINDOW_HEIGHT = 2
TITLE_PADDING = 2

WindowRenderState = collections.namedtuple(
    'WindowRenderState', ['inner', 'title', 'active', 'drag', 'resize'])


def default_render_state(state):
    title = dom.center(dom.text(state.title))
    element = state.inner
    if not state.active:
        element = element | dom.dim
        title = title | dom.dim

    element = dom.window(title, element, state.active)
    element = element | dom.bgcolor(api.get_variable(['window', 'background']))
    element = element | dom.clear_under
    return element | drop_shadow(api.get_variable(['window', 'shadow-foreground']),
                                 api.get_variable(['window', 'shadow-background']))


def _default(value, path):
    return api.get_variable(path) if value is None else value


class Window(ComponentBase):
    """
    A draggable, resizable window around ``inner``.

    Geometry arguments left as None take their value from the
    ``['window', ...]`` variables. ``render``, if given, replaces the
    default window decoration: it receives a ``WindowRenderState`` and
    returns the element to be placed.
    """

    def __init__(self, inner=None, title='', left=None, top=None, width=None,
                 height=None, drag=True, resize=True, render=None):
        super(Window, self).__init__()
        self.inner = inner if inner is not None else ComponentBase()
        self.title = title
        self.left = _default(left, ['window', 'left'])
        self.top = _default(top, ['window', 'top'])
        self.width = _default(width, ['window', 'width'])
        self.height = _default(height, ['window', 'height'])
        self.drag_enabled = drag
        self.resize_enabled = resize
        self.renderer = render
        self.add(self.inner)

        self.box = Box()
        self.box_window = Box()

        self.mouse_hover = False
        self.resize_handle_hover = False
        self.dragging = False
        self.resizing = False
        self.capturable = False
        self._captured_mouse = None
        self._drag_start_x = 0
        self._drag_start_y = 0
        self._resize_start_x = 0
        self._resize_start_y = 0

    @property
    def captured_mouse(self):
        return self._captured_mouse is not None and not self._captured_mouse.released

    def _set_box(self, box):
        self.box = box

    def _set_box_window(self, box):
        self.box_window = box

    def _log(self, msg):
        if api.log_enabled('window-events'):
            api.message('window "%s": %s' % (self.title, msg))

    def render(self):
        element = super(Window, self).render()

        self.capturable = (self.captured_mouse or
                           core.Core().is_capture_available())

        state = WindowRenderState(element, self.title, self.active(),
                                  self.dragging, self.resizing)
        element = (self.renderer or default_render_state)(state)

        # Position and record the drawn area of the window.
        element = element | dom.reflect(self._set_box_window)
        element = element | position_and_size(self.left, self.top, self.width, self.height)
        element = element | dom.reflect(self._set_box)
        return element

    def on_event(self, event):
        if super(Window, self).on_event(event):
            return True

        if not event.is_mouse():
            return False

        mouse = event.mouse
        self.mouse_hover = self.box_window.contain(mouse.x, mouse.y)
        self.resize_handle_hover = (self.mouse_hover and self.resize_enabled and
                                    mouse.x == self.box_window.x_max and
                                    mouse.y == self.box_window.y_max)

        if self._captured_mouse is not None and self._captured_mouse.released:
            self._log('capture released elsewhere')
            self._captured_mouse = None
            self.dragging = False

        if self._captured_mouse is not None:
            return self._on_captured_event(mouse)

        self.resizing = False

        if not self.mouse_hover:
            return False

        # Somebody else owns the mouse; swallow the event so it does not
        # reach the windows underneath.
        if event.screen is not None and not event.screen.is_capture_available():
            self._log('mouse is captured elsewhere')
            return True

        if mouse.button != Mouse.LEFT or mouse.motion != Mouse.PRESSED:
            return True

        self.take_focus()

        resizing = self.resize_handle_hover
        dragging = not resizing and self.drag_enabled
        if not (resizing or dragging):
            return True

        self._captured_mouse = self.capture_mouse(event)
        if self._captured_mouse is None:
            self._log('mouse capture refused')
            return True

        self.resizing = resizing
        self.dragging = dragging

        self._resize_start_x = mouse.x - self.width - self.box.x_min
        self._resize_start_y = mouse.y - self.height - self.box.y_min
        self._drag_start_x = mouse.x - self.left - self.box.x_min
        self._drag_start_y = mouse.y - self.top - self.box.y_min
        self._log('%s started at %s,%s' % ('resize' if resizing else 'drag',
                                           mouse.x, mouse.y))
        return True

    def _on_captured_event(self, mouse):
        if mouse.motion == Mouse.RELEASED:
            self._release_mouse()
            return True

        if self.resizing:
            self.width = mouse.x - self._resize_start_x - self.box.x_min
            self.height = mouse.y - self._resize_start_y - self.box.y_min
        elif self.dragging:
            self.left = mouse.x - self._drag_start_x - self.box.x_min
            self.top = mouse.y - self._drag_start_y - self.box.y_min

        # Clamp the window size.
        self.width = max(self.width, len(self.title) + TITLE_PADDING)
        self.height = max(self.height, MIN_WINDOW_HEIGHT)
        return True

    def _release_mouse(self):
        self._captured_mouse.release()
        self._captured_mouse = None
        self._log('%s ended at %s,%s,%s,%s' % ('resize' if self.resizing else 'drag',
                                               self.left, self.top,
                                               self.width, self.height))
        self.dragging = False
        self.resizing = False

    def __str__(self):
        return ('#<window "%s" left=%s top=%s width=%s height=%s>'
                % (self.title, self.left, self.top, self.width, self.height))
