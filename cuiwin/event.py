# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Mouse(object):
    LEFT = 'left'
    MIDDLE = 'middle'
    RIGHT = 'right'
    NONE = 'none'

    PRESSED = 'pressed'
    RELEASED = 'released'
    MOVED = 'moved'

    def __init__(self, x, y, button=NONE, motion=MOVED):
        self.x = x
        self.y = y
        self.button = button
        self.motion = motion

    def __repr__(self):
        return ('#<mouse %s %s at %s,%s>'
                % (self.button, self.motion, self.x, self.y))


class Event(object):
    """
    An input event delivered to a component tree.

    ``screen`` is the mouse-capture broker of the frame that dispatched
    the event, or None if the event was not dispatched by a frame.
    """

    MOUSE = 'mouse'
    CHARACTER = 'character'
    SPECIAL = 'special'

    def __init__(self, kind, value, screen=None):
        self.kind = kind
        self.value = value
        self.screen = screen

    @classmethod
    def mouse_event(cls, mouse, screen=None):
        return cls(Event.MOUSE, mouse, screen)

    @classmethod
    def character(cls, char):
        return cls(Event.CHARACTER, char)

    @classmethod
    def special(cls, name):
        return cls(Event.SPECIAL, name)

    def is_mouse(self):
        return self.kind == Event.MOUSE

    def is_character(self):
        return self.kind == Event.CHARACTER

    @property
    def mouse(self):
        return self.value if self.is_mouse() else None

    def __repr__(self):
        return '#<event %s %r>' % (self.kind, self.value)
