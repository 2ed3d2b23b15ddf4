# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Mouse capture.

Only one component may own the mouse at a time: while a drag is in
progress, the component performing it receives all motion events,
regardless of where the pointer is. Ownership is represented by a
``CapturedMouse`` token handed out by a ``MouseCapture`` broker. Until
the token is released, the broker refuses to hand out another one.
"""


class CapturedMouse(object):
    def __init__(self, broker=None):
        self._broker = broker
        self._released = False

    def release(self):
        """Give up the capture. Releasing a released token does nothing."""
        if self._released:
            return
        self._released = True
        if self._broker:
            self._broker._release(self)

    @property
    def released(self):
        return self._released


class MouseCapture(object):
    def __init__(self):
        self._captured = None

    def is_capture_available(self):
        return self._captured is None

    def capture_mouse(self):
        """Return a new token, or None if another token is outstanding."""
        if self._captured is not None:
            return None
        self._captured = CapturedMouse(self)
        return self._captured

    def _release(self, token):
        if self._captured is token:
            self._captured = None
