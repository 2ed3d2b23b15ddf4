# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import contextlib
import functools
import sys
import traceback

from cuiwin.logger import Logger
from cuiwin.singleton import Singleton
from cuiwin.util import deep_get, deep_put

__all__ = ['core_api', 'core_api_ns', 'Core']


def core_api(_globals, fn_name):
    wrapped_fn = functools.wraps(getattr(Core, fn_name))(
        (lambda *args, **kwargs: getattr(Core(), fn_name)(*args, **kwargs)))
    _globals[fn_name] = wrapped_fn
    return wrapped_fn


@contextlib.contextmanager
def core_api_ns(_globals):
    def _core_api(*args, **kwargs):
        core_api(_globals, *args, **kwargs)
    yield _core_api


class Core(metaclass=Singleton):
    """
    Process wide state: variables, the message log and the frame that
    currently dispatches events.
    """

    def __init__(self):
        self._init_state()
        self.logger = Logger()
        self._last_message = ''
        self._frame = None

    def _init_state(self):
        self._state = {}
        self.def_variable(['window', 'left'], 0)
        self.def_variable(['window', 'top'], 0)
        self.def_variable(['window', 'width'], 20)
        self.def_variable(['window', 'height'], 10)
        self.def_variable(['window', 'background'], 'cyan')
        self.def_variable(['window', 'shadow-foreground'], 'gray_dark')
        self.def_variable(['window', 'shadow-background'], 'black')
        self.def_variable(['logging', 'window-events'], False)

    def message(self, msg, show_log=True, log_message=None):
        """
        Record a message and log it.

        :param msg: The message to be recorded
        :param show_log: Set to False, to avoid appending the message to the log
        :param log_message: Provide an alternative text for appending to the log
        """
        self._last_message = msg
        if log_message:
            self.logger.log(log_message)
        elif show_log:
            self.logger.log(msg)

    def exception(self):
        """
        Call to log the last thrown exception.
        """
        exc_type, exc_value, exc_tb = sys.exc_info()
        self.message(traceback.format_exception_only(exc_type, exc_value)[-1],
                     log_message=traceback.format_exc())

    @property
    def last_message(self):
        return self._last_message

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)

    # ------------ Frames ------------

    def active_frame(self):
        return self._frame

    def set_active_frame(self, frame):
        self._frame = frame

    def is_capture_available(self):
        """
        True if a component could capture the mouse right now. Without an
        active frame, there is nobody holding a capture.
        """
        return self._frame is None or self._frame.is_capture_available()
