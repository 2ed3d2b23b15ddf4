# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from cuiwin.api import *
from cuiwin.box import Box
from cuiwin.component import ComponentBase, Renderer
from cuiwin.event import Event, Mouse
from cuiwin.screen import Screen
from cuiwin.window import Window, WindowRenderState, default_render_state

__all__ = [
    'message',
    'exception',

    'def_variable',
    'get_variable',
    'set_variable',
    'log_enabled',

    'active_frame',

    'Box',
    'ComponentBase',
    'Renderer',
    'Event',
    'Mouse',
    'Screen',
    'Window',
    'WindowRenderState',
    'default_render_state',
]
