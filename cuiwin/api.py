# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from cuiwin.core import core_api_ns

with core_api_ns(globals()) as core_api:
    core_api('message')
    core_api('exception')

    core_api('def_variable')
    core_api('get_variable')
    core_api('set_variable')

    core_api('active_frame')


def log_enabled(name):
    """True if logging for the category ``name`` has been switched on."""
    return bool(get_variable(['logging', name]))
