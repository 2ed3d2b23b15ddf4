# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Named colors understood by the cells of a ``Screen``.

Cells store color names rather than terminal color indices; the
terminal frame maps names to whatever its backend supports. ``default``
means the terminal's own foreground or background.
"""

COLOR_NAMES = [
    'default',
    'black',
    'red',
    'green',
    'yellow',
    'blue',
    'magenta',
    'cyan',
    'white',
    'gray_dark',
    'gray_light',
]


class ColorException(Exception):
    pass


def check_color(name):
    if name not in COLOR_NAMES:
        raise ColorException('No color named %s' % name)
    return name
