# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Border characters, indexed by the BORDER_* positions below."""

BORDER_UL = 0
BORDER_UR = 1
BORDER_LL = 2
BORDER_LR = 3
BORDER_H = 4
BORDER_V = 5

BORDER_LIGHT = ('┌', '┐', '└', '┘', '─', '│')
BORDER_HEAVY = ('┏', '┓', '┗', '┛', '━', '┃')


def border_charset(active):
    return BORDER_HEAVY if active else BORDER_LIGHT
