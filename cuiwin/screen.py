# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from cuiwin.box import Box


class Cell(object):
    def __init__(self):
        self.reset()

    def reset(self):
        self.character = ' '
        self.foreground = 'default'
        self.background = 'default'
        self.dim = False
        # Compositing may blend cells with automerge set into their
        # neighbours, e.g. to join border lines.
        self.automerge = True

    def __repr__(self):
        return ('#<cell %r fg=%s bg=%s>'
                % (self.character, self.foreground, self.background))


class Screen(object):
    """
    The output buffer a frame renders into.

    Every render call writes into the same screen; decorators may write
    outside the box of the element they wrap. Writes outside the screen
    land on a scratch cell and are discarded.
    """

    def __init__(self, dimx, dimy):
        self.dimx = dimx
        self.dimy = dimy
        self._cells = [[Cell() for _ in range(dimx)] for _ in range(dimy)]

    @property
    def box(self):
        return Box(0, self.dimx - 1, 0, self.dimy - 1)

    def cell_at(self, x, y):
        if 0 <= x < self.dimx and 0 <= y < self.dimy:
            return self._cells[y][x]
        return Cell()

    def rows(self):
        return self._cells

    def clear(self):
        for row in self._cells:
            for cell in row:
                cell.reset()

    def lines(self):
        return [''.join(cell.character for cell in row) for row in self._cells]

    def to_string(self):
        return '\n'.join(self.lines())
