# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import curses

from cuiwin import term
from cuiwin.event import Event, Mouse

# Report mouse movement while a button is held, required for dragging
MOUSE_MOTION_ON = '\033[?1002h'
MOUSE_MOTION_OFF = '\033[?1002l'

KEY_QUIT = set(['q', '^C'])

COLOR_INDEX_MAP = {
    'black':   curses.COLOR_BLACK,
    'red':     curses.COLOR_RED,
    'green':   curses.COLOR_GREEN,
    'yellow':  curses.COLOR_YELLOW,
    'blue':    curses.COLOR_BLUE,
    'magenta': curses.COLOR_MAGENTA,
    'cyan':    curses.COLOR_CYAN,
    'white':   curses.COLOR_WHITE,
}

# Extended colors are only used if the terminal has 16 colors
COLOR_INDEX_MAP_16 = {
    'gray_dark':  8,
    'gray_light': 7,
}

COLOR_FALLBACK_MAP = {
    'gray_dark':  curses.COLOR_BLACK,
    'gray_light': curses.COLOR_WHITE,
}

BUTTON_MAP = [
    (curses.BUTTON1_PRESSED,  Mouse.LEFT,   Mouse.PRESSED),
    (curses.BUTTON1_RELEASED, Mouse.LEFT,   Mouse.RELEASED),
    (curses.BUTTON2_PRESSED,  Mouse.MIDDLE, Mouse.PRESSED),
    (curses.BUTTON2_RELEASED, Mouse.MIDDLE, Mouse.RELEASED),
    (curses.BUTTON3_PRESSED,  Mouse.RIGHT,  Mouse.PRESSED),
    (curses.BUTTON3_RELEASED, Mouse.RIGHT,  Mouse.RELEASED),
]


def translate_mouse(bstate, x, y):
    """Translate a curses mouse state into a list of Mouse objects."""
    for mask, button, motion in BUTTON_MAP:
        if bstate & mask:
            return [Mouse(x, y, button, motion)]
    if bstate & curses.BUTTON1_CLICKED:
        return [Mouse(x, y, Mouse.LEFT, Mouse.PRESSED),
                Mouse(x, y, Mouse.LEFT, Mouse.RELEASED)]
    return [Mouse(x, y, Mouse.NONE, Mouse.MOVED)]


class Frame(term.Frame):
    def initialize(self):
        self._color_pairs = {}
        self._running = False

        # Init Curses
        self._screen = curses.initscr()
        curses.savetty()
        curses.raw()
        curses.nonl()
        curses.noecho()
        curses.curs_set(0)
        self._screen.keypad(1)

        # Init Colors
        curses.start_color()
        curses.use_default_colors()

        # Init Mouse
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        curses.mouseinterval(0)
        self._write_terminal(MOUSE_MOTION_ON)

    def close(self):
        self._write_terminal(MOUSE_MOTION_OFF)
        curses.resetty()
        curses.endwin()
        super(Frame, self).close()
        for log_item in self._core.logger.messages:
            print(log_item)

    def _write_terminal(self, sequence):
        print(sequence, end='', flush=True)

    # ------------ Colors: Compute pair indices ------------

    def _color_index(self, name):
        if name == 'default':
            return -1
        if curses.COLORS >= 16 and name in COLOR_INDEX_MAP_16:
            return COLOR_INDEX_MAP_16[name]
        return COLOR_INDEX_MAP.get(name, COLOR_FALLBACK_MAP.get(name, -1))

    def _curses_colpair(self, foreground, background):
        key = (self._color_index(foreground), self._color_index(background))
        if key == (-1, -1):
            return curses.color_pair(0)
        if key not in self._color_pairs:
            pair_index = len(self._color_pairs) + 1
            if pair_index >= curses.COLOR_PAIRS:
                return curses.color_pair(0)
            curses.init_pair(pair_index, *key)
            self._color_pairs[key] = pair_index
        return curses.color_pair(self._color_pairs[key])

    def _cell_attributes(self, cell):
        cattrs = self._curses_colpair(cell.foreground, cell.background)
        if cell.dim:
            cattrs |= curses.A_DIM
        return cattrs

    # ------------ Rendering ------------

    def get_dimensions(self):
        return self._screen.getmaxyx()

    def draw(self, screen):
        last_row = screen.dimy - 1
        last_col = screen.dimx - 1
        for y, row in enumerate(screen.rows()):
            for x, cell in enumerate(row):
                attrs = self._cell_attributes(cell)
                # Writing the bottom-right cell moves the cursor off screen
                if y == last_row and x == last_col:
                    self._screen.insstr(y, x, cell.character, attrs)
                else:
                    self._screen.addstr(y, x, cell.character, attrs)
        self._screen.noutrefresh()
        curses.doupdate()

    # ------------ Input ------------

    def _read_events(self):
        key = self._screen.getch()
        if key == curses.KEY_MOUSE:
            try:
                _, x, y, _, bstate = curses.getmouse()
            except curses.error:
                return []
            return [Event.mouse_event(mouse) for mouse in translate_mouse(bstate, x, y)]
        elif key == curses.KEY_RESIZE:
            return []
        keyname = curses.keyname(key).decode('utf-8')
        if keyname in KEY_QUIT:
            self._running = False
            return []
        if len(keyname) == 1:
            return [Event.character(keyname)]
        return [Event.special(keyname)]

    def run(self):
        self._running = True
        try:
            while self._running:
                try:
                    self.render()
                except Exception:
                    self._core.exception()
                for event in self._read_events():
                    try:
                        self.dispatch_event(event)
                    except Exception:
                        self._core.exception()
        finally:
            self.close()
