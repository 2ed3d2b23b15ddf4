# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import cuiwin
import cuiwin.term.curses

from cuiwin import dom


def demo_content():
    return dom.vbox([
        dom.text('Drag the window by its body,'),
        dom.text('resize it by its bottom-right'),
        dom.text('corner. Press q to quit.'),
    ])


def main():
    window = cuiwin.Window(inner=cuiwin.Renderer(demo_content),
                           title='cuiwin', left=4, top=2, width=34, height=7)
    cuiwin.term.curses.Frame(window).run()


if __name__ == '__main__':
    main()
