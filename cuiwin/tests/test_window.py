# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import random

import cuiwin

from cuiwin import dom
from cuiwin.box import Box
from cuiwin.component import ComponentBase, Renderer
from cuiwin.event import Event, Mouse
from cuiwin.mouse import MouseCapture
from cuiwin.screen import Screen
from cuiwin.window import Window, WindowRenderState


def _render(window, screen=None):
    screen = screen or Screen(80, 25)
    dom.render(screen, window.render())
    return screen


def _mouse(x, y, button=Mouse.NONE, motion=Mouse.MOVED, screen=None):
    return Event.mouse_event(Mouse(x, y, button, motion), screen=screen)


def _press(x, y, screen=None):
    return _mouse(x, y, Mouse.LEFT, Mouse.PRESSED, screen)


def _move(x, y, screen=None):
    return _mouse(x, y, Mouse.LEFT, Mouse.MOVED, screen)


def _release(x, y, screen=None):
    return _mouse(x, y, Mouse.LEFT, Mouse.RELEASED, screen)


class Consumer(ComponentBase):
    def on_event(self, event):
        return True


# ------------ Configuration ------------

def test_defaults_from_variables():
    window = Window(title='A')
    assert (window.left, window.top, window.width, window.height) == (0, 0, 20, 10)
    assert window.drag_enabled and window.resize_enabled
    assert isinstance(window.inner, ComponentBase)
    assert window.inner.parent is window


def test_defaults_follow_variable_changes():
    cuiwin.set_variable(['window', 'width'], 30)
    assert Window().width == 30
    assert Window(width=12).width == 12


# ------------ Rendering ------------

def test_render_records_boxes():
    window = Window(title='A', left=5, top=3)
    _render(window)
    assert window.box_window == Box(5, 24, 3, 12)
    assert window.box == Box(0, 79, 0, 24)


def test_render_default_chrome():
    window = Window(title='A', inner=Renderer(lambda: dom.text('body')))
    screen = _render(window)
    assert screen.cell_at(0, 0).character == '┏'
    assert screen.cell_at(19, 9).character == '┛'
    assert screen.cell_at(9, 0).character == 'A'
    assert screen.lines()[1].startswith('┃body')
    assert screen.cell_at(5, 5).background == 'cyan'
    assert not screen.cell_at(5, 5).dim


def test_render_drop_shadow():
    window = Window(title='A')
    screen = _render(window)
    for y in range(1, 11):
        cell = screen.cell_at(20, y)
        assert cell.background == 'black' and not cell.automerge
    for x in range(1, 20):
        cell = screen.cell_at(x, 10)
        assert cell.background == 'black' and not cell.automerge
    assert screen.cell_at(20, 0).automerge
    assert screen.cell_at(0, 10).automerge


def test_inactive_window_is_dimmed():
    parent = ComponentBase()
    first = parent.add(Window(title='one'))
    second = parent.add(Window(title='two'))
    second.take_focus()

    screen = _render(first)
    assert screen.cell_at(0, 0).character == '┌'
    assert screen.cell_at(5, 5).dim


def test_custom_renderer_receives_state():
    states = []

    def render(state):
        states.append(state)
        return dom.text('custom')

    window = Window(title='T', render=render,
                    inner=Renderer(lambda: dom.text('inner')))
    screen = _render(window)

    state = states[0]
    assert isinstance(state, WindowRenderState)
    assert state.title == 'T'
    assert state.active
    assert not state.drag and not state.resize
    assert state.inner.content == 'inner'
    assert screen.lines()[0].startswith('custom')
    assert window.box_window == Box(0, 19, 0, 9)


def test_render_reports_drag_state():
    states = []
    window = Window(title='T', render=lambda s: states.append(s) or dom.text(''))
    _render(window)
    window.on_event(_press(5, 5))
    _render(window)
    assert states[-1].drag and not states[-1].resize


# ------------ Events ------------

def test_press_outside_is_not_consumed():
    window = Window(title='A')
    _render(window)
    assert not window.on_event(_press(50, 20))
    assert not window.dragging and not window.captured_mouse


def test_press_before_first_render_is_not_consumed():
    window = Window(title='A')
    assert not window.on_event(_press(0, 0))


def test_non_mouse_events_are_ignored():
    window = Window(title='A')
    _render(window)
    assert not window.on_event(Event.character('a'))


def test_child_consuming_event_wins():
    window = Window(title='A', inner=Consumer())
    _render(window)
    assert window.on_event(_press(5, 5))
    assert not window.dragging
    assert not window.mouse_hover


def test_hover_is_consumed_without_state_change():
    window = Window(title='A')
    _render(window)
    assert window.on_event(_mouse(5, 5))
    assert window.mouse_hover
    assert not window.resize_handle_hover
    assert not window.captured_mouse

    assert window.on_event(_mouse(19, 9))
    assert window.resize_handle_hover


def test_right_button_press_is_consumed_without_capture():
    window = Window(title='A')
    _render(window)
    assert window.on_event(_mouse(5, 5, Mouse.RIGHT, Mouse.PRESSED))
    assert not window.captured_mouse
    assert not window.dragging


def test_resize_scenario():
    broker = MouseCapture()
    window = Window(title='A')
    _render(window)

    assert window.on_event(_press(19, 9, broker))
    assert window.resizing and not window.dragging
    assert not broker.is_capture_available()

    assert window.on_event(_move(22, 11, broker))
    assert (window.width, window.height) == (23, 12)
    assert (window.left, window.top) == (0, 0)

    assert window.on_event(_release(22, 11, broker))
    assert not window.resizing and not window.dragging
    assert not window.captured_mouse
    assert broker.is_capture_available()


def test_drag_scenario():
    window = Window(title='A')
    _render(window)

    assert window.on_event(_press(5, 3))
    assert window.dragging and not window.resizing

    assert window.on_event(_move(8, 5))
    assert (window.left, window.top) == (3, 2)
    assert (window.width, window.height) == (20, 10)

    # anchors are kept, repeated motion does not accumulate
    window.on_event(_move(9, 5))
    window.on_event(_move(9, 5))
    assert (window.left, window.top) == (4, 2)

    window.on_event(_release(9, 5))
    assert not window.dragging
    assert not window.captured_mouse


def test_drag_is_relative_to_box_origin():
    window = Window(title='A', left=2, top=1)
    screen = Screen(80, 25)
    dom.render(screen, dom.hbox([dom.text('xxx'), window.render()]))
    assert window.box.x_min == 3
    assert window.box_window == Box(5, 24, 1, 10)

    ax, ay = 10, 4
    window.on_event(_press(ax, ay))
    window.on_event(_move(14, 7))
    assert window.left == 14 - (ax - 2 - window.box.x_min) - window.box.x_min
    assert (window.left, window.top) == (6, 4)


def test_resize_clamps_to_title_and_minimum_height():
    window = Window(title='Hello')
    _render(window)
    window.on_event(_press(19, 9))
    window.on_event(_move(0, 0))
    assert window.width == len('Hello') + 2
    assert window.height == 2


def test_resize_only_on_exact_corner():
    window = Window(title='A')
    _render(window)
    window.on_event(_press(18, 9))
    assert window.dragging and not window.resizing


def test_resize_disabled_drags_from_corner():
    window = Window(title='A', resize=False)
    _render(window)
    assert window.on_event(_press(19, 9))
    assert window.dragging and not window.resizing


def test_drag_disabled_swallows_body_press():
    window = Window(title='A', drag=False)
    _render(window)
    assert window.on_event(_press(5, 5))
    assert not window.dragging
    assert not window.captured_mouse

    assert window.on_event(_press(19, 9))
    assert window.resizing


def test_press_swallowed_when_mouse_captured_elsewhere():
    broker = MouseCapture()
    other = broker.capture_mouse()
    window = Window(title='A')
    _render(window)

    assert window.on_event(_press(5, 5, broker))
    assert not window.dragging
    assert not window.captured_mouse

    other.release()
    assert window.on_event(_press(5, 5, broker))
    assert window.dragging


def test_captured_window_receives_motion_outside():
    window = Window(title='A')
    _render(window)
    window.on_event(_press(5, 5))
    assert window.on_event(_move(70, 20))
    assert not window.mouse_hover
    assert (window.left, window.top) == (65, 15)


def test_press_takes_focus():
    parent = ComponentBase()
    first = parent.add(Window(title='one'))
    second = parent.add(Window(title='two', left=40))
    _render(first)
    _render(second)

    assert parent.on_event(_press(45, 5))
    assert parent.active_child() is second
    assert second.dragging and not first.dragging


def test_gestures_are_exclusive():
    rng = random.Random(4)
    for _ in range(50):
        window = Window(title='Title')
        _render(window)
        for _ in range(20):
            kind = rng.choice(['press', 'move', 'release', 'render'])
            if kind == 'render':
                _render(window)
                continue
            x, y = rng.randint(0, 30), rng.randint(0, 15)
            if kind == 'press':
                x, y = rng.choice([(x, y), (window.box_window.x_max, window.box_window.y_max)])
                window.on_event(_press(x, y))
            elif kind == 'move':
                window.on_event(_move(x, y))
            else:
                window.on_event(_release(x, y))
                assert not window.dragging and not window.resizing
                assert not window.captured_mouse
            assert not (window.dragging and window.resizing)
            if not window.captured_mouse:
                assert not window.dragging and not window.resizing
            assert window.width >= len(window.title) + 2
            assert window.height >= 2


def test_gesture_logging(core):
    cuiwin.set_variable(['logging', 'window-events'], True)
    window = Window(title='A')
    _render(window)
    window.on_event(_press(5, 5))
    window.on_event(_release(5, 5))
    assert any('drag started' in msg for msg in core.logger.messages)
    assert any('drag ended' in msg for msg in core.logger.messages)


def test_gesture_logging_disabled_by_default(core):
    window = Window(title='A')
    _render(window)
    window.on_event(_press(5, 5))
    assert core.logger.messages == []


def test_capture_released_elsewhere_ends_gesture():
    broker = MouseCapture()
    window = Window(title='A')
    _render(window)
    window.on_event(_press(5, 5, broker))
    assert window.captured_mouse

    window._captured_mouse.release()
    assert not window.captured_mouse
    assert broker.is_capture_available()

    assert window.on_event(_move(9, 9, broker))
    assert not window.dragging and not window.resizing
    assert (window.left, window.top) == (0, 0)

    other = broker.capture_mouse()
    assert window.on_event(_press(5, 5, broker))
    assert not window.dragging
    other.release()
