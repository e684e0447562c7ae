import itertools

import pygame

from dtd.game_loop import GameLoop


class FakeEventHandler:
    def __init__(self, frames=()):
        self.frames = list(frames)
        self.registered = []

    def register_listener(self, event_type, listener):
        self.registered.append((event_type, listener))

    def update(self):
        events = self.frames.pop(0) if self.frames else []
        for event in events:
            for event_type, listener in self.registered:
                if event_type == event.type:
                    listener.callback(event)


class FakeRenderer:
    def __init__(self):
        self.renders = 0
        self.clears = 0
        self.closed = False

    def render(self):
        self.renders += 1

    def clear(self):
        self.clears += 1

    def close_window(self):
        self.closed = True


class FakeGame:
    def __init__(self, frames, on_update=None):
        self.frames = frames
        self.dts = []
        self.loop = None
        self.on_update = on_update

    def update(self, dt):
        self.dts.append(dt)
        if self.on_update:
            self.on_update(self)
        if len(self.dts) >= self.frames:
            self.loop.stop()


def counting_clock():
    counter = itertools.count()
    return lambda: float(next(counter))


def make_loop(game, events=()):
    renderer = FakeRenderer()
    handler = FakeEventHandler(events)
    loop = GameLoop(game, renderer, handler, clock=counting_clock())
    game.loop = loop
    return loop, renderer, handler


def test_runs_frames_until_stopped():
    game = FakeGame(3)
    loop, renderer, _ = make_loop(game)
    loop.start()
    assert game.dts == [1.0, 1.0, 1.0]
    assert renderer.renders == 3
    assert renderer.clears == 3
    assert not loop.running


def test_registers_listeners():
    game = FakeGame(1)
    loop, _, handler = make_loop(game)
    loop.start()
    assert [t for t, _ in handler.registered] == [pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP]
    assert [l.name for _, l in handler.registered] == [
        "game_loop_close",
        "double_speed_button",
        "double_speed_button",
    ]


def test_space_fast_forwards_until_released():
    events = [
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)],
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)],
        [pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE)],
    ]
    game = FakeGame(3)
    loop, _, _ = make_loop(game, events)
    loop.start()
    assert game.dts == [6.0, 6.0, 1.0]
    assert not loop.fast_forward


def test_close_event_stops_loop_and_closes_window():
    game = FakeGame(100)
    loop, renderer, _ = make_loop(game, [[pygame.event.Event(pygame.QUIT)]])
    loop.start()
    assert renderer.closed
    assert len(game.dts) == 1


def test_start_while_running_does_nothing():
    def restart(game):
        game.loop.start()

    game = FakeGame(2, on_update=restart)
    loop, _, handler = make_loop(game)
    loop.start()
    assert len(game.dts) == 2
    assert len(handler.registered) == 3