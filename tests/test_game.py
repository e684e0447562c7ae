from dtd.components import Position, Tower
from dtd.game import Game
from dtd.geometry import Vector
from dtd.level import Level
from dtd.scenes import BattleScene, SceneId


class Recorder:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, args))

        return record


class FakeRenderer:
    def __init__(self):
        self.window_size = Vector(1600, 1024)
        self.level_renderer = Recorder()
        self.sprite_renderer = Recorder()
        self.shape_renderer = Recorder()
        self.hud_renderer = Recorder()


class FakeAssets:
    def __init__(self, level):
        self.loaded_level = level


class FakeInputHandler:
    def __init__(self):
        self.listener = None

    def register_mouse_listener(self, listener):
        self.listener = listener

    def reset_listeners(self):
        pass


def make_game():
    renderer = FakeRenderer()
    game = Game(renderer, FakeAssets(Level(id="level_1.tmx")), Recorder(), FakeInputHandler())
    return game, renderer


def test_game_starts_battle_on_loaded_level():
    game, _ = make_game()
    assert game.scene_manager.current_scene_id is SceneId.BATTLE
    scene = game.scene_manager.current_scene
    assert isinstance(scene, BattleScene)
    assert scene.level_id == "level_1.tmx"
    assert len(list(game.registry.view(Tower, Position))) == 2


def test_update_drives_current_scene():
    game, renderer = make_game()
    game.update(0.0)
    game.update(0.0)
    assert [name for name, _ in renderer.level_renderer.calls] == [
        "render_current_level",
        "render_current_level",
    ]