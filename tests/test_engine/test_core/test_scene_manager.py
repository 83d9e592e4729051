from unittest.mock import MagicMock
from pong_engine.core.scene import Scene, SceneManager

class RecordingScene(Scene):
    def __init__(self, game, log, name):
        super().__init__(game)
        self.log = log
        self.name = name

    def on_enter(self):
        super().on_enter()
        self.log.append(f"enter {self.name}")

    def on_exit(self):
        super().on_exit()
        self.log.append(f"exit {self.name}")

    def update(self, dt):
        self.log.append(f"update {self.name}")

    def render(self, alpha):
        pass

def test_push_is_deferred():
    manager = SceneManager(MagicMock())
    log = []
    scene = RecordingScene(manager.game, log, "a")

    manager.push(scene)
    assert manager.current is None

    manager.update(0.1)
    assert manager.current is scene
    assert scene.is_active
    assert log == ["enter a", "update a"]

def test_only_top_scene_updates():
    manager = SceneManager(MagicMock())
    log = []
    manager.push(RecordingScene(manager.game, log, "a"))
    manager.push(RecordingScene(manager.game, log, "b"))

    manager.update(0.1)

    assert log == ["enter a", "exit a", "enter b", "update b"]

def test_pop_reactivates_previous():
    manager = SceneManager(MagicMock())
    log = []
    a = RecordingScene(manager.game, log, "a")
    manager.push(a)
    manager.push(RecordingScene(manager.game, log, "b"))
    manager.update(0.1)
    log.clear()

    manager.pop()
    manager.update(0.1)

    assert manager.current is a
    assert log == ["exit b", "enter a", "update a"]

def test_clear_is_immediate():
    manager = SceneManager(MagicMock())
    manager.push(RecordingScene(manager.game, [], "a"))
    manager.update(0.1)

    manager.clear()

    assert manager.is_empty
