import json
from unittest.mock import patch
from pong.__main__ import main

def test_main_runs_game():
    with patch('pong.__main__.Game') as game_cls, \
         patch('pong.__main__.PongScene') as scene_cls:
        assert main([]) == 0

    game = game_cls.return_value
    game.scene_manager.push.assert_called_once_with(scene_cls.return_value)
    game.run.assert_called_once()
    config = game_cls.call_args.args[0]
    assert (config.width, config.height) == (800, 600)

def test_main_loads_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"window_width": 640, "ball_speed": 300}))

    with patch('pong.__main__.Game') as game_cls, \
         patch('pong.__main__.PongScene') as scene_cls:
        main([str(path)])

    assert game_cls.call_args.args[0].width == 640
    assert scene_cls.call_args.args[1].ball_speed == 300
