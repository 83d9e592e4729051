"""
Launch a match.

    python -m pong                 # default settings
    python -m pong settings.json   # override settings from JSON
"""

from __future__ import annotations

import logging
import sys

from pong_engine.core import Game
from pong.config import PongConfig
from pong.scene import PongScene


logger = logging.getLogger("pong")


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window closes or Q is pressed."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = sys.argv[1:] if argv is None else argv
    if args:
        config = PongConfig.from_file(args[0])
        logger.info("Loaded settings from %s", args[0])
    else:
        config = PongConfig()

    game = Game(config.game_config())
    game.scene_manager.push(PongScene(game, config))
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
