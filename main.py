from __future__ import annotations

import argparse
import logging

import pygame
from pydantic import ValidationError

from engine.game import Game
from ui.pygame_gui import CheckersGUI
from ui.settings import GuiSettings


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers in a pygame window.")
	parser.add_argument("--square-size", type=int, default=80, help="Board square size in pixels.")
	parser.add_argument("--fps", type=int, default=60, help="Frame rate cap.")
	parser.add_argument("--log-level", default="info", help="Logging level (debug, info, warning, error).")
	return parser.parse_args()


def build_settings(args: argparse.Namespace) -> GuiSettings:
	return GuiSettings(square_size=args.square_size, fps=args.fps, log_level=args.log_level.lower())


def main() -> None:
	args = parse_args()
	try:
		settings = build_settings(args)
	except ValidationError as exc:
		raise SystemExit(f"Invalid settings:\n{exc}") from exc

	logging.basicConfig(
		level=settings.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	pygame.init()
	try:
		game = Game()
		gui = CheckersGUI(game, settings)
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
