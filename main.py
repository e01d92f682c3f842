from __future__ import annotations

import argparse
import logging

import pygame

from draughts.game import Game
from draughts.rules import RuleOptions
from ui.layout import BoardLayout
from ui.pygame_gui import CheckersGUI


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play two-player checkers in a pygame window.")
	parser.add_argument("--square-size", type=int, default=60, help="Pixel size of one board cell.")
	parser.add_argument("--fps", type=int, default=60, help="Frame rate cap for the render loop.")
	parser.add_argument(
		"--chain-jumps-only",
		action="store_true",
		help="Only allow further jumps while a jump chain is in progress.",
	)
	parser.add_argument("--log-level", default="info", help="Logging level (debug, info, warning, ...).")
	args = parser.parse_args(argv)
	if args.square_size <= 0:
		parser.error("--square-size must be positive.")
	if args.fps <= 0:
		parser.error("--fps must be positive.")
	return args


def main(argv: list[str] | None = None) -> int:
	args = parse_args(argv)
	logging.basicConfig(
		level=getattr(logging, args.log_level.upper(), logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	pygame.init()
	try:
		game = Game(options=RuleOptions(chain_jumps_only=args.chain_jumps_only))
		layout = BoardLayout(square_size=args.square_size, status_height=36)
		gui = CheckersGUI(game, layout, fps=args.fps)
		gui.run()
	finally:
		pygame.quit()
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
