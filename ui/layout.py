"""Pixel geometry for the board window and click hit-testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from draughts.board import BOARD_SIZE
from draughts.move import Coordinate


@dataclass(frozen=True, slots=True)
class BoardLayout:
    square_size: int = 60
    board_size: int = BOARD_SIZE
    margin: int = 0
    status_height: int = 0

    @property
    def board_pixels(self) -> int:
        return self.square_size * self.board_size

    @property
    def window_size(self) -> tuple[int, int]:
        width = self.board_pixels + self.margin * 2
        return (width, width + self.status_height)

    def cell_from_pixel(self, pos: tuple[int, int]) -> Optional[Coordinate]:
        """Convert a window pixel to a board cell, or None when off the board."""
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    def cell_rect(self, row: int, col: int) -> tuple[int, int, int, int]:
        return (
            self.margin + col * self.square_size,
            self.margin + row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )
