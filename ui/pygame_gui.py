from __future__ import annotations

import logging

import pygame

from draughts.game import Game
from draughts.pieces import Color, Piece

from .layout import BoardLayout

LOG = logging.getLogger(__name__)


class CheckersGUI:
    def __init__(self, game: Game, layout: BoardLayout | None = None, fps: int = 60) -> None:
        self.game = game
        self.layout = layout or BoardLayout(status_height=36)
        self.square_size = self.layout.square_size
        self.board_size = self.layout.board_size
        self.fps = fps

        self.screen = pygame.display.set_mode(self.layout.window_size)
        pygame.display.set_caption("Checkers")

        self.small_font = pygame.font.SysFont("arial", 16)
        self.clock = pygame.time.Clock()
        self.piece_surfaces: dict[tuple[Color, bool], pygame.Surface] = {}

        self.colors = {
            "light": (235, 236, 208),
            "dark": (119, 148, 85),
            "highlight": (255, 255, 0, 128),
            "selected": (252, 142, 80),
            "white_piece": (255, 255, 255),
            "black_piece": (0, 0, 0),
            "outline": (25, 25, 25),
            "king": (255, 215, 0),
            "info_bg": (40, 46, 60),
            "text": (230, 230, 230),
        }

        self.highlight_surface = pygame.Surface((self.square_size, self.square_size), pygame.SRCALPHA)
        self.highlight_surface.fill(self.colors["highlight"])

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.game.reset()
                    elif event.key == pygame.K_u:
                        self.game.undoMove()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(self.fps)
        LOG.info("Window closed.")

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self.layout.cell_from_pixel(pos)
        if cell is None:
            return
        result = self.game.click(cell)
        LOG.debug("Click at %s -> %s", cell, result.event.value)

    def _draw(self) -> None:
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_status()

    def _draw_board(self) -> None:
        for row in range(self.board_size):
            for col in range(self.board_size):
                color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
                pygame.draw.rect(self.screen, color, pygame.Rect(self.layout.cell_rect(row, col)))

    def _draw_selection(self) -> None:
        state = self.game.state
        for row, col in state.legal_destinations:
            x, y, _, _ = self.layout.cell_rect(row, col)
            self.screen.blit(self.highlight_surface, (x, y))

        if state.has_selection:
            rect = pygame.Rect(self.layout.cell_rect(*state.selected))
            pygame.draw.rect(self.screen, self.colors["selected"], rect, 3)

    def _draw_pieces(self) -> None:
        for (row, col), piece in self.game.board.getAllPieces():
            surface = self._get_piece_surface(piece)
            rect = surface.get_rect(center=self.layout.center_for_cell(row, col))
            self.screen.blit(surface, rect)

    def _draw_status(self) -> None:
        if self.layout.status_height <= 0:
            return
        top = self.layout.board_pixels + self.layout.margin * 2
        width = self.layout.window_size[0]
        pygame.draw.rect(self.screen, self.colors["info_bg"], pygame.Rect(0, top, width, self.layout.status_height))

        parts = [f"{self.game.current_player.value.capitalize()} to move"]
        if self.game.state.in_chain:
            parts.append("continue jumping")
        if self.game.last_message:
            parts.append(self.game.last_message)
        parts.append("R: Reset  U: Undo  Esc/Q: Quit")
        text_surface = self.small_font.render("  |  ".join(parts), True, self.colors["text"])
        self.screen.blit(text_surface, text_surface.get_rect(midleft=(10, top + self.layout.status_height // 2)))

    def _get_piece_surface(self, piece: Piece) -> pygame.Surface:
        key = (piece.color, piece.is_king)
        if key in self.piece_surfaces:
            return self.piece_surfaces[key]

        radius = self.square_size // 3
        diameter = radius * 2 + 8
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        center = (diameter // 2, diameter // 2)

        base = self.colors["white_piece"] if piece.color == Color.WHITE else self.colors["black_piece"]
        pygame.draw.circle(surface, base, center, radius)
        if piece.is_king:
            pygame.draw.circle(surface, self.colors["king"], center, radius + 3, 3)
        else:
            pygame.draw.circle(surface, self.colors["outline"], center, radius, 1)

        self.piece_surfaces[key] = surface
        return surface
