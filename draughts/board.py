from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .move import Coordinate, Move
from .pieces import Cell, Color, Piece, PieceKind

LOG = logging.getLogger(__name__)

BOARD_SIZE = 8
START_ROWS = 3

BoardStatePiece = tuple[int, int, str, str]
BoardState = tuple[BoardStatePiece, ...]


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    move: Move
    captured: Optional[Piece] = None
    promoted: bool = False


class Board:
    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.board: list[list[Cell]] = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    def to_state(self) -> BoardState:
        return tuple(
            (row, col, piece.color.value, piece.kind.value)
            for (row, col), piece in self.getAllPieces()
        )

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board = cls.empty()
        for row, col, color_value, kind_value in state:
            board.setPiece((row, col), Piece(PieceKind(kind_value), Color(color_value)))
        return board

    def isWithinBounds(self, pos: Coordinate) -> bool:
        row, col = pos
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    def getPiece(self, pos: Coordinate) -> Cell:
        self._require_bounds(pos)
        row, col = pos
        return self.board[row][col]

    def setPiece(self, pos: Coordinate, cell: Cell) -> None:
        self._require_bounds(pos)
        row, col = pos
        self.board[row][col] = cell

    def getAllPieces(self) -> Iterator[tuple[Coordinate, Piece]]:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                piece = self.board[row][col]
                if piece is not None:
                    yield (row, col), piece

    def countPieces(self, color: Color) -> int:
        return sum(1 for _, piece in self.getAllPieces() if piece.color is color)

    def movePiece(self, start: Coordinate, end: Coordinate) -> MoveOutcome:
        """Relocate the piece on ``start`` to ``end``.

        The move must already be legal. A two-row move removes the piece on the
        midpoint cell. The moved piece is promoted when it lands on the far row.
        """
        piece = self.getPiece(start)
        if piece is None:
            raise ValueError(f"No piece at {start} to move.")

        move = Move(start, end)
        captured: Optional[Piece] = None
        if move.is_jump:
            captured = self.getPiece(move.midpoint)
            self.setPiece(move.midpoint, None)

        self.setPiece(end, piece)
        self.setPiece(start, None)

        promoted = self._handle_promotion(end)
        if captured is not None:
            LOG.debug("%s moved %s capturing %r", piece.color.value, move, captured)
        else:
            LOG.debug("%s moved %s", piece.color.value, move)
        return MoveOutcome(move=move, captured=captured, promoted=promoted)

    def copy(self) -> "Board":
        new_board = Board.empty()
        new_board.board = [list(row) for row in self.board]
        return new_board

    def _handle_promotion(self, pos: Coordinate) -> bool:
        piece = self.getPiece(pos)
        if piece is None or piece.is_king:
            return False
        last_row = 0 if piece.color is Color.WHITE else self.boardSize - 1
        if pos[0] != last_row:
            return False
        self.setPiece(pos, piece.promote())
        LOG.debug("%s piece promoted at %s", piece.color.value, pos)
        return True

    def _set_start_pieces(self) -> None:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if (row + col) % 2 == 1:
                    if row < START_ROWS:
                        self.board[row][col] = Piece.pawn(Color.BLACK)
                    elif row >= self.boardSize - START_ROWS:
                        self.board[row][col] = Piece.pawn(Color.WHITE)

    def _require_bounds(self, pos: Coordinate) -> None:
        if not self.isWithinBounds(pos):
            raise IndexError(f"Position {pos} is outside the board.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.to_state() == other.to_state()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = []
        for row in self.board:
            lines.append(" ".join(piece.symbol if piece else "." for piece in row))
        return "\n".join(lines)
