"""Move rules for 8x8 checkers.

Pawns step and jump diagonally forward only; kings also backward. Simple
moves and jumps are reported together, so a capture never takes precedence
over a quiet move.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .board import Board
from .move import Coordinate
from .pieces import Piece

Direction = tuple[int, int]


@dataclass(frozen=True, slots=True)
class RuleOptions:
    # Restrict chain continuations to jumps and end the turn on a cancel mid-chain.
    chain_jumps_only: bool = False


def move_directions(piece: Piece) -> tuple[Direction, ...]:
    forward = piece.color.forward
    directions = ((forward, -1), (forward, 1))
    if piece.is_king:
        directions += ((-forward, -1), (-forward, 1))
    return directions


def legal_destinations(board: Board, pos: Coordinate, *, jumps_only: bool = False) -> frozenset[Coordinate]:
    if not board.isWithinBounds(pos):
        return frozenset()
    piece = board.getPiece(pos)
    if piece is None:
        return frozenset()

    destinations: set[Coordinate] = set()
    for dr, dc in move_directions(piece):
        step = (pos[0] + dr, pos[1] + dc)
        if not jumps_only and _is_open(board, step):
            destinations.add(step)
        landing = (pos[0] + 2 * dr, pos[1] + 2 * dc)
        if _is_valid_jump(board, piece, step, landing):
            destinations.add(landing)
    return frozenset(destinations)


def can_jump(board: Board, pos: Coordinate) -> bool:
    if not board.isWithinBounds(pos):
        return False
    piece = board.getPiece(pos)
    if piece is None:
        return False
    return next(_jump_landings(board, pos, piece), None) is not None


def _jump_landings(board: Board, pos: Coordinate, piece: Piece) -> Iterator[Coordinate]:
    for dr, dc in move_directions(piece):
        over = (pos[0] + dr, pos[1] + dc)
        landing = (pos[0] + 2 * dr, pos[1] + 2 * dc)
        if _is_valid_jump(board, piece, over, landing):
            yield landing


def _is_open(board: Board, pos: Coordinate) -> bool:
    return board.isWithinBounds(pos) and board.getPiece(pos) is None


def _is_valid_jump(board: Board, piece: Piece, over: Coordinate, landing: Coordinate) -> bool:
    if not (board.isWithinBounds(over) and board.isWithinBounds(landing)):
        return False
    victim = board.getPiece(over)
    return victim is not None and victim.color is not piece.color and board.getPiece(landing) is None
