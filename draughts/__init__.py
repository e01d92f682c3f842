"""Core checkers engine package."""

from .board import Board, MoveOutcome
from .game import ClickEvent, ClickResult, Game, GameState, handle_click, initial_state
from .move import NO_SELECTION, Coordinate, Move
from .pieces import Cell, Color, Piece, PieceKind
from .rules import RuleOptions, can_jump, legal_destinations

__all__ = [
    "Board",
    "MoveOutcome",
    "Game",
    "GameState",
    "ClickEvent",
    "ClickResult",
    "handle_click",
    "initial_state",
    "Move",
    "Coordinate",
    "NO_SELECTION",
    "Cell",
    "Color",
    "Piece",
    "PieceKind",
    "RuleOptions",
    "can_jump",
    "legal_destinations",
]
