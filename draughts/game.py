from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .board import Board
from .move import NO_SELECTION, Coordinate
from .pieces import Color
from .rules import RuleOptions, can_jump, legal_destinations

LOG = logging.getLogger(__name__)

NO_MOVES_MESSAGE = "No legal moves for this piece."


class ClickEvent(str, Enum):
    IGNORED = "ignored"
    SELECTED = "selected"
    NO_MOVES = "no_moves"
    MOVED = "moved"
    CHAIN_CONTINUES = "chain_continues"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class GameState:
    board: Board
    selected: Coordinate = NO_SELECTION
    legal_destinations: frozenset[Coordinate] = frozenset()
    current_turn: Color = Color.WHITE
    in_chain: bool = False

    @property
    def has_selection(self) -> bool:
        return self.selected != NO_SELECTION


@dataclass(frozen=True, slots=True)
class ClickResult:
    state: GameState
    event: ClickEvent
    message: Optional[str] = None


def initial_state() -> GameState:
    return GameState(board=Board())


def _idle(state: GameState, *, board: Optional[Board] = None, turn: Optional[Color] = None) -> GameState:
    return GameState(
        board=state.board if board is None else board,
        current_turn=state.current_turn if turn is None else turn,
    )


def handle_click(state: GameState, cell: Coordinate, options: RuleOptions = RuleOptions()) -> ClickResult:
    """Advance the selection/turn machine by one click on ``cell``."""
    if not state.has_selection:
        return _select(state, cell)

    if cell in state.legal_destinations:
        return _move(state, cell, options)

    if state.in_chain and options.chain_jumps_only:
        LOG.info("%s stopped the jump chain at %s", state.current_turn.value, state.selected)
        return ClickResult(_idle(state, turn=state.current_turn.opponent), ClickEvent.MOVED)
    return ClickResult(_idle(state), ClickEvent.CANCELLED)


def _select(state: GameState, cell: Coordinate) -> ClickResult:
    board = state.board
    if not board.isWithinBounds(cell):
        return ClickResult(state, ClickEvent.IGNORED)
    piece = board.getPiece(cell)
    if piece is None or piece.color is not state.current_turn:
        return ClickResult(state, ClickEvent.IGNORED)

    destinations = legal_destinations(board, cell)
    if not destinations:
        LOG.warning("%s at %s: %s", piece.color.value, cell, NO_MOVES_MESSAGE)
        return ClickResult(_idle(state), ClickEvent.NO_MOVES, NO_MOVES_MESSAGE)
    return ClickResult(replace(state, selected=cell, legal_destinations=destinations), ClickEvent.SELECTED)


def _move(state: GameState, cell: Coordinate, options: RuleOptions) -> ClickResult:
    board = state.board.copy()
    outcome = board.movePiece(state.selected, cell)

    if outcome.move.is_jump and can_jump(board, cell):
        destinations = legal_destinations(board, cell, jumps_only=options.chain_jumps_only)
        chained = GameState(
            board=board,
            selected=cell,
            legal_destinations=destinations,
            current_turn=state.current_turn,
            in_chain=True,
        )
        return ClickResult(chained, ClickEvent.CHAIN_CONTINUES)

    LOG.debug("Board after %s:\n%s", outcome.move, board)
    return ClickResult(_idle(state, board=board, turn=state.current_turn.opponent), ClickEvent.MOVED)


@dataclass
class Game:
    """Mutable session around the pure click transition, with undo history."""

    options: RuleOptions = field(default_factory=RuleOptions)
    state: GameState = field(default_factory=initial_state)
    history: list[GameState] = field(default_factory=list)
    last_message: Optional[str] = None

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Color:
        return self.state.current_turn

    def click(self, cell: Coordinate) -> ClickResult:
        result = handle_click(self.state, cell, self.options)
        if result.state.board is not self.state.board:
            self.history.append(self.state)
        self.state = result.state
        self.last_message = result.message
        return result

    def undoMove(self) -> bool:
        if not self.history:
            LOG.info("No moves to undo.")
            self.last_message = "No moves to undo."
            return False
        previous = self.history.pop()
        # Mid-chain states keep their selection so the chain can be replayed.
        self.state = previous if previous.in_chain else _idle(previous)
        self.last_message = None
        return True

    def reset(self) -> None:
        self.state = initial_state()
        self.history.clear()
        self.last_message = None
