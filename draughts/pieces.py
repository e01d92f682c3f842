from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def forward(self) -> int:
        return -1 if self is Color.WHITE else 1

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceKind(Enum):
    PAWN = "pawn"
    KING = "king"


@dataclass(frozen=True, slots=True)
class Piece:
    kind: PieceKind
    color: Color

    @classmethod
    def pawn(cls, color: Color) -> "Piece":
        return cls(PieceKind.PAWN, color)

    @classmethod
    def king(cls, color: Color) -> "Piece":
        return cls(PieceKind.KING, color)

    @property
    def is_king(self) -> bool:
        return self.kind is PieceKind.KING

    def promote(self) -> "Piece":
        return Piece(PieceKind.KING, self.color)

    @property
    def symbol(self) -> str:
        letter = "w" if self.color is Color.WHITE else "b"
        return letter.upper() if self.is_king else letter

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "P"
        return f"{piece_type}({self.color.name})"


Cell = Optional[Piece]
