from __future__ import annotations

from dataclasses import dataclass

Coordinate = tuple[int, int]

NO_SELECTION: Coordinate = (-1, -1)


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate

    @property
    def is_jump(self) -> bool:
        return abs(self.end[0] - self.start[0]) == 2

    @property
    def midpoint(self) -> Coordinate:
        return ((self.start[0] + self.end[0]) // 2, (self.start[1] + self.end[1]) // 2)

    def __str__(self) -> str:
        connector = " x " if self.is_jump else " - "
        return connector.join(f"{row},{col}" for row, col in (self.start, self.end))
