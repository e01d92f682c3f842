from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from ui.layout import BoardLayout  # noqa: E402


class PixelToCellTests(unittest.TestCase):
    def test_integer_division_by_square_size(self) -> None:
        layout = BoardLayout(square_size=60)
        self.assertEqual(layout.cell_from_pixel((0, 0)), (0, 0))
        self.assertEqual(layout.cell_from_pixel((119, 61)), (1, 1))
        self.assertEqual(layout.cell_from_pixel((130, 400)), (6, 2))
        self.assertEqual(layout.cell_from_pixel((479, 479)), (7, 7))

    def test_pixels_outside_board_are_dropped(self) -> None:
        layout = BoardLayout(square_size=60, status_height=36)
        self.assertIsNone(layout.cell_from_pixel((480, 10)))
        self.assertIsNone(layout.cell_from_pixel((10, 500)))
        self.assertIsNone(layout.cell_from_pixel((-1, 10)))

    def test_margin_offsets_hit_testing(self) -> None:
        layout = BoardLayout(square_size=50, margin=40)
        self.assertIsNone(layout.cell_from_pixel((39, 60)))
        self.assertEqual(layout.cell_from_pixel((40, 40)), (0, 0))
        self.assertEqual(layout.cell_from_pixel((95, 145)), (2, 1))
        self.assertEqual(layout.center_for_cell(0, 0), (65, 65))


class WindowGeometryTests(unittest.TestCase):
    def test_window_includes_status_strip(self) -> None:
        layout = BoardLayout(square_size=60, status_height=36)
        self.assertEqual(layout.board_pixels, 480)
        self.assertEqual(layout.window_size, (480, 516))
        self.assertEqual(layout.cell_rect(2, 3), (180, 120, 60, 60))


if __name__ == "__main__":
    unittest.main()
