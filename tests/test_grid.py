import unittest
from unittest import mock

import numpy as np

from mazegen import (
    Cell,
    ConfigurationError,
    Direction,
    MazeAlgorithm,
    MazeConfiguration,
    MazeGrid,
    MazeType,
)
from mazegen.cell import close_wall, new_cells, open_sides, open_wall


class ConfigurationTests(unittest.TestCase):
    def assertRejected(self, field: str, **kwargs) -> None:
        params = dict(width=10, height=10)
        params.update(kwargs)
        with self.assertRaises(ConfigurationError) as ctx:
            MazeConfiguration(**params).validate()
        self.assertEqual(ctx.exception.field, field)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_defaults(self) -> None:
        config = MazeConfiguration(width=4, height=3)
        self.assertIs(config.validate(), config)
        self.assertEqual(config.algorithm, MazeAlgorithm.ELLER)
        self.assertEqual(config.maze_type, MazeType.PERFECT)
        self.assertIsNone(config.seed)

    def test_dimension_limits(self) -> None:
        self.assertRejected("width", width=0)
        self.assertRejected("width", width=-3)
        self.assertRejected("width", width=1001)
        self.assertRejected("height", height=0)
        self.assertRejected("height", height=1001)
        MazeConfiguration(width=1000, height=1, seed=1).validate()

    def test_braiding_factor_range(self) -> None:
        self.assertRejected("braiding_factor", braiding_factor=-0.01)
        self.assertRejected("braiding_factor", braiding_factor=1.5)
        MazeConfiguration(width=2, height=2, braiding_factor=1.0).validate()
        MazeConfiguration(width=2, height=2, braiding_factor=0).validate()

    def test_room_parameters(self) -> None:
        self.assertRejected("room_count", room_count=-1)
        self.assertRejected("min_room_size", min_room_size=1)
        self.assertRejected("max_room_size", min_room_size=4, max_room_size=3)
        MazeConfiguration(width=2, height=2, min_room_size=2, max_room_size=2).validate()

    def test_selectors_must_be_enum_members(self) -> None:
        self.assertRejected("algorithm", algorithm="prim")
        self.assertRejected("maze_type", maze_type="braided")
        self.assertRejected("seed", seed="abc")

    def test_configuration_is_frozen(self) -> None:
        config = MazeConfiguration(width=4, height=4)
        with self.assertRaises(AttributeError):
            config.width = 5  # type: ignore[misc]

    def test_to_dict(self) -> None:
        config = MazeConfiguration(
            width=4, height=5, seed=9, algorithm=MazeAlgorithm.PRIM, maze_type=MazeType.BRAIDED
        )
        payload = config.to_dict()
        self.assertEqual(payload["algorithm"], "prim")
        self.assertEqual(payload["maze_type"], "braided")
        self.assertEqual((payload["width"], payload["height"], payload["seed"]), (4, 5, 9))

    def test_invalid_configuration_never_reaches_generation(self) -> None:
        with mock.patch("mazegen.grid.get_algorithm") as get_algorithm:
            with self.assertRaises(ConfigurationError):
                MazeGrid(MazeConfiguration(width=10, height=0))
            get_algorithm.assert_not_called()


class GridAccessTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = MazeConfiguration(width=6, height=4, seed=31, algorithm=MazeAlgorithm.PRIM)
        self.grid = MazeGrid(self.config)

    def test_dimensions_and_configuration(self) -> None:
        self.assertEqual((self.grid.width, self.grid.height), (6, 4))
        self.assertIs(self.grid.configuration, self.config)
        self.assertIn("prim", repr(self.grid))

    def test_get_cell_bounds(self) -> None:
        self.assertIsInstance(self.grid.get_cell(0, 0), Cell)
        self.assertIs(self.grid.get_cell(3, 5), self.grid.cells[3][5])
        for row, column in ((-1, 0), (4, 0), (0, -1), (0, 6)):
            with self.subTest(row=row, column=column):
                with self.assertRaises(IndexError):
                    self.grid.get_cell(row, column)

    def test_cells_view_is_row_major_and_immutable(self) -> None:
        view = self.grid.cells
        self.assertEqual(len(view), 4)
        self.assertTrue(all(len(row) == 6 for row in view))
        with self.assertRaises(TypeError):
            view[0] = ()  # type: ignore[index]
        positions = [(row, col) for row, col, _ in self.grid.iter_cells()]
        self.assertEqual(positions, [(r, c) for r in range(4) for c in range(6)])

    def test_to_array_matches_cells(self) -> None:
        walls = self.grid.to_array()
        self.assertEqual(walls.shape, (4, 6, 4))
        self.assertEqual(walls.dtype, np.bool_)
        for row, col, cell in self.grid.iter_cells():
            self.assertEqual(tuple(bool(flag) for flag in walls[row, col]), cell.walls)

    def test_neighbouring_flags_agree(self) -> None:
        for row, col, cell in self.grid.iter_cells():
            if col < self.grid.width - 1:
                self.assertEqual(cell.east, self.grid.get_cell(row, col + 1).west)
            if row < self.grid.height - 1:
                self.assertEqual(cell.south, self.grid.get_cell(row + 1, col).north)


class CellHelperTests(unittest.TestCase):
    def test_new_cells_start_closed(self) -> None:
        cells = new_cells(3, 2)
        self.assertEqual(len(cells), 2)
        self.assertTrue(all(cell.walls == (True, True, True, True) for row in cells for cell in row))
        self.assertTrue(all(cell.label == 0 for row in cells for cell in row))

    def test_open_and_close_update_both_sides(self) -> None:
        cells = new_cells(2, 2)
        open_wall(cells, 1, 1, Direction.NORTH)
        self.assertFalse(cells[1][1].north)
        self.assertFalse(cells[0][1].south)
        self.assertEqual(open_sides(cells, 1, 1), 1)
        close_wall(cells, 0, 1, Direction.SOUTH)
        self.assertTrue(cells[1][1].north)
        self.assertEqual(open_sides(cells, 1, 1), 0)

    def test_opening_the_boundary_is_a_defect(self) -> None:
        cells = new_cells(2, 2)
        with self.assertRaises(IndexError):
            open_wall(cells, 0, 0, Direction.NORTH)
        with self.assertRaises(IndexError):
            open_wall(cells, 1, 1, Direction.EAST)

    def test_direction_geometry(self) -> None:
        self.assertIs(Direction.NORTH.opposite, Direction.SOUTH)
        self.assertIs(Direction.WEST.opposite, Direction.EAST)
        self.assertEqual((Direction.EAST.dr, Direction.EAST.dc), (0, 1))
        self.assertEqual(Direction.SOUTH.attr, "south")


if __name__ == "__main__":
    unittest.main()
