"""Tests for the GameOfLife class."""

import pytest
from toruslife.core.grid import Cell, Grid
from toruslife.core.game import GameOfLife


@pytest.fixture
def grid():
    """A dead 10x10 grid."""
    grid = Grid(10, 10, 1, 1)
    grid.reset()
    return grid


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self, grid):
        """Test game initialization."""
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0
        assert len(game.population_history) == 1
        assert not game.cycle_detected
        assert game.cycle_length == 0
        assert game.cycle_start_generation == 0

    def test_step_advances_grid(self, grid):
        grid.set_cells([(4, 4)])
        game = GameOfLife(grid)

        game.step()
        assert game.generation == 1
        assert game.population == 0

    def test_still_life_block(self, grid):
        """A block is detected as a cycle of length 1."""
        grid.set_cells([(4, 4), (4, 5), (5, 4), (5, 5)])
        game = GameOfLife(grid)

        game.step()
        assert game.population == 4
        assert game.cycle_detected
        assert game.cycle_length == 1
        assert game.cycle_start_generation == 0

    def test_oscillator_blinker(self, grid):
        """Test blinker oscillator (period 2)."""
        grid.set_cells([(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)

        game.step()
        assert game.population == 3
        assert grid.get_cell(4, 5) is Cell.ALIVE
        assert grid.get_cell(6, 5) is Cell.ALIVE
        assert not game.cycle_detected

        game.step()
        assert grid.get_cell(5, 4) is Cell.ALIVE
        assert grid.get_cell(5, 6) is Cell.ALIVE
        assert game.cycle_detected
        assert game.cycle_length == 2
        assert game.cycle_start_generation == 0

    def test_glider_cycle_on_torus(self, grid):
        """A glider on a 10x10 torus comes back after 40 generations."""
        grid.set_cells([(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)])
        game = GameOfLife(grid)

        final_generation, reason = game.run_until_stable(100)
        assert reason == "cycle"
        assert final_generation == 40
        assert game.cycle_length == 40

    def test_run_until_stable_extinction(self, grid):
        grid.set_cells([(5, 5)])
        game = GameOfLife(grid)

        assert game.run_until_stable(100) == (1, "extinction")

    def test_run_until_stable_empty_grid(self, grid):
        """An empty grid is reported as extinct rather than a cycle."""
        game = GameOfLife(grid)
        assert game.run_until_stable(10) == (1, "extinction")

    def test_run_until_stable_blinker(self, grid):
        grid.set_cells([(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)

        assert game.run_until_stable(100) == (2, "cycle")

    def test_run_until_stable_max_generations(self, grid):
        grid.set_cells([(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)])
        game = GameOfLife(grid)

        assert game.run_until_stable(5) == (5, "max_generations")

    def test_population_history(self, grid):
        """Test population history tracking."""
        grid.set_cells([(5, 5), (5, 6), (6, 5)])
        game = GameOfLife(grid)
        assert game.population_history == [3]

        for i in range(3):
            game.step()
            history = game.population_history
            assert len(history) == i + 2
            assert history[-1] == game.population

    def test_population_history_is_bounded(self, grid):
        grid.set_cells([(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)

        for _ in range(150):
            game.step()

        assert len(game.population_history) == 100

    def test_reset(self, grid):
        grid.set_cells([(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)
        game.run_until_stable(10)

        game.reset()
        assert game.generation == 0
        assert game.population == 0
        assert game.population_history == [0]
        assert not game.cycle_detected

    def test_reset_keeps_grid(self, grid):
        grid.set_cells([(5, 4), (5, 5), (5, 6)])
        game = GameOfLife(grid)
        game.step()

        game.reset(clear_grid=False)
        assert game.generation == 0
        assert game.population == 3

    def test_clear_cycle_detection(self, grid):
        """Manual edits restart cycle detection."""
        grid.set_cells([(4, 4), (4, 5), (5, 4), (5, 5)])
        game = GameOfLife(grid)
        game.step()
        assert game.cycle_detected

        game.clear_cycle_detection()
        grid.toggle_cell(0, 0)
        assert not game.cycle_detected
        assert game.generation == 1

        game.step()
        assert not game.cycle_detected

    def test_population_change_rate(self, grid):
        game = GameOfLife(grid)
        assert game.get_population_change_rate() == 0.0

        grid.set_cells([(5, 5)])
        game.step()
        assert game.get_population_change_rate() == 0.0

    def test_get_statistics(self, grid):
        grid.set_cells([(4, 4), (4, 5), (5, 4), (5, 5)])
        game = GameOfLife(grid)
        game.step()

        stats = game.get_statistics()
        assert stats["generation"] == 1
        assert stats["population"] == 4
        assert stats["grid_size"] == (10, 10)
        assert stats["population_density"] == pytest.approx(0.04)
        assert stats["cycle_detected"] is True
        assert stats["cycle_length"] == 1
        assert stats["population_history"] == [4, 4]
